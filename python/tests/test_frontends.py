"""Key dispatch in the terminal frontends, driven with scripted keys."""

from __future__ import annotations

import random
from collections.abc import Iterable
from types import ModuleType

import pytest

from backend.config import MAX_DIFFICULTY
from backend.engine.gameplay import GamePlay
from backend.models.grid import Grid
from backend.models.move import MoveName
from frontend.cli.rich import app as rich_app
from frontend.cli.vanilla import app as vanilla_app

FRONTENDS = [
    pytest.param(vanilla_app, "_show_game", id="vanilla"),
    pytest.param(rich_app, "_draw_game", id="rich"),
]


def _play(
    monkeypatch: pytest.MonkeyPatch,
    module: ModuleType,
    draw: str,
    game: GamePlay,
    keys: Iterable[str],
) -> None:
    scripted = iter([*keys, "quit"])
    monkeypatch.setattr(module, "get_key", lambda: next(scripted))
    monkeypatch.setattr(module, draw, lambda *args, **kwargs: None)
    monkeypatch.setattr(module, "_clear" if module is vanilla_app else "console", _Silent())
    module._play(game, color_blind=False)


class _Silent:
    """Swallows screen clears and prints."""

    def __call__(self, *args: object, **kwargs: object) -> None:
        pass

    def __getattr__(self, name: str) -> _Silent:
        return self


@pytest.mark.parametrize("module, draw", FRONTENDS)
def test_harder_at_top_difficulty_keeps_game(monkeypatch, module, draw) -> None:
    game = GamePlay(MAX_DIFFICULTY, rng=random.Random(3))
    game.move(MoveName.UP)
    seed = game.state.seed.copy()
    _play(monkeypatch, module, draw, game, ["harder"])
    assert game.difficulty == MAX_DIFFICULTY
    assert game.state.seed == seed
    assert game.state.history.moves() == [MoveName.UP]


@pytest.mark.parametrize("module, draw", FRONTENDS)
def test_easier_at_zero_keeps_game(monkeypatch, module, draw) -> None:
    game = GamePlay(0, rng=random.Random(3))
    game.move(MoveName.LEFT)
    seed = game.state.seed.copy()
    _play(monkeypatch, module, draw, game, ["easier"])
    assert game.difficulty == 0
    assert game.state.seed == seed
    assert game.state.history.moves() == [MoveName.LEFT]


@pytest.mark.parametrize("module, draw", FRONTENDS)
def test_difficulty_keys_start_new_game(monkeypatch, module, draw) -> None:
    game = GamePlay(4, rng=random.Random(3))
    game.move(MoveName.UP)
    _play(monkeypatch, module, draw, game, ["harder", "harder", "easier"])
    assert game.difficulty == 5
    assert not game.state.history


@pytest.mark.parametrize("module, draw", FRONTENDS)
def test_move_undo_reset_keys(monkeypatch, module, draw) -> None:
    seed = Grid.from_flat(3, [1, 0, 0, 0, 0, 0, 0, 0, 0])
    target = Grid.from_flat(3, [2, 0, 0, 0, 0, 0, 0, 0, 0])
    game = GamePlay.from_grids(seed, target)
    _play(monkeypatch, module, draw, game, ["up", "rotate_left", "undo"])
    assert game.state.history.moves() == [MoveName.UP]
    _play(monkeypatch, module, draw, game, ["right", "reset"])
    assert game.current == seed
    assert not game.state.history


@pytest.mark.parametrize("module, draw", FRONTENDS)
def test_hint_key_moves_towards_target(monkeypatch, module, draw) -> None:
    seed = Grid.from_flat(3, [1, 0, 0, 0, 0, 0, 0, 0, 0])
    target = Grid.from_flat(3, [0, 1, 0, 0, 0, 0, 0, 0, 0])
    game = GamePlay.from_grids(seed, target)
    _play(monkeypatch, module, draw, game, ["hint"])
    assert game.is_won
    assert len(game.state.history) == 1


def test_format_time() -> None:
    assert vanilla_app._format_time(42.7) == "42s"
    assert rich_app._format_time(125) == "2:05"

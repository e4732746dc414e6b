"""Vanilla terminal frontend — no third-party dependencies.

Uses only stdlib (print, ANSI codes, tty/termios) for rendering and input.
Shows the current grid next to the target, the move history, and the
difficulty selector.
"""

from __future__ import annotations

import random
import sys

from backend.config import DEFAULT_DIFFICULTY, DEFAULT_SIZE, MAX_DIFFICULTY
from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import Solver
from backend.engine.transform import get_move
from backend.errors import ConfigurationError
from backend.models.grid import Grid
from frontend.cli.input_handler import action_to_move, get_key


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_DIM = "\033[2m"     # dim
_BOLD = "\033[1m"    # bold
_R = "\033[0m"       # reset

# Tile backgrounds: pink, blue, gold; anything beyond cycles.
_TILE_BG = ("\033[45m", "\033[44m", "\033[43m")


def _clear() -> None:
    sys.stdout.write("\033[2J\033[H")
    sys.stdout.flush()


def _format_time(seconds: float) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m}:{s:02d}" if m else f"{s}s"


# -- grid rendering -----------------------------------------------------------


def _cell(val: int, color_blind: bool) -> str:
    if val == 0:
        return f"{_DIM} · {_R}"
    if color_blind:
        return f"{_BOLD} {val} {_R}"
    return f"{_TILE_BG[(val - 1) % len(_TILE_BG)]}   {_R}"


def _render_grid(grid: Grid, color_blind: bool) -> list[str]:
    """Return the grid as a list of ANSI-coloured text lines."""
    sep = "+" + ("---+" * grid.size)
    lines: list[str] = [sep]
    for row in grid.tiles:
        lines.append("|" + "|".join(_cell(v, color_blind) for v in row) + "|")
        lines.append(sep)
    return lines


def _side_by_side(left: list[str], right: list[str]) -> str:
    return "\n".join(f"  {a}      {b}" for a, b in zip(left, right))


def _history_line(game: GamePlay) -> str:
    names = [e.label for e in game.state.history]
    if not names:
        return f"{_DIM}(no moves yet){_R}"
    shown = names[-8:]
    prefix = "… " if len(names) > len(shown) else ""
    return prefix + " → ".join(shown)


# -- screens ------------------------------------------------------------------


def _show_game(game: GamePlay, color_blind: bool, status: str = "") -> None:
    _clear()
    size = game.size
    title_col = _G if game.is_won else _C
    print(f"  {title_col}=== Torus Puzzle ({size}×{size}) ==={_R}")
    print(
        f"  Difficulty: {_Y}{game.difficulty}{_R}/{MAX_DIFFICULTY}  |  "
        f"Moves: {_Y}{game.state.moves}{_R}  |  "
        f"Time: {_Y}{_format_time(game.state.elapsed_time)}{_R}  |  "
        f"Colour-blind: {_Y}{'on' if color_blind else 'off'}{_R}"
    )
    print()
    current = _render_grid(game.current, color_blind)
    target = _render_grid(game.target, color_blind)
    width = len("+" + "---+" * size)
    print(f"  {'Current':<{width}}      Target")
    print(_side_by_side(current, target))
    print()
    print(f"  History: {_history_line(game)}")
    print()
    print(
        f"  {_C}WASD{_R}/{_C}Arrows{_R}: scroll  |  "
        f"{_C}Q{_R}/{_C}E{_R}: rotate  |  "
        f"{_C}Z{_R}: undo  |  "
        f"{_C}R{_R}: reset  |  "
        f"{_C}N{_R}: new  |  "
        f"{_C}+/-{_R}: difficulty  |  "
        f"{_C}C{_R}: colours  |  "
        f"{_C}H{_R}: hint  |  "
        f"{_C}X{_R}: quit"
    )
    if game.is_won:
        print()
        print(f"  {_G}★ SOLVED in {game.state.moves} moves! ★{_R}")
        print(f"  {_DIM}Press R to replay or N for a new puzzle.{_R}")
    if status:
        print(f"\n  {status}")


def _apply_hint(game: GamePlay) -> str:
    hint = Solver.hint(game.current, game.target)
    if hint is None:
        return f"{_Y}No hint available.{_R}"
    game.move(hint)
    return f"{_C}Hint:{_R} {_BOLD}{get_move(hint).label}{_R}"


def _new_game(game: GamePlay, difficulty: int) -> str:
    try:
        game.new_game(difficulty)
    except ConfigurationError as e:
        return f"{_Y}{e}{_R}"
    return ""


def _change_difficulty(game: GamePlay, step: int) -> str:
    difficulty = min(MAX_DIFFICULTY, max(0, game.difficulty + step))
    if difficulty == game.difficulty:
        return ""
    return _new_game(game, difficulty)


# -- game loop ----------------------------------------------------------------


def _play(game: GamePlay, color_blind: bool) -> None:
    status = ""
    while True:
        _show_game(game, color_blind, status)
        status = ""
        key = get_key()

        move = action_to_move(key)
        if move is not None:
            game.move(move)
        elif key == "undo":
            game.undo()
        elif key == "reset":
            game.reset()
        elif key == "new":
            status = _new_game(game, game.difficulty)
        elif key == "harder":
            status = _change_difficulty(game, 1)
        elif key == "easier":
            status = _change_difficulty(game, -1)
        elif key == "color_blind":
            color_blind = not color_blind
        elif key == "hint" and not game.is_won:
            status = _apply_hint(game)
        elif key == "quit":
            _clear()
            print("  Goodbye!\n")
            return


# -- public entry point -------------------------------------------------------


def run(
    size: int = DEFAULT_SIZE,
    difficulty: int = DEFAULT_DIFFICULTY,
    color_blind: bool = False,
    rng: random.Random | None = None,
) -> None:
    """Launch the vanilla CLI."""
    _play(GamePlay(difficulty, size, rng), color_blind)

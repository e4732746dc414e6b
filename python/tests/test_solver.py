"""Solver test suite.

Every returned move list is replayed through the real game engine to
verify that it reaches the target.
"""

from __future__ import annotations

import random

import pytest

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gameplay.game import GamePlay
from backend.engine.gamesolver.solver import Solver
from backend.engine.transform import apply_move
from backend.models.grid import Grid
from backend.models.move import MoveName


# -- helpers ------------------------------------------------------------------


def _assert_solve(seed: Grid, target: Grid) -> list[MoveName]:
    """Solve and verify the returned moves reach the target."""
    moves = Solver.solve(seed, target)

    # ---- move-list sanity ---------------------------------------------------
    assert isinstance(moves, list), "solve() must return a list of MoveName"
    assert len(moves) > 0, f"Reachable target returned 0 moves ({seed.flat()})"
    assert all(isinstance(m, MoveName) for m in moves)

    # ---- apply moves via the real game engine and check win -----------------
    game = GamePlay.from_grids(seed, target)
    for i, move in enumerate(moves):
        ok = game.move(move)
        assert ok, f"Move {i} ({move.value}) rejected"

    assert game.is_won, f"Target not reached after {len(moves)} moves"
    return moves


# -- tests --------------------------------------------------------------------


@pytest.mark.parametrize("seed_value", range(20))
def test_solve_generated_3x3(seed_value: int) -> None:
    gen = GameGenerator(3, random.Random(seed_value))
    seed, target = gen.generate(seed_value % 9)
    _assert_solve(seed, target)


@pytest.mark.parametrize("size", [2, 4, 6])
def test_solve_other_sizes(size: int) -> None:
    gen = GameGenerator(size, random.Random(size))
    seed, target = gen.generate(8 if size > 2 else 7)
    _assert_solve(seed, target)


def test_single_move_is_shortest() -> None:
    seed = Grid.from_flat(3, [1, 2, 0, 0, 3, 0, 0, 0, 0])
    for move in MoveName:
        target = apply_move(seed, move)
        assert len(Solver.solve(seed, target)) == 1


def test_hint_is_first_move() -> None:
    seed = Grid.from_flat(3, [1, 2, 0, 0, 0, 0, 0, 0, 0])
    target = apply_move(seed, MoveName.ROTATE_RIGHT)
    assert Solver.hint(seed, target) is MoveName.ROTATE_RIGHT


def test_already_solved() -> None:
    seed = Grid.from_flat(3, [1, 0, 0, 0, 0, 0, 0, 0, 0])
    assert Solver.solve(seed, seed.copy()) == []
    assert Solver.hint(seed, seed.copy()) is None
    assert Solver.is_reachable(seed, seed.copy())


def test_unreachable_target() -> None:
    seed = Grid.from_flat(3, [1, 0, 0, 0, 0, 0, 0, 0, 0])
    target = Grid.from_flat(3, [2, 0, 0, 0, 0, 0, 0, 0, 0])
    assert Solver.solve(seed, target) == []
    assert not Solver.is_reachable(seed, target)


def test_reflection_is_not_reachable() -> None:
    # Tiles 2 and 3 swap sides in the mirror image; rotations keep handedness.
    seed = Grid.from_flat(3, [1, 2, 0, 3, 0, 0, 0, 0, 0])
    mirror = Grid(size=3, tiles=[row[::-1] for row in seed.tiles])
    assert not Solver.is_reachable(seed, mirror)

"""Torus puzzle solver."""

from __future__ import annotations

from collections import deque

from backend.engine.transform import CATALOG, apply_move
from backend.models.grid import Grid
from backend.models.move import MoveName


class Solver:
    """Stateless solver — all methods are static.

    The six moves generate a group of at most 4·N² grid arrangements, so a
    plain breadth-first search finds a shortest solution immediately.
    """

    @staticmethod
    def solve(grid: Grid, target: Grid) -> list[MoveName]:
        """Return a shortest move sequence from *grid* to *target*.

        Returns ``[]`` if the grids are already equal or *target* cannot be
        reached.
        """
        if grid.size != target.size or grid == target:
            return []

        goal = target.key()
        parents: dict[tuple[int, ...], tuple[tuple[int, ...], MoveName] | None] = {
            grid.key(): None
        }
        queue: deque[Grid] = deque([grid])

        while queue:
            node = queue.popleft()
            for name in CATALOG:
                nxt = apply_move(node, name)
                key = nxt.key()
                if key in parents:
                    continue
                parents[key] = (node.key(), name)
                if key == goal:
                    return Solver._path(parents, key)
                queue.append(nxt)

        return []

    @staticmethod
    def hint(grid: Grid, target: Grid) -> MoveName | None:
        """Return the first move of a shortest solution, or ``None``."""
        moves = Solver.solve(grid, target)
        return moves[0] if moves else None

    @staticmethod
    def is_reachable(grid: Grid, target: Grid) -> bool:
        """Return True if *target* can be reached from *grid*."""
        return grid == target or bool(Solver.solve(grid, target))

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _path(
        parents: dict[tuple[int, ...], tuple[tuple[int, ...], MoveName] | None],
        key: tuple[int, ...],
    ) -> list[MoveName]:
        moves: list[MoveName] = []
        link = parents[key]
        while link is not None:
            key, name = link
            moves.append(name)
            link = parents[key]
        moves.reverse()
        return moves

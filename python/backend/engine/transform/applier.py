"""Applies coordinate mappings to grids."""

from __future__ import annotations

from backend.engine.transform.catalog import get_move
from backend.models.grid import Grid
from backend.models.move import Mapping, MoveName


def destinations(mapping: Mapping, size: int) -> list[tuple[int, int]]:
    """Destination of every source cell, in row-major source order."""
    return [mapping(size, i, j) for i in range(size) for j in range(size)]


def permute(grid: Grid, mapping: Mapping) -> Grid:
    """Return a new grid with each tile moved to ``mapping(size, i, j)``.

    The input grid is never modified. Raises ``ValueError`` if the mapping
    sends a tile off the grid or two tiles to the same cell.
    """
    n = grid.size
    out: list[list[int | None]] = [[None] * n for _ in range(n)]
    for i, j in grid.coordinates():
        x, y = mapping(n, i, j)
        if not (0 <= x < n and 0 <= y < n):
            raise ValueError(f"Mapping sends ({i}, {j}) off the grid to ({x}, {y}).")
        if out[x][y] is not None:
            raise ValueError(f"Mapping sends two tiles to ({x}, {y}).")
        out[x][y] = grid.tiles[i][j]
    return Grid(size=n, tiles=out)  # type: ignore[arg-type]


def apply_move(grid: Grid, move_id: MoveName | str) -> Grid:
    """Apply one catalog move to *grid*, returning the resulting grid."""
    return permute(grid, get_move(move_id).mapping)

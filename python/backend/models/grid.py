"""Grid model for the torus puzzle."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator
from dataclasses import dataclass

BLANK = 0


@dataclass
class Grid:
    """Represents an N×N puzzle grid.

    Tiles are stored as a 2D list of ints in row-major order. 0 is a blank
    cell, 1..K are typed tiles. Two grids are equal iff every cell matches.
    """

    size: int
    tiles: list[list[int]]

    def __post_init__(self) -> None:
        if self.size < 2:
            raise ValueError(f"Grid size must be at least 2, got {self.size}.")
        if len(self.tiles) != self.size:
            raise ValueError(
                f"Expected {self.size} rows for a {self.size}×{self.size} grid, "
                f"got {len(self.tiles)}."
            )
        for r, row in enumerate(self.tiles):
            if len(row) != self.size:
                raise ValueError(
                    f"Row {r} has {len(row)} tiles, expected {self.size}."
                )
            for c, v in enumerate(row):
                if not isinstance(v, int) or isinstance(v, bool) or v < 0:
                    raise ValueError(f"Invalid tile tag {v!r} at ({r}, {c}).")

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, size: int, flat: list[int]) -> Grid:
        """Create a grid from a flat row-major tag list.

        Example::

            Grid.from_flat(3, [1, 0, 0, 0, 2, 0, 0, 0, 0])
        """
        if len(flat) != size * size:
            raise ValueError(
                f"Expected {size * size} tiles for a {size}×{size} grid, "
                f"got {len(flat)}."
            )
        tiles = [list(flat[r * size : (r + 1) * size]) for r in range(size)]
        return cls(size=size, tiles=tiles)

    @classmethod
    def blank(cls, size: int) -> Grid:
        return cls(size=size, tiles=[[BLANK] * size for _ in range(size)])

    # -- queries --------------------------------------------------------------

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row][col]

    def flat(self) -> list[int]:
        """Return the tags as a flat row-major list."""
        return [v for row in self.tiles for v in row]

    def key(self) -> tuple[int, ...]:
        """Hashable snapshot of the cells."""
        return tuple(self.flat())

    def coordinates(self) -> Iterator[tuple[int, int]]:
        """Yield every (row, col) in row-major order."""
        for r in range(self.size):
            for c in range(self.size):
                yield r, c

    def tile_counts(self) -> Counter[int]:
        """Multiset of tags, blanks included."""
        return Counter(self.flat())

    def non_blank_count(self) -> int:
        return sum(1 for v in self.flat() if v != BLANK)

    def types(self) -> set[int]:
        """Distinct non-blank tags present on the grid."""
        return {v for v in self.flat() if v != BLANK}

    def is_uniform(self) -> bool:
        """True when every cell holds the same tag."""
        return len(set(self.flat())) == 1

    def copy(self) -> Grid:
        return Grid(size=self.size, tiles=[row[:] for row in self.tiles])

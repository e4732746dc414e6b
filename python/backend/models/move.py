"""Move model: names and descriptors of the whole-grid transformations."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

# (size, row, col) -> destination (row, col) of the tile at (row, col)
Mapping = Callable[[int, int, int], tuple[int, int]]


class MoveName(StrEnum):
    UP = "Up"
    DOWN = "Down"
    LEFT = "Left"
    RIGHT = "Right"
    ROTATE_LEFT = "RotateLeft"
    ROTATE_RIGHT = "RotateRight"


@dataclass(frozen=True)
class MoveDescriptor:
    """One catalog entry: a bijective coordinate mapping and its inverse."""

    name: MoveName
    label: str
    mapping: Mapping
    inverse: MoveName

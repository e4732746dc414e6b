"""Static configuration for the puzzle engine."""

from __future__ import annotations

from typing import NamedTuple


class DifficultyLevel(NamedTuple):
    total: int  # non-blank tiles on the board
    types: int  # distinct tile types among them


DEFAULT_SIZE = 3
MIN_SIZE = 2
MAX_SIZE = 8

# Indexed by difficulty; total >= types in every row.
DIFFICULTY_TABLE: tuple[DifficultyLevel, ...] = (
    DifficultyLevel(total=1, types=1),
    DifficultyLevel(total=2, types=1),
    DifficultyLevel(total=3, types=1),
    DifficultyLevel(total=4, types=1),
    DifficultyLevel(total=2, types=2),
    DifficultyLevel(total=3, types=2),
    DifficultyLevel(total=4, types=2),
    DifficultyLevel(total=3, types=3),
    DifficultyLevel(total=4, types=3),
)

DEFAULT_DIFFICULTY = 0
MAX_DIFFICULTY = len(DIFFICULTY_TABLE) - 1

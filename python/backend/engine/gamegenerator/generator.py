"""Generates seed grids and reachable target grids."""

from __future__ import annotations

import logging
import random

from backend.config import DEFAULT_SIZE, DIFFICULTY_TABLE, MAX_DIFFICULTY, DifficultyLevel
from backend.engine.transform.applier import permute
from backend.engine.transform.catalog import symmetric, wrap
from backend.errors import ConfigurationError
from backend.models.grid import BLANK, Grid
from backend.models.move import Mapping

log = logging.getLogger(__name__)


# -- symmetries used to build the target --------------------------------------
# Same geometry as the catalog rotations, applied as direct index permutations.


def _identity(size: int, i: int, j: int) -> tuple[int, int]:
    return i, j


def _rotate_left(size: int, i: int, j: int) -> tuple[int, int]:
    return symmetric(size, j), i


def _rotate_right(size: int, i: int, j: int) -> tuple[int, int]:
    return j, symmetric(size, i)


def _rotate_half(size: int, i: int, j: int) -> tuple[int, int]:
    return symmetric(size, i), symmetric(size, j)


SYMMETRIES: tuple[Mapping, ...] = (_identity, _rotate_left, _rotate_right, _rotate_half)


def _translation(dx: int, dy: int) -> Mapping:
    """Toroidal shift equal to *dx* Up moves followed by *dy* Left moves."""

    def mapping(size: int, i: int, j: int) -> tuple[int, int]:
        return wrap(size, i, -dx), wrap(size, j, -dy)

    return mapping


def difficulty_level(difficulty: int) -> DifficultyLevel:
    """Return the table entry for *difficulty*, rejecting out-of-range indices."""
    if (
        isinstance(difficulty, bool)
        or not isinstance(difficulty, int)
        or not 0 <= difficulty <= MAX_DIFFICULTY
    ):
        raise ConfigurationError(
            f"Difficulty must be an integer in [0, {MAX_DIFFICULTY}], got {difficulty!r}."
        )
    return DIFFICULTY_TABLE[difficulty]


class GameGenerator:
    """Creates a scrambled seed and a target reachable from it.

    The target is the seed under one of the four rotations followed by a
    toroidal translation. Rotations and translations are exactly what the
    move catalog generates, so every target can be reached with catalog
    moves.
    """

    def __init__(self, size: int = DEFAULT_SIZE, rng: random.Random | None = None) -> None:
        self.size = size
        self.rng = rng if rng is not None else random.Random()

    def generate_seed(self, difficulty: int) -> Grid:
        """Return a shuffled grid with the tile mix of *difficulty*."""
        total, types = difficulty_level(difficulty)
        cells = self.size * self.size
        if total > cells:
            raise ConfigurationError(
                f"Difficulty {difficulty} needs {total} tiles, "
                f"a {self.size}×{self.size} grid holds {cells}."
            )

        # Every type at least once, the rest drawn uniformly, then blanks.
        tags = list(range(1, types + 1))
        tags.extend(self.rng.randint(1, types) for _ in range(total - types))
        tags.extend([BLANK] * (cells - len(tags)))
        self.rng.shuffle(tags)

        log.debug("seed for difficulty %d: %s", difficulty, tags)
        return Grid.from_flat(self.size, tags)

    def generate_answer(self, seed: Grid) -> Grid:
        """Return a target that differs from *seed* and is reachable from it.

        Candidate (rotation, dx, dy) draws are visited in random order and
        the first one that changes the grid wins; this is rejection
        sampling without replacement, so it always terminates.
        """
        if seed.is_uniform():
            raise ConfigurationError(
                "Every move leaves a uniform grid unchanged; no distinct target exists."
            )

        n = seed.size
        draws = [
            (r, dx, dy)
            for r in range(len(SYMMETRIES))
            for dx in range(n)
            for dy in range(n)
        ]
        self.rng.shuffle(draws)

        for attempt, (r, dx, dy) in enumerate(draws, 1):
            rotated = permute(seed, SYMMETRIES[r])
            answer = permute(rotated, _translation(dx, dy))
            if answer != seed:
                log.debug(
                    "answer after %d draw(s): rotation=%d offset=(%d, %d)",
                    attempt, r, dx, dy,
                )
                return answer

        # Only a uniform grid is fixed by every translation.
        raise RuntimeError("non-uniform grid fixed by every draw")

    def generate(self, difficulty: int) -> tuple[Grid, Grid]:
        """Return a fresh ``(seed, target)`` pair."""
        seed = self.generate_seed(difficulty)
        return seed, self.generate_answer(seed)


# -- module-level entry points ------------------------------------------------


def generate_seed(
    difficulty: int, size: int = DEFAULT_SIZE, rng: random.Random | None = None
) -> Grid:
    return GameGenerator(size, rng).generate_seed(difficulty)


def generate_answer(seed: Grid, rng: random.Random | None = None) -> Grid:
    return GameGenerator(seed.size, rng).generate_answer(seed)

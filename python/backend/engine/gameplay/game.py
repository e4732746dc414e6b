"""Core gameplay logic — processes moves, undo and the win condition."""

from __future__ import annotations

import logging
import random

from backend.config import DEFAULT_DIFFICULTY, DEFAULT_SIZE
from backend.engine.gamegenerator import GameGenerator
from backend.engine.gamestate import GameState
from backend.engine.transform import apply_move, get_move
from backend.models.grid import Grid
from backend.models.move import MoveName

log = logging.getLogger(__name__)


def is_won(grid: Grid, target: Grid) -> bool:
    """True iff *grid* and *target* match cell for cell."""
    return grid == target


class GamePlay:
    """Orchestrates a single game session.

    ``move`` and ``undo`` return ``False`` instead of raising when the game
    is won or there is nothing to undo, so a frontend can forward every key
    press without checking first. Unknown move names always raise.
    """

    def __init__(
        self,
        difficulty: int = DEFAULT_DIFFICULTY,
        size: int = DEFAULT_SIZE,
        rng: random.Random | None = None,
    ) -> None:
        self.size = size
        self.generator = GameGenerator(size, rng)
        self.difficulty = difficulty
        seed, target = self.generator.generate(difficulty)
        self.state = GameState(seed, target)

    @classmethod
    def from_grids(
        cls, seed: Grid, target: Grid, difficulty: int = DEFAULT_DIFFICULTY
    ) -> "GamePlay":
        """Create a session from known grids (e.g. a test scenario)."""
        if seed.size != target.size:
            raise ValueError(
                f"Seed is {seed.size}×{seed.size} but target is "
                f"{target.size}×{target.size}."
            )
        if seed == target:
            raise ValueError("Target must differ from the seed.")
        obj = object.__new__(cls)
        obj.size = seed.size
        obj.generator = GameGenerator(seed.size)
        obj.difficulty = difficulty
        obj.state = GameState(seed, target)
        return obj

    # -- moves ----------------------------------------------------------------

    def move(self, move_id: MoveName | str) -> bool:
        """Apply a catalog move to the current grid.

        Returns True if the move was applied.
        """
        descriptor = get_move(move_id)
        if self.state.won:
            log.debug("ignoring %s: game already won", descriptor.name)
            return False

        grid = apply_move(self.state.current, descriptor.name)
        self.state.record_move(descriptor.name, grid)
        log.debug("moved %s (%d in history)", descriptor.name, len(self.state.history))
        if self.state.won:
            log.info("solved in %d moves", self.state.moves)
        return True

    def undo(self) -> bool:
        """Revert the most recent move. Returns True if a move was undone."""
        if self.state.won:
            log.debug("ignoring undo: game already won")
            return False
        if not self.state.history:
            log.debug("ignoring undo: history empty")
            return False

        entry = self.state.history.pop()
        self.state.current = apply_move(self.state.current, entry.reverse)
        log.debug("undid %s with %s", entry.move, entry.reverse)
        return True

    def reset(self) -> None:
        """Return to the seed of the current game."""
        self.state.restart()
        log.debug("reset to seed")

    def new_game(self, difficulty: int) -> None:
        """Generate a new seed and target for *difficulty*."""
        seed, target = self.generator.generate(difficulty)
        self.difficulty = difficulty
        self.state = GameState(seed, target)
        log.debug("new game at difficulty %d", difficulty)

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.state.won

    @property
    def current(self) -> Grid:
        return self.state.current

    @property
    def target(self) -> Grid:
        return self.state.target

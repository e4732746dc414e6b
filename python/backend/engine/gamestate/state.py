"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

import time

from backend.engine.gamestate.history import HistoryStack
from backend.errors import AlreadyWonError
from backend.models.grid import Grid
from backend.models.move import MoveName


class GameState:
    """Holds seed, target, current grid, history, win flag and elapsed time."""

    def __init__(self, seed: Grid, target: Grid) -> None:
        self.seed = seed.copy()
        self.target = target.copy()
        self.current = seed.copy()
        self.history = HistoryStack()
        self.won: bool = False
        self._start_time: float = time.time()
        self._elapsed_banked: float = 0.0
        self._running: bool = True

    # -- time tracking --------------------------------------------------------

    @property
    def elapsed_time(self) -> float:
        if self._running:
            return self._elapsed_banked + (time.time() - self._start_time)
        return self._elapsed_banked

    def pause(self) -> None:
        if self._running:
            self._elapsed_banked += time.time() - self._start_time
            self._running = False

    def resume(self) -> None:
        if not self._running:
            self._start_time = time.time()
            self._running = True

    # -- transitions ----------------------------------------------------------

    def record_move(self, move: MoveName, grid: Grid) -> None:
        """Store the grid produced by *move* and re-check the win."""
        if self.won:
            raise AlreadyWonError("The game is already won.")
        self.current = grid
        self.history.push(move)
        self.won = self.current == self.target
        if self.won:
            self.pause()

    def restart(self) -> None:
        """Return to the seed; the target is kept."""
        self.current = self.seed.copy()
        self.history.clear()
        self.won = False
        self.resume()

    # -- queries --------------------------------------------------------------

    @property
    def moves(self) -> int:
        return len(self.history)

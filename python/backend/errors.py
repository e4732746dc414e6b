"""Exceptions raised by the puzzle engine."""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for all engine errors."""


class ConfigurationError(PuzzleError, ValueError):
    """A difficulty or board configuration the generator cannot honour."""


class InvalidMoveKind(PuzzleError, KeyError):
    """A move identifier that is not in the transform catalog."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0]) if self.args else ""


class NoHistoryError(PuzzleError):
    """Undo requested with nothing to undo."""


class AlreadyWonError(PuzzleError):
    """A move was recorded on a game that is already won."""

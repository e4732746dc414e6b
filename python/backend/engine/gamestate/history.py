"""Ordered record of applied moves."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from backend.engine.transform.catalog import get_move
from backend.errors import NoHistoryError
from backend.models.move import MoveName


@dataclass(frozen=True)
class HistoryEntry:
    """A move that was applied. Label and inverse come from the catalog."""

    move: MoveName

    @property
    def label(self) -> str:
        return get_move(self.move).label

    @property
    def reverse(self) -> MoveName:
        return get_move(self.move).inverse


class HistoryStack:
    """Last-in, first-out stack of applied moves."""

    def __init__(self) -> None:
        self._entries: list[HistoryEntry] = []

    def push(self, move: MoveName | str) -> HistoryEntry:
        entry = HistoryEntry(get_move(move).name)
        self._entries.append(entry)
        return entry

    def pop(self) -> HistoryEntry:
        if not self._entries:
            raise NoHistoryError("Nothing to undo.")
        return self._entries.pop()

    def peek(self) -> HistoryEntry | None:
        return self._entries[-1] if self._entries else None

    def clear(self) -> None:
        self._entries.clear()

    def moves(self) -> list[MoveName]:
        """Applied moves, oldest first."""
        return [e.move for e in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(self._entries)

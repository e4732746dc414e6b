"""Session transitions as plain functions.

Each function applies one operation to *session* and returns it, for
callers that prefer ``session = move(session, "Up")`` over method calls.
"""

from __future__ import annotations

from backend.engine.gameplay.game import GamePlay
from backend.models.move import MoveName


def move(session: GamePlay, move_id: MoveName | str) -> GamePlay:
    session.move(move_id)
    return session


def undo(session: GamePlay) -> GamePlay:
    session.undo()
    return session


def reset(session: GamePlay) -> GamePlay:
    session.reset()
    return session


def new_game(session: GamePlay, difficulty: int) -> GamePlay:
    session.new_game(difficulty)
    return session

"""The six whole-grid moves and their declared inverses."""

from __future__ import annotations

from backend.errors import InvalidMoveKind
from backend.models.move import MoveDescriptor, MoveName


def wrap(limit: int, n: int, delta: int) -> int:
    """Toroidal step: ``n + delta`` folded back into ``[0, limit)``."""
    return ((n + delta) % limit + limit) % limit


def symmetric(limit: int, n: int) -> int:
    """Mirror index ``n`` about the centre of ``[0, limit)``."""
    return limit - n - 1


# -- mappings (size, i, j) -> destination of the tile at (i, j) ---------------


def _up(size: int, i: int, j: int) -> tuple[int, int]:
    return wrap(size, i, -1), j


def _down(size: int, i: int, j: int) -> tuple[int, int]:
    return wrap(size, i, 1), j


def _left(size: int, i: int, j: int) -> tuple[int, int]:
    return i, wrap(size, j, -1)


def _right(size: int, i: int, j: int) -> tuple[int, int]:
    return i, wrap(size, j, 1)


def _rotate_left(size: int, i: int, j: int) -> tuple[int, int]:
    return symmetric(size, j), i


def _rotate_right(size: int, i: int, j: int) -> tuple[int, int]:
    return j, symmetric(size, i)


CATALOG: dict[MoveName, MoveDescriptor] = {
    d.name: d
    for d in (
        MoveDescriptor(MoveName.UP, "Move up", _up, MoveName.DOWN),
        MoveDescriptor(MoveName.DOWN, "Move down", _down, MoveName.UP),
        MoveDescriptor(MoveName.LEFT, "Move left", _left, MoveName.RIGHT),
        MoveDescriptor(MoveName.RIGHT, "Move right", _right, MoveName.LEFT),
        MoveDescriptor(
            MoveName.ROTATE_LEFT, "Rotate left", _rotate_left, MoveName.ROTATE_RIGHT
        ),
        MoveDescriptor(
            MoveName.ROTATE_RIGHT, "Rotate right", _rotate_right, MoveName.ROTATE_LEFT
        ),
    )
}


def get_move(move_id: MoveName | str) -> MoveDescriptor:
    """Look up a catalog entry by name.

    Raises ``InvalidMoveKind`` for anything that is not one of the six moves.
    """
    try:
        return CATALOG[MoveName(move_id)]
    except ValueError:
        raise InvalidMoveKind(f"Unknown move {move_id!r}.") from None


def inverse_of(move_id: MoveName | str) -> MoveName:
    return get_move(move_id).inverse

"""Cross-platform single-keypress reader for CLI frontends.

Handles arrow keys, letter shortcuts, and special keys without requiring
Enter. Works on macOS / Linux (tty+termios) and Windows (msvcrt).

Key handling is a pure lookup: the engine only ever sees the
``MoveName`` values from ``ACTION_MOVES``.
"""

from __future__ import annotations

import os
import sys

from backend.models.move import MoveName


# -- low-level character readers -----------------------------------------------


def _getch_unix() -> str:
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
    return ch


def _getch_windows() -> str:
    import msvcrt  # type: ignore[import-not-found]

    return msvcrt.getch().decode("utf-8", errors="ignore")


_getch = _getch_windows if os.name == "nt" else _getch_unix


# -- shared key mapping --------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    "q": "rotate_left",
    "e": "rotate_right",
    "z": "undo",
    "r": "reset",
    "n": "new",
    "+": "harder",
    "=": "harder",
    "-": "easier",
    "_": "easier",
    "c": "color_blind",
    "h": "hint",
    "?": "hint",
    "x": "quit",
    "\x03": "quit",  # Ctrl-C
    "\r": "enter",
    "\n": "enter",
}

_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}

ACTION_MOVES: dict[str, MoveName] = {
    "up": MoveName.UP,
    "down": MoveName.DOWN,
    "left": MoveName.LEFT,
    "right": MoveName.RIGHT,
    "rotate_left": MoveName.ROTATE_LEFT,
    "rotate_right": MoveName.ROTATE_RIGHT,
}


def resolve(ch: str) -> str:
    """Map a raw character to its action string (case-insensitive)."""
    if ch in _KEY_MAP:
        return _KEY_MAP[ch]
    lowered = ch.lower()
    if lowered in _KEY_MAP:
        return _KEY_MAP[lowered]
    return ch if ch.isprintable() else ""


def action_to_move(action: str) -> MoveName | None:
    """Return the move bound to *action*, or ``None`` for non-move actions."""
    return ACTION_MOVES.get(action)


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Read a single keypress and return a normalised action string.

    Blocks until a key is pressed.

    Possible return values:
        "up", "down", "left", "right"  — scroll the grid
        "rotate_left", "rotate_right"  — q / e
        "undo", "reset", "new"         — z / r / n
        "harder", "easier"             — + / -
        "color_blind"                  — c (toggle presentation)
        "hint"                         — h / ?
        "quit"                         — x / Ctrl-C / Escape
        "enter"                        — Enter / Return
        "<char>"                       — unmapped printable char
        ""                             — unrecognised key
    """
    ch = _getch()

    # Arrow keys (Unix escape sequences: ESC [ A/B/C/D)
    if ch == "\x1b":
        ch2 = _getch()
        if ch2 == "[":
            ch3 = _getch()
            return _ARROW_MAP.get(ch3, "")
        return "quit"  # bare Escape

    return resolve(ch)

#!/usr/bin/env python3
"""Torus Puzzle.

Usage::

    python main.py                    # interactive menu
    python main.py -f rich -d 4       # Rich terminal, difficulty 4
    python main.py -f vanilla --seed 7 --color-blind
"""

from __future__ import annotations

import importlib
import logging
import random
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.config import (  # noqa: E402
    DEFAULT_DIFFICULTY,
    DEFAULT_SIZE,
    MAX_DIFFICULTY,
    MAX_SIZE,
    MIN_SIZE,
)
from backend.errors import ConfigurationError  # noqa: E402

log = logging.getLogger(__name__)


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


class LogLevel(StrEnum):
    debug = "DEBUG"
    info = "INFO"
    warning = "WARNING"
    error = "ERROR"
    critical = "CRITICAL"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(level: LogLevel) -> None:
    logging.basicConfig(
        level=level.value,
        format="%(name)s: %(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def _ask_difficulty() -> int:
    raw = input(
        f"  Difficulty (0-{MAX_DIFFICULTY}, default {DEFAULT_DIFFICULTY}): "
    ).strip() or str(DEFAULT_DIFFICULTY)
    try:
        difficulty = int(raw)
        if not 0 <= difficulty <= MAX_DIFFICULTY:
            raise ValueError
    except ValueError:
        print(f"  Invalid difficulty — using {DEFAULT_DIFFICULTY}.")
        difficulty = DEFAULT_DIFFICULTY
    return difficulty


def _launch(
    frontend: Frontend,
    size: int,
    difficulty: int,
    color_blind: bool,
    rng: random.Random,
) -> None:
    log.debug("launching %s frontend (size=%d, difficulty=%d)", frontend, size, difficulty)
    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(size=size, difficulty=difficulty, color_blind=color_blind, rng=rng)


def _menu_loop(size: int, color_blind: bool, rng: random.Random) -> None:
    while True:
        print()
        print("  ====================================")
        print("         T O R U S   P U Z Z L E      ")
        print("  ====================================")
        print()
        print("  1.  Play  (Vanilla Terminal)")
        print("  2.  Play  (Rich Terminal)")
        print("  0.  Quit")
        print()

        choice = input("  Select: ").strip()

        if choice == "0":
            print("\n  Goodbye!\n")
            return

        if choice in ("1", "2"):
            difficulty = _ask_difficulty()
            frontend = {"1": Frontend.vanilla, "2": Frontend.rich}[choice]
            try:
                _launch(frontend, size, difficulty, color_blind, rng)
            except ConfigurationError as e:
                print(f"  {e}")

        else:
            print("  Unknown option.")


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Optional[Frontend] = typer.Option(
        None, "-f", "--frontend",
        help="Frontend to launch. Omit for interactive menu.",
    ),
    size: int = typer.Option(
        DEFAULT_SIZE, "-s", "--size",
        min=MIN_SIZE, max=MAX_SIZE,
        help=f"Grid size ({MIN_SIZE}-{MAX_SIZE}).",
    ),
    difficulty: int = typer.Option(
        DEFAULT_DIFFICULTY, "-d", "--difficulty",
        min=0, max=MAX_DIFFICULTY,
        help=f"Difficulty (0-{MAX_DIFFICULTY}).",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Random seed for reproducible puzzles.",
    ),
    color_blind: bool = typer.Option(
        False, "--color-blind",
        help="Show tile numbers instead of colours.",
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.warning, "--log-level",
        case_sensitive=False,
        help="Logging level.",
    ),
) -> None:
    """Torus Puzzle."""
    _configure_logging(log_level)
    rng = random.Random(seed)

    try:
        if frontend is None:
            _menu_loop(size, color_blind, rng)
        else:
            _launch(frontend, size, difficulty, color_blind, rng)
    except ConfigurationError as e:
        raise typer.BadParameter(str(e)) from e


if __name__ == "__main__":
    app()

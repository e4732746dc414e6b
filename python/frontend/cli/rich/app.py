"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output while sharing the same
input handler and backend as the vanilla CLI.
"""

from __future__ import annotations

import random

import rich.box
from rich.align import Align
from rich.columns import Columns
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.config import DEFAULT_DIFFICULTY, DEFAULT_SIZE, MAX_DIFFICULTY
from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import Solver
from backend.engine.transform import get_move
from backend.errors import ConfigurationError
from backend.models.grid import Grid
from frontend.cli.input_handler import action_to_move, get_key

console = Console()

# Blank, pink, blue, gold; tags past 3 cycle.
TILE_STYLES = ("on grey93", "on hot_pink", "on cornflower_blue", "on gold1")


def _format_time(seconds: float) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m}:{s:02d}" if m else f"{s}s"


# -- grid rendering -----------------------------------------------------------


def _cell(val: int, color_blind: bool) -> Text:
    if color_blind:
        return Text(f" {val} " if val else "   ", style="bold")
    return Text("   ", style=TILE_STYLES[val % len(TILE_STYLES)])


def _render_grid(grid: Grid, color_blind: bool, border_style: str) -> Table:
    """Return a Rich Table representing the grid."""
    table = Table(
        show_header=False,
        show_edge=True,
        show_lines=True,
        box=rich.box.HEAVY,
        border_style=border_style,
        padding=(0, 0),
    )
    for _ in range(grid.size):
        table.add_column(width=3, justify="center")

    for row in grid.tiles:
        table.add_row(*(_cell(v, color_blind) for v in row))

    return table


def _render_history(game: GamePlay) -> Table:
    table = Table(
        title="History",
        title_style="bold cyan",
        box=rich.box.ROUNDED,
        border_style="dim",
        show_lines=False,
    )
    table.add_column("#", justify="right", style="dim", width=3)
    table.add_column("Move", style="yellow")

    entries = list(game.state.history)
    for i, entry in enumerate(entries[-10:], max(1, len(entries) - 9)):
        table.add_row(str(i), entry.label)
    if not entries:
        table.add_row("", Text("no moves yet", style="dim"))
    return table


# -- hint ---------------------------------------------------------------------


def _apply_hint(game: GamePlay) -> str:
    hint = Solver.hint(game.current, game.target)
    if hint is None:
        return "[yellow]No hint available.[/yellow]"
    game.move(hint)
    return f"[cyan]Hint:[/cyan] [bold]{get_move(hint).label}[/bold]"


def _new_game(game: GamePlay, difficulty: int) -> str:
    try:
        game.new_game(difficulty)
    except ConfigurationError as e:
        return f"[yellow]{e}[/yellow]"
    return ""


def _change_difficulty(game: GamePlay, step: int) -> str:
    difficulty = min(MAX_DIFFICULTY, max(0, game.difficulty + step))
    if difficulty == game.difficulty:
        return ""
    return _new_game(game, difficulty)


# -- game screen --------------------------------------------------------------


def _draw_game(game: GamePlay, color_blind: bool, status: str = "") -> None:
    console.clear()

    size = game.size
    won = game.is_won
    current = Group(
        Align.center(Text("Current", style="bold")),
        _render_grid(game.current, color_blind, "bold green" if won else "bright_blue"),
    )
    target = Group(
        Align.center(Text("Target", style="bold")),
        _render_grid(game.target, color_blind, "magenta"),
    )

    stats = Text()
    stats.append("  Difficulty: ", style="dim")
    stats.append(f"{game.difficulty}/{MAX_DIFFICULTY}", style="bold yellow")
    stats.append("    Moves: ", style="dim")
    stats.append(str(game.state.moves), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(_format_time(game.state.elapsed_time), style="bold yellow")
    stats.append("    Colour-blind: ", style="dim")
    stats.append("on" if color_blind else "off", style="bold yellow")

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  scroll   ", style="dim")
    controls.append("Q/E", style="bold cyan")
    controls.append("  rotate   ", style="dim")
    controls.append("Z", style="bold cyan")
    controls.append("  undo   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  reset   ", style="dim")
    controls.append("N", style="bold cyan")
    controls.append("  new   ", style="dim")
    controls.append("+/-", style="bold cyan")
    controls.append("  difficulty   ", style="dim")
    controls.append("C", style="bold cyan")
    controls.append("  colours   ", style="dim")
    controls.append("H", style="bold cyan")
    controls.append("  hint   ", style="dim")
    controls.append("X", style="bold cyan")
    controls.append("  quit", style="dim")

    parts = [
        Align.center(Columns([current, target, _render_history(game)], padding=(0, 4))),
        Text(""),
        Align.center(stats),
    ]
    if won:
        congrats = Text()
        congrats.append("\n  ★ ", style="bold yellow")
        congrats.append("SOLVED!", style="bold green")
        congrats.append(f"  {game.state.moves} moves  ", style="green")
        congrats.append("★\n", style="bold yellow")
        parts.append(Align.center(congrats))

    title_style = "bold green" if won else "bold cyan"
    panel = Panel(
        Group(*parts),
        title=f"[{title_style}]Torus Puzzle  {size}×{size}[/{title_style}]",
        border_style="bold green" if won else "bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


# -- game loop ----------------------------------------------------------------


def _play(game: GamePlay, color_blind: bool) -> None:
    status = ""
    while True:
        _draw_game(game, color_blind, status)
        status = ""
        key = get_key()

        move = action_to_move(key)
        if move is not None:
            game.move(move)
        elif key == "undo":
            game.undo()
        elif key == "reset":
            game.reset()
        elif key == "new":
            status = _new_game(game, game.difficulty)
        elif key == "harder":
            status = _change_difficulty(game, 1)
        elif key == "easier":
            status = _change_difficulty(game, -1)
        elif key == "color_blind":
            color_blind = not color_blind
        elif key == "hint" and not game.is_won:
            status = _apply_hint(game)
        elif key == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return


# -- public entry point -------------------------------------------------------


def run(
    size: int = DEFAULT_SIZE,
    difficulty: int = DEFAULT_DIFFICULTY,
    color_blind: bool = False,
    rng: random.Random | None = None,
) -> None:
    """Launch the Rich CLI."""
    _play(GamePlay(difficulty, size, rng), color_blind)

"""Rich terminal frontend with a table board and a progress bar.

Uses the ``rich`` library for styled output while sharing the same
input handler and backend as the vanilla CLI.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.progress_bar import ProgressBar
from rich.table import Table
from rich.text import Text

from backend.engine.gameplay import GamePlay
from backend.models.board import Board
from backend.models.config import GameConfig
from frontend.cli.actions import WIN_TEXT, apply_move_key
from frontend.cli.input_handler import get_key, get_key_timeout

console = Console()


# -- rendering ----------------------------------------------------------------


def _render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in board.tiles:
        table.add_column(width=2, justify="center")

    for r, row in enumerate(board.tiles):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val}[/bold green]")
            else:
                cells.append(f"[bold white]{val}[/bold white]")
        table.add_row(*cells)

    return table


def _render_progress(percent: int) -> Table:
    """Progress bar plus the raw percentage, which may fall below zero."""
    grid = Table.grid(padding=(0, 1))
    grid.add_column()
    grid.add_column()
    grid.add_column(justify="right")
    bar = ProgressBar(
        total=100,
        completed=max(0, min(100, percent)),
        width=24,
        complete_style="yellow",
        finished_style="green",
    )
    style = "bold green" if percent >= 100 else "bold yellow"
    grid.add_row(Text("Progress", style="dim"), bar, Text(f"{percent}%", style=style))
    return grid


def _draw_game(game: GamePlay, status: str = "") -> None:
    console.clear()

    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(game.moves), style="bold yellow")
    stats.append("    Distance: ", style="dim")
    stats.append(str(game.distance), style="bold yellow")

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("1-8", style="bold cyan")
    controls.append("  move   ", style="dim")
    controls.append("X", style="bold yellow")
    controls.append("  shuffle   ", style="dim")
    controls.append("H", style="bold cyan")
    controls.append("  hint   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")

    won = game.is_won and game.moves > 0
    panel = Panel(
        Group(
            Align.center(_render_board(game.state.board)),
            Text(""),
            Align.center(_render_progress(game.progress)),
        ),
        title="[bold cyan]Eight Puzzle[/bold cyan]",
        border_style="bold green" if won else "bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(stats))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


# -- shuffle animation --------------------------------------------------------


def _animate_shuffle(game: GamePlay) -> str:
    interval = game.config.step_interval_ms / 1000
    game.start_shuffle()
    while game.is_shuffling:
        if game.step_shuffle():
            _draw_game(game, "[dim]Shuffling… (any key to stop)[/dim]")
            if interval and get_key_timeout(interval) is not None:
                game.cancel_shuffle()
                return "[yellow]Shuffle stopped.[/yellow]"
    return "[yellow]Shuffled![/yellow]"


# -- game loop ----------------------------------------------------------------


def _game_loop(config: GameConfig) -> None:
    game = GamePlay(config)
    status = "[dim]Press X to shuffle.[/dim]"

    while True:
        _draw_game(game, status)
        status = ""
        key = get_key()

        if key == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return
        if key == "shuffle":
            status = _animate_shuffle(game)
        elif key == "hint":
            status = f"[cyan]Hint:[/cyan] {game.hint()}"
        elif apply_move_key(game, key) and game.is_won:
            status = (
                f"[bold yellow]★[/bold yellow] [bold green]{WIN_TEXT}[/bold green] "
                f"[bold yellow]★[/bold yellow]  ({game.moves} moves)"
            )


# -- public entry point -------------------------------------------------------


def run(config: GameConfig) -> None:
    """Launch the Rich terminal game."""
    _game_loop(config)

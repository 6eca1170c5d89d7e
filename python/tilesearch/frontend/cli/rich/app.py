"""Rich terminal frontend with tables, colours and panels.

Uses the ``rich`` library for styled output of the same reports as the
vanilla frontend.
"""

from __future__ import annotations

from collections.abc import Sequence

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from tilesearch.engine.solver import SolutionResult
from tilesearch.models.state import PuzzleState

console = Console()


# -- helpers ------------------------------------------------------------------


def _format_time(seconds: float) -> str:
    return f"{seconds * 1000:.0f}ms"


def _label(result: SolutionResult) -> str:
    return "A* (" + "+".join(result.heuristics) + ")" if result.heuristics else "Uniform-cost"


# -- board rendering ----------------------------------------------------------


def _render_board(board: PuzzleState) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.size * board.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.rows):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _stats(result: SolutionResult) -> Text:
    stats = Text()
    stats.append("  Time: ", style="dim")
    stats.append(_format_time(result.elapsed), style="bold yellow")
    stats.append("    Moves: ", style="dim")
    stats.append(str(result.move_count), style="bold yellow")
    stats.append("    Expanded: ", style="dim")
    stats.append(str(result.expanded), style="bold yellow")
    stats.append("    Unexpanded: ", style="dim")
    stats.append(str(result.unexpanded), style="bold yellow")
    return stats


# -- reports ------------------------------------------------------------------


def show_solution(result: SolutionResult, show_boards: bool = True) -> None:
    """Print the solution path as a row of boards plus the statistics."""
    size = result.initial.size
    body: list = []

    if show_boards:
        directions = result.directions
        path = Table.grid(padding=(0, 2))
        row: list = []
        for i, board in enumerate(result.states):
            caption = "start" if i == 0 else f"{i}. {directions[i - 1].value}"
            row.append(Group(_render_board(board), Align.center(Text(caption, style="dim"))))
            # Six boards per row.
            if len(row) == 6:
                path.add_row(*row)
                row = []
        if row:
            path.add_row(*row)
        body.extend([path, Text("")])

    body.append(_stats(result))

    panel = Panel(
        Group(*body),
        title=f"[bold cyan]{_label(result)}  {size}×{size}[/bold cyan]",
        border_style="cyan",
        padding=(1, 2),
    )
    console.print()
    console.print(panel)


def show_comparison(board: PuzzleState, results: Sequence[SolutionResult]) -> None:
    """Print a table with one row per search run on the same board."""
    table = Table(title="Search comparison", box=rich.box.SIMPLE_HEAVY)
    table.add_column("Search", style="bold")
    table.add_column("Moves", justify="right")
    table.add_column("Expanded", justify="right")
    table.add_column("Unexpanded", justify="right")
    table.add_column("Time", justify="right")

    best = min(r.move_count for r in results)
    for r in results:
        moves = str(r.move_count)
        if r.move_count > best:
            moves = f"[yellow]{moves}[/yellow]"
        table.add_row(
            _label(r),
            moves,
            str(r.expanded),
            str(r.unexpanded),
            _format_time(r.elapsed),
        )

    console.print()
    console.print(Align.center(_render_board(board)))
    console.print(Align.center(table))

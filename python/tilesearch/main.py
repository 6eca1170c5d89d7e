"""Sliding puzzle solver CLI.

Usage::

    tilesearch solve 1,2,3/4,0,6/7,5,8          # uniform-cost search
    tilesearch solve -r 3 -H manhattan          # A* on a random 3×3
    tilesearch solve -r 4 -H manhattan -H reversal -f rich
    tilesearch compare 8,6,7/2,5,4/3,0,1        # every heuristic side by side
"""

from __future__ import annotations

import importlib
import logging
from enum import StrEnum
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from tilesearch.engine.generator import PuzzleGenerator
from tilesearch.engine.heuristics import Heuristic
from tilesearch.engine.solver import SearchEngine, SolutionResult
from tilesearch.models.errors import InvalidStateError, SearchExhaustedError
from tilesearch.models.state import PuzzleState

logger = logging.getLogger(__name__)


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "tilesearch.frontend.cli.vanilla.app",
    Frontend.rich: "tilesearch.frontend.cli.rich.app",
}

# Selections run by ``compare``, uniform-cost first.
_COMPARISONS: tuple[tuple[Heuristic, ...], ...] = (
    (),
    (Heuristic.MISMATCH,),
    (Heuristic.REVERSAL,),
    (Heuristic.MANHATTAN,),
    (Heuristic.MANHATTAN, Heuristic.REVERSAL),
)


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def parse_grid(text: str) -> list[list[int]]:
    """Parse ``"1,2,3/4,0,6/7,5,8"`` into a list of rows."""
    try:
        return [
            [int(cell) for cell in row.split(",")]
            for row in text.strip().split("/")
        ]
    except ValueError:
        raise typer.BadParameter(
            f"{text!r} is not a grid; use rows separated by '/' and cells by ','.",
            param_hint="GRID",
        ) from None


def _resolve_board(
    grid: Optional[str], size: Optional[int], shuffles: Optional[int], seed: Optional[int]
) -> PuzzleState:
    if grid is not None and size is not None:
        raise typer.BadParameter("Give either GRID or --random, not both.")
    if grid is not None:
        try:
            return PuzzleState.from_grid(parse_grid(grid))
        except InvalidStateError as exc:
            raise typer.BadParameter(str(exc), param_hint="GRID") from exc
    if size is not None:
        board = PuzzleGenerator.generate(size, shuffles=shuffles, seed=seed)
        logger.debug("Generated board %s", board.tiles)
        return board
    raise typer.BadParameter("Missing GRID (or use --random SIZE).")


def _run(board: PuzzleState, heuristics: tuple[Heuristic, ...]) -> SolutionResult:
    try:
        return SearchEngine.solve(board, heuristics)
    except SearchExhaustedError as exc:
        typer.echo(f"Unsolvable: {exc}", err=True)
        raise typer.Exit(code=1) from exc


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False, help="Sliding puzzle solver.")

_GRID = typer.Argument(None, help="Board rows separated by '/', cells by ','.")
_SIZE = typer.Option(
    None, "-r", "--random", min=1, max=8, help="Solve a random solvable board of this size."
)
_SHUFFLES = typer.Option(
    None, "--shuffles", min=0, help="Random moves used to scramble a --random board."
)
_SEED = typer.Option(None, "--seed", help="Seed for --random.")
_FRONTEND = typer.Option(
    Frontend.vanilla, "-f", "--frontend", envvar="TILESEARCH_FRONTEND", help="Report style."
)


@app.callback()
def _main(
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Log search progress."),
) -> None:
    """Sliding puzzle solver."""
    _configure_logging(verbose)


@app.command()
def solve(
    grid: Optional[str] = _GRID,
    size: Optional[int] = _SIZE,
    shuffles: Optional[int] = _SHUFFLES,
    seed: Optional[int] = _SEED,
    heuristic: Optional[list[Heuristic]] = typer.Option(
        None, "-H", "--heuristic",
        envvar="TILESEARCH_HEURISTIC",
        help="Heuristic to add (repeatable). None gives uniform-cost search.",
    ),
    frontend: Frontend = _FRONTEND,
    quiet: bool = typer.Option(False, "-q", "--quiet", help="Only print statistics."),
) -> None:
    """Solve one board and report the path."""
    board = _resolve_board(grid, size, shuffles, seed)
    result = _run(board, tuple(heuristic or ()))
    mod = importlib.import_module(_RUNNERS[frontend])
    mod.show_solution(result, show_boards=not quiet)


@app.command()
def compare(
    grid: Optional[str] = _GRID,
    size: Optional[int] = _SIZE,
    shuffles: Optional[int] = _SHUFFLES,
    seed: Optional[int] = _SEED,
    frontend: Frontend = _FRONTEND,
) -> None:
    """Solve one board with uniform-cost search and every heuristic."""
    board = _resolve_board(grid, size, shuffles, seed)
    results = [_run(board, selection) for selection in _COMPARISONS]
    mod = importlib.import_module(_RUNNERS[frontend])
    mod.show_comparison(board, results)


if __name__ == "__main__":
    app()

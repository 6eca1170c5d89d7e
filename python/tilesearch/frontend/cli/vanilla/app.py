"""Vanilla terminal frontend using only the standard library.

Prints boards with ANSI colour codes and plain statistics lines.
"""

from __future__ import annotations

from collections.abc import Sequence

from tilesearch.engine.solver import SolutionResult
from tilesearch.models.state import PuzzleState


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_DIM = "\033[2m"     # dim
_R = "\033[0m"       # reset


def _format_time(seconds: float) -> str:
    return f"{seconds * 1000:.0f}ms"


def _label(result: SolutionResult) -> str:
    return "A* (" + "+".join(result.heuristics) + ")" if result.heuristics else "Uniform-cost"


# -- board rendering ----------------------------------------------------------


def _render_board(board: PuzzleState) -> str:
    """Return an ANSI-coloured text representation of the board."""
    width = len(str(board.size * board.size - 1))  # widest number
    cell_w = width + 2  # padding
    sep = "+" + (("-" * cell_w + "+") * board.size)

    lines: list[str] = [sep]
    for r, row in enumerate(board.rows):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append(f"{_DIM} {'·':>{width}} {_R}")
            elif board.is_tile_correct(r, c):
                cells.append(f"{_G} {val:>{width}} {_R}")
            else:
                cells.append(f" {val:>{width}} ")
        lines.append("|" + "|".join(cells) + "|")
        lines.append(sep)
    return "\n".join(lines)


# -- reports ------------------------------------------------------------------


def show_solution(result: SolutionResult, show_boards: bool = True) -> None:
    """Print every board on the path followed by the search statistics."""
    size = result.initial.size
    print(f"  {_C}=== {_label(result)} ({size}×{size}) ==={_R}")
    print()
    if show_boards:
        directions = result.directions
        for i, board in enumerate(result.states):
            if i:
                print(f"  Move {i}/{result.move_count}  ({directions[i - 1].value})")
            print(_render_board(board))
            print()

    print(f"  Solution took {_Y}{_format_time(result.elapsed)}{_R}.")
    print(f"  {_Y}{result.move_count}{_R} Moves")
    print(f"  {_Y}{result.expanded}{_R} Nodes expanded")
    print(f"  {_Y}{result.unexpanded}{_R} Nodes unexpanded")


def show_comparison(board: PuzzleState, results: Sequence[SolutionResult]) -> None:
    """Print one statistics row per search run on the same board."""
    print(f"  {_C}=== Comparison ==={_R}")
    print()
    print(_render_board(board))
    print()
    name_w = max(len(_label(r)) for r in results)
    print(
        f"  {'Search':<{name_w}}  {'Moves':>6}  {'Expanded':>9}  "
        f"{'Unexpanded':>10}  {'Time':>8}"
    )
    for r in results:
        print(
            f"  {_label(r):<{name_w}}  {r.move_count:>6}  {r.expanded:>9}  "
            f"{r.unexpanded:>10}  {_format_time(r.elapsed):>8}"
        )

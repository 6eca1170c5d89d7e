"""Heuristic estimates of the remaining cost to the goal.

Each heuristic is a pure function ``h(state, goal) -> int`` that never
fails for a valid pair of equally sized states. The engine sums the
selected heuristics; an empty selection gives uniform-cost search.

Manhattan distance, mismatch count and direct reverse penalty are each
admissible on their own, and so is reversal penalty added to either
Manhattan distance or mismatch count. Adding mismatch count to Manhattan
distance can overestimate (a tile one step from home scores 2), which
costs A* its optimality guarantee.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from enum import StrEnum
from functools import lru_cache

from tilesearch.models.state import PuzzleState


class Heuristic(StrEnum):
    MANHATTAN = "manhattan"
    MISMATCH = "mismatch"
    REVERSAL = "reversal"


@lru_cache(maxsize=32)
def _goal_positions(goal: PuzzleState) -> tuple[tuple[int, int], ...]:
    """Map tile value -> (row, col) in *goal*, as a tuple indexed by value."""
    positions: list[tuple[int, int]] = [(0, 0)] * len(goal.tiles)
    for idx, tile in enumerate(goal.tiles):
        positions[tile] = divmod(idx, goal.size)
    return tuple(positions)


def manhattan_distance(state: PuzzleState, goal: PuzzleState) -> int:
    """Sum of Manhattan distances to goal positions (blank ignored)."""
    goal_pos = _goal_positions(goal)
    n = state.size
    dist = 0
    for idx, tile in enumerate(state.tiles):
        if tile == 0:
            continue
        r, c = divmod(idx, n)
        gr, gc = goal_pos[tile]
        dist += abs(r - gr) + abs(c - gc)
    return dist


def mismatch_count(state: PuzzleState, goal: PuzzleState) -> int:
    """Number of non-blank cells holding a different value than in *goal*."""
    return sum(
        1 for tile, want in zip(state.tiles, goal.tiles) if tile != 0 and tile != want
    )


def direct_reverse_penalty(state: PuzzleState, goal: PuzzleState) -> int:
    """2 per pair of goal-adjacent tiles that sit in each other's goal cells."""
    n = state.size
    tiles = state.tiles
    penalty = 0
    for idx, tile in enumerate(goal.tiles):
        if tile == 0:
            continue
        r, c = divmod(idx, n)
        # Right and down neighbours only, so each pair is seen once.
        for nidx in (idx + 1 if c < n - 1 else None, idx + n if r < n - 1 else None):
            if nidx is None:
                continue
            other = goal.tiles[nidx]
            if other != 0 and tiles[idx] == other and tiles[nidx] == tile:
                penalty += 2
    return penalty


_FUNCTIONS: dict[Heuristic, Callable[[PuzzleState, PuzzleState], int]] = {
    Heuristic.MANHATTAN: manhattan_distance,
    Heuristic.MISMATCH: mismatch_count,
    Heuristic.REVERSAL: direct_reverse_penalty,
}

# Selections whose sum never overestimates the true remaining cost.
_ADMISSIBLE: frozenset[frozenset[Heuristic]] = frozenset(
    {
        frozenset(),
        frozenset({Heuristic.MANHATTAN}),
        frozenset({Heuristic.MISMATCH}),
        frozenset({Heuristic.REVERSAL}),
        frozenset({Heuristic.MANHATTAN, Heuristic.REVERSAL}),
        frozenset({Heuristic.MISMATCH, Heuristic.REVERSAL}),
    }
)


def normalize(
    heuristics: Heuristic | str | Iterable[Heuristic | str],
) -> tuple[Heuristic, ...]:
    """Coerce names to ``Heuristic`` members, dropping duplicates in order.

    A single name or member is treated as a one-element selection.
    """
    if isinstance(heuristics, str):
        heuristics = (heuristics,)
    out: list[Heuristic] = []
    for h in heuristics:
        member = Heuristic(h)
        if member not in out:
            out.append(member)
    return tuple(out)


def evaluate(
    heuristics: Iterable[Heuristic], state: PuzzleState, goal: PuzzleState
) -> int:
    """Sum of the selected heuristics for *state* (0 for no selection)."""
    return sum(_FUNCTIONS[h](state, goal) for h in heuristics)


def is_admissible(heuristics: Iterable[Heuristic]) -> bool:
    """True if summing *heuristics* is known to keep A* optimal."""
    return frozenset(heuristics) in _ADMISSIBLE

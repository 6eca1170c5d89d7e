"""Heuristic values and admissibility."""

from __future__ import annotations

import random

import pytest

from tilesearch.engine.generator import PuzzleGenerator
from tilesearch.engine.heuristics import (
    Heuristic,
    direct_reverse_penalty,
    evaluate,
    is_admissible,
    manhattan_distance,
    mismatch_count,
    normalize,
)
from tilesearch.models.state import PuzzleState

GOAL = PuzzleState.solved(3)


def _state(grid: list[list[int]]) -> PuzzleState:
    return PuzzleState.from_grid(grid)


# -- individual heuristics ----------------------------------------------------


@pytest.mark.parametrize(
    "grid, manhattan, mismatch, reversal",
    [
        ([[1, 2, 3], [4, 5, 6], [7, 8, 0]], 0, 0, 0),
        ([[1, 2, 3], [4, 5, 6], [7, 0, 8]], 1, 1, 0),
        ([[1, 2, 3], [4, 0, 6], [7, 5, 8]], 2, 2, 0),
        ([[2, 1, 3], [4, 5, 6], [7, 8, 0]], 2, 2, 2),
        ([[1, 2, 3], [7, 5, 6], [4, 8, 0]], 2, 2, 2),
        ([[2, 1, 3], [7, 5, 6], [4, 8, 0]], 4, 4, 4),
        ([[8, 2, 3], [4, 5, 6], [7, 1, 0]], 6, 2, 0),
    ],
    ids=["goal", "one-move", "two-moves", "row-swap", "column-swap", "two-swaps", "far-swap"],
)
def test_heuristic_values(
    grid: list, manhattan: int, mismatch: int, reversal: int
) -> None:
    state = _state(grid)
    assert manhattan_distance(state, GOAL) == manhattan
    assert mismatch_count(state, GOAL) == mismatch
    assert direct_reverse_penalty(state, GOAL) == reversal


def test_heuristics_ignore_blank() -> None:
    # Only the blank and 8 differ; the blank must not be counted.
    state = _state([[1, 2, 3], [4, 5, 6], [7, 0, 8]])
    assert mismatch_count(state, GOAL) == 1
    assert direct_reverse_penalty(state, GOAL) == 0


def test_heuristics_use_given_goal() -> None:
    other_goal = _state([[0, 1, 2], [3, 4, 5], [6, 7, 8]])
    assert manhattan_distance(other_goal, other_goal) == 0
    assert mismatch_count(other_goal, other_goal) == 0
    assert manhattan_distance(GOAL, other_goal) == 12


# -- combination --------------------------------------------------------------


def test_evaluate_sums_selection() -> None:
    state = _state([[2, 1, 3], [4, 5, 6], [7, 8, 0]])
    assert evaluate((), state, GOAL) == 0
    assert evaluate((Heuristic.MANHATTAN,), state, GOAL) == 2
    assert evaluate((Heuristic.MANHATTAN, Heuristic.REVERSAL), state, GOAL) == 4
    assert evaluate(tuple(Heuristic), state, GOAL) == 6


def test_normalize_accepts_names_and_drops_duplicates() -> None:
    assert normalize(["manhattan", Heuristic.REVERSAL, "manhattan"]) == (
        Heuristic.MANHATTAN,
        Heuristic.REVERSAL,
    )
    with pytest.raises(ValueError):
        normalize(["euclid"])


def test_normalize_wraps_single_name() -> None:
    assert normalize("manhattan") == (Heuristic.MANHATTAN,)
    assert normalize(Heuristic.REVERSAL) == (Heuristic.REVERSAL,)


@pytest.mark.parametrize(
    "selection, expected",
    [
        ((), True),
        ((Heuristic.MANHATTAN,), True),
        ((Heuristic.MISMATCH,), True),
        ((Heuristic.REVERSAL,), True),
        ((Heuristic.REVERSAL, Heuristic.MANHATTAN), True),
        ((Heuristic.MANHATTAN, Heuristic.MISMATCH), False),
        ((Heuristic.MISMATCH, Heuristic.REVERSAL), True),
        ((Heuristic.MISMATCH, Heuristic.MANHATTAN, Heuristic.REVERSAL), False),
        (tuple(Heuristic), False),
    ],
)
def test_is_admissible(selection: tuple, expected: bool) -> None:
    assert is_admissible(selection) is expected


@pytest.mark.parametrize("seed", range(8))
def test_admissible_selections_never_overestimate(seed: int, distance) -> None:
    rng = random.Random(seed)
    state = PuzzleGenerator.scramble(GOAL, rng.randint(4, 14), rng)
    true_cost = distance(state)
    for selection in (
        (Heuristic.MANHATTAN,),
        (Heuristic.MISMATCH,),
        (Heuristic.REVERSAL,),
        (Heuristic.MANHATTAN, Heuristic.REVERSAL),
        (Heuristic.MISMATCH, Heuristic.REVERSAL),
    ):
        assert evaluate(selection, state, GOAL) <= true_cost

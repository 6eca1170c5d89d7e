"""Board generation and solvability checks."""

from __future__ import annotations

import random

import pytest

from tilesearch.engine.generator import PuzzleGenerator
from tilesearch.models.state import PuzzleState


def test_scramble_is_reproducible_with_seed() -> None:
    goal = PuzzleGenerator.solved(3)
    a = PuzzleGenerator.scramble(goal, 30, random.Random(5))
    b = PuzzleGenerator.scramble(goal, 30, random.Random(5))
    assert a == b


def test_scramble_zero_shuffles_is_identity() -> None:
    goal = PuzzleGenerator.solved(3)
    assert PuzzleGenerator.scramble(goal, 0) == goal


def test_scramble_1x1_has_no_moves() -> None:
    goal = PuzzleGenerator.solved(1)
    assert PuzzleGenerator.scramble(goal, 10, random.Random(0)) == goal


def test_generate_1x1_is_the_goal() -> None:
    board = PuzzleGenerator.generate(1, seed=0)
    assert board == PuzzleState.from_grid([[0]])
    assert board.is_solved()


@pytest.mark.parametrize("size", [2, 3, 4, 5])
def test_generate_returns_solvable_unsolved_board(size: int) -> None:
    board = PuzzleGenerator.generate(size, seed=size)
    assert board.size == size
    assert not board.is_solved()
    assert PuzzleGenerator.is_solvable(board)


def test_generate_never_returns_goal_on_full_cycle() -> None:
    # A non-backtracking walk of 12 moves on 2×2 always comes back home.
    assert not PuzzleGenerator.generate(2, shuffles=12, seed=0).is_solved()


@pytest.mark.parametrize(
    "grid, expected",
    [
        ([[1, 2, 3], [4, 5, 6], [7, 8, 0]], True),
        ([[1, 2, 3], [4, 0, 6], [7, 5, 8]], True),
        ([[2, 1, 3], [4, 5, 6], [7, 8, 0]], False),
        ([[1, 2], [3, 0]], True),
        ([[2, 1], [3, 0]], False),
        (
            [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12], [13, 14, 15, 0]],
            True,
        ),
        (
            [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 0], [13, 14, 15, 12]],
            True,
        ),
        (
            [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12], [13, 15, 14, 0]],
            False,
        ),
    ],
    ids=["goal", "two-moves", "swap", "goal-2x2", "swap-2x2", "goal-4x4", "one-up-4x4", "swap-4x4"],
)
def test_is_solvable(grid: list, expected: bool) -> None:
    assert PuzzleGenerator.is_solvable(PuzzleState.from_grid(grid)) is expected


@pytest.mark.parametrize("seed", range(5))
def test_unsolvable_variant_flips_parity(seed: int) -> None:
    board = PuzzleGenerator.generate(4, seed=seed)
    variant = PuzzleGenerator.unsolvable_variant(board)
    assert variant != board
    assert not PuzzleGenerator.is_solvable(variant)

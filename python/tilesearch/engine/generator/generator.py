"""Generates sliding puzzle boards for the solver."""

from __future__ import annotations

import random

from tilesearch.models.state import PuzzleState


class PuzzleGenerator:
    """Creates solvable puzzles by shuffling from the solved state."""

    @staticmethod
    def solved(size: int) -> PuzzleState:
        """Return the goal state (all tiles in order, blank bottom-right)."""
        return PuzzleState.solved(size)

    @staticmethod
    def scramble(
        state: PuzzleState, shuffles: int, rng: random.Random | None = None
    ) -> PuzzleState:
        """Random walk of *shuffles* blank moves with no immediate backtrack."""
        rng = rng or random.Random()
        prev: PuzzleState | None = None

        for _ in range(shuffles):
            neighbors = [s for _, s in state.successors()]
            if not neighbors:
                break
            if prev in neighbors and len(neighbors) > 1:
                neighbors.remove(prev)
            prev, state = state, rng.choice(neighbors)
        return state

    @staticmethod
    def generate(
        size: int, shuffles: int | None = None, seed: int | None = None
    ) -> PuzzleState:
        """Return a random *solvable* board of the given size."""
        if shuffles is None:
            shuffles = size * size * 100
        rng = random.Random(seed)
        goal = PuzzleGenerator.solved(size)

        state = PuzzleGenerator.scramble(goal, shuffles, rng)

        # Ensure the board is not already solved
        if state == goal and size > 1 and shuffles > 0:
            state = PuzzleGenerator.scramble(state, 1, rng)
        return state

    @staticmethod
    def is_solvable(state: PuzzleState) -> bool:
        """Return True if *state* can reach the goal state.

        Odd N: the inversion count must be even. Even N: inversions plus
        the blank's row counted 1-based from the bottom must be odd.
        """
        arr = [x for x in state.tiles if x != 0]
        inv = 0
        for i in range(len(arr)):
            for j in range(i + 1, len(arr)):
                if arr[i] > arr[j]:
                    inv += 1
        if state.size % 2 == 1:
            return inv % 2 == 0
        blank_row_from_bottom = state.size - state.blank // state.size
        return (inv + blank_row_from_bottom) % 2 == 1

    @staticmethod
    def unsolvable_variant(state: PuzzleState) -> PuzzleState:
        """Swap the first two non-blank tiles, flipping solvability."""
        tiles = list(state.tiles)
        i, j = [k for k, v in enumerate(tiles) if v != 0][:2]
        tiles[i], tiles[j] = tiles[j], tiles[i]
        return PuzzleState.from_flat(state.size, tiles)

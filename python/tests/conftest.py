"""Shared helpers: brute-force distances for checking optimality."""

from __future__ import annotations

from collections import deque

import pytest

from tilesearch.models.state import PuzzleState


def bfs_distance(start: PuzzleState) -> int:
    """Exact number of moves from *start* to the goal (breadth-first)."""
    goal = PuzzleState.solved(start.size)
    if start == goal:
        return 0
    seen = {start}
    queue = deque([(start, 0)])
    while queue:
        state, dist = queue.popleft()
        for _, nxt in state.successors():
            if nxt == goal:
                return dist + 1
            if nxt not in seen:
                seen.add(nxt)
                queue.append((nxt, dist + 1))
    raise AssertionError("goal unreachable")


@pytest.fixture
def distance():
    return bfs_distance

"""Sliding puzzle solver: uniform-cost and A* search."""

from __future__ import annotations

import heapq
import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from time import perf_counter

from tilesearch.engine.heuristics import Heuristic, is_admissible, normalize
from tilesearch.engine.solver.node import SearchNode
from tilesearch.models.errors import SearchExhaustedError
from tilesearch.models.state import Direction, PuzzleState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SolutionResult:
    """Outcome of one successful ``SearchEngine.solve`` call."""

    states: tuple[PuzzleState, ...]
    expanded: int
    unexpanded: int
    generated: int
    elapsed: float
    heuristics: tuple[Heuristic, ...] = ()

    @property
    def move_count(self) -> int:
        return len(self.states) - 1

    @property
    def initial(self) -> PuzzleState:
        return self.states[0]

    @property
    def goal(self) -> PuzzleState:
        return self.states[-1]

    @property
    def grids(self) -> list[list[list[int]]]:
        return [s.grid for s in self.states]

    @property
    def directions(self) -> list[Direction]:
        """Tile moves that replay the solution from the initial state."""
        return [a.direction_to(b) for a, b in zip(self.states, self.states[1:])]


class SearchEngine:
    """Stateless solver; all methods are static.

    Every call owns its own frontier, visited set and node arena, so
    concurrent calls never share mutable state.
    """

    @staticmethod
    def solve(
        initial: PuzzleState | Sequence[Sequence[int]],
        heuristics: Heuristic | str | Iterable[Heuristic | str] = (),
    ) -> SolutionResult:
        """Find a path from *initial* to the goal.

        With no heuristics this is uniform-cost search; otherwise A* with
        the sum of the selected heuristics. The goal is tested when a node
        is popped, not when it is generated.

        Raises ``InvalidStateError`` for a malformed grid and
        ``SearchExhaustedError`` if the goal is unreachable.
        """
        state = initial if isinstance(initial, PuzzleState) else PuzzleState.from_grid(initial)
        selected = normalize(heuristics)
        goal = PuzzleState.solved(state.size)

        if not is_admissible(selected):
            logger.warning(
                "Heuristic selection %s may overestimate; "
                "the solution is not guaranteed to be optimal.",
                "+".join(selected),
            )
        logger.debug(
            "Solving %d×%d puzzle with %s",
            state.size, state.size, "+".join(selected) or "uniform-cost",
        )

        start_time = perf_counter()

        arena: list[SearchNode] = []
        frontier: list[SearchNode] = []
        visited: set[PuzzleState] = set()
        expanded = 0

        node = SearchNode.root(state, goal, selected)
        arena.append(node)
        visited.add(node.state)

        while node.state != goal:
            for new_state in node.state.moves(visited):
                child = node.child(len(arena), new_state, goal, selected)
                arena.append(child)
                visited.add(new_state)
                heapq.heappush(frontier, child)
            expanded += 1

            if not frontier:
                logger.debug("Frontier exhausted after %d expansions", expanded)
                raise SearchExhaustedError(expanded=expanded, generated=len(arena))
            node = heapq.heappop(frontier)

        path: list[PuzzleState] = []
        while node.parent is not None:
            path.append(node.state)
            node = arena[node.parent]
        path.append(node.state)
        path.reverse()

        elapsed = perf_counter() - start_time
        logger.debug(
            "Solved in %d moves: %d expanded, %d unexpanded, %.3fs",
            len(path) - 1, expanded, len(frontier), elapsed,
        )
        return SolutionResult(
            states=tuple(path),
            expanded=expanded,
            unexpanded=len(frontier),
            generated=len(arena),
            elapsed=elapsed,
            heuristics=selected,
        )

    @staticmethod
    def hint(
        initial: PuzzleState | Sequence[Sequence[int]],
        heuristics: Heuristic | str | Iterable[Heuristic | str] = (),
    ) -> Direction | None:
        """Return the single best next move, or ``None`` if already solved."""
        result = SearchEngine.solve(initial, heuristics)
        directions = result.directions
        return directions[0] if directions else None

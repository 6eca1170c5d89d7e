"""Search tree node wrapping a puzzle state."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from tilesearch.engine.heuristics import Heuristic, evaluate
from tilesearch.models.state import PuzzleState


@dataclass(frozen=True, order=True)
class SearchNode:
    """A state plus search metadata.

    Nodes order by ``(priority, node_id)``: the lowest priority expands
    first and equal priorities expand in insertion order. ``node_id`` is
    also the node's index in the engine's arena; ``parent`` holds the
    parent's id, or ``None`` for the root.
    """

    priority: int
    node_id: int
    depth: int = field(compare=False)
    heuristic: int = field(compare=False)
    state: PuzzleState = field(compare=False)
    parent: int | None = field(default=None, compare=False)

    @classmethod
    def root(
        cls, state: PuzzleState, goal: PuzzleState, heuristics: Sequence[Heuristic]
    ) -> SearchNode:
        h = evaluate(heuristics, state, goal)
        return cls(priority=h, node_id=0, depth=0, heuristic=h, state=state)

    def child(
        self,
        node_id: int,
        state: PuzzleState,
        goal: PuzzleState,
        heuristics: Sequence[Heuristic],
    ) -> SearchNode:
        """Return a node for *state* one step deeper than this one."""
        depth = self.depth + 1
        h = evaluate(heuristics, state, goal)
        return SearchNode(
            priority=depth + h,
            node_id=node_id,
            depth=depth,
            heuristic=h,
            state=state,
            parent=self.node_id,
        )

    @property
    def is_root(self) -> bool:
        return self.parent is None

"""Sliding-tile puzzle solver using uniform-cost and A* search."""

from tilesearch.engine.heuristics import Heuristic
from tilesearch.engine.solver import SearchEngine, SearchNode, SolutionResult
from tilesearch.models import (
    Direction,
    InvalidStateError,
    PuzzleState,
    SearchExhaustedError,
    TileSearchError,
)

__version__ = "0.1.0"

__all__ = [
    "Direction",
    "Heuristic",
    "InvalidStateError",
    "PuzzleState",
    "SearchEngine",
    "SearchExhaustedError",
    "SearchNode",
    "SolutionResult",
    "TileSearchError",
]

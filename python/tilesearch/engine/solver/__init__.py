from tilesearch.engine.solver.node import SearchNode
from tilesearch.engine.solver.solver import SearchEngine, SolutionResult

__all__ = ["SearchEngine", "SearchNode", "SolutionResult"]

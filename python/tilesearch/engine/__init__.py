"""Search engine: heuristics, node ordering, solver and board generator."""

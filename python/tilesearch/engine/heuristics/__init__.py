from tilesearch.engine.heuristics.heuristics import (
    Heuristic,
    direct_reverse_penalty,
    evaluate,
    is_admissible,
    manhattan_distance,
    mismatch_count,
    normalize,
)

__all__ = [
    "Heuristic",
    "direct_reverse_penalty",
    "evaluate",
    "is_admissible",
    "manhattan_distance",
    "mismatch_count",
    "normalize",
]

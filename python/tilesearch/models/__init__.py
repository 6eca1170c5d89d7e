from tilesearch.models.errors import (
    InvalidStateError,
    SearchExhaustedError,
    TileSearchError,
)
from tilesearch.models.state import Direction, PuzzleState

__all__ = [
    "Direction",
    "InvalidStateError",
    "PuzzleState",
    "SearchExhaustedError",
    "TileSearchError",
]

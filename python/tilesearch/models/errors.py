"""Exceptions raised by the puzzle model and the search engine."""

from __future__ import annotations


class TileSearchError(Exception):
    """Base class for every error raised by tilesearch."""


class InvalidStateError(TileSearchError, ValueError):
    """The grid is not a valid N×N sliding puzzle configuration."""


class SearchExhaustedError(TileSearchError, RuntimeError):
    """The frontier ran empty before the goal state was popped."""

    def __init__(self, expanded: int, generated: int) -> None:
        super().__init__(
            f"Search exhausted after expanding {expanded} nodes "
            f"({generated} generated) without reaching the goal."
        )
        self.expanded = expanded
        self.generated = generated

"""Immutable puzzle state for the sliding puzzle search."""

from __future__ import annotations

from collections.abc import Collection, Iterator, Sequence
from dataclasses import dataclass, field
from enum import StrEnum

from tilesearch.models.errors import InvalidStateError


class Direction(StrEnum):
    """Direction the *tile* slides into the blank."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# Blank offset (drow, dcol) -> direction of the tile that fills the blank.
# Order is fixed: blank up, down, left, right.
_BLANK_STEPS: tuple[tuple[int, int, Direction], ...] = (
    (-1, 0, Direction.DOWN),
    (1, 0, Direction.UP),
    (0, -1, Direction.RIGHT),
    (0, 1, Direction.LEFT),
)


@dataclass(frozen=True)
class PuzzleState:
    """Snapshot of an N×N board.

    Tiles are stored as a flat row-major tuple. 0 represents the blank.
    Two states are equal when their tiles match cell-for-cell.
    """

    size: int
    tiles: tuple[int, ...]
    blank: int = field(compare=False, repr=False)

    def __post_init__(self) -> None:
        # Cheap consistency check only; from_grid/from_flat validate the values.
        if (
            len(self.tiles) != self.size * self.size
            or not 0 <= self.blank < len(self.tiles)
            or self.tiles[self.blank] != 0
        ):
            raise InvalidStateError(
                f"Inconsistent state: blank index {self.blank} for tiles {self.tiles}."
            )

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_grid(cls, grid: Sequence[Sequence[int]]) -> PuzzleState:
        """Create a state from a list of rows.

        Example::

            PuzzleState.from_grid([[1, 2, 3], [4, 0, 6], [7, 5, 8]])
        """
        size = len(grid)
        if size == 0:
            raise InvalidStateError("Grid must have at least one row.")
        for r, row in enumerate(grid):
            if not isinstance(row, Sequence) or isinstance(row, str):
                raise InvalidStateError(f"Row {r} is not a sequence of tiles: {row!r}.")
            if len(row) != size:
                raise InvalidStateError(
                    f"Grid must be square: row {r} has {len(row)} cells, "
                    f"expected {size}."
                )
        return cls.from_flat(size, [v for row in grid for v in row])

    @classmethod
    def from_flat(cls, size: int, flat: Sequence[int]) -> PuzzleState:
        """Create a state from a flat row-major tile list."""
        if size < 1:
            raise InvalidStateError(f"Board size must be positive, got {size}.")
        if len(flat) != size * size:
            raise InvalidStateError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        if any(type(v) is not int for v in flat):
            raise InvalidStateError("Tiles must be integers.")
        blanks = flat.count(0)
        if blanks != 1:
            raise InvalidStateError(f"Expected exactly one blank, found {blanks}.")
        if sorted(flat) != list(range(size * size)):
            raise InvalidStateError(
                f"Tiles must be exactly the values 0..{size * size - 1}."
            )
        tiles = tuple(flat)
        return cls(size=size, tiles=tiles, blank=tiles.index(0))

    @classmethod
    def solved(cls, size: int) -> PuzzleState:
        """Return the goal state: 1..N²-1 row-major, blank bottom-right."""
        if size < 1:
            raise InvalidStateError(f"Board size must be positive, got {size}.")
        tiles = tuple(range(1, size * size)) + (0,)
        return cls(size=size, tiles=tiles, blank=size * size - 1)

    # -- queries --------------------------------------------------------------

    @property
    def rows(self) -> tuple[tuple[int, ...], ...]:
        n = self.size
        return tuple(self.tiles[r * n : (r + 1) * n] for r in range(n))

    @property
    def grid(self) -> list[list[int]]:
        """Return a fresh list-of-lists copy of the board."""
        return [list(row) for row in self.rows]

    @property
    def blank_pos(self) -> tuple[int, int]:
        return divmod(self.blank, self.size)

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row * self.size + col]

    def position(self, value: int) -> tuple[int, int]:
        """Return the (row, col) of *value* on this board."""
        return divmod(self.tiles.index(value), self.size)

    def is_solved(self) -> bool:
        return self == PuzzleState.solved(self.size)

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self.get_tile(row, col)
        if val == 0:
            return row == self.size - 1 and col == self.size - 1
        return divmod(val - 1, self.size) == (row, col)

    # -- move generation ------------------------------------------------------

    def successors(self) -> Iterator[tuple[Direction, PuzzleState]]:
        """Yield every state one blank swap away, with the tile's direction."""
        n = self.size
        br, bc = divmod(self.blank, n)
        for dr, dc, direction in _BLANK_STEPS:
            tr, tc = br + dr, bc + dc
            if 0 <= tr < n and 0 <= tc < n:
                yield direction, self._swap(tr * n + tc)

    def moves(self, visited: Collection[PuzzleState]) -> list[PuzzleState]:
        """Return the successor states that are not already in *visited*."""
        return [s for _, s in self.successors() if s not in visited]

    def direction_to(self, other: PuzzleState) -> Direction:
        """Return the tile move that turns this state into *other*."""
        for direction, state in self.successors():
            if state == other:
                return direction
        raise ValueError("States are not one blank swap apart.")

    # -- helpers --------------------------------------------------------------

    def _swap(self, target: int) -> PuzzleState:
        tiles = list(self.tiles)
        tiles[self.blank], tiles[target] = tiles[target], tiles[self.blank]
        return PuzzleState(size=self.size, tiles=tuple(tiles), blank=target)

    def __str__(self) -> str:
        width = len(str(self.size * self.size - 1))
        return "\n".join(
            " ".join(f"{v:>{width}}" if v else " " * width for v in row)
            for row in self.rows
        )

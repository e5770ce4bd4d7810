"""Board model for the eight puzzle."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

SIZE = 3
TILE_COUNT = SIZE * SIZE
GOAL_BLANK: tuple[int, int] = (SIZE - 1, SIZE - 1)


class Direction(StrEnum):
    """Orthogonal directions, in shuffle-draw order (0 = up … 3 = left)."""

    UP = "up"
    RIGHT = "right"
    DOWN = "down"
    LEFT = "left"

    @property
    def offset(self) -> tuple[int, int]:
        return _OFFSETS[self]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (-1, 0),
    Direction.RIGHT: (0, 1),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
}

_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.RIGHT: Direction.LEFT,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
}


def in_bounds(row: int, col: int) -> bool:
    return 0 <= row < SIZE and 0 <= col < SIZE


@dataclass
class Board:
    """The 3×3 tile grid.

    Tiles are stored as a 2D list of ints. 0 represents the empty cell and
    ``blank_pos`` always points at it.
    """

    tiles: list[list[int]]
    blank_pos: tuple[int, int]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def solved(cls) -> Board:
        """Return the goal layout (1..8 in order, blank bottom-right)."""
        tiles = [
            [r * SIZE + c + 1 for c in range(SIZE)] for r in range(SIZE)
        ]
        br, bc = GOAL_BLANK
        tiles[br][bc] = 0
        return cls(tiles=tiles, blank_pos=GOAL_BLANK)

    @classmethod
    def from_flat(cls, flat: list[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat([1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if len(flat) != TILE_COUNT:
            raise ValueError(
                f"Expected {TILE_COUNT} tiles for a {SIZE}×{SIZE} board, "
                f"got {len(flat)}."
            )
        if sorted(flat) != list(range(TILE_COUNT)):
            raise ValueError(
                f"Tiles must be a permutation of 0..{TILE_COUNT - 1}, got {flat}."
            )
        tiles = [list(flat[r * SIZE : (r + 1) * SIZE]) for r in range(SIZE)]
        idx = flat.index(0)
        return cls(tiles=tiles, blank_pos=divmod(idx, SIZE))

    @classmethod
    def from_rows(cls, rows: list[list[int]]) -> Board:
        if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
            raise ValueError(f"Expected {SIZE} rows of {SIZE} tiles.")
        return cls.from_flat([v for row in rows for v in row])

    # -- queries --------------------------------------------------------------

    def is_solved(self) -> bool:
        """Check if all tiles are in their goal positions."""
        expected = 1
        for r in range(SIZE):
            for c in range(SIZE):
                if (r, c) == GOAL_BLANK:
                    return self.tiles[r][c] == 0
                if self.tiles[r][c] != expected:
                    return False
                expected += 1
        return True

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self.tiles[row][col]
        if val == 0:
            return (row, col) == GOAL_BLANK
        return (row, col) == goal_position(val)

    def flat(self) -> list[int]:
        return [v for row in self.tiles for v in row]

    def snapshot(self) -> tuple[tuple[int, ...], ...]:
        """Read-only copy of the grid."""
        return tuple(tuple(row) for row in self.tiles)

    def copy(self) -> Board:
        return Board(
            tiles=[row[:] for row in self.tiles],
            blank_pos=self.blank_pos,
        )


def goal_position(value: int) -> tuple[int, int]:
    """Where tile *value* sits in the solved layout."""
    return divmod(value - 1, SIZE)

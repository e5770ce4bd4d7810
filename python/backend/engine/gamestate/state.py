"""The puzzle state machine: grid, empty cell, moves and scoring."""

from __future__ import annotations

import logging

from backend.models.board import Board, goal_position, in_bounds

logger = logging.getLogger(__name__)

# A rough estimate of the largest distance on a 3×3 board. The true maximum
# is higher, so progress can drop below zero on badly scrambled boards.
MAX_DISTANCE = 16


class InvalidMoveError(ValueError):
    """Raised when a tile that is not next to the empty cell is moved."""

    def __init__(self, row: int, col: int, blank_pos: tuple[int, int]) -> None:
        super().__init__(
            f"Cell ({row}, {col}) is not adjacent to the empty cell at {blank_pos}."
        )
        self.row = row
        self.col = col
        self.blank_pos = blank_pos


class PuzzleState:
    """Owns the board and keeps ``blank_pos`` in sync with the 0 tile."""

    def __init__(self, board: Board | None = None) -> None:
        self.board = board if board is not None else Board.solved()

    @classmethod
    def from_board(cls, board: Board) -> PuzzleState:
        return cls(board.copy())

    @classmethod
    def from_flat(cls, flat: list[int]) -> PuzzleState:
        return cls(Board.from_flat(flat))

    # -- lifecycle ------------------------------------------------------------

    def initialize(self) -> None:
        """Reset to the solved layout with the empty cell at (2, 2)."""
        self.board = Board.solved()

    # -- queries --------------------------------------------------------------

    @property
    def grid(self) -> tuple[tuple[int, ...], ...]:
        return self.board.snapshot()

    @property
    def empty_pos(self) -> tuple[int, int]:
        return self.board.blank_pos

    def is_valid_move(self, row: int, col: int) -> bool:
        """True if (row, col) is orthogonally next to the empty cell."""
        if not in_bounds(row, col):
            return False
        er, ec = self.board.blank_pos
        return abs(row - er) + abs(col - ec) == 1

    def is_solved(self) -> bool:
        return self.board.is_solved()

    def manhattan_distance(self) -> int:
        distance = 0
        for r, row in enumerate(self.board.tiles):
            for c, value in enumerate(row):
                if value:
                    tr, tc = goal_position(value)
                    distance += abs(r - tr) + abs(c - tc)
        return distance

    def progress_percent(self) -> int:
        """Percentage of the way to solved, measured against MAX_DISTANCE.

        Not clamped: distances above MAX_DISTANCE give negative values.
        """
        remaining = MAX_DISTANCE - self.manhattan_distance()
        return round(remaining / MAX_DISTANCE * 100)

    # -- moves ----------------------------------------------------------------

    def apply_move(self, row: int, col: int) -> None:
        """Slide the tile at (row, col) into the empty cell.

        Raises ``InvalidMoveError`` if the tile is not adjacent to it.
        """
        if not self.is_valid_move(row, col):
            raise InvalidMoveError(row, col, self.board.blank_pos)
        tiles = self.board.tiles
        er, ec = self.board.blank_pos
        tiles[er][ec] = tiles[row][col]
        tiles[row][col] = 0
        self.board.blank_pos = (row, col)
        logger.debug("tile %d: (%d, %d) -> (%d, %d)", tiles[er][ec], row, col, er, ec)

    def try_move(self, row: int, col: int) -> bool:
        """Apply the move if it is legal. Returns True if anything moved."""
        if not self.is_valid_move(row, col):
            return False
        self.apply_move(row, col)
        return True

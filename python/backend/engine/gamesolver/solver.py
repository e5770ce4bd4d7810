"""Hints for the player. There is no search-based solver."""

from __future__ import annotations

from backend.models.board import Board

HINT_TEXT = (
    "A true solver is complex. Try to get the tiles in the correct rows first!"
)
SOLVED_TEXT = "Already solved!"


class Solver:
    """Stateless helper; all methods are static."""

    @staticmethod
    def hint(board: Board) -> str:
        """Return the hint message to show for *board*."""
        if board.is_solved():
            return SOLVED_TEXT
        return HINT_TEXT

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state.

        On an odd-width board a layout is solvable exactly when the number
        of inversions among the numbered tiles is even.
        """
        values = [v for v in board.flat() if v]
        inversions = sum(
            1
            for i, a in enumerate(values)
            for b in values[i + 1 :]
            if a > b
        )
        return inversions % 2 == 0

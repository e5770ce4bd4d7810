"""Core gameplay logic: player moves, shuffles and the win condition."""

from __future__ import annotations

import logging

from backend.engine.gamegenerator import ShuffleEngine
from backend.engine.gamesolver import Solver
from backend.engine.gamestate import PuzzleState
from backend.models.board import Board, Direction
from backend.models.config import GameConfig

logger = logging.getLogger(__name__)


class GamePlay:
    """Orchestrates a single game session."""

    def __init__(self, config: GameConfig | None = None) -> None:
        self.config = config if config is not None else GameConfig()
        self.state = PuzzleState()
        self.shuffler = ShuffleEngine(self.state, self.config.make_rng())
        self.moves: int = 0

    @classmethod
    def from_board(
        cls, board: Board, config: GameConfig | None = None
    ) -> GamePlay:
        """Create a game session starting from an existing layout."""
        game = cls(config)
        game.state.board = board.copy()
        return game

    # -- movement -------------------------------------------------------------

    def move_tile(self, row: int, col: int) -> bool:
        """Move the tile at (row, col) into the adjacent blank.

        Clicks on non-adjacent tiles, and any click while a shuffle is
        still running, are ignored and return False.
        """
        if self.shuffler.is_running:
            return False
        if not self.state.try_move(row, col):
            return False
        self.moves += 1
        if self.state.is_solved():
            logger.info("puzzle solved in %d moves", self.moves)
        return True

    def move(self, direction: Direction) -> bool:
        """Slide a tile in *direction* into the adjacent blank.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        Returns True if the move was valid.
        """
        br, bc = self.state.empty_pos
        dr, dc = direction.opposite.offset
        return self.move_tile(br + dr, bc + dc)

    # -- shuffling ------------------------------------------------------------

    def start_shuffle(self, steps: int | None = None) -> None:
        """Reset to solved and arm a shuffle; drive it with ``step_shuffle``."""
        self.moves = 0
        self.shuffler.start(self.config.shuffle_steps if steps is None else steps)

    def step_shuffle(self) -> bool:
        return self.shuffler.step_shuffle()

    def shuffle_now(self, steps: int | None = None) -> None:
        """Shuffle without animation."""
        self.start_shuffle(steps)
        self.shuffler.run()

    def cancel_shuffle(self) -> None:
        self.shuffler.cancel()

    @property
    def is_shuffling(self) -> bool:
        return self.shuffler.is_running

    # -- queries --------------------------------------------------------------

    def hint(self) -> str:
        return Solver.hint(self.state.board)

    @property
    def distance(self) -> int:
        return self.state.manhattan_distance()

    @property
    def progress(self) -> int:
        return self.state.progress_percent()

    @property
    def is_won(self) -> bool:
        return not self.shuffler.is_running and self.state.is_solved()

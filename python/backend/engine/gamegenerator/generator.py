"""Generates solvable scrambles by walking randomly from the solved state."""

from __future__ import annotations

import logging
import random

from backend.engine.gamestate.state import PuzzleState
from backend.models.board import Direction, in_bounds
from backend.models.config import DEFAULT_SHUFFLE_STEPS

logger = logging.getLogger(__name__)

# Index of each direction in a single random draw.
_DRAW_ORDER: tuple[Direction, ...] = (
    Direction.UP,
    Direction.RIGHT,
    Direction.DOWN,
    Direction.LEFT,
)


class ShuffleEngine:
    """Scrambles a ``PuzzleState`` one random step at a time.

    Only adjacent swaps are ever applied, so every scramble it produces is
    solvable. Callers either drain it with :meth:`run` or call
    :meth:`step_shuffle` from their own timer to animate the walk.
    """

    def __init__(
        self, state: PuzzleState, rng: random.Random | None = None
    ) -> None:
        self.state = state
        self.rng = rng if rng is not None else random.Random()
        self.remaining_steps: int = 0

    @property
    def is_running(self) -> bool:
        return self.remaining_steps > 0

    def start(self, steps: int = DEFAULT_SHUFFLE_STEPS) -> None:
        """Reset the puzzle to solved and arm *steps* random moves."""
        if steps < 0:
            raise ValueError(f"Shuffle length must be >= 0, got {steps}.")
        self.state.initialize()
        self.remaining_steps = steps
        logger.info("shuffle started: %d steps", steps)

    def step_shuffle(self) -> bool:
        """Draw one direction and move the empty cell that way if possible.

        Returns True if a move was applied. Draws that would leave the board
        are skipped without using up a step.
        """
        if self.remaining_steps <= 0:
            return False

        direction = _DRAW_ORDER[self.rng.randrange(4)]
        er, ec = self.state.empty_pos
        dr, dc = direction.offset
        nr, nc = er + dr, ec + dc
        if not in_bounds(nr, nc):
            return False

        self.state.apply_move(nr, nc)
        self.remaining_steps -= 1
        if self.remaining_steps == 0:
            logger.info(
                "shuffle finished: distance %d", self.state.manhattan_distance()
            )
        return True

    def run(self) -> int:
        """Apply all remaining steps. Returns the number of draws made."""
        draws = 0
        while self.remaining_steps > 0:
            self.step_shuffle()
            draws += 1
        return draws

    def shuffle(self, steps: int = DEFAULT_SHUFFLE_STEPS) -> int:
        self.start(steps)
        return self.run()

    def cancel(self) -> None:
        """Stop applying steps; the board keeps its current scramble."""
        if self.remaining_steps:
            logger.info("shuffle cancelled with %d steps left", self.remaining_steps)
        self.remaining_steps = 0

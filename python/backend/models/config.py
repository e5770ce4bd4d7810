"""Runtime settings shared by every frontend."""

from __future__ import annotations

import random
from dataclasses import dataclass

DEFAULT_SHUFFLE_STEPS = 100
DEFAULT_STEP_INTERVAL_MS = 50


@dataclass(frozen=True)
class GameConfig:
    shuffle_steps: int = DEFAULT_SHUFFLE_STEPS
    step_interval_ms: int = DEFAULT_STEP_INTERVAL_MS
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.shuffle_steps < 0:
            raise ValueError(
                f"shuffle_steps must be >= 0, got {self.shuffle_steps}."
            )
        if self.step_interval_ms < 0:
            raise ValueError(
                f"step_interval_ms must be >= 0, got {self.step_interval_ms}."
            )

    def make_rng(self) -> random.Random:
        """Random source for shuffles; reproducible when ``seed`` is set."""
        return random.Random(self.seed)

#!/usr/bin/env python3
"""Eight Puzzle.

Usage::

    python main.py                  # interactive menu
    python main.py -f rich          # Rich terminal
    python main.py -f pyqt -i 20    # PyQt GUI, faster shuffle animation
    python main.py -f pygame --seed 7 -n 40
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Callable, Optional

import typer

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.models.config import (  # noqa: E402
    DEFAULT_SHUFFLE_STEPS,
    DEFAULT_STEP_INTERVAL_MS,
    GameConfig,
)

logger = logging.getLogger("eight_puzzle")


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"
    pygame = "pygame"
    pyqt = "pyqt"


class LogLevel(StrEnum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
    Frontend.pygame: "frontend.gui.pygame.app",
    Frontend.pyqt: "frontend.gui.pyqt.app",
}

_MENU_CHOICES = {
    "1": Frontend.vanilla,
    "2": Frontend.rich,
    "3": Frontend.pygame,
    "4": Frontend.pyqt,
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(level: LogLevel) -> None:
    logging.basicConfig(
        level=getattr(logging, level.value),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _load_runner(frontend: Frontend) -> Callable[[GameConfig], None]:
    # Imported lazily so a missing GUI toolkit only breaks its own frontend.
    return importlib.import_module(_RUNNERS[frontend]).run


def _launch(frontend: Frontend, config: GameConfig) -> None:
    logger.info("starting %s frontend with %s", frontend.value, config)
    _load_runner(frontend)(config)


def _menu_loop(config: GameConfig) -> None:
    while True:
        print()
        print("  ====================================")
        print("          E I G H T   P U Z Z L E     ")
        print("  ====================================")
        print()
        print("  1.  Play  (Vanilla Terminal)")
        print("  2.  Play  (Rich Terminal)")
        print("  3.  Play  (Pygame GUI)")
        print("  4.  Play  (PyQt GUI)")
        print("  0.  Quit")
        print()

        choice = input("  Select: ").strip()

        if choice == "0":
            print("\n  Goodbye!\n")
            return

        if choice in _MENU_CHOICES:
            _launch(_MENU_CHOICES[choice], config)
        else:
            print("  Unknown option.")


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Optional[Frontend] = typer.Option(
        None, "-f", "--frontend",
        help="Frontend to launch. Omit for interactive menu.",
    ),
    shuffle_steps: int = typer.Option(
        DEFAULT_SHUFFLE_STEPS, "-n", "--shuffle-steps",
        min=0,
        help="Random moves applied by each shuffle.",
    ),
    interval: int = typer.Option(
        DEFAULT_STEP_INTERVAL_MS, "-i", "--interval",
        min=0,
        help="Milliseconds between animated shuffle steps (0 = instant).",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for the shuffle RNG.",
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.WARNING, "--log-level",
        case_sensitive=False,
        help="Logging level (logs go to stderr).",
    ),
) -> None:
    """Eight Puzzle."""
    _configure_logging(log_level)
    config = GameConfig(
        shuffle_steps=shuffle_steps,
        step_interval_ms=interval,
        seed=seed,
    )

    if frontend is None:
        _menu_loop(config)
        return

    _launch(frontend, config)


if __name__ == "__main__":
    app()

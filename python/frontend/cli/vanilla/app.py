"""Vanilla terminal frontend with no third-party dependencies.

Uses only stdlib (print, ANSI codes, tty/termios) for rendering and input.
"""

from __future__ import annotations

import sys

from backend.engine.gameplay import GamePlay
from backend.models.board import Board
from backend.models.config import GameConfig
from frontend.cli.actions import WIN_TEXT, apply_move_key, format_progress
from frontend.cli.input_handler import get_key, get_key_timeout

# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_DIM = "\033[2m"     # dim
_R = "\033[0m"       # reset


def _clear() -> None:
    sys.stdout.write("\033[2J\033[H")
    sys.stdout.flush()


# -- rendering ----------------------------------------------------------------


def _render_board(board: Board) -> str:
    """Return an ANSI-coloured text representation of the board."""
    sep = "+" + "---+" * len(board.tiles)
    lines: list[str] = [sep]
    for r, row in enumerate(board.tiles):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append(f"{_DIM} · {_R}")
            elif board.is_tile_correct(r, c):
                cells.append(f"{_G} {val} {_R}")
            else:
                cells.append(f" {val} ")
        lines.append("|" + "|".join(cells) + "|")
        lines.append(sep)
    return "\n".join(lines)


def _show_game(game: GamePlay, status: str = "") -> None:
    _clear()
    print(f"  {_C}=== Eight Puzzle ==={_R}")
    print()
    print(_render_board(game.state.board))
    print()
    print(f"  Progress: {_Y}{format_progress(game.progress)}{_R}")
    print(f"  Moves: {_Y}{game.moves}{_R}")
    print()
    print(
        f"  {_C}WASD{_R}/{_C}Arrows{_R}/{_C}1-8{_R}: move  |  "
        f"{_C}X{_R}: shuffle  |  "
        f"{_C}H{_R}: hint  |  "
        f"{_C}Q{_R}: quit"
    )
    if status:
        print(f"\n  {status}")
    sys.stdout.flush()


# -- shuffle animation --------------------------------------------------------


def _animate_shuffle(game: GamePlay) -> str:
    """Run the shuffle one step per interval; any key cancels it."""
    interval = game.config.step_interval_ms / 1000
    game.start_shuffle()
    while game.is_shuffling:
        if game.step_shuffle():
            _show_game(game, f"{_DIM}Shuffling… (any key to stop){_R}")
            if interval and get_key_timeout(interval) is not None:
                game.cancel_shuffle()
                return f"{_Y}Shuffle stopped.{_R}"
    return f"{_Y}Shuffled!{_R}"


# -- game loop ----------------------------------------------------------------


def _game_loop(config: GameConfig) -> None:
    game = GamePlay(config)
    status = f"{_DIM}Press X to shuffle.{_R}"

    while True:
        _show_game(game, status)
        status = ""
        key = get_key()

        if key == "quit":
            _clear()
            print("  Goodbye!\n")
            return
        if key == "shuffle":
            status = _animate_shuffle(game)
        elif key == "hint":
            status = f"{_C}Hint:{_R} {game.hint()}"
        elif apply_move_key(game, key) and game.is_won:
            status = f"{_G}★ {WIN_TEXT} ★{_R}  ({game.moves} moves)"


# -- public entry point -------------------------------------------------------


def run(config: GameConfig) -> None:
    """Launch the vanilla terminal game."""
    _game_loop(config)

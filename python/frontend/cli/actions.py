"""Key handling shared by the vanilla and Rich terminal frontends."""

from __future__ import annotations

from backend.engine.gameplay import GamePlay
from backend.models.board import Board, Direction
from frontend.cli.input_handler import tile_from_key

DIRECTION_KEYS: dict[str, Direction] = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}

WIN_TEXT = "Puzzle Solved!"


def find_tile(board: Board, value: int) -> tuple[int, int]:
    for r, row in enumerate(board.tiles):
        for c, v in enumerate(row):
            if v == value:
                return r, c
    raise ValueError(f"Tile {value} is not on the board.")


def apply_move_key(game: GamePlay, key: str) -> bool:
    """Apply a movement or tile-digit key. Returns True if a tile moved."""
    if key in DIRECTION_KEYS:
        return game.move(DIRECTION_KEYS[key])
    tile = tile_from_key(key)
    if tile is not None:
        return game.move_tile(*find_tile(game.state.board, tile))
    return False


def format_progress(percent: int, width: int = 20) -> str:
    """Plain-text progress bar, e.g. ``[##########----------] 50%``.

    The bar is clamped to its width; the number is shown as-is.
    """
    filled = max(0, min(width, round(width * percent / 100)))
    return f"[{'#' * filled}{'-' * (width - filled)}] {percent}%"

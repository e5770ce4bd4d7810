from backend.models.board import Board, Direction
from backend.models.config import GameConfig

__all__ = ["Board", "Direction", "GameConfig"]

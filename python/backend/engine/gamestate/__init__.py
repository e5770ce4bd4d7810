from backend.engine.gamestate.state import MAX_DISTANCE, InvalidMoveError, PuzzleState

__all__ = ["MAX_DISTANCE", "InvalidMoveError", "PuzzleState"]

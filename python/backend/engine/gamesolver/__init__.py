from backend.engine.gamesolver.solver import HINT_TEXT, Solver

__all__ = ["HINT_TEXT", "Solver"]

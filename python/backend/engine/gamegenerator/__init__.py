from backend.engine.gamegenerator.generator import ShuffleEngine

__all__ = ["ShuffleEngine"]

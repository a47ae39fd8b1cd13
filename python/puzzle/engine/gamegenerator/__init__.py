from puzzle.engine.gamegenerator.generator import DEFAULT_SHUFFLE_STEPS, GameGenerator

__all__ = ["DEFAULT_SHUFFLE_STEPS", "GameGenerator"]

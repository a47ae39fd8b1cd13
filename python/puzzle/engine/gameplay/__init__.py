from puzzle.engine.gameplay.game import GamePlay, MoveResult, apply_move

__all__ = ["GamePlay", "MoveResult", "apply_move"]

from backend.engine.gameplay.executor import apply_move
from backend.engine.gameplay.game import GamePlay

__all__ = ["GamePlay", "apply_move"]

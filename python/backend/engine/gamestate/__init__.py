from backend.engine.gamestate.history import History
from backend.engine.gamestate.state import GameState, is_goal

__all__ = ["GameState", "History", "is_goal"]

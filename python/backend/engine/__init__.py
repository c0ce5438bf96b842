"""Robot grid engine: pure operations plus the session controller."""

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gameplay import GamePlay, apply_move
from backend.engine.gamesolver import Solver
from backend.engine.gamestate import GameState, History, is_goal
from backend.engine.playback import Playback

__all__ = [
    "GameGenerator",
    "GamePlay",
    "GameState",
    "History",
    "Playback",
    "Solver",
    "apply_move",
    "is_goal",
]

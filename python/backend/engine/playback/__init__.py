from backend.engine.playback.player import Playback

__all__ = ["Playback"]

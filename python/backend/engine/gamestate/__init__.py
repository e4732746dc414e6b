from backend.engine.gamestate.history import HistoryEntry, HistoryStack
from backend.engine.gamestate.state import GameState

__all__ = ["GameState", "HistoryEntry", "HistoryStack"]

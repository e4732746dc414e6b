from backend.engine.gameplay.actions import move, new_game, reset, undo
from backend.engine.gameplay.game import GamePlay, is_won

__all__ = ["GamePlay", "is_won", "move", "new_game", "reset", "undo"]

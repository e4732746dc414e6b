"""Puzzle engine: grid transforms, generation, sessions and solving."""

from backend.engine.gamegenerator import GameGenerator, generate_answer, generate_seed
from backend.engine.gameplay import GamePlay, is_won, move, new_game, reset, undo
from backend.engine.gamesolver import Solver
from backend.engine.transform import apply_move
from backend.models.move import MoveName

__all__ = [
    "GameGenerator",
    "GamePlay",
    "MoveName",
    "Solver",
    "apply_move",
    "generate_answer",
    "generate_seed",
    "is_won",
    "move",
    "new_game",
    "reset",
    "undo",
]

"""Engine module for the maze.

This module provides the alternating-color solver and the controllers
that drive a game or an editing session.
"""

from .editor import Editor
from .game import Game
from .generator import generate_grid_level
from .solver import SolveResult, is_solvable, legal_moves, solve
from .validators import InvalidEdit, InvalidMove

__all__ = [
    "Editor",
    "Game",
    "generate_grid_level",
    "SolveResult",
    "is_solvable",
    "legal_moves",
    "solve",
    "InvalidEdit",
    "InvalidMove",
]

"""Alt Maze - rooms, colored walls and the alternating-color rule."""

__version__ = "0.1.0"

from .core.model import Board, EnclosedRoom, Level, OuterRoom, Point, Wall
from .engine.solver import SolveResult, solve

__all__ = ["Board", "EnclosedRoom", "Level", "OuterRoom", "Point", "Wall", "SolveResult", "solve"]

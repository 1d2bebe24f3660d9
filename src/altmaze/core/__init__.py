"""Core data models for the maze."""

from .model import Board, EnclosedRoom, Level, LevelRoom, OuterRoom, Passage, PlayerState, Point, Room, Wall
from .rooms import FlagPolicy, recompute_rooms
from .topology import build_board_graph, build_level_graph, build_wall_adjacency

__all__ = [
    "Board",
    "EnclosedRoom",
    "Level",
    "LevelRoom",
    "OuterRoom",
    "Passage",
    "PlayerState",
    "Point",
    "Room",
    "Wall",
    "FlagPolicy",
    "recompute_rooms",
    "build_board_graph",
    "build_level_graph",
    "build_wall_adjacency",
]

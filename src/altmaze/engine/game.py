"""Player controller.

Holds the player state for one maze and applies the alternation rule to
every move. Rejected moves raise InvalidMove and leave the state untouched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Set

import networkx as nx

from ..config import BLUE, RED
from ..core.model import Board, Level, PlayerState
from ..core.topology import build_board_graph, build_level_graph
from .solver import Move, SolveResult, legal_moves, solve
from .validators import InvalidMove, is_legal_color, validate_crossing

LOGGER = logging.getLogger(__name__)


def required_next_color(color: Optional[str]) -> Optional[str]:
    """Color the next wall must have after crossing ``color``.

    None means any passable color is fine.
    """
    if color == RED:
        return BLUE
    if color == BLUE:
        return RED
    return None


@dataclass(frozen=True)
class MoveReport:
    """Result of an accepted move.

    Attributes:
        wall_id: Wall crossed.
        room: Room entered.
        color: Color crossed.
        next_color: Color the following wall must have.
        won: Whether the goal room was reached.
    """

    wall_id: str
    room: str
    color: str
    next_color: Optional[str]
    won: bool

    @property
    def message(self) -> str:
        if self.won:
            return "Congratulations, you made it out!"
        return f"Good! The next wall must be {self.next_color}."


class Game:
    """One play-through of a maze.

    Args:
        graph: Room graph with a ``color`` on every edge.
        start: Start room id.
        goal: Goal room id.

    Raises:
        ValueError: If start or goal is missing from the graph.
    """

    def __init__(self, graph: nx.MultiGraph, start: str, goal: str):
        for name, room_id in (("start", start), ("goal", goal)):
            if room_id is None:
                raise ValueError(f"No {name} room defined")
            if room_id not in graph:
                raise ValueError(f"Unknown {name} room: {room_id}")
        self.graph = graph
        self.start = start
        self.goal = goal
        self.state = PlayerState(room=start)
        self.history: List[str] = []

    @classmethod
    def from_level(cls, level: Level) -> "Game":
        return cls(build_level_graph(level), level.start, level.goal)

    @classmethod
    def from_board(cls, board: Board) -> "Game":
        start, goal = board.start_room, board.goal_room
        return cls(
            build_board_graph(board),
            start.id if start else None,
            goal.id if goal else None,
        )

    @property
    def won(self) -> bool:
        return self.state.room == self.goal

    def reset(self) -> None:
        self.state = PlayerState(room=self.start)
        self.history = []
        LOGGER.info("Game reset to room %s", self.start)

    def legal_moves(self) -> List[Move]:
        return legal_moves(self.graph, self.state)

    def highlighted_rooms(self) -> Set[str]:
        """Neighbouring rooms the player may enter next."""
        return {move.room for move in self.legal_moves()}

    def _cross(self, wall_id: str, room: str, color: str) -> MoveReport:
        validate_crossing(wall_id, color, self.state.last_color)
        self.state = PlayerState(room=room, last_color=color)
        self.history.append(wall_id)
        report = MoveReport(
            wall_id=wall_id,
            room=room,
            color=color,
            next_color=required_next_color(color),
            won=self.won,
        )
        if report.won:
            LOGGER.info("Goal %s reached in %d moves", self.goal, len(self.history))
        return report

    def try_move(self, target_room: str) -> MoveReport:
        """Move into a neighbouring room.

        When several walls separate the two rooms, the first one the rule
        allows is crossed.

        Raises:
            InvalidMove: If no wall joins the rooms or none may be crossed.
        """
        current = self.state.room
        if target_room == current:
            raise InvalidMove(f"Already in room {current}")
        walls = self.graph.get_edge_data(current, target_room)
        if not walls:
            LOGGER.debug("No wall between %s and %s", current, target_room)
            raise InvalidMove(f"No wall between {current} and {target_room}")

        for wall_id, data in walls.items():
            if is_legal_color(data["color"], self.state.last_color):
                return self._cross(data.get("wall_id", wall_id), target_room, data["color"])

        wall_id, data = next(iter(walls.items()))
        return self._cross(data.get("wall_id", wall_id), target_room, data["color"])

    def try_move_through(self, wall_id: str) -> MoveReport:
        """Cross a specific wall of the current room.

        Raises:
            InvalidMove: If the wall does not border the current room or
                may not be crossed.
        """
        current = self.state.room
        for _, other, key, data in self.graph.edges(current, keys=True, data=True):
            if data.get("wall_id", key) == wall_id and other != current:
                return self._cross(wall_id, other, data["color"])
        raise InvalidMove(f"Wall {wall_id} is not a wall of room {current}")

    def hint(self) -> SolveResult:
        """Shortest alternating path from the current state to the goal."""
        return solve(self.graph, self.state.room, self.goal, last_color=self.state.last_color)

"""Board editor controller.

The editor owns the authoritative points and walls of a freeform board.
Every edit that changes the geometry rebuilds the rooms with
:func:`recompute_rooms`, carrying the start and goal flags over.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Dict, Optional

from ..config import BLACK, BLUE, OUTER_ROOM_ID, RED
from ..core.model import Board, Point, Room, Wall
from ..core.rooms import FlagPolicy, recompute_rooms, with_flag
from ..core.topology import build_board_graph
from ..geom.polygon import contains_point
from .solver import SolveResult, solve
from .validators import InvalidEdit

LOGGER = logging.getLogger(__name__)

WALL_COLORS = (RED, BLUE, BLACK)


class Editor:
    """Mutable owner of a board's points, walls and derived rooms.

    Args:
        board: Optional board to start from.
        policy: What to do with start/goal flags that leave every room.
    """

    def __init__(self, board: Optional[Board] = None, policy: FlagPolicy = FlagPolicy.DROP):
        self.policy = policy
        self.points: Dict[str, Point] = dict(board.points) if board else {}
        self.walls: Dict[str, Wall] = dict(board.walls) if board else {}
        self.rooms: Dict[str, Room] = dict(board.rooms) if board else {}
        self._next_point = len(self.points) + 1
        self._next_wall = len(self.walls) + 1
        if board is not None and not self.rooms:
            self.recalculate_rooms()

    # ------------------------------------------------------------------ ids

    def _new_point_id(self) -> str:
        while f"p{self._next_point}" in self.points:
            self._next_point += 1
        point_id = f"p{self._next_point}"
        self._next_point += 1
        return point_id

    def _new_wall_id(self) -> str:
        while f"w{self._next_wall}" in self.walls:
            self._next_wall += 1
        wall_id = f"w{self._next_wall}"
        self._next_wall += 1
        return wall_id

    # -------------------------------------------------------------- geometry

    def recalculate_rooms(self) -> Dict[str, Room]:
        self.rooms = recompute_rooms(self.points, self.walls.values(), self.rooms, self.policy)
        return self.rooms

    def add_point(self, x: float, y: float, point_id: Optional[str] = None) -> Point:
        point_id = point_id or self._new_point_id()
        if point_id in self.points:
            raise InvalidEdit(f"Point {point_id} already exists")
        point = Point(id=point_id, x=float(x), y=float(y))
        self.points[point_id] = point
        return point

    def move_point(self, point_id: str, x: float, y: float) -> Point:
        """Drag a point to a new position and rebuild the rooms."""
        if point_id not in self.points:
            raise InvalidEdit(f"Unknown point: {point_id}")
        point = replace(self.points[point_id], x=float(x), y=float(y))
        self.points[point_id] = point
        self.recalculate_rooms()
        return point

    def remove_point(self, point_id: str) -> None:
        """Delete a point together with every wall touching it."""
        if point_id not in self.points:
            raise InvalidEdit(f"Unknown point: {point_id}")
        del self.points[point_id]
        dropped = [wid for wid, wall in self.walls.items() if point_id in wall.endpoints]
        for wall_id in dropped:
            del self.walls[wall_id]
        LOGGER.debug("Removed point %s and %d walls", point_id, len(dropped))
        self.recalculate_rooms()

    def add_wall(self, a: str, b: str, color: str = RED, wall_id: Optional[str] = None) -> Wall:
        for point_id in (a, b):
            if point_id not in self.points:
                raise InvalidEdit(f"Unknown point: {point_id}")
        if a == b:
            raise InvalidEdit("A wall needs two different points")
        if color not in WALL_COLORS:
            raise InvalidEdit(f"Unknown wall color: {color}")
        if any(wall.endpoints == frozenset((a, b)) for wall in self.walls.values()):
            raise InvalidEdit(f"Points {a} and {b} are already joined")

        wall_id = wall_id or self._new_wall_id()
        if wall_id in self.walls:
            raise InvalidEdit(f"Wall {wall_id} already exists")
        wall = Wall(id=wall_id, a=a, b=b, color=color)
        self.walls[wall_id] = wall
        self.recalculate_rooms()
        return wall

    def remove_wall(self, wall_id: str) -> None:
        if wall_id not in self.walls:
            raise InvalidEdit(f"Unknown wall: {wall_id}")
        del self.walls[wall_id]
        self.recalculate_rooms()

    # ---------------------------------------------------------------- colors

    def set_wall_color(self, wall_id: str, color: str) -> Wall:
        if wall_id not in self.walls:
            raise InvalidEdit(f"Unknown wall: {wall_id}")
        if color not in WALL_COLORS:
            raise InvalidEdit(f"Unknown wall color: {color}")
        # Colors do not change the faces, rooms stay as they are
        wall = replace(self.walls[wall_id], color=color)
        self.walls[wall_id] = wall
        return wall

    def cycle_wall_color(self, wall_id: str) -> Wall:
        """Red -> blue -> black -> red."""
        if wall_id not in self.walls:
            raise InvalidEdit(f"Unknown wall: {wall_id}")
        current = self.walls[wall_id].color
        index = WALL_COLORS.index(current) if current in WALL_COLORS else -1
        return self.set_wall_color(wall_id, WALL_COLORS[(index + 1) % len(WALL_COLORS)])

    # ------------------------------------------------------------ start/goal

    def _flag(self, flag: str, room_id: Optional[str]) -> None:
        try:
            self.rooms = with_flag(self.rooms, flag, room_id)
        except KeyError as e:
            raise InvalidEdit(f"Unknown room: {room_id}") from e

    def set_start(self, room_id: Optional[str]) -> None:
        self._flag("is_start", room_id)

    def set_goal(self, room_id: Optional[str]) -> None:
        self._flag("is_goal", room_id)

    def room_at(self, x: float, y: float) -> Optional[str]:
        """Room under a board-space position; the outer room if no other."""
        for room in self.rooms.values():
            if room.is_outside:
                continue
            ring = [self.points[pid].xy for pid in room.boundary]
            if contains_point(ring, (x, y)):
                return room.id
        return OUTER_ROOM_ID if OUTER_ROOM_ID in self.rooms else None

    # --------------------------------------------------------------- solving

    def to_board(self) -> Board:
        return Board(points=dict(self.points), walls=dict(self.walls), rooms=dict(self.rooms))

    def solve(self, with_path: bool = True) -> SolveResult:
        board = self.to_board()
        start, goal = board.start_room, board.goal_room
        result = solve(
            build_board_graph(board),
            start.id if start else None,
            goal.id if goal else None,
            with_path=with_path,
        )
        LOGGER.info("Solve: %s", "solvable" if result else result.reason)
        return result

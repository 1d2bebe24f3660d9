"""Core data models for the alternating-color maze.

This module defines the fundamental data structures used to represent
a maze, both as a freeform board (points, walls and the rooms derived
from them) and as a fixed room graph (rooms joined by colored passages).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

from ..config import BLACK, OUTER_ROOM_ID


@dataclass(frozen=True)
class Point:
    """Represents an editor point.

    Attributes:
        id: Unique identifier for the point.
        x: The x-coordinate of the point.
        y: The y-coordinate of the point.
    """

    id: str
    x: float
    y: float

    @property
    def xy(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Wall:
    """Represents an undirected colored wall between two points.

    Attributes:
        id: Unique identifier for the wall.
        a: ID of the first endpoint.
        b: ID of the second endpoint.
        color: One of "red", "blue" or "black". Black walls are impassable.
    """

    id: str
    a: str
    b: str
    color: str

    @property
    def endpoints(self) -> frozenset:
        return frozenset((self.a, self.b))

    @property
    def passable(self) -> bool:
        return self.color != BLACK

    def other(self, point_id: str) -> str:
        """Return the endpoint opposite to ``point_id``."""
        if point_id == self.a:
            return self.b
        if point_id == self.b:
            return self.a
        raise ValueError(f"Point {point_id} is not an endpoint of wall {self.id}")


@dataclass(frozen=True)
class EnclosedRoom:
    """A bounded face of the board.

    Attributes:
        id: Identifier, only valid until the next recomputation.
        boundary: Point IDs in the order the face walk visits them.
        area: Signed shoelace area; the sign gives the winding.
        centroid: Arithmetic mean of the boundary point coordinates.
        is_start: Whether the player starts in this room.
        is_goal: Whether this room is the goal.
    """

    id: str
    boundary: Tuple[str, ...]
    area: float
    centroid: Tuple[float, float]
    is_start: bool = False
    is_goal: bool = False

    @property
    def is_outside(self) -> bool:
        return False


@dataclass(frozen=True)
class OuterRoom:
    """The unbounded exterior face of the board.

    Its id never changes between recomputations.
    """

    boundary: Tuple[str, ...]
    area: float
    centroid: Tuple[float, float]
    is_start: bool = False
    is_goal: bool = False
    id: str = OUTER_ROOM_ID

    @property
    def is_outside(self) -> bool:
        return True


Room = Union[OuterRoom, EnclosedRoom]


@dataclass(frozen=True)
class Board:
    """A freeform maze as built in the editor.

    Attributes:
        points: Mapping of point ID to Point objects.
        walls: Mapping of wall ID to Wall objects.
        rooms: Mapping of room ID to rooms derived from points and walls.
    """

    points: Mapping[str, Point]
    walls: Mapping[str, Wall]
    rooms: Mapping[str, Room] = field(default_factory=dict)

    @property
    def start_room(self) -> Optional[Room]:
        return next((r for r in self.rooms.values() if r.is_start), None)

    @property
    def goal_room(self) -> Optional[Room]:
        return next((r for r in self.rooms.values() if r.is_goal), None)

    @property
    def outer_room(self) -> Optional[OuterRoom]:
        return next((r for r in self.rooms.values() if r.is_outside), None)


@dataclass(frozen=True)
class LevelRoom:
    """A room of a fixed room-graph level.

    Attributes:
        id: Unique identifier for the room.
        x: Drawing position of the room center.
        y: Drawing position of the room center.
        label: Optional text drawn on the room (e.g. "IN", "OUT").
    """

    id: str
    x: float
    y: float
    label: Optional[str] = None


@dataclass(frozen=True)
class Passage:
    """A colored wall seen as a connection between two rooms.

    Attributes:
        id: Unique identifier for the wall.
        a: ID of the room on one side.
        b: ID of the room on the other side.
        color: One of "red", "blue" or "black".
        coords: Optional drawing segment (x1, y1, x2, y2).
    """

    id: str
    a: str
    b: str
    color: str
    coords: Optional[Tuple[float, float, float, float]] = None


@dataclass(frozen=True)
class Level:
    """A fixed room-graph level (hand made or generated on a grid).

    Attributes:
        name: Human-readable name of the level.
        rooms: Mapping of room ID to LevelRoom objects.
        passages: Mapping of wall ID to Passage objects.
        start: ID of the start room.
        goal: ID of the goal room.
        pillars: Decorative corner positions.
    """

    name: str
    rooms: Mapping[str, LevelRoom]
    passages: Mapping[str, Passage]
    start: str
    goal: str
    pillars: Tuple[Tuple[float, float], ...] = ()


@dataclass(frozen=True)
class PlayerState:
    """Where the player is and which color was crossed last.

    Attributes:
        room: ID of the current room.
        last_color: Color of the most recently traversed wall, None before
            the first move.
    """

    room: str
    last_color: Optional[str] = None

"""Room derivation for freeform boards.

Rooms are never edited directly: every change to the points or walls
rebuilds them from scratch with :func:`recompute_rooms`. Start and goal
flags survive a rebuild by remembering where the flagged room was.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from enum import Enum
from typing import Dict, Iterable, Mapping, Optional, Tuple, Union

from ..config import OUTER_ROOM_ID, ROOM_ID_PREFIX
from ..geom.faces import extract_faces
from ..geom.polygon import contains_point, distance
from .model import EnclosedRoom, OuterRoom, Point, Room, Wall

LOGGER = logging.getLogger(__name__)

FLAGS = ("is_start", "is_goal")

# Either the outer room id or the centroid of the flagged enclosed room
Anchor = Union[str, Tuple[float, float]]


class FlagPolicy(str, Enum):
    """What to do with a flag whose remembered centroid left every room."""

    DROP = "drop"
    NEAREST = "nearest"


def flag_anchor(rooms: Mapping[str, Room], flag: str) -> Optional[Anchor]:
    """Where the room holding ``flag`` is, in a form that survives a rebuild."""
    for room in rooms.values():
        if getattr(room, flag):
            return OUTER_ROOM_ID if room.is_outside else room.centroid
    return None


def locate_anchor(
    anchor: Anchor,
    rooms: Dict[str, Room],
    points: Mapping[str, Point],
    policy: FlagPolicy = FlagPolicy.DROP,
) -> Optional[str]:
    """Find the room an anchor now belongs to, None if the flag must be dropped."""
    if anchor == OUTER_ROOM_ID:
        return OUTER_ROOM_ID if OUTER_ROOM_ID in rooms else None

    enclosed = [room for room in rooms.values() if not room.is_outside]
    for room in enclosed:
        ring = [points[pid].xy for pid in room.boundary]
        if contains_point(ring, anchor):
            return room.id

    if policy is FlagPolicy.NEAREST and enclosed:
        return min(enclosed, key=lambda room: distance(room.centroid, anchor)).id
    return None


def with_flag(rooms: Mapping[str, Room], flag: str, room_id: Optional[str]) -> Dict[str, Room]:
    """Return a copy of ``rooms`` where only ``room_id`` carries ``flag``.

    Passing ``None`` clears the flag everywhere.
    """
    if flag not in FLAGS:
        raise ValueError(f"Unknown room flag: {flag}")
    if room_id is not None and room_id not in rooms:
        raise KeyError(f"Unknown room: {room_id}")

    updated = {}
    for rid, room in rooms.items():
        wanted = rid == room_id
        updated[rid] = room if getattr(room, flag) == wanted else replace(room, **{flag: wanted})
    return updated


def recompute_rooms(
    points: Mapping[str, Point],
    walls: Iterable[Wall],
    previous_rooms: Optional[Mapping[str, Room]] = None,
    policy: FlagPolicy = FlagPolicy.DROP,
) -> Dict[str, Room]:
    """Rebuild the rooms of a board.

    Args:
        points: Mapping of point ID to Point objects.
        walls: Walls of the board.
        previous_rooms: Rooms before the edit; their start/goal flags are
            carried over to the rooms containing the old flagged centroids.
        policy: Fallback for flags whose centroid is inside no new room.

    Returns:
        Mapping of room ID to rooms. The face with the largest absolute
        area becomes the OuterRoom; the rest are EnclosedRoom objects with
        ids ``room_1``, ``room_2``, ... in discovery order.
    """
    faces = extract_faces(points, walls)
    if not faces:
        return {}

    # Bounded faces are walked counter-clockwise (positive area); on equal
    # areas, e.g. a lone cycle, the clockwise walk is the outer one
    outer_face = max(faces, key=lambda face: (abs(face.area), face.area < 0))
    rooms: Dict[str, Room] = {
        OUTER_ROOM_ID: OuterRoom(
            boundary=outer_face.boundary,
            area=outer_face.area,
            centroid=outer_face.centroid,
        )
    }
    counter = 0
    for face in faces:
        if face is outer_face:
            continue
        counter += 1
        room_id = f"{ROOM_ID_PREFIX}{counter}"
        rooms[room_id] = EnclosedRoom(
            id=room_id,
            boundary=face.boundary,
            area=face.area,
            centroid=face.centroid,
        )

    for flag in FLAGS:
        anchor = flag_anchor(previous_rooms or {}, flag)
        if anchor is None:
            continue
        target = locate_anchor(anchor, rooms, points, policy)
        if target is None:
            LOGGER.info("Dropping %s flag: no room contains %s", flag, anchor)
            continue
        rooms = with_flag(rooms, flag, target)

    LOGGER.debug("Recomputed %d rooms (outer area %.2f)", len(rooms), abs(outer_face.area))
    return rooms

"""Parser for maze level JSON files.

Two kinds of documents are understood:

* ``"kind": "graph"`` - fixed room-graph levels (hand made or generated),
  with rooms, passages between rooms, a start and a goal room.
* ``"kind": "board"`` - freeform editor boards, with points and walls.
  Rooms are not stored; they are recomputed on load. Start and goal are
  stored as anchors: ``"outside"`` or an ``[x, y]`` point inside the
  flagged room.
"""

import json
from pathlib import Path
from typing import Any, Dict, Union

from ..config import BLACK, BLUE, OUTER_ROOM_ID, RED
from ..core.model import Board, Level, LevelRoom, Passage, Point, Wall
from ..core.rooms import Anchor, locate_anchor, recompute_rooms, with_flag
from ..geom.polygon import interior_point

COLORS = (RED, BLUE, BLACK)


def _color(value: Any, owner: str) -> str:
    if value not in COLORS:
        raise ValueError(f"Invalid color for {owner}: {value!r}")
    return value


def _level_from_dict(data: Dict[str, Any]) -> Level:
    rooms = {}
    for room_id, room_data in data.get("rooms", {}).items():
        try:
            rooms[room_id] = LevelRoom(
                id=room_id,
                x=float(room_data["x"]),
                y=float(room_data["y"]),
                label=room_data.get("label"),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Invalid room data for {room_id}: {e}") from e

    passages = {}
    for wall_id, wall_data in data.get("passages", {}).items():
        try:
            a, b = wall_data["a"], wall_data["b"]
            coords = wall_data.get("coords")
            passages[wall_id] = Passage(
                id=wall_id,
                a=a,
                b=b,
                color=_color(wall_data.get("color"), wall_id),
                coords=tuple(float(c) for c in coords) if coords else None,
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Invalid passage data for {wall_id}: {e}") from e
        for room_id in (a, b):
            if room_id not in rooms:
                raise ValueError(f"Passage '{wall_id}' references nonexistent room '{room_id}'")

    for field in ("start", "goal"):
        if data.get(field) not in rooms:
            raise ValueError(f"Level {field} room {data.get(field)!r} is not a room of the level")

    return Level(
        name=data.get("name", "Untitled"),
        rooms=rooms,
        passages=passages,
        start=data["start"],
        goal=data["goal"],
        pillars=tuple((float(x), float(y)) for x, y in data.get("pillars", [])),
    )


def _anchor(value: Any, field: str) -> Anchor:
    """Validate a stored start/goal anchor: ``"outside"`` or ``[x, y]``."""
    if value == OUTER_ROOM_ID:
        return OUTER_ROOM_ID
    if (
        isinstance(value, list)
        and len(value) == 2
        and all(isinstance(c, (int, float)) and not isinstance(c, bool) for c in value)
    ):
        return (float(value[0]), float(value[1]))
    raise ValueError(f"Invalid {field} anchor: {value!r}")


def _board_from_dict(data: Dict[str, Any]) -> Board:
    points = {}
    for point_id, point_data in data.get("points", {}).items():
        try:
            points[point_id] = Point(id=point_id, x=float(point_data["x"]), y=float(point_data["y"]))
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Invalid point data for {point_id}: {e}") from e

    walls = {}
    for wall_id, wall_data in data.get("walls", {}).items():
        try:
            walls[wall_id] = Wall(
                id=wall_id,
                a=wall_data["a"],
                b=wall_data["b"],
                color=_color(wall_data.get("color"), wall_id),
            )
        except KeyError as e:
            raise ValueError(f"Invalid wall data for {wall_id}: missing {e}") from e
        for point_id in (walls[wall_id].a, walls[wall_id].b):
            if point_id not in points:
                raise ValueError(f"Wall '{wall_id}' references nonexistent point '{point_id}'")

    rooms = recompute_rooms(points, walls.values())
    for field, flag in (("start", "is_start"), ("goal", "is_goal")):
        anchor = data.get(field)
        if anchor is None:
            continue
        anchor = _anchor(anchor, field)
        room_id = locate_anchor(anchor, rooms, points)
        if room_id is not None:
            rooms = with_flag(rooms, flag, room_id)

    return Board(points=points, walls=walls, rooms=rooms)


def level_from_dict(data: Dict[str, Any]) -> Union[Level, Board]:
    """Build a Level or a Board from decoded JSON.

    Raises:
        ValueError: If the data is invalid or malformed.
    """
    kind = data.get("kind")
    if kind == "graph":
        return _level_from_dict(data)
    if kind == "board":
        return _board_from_dict(data)
    raise ValueError(f"Unknown level kind: {kind!r}")


def level_to_dict(level: Union[Level, Board]) -> Dict[str, Any]:
    """Convert a Level or a Board to a JSON-serializable dictionary."""
    if isinstance(level, Level):
        return {
            "kind": "graph",
            "name": level.name,
            "rooms": {
                room_id: {"x": room.x, "y": room.y, "label": room.label}
                for room_id, room in level.rooms.items()
            },
            "passages": {
                wall_id: {
                    "a": p.a,
                    "b": p.b,
                    "color": p.color,
                    "coords": list(p.coords) if p.coords else None,
                }
                for wall_id, p in level.passages.items()
            },
            "start": level.start,
            "goal": level.goal,
            "pillars": [list(p) for p in level.pillars],
        }

    def anchor(flag: str):
        room = next((r for r in level.rooms.values() if getattr(r, flag)), None)
        if room is None:
            return None
        if room.is_outside:
            return OUTER_ROOM_ID
        return list(interior_point([level.points[pid].xy for pid in room.boundary]))

    return {
        "kind": "board",
        "points": {pid: {"x": p.x, "y": p.y} for pid, p in level.points.items()},
        "walls": {wid: {"a": w.a, "b": w.b, "color": w.color} for wid, w in level.walls.items()},
        "start": anchor("is_start"),
        "goal": anchor("is_goal"),
    }


def load_level(path: str) -> Union[Level, Board]:
    """Load a maze from a JSON file.

    Args:
        path: Path to the JSON file containing level data.

    Returns:
        Level for room-graph documents, Board for freeform boards.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the JSON data is invalid or malformed.
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    with open(file_path, encoding="utf-8") as f:
        data = json.load(f)

    return level_from_dict(data)


def save_level(level: Union[Level, Board], output_path: str) -> None:
    """Save a Level or Board to a JSON file, creating parent directories."""
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(level_to_dict(level), f, indent=2, ensure_ascii=False)

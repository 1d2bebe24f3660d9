import pytest

from altmaze.config import OUTER_ROOM_ID
from altmaze.core.model import EnclosedRoom, OuterRoom
from altmaze.core.rooms import FlagPolicy, recompute_rooms, with_flag
from altmaze.engine.editor import Editor


def test_single_outer_room_with_largest_area(domino_editor):
    rooms = domino_editor.rooms
    outer = [room for room in rooms.values() if room.is_outside]

    assert len(outer) == 1
    assert isinstance(outer[0], OuterRoom)
    assert outer[0].id == OUTER_ROOM_ID
    assert abs(outer[0].area) == max(abs(room.area) for room in rooms.values())
    assert sorted(rooms) == [OUTER_ROOM_ID, "room_1", "room_2"]


def test_enclosed_rooms_are_proper_polygons(domino_editor):
    enclosed = [room for room in domino_editor.rooms.values() if not room.is_outside]

    assert len(enclosed) == 2
    for room in enclosed:
        assert isinstance(room, EnclosedRoom)
        assert len(set(room.boundary)) >= 3
        assert room.area != 0


def test_lone_cycle_picks_clockwise_walk_as_outer(square):
    points, walls = square
    rooms = recompute_rooms(points, walls)

    assert rooms[OUTER_ROOM_ID].area < 0
    assert rooms["room_1"].area > 0


def test_no_walls_no_rooms(square):
    points, _ = square
    assert recompute_rooms(points, []) == {}


def test_recompute_is_idempotent(domino_editor):
    points, walls = domino_editor.points, list(domino_editor.walls.values())
    first = recompute_rooms(points, walls)
    second = recompute_rooms(points, walls)

    assert {rid: r.boundary for rid, r in first.items()} == {rid: r.boundary for rid, r in second.items()}


def test_flags_follow_dragged_point(domino_editor):
    editor = domino_editor
    left, right = editor.room_at(5, 5), editor.room_at(15, 5)
    editor.set_start(left)
    editor.set_goal(right)

    editor.move_point("d", 22, 12)

    goal = editor.to_board().goal_room
    start = editor.to_board().start_room
    assert start is not None and start.id == editor.room_at(5, 5)
    assert goal is not None and goal.id == editor.room_at(15, 5)
    assert goal.centroid == pytest.approx((15.5, 5.5))


def test_flag_dropped_when_room_opens(domino_editor):
    editor = domino_editor
    editor.set_start(editor.room_at(5, 5))

    editor.remove_wall("w6")

    assert editor.to_board().start_room is None
    assert editor.room_at(5, 5) == OUTER_ROOM_ID


def test_nearest_policy_keeps_flag(domino_editor):
    editor = Editor(domino_editor.to_board(), policy=FlagPolicy.NEAREST)
    editor.set_start(editor.room_at(5, 5))

    editor.remove_wall("w6")

    assert editor.to_board().start_room.id == editor.room_at(15, 5)


def test_outer_flag_is_kept(domino_editor):
    editor = domino_editor
    editor.set_goal(OUTER_ROOM_ID)

    editor.add_point(30, 0, point_id="g")
    editor.add_wall("c", "g", "blue")

    assert editor.to_board().goal_room.id == OUTER_ROOM_ID


def test_with_flag_moves_flag(domino_editor):
    rooms = with_flag(domino_editor.rooms, "is_start", "room_1")
    rooms = with_flag(rooms, "is_start", "room_2")

    assert [rid for rid, room in rooms.items() if room.is_start] == ["room_2"]
    assert not any(room.is_start for room in with_flag(rooms, "is_start", None).values())


def test_with_flag_rejects_unknown_room(domino_editor):
    with pytest.raises(KeyError):
        with_flag(domino_editor.rooms, "is_goal", "room_99")

import json

import pytest

from altmaze.config import OUTER_ROOM_ID
from altmaze.core.model import Board, Level
from altmaze.engine.editor import Editor
from altmaze.io.parser import level_from_dict, level_to_dict, load_level, save_level
from altmaze.levels import hand_drawn_level


def test_graph_level_file_round_trip(tmp_path):
    level = hand_drawn_level()
    path = tmp_path / "levels" / "hand.json"
    save_level(level, str(path))

    loaded = load_level(str(path))
    assert isinstance(loaded, Level)
    assert loaded == level


def test_board_keeps_start_and_goal(domino_editor, tmp_path):
    editor = domino_editor
    editor.set_start(editor.room_at(5, 5))
    editor.set_goal(OUTER_ROOM_ID)
    path = tmp_path / "board.json"
    save_level(editor.to_board(), str(path))

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["kind"] == "board"
    x, y = data["start"]
    assert 0 < x < 10 and 0 < y < 10
    assert data["goal"] == OUTER_ROOM_ID

    board = load_level(str(path))
    assert isinstance(board, Board)
    assert board.start_room.centroid == (5.0, 5.0)
    assert board.goal_room.id == OUTER_ROOM_ID
    assert len(board.rooms) == 3


def test_non_convex_room_keeps_start(tmp_path):
    # U-shaped room: its vertex centroid (1.5, 1.75) lies in the notch
    editor = Editor()
    ring = [("a", 0, 0), ("b", 3, 0), ("c", 3, 3), ("d", 2, 3), ("e", 2, 1), ("f", 1, 1), ("g", 1, 3), ("h", 0, 3)]
    for pid, x, y in ring:
        editor.add_point(x, y, point_id=pid)
    for (a, _, _), (b, _, _) in zip(ring, ring[1:] + ring[:1]):
        editor.add_wall(a, b)
    room_id = editor.room_at(0.5, 0.5)
    assert editor.rooms[room_id].centroid == pytest.approx((1.5, 1.75))
    editor.set_start(room_id)

    path = tmp_path / "u.json"
    save_level(editor.to_board(), str(path))
    x, y = json.loads(path.read_text(encoding="utf-8"))["start"]
    assert not (1 <= x <= 2 and 1 <= y <= 3)

    board = load_level(str(path))
    assert board.start_room is not None
    assert set(board.start_room.boundary) == {pid for pid, _, _ in ring}


def test_board_without_flags():
    board = level_from_dict(
        {
            "kind": "board",
            "points": {"a": {"x": 0, "y": 0}, "b": {"x": 4, "y": 0}, "c": {"x": 0, "y": 3}},
            "walls": {
                "w1": {"a": "a", "b": "b", "color": "red"},
                "w2": {"a": "b", "b": "c", "color": "blue"},
                "w3": {"a": "c", "b": "a", "color": "black"},
            },
        }
    )
    assert board.start_room is None
    assert board.rooms["room_1"].area == pytest.approx(6.0)
    assert level_to_dict(board)["start"] is None


@pytest.mark.parametrize(
    "data, message",
    [
        ({"kind": "maze"}, "Unknown level kind"),
        (
            {"kind": "board", "points": {"a": {"x": 0, "y": 0}}, "walls": {"w1": {"a": "a", "b": "q", "color": "red"}}},
            "nonexistent point",
        ),
        (
            {"kind": "board", "points": {"a": {"x": 0}}, "walls": {}},
            "Invalid point data for a",
        ),
        (
            {
                "kind": "graph",
                "rooms": {"0": {"x": 0, "y": 0}},
                "passages": {"w1": {"a": "0", "b": "9", "color": "red"}},
                "start": "0",
                "goal": "0",
            },
            "nonexistent room",
        ),
        (
            {
                "kind": "graph",
                "rooms": {"0": {"x": 0, "y": 0}, "1": {"x": 1, "y": 0}},
                "passages": {"w1": {"a": "0", "b": "1", "color": "green"}},
                "start": "0",
                "goal": "1",
            },
            "Invalid color",
        ),
        (
            {"kind": "graph", "rooms": {"0": {"x": 0, "y": 0}}, "passages": {}, "start": "0", "goal": "7"},
            "goal room",
        ),
        (
            {"kind": "board", "points": {}, "walls": {}, "start": "room_1"},
            "Invalid start anchor",
        ),
        (
            {"kind": "board", "points": {}, "walls": {}, "goal": [1]},
            "Invalid goal anchor",
        ),
    ],
)
def test_malformed_levels(data, message):
    with pytest.raises(ValueError, match=message):
        level_from_dict(data)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_level(str(tmp_path / "nope.json"))

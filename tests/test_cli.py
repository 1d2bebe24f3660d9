import json

from typer.testing import CliRunner

from altmaze.cli import app
from altmaze.io.parser import load_level

runner = CliRunner()


def _write(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


def test_solve_builtin():
    result = runner.invoke(app, ["solve", "--builtin", "hand-drawn"])
    assert result.exit_code == 0
    assert "Solution in 4 moves" in result.output


def test_solve_unreachable(tmp_path):
    level = _write(
        tmp_path / "stuck.json",
        {
            "kind": "graph",
            "rooms": {"s": {"x": 0, "y": 0}, "a": {"x": 1, "y": 0}, "g": {"x": 2, "y": 0}},
            "passages": {
                "w1": {"a": "s", "b": "a", "color": "red"},
                "w2": {"a": "a", "b": "g", "color": "red"},
            },
            "start": "s",
            "goal": "g",
        },
    )
    result = runner.invoke(app, ["solve", "--level", level])
    assert result.exit_code == 1
    assert "cannot be reached" in result.output


def test_play_winning_moves():
    result = runner.invoke(app, ["play", "--builtin", "hand-drawn", "3", "5", "4", "6", "5"])
    assert result.exit_code == 0
    # The second move repeats red and is skipped
    assert "pick the other color" in result.output
    assert "Congratulations" in result.output


def test_play_unfinished():
    result = runner.invoke(app, ["play", "--builtin", "hand-drawn", "1"])
    assert result.exit_code == 1
    assert "Stopped in room 1" in result.output


def test_generate_writes_level(tmp_path):
    out = tmp_path / "grid.json"
    result = runner.invoke(app, ["generate", "--out", str(out), "--cols", "3", "--rows", "2", "--seed", "4"])

    assert result.exit_code == 0
    level = load_level(str(out))
    assert len(level.rooms) == 6


def test_rooms_of_board(tmp_path):
    board = _write(
        tmp_path / "board.json",
        {
            "kind": "board",
            "points": {"a": {"x": 0, "y": 0}, "b": {"x": 4, "y": 0}, "c": {"x": 0, "y": 3}},
            "walls": {
                "w1": {"a": "a", "b": "b", "color": "red"},
                "w2": {"a": "b", "b": "c", "color": "blue"},
                "w3": {"a": "c", "b": "a", "color": "black"},
            },
            "start": [1.0, 1.0],
        },
    )
    result = runner.invoke(app, ["rooms", "--level", board])

    assert result.exit_code == 0
    assert "outside" in result.output
    assert "room_1" in result.output
    assert "start" in result.output


def test_missing_level_file(tmp_path):
    result = runner.invoke(app, ["info", "--level", str(tmp_path / "missing.json")])
    assert result.exit_code == 1
    assert "File not found" in result.output


def test_info_builtin():
    result = runner.invoke(app, ["info"])
    assert result.exit_code == 0
    assert "Rooms: 8" in result.output

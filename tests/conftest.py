import networkx as nx
import pytest

from altmaze.core.model import Point, Wall
from altmaze.engine.editor import Editor


@pytest.fixture
def make_graph():
    """Build a room multigraph from (wall_id, room_a, room_b, color) tuples."""

    def _make(edges):
        G = nx.MultiGraph()
        for wall_id, a, b, color in edges:
            G.add_edge(a, b, key=wall_id, wall_id=wall_id, color=color)
        return G

    return _make


@pytest.fixture
def square():
    """Points and walls of a 10x10 square."""
    points = {
        "a": Point("a", 0, 0),
        "b": Point("b", 10, 0),
        "c": Point("c", 10, 10),
        "d": Point("d", 0, 10),
    }
    walls = [
        Wall("w1", "a", "b", "red"),
        Wall("w2", "b", "c", "blue"),
        Wall("w3", "c", "d", "red"),
        Wall("w4", "d", "a", "blue"),
    ]
    return points, walls


@pytest.fixture
def domino_editor():
    """Two 10x10 squares side by side sharing the black wall b-e.

        f---e---d
        |   |   |
        a---b---c
    """
    editor = Editor()
    for pid, x, y in [("a", 0, 0), ("b", 10, 0), ("c", 20, 0), ("d", 20, 10), ("e", 10, 10), ("f", 0, 10)]:
        editor.add_point(x, y, point_id=pid)
    editor.add_wall("a", "b", "red")  # w1
    editor.add_wall("b", "c", "red")  # w2
    editor.add_wall("c", "d", "blue")  # w3
    editor.add_wall("d", "e", "red")  # w4
    editor.add_wall("e", "f", "red")  # w5
    editor.add_wall("f", "a", "red")  # w6
    editor.add_wall("b", "e", "black")  # w7
    return editor

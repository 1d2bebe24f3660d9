"""Built-in levels."""

from __future__ import annotations

from typing import List

from .config import BLUE, GOAL_LABEL, RED, START_LABEL
from .core.model import Level, LevelRoom, Passage

# (room_a, room_b, color, drawing segment)
_HAND_DRAWN_WALLS = [
    ("0", "1", BLUE, (400, 650, 400, 500)),
    ("0", "3", RED, (400, 500, 600, 500)),
    ("1", "2", BLUE, (200, 650, 200, 500)),
    ("1", "4", RED, (200, 500, 400, 500)),
    ("3", "4", BLUE, (400, 500, 400, 200)),
    ("3", "5", RED, (400, 200, 600, 200)),
    ("4", "7", BLUE, (200, 500, 200, 200)),
    ("2", "7", BLUE, (50, 400, 200, 500)),
    ("5", "6", BLUE, (400, 200, 400, 50)),
    ("4", "6", RED, (200, 200, 400, 200)),
    ("6", "7", RED, (200, 200, 200, 50)),
]


def hand_drawn_level() -> Level:
    """Eight rooms copied from a hand drawing; start bottom right, goal top right."""
    rooms = {
        "0": LevelRoom("0", 500, 600, START_LABEL),
        "1": LevelRoom("1", 300, 600),
        "2": LevelRoom("2", 100, 550),
        "3": LevelRoom("3", 500, 350),
        "4": LevelRoom("4", 300, 350),
        "5": LevelRoom("5", 500, 100, GOAL_LABEL),
        "6": LevelRoom("6", 300, 100),
        "7": LevelRoom("7", 100, 250),
    }
    passages = {}
    for i, (a, b, color, coords) in enumerate(_HAND_DRAWN_WALLS, start=1):
        passages[f"w{i}"] = Passage(id=f"w{i}", a=a, b=b, color=color, coords=coords)

    pillars = (
        (400, 650), (400, 500), (600, 500),
        (200, 650), (200, 500), (50, 400),
        (400, 200), (600, 200), (200, 200),
        (400, 50), (200, 50),
    )
    return Level(
        name="Level 1: Hand drawn",
        rooms=rooms,
        passages=passages,
        start="0",
        goal="5",
        pillars=pillars,
    )


BUILTIN_LEVELS = {
    "hand-drawn": hand_drawn_level,
}


def list_levels() -> List[str]:
    return sorted(BUILTIN_LEVELS)


def get_level(name: str) -> Level:
    try:
        return BUILTIN_LEVELS[name]()
    except KeyError:
        available = ", ".join(list_levels())
        raise ValueError(f"Unknown level '{name}'. Available: {available}") from None

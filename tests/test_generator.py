import pytest

from altmaze.config import GOAL_LABEL, START_LABEL
from altmaze.core.topology import build_level_graph
from altmaze.engine.generator import generate_grid_level
from altmaze.engine.solver import is_solvable


def test_default_grid_shape():
    level = generate_grid_level(seed=1)

    assert len(level.rooms) == 20
    # 3 horizontal walls per row, 4 vertical walls per row boundary
    assert len(level.passages) == 3 * 5 + 4 * 4
    assert len(level.pillars) == 5 * 6
    assert (level.start, level.goal) == ("19", "0")
    assert level.rooms["19"].label == START_LABEL
    assert level.rooms["0"].label == GOAL_LABEL
    assert all(p.color in ("red", "blue") for p in level.passages.values())


def test_same_seed_same_level():
    first = generate_grid_level(seed=5)
    second = generate_grid_level(seed=5)
    assert first == second


@pytest.mark.parametrize("cols, rows", [(2, 1), (1, 6), (3, 3), (8, 6)])
@pytest.mark.parametrize("seed", [0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 42, 99, 12345])
def test_generated_levels_are_solvable(cols, rows, seed):
    level = generate_grid_level(cols=cols, rows=rows, seed=seed)
    assert is_solvable(build_level_graph(level), level.start, level.goal)


def test_wall_coordinates_between_cells():
    level = generate_grid_level(cols=2, rows=1, seed=0, width=300, height=200, padding=50)
    (passage,) = level.passages.values()

    # Cells are 100 wide: the shared wall is the vertical line x = 150
    assert passage.coords == (150, 50, 150, 150)


@pytest.mark.parametrize("cols, rows", [(0, 3), (1, 1), (-2, 4)])
def test_too_small_grid(cols, rows):
    with pytest.raises(ValueError):
        generate_grid_level(cols=cols, rows=rows)

"""Random grid level generator.

Rooms are the cells of a ``cols x rows`` grid and every pair of
horizontally or vertically adjacent cells shares one wall. A breadth-first
search with shuffled neighbour order picks a route from the bottom-right
cell to the top-left one; the route is colored alternately so the level
is always solvable, and every other wall gets a random color.
"""

from __future__ import annotations

import logging
import random
from collections import deque
from typing import Dict, List, Optional, Tuple

from ..config import (
    BLUE,
    CANVAS_HEIGHT,
    CANVAS_PADDING,
    CANVAS_WIDTH,
    GOAL_LABEL,
    GRID_COLS,
    GRID_ROWS,
    RED,
    START_LABEL,
)
from ..core.model import Level, LevelRoom, Passage

LOGGER = logging.getLogger(__name__)


def _route(
    adjacency: Dict[int, List[Tuple[int, int]]], start: int, goal: int, rng: random.Random
) -> List[int]:
    """Edge indices of a BFS route; neighbour order is shuffled for variety."""
    queue = deque([(start, [])])
    visited = {start}

    while queue:
        cell, path = queue.popleft()
        if cell == goal:
            return path
        neighbours = list(adjacency[cell])
        rng.shuffle(neighbours)
        for other, edge_index in neighbours:
            if other not in visited:
                visited.add(other)
                queue.append((other, path + [edge_index]))

    raise RuntimeError(f"Grid cells {start} and {goal} are not connected")


def generate_grid_level(
    cols: int = GRID_COLS,
    rows: int = GRID_ROWS,
    seed: Optional[int] = None,
    width: float = CANVAS_WIDTH,
    height: float = CANVAS_HEIGHT,
    padding: float = CANVAS_PADDING,
) -> Level:
    """Generate a solvable grid level.

    Args:
        cols: Number of cell columns.
        rows: Number of cell rows.
        seed: Seed for reproducible levels.
        width: Canvas width used for drawing coordinates.
        height: Canvas height used for drawing coordinates.
        padding: Canvas margin around the grid.

    Returns:
        Level starting in the bottom-right cell with the goal top-left.

    Raises:
        ValueError: If the grid is smaller than two cells.
    """
    if cols < 1 or rows < 1 or cols * rows < 2:
        raise ValueError(f"Grid must have at least two cells, got {cols}x{rows}")

    rng = random.Random(seed)
    cell_w = (width - padding * 2) / cols
    cell_h = (height - padding * 2) / rows

    def center(index: int) -> Tuple[float, float]:
        r, c = divmod(index, cols)
        return (padding + c * cell_w + cell_w / 2, padding + r * cell_h + cell_h / 2)

    def wall_coords(i: int, j: int) -> Tuple[float, float, float, float]:
        (x1, y1), (x2, y2) = center(i), center(j)
        if y1 == y2:
            x = max(x1, x2) - cell_w / 2
            return (x, y1 - cell_h / 2, x, y1 + cell_h / 2)
        y = max(y1, y2) - cell_h / 2
        return (x1 - cell_w / 2, y, x1 + cell_w / 2, y)

    start = cols * rows - 1
    goal = 0

    edges: List[Tuple[int, int]] = []
    for index in range(cols * rows):
        r, c = divmod(index, cols)
        if c < cols - 1:
            edges.append((index, index + 1))
        if r < rows - 1:
            edges.append((index, index + cols))

    adjacency: Dict[int, List[Tuple[int, int]]] = {i: [] for i in range(cols * rows)}
    for edge_index, (u, v) in enumerate(edges):
        adjacency[u].append((v, edge_index))
        adjacency[v].append((u, edge_index))

    colors: Dict[int, str] = {}
    color = rng.choice((RED, BLUE))
    for edge_index in _route(adjacency, start, goal, rng):
        colors[edge_index] = color
        color = BLUE if color == RED else RED
    LOGGER.debug("Solution route uses %d walls", len(colors))

    passages = {}
    for edge_index, (u, v) in enumerate(edges):
        wall_id = f"w{edge_index}"
        passages[wall_id] = Passage(
            id=wall_id,
            a=str(u),
            b=str(v),
            color=colors.get(edge_index) or rng.choice((RED, BLUE)),
            coords=wall_coords(u, v),
        )

    labels = {start: START_LABEL, goal: GOAL_LABEL}
    rooms = {}
    for index in range(cols * rows):
        x, y = center(index)
        rooms[str(index)] = LevelRoom(id=str(index), x=x, y=y, label=labels.get(index))

    pillars = tuple(
        (padding + c * cell_w, padding + r * cell_h)
        for r in range(rows + 1)
        for c in range(cols + 1)
    )

    return Level(
        name=f"Generated {cols}x{rows}",
        rooms=rooms,
        passages=passages,
        start=str(start),
        goal=str(goal),
        pillars=pillars,
    )

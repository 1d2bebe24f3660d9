"""Alternating-color path solver.

The search runs over (room, last color) states rather than rooms: the same
room entered through a red wall and through a blue wall allows different
next moves. Only the origin has no last color, so there are at most
``2 x |rooms| + 1`` states and plain breadth-first search is enough. It
yields a path with the fewest walls.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import networkx as nx

from ..core.model import PlayerState
from .validators import is_legal_color

LOGGER = logging.getLogger(__name__)

NO_START = "No start room defined"
NO_GOAL = "No goal room defined"
UNREACHABLE = "The goal cannot be reached"


@dataclass(frozen=True)
class Move:
    """One legal step out of a room.

    Attributes:
        wall_id: Wall crossed.
        room: Room entered.
        color: Color of the wall, which becomes the new last color.
    """

    wall_id: str
    room: str
    color: str


@dataclass(frozen=True)
class SolveResult:
    """Outcome of a solve.

    Attributes:
        solvable: Whether the goal is reachable.
        walls: Wall ids crossed from start to goal (empty unless requested).
        rooms: Rooms visited, start and goal included (empty unless requested).
        colors: Colors crossed, one per wall.
        reason: Why the goal was not reached, None on success.
    """

    solvable: bool
    walls: Tuple[str, ...] = ()
    rooms: Tuple[str, ...] = ()
    colors: Tuple[str, ...] = ()
    reason: Optional[str] = None

    def __bool__(self) -> bool:
        return self.solvable


def legal_moves(graph: nx.MultiGraph, state: PlayerState) -> List[Move]:
    """List the moves the alternation rule allows from ``state``.

    Args:
        graph: Room graph with ``color`` on every edge.
        state: Current room and last crossed color.

    Returns:
        Moves in edge order. Walls with the same room on both sides are ignored.
    """
    moves = []
    for _, other, key, data in graph.edges(state.room, keys=True, data=True):
        if other == state.room:
            continue
        if is_legal_color(data["color"], state.last_color):
            moves.append(Move(wall_id=data.get("wall_id", key), room=other, color=data["color"]))
    return moves


def _unwind(
    state: PlayerState, parents: Dict[PlayerState, Optional[Tuple[PlayerState, str]]]
) -> SolveResult:
    walls: List[str] = []
    rooms: List[str] = [state.room]
    colors: List[str] = []

    link = parents[state]
    while link is not None:
        previous, wall_id = link
        walls.append(wall_id)
        colors.append(state.last_color)
        rooms.append(previous.room)
        state = previous
        link = parents[state]

    return SolveResult(
        solvable=True,
        walls=tuple(reversed(walls)),
        rooms=tuple(reversed(rooms)),
        colors=tuple(reversed(colors)),
    )


def solve(
    graph: nx.MultiGraph,
    start: Optional[str],
    goal: Optional[str],
    last_color: Optional[str] = None,
    with_path: bool = True,
) -> SolveResult:
    """Search for a shortest alternating path from ``start`` to ``goal``.

    Args:
        graph: Room graph (board, grid or fixed level form).
        start: Room the player is in, None if no start was set.
        goal: Goal room, None if no goal was set.
        last_color: Color already crossed, to solve from a game in progress.
        with_path: Whether to report walls, rooms and colors of the path.

    Returns:
        SolveResult; unsolvable results carry a reason instead of raising.
    """
    if start is None:
        return SolveResult(solvable=False, reason=NO_START)
    if goal is None:
        return SolveResult(solvable=False, reason=NO_GOAL)
    for room_id in (start, goal):
        if room_id not in graph:
            return SolveResult(solvable=False, reason=f"Unknown room: {room_id}")

    origin = PlayerState(room=start, last_color=last_color)
    parents: Dict[PlayerState, Optional[Tuple[PlayerState, str]]] = {origin: None}
    queue = deque([origin])

    while queue:
        state = queue.popleft()
        if state.room == goal:
            LOGGER.debug("Goal %s reached after exploring %d states", goal, len(parents))
            if not with_path:
                return SolveResult(solvable=True)
            return _unwind(state, parents)

        for move in legal_moves(graph, state):
            successor = PlayerState(room=move.room, last_color=move.color)
            if successor in parents:
                continue
            parents[successor] = (state, move.wall_id)
            queue.append(successor)

    LOGGER.debug("Goal %s unreachable from %s (%d states)", goal, start, len(parents))
    return SolveResult(solvable=False, reason=UNREACHABLE)


def is_solvable(graph: nx.MultiGraph, start: Optional[str], goal: Optional[str]) -> bool:
    """Boolean shortcut for :func:`solve` without path reconstruction."""
    return solve(graph, start, goal, with_path=False).solvable

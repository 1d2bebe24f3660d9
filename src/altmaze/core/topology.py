"""Topology analysis for mazes.

This module turns every maze representation into the same NetworkX
multigraph: rooms are nodes and each wall separating two rooms is an edge
keyed by the wall id and carrying its color. Parallel edges are kept,
since two rooms may share several walls of different colors.
"""

from __future__ import annotations

import logging
from typing import Dict, List

import networkx as nx

from ..geom.faces import boundary_edges
from .model import Board, Level

LOGGER = logging.getLogger(__name__)


def build_wall_adjacency(board: Board) -> Dict[str, List[str]]:
    """Map each wall id to the rooms whose boundary walks along it.

    Args:
        board: Board with rooms already computed.

    Returns:
        Dictionary mapping wall_id to the list of adjacent room ids, in
        room order. A wall with the same room on both sides lists it once.
    """
    room_edges = {room_id: boundary_edges(room.boundary) for room_id, room in board.rooms.items()}

    adjacency = {}
    for wall_id, wall in board.walls.items():
        adjacency[wall_id] = [
            room_id for room_id, edges in room_edges.items() if wall.endpoints in edges
        ]
    return adjacency


def build_board_graph(board: Board) -> nx.MultiGraph:
    """Build the room graph of a freeform board.

    Args:
        board: Board with rooms already computed.

    Returns:
        MultiGraph with one node per room and one edge per wall that
        separates two different rooms.
    """
    G = nx.MultiGraph()

    for room_id, room in board.rooms.items():
        G.add_node(room_id, outside=room.is_outside, centroid=room.centroid)

    for wall_id, rooms in build_wall_adjacency(board).items():
        if len(rooms) < 2:
            # Dangling wall: both sides belong to the same room
            continue
        if len(rooms) > 2:
            LOGGER.warning("Wall %s borders %d rooms, using %s", wall_id, len(rooms), rooms[:2])
        wall = board.walls[wall_id]
        G.add_edge(rooms[0], rooms[1], key=wall_id, wall_id=wall_id, color=wall.color)

    return G


def build_level_graph(level: Level) -> nx.MultiGraph:
    """Build the room graph of a fixed room-graph level.

    Args:
        level: Level whose passages list room-to-room adjacency directly.

    Returns:
        MultiGraph with one node per room and one edge per passage.

    Raises:
        ValueError: If a passage references an unknown room.
    """
    G = nx.MultiGraph()

    for room_id, room in level.rooms.items():
        G.add_node(room_id, label=room.label, position=(room.x, room.y))

    for passage in level.passages.values():
        for room_id in (passage.a, passage.b):
            if room_id not in level.rooms:
                raise ValueError(f"Passage {passage.id} references unknown room {room_id}")
        G.add_edge(passage.a, passage.b, key=passage.id, wall_id=passage.id, color=passage.color)

    return G

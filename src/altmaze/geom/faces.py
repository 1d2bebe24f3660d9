"""Face extraction for freeform boards.

Walls drawn in the editor induce a planar subdivision. Its faces are
found purely from the rotation system at each point: incident edges are
sorted by angle, and a face walk leaves every point along the edge that
precedes the edge it arrived on, in angular order. No segment
intersections are computed.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Set, Tuple

from ..config import SAFETY_FACTOR
from ..core.model import Point, Wall
from .polygon import signed_area, vertex_centroid

LOGGER = logging.getLogger(__name__)

DirectedEdge = Tuple[str, str]


@dataclass(frozen=True)
class Face:
    """A closed face walk.

    Attributes:
        boundary: Point IDs in walk order, first point not repeated.
        area: Signed shoelace area of the walk.
        centroid: Arithmetic mean of the boundary coordinates.
    """

    boundary: Tuple[str, ...]
    area: float
    centroid: Tuple[float, float]


def build_rotation_system(
    points: Mapping[str, Point], walls: Iterable[Wall]
) -> Dict[str, List[str]]:
    """Map every point to its neighbours sorted by edge angle (ascending).

    Walls with unknown endpoints, self loops and repeated point pairs are
    skipped. Points without walls do not appear in the result.
    """
    incident: Dict[str, List[Tuple[float, str]]] = {}
    seen_pairs: Set[frozenset] = set()

    for wall in walls:
        if wall.a not in points or wall.b not in points:
            LOGGER.warning("Skipping wall %s: unknown endpoint", wall.id)
            continue
        if wall.a == wall.b:
            LOGGER.warning("Skipping wall %s: both ends on point %s", wall.id, wall.a)
            continue
        if wall.endpoints in seen_pairs:
            LOGGER.warning("Skipping wall %s: points already joined", wall.id)
            continue
        seen_pairs.add(wall.endpoints)

        pa, pb = points[wall.a], points[wall.b]
        incident.setdefault(wall.a, []).append((math.atan2(pb.y - pa.y, pb.x - pa.x), wall.b))
        incident.setdefault(wall.b, []).append((math.atan2(pa.y - pb.y, pa.x - pb.x), wall.a))

    return {
        point_id: [neighbour for _, neighbour in sorted(edges)]
        for point_id, edges in incident.items()
    }


def _next_edge(rotation: Mapping[str, List[str]], edge: DirectedEdge) -> Optional[DirectedEdge]:
    u, v = edge
    neighbours = rotation.get(v)
    if not neighbours or u not in neighbours:
        return None
    # Edge just before the back-edge (v -> u), cyclically
    index = neighbours.index(u)
    return (v, neighbours[index - 1])


def _trace_face(
    rotation: Mapping[str, List[str]],
    start: DirectedEdge,
    visited: Set[DirectedEdge],
    max_steps: int,
) -> Optional[List[str]]:
    walk: List[str] = []
    edge: Optional[DirectedEdge] = start

    for _ in range(max_steps):
        visited.add(edge)
        walk.append(edge[0])
        edge = _next_edge(rotation, edge)
        if edge is None:
            LOGGER.debug("Face walk from %s hit a dead end", start)
            return None
        if edge == start:
            return walk
        if edge in visited:
            LOGGER.debug("Face walk from %s ran into a consumed edge", start)
            return None

    LOGGER.warning("Face walk from %s did not close after %d steps", start, max_steps)
    return None


def extract_faces(points: Mapping[str, Point], walls: Iterable[Wall]) -> List[Face]:
    """Trace every face of the subdivision induced by ``walls``.

    Args:
        points: Mapping of point ID to Point objects.
        walls: Walls joining those points.

    Returns:
        Faces with at least three distinct boundary points, in discovery
        order. The unbounded face is among them; it is not singled out here.
    """
    rotation = build_rotation_system(points, walls)
    max_steps = SAFETY_FACTOR * len(points)
    visited: Set[DirectedEdge] = set()
    faces: List[Face] = []

    for u, neighbours in rotation.items():
        for v in neighbours:
            if (u, v) in visited:
                continue
            walk = _trace_face(rotation, (u, v), visited, max_steps)
            if walk is None or len(set(walk)) < 3:
                continue
            coords = [points[pid].xy for pid in walk]
            faces.append(
                Face(
                    boundary=tuple(walk),
                    area=signed_area(coords),
                    centroid=vertex_centroid(coords),
                )
            )

    LOGGER.debug("Extracted %d faces from %d points", len(faces), len(points))
    return faces


def boundary_edges(boundary: Tuple[str, ...]) -> Set[frozenset]:
    """Undirected point pairs walked by a face boundary."""
    edges = set()
    for i, point_id in enumerate(boundary):
        nxt = boundary[(i + 1) % len(boundary)]
        if nxt != point_id:
            edges.add(frozenset((point_id, nxt)))
    return edges

"""Polygon geometry utilities for room calculations.

This module provides the small set of polygon measures the room builder
needs: signed area, vertex centroid and point containment.
"""

from __future__ import annotations

import math
from typing import Sequence, Tuple

from shapely.geometry import Point as ShapelyPoint
from shapely.geometry import Polygon

from ..config import EPSILON

Coord = Tuple[float, float]


def signed_area(coords: Sequence[Coord]) -> float:
    """Shoelace area of a closed ring given without the repeated first vertex.

    Positive for counter-clockwise rings in a y-up frame.
    """
    if len(coords) < 3:
        return 0.0
    total = 0.0
    for (x1, y1), (x2, y2) in zip(coords, list(coords[1:]) + [coords[0]]):
        total += x1 * y2 - x2 * y1
    return total / 2.0


def vertex_centroid(coords: Sequence[Coord]) -> Coord:
    """Arithmetic mean of the ring vertices."""
    if not coords:
        raise ValueError("Cannot compute the centroid of an empty ring")
    n = len(coords)
    return (sum(x for x, _ in coords) / n, sum(y for _, y in coords) / n)


def to_polygon(coords: Sequence[Coord]) -> Polygon | None:
    """Create a Shapely polygon from a ring, repairing it when needed.

    Face walks around dangling walls contain zero-width spikes, which
    Shapely reports as invalid; ``buffer(0)`` drops them.
    """
    if len(coords) < 3:
        return None

    polygon = Polygon(coords)
    if not polygon.is_valid:
        polygon = polygon.buffer(0)

    if polygon.is_empty or polygon.area <= EPSILON:
        return None
    return polygon


def contains_point(coords: Sequence[Coord], point: Coord) -> bool:
    """Check whether ``point`` lies strictly inside the ring."""
    polygon = to_polygon(coords)
    if polygon is None:
        return False
    return polygon.contains(ShapelyPoint(point))


def interior_point(coords: Sequence[Coord]) -> Coord:
    """A point guaranteed to lie inside the ring.

    The vertex centroid of a non-convex ring can fall outside it, so the
    Shapely representative point is used instead. Degenerate rings fall
    back to the vertex centroid.
    """
    polygon = to_polygon(coords)
    if polygon is None:
        return vertex_centroid(coords)
    point = polygon.representative_point()
    return (point.x, point.y)


def distance(p1: Coord, p2: Coord) -> float:
    """Calculate Euclidean distance between two points."""
    return math.hypot(p1[0] - p2[0], p1[1] - p2[1])

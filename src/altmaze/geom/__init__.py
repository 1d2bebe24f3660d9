"""Geometry utilities for the maze.

This module provides face extraction for freeform boards and the polygon
measures used to describe the resulting rooms.
"""

from .faces import Face, extract_faces
from .polygon import contains_point, interior_point, signed_area, vertex_centroid

__all__ = ["Face", "extract_faces", "contains_point", "interior_point", "signed_area", "vertex_centroid"]

"""Geospatial helper functions."""

from __future__ import annotations

from shapely.geometry import Point

from ..models.domain import Airport


def planar_distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two points on the simulator's flat map."""

    return Point(x1, y1).distance(Point(x2, y2))


def airport_distance(origin: Airport, destination: Airport) -> float:
    """Distance between two airports in map units."""

    return planar_distance(origin.x, origin.y, destination.x, destination.y)

"""Lightweight latitude/longitude helpers (no GIS dependency)."""

from __future__ import annotations

import math

__all__ = ["distance_meters", "manhattan_degrees", "EARTH_RADIUS_METERS"]

EARTH_RADIUS_METERS: float = 6_371_000.0


def distance_meters(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in meters between two points given in degrees (haversine)."""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)

    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    return 2 * EARTH_RADIUS_METERS * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def manhattan_degrees(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """L1 distance in degrees; crude but enough to spot large camera jumps."""
    return abs(lat1 - lat2) + abs(lon1 - lon2)

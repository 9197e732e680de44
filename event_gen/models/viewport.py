"""Map viewport snapshot used to decide on and scope passive generation."""

from __future__ import annotations

from dataclasses import dataclass

from ..utils.geo import distance_meters
from .event import Location


@dataclass(frozen=True, slots=True)
class Viewport:
    """What the user is currently looking at.

    The radius is taken from the visible bounds when both corners are given,
    otherwise from ``radius_km``.
    """

    camera_center: Location
    zoom: float
    user_location: Location | None = None
    north_east: Location | None = None
    south_west: Location | None = None
    radius_km: float | None = None

    def estimate_radius_km(self) -> float | None:
        """Half the diagonal of the visible bounds, in kilometers."""
        if self.north_east is not None and self.south_west is not None:
            diagonal = distance_meters(
                self.north_east.latitude,
                self.north_east.longitude,
                self.south_west.latitude,
                self.south_west.longitude,
            )
            return diagonal / 2.0 / 1000.0
        return self.radius_km


__all__ = ["Viewport"]

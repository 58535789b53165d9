"""Geographic coordinates and great-circle distances."""

from __future__ import annotations

import math
from dataclasses import dataclass

EARTH_RADIUS = 6371000
"""Mean radius of the Earth, in metres."""


@dataclass(frozen=True)
class Coordinates:
    """A point on the Earth's surface, in degrees."""

    lat: float
    lng: float


def compute_distance(origin: Coordinates, destination: Coordinates) -> float:
    """Return the great-circle distance between two points, in metres."""
    lat_from = math.radians(origin.lat)
    lat_to = math.radians(destination.lat)
    delta_lng = math.radians(abs(origin.lng - destination.lng))
    cosine = (
        math.sin(lat_from) * math.sin(lat_to)
        + math.cos(lat_from) * math.cos(lat_to) * math.cos(delta_lng)
    )
    # Rounding can push the cosine just outside [-1, 1] for (near) equal points.
    cosine = max(-1.0, min(1.0, cosine))
    return math.acos(cosine) * EARTH_RADIUS
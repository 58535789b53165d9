"""Core transport entities: stops, buses and route statistics."""

from __future__ import annotations

from dataclasses import dataclass

from transport_catalogue.geo import Coordinates


@dataclass(frozen=True)
class Stop:
    """A named bus stop at a geographic location."""

    name: str
    coordinates: Coordinates


@dataclass(frozen=True)
class Bus:
    """A bus route: its number, the stops it passes and whether it is circular."""

    route: str
    stops: tuple[Stop, ...]
    is_roundtrip: bool


@dataclass
class BusInfo:
    """Statistics of a bus route."""

    stops_count: int = 0
    unique_stops_count: int = 0
    route_length: float = 0.0
    curvature: float = 0.0
"""The transport catalogue: stops, bus routes and road distances."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from transport_catalogue.domain import Bus, Stop


class SortMode(Enum):
    """How listings of buses and stops are filtered."""

    SORTED = 0
    SORTED_NON_EMPTY = 1


class Catalogue:
    """Holds stops and bus routes and answers lookups on them."""

    def __init__(self) -> None:
        self._stops: dict[str, Stop] = {}
        self._buses: dict[str, Bus] = {}
        self._distances: dict[tuple[Stop, Stop], int] = {}
        self._stop_to_buses: dict[Stop, set[Bus]] = {}

    def add_stop(self, stop: Stop) -> None:
        """Add a stop; a stop whose name is already known is ignored."""
        self._stops.setdefault(stop.name, stop)

    def add_route(self, bus_number: str, stops: Iterable[Stop], is_roundtrip: bool) -> None:
        """Add a bus route; a route whose number is already known is ignored."""
        if bus_number in self._buses:
            return
        bus = Bus(bus_number, tuple(stops), is_roundtrip)
        self._buses[bus_number] = bus
        for stop in bus.stops:
            self._stop_to_buses.setdefault(stop, set()).add(bus)

    def find_route(self, bus_number: str) -> Bus | None:
        return self._buses.get(bus_number)

    def find_stop(self, stop_name: str) -> Stop | None:
        return self._stops.get(stop_name)

    def buses_by_stop(self, stop: Stop) -> frozenset[Bus]:
        """Return the buses passing through the stop."""
        return frozenset(self._stop_to_buses.get(stop, ()))

    def get_buses(self, sort: SortMode = SortMode.SORTED_NON_EMPTY) -> list[Bus]:
        """Return buses ordered by route number, optionally only those with stops."""
        return [
            bus
            for _, bus in sorted(self._buses.items())
            if sort is not SortMode.SORTED_NON_EMPTY or bus.stops
        ]

    def get_stops(self, sort: SortMode = SortMode.SORTED_NON_EMPTY) -> list[Stop]:
        """Return stops ordered by name, optionally only those served by a bus."""
        return [
            stop
            for _, stop in sorted(self._stops.items())
            if sort is not SortMode.SORTED_NON_EMPTY or self._stop_to_buses.get(stop)
        ]

    def set_distance(self, origin: Stop | None, destination: Stop | None, distance: int) -> None:
        """Record the road distance from one stop to another."""
        if origin is None or destination is None:
            return
        self._distances[(origin, destination)] = distance

    def get_distance(self, origin: Stop, destination: Stop) -> int:
        """Return the road distance, falling back to the reverse direction, else 0."""
        distance = self._distances.get((origin, destination))
        if distance is None:
            distance = self._distances.get((destination, origin), 0)
        return distance
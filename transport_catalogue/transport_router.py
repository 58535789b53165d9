"""Finding the fastest journey between stops using buses and waits."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Union

from transport_catalogue.catalogue import Catalogue, SortMode
from transport_catalogue.domain import Stop
from transport_catalogue.graph import DirectedWeightedGraph, Edge, Router

MINUTES_PER_METRE_FACTOR = 0.06
"""Converts metres divided by km/h into minutes."""


@dataclass
class RoutingSettings:
    """Bus wait time in minutes and bus velocity in km/h."""

    bus_wait_time: int = 0
    bus_velocity: float = 0.0


@dataclass(frozen=True)
class Wait:
    """Waiting for a bus at a stop."""

    stop_name: str
    time: float


@dataclass(frozen=True)
class Ride:
    """Riding a bus over a number of spans."""

    bus: str
    span_count: int
    time: float = 0.0


@dataclass
class RouterResponse:
    """A journey: its total time and the waits and rides it consists of."""

    total_time: float = 0.0
    items: list[Union[Wait, Ride]] = field(default_factory=list)


def _travel_time(distance: int, velocity: float) -> float:
    if velocity == 0:
        return math.inf if distance else math.nan
    return distance / velocity * MINUTES_PER_METRE_FACTOR


class TransportRouter:
    """Builds a routing graph from a catalogue and answers journey queries.

    Every stop has two vertices: arriving at the stop, and being ready to
    board after waiting. Bus edges go from the boarding vertex of one stop
    to the arrival vertex of any later stop on the same route.
    """

    def __init__(self, settings: RoutingSettings | None = None) -> None:
        self.settings = settings if settings is not None else RoutingSettings()
        self._graph = DirectedWeightedGraph()
        self._stop_ids: dict[Stop, int] = {}
        self._router: Router | None = None

    def build(self, catalogue: Catalogue) -> None:
        """Build the routing graph for all stops and buses of the catalogue."""
        stops = catalogue.get_stops(SortMode.SORTED)
        self._graph = DirectedWeightedGraph(len(stops) * 2)
        self._fill_stops(stops)
        self._fill_buses(catalogue)
        self._router = Router(self._graph)

    def _fill_stops(self, stops: list[Stop]) -> None:
        self._stop_ids = {}
        for index, stop in enumerate(stops):
            vertex = index * 2
            self._stop_ids[stop] = vertex
            self._graph.add_edge(
                Edge(stop.name, 0, vertex, vertex + 1, float(self.settings.bus_wait_time))
            )

    def _fill_buses(self, catalogue: Catalogue) -> None:
        velocity = self.settings.bus_velocity
        for bus in catalogue.get_buses(SortMode.SORTED):
            stops = bus.stops
            for start, stop_from in enumerate(stops):
                previous = stop_from
                distance = 0
                for end in range(start + 1, len(stops)):
                    stop_to = stops[end]
                    distance += catalogue.get_distance(previous, stop_to)
                    previous = stop_to
                    self._graph.add_edge(
                        Edge(
                            bus.route,
                            end - start,
                            self._stop_ids[stop_from] + 1,
                            self._stop_ids[stop_to],
                            _travel_time(distance, velocity),
                        )
                    )

    def optimal_route(self, origin: Stop, destination: Stop) -> RouterResponse | None:
        """Return the fastest journey between two stops, or None if there is none."""
        if self._router is None:
            raise RuntimeError("Router has not been built")
        route = self._router.build_route(self._stop_ids[origin], self._stop_ids[destination])
        if route is None:
            return None
        response = RouterResponse()
        for edge_id in route.edges:
            edge = self._graph.get_edge(edge_id)
            if edge.quantity == 0:
                response.items.append(Wait(edge.title, edge.weight))
            else:
                response.items.append(Ride(edge.title, edge.quantity, edge.weight))
            response.total_time += edge.weight
        return response
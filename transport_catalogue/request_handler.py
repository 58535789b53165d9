"""A facade over the catalogue, the map renderer and the journey router."""

from __future__ import annotations

import math
from collections.abc import Iterable

from transport_catalogue.catalogue import Catalogue
from transport_catalogue.domain import BusInfo, Stop
from transport_catalogue.geo import Coordinates, compute_distance
from transport_catalogue.map_renderer import MapRenderer
from transport_catalogue.transport_router import RouterResponse, TransportRouter


class RequestHandler:
    """Fills a catalogue and answers statistics, map and journey queries."""

    def __init__(self, renderer: MapRenderer, router: TransportRouter) -> None:
        self._db = Catalogue()
        self._renderer = renderer
        self._router = router

    def add_stop(self, stop_name: str, coordinates: Coordinates) -> None:
        """Add a stop; a stop whose name is already known is ignored."""
        if self._db.find_stop(stop_name) is not None:
            return
        self._db.add_stop(Stop(stop_name, coordinates))

    def add_route(self, bus_number: str, stop_names: Iterable[str], is_roundtrip: bool) -> None:
        """Add a bus route over named stops; unknown stop names are skipped."""
        names = list(stop_names)
        if not bus_number or not names:
            return
        stops = [stop for stop in map(self._db.find_stop, names) if stop is not None]
        self._db.add_route(bus_number, stops, is_roundtrip)

    def set_distance(self, origin: str, destination: str, distance: int) -> None:
        """Record the road distance between two known stops."""
        stop_from = self._db.find_stop(origin)
        stop_to = self._db.find_stop(destination)
        if stop_from is not None and stop_to is not None:
            self._db.set_distance(stop_from, stop_to, distance)

    def bus_stat(self, bus_name: str) -> BusInfo | None:
        """Return the statistics of a bus route, or None for an unknown bus."""
        bus = self._db.find_route(bus_name)
        if bus is None:
            return None
        info = BusInfo(stops_count=len(bus.stops))
        unique_stops: set[str] = set()
        geo_length = 0.0
        for stop_from, stop_to in zip(bus.stops, bus.stops[1:]):
            geo_distance = compute_distance(stop_from.coordinates, stop_to.coordinates)
            road_distance = self._db.get_distance(stop_from, stop_to)
            info.route_length += road_distance if road_distance != 0 else geo_distance
            geo_length += geo_distance
            unique_stops.update((stop_from.name, stop_to.name))
        info.unique_stops_count = len(unique_stops)
        if geo_length:
            info.curvature = info.route_length / geo_length
        else:
            info.curvature = math.nan if info.route_length == 0 else math.inf
        return info

    def buses_by_stop(self, stop_name: str) -> list[str] | None:
        """Return the sorted numbers of buses through a stop, or None for an unknown stop."""
        stop = self._db.find_stop(stop_name)
        if stop is None:
            return None
        return sorted({bus.route for bus in self._db.buses_by_stop(stop)})

    def render_map(self) -> str:
        """Return the SVG map of the catalogue."""
        return self._renderer.get_svg().render()

    def optimal_route(self, stop_from: str, stop_to: str) -> RouterResponse | None:
        """Return the fastest journey between two stops, or None if there is none."""
        origin = self._db.find_stop(stop_from)
        destination = self._db.find_stop(stop_to)
        if origin is None or destination is None:
            return None
        return self._router.optimal_route(origin, destination)

    def update_internal_data(self) -> None:
        """Pass the catalogue's current data on to the renderer and the router."""
        self._renderer.set_buses(self._db.get_buses()).set_stops(self._db.get_stops())
        self._router.build(self._db)
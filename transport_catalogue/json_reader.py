"""Reading catalogue requests from JSON and writing the responses."""

from __future__ import annotations

from typing import IO, Any

from transport_catalogue import jsondoc, svg
from transport_catalogue.geo import Coordinates
from transport_catalogue.map_renderer import RenderSettings
from transport_catalogue.request_handler import RequestHandler
from transport_catalogue.transport_router import Ride, RoutingSettings, Wait

KEY_BASE_REQUESTS = "base_requests"
KEY_STAT_REQUESTS = "stat_requests"
KEY_RENDER_SETTINGS = "render_settings"
KEY_ROUTING_SETTINGS = "routing_settings"

_NOT_FOUND = "not found"


def _as_int(node: Any) -> int:
    if isinstance(node, bool) or not isinstance(node, int):
        raise TypeError("Node value is not int")
    return node


def _as_float(node: Any) -> float:
    if isinstance(node, bool) or not isinstance(node, (int, float)):
        raise TypeError("Node value is not double")
    return float(node)


def _as_bool(node: Any) -> bool:
    if not isinstance(node, bool):
        raise TypeError("Node value is not bool")
    return node


def _as_str(node: Any) -> str:
    if not isinstance(node, str):
        raise TypeError("Node value is not string")
    return node


def _as_list(node: Any) -> list:
    if not isinstance(node, list):
        raise TypeError("Node value is not array")
    return node


def _as_dict(node: Any) -> dict:
    if not isinstance(node, dict):
        raise TypeError("Node value is not map")
    return node


def _commands_of_type(node: Any, command_type: str) -> list[dict]:
    if not isinstance(node, list):
        return []
    return [
        command
        for command in node
        if isinstance(command, dict) and _as_str(command["type"]) == command_type
    ]


def route_from_node(node: Any, is_roundtrip: bool) -> list[str]:
    """Return the stop names of a route, going there and back unless it is circular.

    A circular route ``A>B>C>A`` gives ``[A, B, C, A]``; a linear route
    ``A-B-C-D`` gives ``[A, B, C, D, C, B, A]``.
    """
    stops = [_as_str(name) for name in _as_list(node)]
    if is_roundtrip:
        return stops
    return stops + list(reversed(stops[:-1]))


def color_from_node(node: Any) -> svg.Color:
    """Parse a colour: null, a name, or an RGB or RGBA array."""
    if node is None:
        return svg.NONE_COLOR
    if isinstance(node, str):
        return node
    if isinstance(node, list):
        if len(node) == 3:
            return svg.Rgb(_as_int(node[0]), _as_int(node[1]), _as_int(node[2]))
        if len(node) == 4:
            return svg.Rgba(
                _as_int(node[0]), _as_int(node[1]), _as_int(node[2]), _as_float(node[3])
            )
    raise ValueError("Missing node type for color parsing")


def point_from_node(node: Any) -> svg.Point:
    """Parse a point given as a two-number array; null gives the origin."""
    if node is None:
        return svg.Point()
    if isinstance(node, list) and len(node) == 2:
        return svg.Point(_as_float(node[0]), _as_float(node[1]))
    raise ValueError("Missing node type for point parsing")


class JsonReader:
    """Holds a JSON request document and applies it to a request handler."""

    def __init__(self) -> None:
        self._commands: dict = {}

    def read_input(self, stream: IO[str]) -> None:
        """Read the request document from a text stream."""
        self._commands = _as_dict(jsondoc.load(stream))

    def upload_data(self, handler: RequestHandler) -> None:
        """Fill the handler's catalogue with the stops and buses of the base requests."""
        requests = self._commands.get(KEY_BASE_REQUESTS)
        if requests is None:
            return
        stop_commands = _commands_of_type(requests, "Stop")
        for command in stop_commands:
            handler.add_stop(
                _as_str(command["name"]),
                Coordinates(_as_float(command["latitude"]), _as_float(command["longitude"])),
            )
        for command in stop_commands:
            if "road_distances" not in command:
                continue
            stop_from = _as_str(command["name"])
            for stop_to, distance in _as_dict(command["road_distances"]).items():
                handler.set_distance(stop_from, stop_to, _as_int(distance))
        for command in _commands_of_type(requests, "Bus"):
            is_roundtrip = _as_bool(command["is_roundtrip"])
            handler.add_route(
                _as_str(command["name"]),
                route_from_node(command["stops"], is_roundtrip),
                is_roundtrip,
            )
        handler.update_internal_data()

    def print_responses(self, handler: RequestHandler, output: IO[str]) -> None:
        """Answer the stat requests and write the responses as a JSON array."""
        requests = self._commands.get(KEY_STAT_REQUESTS)
        if requests is None:
            return
        answers = {
            "Stop": self._stop_response,
            "Bus": self._bus_response,
            "Map": self._map_response,
            "Route": self._route_response,
        }
        responses = []
        for request in _as_list(requests):
            command = _as_dict(request)
            answer = answers.get(_as_str(command["type"]))
            if answer is not None:
                responses.append(answer(command, handler))
        jsondoc.dump(responses, output)

    def render_settings(self) -> RenderSettings:
        """Return the render settings of the document, or defaults if it has none."""
        node = self._commands.get(KEY_RENDER_SETTINGS)
        if node is None:
            return RenderSettings()
        settings = _as_dict(node)
        return RenderSettings(
            width=_as_float(settings["width"]),
            height=_as_float(settings["height"]),
            padding=_as_float(settings["padding"]),
            line_width=_as_float(settings["line_width"]),
            stop_radius=_as_float(settings["stop_radius"]),
            bus_label_font_size=_as_int(settings["bus_label_font_size"]),
            bus_label_offset=point_from_node(settings["bus_label_offset"]),
            stop_label_font_size=_as_int(settings["stop_label_font_size"]),
            stop_label_offset=point_from_node(settings["stop_label_offset"]),
            underlayer_color=color_from_node(settings["underlayer_color"]),
            underlayer_width=_as_float(settings["underlayer_width"]),
            color_palette=[color_from_node(color) for color in _as_list(settings["color_palette"])],
        )

    def routing_settings(self) -> RoutingSettings:
        """Return the routing settings of the document, or defaults if it has none."""
        node = self._commands.get(KEY_ROUTING_SETTINGS)
        if node is None:
            return RoutingSettings()
        settings = _as_dict(node)
        return RoutingSettings(
            bus_wait_time=_as_int(settings["bus_wait_time"]),
            bus_velocity=_as_float(settings["bus_velocity"]),
        )

    @staticmethod
    def _bus_response(command: dict, handler: RequestHandler) -> dict:
        request_id = _as_int(command["id"])
        info = handler.bus_stat(_as_str(command["name"]))
        if info is None:
            return {"request_id": request_id, "error_message": _NOT_FOUND}
        return {
            "request_id": request_id,
            "curvature": info.curvature,
            "route_length": info.route_length,
            "stop_count": info.stops_count,
            "unique_stop_count": info.unique_stops_count,
        }

    @staticmethod
    def _stop_response(command: dict, handler: RequestHandler) -> dict:
        request_id = _as_int(command["id"])
        buses = handler.buses_by_stop(_as_str(command["name"]))
        if buses is None:
            return {"request_id": request_id, "error_message": _NOT_FOUND}
        return {"request_id": request_id, "buses": list(buses)}

    @staticmethod
    def _map_response(command: dict, handler: RequestHandler) -> dict:
        return {"request_id": _as_int(command["id"]), "map": handler.render_map()}

    @staticmethod
    def _route_response(command: dict, handler: RequestHandler) -> dict:
        request_id = _as_int(command["id"])
        response = handler.optimal_route(_as_str(command["from"]), _as_str(command["to"]))
        if response is None:
            return {"request_id": request_id, "error_message": _NOT_FOUND}
        items = []
        for item in response.items:
            if isinstance(item, Wait):
                items.append({"stop_name": item.stop_name, "time": item.time, "type": "Wait"})
            elif isinstance(item, Ride):
                items.append(
                    {"bus": item.bus, "span_count": item.span_count, "time": item.time, "type": "Bus"}
                )
        return {"request_id": request_id, "total_time": response.total_time, "items": items}
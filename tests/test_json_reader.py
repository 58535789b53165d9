import io

import pytest

from transport_catalogue import jsondoc, svg
from transport_catalogue.json_reader import (
    JsonReader,
    color_from_node,
    point_from_node,
    route_from_node,
)
from transport_catalogue.map_renderer import MapRenderer, RenderSettings
from transport_catalogue.request_handler import RequestHandler
from transport_catalogue.transport_router import RoutingSettings, TransportRouter

DOCUMENT = """
{
  "base_requests": [
    {"type": "Bus", "name": "114", "stops": ["Sea Port", "River Bridge"], "is_roundtrip": false},
    {"type": "Stop", "name": "River Bridge", "latitude": 43.587795, "longitude": 39.716901,
     "road_distances": {"Sea Port": 850}},
    {"type": "Stop", "name": "Sea Port", "latitude": 43.581969, "longitude": 39.719848,
     "road_distances": {"River Bridge": 850}}
  ],
  "render_settings": {
    "width": 200, "height": 200, "padding": 30, "stop_radius": 5, "line_width": 14,
    "bus_label_font_size": 20, "bus_label_offset": [7, 15],
    "stop_label_font_size": 20, "stop_label_offset": [7, -3],
    "underlayer_color": [255, 255, 255, 0.85], "underlayer_width": 3,
    "color_palette": ["green", [255, 160, 0], "red"]
  },
  "routing_settings": {"bus_wait_time": 6, "bus_velocity": 40},
  "stat_requests": [
    {"id": 1, "type": "Bus", "name": "114"},
    {"id": 2, "type": "Stop", "name": "River Bridge"},
    {"id": 3, "type": "Map"},
    {"id": 4, "type": "Stop", "name": "Nowhere"},
    {"id": 5, "type": "Route", "from": "Sea Port", "to": "River Bridge"},
    {"id": 6, "type": "Bus", "name": "999"}
  ]
}
"""


def _run(document):
    reader = JsonReader()
    reader.read_input(io.StringIO(document))
    renderer = MapRenderer(reader.render_settings())
    router = TransportRouter(reader.routing_settings())
    handler = RequestHandler(renderer, router)
    reader.upload_data(handler)
    output = io.StringIO()
    reader.print_responses(handler, output)
    return output.getvalue()


@pytest.fixture
def responses():
    return {item["request_id"]: item for item in jsondoc.loads(_run(DOCUMENT))}


def test_route_from_node_linear():
    assert route_from_node(["A", "B", "C", "D"], False) == ["A", "B", "C", "D", "C", "B", "A"]


def test_route_from_node_roundtrip():
    assert route_from_node(["A", "B", "C", "A"], True) == ["A", "B", "C", "A"]


def test_route_from_node_rejects_non_strings():
    with pytest.raises(TypeError):
        route_from_node(["A", 1], True)


def test_color_from_node():
    assert color_from_node(None) is svg.NONE_COLOR
    assert color_from_node("red") == "red"
    assert color_from_node([255, 160, 0]) == svg.Rgb(255, 160, 0)
    assert color_from_node([255, 255, 255, 0.85]) == svg.Rgba(255, 255, 255, 0.85)


@pytest.mark.parametrize("node", [[1, 2], 5, {"r": 1}])
def test_color_from_node_rejects_bad_nodes(node):
    with pytest.raises(ValueError):
        color_from_node(node)


def test_point_from_node():
    assert point_from_node([7, -3]) == svg.Point(7.0, -3.0)
    assert point_from_node(None) == svg.Point()
    with pytest.raises(ValueError):
        point_from_node([1])


def test_render_settings_parsed():
    reader = JsonReader()
    reader.read_input(io.StringIO(DOCUMENT))
    settings = reader.render_settings()
    assert settings.width == 200
    assert settings.bus_label_offset == svg.Point(7, 15)
    assert settings.stop_label_offset == svg.Point(7, -3)
    assert settings.underlayer_color == svg.Rgba(255, 255, 255, 0.85)
    assert settings.color_palette == ["green", svg.Rgb(255, 160, 0), "red"]


def test_routing_settings_parsed():
    reader = JsonReader()
    reader.read_input(io.StringIO(DOCUMENT))
    assert reader.routing_settings() == RoutingSettings(bus_wait_time=6, bus_velocity=40.0)


def test_missing_settings_give_defaults():
    reader = JsonReader()
    reader.read_input(io.StringIO("{}"))
    assert reader.render_settings() == RenderSettings()
    assert reader.routing_settings() == RoutingSettings()


def test_read_input_requires_object():
    with pytest.raises(TypeError):
        JsonReader().read_input(io.StringIO("[1, 2]"))


def test_no_stat_requests_writes_nothing():
    assert _run('{"base_requests": []}') == ""


def test_every_stat_request_answered_in_order():
    ids = [item["request_id"] for item in jsondoc.loads(_run(DOCUMENT))]
    assert ids == [1, 2, 3, 4, 5, 6]


def test_bus_response(responses):
    bus = responses[1]
    assert bus["stop_count"] == 3
    assert bus["unique_stop_count"] == 2
    assert bus["route_length"] == 1700
    assert bus["curvature"] > 1


def test_stop_response(responses):
    assert responses[2]["buses"] == ["114"]


def test_not_found_responses(responses):
    assert responses[4] == {"request_id": 4, "error_message": "not found"}
    assert responses[6] == {"request_id": 6, "error_message": "not found"}


def test_map_response(responses):
    text = responses[3]["map"]
    assert text.startswith(svg.XML_HEADER)
    assert text.endswith(svg.SVG_CLOSE)
    assert ">114</text>" in text


def test_route_response(responses):
    route = responses[5]
    items = route["items"]
    assert items[0] == {"stop_name": "Sea Port", "time": 6, "type": "Wait"}
    assert items[1]["type"] == "Bus"
    assert items[1]["bus"] == "114"
    assert items[1]["span_count"] == 1
    assert route["total_time"] == pytest.approx(sum(item["time"] for item in items), abs=1e-4)
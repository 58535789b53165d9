# transport_catalogue

A bus network catalogue. It reads one JSON document that describes stops and
bus routes. It answers the queries in that document and writes the answers as
JSON. It answers four kinds of query:

- **Bus**: the number of stops on the route, the number of distinct stops, the
  route's road length, and its curvature. Curvature is the road length divided
  by the great-circle length. When no road distance is known between two stops
  in either direction, the great-circle distance is used for that leg.
- **Stop**: the numbers of the buses that pass through a stop, sorted.
- **Map**: an SVG drawing of every route and stop, returned as a string.
- **Route**: the fastest journey between two stops, as a list of `Wait` and
  `Bus` items, with the total time in minutes.

## Installation

```
pip install .
```

## Command line

The `transport-catalogue` command reads the request document from standard
input and writes the responses to standard output. It takes no options apart
from `--help`.

```
transport-catalogue < requests.json > responses.json
```

You can also run it as `python -m transport_catalogue.main`.

The input is one JSON object. It may hold these keys:

- `base_requests`: `Stop` entries and `Bus` entries. Each `Stop` entry has
  `name`, `latitude` and `longitude`, and may have a `road_distances` map.
  Each `Bus` entry has `name`, `stops` and `is_roundtrip`. A route that is
  not a round trip is driven there and back. For example, `A, B, C` becomes
  `A, B, C, B, A`.
- `stat_requests`: queries. Each has an `id` and a `type`, which is one of
  `Bus`, `Stop`, `Map` or `Route`. `Bus` and `Stop` queries take a `name`.
  `Route` queries take `from` and `to`. Queries of any other type are skipped.
- `render_settings`: `width`, `height`, `padding`, `line_width`,
  `stop_radius`, `bus_label_font_size`, `bus_label_offset`,
  `stop_label_font_size`, `stop_label_offset`, `underlayer_color`,
  `underlayer_width` and `color_palette`. A colour is one of these:
  - `null`
  - a name
  - an `[r, g, b]` array
  - an `[r, g, b, opacity]` array
- `routing_settings`: `bus_wait_time` in minutes and `bus_velocity` in km/h.

Here is a short example:

```json
{
  "base_requests": [
    {"type": "Stop", "name": "A", "latitude": 55.61, "longitude": 37.20,
     "road_distances": {"B": 3000}},
    {"type": "Stop", "name": "B", "latitude": 55.60, "longitude": 37.21},
    {"type": "Bus", "name": "14", "stops": ["A", "B"], "is_roundtrip": false}
  ],
  "routing_settings": {"bus_wait_time": 6, "bus_velocity": 40},
  "stat_requests": [
    {"id": 1, "type": "Bus", "name": "14"},
    {"id": 2, "type": "Stop", "name": "B"},
    {"id": 3, "type": "Route", "from": "A", "to": "B"}
  ]
}
```

If a query names a bus, stop or journey that is not known, the answer is
`{"request_id": ..., "error_message": "not found"}`.

The output is a JSON array with one answer per query. It is indented by four
spaces, object keys are sorted, and floating point numbers are written with
six significant digits.

## Library use

Each module can also be used on its own:

- `transport_catalogue.geo`: `Coordinates` and `compute_distance`.
- `transport_catalogue.domain`: `Stop`, `Bus` and `BusInfo`.
- `transport_catalogue.catalogue`: `Catalogue`, which stores stops, buses and
  road distances. It also has `SortMode`.
- `transport_catalogue.graph`: `DirectedWeightedGraph`, `Edge`, and an
  all-pairs shortest-path `Router` that returns a `RouteInfo`.
- `transport_catalogue.transport_router`: `TransportRouter`, built from
  `RoutingSettings`. It finds the fastest journey as a `RouterResponse` of
  `Wait` and `Ride` items.
- `transport_catalogue.svg`: a small SVG writer with these parts:
  - shapes: `Circle`, `Polyline` and `Text`
  - `Document`
  - colours: `Rgb` and `Rgba`
  - helpers: `format_color`, `format_number` and `html_escape`
- `transport_catalogue.map_renderer`: `MapRenderer`, `RenderSettings` and
  `SphereProjector`.
- `transport_catalogue.jsondoc`: a JSON reader and writer with `load`,
  `loads`, `dump` and `dumps`. It raises `ParsingError` on bad input.
- `transport_catalogue.json_builder`: `Builder`, a chained JSON builder. It
  raises `BuilderError` when a call comes in the wrong context.
- `transport_catalogue.request_handler`: `RequestHandler`, which ties the
  catalogue, the renderer and the router together.
- `transport_catalogue.json_reader`: `JsonReader`, which loads a request
  document and prints the responses.

```python
import io
from transport_catalogue.json_reader import JsonReader
from transport_catalogue.map_renderer import MapRenderer
from transport_catalogue.transport_router import TransportRouter
from transport_catalogue.request_handler import RequestHandler

document_text = """
{
  "base_requests": [
    {"type": "Stop", "name": "A", "latitude": 55.61, "longitude": 37.20},
    {"type": "Stop", "name": "B", "latitude": 55.60, "longitude": 37.21},
    {"type": "Bus", "name": "14", "stops": ["A", "B"], "is_roundtrip": false}
  ],
  "stat_requests": [{"id": 1, "type": "Bus", "name": "14"}]
}
"""

reader = JsonReader()
reader.read_input(io.StringIO(document_text))
handler = RequestHandler(MapRenderer(reader.render_settings()),
                         TransportRouter(reader.routing_settings()))
reader.upload_data(handler)
out = io.StringIO()
reader.print_responses(handler, out)
print(out.getvalue())
```

## Limitations

- Each run reads one document and keeps nothing afterwards. The catalogue is
  not saved anywhere.
- A `Map` query on a catalogue with buses needs a non-empty `color_palette`.
  Without one, the renderer raises `ValueError`.

## Tests

```
pip install .[test]
pytest
```
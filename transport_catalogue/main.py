"""Command that reads JSON requests from standard input and answers them."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from transport_catalogue.json_reader import JsonReader
from transport_catalogue.map_renderer import MapRenderer
from transport_catalogue.request_handler import RequestHandler
from transport_catalogue.transport_router import TransportRouter


def main(argv: Sequence[str] | None = None) -> int:
    """Read requests from standard input and write the responses to standard output."""
    parser = argparse.ArgumentParser(
        prog="transport-catalogue",
        description="Answer transport catalogue requests given as JSON on standard input.",
    )
    parser.parse_args(argv)

    reader = JsonReader()
    reader.read_input(sys.stdin)
    renderer = MapRenderer(reader.render_settings())
    router = TransportRouter(reader.routing_settings())
    handler = RequestHandler(renderer, router)
    reader.upload_data(handler)
    reader.print_responses(handler, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
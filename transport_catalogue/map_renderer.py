"""Drawing the catalogue's bus routes and stops as an SVG map."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from transport_catalogue import svg
from transport_catalogue.domain import Bus, Stop
from transport_catalogue.geo import Coordinates

EPSILON = 1e-6

_FONT_FAMILY = "Verdana"
_BUS_FONT_WEIGHT = "bold"


def is_zero(value: float) -> bool:
    """Return whether the value is within EPSILON of zero."""
    return abs(value) < EPSILON


class SphereProjector:
    """Projects geographic coordinates onto the drawing plane."""

    def __init__(
        self,
        points: Iterable[Coordinates],
        max_width: float,
        max_height: float,
        padding: float,
    ) -> None:
        self._padding = padding
        self._min_lon = 0.0
        self._max_lat = 0.0
        self._zoom = 0.0
        points = list(points)
        if not points:
            return

        self._min_lon = min(point.lng for point in points)
        max_lon = max(point.lng for point in points)
        min_lat = min(point.lat for point in points)
        self._max_lat = max(point.lat for point in points)

        width_zoom = None
        if not is_zero(max_lon - self._min_lon):
            width_zoom = (max_width - 2 * padding) / (max_lon - self._min_lon)
        height_zoom = None
        if not is_zero(self._max_lat - min_lat):
            height_zoom = (max_height - 2 * padding) / (self._max_lat - min_lat)

        if width_zoom is not None and height_zoom is not None:
            self._zoom = min(width_zoom, height_zoom)
        elif width_zoom is not None:
            self._zoom = width_zoom
        elif height_zoom is not None:
            self._zoom = height_zoom

    def __call__(self, coords: Coordinates) -> svg.Point:
        return svg.Point(
            (coords.lng - self._min_lon) * self._zoom + self._padding,
            (self._max_lat - coords.lat) * self._zoom + self._padding,
        )


@dataclass
class RenderSettings:
    """Sizes, offsets and colours used to draw the map."""

    width: float = 0.0
    height: float = 0.0
    padding: float = 0.0
    line_width: float = 0.0
    stop_radius: float = 0.0
    bus_label_font_size: int = 0
    bus_label_offset: svg.Point = field(default_factory=svg.Point)
    stop_label_font_size: int = 0
    stop_label_offset: svg.Point = field(default_factory=svg.Point)
    underlayer_color: svg.Color = svg.NONE_COLOR
    underlayer_width: float = 0.0
    color_palette: list[svg.Color] = field(default_factory=list)


class MapRenderer:
    """Renders bus routes and stops into an SVG document."""

    def __init__(self, settings: RenderSettings) -> None:
        self.settings = settings
        self._buses: list[Bus] = []
        self._stops: list[Stop] = []

    def set_buses(self, buses: Sequence[Bus]) -> MapRenderer:
        self._buses = list(buses)
        return self

    def set_stops(self, stops: Sequence[Stop]) -> MapRenderer:
        self._stops = list(stops)
        return self

    def get_svg(self) -> svg.Document:
        """Return the map: route lines, route labels, stop circles, stop labels."""
        projector = self._build_projector()
        doc = svg.Document()
        for obj in (
            *self._route_lines(projector),
            *self._route_labels(projector),
            *self._stop_symbols(projector),
            *self._stop_labels(projector),
        ):
            doc.add(obj)
        return doc

    def _build_projector(self) -> SphereProjector:
        return SphereProjector(
            (stop.coordinates for stop in self._stops),
            self.settings.width,
            self.settings.height,
            self.settings.padding,
        )

    def _palette_color(self, index: int) -> svg.Color:
        palette = self.settings.color_palette
        if not palette:
            raise ValueError("The colour palette is empty")
        return palette[index % len(palette)]

    def _route_lines(self, projector: SphereProjector) -> list[svg.Polyline]:
        return [
            svg.Polyline(
                points=[projector(stop.coordinates) for stop in bus.stops],
                stroke_color=self._palette_color(index),
                fill_color="none",
                stroke_width=self.settings.line_width,
                stroke_linecap=svg.StrokeLineCap.ROUND,
                stroke_linejoin=svg.StrokeLineJoin.ROUND,
            )
            for index, bus in enumerate(self._buses)
        ]

    def _route_labels(self, projector: SphereProjector) -> list[svg.Text]:
        settings = self.settings
        labels: list[svg.Text] = []
        for index, bus in enumerate(self._buses):
            start = projector(bus.stops[0].coordinates)
            common = dict(
                data=bus.route,
                position=start,
                offset=settings.bus_label_offset,
                font_size=settings.bus_label_font_size,
                font_family=_FONT_FAMILY,
                font_weight=_BUS_FONT_WEIGHT,
            )
            underlayer = svg.Text(
                **common,
                fill_color=settings.underlayer_color,
                stroke_color=settings.underlayer_color,
                stroke_width=settings.underlayer_width,
                stroke_linecap=svg.StrokeLineCap.ROUND,
                stroke_linejoin=svg.StrokeLineJoin.ROUND,
            )
            text = svg.Text(**common, fill_color=self._palette_color(index))
            labels.extend((underlayer, text))
            if bus.is_roundtrip:
                continue
            stop_end = bus.stops[len(bus.stops) // 2]
            if bus.stops[0] == stop_end:
                continue
            end = projector(stop_end.coordinates)
            labels.append(dataclasses.replace(underlayer, position=end))
            labels.append(dataclasses.replace(text, position=end))
        return labels

    def _stop_symbols(self, projector: SphereProjector) -> list[svg.Circle]:
        return [
            svg.Circle(
                center=projector(stop.coordinates),
                radius=self.settings.stop_radius,
                fill_color="white",
            )
            for stop in self._stops
        ]

    def _stop_labels(self, projector: SphereProjector) -> list[svg.Text]:
        settings = self.settings
        labels: list[svg.Text] = []
        for stop in self._stops:
            common = dict(
                data=stop.name,
                position=projector(stop.coordinates),
                offset=settings.stop_label_offset,
                font_size=settings.stop_label_font_size,
                font_family=_FONT_FAMILY,
            )
            labels.append(
                svg.Text(
                    **common,
                    fill_color=settings.underlayer_color,
                    stroke_color=settings.underlayer_color,
                    stroke_width=settings.underlayer_width,
                    stroke_linecap=svg.StrokeLineCap.ROUND,
                    stroke_linejoin=svg.StrokeLineJoin.ROUND,
                )
            )
            labels.append(svg.Text(**common, fill_color="black"))
        return labels
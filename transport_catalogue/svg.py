"""A small SVG writer: colours, circles, polylines, text and documents."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Union

XML_HEADER = '<?xml version="1.0" encoding="UTF-8" ?>'
SVG_OPEN = '<svg xmlns="http://www.w3.org/2000/svg" version="1.1">'
SVG_CLOSE = "</svg>"
_OBJECT_INDENT = 2

_HTML_ESCAPES = str.maketrans(
    {'"': "&quot;", "<": "&lt;", ">": "&gt;", "&": "&amp;", "'": "&apos;"}
)


@dataclass(frozen=True)
class Point:
    """A point on the drawing plane."""

    x: float = 0.0
    y: float = 0.0


def _as_channel(value: int) -> int:
    return int(value) & 0xFF


@dataclass(frozen=True)
class Rgb:
    """An RGB colour with 8-bit channels."""

    red: int = 0
    green: int = 0
    blue: int = 0

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            object.__setattr__(self, name, _as_channel(getattr(self, name)))


@dataclass(frozen=True)
class Rgba:
    """An RGB colour with 8-bit channels and an opacity."""

    red: int = 0
    green: int = 0
    blue: int = 0
    opacity: float = 1.0

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            object.__setattr__(self, name, _as_channel(getattr(self, name)))


Color = Union[str, Rgb, Rgba, None]
"""A colour: a name, an Rgb or Rgba value, or None for no colour."""

NONE_COLOR: Color = None
"""The colour written as ``none``."""


def format_number(value: float) -> str:
    """Format a number the way the SVG output expects (six significant digits)."""
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return format(float(value), "g")


def format_color(color: Color) -> str:
    """Return the SVG text of a colour."""
    if color is None:
        return "none"
    if isinstance(color, str):
        return color
    if isinstance(color, Rgba):
        return (
            f"rgba({color.red},{color.green},{color.blue},"
            f"{format_number(color.opacity)})"
        )
    if isinstance(color, Rgb):
        return f"rgb({color.red},{color.green},{color.blue})"
    raise TypeError(f"Unsupported colour value: {color!r}")


def html_escape(text: str) -> str:
    """Replace the characters that are special in SVG text with entities."""
    return text.translate(_HTML_ESCAPES)


class StrokeLineCap(Enum):
    """How the ends of lines look."""

    BUTT = "butt"
    ROUND = "round"
    SQUARE = "square"

    def __str__(self) -> str:
        return self.value


class StrokeLineJoin(Enum):
    """How lines are joined at corners."""

    ARCS = "arcs"
    BEVEL = "bevel"
    MITER = "miter"
    MITER_CLIP = "miter-clip"
    ROUND = "round"

    def __str__(self) -> str:
        return self.value


_UNSET = object()


class Object(ABC):
    """An element of an SVG document."""

    @abstractmethod
    def render(self) -> str:
        """Return the element's tag."""


@dataclass(kw_only=True)
class PathProps(Object):
    """Fill and stroke properties shared by drawable shapes.

    A colour field left at its default is not written at all; ``NONE_COLOR``
    must be given explicitly through ``fill_none``/``stroke_none`` semantics,
    which here means passing the string ``"none"`` or setting the field to
    ``NONE_COLOR`` after construction via :meth:`with_props`.
    """

    fill_color: object = _UNSET
    stroke_color: object = _UNSET
    stroke_width: float | None = None
    stroke_linecap: StrokeLineCap | None = None
    stroke_linejoin: StrokeLineJoin | None = None

    def render_attrs(self) -> str:
        """Return the fill and stroke attributes that have been set."""
        parts: list[str] = []
        if self.fill_color is not _UNSET:
            parts.append(f'fill="{format_color(self.fill_color)}"')
        if self.stroke_color is not _UNSET:
            parts.append(f' stroke="{format_color(self.stroke_color)}"')
        if self.stroke_width is not None:
            parts.append(f' stroke-width="{format_number(self.stroke_width)}"')
        if self.stroke_linecap is not None:
            parts.append(f' stroke-linecap="{self.stroke_linecap}"')
        if self.stroke_linejoin is not None:
            parts.append(f' stroke-linejoin="{self.stroke_linejoin}"')
        return "".join(parts)


@dataclass(kw_only=True)
class Circle(PathProps):
    """The ``<circle>`` element."""

    center: Point = field(default_factory=Point)
    radius: float = 1.0

    def render(self) -> str:
        return (
            f'<circle cx="{format_number(self.center.x)}" '
            f'cy="{format_number(self.center.y)}" '
            f'r="{format_number(self.radius)}" '
            f"{self.render_attrs()}/>"
        )


@dataclass(kw_only=True)
class Polyline(PathProps):
    """The ``<polyline>`` element."""

    points: list[Point] = field(default_factory=list)

    def add_point(self, point: Point) -> Polyline:
        """Append a vertex and return the polyline."""
        self.points.append(point)
        return self

    def render(self) -> str:
        points = " ".join(
            f"{format_number(point.x)},{format_number(point.y)}" for point in self.points
        )
        return f'<polyline points="{points}" {self.render_attrs()}/>'


@dataclass(kw_only=True)
class Text(PathProps):
    """The ``<text>`` element."""

    position: Point = field(default_factory=Point)
    offset: Point = field(default_factory=Point)
    font_size: int = 1
    font_family: str = ""
    font_weight: str = ""
    data: str = ""

    def render(self) -> str:
        parts = [
            "<text ",
            self.render_attrs(),
            f' x="{format_number(self.position.x)}"',
            f' y="{format_number(self.position.y)}"',
            f' dx="{format_number(self.offset.x)}"',
            f' dy="{format_number(self.offset.y)}"',
            f' font-size="{format_number(self.font_size)}"',
        ]
        if self.font_family:
            parts.append(f' font-family="{html_escape(self.font_family)}"')
        if self.font_weight:
            parts.append(f' font-weight="{html_escape(self.font_weight)}"')
        parts.append(">")
        parts.append(html_escape(self.data))
        parts.append("</text>")
        return "".join(parts)


@dataclass
class Document:
    """An SVG document holding elements in drawing order."""

    objects: list[Object] = field(default_factory=list)

    def add(self, obj: Object) -> Document:
        """Append an element and return the document."""
        self.objects.append(obj)
        return self

    def render(self) -> str:
        """Return the whole SVG text of the document."""
        indent = " " * _OBJECT_INDENT
        lines = [XML_HEADER, SVG_OPEN]
        lines.extend(indent + obj.render() for obj in self.objects)
        return "\n".join(lines) + "\n" + SVG_CLOSE
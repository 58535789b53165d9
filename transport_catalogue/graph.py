"""Directed weighted graph and an all-pairs shortest path router."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Edge:
    """A directed edge with a title and the number of spans it covers."""

    title: str
    quantity: int
    source: int
    target: int
    weight: float


class DirectedWeightedGraph:
    """A graph with a fixed number of vertices and a growing list of edges."""

    def __init__(self, vertex_count: int = 0) -> None:
        self._edges: list[Edge] = []
        self._incidence: list[list[int]] = [[] for _ in range(vertex_count)]

    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._incidence):
            raise IndexError(f"vertex {vertex} is out of range")

    def add_edge(self, edge: Edge) -> int:
        """Add an edge and return its id."""
        self._check_vertex(edge.source)
        self._edges.append(edge)
        edge_id = len(self._edges) - 1
        self._incidence[edge.source].append(edge_id)
        return edge_id

    def vertex_count(self) -> int:
        return len(self._incidence)

    def edge_count(self) -> int:
        return len(self._edges)

    def get_edge(self, edge_id: int) -> Edge:
        if not 0 <= edge_id < len(self._edges):
            raise IndexError(f"edge {edge_id} is out of range")
        return self._edges[edge_id]

    def incident_edges(self, vertex: int) -> Iterator[int]:
        """Iterate over the ids of edges leaving the vertex."""
        self._check_vertex(vertex)
        return iter(tuple(self._incidence[vertex]))


@dataclass
class RouteInfo:
    """Total weight of a route and the ids of its edges in order."""

    weight: float
    edges: list[int] = field(default_factory=list)


@dataclass(frozen=True)
class _RouteData:
    weight: float
    prev_edge: int | None


class Router:
    """Precomputes shortest routes between all pairs of vertices."""

    def __init__(self, graph: DirectedWeightedGraph) -> None:
        self._graph = graph
        count = graph.vertex_count()
        self._routes: list[list[_RouteData | None]] = [[None] * count for _ in range(count)]
        self._initialize()
        for through in range(count):
            self._relax_through(through)

    def _initialize(self) -> None:
        for vertex, row in enumerate(self._routes):
            row[vertex] = _RouteData(0, None)
            for edge_id in self._graph.incident_edges(vertex):
                edge = self._graph.get_edge(edge_id)
                if edge.weight < 0:
                    raise ValueError("Edges' weights should be non-negative")
                current = row[edge.target]
                if current is None or current.weight > edge.weight:
                    row[edge.target] = _RouteData(edge.weight, edge_id)

    def _relax_through(self, through: int) -> None:
        through_row = self._routes[through]
        for row in self._routes:
            route_from = row[through]
            if route_from is None:
                continue
            for target, route_to in enumerate(through_row):
                if route_to is None:
                    continue
                candidate = route_from.weight + route_to.weight
                current = row[target]
                if current is None or candidate < current.weight:
                    prev = route_to.prev_edge if route_to.prev_edge is not None else route_from.prev_edge
                    row[target] = _RouteData(candidate, prev)

    def build_route(self, source: int, target: int) -> RouteInfo | None:
        """Return the shortest route from source to target, or None if unreachable."""
        count = len(self._routes)
        if not (0 <= source < count and 0 <= target < count):
            raise IndexError("vertex is out of range")
        data = self._routes[source][target]
        if data is None:
            return None
        edges: list[int] = []
        edge_id = data.prev_edge
        while edge_id is not None:
            edges.append(edge_id)
            previous = self._routes[source][self._graph.get_edge(edge_id).source]
            edge_id = previous.prev_edge if previous is not None else None
        edges.reverse()
        return RouteInfo(data.weight, edges)
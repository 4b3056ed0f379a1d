"""Build vertex, airport, and adjacency-map graphs from edge pairs.

Edges are ``(source_id, target_id)`` pairs; nodes are created on first
mention, in order, so neighbor lists follow edge order. Nothing here reads
files: the inputs are in-memory pairs or short ``SRC:DST`` strings.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping
from typing import Any

import networkx as nx

from graphwalk.domain.graph import AdjacencyMap, Airport, Vertex

type Edge = tuple[str, str]


class GraphSpecError(ValueError):
    """Raised for a malformed edge or label spec."""

    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code


def parse_edge(spec: str) -> Edge:
    """Parse ``"SRC:DST"`` into a ``(source, target)`` pair.

    Examples:
        >>> parse_edge("JFK:LAX")
        ('JFK', 'LAX')
        >>> parse_edge(" a : a ")
        ('a', 'a')
    """
    source, sep, target = spec.partition(":")
    source, target = source.strip(), target.strip()
    if not sep or not source or not target:
        raise GraphSpecError("INVALID_EDGE", f"Edge '{spec}' is not of the form SRC:DST")
    return source, target


def parse_label(spec: str) -> tuple[str, str]:
    """Parse ``"ID=LABEL"`` into an ``(id, label)`` pair. The label may be empty."""
    node_id, sep, label = spec.partition("=")
    node_id = node_id.strip()
    if not sep or not node_id:
        raise GraphSpecError("INVALID_LABEL", f"Label '{spec}' is not of the form ID=LABEL")
    return node_id, label


def build_vertices(
    edges: Iterable[Edge],
    labels: Mapping[str, str] | None = None,
    nodes: Iterable[str] = (),
) -> dict[str, Vertex[str]]:
    """Create one ``Vertex`` per node id and wire the edges between them.

    A vertex's label is ``labels[id]`` when given, else the id itself.
    Ids listed in *nodes* exist even without edges.
    """
    labels = labels or {}
    vertices: dict[str, Vertex[str]] = {}

    def get(node_id: str) -> Vertex[str]:
        if node_id not in vertices:
            vertices[node_id] = Vertex(labels.get(node_id, node_id))
        return vertices[node_id]

    for node_id in nodes:
        get(node_id)
    for source, target in edges:
        get(source).neighbors.append(get(target))
    return vertices


def build_airports(flights: Iterable[Edge], codes: Iterable[str] = ()) -> dict[str, Airport]:
    """Create one ``Airport`` per code and wire the outbound flights."""
    airports: dict[str, Airport] = {}

    def get(code: str) -> Airport:
        if code not in airports:
            airports[code] = Airport(code)
        return airports[code]

    for code in codes:
        get(code)
    for origin, dest in flights:
        get(origin).outbound_flights.append(get(dest))
    return airports


def build_adjacency(edges: Iterable[Edge], nodes: Iterable[str] = ()) -> dict[str, list[str]]:
    """Build a value-to-successors map.

    Every edge source and every id in *nodes* becomes a key. A target that
    is neither stays a sink: it appears in neighbor lists only.
    """
    adjacency: dict[str, list[str]] = {node_id: [] for node_id in nodes}
    for source, target in edges:
        adjacency.setdefault(source, []).append(target)
    return adjacency


def to_networkx[T: Hashable](adjacency: AdjacencyMap[T]) -> nx.DiGraph[Any]:
    """Convert an adjacency map to a DiGraph.

    Keys are added first so isolated keys stay visible; sinks become nodes
    through their incoming edges. Successor order follows the map.
    """
    g: nx.DiGraph[Any] = nx.DiGraph()
    g.add_nodes_from(adjacency)
    for source, targets in adjacency.items():
        for target in targets:
            g.add_edge(source, target)
    return g


def from_networkx(g: nx.DiGraph[Any]) -> dict[Any, list[Any]]:
    """Convert a DiGraph to an adjacency map with every node as a key."""
    return {node: list(g.successors(node)) for node in g.nodes}

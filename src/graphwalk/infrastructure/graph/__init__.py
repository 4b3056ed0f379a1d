"""Graph construction and networkx interop."""

from graphwalk.infrastructure.graph.builder import (
    GraphSpecError,
    build_adjacency,
    build_airports,
    build_vertices,
    from_networkx,
    parse_edge,
    parse_label,
    to_networkx,
)
from graphwalk.infrastructure.graph.engine import GraphEngine

__all__ = [
    "GraphEngine",
    "GraphSpecError",
    "build_adjacency",
    "build_airports",
    "build_vertices",
    "from_networkx",
    "parse_edge",
    "parse_label",
    "to_networkx",
]

"""GraphEngine — lazily built graph views over one edge list.

The same edges back three representations: labeled vertices, airports,
and an adjacency map. Each view is built on first access and cached;
commands that never touch a view never build it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from graphwalk.domain.graph import Airport, Vertex
from graphwalk.infrastructure.graph.builder import (
    Edge,
    build_adjacency,
    build_airports,
    build_vertices,
    parse_edge,
    parse_label,
)

logger = logging.getLogger(__name__)


class GraphEngine:
    """Lazy-loading graph views backed by an ordered edge list."""

    def __init__(
        self,
        edges: Iterable[Edge],
        *,
        labels: Mapping[str, str] | None = None,
        nodes: Iterable[str] = (),
    ) -> None:
        self._edges = list(edges)
        self._labels = dict(labels or {})
        self._nodes = list(nodes)
        self._vertices: dict[str, Vertex[str]] | None = None
        self._airports: dict[str, Airport] | None = None
        self._adjacency: dict[str, list[str]] | None = None

    @classmethod
    def from_specs(
        cls,
        edge_specs: Iterable[str],
        *,
        label_specs: Iterable[str] = (),
        nodes: Iterable[str] = (),
    ) -> GraphEngine:
        """Build from ``SRC:DST`` and ``ID=LABEL`` strings.

        Raises:
            GraphSpecError: A spec is malformed.
        """
        edges = [parse_edge(spec) for spec in edge_specs]
        labels = dict(parse_label(spec) for spec in label_specs)
        return cls(edges, labels=labels, nodes=[n.strip() for n in nodes])

    @property
    def vertices(self) -> dict[str, Vertex[str]]:
        """Vertices keyed by node id, building on first access."""
        if self._vertices is None:
            self._vertices = build_vertices(self._edges, self._labels, self._all_ids())
            logger.debug("Built %d vertices from %d edges", len(self._vertices), len(self._edges))
        return self._vertices

    @property
    def airports(self) -> dict[str, Airport]:
        """Airports keyed by code, building on first access."""
        if self._airports is None:
            self._airports = build_airports(self._edges, self._all_ids())
            logger.debug("Built %d airports from %d flights", len(self._airports), len(self._edges))
        return self._airports

    @property
    def adjacency(self) -> dict[str, list[str]]:
        """Adjacency map. Only edge sources and listed nodes are keys."""
        if self._adjacency is None:
            self._adjacency = build_adjacency(self._edges, self._nodes)
        return self._adjacency

    def _all_ids(self) -> list[str]:
        # Labeled ids exist as nodes even when no edge mentions them.
        return [*self._nodes, *self._labels]

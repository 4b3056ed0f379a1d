"""WalkService — the five traversal queries over a GraphEngine.

Every method looks up its start node by id, runs the query from
:mod:`graphwalk.core.queries`, and wraps the outcome in a ServiceResult.
Unknown ids are reported as ``NOT_FOUND`` errors; everything else the core
defines a result for.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable
from typing import Any

from graphwalk.core import queries
from graphwalk.domain.types import VisitMode
from graphwalk.services.base import BaseService
from graphwalk.services.result import ServiceResult
from graphwalk.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)


class WalkService(BaseService):
    """Runs depth-first queries against the engine's graph views."""

    # ------------------------------------------------------------------
    # Shared helpers
    # ------------------------------------------------------------------

    def _mode(self, mode: str | None) -> VisitMode:
        return VisitMode(mode) if mode else self._config.visit_mode

    @staticmethod
    def _not_found(op: str, node_id: str, kind: str = "Vertex") -> ServiceResult:
        return ServiceResult.failure(
            op, "NOT_FOUND", f"{kind} '{node_id}' not found in graph", id=node_id
        )

    # ------------------------------------------------------------------
    # Vertex queries
    # ------------------------------------------------------------------

    @traced
    def short_words(self, start_id: str, k: int, *, mode: str | None = None) -> ServiceResult:
        """List labels shorter than *k* reachable from *start_id*."""
        op = "short_words"
        if k < 0:
            return ServiceResult.failure(
                op, "INVALID_ARGUMENT", f"k must be non-negative, got {k}", k=k
            )
        vertex = self._engine.vertices.get(start_id)
        if vertex is None:
            return self._not_found(op, start_id)

        visit_mode = self._mode(mode)
        visited: set[Hashable] = set()
        with trace_span("walk") as span:
            words = queries.short_words(
                vertex, k, mode=visit_mode, strategy=self._config.strategy, visited=visited
            )
            if span:
                span.annotate("visited", len(visited))

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "start": start_id,
                "k": k,
                "mode": str(visit_mode),
                "count": len(words),
                "items": words,
            },
        )

    @traced
    def longest_word(self, start_id: str, *, mode: str | None = None) -> ServiceResult:
        """Find the longest label reachable from *start_id*."""
        op = "longest_word"
        vertex = self._engine.vertices.get(start_id)
        if vertex is None:
            return self._not_found(op, start_id)

        visit_mode = self._mode(mode)
        visited: set[Hashable] = set()
        with trace_span("walk") as span:
            word = queries.longest_word(
                vertex, mode=visit_mode, strategy=self._config.strategy, visited=visited
            )
            if span:
                span.annotate("visited", len(visited))

        return ServiceResult(
            ok=True,
            op=op,
            data={"start": start_id, "mode": str(visit_mode), "word": word, "length": len(word)},
        )

    @traced
    def self_loopers(self, start_id: str, *, mode: str | None = None) -> ServiceResult:
        """List labels of self-looping vertices reachable from *start_id*."""
        op = "self_loopers"
        vertex = self._engine.vertices.get(start_id)
        if vertex is None:
            return self._not_found(op, start_id)

        visit_mode = self._mode(mode)
        visited: set[Hashable] = set()
        with trace_span("walk") as span:
            labels = queries.self_loopers(
                vertex, mode=visit_mode, strategy=self._config.strategy, visited=visited
            )
            if span:
                span.annotate("visited", len(visited))

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "start": start_id,
                "mode": str(visit_mode),
                "count": len(labels),
                "items": labels,
            },
        )

    # ------------------------------------------------------------------
    # Airport reachability
    # ------------------------------------------------------------------

    @traced
    def can_reach(self, start_code: str, destination_code: str) -> ServiceResult:
        """Check whether *destination_code* is reachable from *start_code*."""
        op = "can_reach"
        airports = self._engine.airports
        for code in (start_code, destination_code):
            if code not in airports:
                return self._not_found(op, code, kind="Airport")

        visited: set[Hashable] = set()
        with trace_span("walk") as span:
            found = queries.can_reach(
                airports[start_code],
                airports[destination_code],
                strategy=self._config.strategy,
                visited=visited,
            )
            if span:
                span.annotate("expanded", len(visited))

        logger.debug("can_reach %s -> %s: %s", start_code, destination_code, found)
        return ServiceResult(
            ok=True,
            op=op,
            data={"start": start_code, "destination": destination_code, "reachable": found},
        )

    # ------------------------------------------------------------------
    # Adjacency-map reachability
    # ------------------------------------------------------------------

    @traced
    def unreachable(self, starting: str) -> ServiceResult:
        """List adjacency-map keys not reachable from *starting*.

        An unknown *starting* value is not an error: it reaches nothing,
        so every key is reported, with a warning.
        """
        graph = self._engine.adjacency
        warnings: list[str] = []
        if starting not in graph:
            warnings.append(f"'{starting}' is not a key of the graph; every key is unreachable")

        with trace_span("walk") as span:
            missing = queries.unreachable(graph, starting, strategy=self._config.strategy)
            if span:
                span.annotate("keys", len(graph))
                span.annotate("unreachable", len(missing))

        items: list[Any] = sorted(missing)
        return ServiceResult(
            ok=True,
            op="unreachable",
            data={"start": starting, "count": len(items), "items": items},
            warnings=warnings,
        )

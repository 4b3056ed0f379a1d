"""The five traversal queries.

Each query creates its own visited-set and accumulator at entry and hands
the walk to :func:`graphwalk.core.traversal.depth_first`. Degenerate input
(``None`` start, missing adjacency) never raises; it yields the empty
result documented on each function.

Visited tracking is by vertex identity unless ``mode=VisitMode.VALUE`` is
passed, in which case vertices sharing a label are visited once.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Iterator
from typing import Any

import click

from graphwalk.core.traversal import depth_first, vertex_key
from graphwalk.domain.graph import AdjacencyMap, Airport, Vertex
from graphwalk.domain.types import Strategy, VisitMode

logger = logging.getLogger(__name__)

type Sink = Callable[[Any], None]


def _successors[T](vertex: Vertex[T]) -> list[Vertex[T]]:
    return vertex.neighbors


def _flights(airport: Airport) -> list[Airport]:
    return airport.outbound_flights


def _walk[T](
    vertex: Vertex[T] | None,
    mode: VisitMode,
    strategy: Strategy,
    visited: set[Hashable] | None,
) -> Iterator[Vertex[T]]:
    return depth_first(
        vertex,
        _successors,
        key=vertex_key(mode),
        visited=visited,
        strategy=strategy,
    )


# ----------------------------------------------------------------------
# Short words
# ----------------------------------------------------------------------


def _iter_short_words(
    vertex: Vertex[str] | None,
    k: int,
    mode: VisitMode,
    strategy: Strategy,
    visited: set[Hashable] | None,
) -> Iterator[str]:
    for v in _walk(vertex, mode, strategy, visited):
        if len(v.label) < k:
            yield v.label


def short_words(
    vertex: Vertex[str] | None,
    k: int,
    *,
    mode: VisitMode = VisitMode.IDENTITY,
    strategy: Strategy = Strategy.STACK,
    visited: set[Hashable] | None = None,
) -> list[str]:
    """Labels strictly shorter than *k*, one per visited vertex, in visit order."""
    return list(_iter_short_words(vertex, k, mode, strategy, visited))


def print_short_words(
    vertex: Vertex[str] | None,
    k: int,
    *,
    sink: Sink = click.echo,
    mode: VisitMode = VisitMode.IDENTITY,
    strategy: Strategy = Strategy.STACK,
) -> None:
    """Emit each reachable label shorter than *k* to *sink*, one per call.

    Labels are emitted as the walk reaches them. A ``None`` vertex emits
    nothing.
    """
    for word in _iter_short_words(vertex, k, mode, strategy, None):
        sink(word)


# ----------------------------------------------------------------------
# Longest word
# ----------------------------------------------------------------------


def longest_word(
    vertex: Vertex[str] | None,
    *,
    mode: VisitMode = VisitMode.IDENTITY,
    strategy: Strategy = Strategy.STACK,
    visited: set[Hashable] | None = None,
) -> str:
    """Return the longest label reachable from *vertex*, including its own.

    Among labels of equal length the first one met in pre-order wins.
    Returns ``""`` for a ``None`` vertex.
    """
    longest = ""
    for v in _walk(vertex, mode, strategy, visited):
        if len(v.label) > len(longest):
            longest = v.label
    return longest


# ----------------------------------------------------------------------
# Self-loopers
# ----------------------------------------------------------------------


def _iter_self_loopers[T](
    vertex: Vertex[T] | None,
    mode: VisitMode,
    strategy: Strategy,
    visited: set[Hashable] | None,
) -> Iterator[T]:
    for v in _walk(vertex, mode, strategy, visited):
        if v.is_self_loop:
            yield v.label


def self_loopers[T](
    vertex: Vertex[T] | None,
    *,
    mode: VisitMode = VisitMode.IDENTITY,
    strategy: Strategy = Strategy.STACK,
    visited: set[Hashable] | None = None,
) -> list[T]:
    """Labels of reachable vertices that list themselves as a neighbor."""
    return list(_iter_self_loopers(vertex, mode, strategy, visited))


def print_self_loopers[T](
    vertex: Vertex[T] | None,
    *,
    sink: Sink = click.echo,
    mode: VisitMode = VisitMode.IDENTITY,
    strategy: Strategy = Strategy.STACK,
) -> None:
    """Emit the label of every reachable self-looping vertex to *sink*."""
    for label in _iter_self_loopers(vertex, mode, strategy, None):
        sink(label)


# ----------------------------------------------------------------------
# Airport reachability
# ----------------------------------------------------------------------


def can_reach(
    start: Airport | None,
    destination: Airport | None,
    *,
    strategy: Strategy = Strategy.STACK,
    visited: set[Hashable] | None = None,
) -> bool:
    """True iff *destination* can be reached from *start* by outbound flights.

    An airport always reaches itself. The walk stops at the first sighting
    of *destination*; *visited* (if given) then holds only the airports
    expanded up to that point.
    """
    if start is None or destination is None:
        return False
    if start is destination:
        return True
    walk = depth_first(start, _flights, visited=visited, strategy=strategy)
    return any(airport is destination for airport in walk)


# ----------------------------------------------------------------------
# Adjacency-map reachability
# ----------------------------------------------------------------------


def reachable[T](
    graph: AdjacencyMap[T] | None,
    starting: T | None,
    *,
    strategy: Strategy = Strategy.STACK,
) -> set[T]:
    """Return every value reachable from *starting*, *starting* included.

    Values with no entry in *graph* have no outgoing edges, and a ``None``
    graph has no edges at all. A ``None`` *starting* reaches nothing.
    """
    if starting is None:
        return set()
    edges: AdjacencyMap[T] = graph or {}

    def successors(value: T) -> Any:
        return edges.get(value, ())

    seen: set[Any] = set()
    for _ in depth_first(starting, successors, visited=seen, strategy=strategy):
        pass
    return seen


def unreachable[T](
    graph: AdjacencyMap[T] | None,
    starting: T | None,
    *,
    strategy: Strategy = Strategy.STACK,
) -> set[T]:
    """Return the keys of *graph* that cannot be reached from *starting*.

    A ``None`` graph has no keys and yields an empty set. A ``None`` or
    unknown *starting* value reaches no key, so every key is returned.
    A *starting* key always reaches itself and is never returned.
    """
    if graph is None:
        return set()
    keys = set(graph)
    if starting is None:
        return keys
    found = reachable(graph, starting, strategy=strategy)
    logger.debug("unreachable: %d keys, %d reachable from %r", len(keys), len(found), starting)
    return keys - found

"""Depth-first walker shared by every query.

The walker is a generator: it yields each reachable node exactly once, in
pre-order, following every neighbor list in its given order. Queries apply
their own action to the yielded nodes, and a consumer that stops iterating
stops the walk (no further node is expanded).

A node is marked visited before its neighbors are expanded, so self-loops
and longer cycles terminate. ``None`` nodes are skipped at every level.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Hashable, Iterable, Iterator
from typing import Any

from graphwalk.domain.types import Strategy, VisitMode

type KeyFunc = Callable[[Any], Hashable]


def _same(node: Any) -> Hashable:
    return node  # type: ignore[no-any-return]


_label = operator.attrgetter("label")


def vertex_key(mode: VisitMode = VisitMode.IDENTITY) -> KeyFunc:
    """Return the visited-set key function for *mode*.

    Identity mode keys on the node object itself (``Vertex`` hashes by
    identity); value mode keys on ``node.label``.
    """
    if mode is VisitMode.VALUE:
        return _label
    return _same


def depth_first[N](
    start: N | None,
    neighbors: Callable[[N], Iterable[N]],
    *,
    key: KeyFunc | None = None,
    visited: set[Hashable] | None = None,
    strategy: Strategy = Strategy.STACK,
) -> Iterator[N]:
    """Yield every node reachable from *start*, once each, in pre-order.

    Args:
        start: First node. ``None`` yields nothing.
        neighbors: Returns the ordered successors of a node.
        key: Maps a node to its visited-set entry. Defaults to the node.
        visited: Caller-owned visited-set. Filled in place, so once the
            walk is exhausted it holds the key of every reachable node.
            Nodes whose key is already present are not visited.
        strategy: ``STACK`` (no recursion limit) or ``RECURSIVE``.
    """
    seen: set[Hashable] = set() if visited is None else visited
    key_of = key or _same
    if strategy is Strategy.RECURSIVE:
        return _walk_recursive(start, neighbors, key_of, seen)
    return _walk_stack(start, neighbors, key_of, seen)


def _walk_stack[N](
    start: N | None,
    neighbors: Callable[[N], Iterable[N]],
    key_of: KeyFunc,
    seen: set[Hashable],
) -> Iterator[N]:
    # Visited is checked on pop and successors are pushed reversed, which
    # reproduces the recursive pre-order exactly.
    stack: list[N | None] = [start]
    while stack:
        node = stack.pop()
        if node is None:
            continue
        k = key_of(node)
        if k in seen:
            continue
        seen.add(k)
        yield node
        stack.extend(reversed(list(neighbors(node))))


def _walk_recursive[N](
    node: N | None,
    neighbors: Callable[[N], Iterable[N]],
    key_of: KeyFunc,
    seen: set[Hashable],
) -> Iterator[N]:
    if node is None:
        return
    k = key_of(node)
    if k in seen:
        return
    seen.add(k)
    yield node
    for neighbor in neighbors(node):
        yield from _walk_recursive(neighbor, neighbors, key_of, seen)

"""Tests for the shared depth-first walker."""

from __future__ import annotations

import itertools
from collections.abc import Hashable

import pytest

from graphwalk.core.traversal import depth_first, vertex_key
from graphwalk.domain.graph import Vertex
from graphwalk.domain.types import Strategy, VisitMode
from tests.conftest import chain, link

STRATEGIES = [Strategy.STACK, Strategy.RECURSIVE]


def _labels(vertices: object) -> list[str]:
    return [v.label for v in vertices]  # type: ignore[attr-defined]


def _succ(v: Vertex[str]) -> list[Vertex[str]]:
    return v.neighbors


def _diamond() -> Vertex[str]:
    """A -> [B, C], B -> [D], C -> [D, A], D -> [A]."""
    a, b, c, d = (Vertex(x) for x in "ABCD")
    link(a, b, c)
    link(b, d)
    link(c, d, a)
    link(d, a)
    return a


@pytest.mark.parametrize("strategy", STRATEGIES)
class TestDepthFirst:
    def test_none_start_yields_nothing(self, strategy: Strategy) -> None:
        assert list(depth_first(None, _succ, strategy=strategy)) == []

    def test_preorder_neighbor_order(self, strategy: Strategy) -> None:
        assert _labels(depth_first(_diamond(), _succ, strategy=strategy)) == ["A", "B", "D", "C"]

    def test_self_loop_terminates(self, strategy: Strategy) -> None:
        a = Vertex("a")
        link(a, a, a)
        assert _labels(depth_first(a, _succ, strategy=strategy)) == ["a"]

    def test_two_cycle_visits_each_once(self, strategy: Strategy) -> None:
        a, b = Vertex("A"), Vertex("B")
        link(a, b)
        link(b, a)
        assert _labels(depth_first(a, _succ, strategy=strategy)) == ["A", "B"]

    def test_fills_caller_visited(self, strategy: Strategy) -> None:
        start = _diamond()
        visited: set[Hashable] = set()
        walked = list(depth_first(start, _succ, visited=visited, strategy=strategy))
        assert visited == set(walked)

    def test_preseeded_visited_is_skipped(self, strategy: Strategy) -> None:
        a, b, c = chain(["a", "b", "c"])
        visited: set[Hashable] = {b}
        assert _labels(depth_first(a, _succ, visited=visited, strategy=strategy)) == ["a"]

    def test_start_already_visited(self, strategy: Strategy) -> None:
        a = Vertex("a")
        assert list(depth_first(a, _succ, visited={a}, strategy=strategy)) == []

    def test_none_neighbor_skipped(self, strategy: Strategy) -> None:
        a, b = Vertex("a"), Vertex("b")
        a.neighbors = [None, b]  # type: ignore[list-item]
        assert _labels(depth_first(a, _succ, strategy=strategy)) == ["a", "b"]

    def test_value_key_dedupes_equal_labels(self, strategy: Strategy) -> None:
        a, b, c = chain(["x", "y", "x"])
        walked = depth_first(a, _succ, key=vertex_key(VisitMode.VALUE), strategy=strategy)
        assert list(walked) == [a, b]

    def test_stopping_early_expands_nothing_more(self, strategy: Strategy) -> None:
        calls: list[str] = []

        def counting(v: Vertex[str]) -> list[Vertex[str]]:
            calls.append(v.label)
            return v.neighbors

        first = list(itertools.islice(depth_first(_diamond(), counting, strategy=strategy), 1))
        assert _labels(first) == ["A"]
        assert calls == []

    def test_each_node_expanded_once(self, strategy: Strategy) -> None:
        calls: list[str] = []

        def counting(v: Vertex[str]) -> list[Vertex[str]]:
            calls.append(v.label)
            return v.neighbors

        list(depth_first(_diamond(), counting, strategy=strategy))
        assert sorted(calls) == ["A", "B", "C", "D"]

    def test_works_on_plain_values(self, strategy: Strategy) -> None:
        graph = {1: [2, 3], 2: [3], 3: [1]}
        walked = depth_first(1, lambda n: graph.get(n, []), strategy=strategy)
        assert list(walked) == [1, 2, 3]


def test_strategies_agree_on_dense_graph() -> None:
    vertices = [Vertex(str(i)) for i in range(12)]
    for i, v in enumerate(vertices):
        # Every vertex points at a few others, including backwards and itself.
        link(v, *(vertices[(i * k + 3) % 12] for k in (1, 5, 7, 11)))
    stack = list(depth_first(vertices[0], _succ, strategy=Strategy.STACK))
    recursive = list(depth_first(vertices[0], _succ, strategy=Strategy.RECURSIVE))
    assert stack == recursive
    assert len(stack) == len(set(stack))


def test_stack_strategy_handles_long_chain() -> None:
    vertices = chain([f"v{i}" for i in range(10_000)])
    walked = list(depth_first(vertices[0], _succ))
    assert len(walked) == 10_000
    assert walked[-1] is vertices[-1]


def test_identity_key_is_the_node() -> None:
    v = Vertex("a")
    assert vertex_key()(v) is v
    assert vertex_key(VisitMode.VALUE)(v) == "a"

"""Tests for traversal policy enums."""

from graphwalk.domain.types import Strategy, VisitMode


def test_visit_mode_values() -> None:
    assert [m.value for m in VisitMode] == ["identity", "value"]
    assert VisitMode("value") is VisitMode.VALUE


def test_strategy_values() -> None:
    assert [s.value for s in Strategy] == ["stack", "recursive"]
    assert str(Strategy.STACK) == "stack"

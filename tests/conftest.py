"""Shared pytest fixtures and test helpers for graphwalk tests."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest
from click.testing import CliRunner

from graphwalk.domain.graph import Airport, Vertex
from graphwalk.services.telemetry import _current_span, disable_telemetry


@pytest.fixture(autouse=True)
def _reset_global_state() -> Generator[None]:
    """Undo telemetry and logging changes made by a CLI invocation."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    gw_level = logging.getLogger("graphwalk").level
    yield
    disable_telemetry()
    _current_span.set(None)
    root.handlers = handlers
    root.setLevel(level)
    logging.getLogger("graphwalk").setLevel(gw_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def cat_cycle() -> dict[str, Vertex[str]]:
    """A("cat") -> B("elephant") -> C("cat") -> A."""
    a, b, c = Vertex("cat"), Vertex("elephant"), Vertex("cat")
    link(a, b)
    link(b, c)
    link(c, a)
    return {"A": a, "B": b, "C": c}


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def link[T](source: Vertex[T], *targets: Vertex[T]) -> None:
    """Append *targets* to *source*'s neighbors, in order."""
    source.neighbors.extend(targets)


def chain(labels: list[str]) -> list[Vertex[str]]:
    """Build a linear chain of vertices, returning them in order."""
    vertices = [Vertex(label) for label in labels]
    for prev, nxt in zip(vertices, vertices[1:], strict=False):
        link(prev, nxt)
    return vertices


def fly(origin: Airport, *destinations: Airport) -> None:
    """Add outbound flights from *origin*."""
    origin.outbound_flights.extend(destinations)

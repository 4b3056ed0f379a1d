"""Traversal commands: one per query.

The graph is given inline as repeated ``-e SRC:DST`` options; the order of
the options is the neighbor order the walk follows.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

import click

from graphwalk.commands._base import GwCommand, graph_options
from graphwalk.domain.types import VisitMode
from graphwalk.services.walk import WalkService

if TYPE_CHECKING:
    from graphwalk.commands._context import AppContext

_MODE_OPTION = click.option(
    "--mode",
    type=click.Choice([m.value for m in VisitMode]),
    default=None,
    help="Visited-set keying (default from config: identity).",
)


def _service(
    app: AppContext,
    op: str,
    edges: Iterable[str],
    labels: Iterable[str] = (),
    nodes: Iterable[str] = (),
) -> WalkService:
    engine = app.build_engine(op, edges, labels, nodes)
    return WalkService(engine, app.settings.traversal)


@click.command(
    "short-words",
    cls=GwCommand,
    context_settings={"ignore_unknown_options": True},
    examples="""\
  graphwalk short-words A 4 -e A:B -e B:C -e C:A -l A=cat -l B=elephant -l C=cat
  graphwalk short-words A 4 --mode value -e A:B -e B:C -l A=cat -l B=elephant -l C=cat
  graphwalk --quiet short-words A 3 -e A:B -l A=ox -l B=yak""",
)
@click.argument("start")
@click.argument("k", type=int)
@graph_options
@_MODE_OPTION
@click.pass_obj
def short_words(
    app: AppContext,
    start: str,
    k: int,
    edges: tuple[str, ...],
    labels: tuple[str, ...],
    nodes: tuple[str, ...],
    mode: str | None,
) -> None:
    """Print reachable labels shorter than K characters."""
    service = _service(app, "short_words", edges, labels, nodes)
    app.emit(service.short_words(start, k, mode=mode))


@click.command(
    "longest-word",
    cls=GwCommand,
    examples="""\
  graphwalk longest-word A -e A:B -e B:C -e C:A -l A=cat -l B=elephant -l C=cat
  graphwalk --json longest-word A -e A:B -l A=hi -l B=hello""",
)
@click.argument("start")
@graph_options
@_MODE_OPTION
@click.pass_obj
def longest_word(
    app: AppContext,
    start: str,
    edges: tuple[str, ...],
    labels: tuple[str, ...],
    nodes: tuple[str, ...],
    mode: str | None,
) -> None:
    """Find the longest label reachable from START."""
    service = _service(app, "longest_word", edges, labels, nodes)
    app.emit(service.longest_word(start, mode=mode))


@click.command(
    "self-loopers",
    cls=GwCommand,
    examples="""\
  graphwalk self-loopers A -e A:A -e A:B -e B:C -e C:C
  graphwalk --quiet self-loopers A -e A:B -e B:B""",
)
@click.argument("start")
@graph_options
@_MODE_OPTION
@click.pass_obj
def self_loopers(
    app: AppContext,
    start: str,
    edges: tuple[str, ...],
    labels: tuple[str, ...],
    nodes: tuple[str, ...],
    mode: str | None,
) -> None:
    """Print reachable vertices that have an edge to themselves."""
    service = _service(app, "self_loopers", edges, labels, nodes)
    app.emit(service.self_loopers(start, mode=mode))


@click.command(
    "can-reach",
    cls=GwCommand,
    examples="""\
  graphwalk can-reach JFK LAX -e JFK:ORD -e ORD:LAX
  graphwalk can-reach JFK LAX -e JFK:ORD -e ORD:JFK -n LAX
  graphwalk --quiet can-reach SFO SFO -n SFO""",
)
@click.argument("start")
@click.argument("destination")
@click.option("-e", "--flight", "flights", multiple=True, metavar="SRC:DST", help="Flight.")
@click.option("-n", "--airport", "airports", multiple=True, metavar="CODE", help="Airport.")
@click.pass_obj
def can_reach(
    app: AppContext,
    start: str,
    destination: str,
    flights: tuple[str, ...],
    airports: tuple[str, ...],
) -> None:
    """Check whether DESTINATION can be reached from START by flights."""
    service = _service(app, "can_reach", flights, nodes=airports)
    app.emit(service.can_reach(start, destination))


@click.command(
    "unreachable",
    cls=GwCommand,
    examples="""\
  graphwalk unreachable A -e A:B -e C:A -n B
  graphwalk --json unreachable X -e A:B""",
)
@click.argument("start")
@click.option("-e", "--edge", "edges", multiple=True, metavar="SRC:DST", help="Directed edge.")
@click.option("-n", "--node", "nodes", multiple=True, metavar="ID", help="Key with no edges.")
@click.pass_obj
def unreachable(
    app: AppContext,
    start: str,
    edges: tuple[str, ...],
    nodes: tuple[str, ...],
) -> None:
    """List graph keys that cannot be reached from START."""
    service = _service(app, "unreachable", edges, nodes=nodes)
    app.emit(service.unreachable(start))

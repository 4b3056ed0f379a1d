"""Graph node types: generic labeled vertices and airports.

Nodes hold shared references to their successors, so any cycle shape is
allowed, including a node listing itself. Equality and hashing are by
identity: two vertices carrying equal labels are distinct graph nodes.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

type AdjacencyMap[T] = Mapping[T, Sequence[T]]


@dataclass(eq=False)
class Vertex[T]:
    """A graph node holding a label and its ordered outgoing neighbors."""

    label: T
    neighbors: list[Vertex[T]] = field(default_factory=list)

    @property
    def is_self_loop(self) -> bool:
        """True if this vertex lists itself among its neighbors."""
        return any(n is self for n in self.neighbors)

    def __repr__(self) -> str:
        return f"Vertex({self.label!r}, neighbors={len(self.neighbors)})"


@dataclass(eq=False)
class Airport:
    """An airport whose edges are its outbound flights."""

    code: str
    outbound_flights: list[Airport] = field(default_factory=list)

    def __repr__(self) -> str:
        return f"Airport({self.code!r}, flights={len(self.outbound_flights)})"

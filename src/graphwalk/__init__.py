"""graphwalk — cycle-safe depth-first queries over labeled directed graphs."""

from graphwalk.core.queries import (
    can_reach,
    longest_word,
    print_self_loopers,
    print_short_words,
    reachable,
    self_loopers,
    short_words,
    unreachable,
)
from graphwalk.core.traversal import depth_first, vertex_key
from graphwalk.domain.graph import Airport, Vertex
from graphwalk.domain.types import Strategy, VisitMode

__version__ = "0.1.0"

__all__ = [
    "Airport",
    "Strategy",
    "Vertex",
    "VisitMode",
    "__version__",
    "can_reach",
    "depth_first",
    "longest_word",
    "print_self_loopers",
    "print_short_words",
    "reachable",
    "self_loopers",
    "short_words",
    "unreachable",
    "vertex_key",
]

"""Traversal policy enums.

``VisitMode`` decides what the visited-set stores; ``Strategy`` decides how
the depth-first walker keeps its pending work.
"""

from __future__ import annotations

from enum import StrEnum


class VisitMode(StrEnum):
    """Keying policy for the per-call visited-set."""

    IDENTITY = "identity"
    VALUE = "value"


class Strategy(StrEnum):
    """Walker implementation. Both yield the same pre-order sequence."""

    STACK = "stack"
    RECURSIVE = "recursive"

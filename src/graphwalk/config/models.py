"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, graphwalk.toml only contains
overrides. An empty (or absent) file yields identity visited tracking and
the stack walker.
"""

from __future__ import annotations

from pydantic import BaseModel

from graphwalk.domain.types import Strategy, VisitMode


class TraversalConfig(BaseModel):
    """[traversal] section."""

    model_config = {"frozen": True}

    visit_mode: VisitMode = VisitMode.IDENTITY
    strategy: Strategy = Strategy.STACK


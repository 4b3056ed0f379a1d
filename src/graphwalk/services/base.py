"""BaseService — foundation for graphwalk services.

Every service receives a :class:`GraphEngine` at construction time and
reads whichever graph view (vertices, airports, adjacency) it needs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from graphwalk.config.models import TraversalConfig

if TYPE_CHECKING:
    from graphwalk.infrastructure.graph.engine import GraphEngine


class BaseService:
    """Base for service-layer classes.

    Usage::

        class WalkService(BaseService):
            def longest_word(self, start_id: str) -> ServiceResult:
                vertex = self._engine.vertices.get(start_id)
                ...
    """

    def __init__(self, engine: GraphEngine, config: TraversalConfig | None = None) -> None:
        self._engine = engine
        self._config = config or TraversalConfig()

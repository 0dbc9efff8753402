"""BaseService — abstract foundation for all friendnet services.

Every service receives the :class:`FriendshipGraph` it operates on at
construction time. The graph is owned by the caller (a CLI invocation or
a shell session); services hold no state of their own.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from friendnet.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from friendnet.domain.errors import GraphError
    from friendnet.domain.graph import FriendshipGraph

logger = logging.getLogger(__name__)


class BaseService:
    """Abstract base for all service-layer classes.

    Subclasses translate name-based requests into engine calls and engine
    exceptions into failed results, so callers never see a raised
    :class:`~friendnet.domain.errors.GraphError`.

    Usage::

        class NetworkService(BaseService):
            def add_person(self, name: str) -> ServiceResult:
                try:
                    position = self._graph.add_vertex(name)
                except GraphError as exc:
                    return self._failure("add_person", exc)
                ...
    """

    def __init__(self, graph: FriendshipGraph) -> None:
        self._graph = graph

    @property
    def graph(self) -> FriendshipGraph:
        return self._graph

    @staticmethod
    def _error(op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        """Return a failed result with a structured error."""
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail),
        )

    @classmethod
    def _failure(cls, op: str, exc: GraphError) -> ServiceResult:
        """Convert a rejected engine call into a failed result."""
        logger.info("%s rejected: %s (%s)", op, exc.message, exc.code)
        return cls._error(op, exc.code, exc.message, **exc.detail)

"""Error taxonomy for the friendship graph engine.

Every engine failure is recoverable: the graph is left exactly as it was
before the call. Each error carries a stable ``code`` that the service
layer copies into :class:`~friendnet.services.result.ServiceError`.
"""

from __future__ import annotations

from typing import Any, ClassVar


class GraphError(ValueError):
    """Base class for all reported graph engine failures."""

    code: ClassVar[str] = "GRAPH_ERROR"

    def __init__(self, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.message = message
        self.detail: dict[str, Any] = detail


class CapacityExceededError(GraphError):
    """The graph already holds its maximum number of vertices."""

    code = "CAPACITY_EXCEEDED"


class DuplicateNameError(GraphError):
    """A vertex with the same (case-sensitive) name already exists."""

    code = "DUPLICATE_NAME"


class InvalidVertexError(GraphError):
    """A position is out of range or a name is unknown."""

    code = "INVALID_VERTEX"


class SelfLoopError(GraphError):
    """An edge from a vertex to itself was requested."""

    code = "SELF_LOOP"


class EdgeExistsError(GraphError):
    """The two vertices are already adjacent."""

    code = "EDGE_EXISTS"


class EdgeNotFoundError(GraphError):
    """The two vertices are not adjacent."""

    code = "EDGE_NOT_FOUND"

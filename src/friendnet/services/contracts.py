"""Typed payload contracts for view and traversal results.

These models validate payload shapes before they leave the service layer
so regressions in the data handed to renderers and exporters (for example
``items`` vs ``order``) fail fast in tests.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


def dump_validated[T: BaseModel](model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="python")


class PersonRef(BaseModel):
    """A vertex as seen by front ends: its current position and name."""

    position: int = Field(ge=0)
    name: str


class AdjacencyRow(BaseModel):
    """One person and their friends, in adjacency iteration order."""

    model_config = ConfigDict(extra="allow")

    position: int = Field(ge=0)
    name: str
    friends: list[PersonRef]


class AdjacencyListData(BaseModel):
    """Payload contract for ``NetworkService.adjacency_list``."""

    count: int
    items: list[AdjacencyRow]


class AdjacencyMatrixData(BaseModel):
    """Payload contract for ``NetworkService.adjacency_matrix``."""

    count: int
    names: list[str]
    matrix: list[list[bool]]

    @model_validator(mode="after")
    def _square(self) -> AdjacencyMatrixData:
        if len(self.matrix) != self.count or any(len(row) != self.count for row in self.matrix):
            msg = f"adjacency matrix must be {self.count}x{self.count}"
            raise ValueError(msg)
        return self


class IncidenceEdge(BaseModel):
    """One incidence-matrix column: the edge endpoints by position and name."""

    index: int = Field(ge=0)
    u: int = Field(ge=0)
    v: int = Field(ge=0)
    names: tuple[str, str]


class IncidenceMatrixData(BaseModel):
    """Payload contract for ``NetworkService.incidence_matrix``."""

    count: int
    edge_count: int
    names: list[str]
    edges: list[IncidenceEdge]
    matrix: list[list[bool]]

    @model_validator(mode="after")
    def _shape(self) -> IncidenceMatrixData:
        if len(self.edges) != self.edge_count:
            msg = "edge list length must equal edge_count"
            raise ValueError(msg)
        if len(self.matrix) != self.count or any(
            len(row) != self.edge_count for row in self.matrix
        ):
            msg = f"incidence matrix must be {self.count}x{self.edge_count}"
            raise ValueError(msg)
        return self


class TraversalData(BaseModel):
    """Payload contract for ``breadth_first`` and ``depth_first``."""

    algorithm: Literal["bfs", "dfs"]
    start: PersonRef
    count: int
    items: list[PersonRef]


class OverviewRow(BaseModel):
    """One line of the friends overview."""

    position: int = Field(ge=0)
    name: str
    friends: list[str]


class FriendsOverviewData(BaseModel):
    """Payload contract for ``NetworkService.friends_overview``."""

    count: int
    items: list[OverviewRow]

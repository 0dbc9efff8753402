"""NetworkService — name-based mutations, views, and traversals.

Front ends talk about people by name; the engine talks in positions.
This service resolves names to positions immediately before each engine
call, so positions are never held across a mutation.
"""

from __future__ import annotations

import logging
import unicodedata
from typing import TYPE_CHECKING, Any

from friendnet.domain.errors import GraphError
from friendnet.domain.sample import SAMPLE_FRIENDSHIPS, SAMPLE_PEOPLE
from friendnet.services.base import BaseService
from friendnet.services.contracts import (
    AdjacencyListData,
    AdjacencyMatrixData,
    FriendsOverviewData,
    IncidenceMatrixData,
    TraversalData,
    dump_validated,
)
from friendnet.services.result import ServiceResult

if TYPE_CHECKING:
    from friendnet.domain.graph import FriendshipGraph

logger = logging.getLogger(__name__)

DEFAULT_MAX_NAME_LENGTH = 50


class NetworkService(BaseService):
    """Handles people, friendships, structural views, and traversals."""

    def __init__(
        self,
        graph: FriendshipGraph,
        *,
        max_name_length: int = DEFAULT_MAX_NAME_LENGTH,
    ) -> None:
        super().__init__(graph)
        self._max_name_length = max_name_length

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _validate_name(self, op: str, name: str) -> ServiceResult | None:
        """Return a failed result if *name* is unusable, else None."""
        if not name:
            return self._error(op, "INVALID_NAME", "Name must not be empty")
        if len(name) > self._max_name_length:
            return self._error(
                op,
                "INVALID_NAME",
                f"Name is longer than {self._max_name_length} characters",
                name=name,
                max_length=self._max_name_length,
            )
        if any(unicodedata.category(ch) == "Cc" for ch in name):
            return self._error(
                op,
                "INVALID_NAME",
                "Name must not contain control characters",
                name=name,
            )
        return None

    def _ref(self, position: int) -> dict[str, Any]:
        return {"position": position, "name": self._graph.name_of(position)}

    def _meta(self) -> dict[str, Any]:
        return {"count": self._graph.count, "edge_count": self._graph.edge_count}

    # ------------------------------------------------------------------
    # People
    # ------------------------------------------------------------------

    def add_person(self, name: str) -> ServiceResult:
        """Add a person with no friends at the next free position."""
        op = "add_person"
        name = name.strip()
        invalid = self._validate_name(op, name)
        if invalid is not None:
            return invalid
        try:
            position = self._graph.add_vertex(name)
        except GraphError as exc:
            return self._failure(op, exc)

        logger.debug("Added person %r at position %d", name, position)
        return ServiceResult(
            ok=True,
            op=op,
            data={"position": position, "name": name},
            meta=self._meta(),
        )

    def remove_person(self, name: str) -> ServiceResult:
        """Remove a person and every friendship touching them.

        Positions of everyone after the removed person shift down by one.
        """
        op = "remove_person"
        name = name.strip()
        try:
            position = self._graph.position_of(name)
            friends = [self._graph.name_of(p) for p in self._graph.neighbors(position)]
            self._graph.remove_vertex(position)
        except GraphError as exc:
            return self._failure(op, exc)

        logger.debug(
            "Removed person %r from position %d (%d friendships dropped)",
            name,
            position,
            len(friends),
        )
        return ServiceResult(
            ok=True,
            op=op,
            data={"position": position, "name": name, "removed_friendships": friends},
            meta=self._meta(),
        )

    def find_person(self, name: str) -> ServiceResult:
        """Look up a person's current position and friends by exact name."""
        op = "find_person"
        name = name.strip()
        try:
            position = self._graph.position_of(name)
        except GraphError as exc:
            return self._failure(op, exc)
        friends = [self._graph.name_of(p) for p in self._graph.neighbors(position)]
        return ServiceResult(
            ok=True,
            op=op,
            data={"position": position, "name": name, "friends": friends},
        )

    # ------------------------------------------------------------------
    # Friendships
    # ------------------------------------------------------------------

    def add_friendship(self, first: str, second: str) -> ServiceResult:
        """Make *first* and *second* friends."""
        op = "add_friendship"
        first, second = first.strip(), second.strip()
        try:
            u = self._graph.position_of(first)
            v = self._graph.position_of(second)
            self._graph.add_edge(u, v)
        except GraphError as exc:
            return self._failure(op, exc)

        logger.debug("Added friendship %r -- %r", first, second)
        return ServiceResult(
            ok=True,
            op=op,
            data={"first": self._ref(u), "second": self._ref(v)},
            meta=self._meta(),
        )

    def remove_friendship(self, first: str, second: str) -> ServiceResult:
        """End the friendship between *first* and *second*."""
        op = "remove_friendship"
        first, second = first.strip(), second.strip()
        try:
            u = self._graph.position_of(first)
            v = self._graph.position_of(second)
            self._graph.remove_edge(u, v)
        except GraphError as exc:
            return self._failure(op, exc)

        logger.debug("Removed friendship %r -- %r", first, second)
        return ServiceResult(
            ok=True,
            op=op,
            data={"first": self._ref(u), "second": self._ref(v)},
            meta=self._meta(),
        )

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    def adjacency_list(self) -> ServiceResult:
        """Each person with their friends, in adjacency iteration order."""
        names = dict(self._graph.vertices())
        items = [
            {
                "position": entry.position,
                "name": entry.name,
                "friends": [{"position": p, "name": names[p]} for p in entry.neighbors],
            }
            for entry in self._graph.adjacency_list()
        ]
        data = dump_validated(AdjacencyListData, {"count": len(items), "items": items})
        return ServiceResult(ok=True, op="adjacency_list", data=data)

    def adjacency_matrix(self) -> ServiceResult:
        """Everyone x everyone grid; cell (i, j) is True when i and j are friends."""
        data = dump_validated(
            AdjacencyMatrixData,
            {
                "count": self._graph.count,
                "names": [name for _, name in self._graph.vertices()],
                "matrix": self._graph.adjacency_matrix(),
            },
        )
        return ServiceResult(ok=True, op="adjacency_matrix", data=data)

    def incidence_matrix(self) -> ServiceResult:
        """Vertex x edge grid; columns follow ascending ``(u, v)`` with ``u < v``."""
        names = [name for _, name in self._graph.vertices()]
        incidence = self._graph.incidence_matrix()
        edges = [
            {"index": index, "u": u, "v": v, "names": (names[u], names[v])}
            for index, (u, v) in enumerate(incidence.edges)
        ]
        data = dump_validated(
            IncidenceMatrixData,
            {
                "count": len(names),
                "edge_count": len(edges),
                "names": names,
                "edges": edges,
                "matrix": [list(row) for row in incidence.rows],
            },
        )
        return ServiceResult(ok=True, op="incidence_matrix", data=data)

    def friends_overview(self) -> ServiceResult:
        """Compact per-person friend names (the ASCII view)."""
        names = dict(self._graph.vertices())
        items = [
            {
                "position": entry.position,
                "name": entry.name,
                "friends": [names[p] for p in entry.neighbors],
            }
            for entry in self._graph.adjacency_list()
        ]
        data = dump_validated(FriendsOverviewData, {"count": len(items), "items": items})
        return ServiceResult(ok=True, op="friends_overview", data=data)

    def summary(self) -> ServiceResult:
        """Current number of people and friendships, and the capacity."""
        return ServiceResult(
            ok=True,
            op="summary",
            data={
                "count": self._graph.count,
                "edge_count": self._graph.edge_count,
                "capacity": self._graph.capacity,
            },
        )

    # ------------------------------------------------------------------
    # Traversals
    # ------------------------------------------------------------------

    def breadth_first(self, name: str) -> ServiceResult:
        """Everyone reachable from *name*, nearest friends first."""
        return self._traverse("bfs", name)

    def depth_first(self, name: str) -> ServiceResult:
        """Everyone reachable from *name*, following each chain to its end first."""
        return self._traverse("dfs", name)

    def _traverse(self, algorithm: str, name: str) -> ServiceResult:
        op = "breadth_first" if algorithm == "bfs" else "depth_first"
        name = name.strip()
        try:
            start = self._graph.position_of(name)
            if algorithm == "bfs":
                order = self._graph.breadth_first(start)
            else:
                order = self._graph.depth_first(start)
        except GraphError as exc:
            return self._failure(op, exc)

        data = dump_validated(
            TraversalData,
            {
                "algorithm": algorithm,
                "start": self._ref(start),
                "count": len(order),
                "items": [self._ref(p) for p in order],
            },
        )
        return ServiceResult(ok=True, op=op, data=data)

    # ------------------------------------------------------------------
    # Sample network
    # ------------------------------------------------------------------

    def load_sample(self) -> ServiceResult:
        """Add the predefined sample people and friendships.

        Anything that cannot be added (already present, capacity reached,
        endpoint missing) is skipped with a warning; the load itself
        always succeeds.
        """
        warnings: list[str] = []
        people_added: list[str] = []
        friendships_added: list[tuple[str, str]] = []

        for name in SAMPLE_PEOPLE:
            try:
                self._graph.add_vertex(name)
            except GraphError as exc:
                warnings.append(f"Skipped '{name}': {exc.message}")
                continue
            people_added.append(name)

        for first, second in SAMPLE_FRIENDSHIPS:
            try:
                self._graph.add_edge(
                    self._graph.position_of(first), self._graph.position_of(second)
                )
            except GraphError as exc:
                warnings.append(f"Skipped {first} -- {second}: {exc.message}")
                continue
            friendships_added.append((first, second))

        logger.debug(
            "Loaded sample network: %d people, %d friendships, %d skipped",
            len(people_added),
            len(friendships_added),
            len(warnings),
        )
        return ServiceResult(
            ok=True,
            op="load_sample",
            data={
                "people_added": people_added,
                "friendships_added": [list(pair) for pair in friendships_added],
                "count": self._graph.count,
                "edge_count": self._graph.edge_count,
            },
            warnings=warnings,
        )

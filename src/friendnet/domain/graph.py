"""FriendshipGraph — undirected, unweighted graph of people and friendships.

Storage is an ordered list of vertices, each holding a display name and an
adjacency list of neighbour *positions*. The adjacency lists are the only
source of truth: the adjacency and incidence matrices are derived on every
call and never cached.

Positions are not stable identifiers. Removing the vertex at position ``k``
compacts the vertex list and renumbers every adjacency entry above ``k``, so
callers holding positions across a removal must look them up again by name.

Adjacency order is most-recently-added first: a new friendship is inserted
at the front of both adjacency lists. Traversals visit neighbours in that
order, so the result of ``breadth_first``/``depth_first`` is deterministic
for a given sequence of mutations.

INVARIANT: ``u in adjacency(v)`` iff ``v in adjacency(u)``.
INVARIANT: every adjacency entry is a valid position ``< count``.
INVARIANT: vertex names are pairwise distinct (case-sensitive).
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

from friendnet.domain.errors import (
    CapacityExceededError,
    DuplicateNameError,
    EdgeExistsError,
    EdgeNotFoundError,
    InvalidVertexError,
    SelfLoopError,
)

DEFAULT_CAPACITY = 20

type Matrix = list[list[bool]]


@dataclass
class _Vertex:
    name: str
    adjacency: list[int] = field(default_factory=list)


@dataclass(frozen=True)
class AdjacencyEntry:
    """One row of the adjacency-list view."""

    position: int
    name: str
    neighbors: tuple[int, ...]


@dataclass(frozen=True)
class IncidenceMatrix:
    """Vertex x edge incidence grid.

    ``edges[e]`` is the ``(u, v)`` pair (``u < v``) for column ``e``;
    ``rows[i][e]`` is True iff vertex ``i`` is an endpoint of that edge.
    """

    edges: tuple[tuple[int, int], ...]
    rows: tuple[tuple[bool, ...], ...]


class FriendshipGraph:
    """Bounded in-memory graph engine for a small social network.

    Every mutation validates all of its preconditions before touching any
    state, so a call that raises leaves the graph unchanged.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            msg = f"capacity must be at least 1, got {capacity}"
            raise ValueError(msg)
        self._capacity = capacity
        self._vertices: list[_Vertex] = []

    def __repr__(self) -> str:
        return (
            f"FriendshipGraph(count={self.count}, edges={self.edge_count}, "
            f"capacity={self._capacity})"
        )

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.find(name) is not None

    @property
    def capacity(self) -> int:
        """Maximum number of vertices the graph can hold."""
        return self._capacity

    @property
    def count(self) -> int:
        """Current number of vertices."""
        return len(self._vertices)

    @property
    def edge_count(self) -> int:
        """Current number of (undirected) edges."""
        return sum(len(v.adjacency) for v in self._vertices) // 2

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def find(self, name: str) -> int | None:
        """Return the position of the vertex named *name*, or None."""
        for position, vertex in enumerate(self._vertices):
            if vertex.name == name:
                return position
        return None

    def position_of(self, name: str) -> int:
        """Return the position of *name*, raising if it is unknown."""
        position = self.find(name)
        if position is None:
            msg = f"No person named '{name}'"
            raise InvalidVertexError(msg, name=name)
        return position

    def name_of(self, position: int) -> str:
        self._check_position(position)
        return self._vertices[position].name

    def neighbors(self, position: int) -> list[int]:
        """Return a copy of the adjacency list of *position*, in iteration order."""
        self._check_position(position)
        return list(self._vertices[position].adjacency)

    def has_edge(self, u: int, v: int) -> bool:
        self._check_position(u)
        self._check_position(v)
        return v in self._vertices[u].adjacency

    def _check_position(self, position: int) -> None:
        if not 0 <= position < len(self._vertices):
            msg = f"Position {position} is out of range [0, {len(self._vertices)})"
            raise InvalidVertexError(msg, position=position, count=len(self._vertices))

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_vertex(self, name: str) -> int:
        """Append a vertex with no friends and return its position."""
        if len(self._vertices) >= self._capacity:
            msg = f"Vertex limit reached ({self._capacity})"
            raise CapacityExceededError(msg, capacity=self._capacity, name=name)
        existing = self.find(name)
        if existing is not None:
            msg = f"A person named '{name}' already exists"
            raise DuplicateNameError(msg, name=name, position=existing)
        self._vertices.append(_Vertex(name=name))
        return len(self._vertices) - 1

    def add_edge(self, u: int, v: int) -> None:
        """Make *u* and *v* adjacent. Both adjacency lists gain the new entry first."""
        self._check_position(u)
        self._check_position(v)
        if u == v:
            msg = f"Cannot befriend '{self._vertices[u].name}' with themselves"
            raise SelfLoopError(msg, position=u)
        if v in self._vertices[u].adjacency:
            msg = (
                f"'{self._vertices[u].name}' and '{self._vertices[v].name}' "
                "are already friends"
            )
            raise EdgeExistsError(msg, u=u, v=v)
        self._vertices[u].adjacency.insert(0, v)
        self._vertices[v].adjacency.insert(0, u)

    def remove_edge(self, u: int, v: int) -> None:
        """Remove the edge between *u* and *v* from both adjacency lists."""
        self._check_position(u)
        self._check_position(v)
        if u == v or v not in self._vertices[u].adjacency:
            msg = (
                f"'{self._vertices[u].name}' and '{self._vertices[v].name}' "
                "are not friends"
            )
            raise EdgeNotFoundError(msg, u=u, v=v)
        self._vertices[u].adjacency.remove(v)
        self._vertices[v].adjacency.remove(u)

    def remove_vertex(self, target: int) -> str:
        """Remove the vertex at *target*, compacting positions. Returns its name.

        Order matters: edges to *target* are dropped while positions are still
        in the pre-shift space, then the list is compacted, then every entry
        above *target* is renumbered to follow its vertex.
        """
        self._check_position(target)
        for position, vertex in enumerate(self._vertices):
            if position != target:
                vertex.adjacency = [p for p in vertex.adjacency if p != target]
        removed = self._vertices.pop(target)
        for vertex in self._vertices:
            vertex.adjacency = [p - 1 if p > target else p for p in vertex.adjacency]
        return removed.name

    def clear(self) -> None:
        """Remove every vertex and edge."""
        self._vertices.clear()

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def breadth_first(self, start: int) -> list[int]:
        """Return the positions reachable from *start* in breadth-first order.

        A vertex is marked visited when it is enqueued, so each reachable
        vertex appears exactly once even when the graph has cycles.
        """
        self._check_position(start)
        visited = [False] * len(self._vertices)
        visited[start] = True
        queue: deque[int] = deque([start])
        order: list[int] = []
        while queue:
            u = queue.popleft()
            order.append(u)
            for v in self._vertices[u].adjacency:
                if not visited[v]:
                    visited[v] = True
                    queue.append(v)
        return order

    def depth_first(self, start: int) -> list[int]:
        """Return the positions reachable from *start* in depth-first pre-order.

        Uses an explicit stack of neighbour iterators, which visits vertices
        in exactly the order of the recursive formulation.
        """
        self._check_position(start)
        visited = [False] * len(self._vertices)
        visited[start] = True
        order = [start]
        stack = [iter(self._vertices[start].adjacency)]
        while stack:
            for v in stack[-1]:
                if not visited[v]:
                    visited[v] = True
                    order.append(v)
                    stack.append(iter(self._vertices[v].adjacency))
                    break
            else:
                stack.pop()
        return order

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------

    def vertices(self) -> list[tuple[int, str]]:
        """Return ``(position, name)`` for every vertex, in position order."""
        return [(position, vertex.name) for position, vertex in enumerate(self._vertices)]

    def edges(self) -> list[tuple[int, int]]:
        """Return every edge once as ``(u, v)`` with ``u < v``, ascending by u then v."""
        result: list[tuple[int, int]] = []
        for u, vertex in enumerate(self._vertices):
            result.extend((u, v) for v in sorted(vertex.adjacency) if u < v)
        return result

    def adjacency_list(self) -> list[AdjacencyEntry]:
        return [
            AdjacencyEntry(position=position, name=vertex.name, neighbors=tuple(vertex.adjacency))
            for position, vertex in enumerate(self._vertices)
        ]

    def adjacency_matrix(self) -> Matrix:
        """Return a ``count x count`` grid; cell (i, j) is True iff i and j are adjacent."""
        n = len(self._vertices)
        matrix = [[False] * n for _ in range(n)]
        for u, vertex in enumerate(self._vertices):
            for v in vertex.adjacency:
                matrix[u][v] = True
        return matrix

    def incidence_matrix(self) -> IncidenceMatrix:
        """Return the ``count x edge_count`` incidence grid and its column edges."""
        edges = self.edges()
        rows = tuple(
            tuple(i in (u, v) for u, v in edges) for i in range(len(self._vertices))
        )
        return IncidenceMatrix(edges=tuple(edges), rows=rows)

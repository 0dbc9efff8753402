"""Tests for FriendshipGraph — storage, compaction, views, and traversals."""

from __future__ import annotations

import random

import pytest

from friendnet.domain.errors import (
    CapacityExceededError,
    DuplicateNameError,
    EdgeExistsError,
    EdgeNotFoundError,
    InvalidVertexError,
    SelfLoopError,
)
from friendnet.domain.graph import DEFAULT_CAPACITY, FriendshipGraph
from friendnet.domain.sample import SAMPLE_FRIENDSHIPS, SAMPLE_PEOPLE
from tests.conftest import assert_consistent, build_graph

# ---------------------------------------------------------------------------
# Construction and lookup
# ---------------------------------------------------------------------------


class TestConstruction:
    def test_empty_graph(self, graph: FriendshipGraph) -> None:
        assert graph.count == 0
        assert len(graph) == 0
        assert graph.edge_count == 0
        assert graph.capacity == DEFAULT_CAPACITY == 20
        assert graph.vertices() == []
        assert graph.edges() == []

    def test_rejects_non_positive_capacity(self) -> None:
        with pytest.raises(ValueError, match="capacity"):
            FriendshipGraph(capacity=0)

    def test_repr(self) -> None:
        g = build_graph(["A", "B"], [("A", "B")], capacity=5)
        assert repr(g) == "FriendshipGraph(count=2, edges=1, capacity=5)"


class TestAddVertex:
    def test_positions_follow_creation_order(self, graph: FriendshipGraph) -> None:
        assert graph.add_vertex("Alice") == 0
        assert graph.add_vertex("Bob") == 1
        assert graph.add_vertex("Carol") == 2
        assert graph.vertices() == [(0, "Alice"), (1, "Bob"), (2, "Carol")]

    def test_new_vertex_has_no_friends(self, graph: FriendshipGraph) -> None:
        graph.add_vertex("Alice")
        assert graph.neighbors(0) == []

    def test_duplicate_name(self, graph: FriendshipGraph) -> None:
        graph.add_vertex("Alice")
        with pytest.raises(DuplicateNameError) as excinfo:
            graph.add_vertex("Alice")
        assert excinfo.value.code == "DUPLICATE_NAME"
        assert excinfo.value.detail == {"name": "Alice", "position": 0}
        assert graph.count == 1

    def test_names_are_case_sensitive(self, graph: FriendshipGraph) -> None:
        graph.add_vertex("alice")
        assert graph.add_vertex("Alice") == 1

    def test_capacity_exceeded(self) -> None:
        g = FriendshipGraph(capacity=2)
        g.add_vertex("A")
        g.add_vertex("B")
        with pytest.raises(CapacityExceededError) as excinfo:
            g.add_vertex("C")
        assert excinfo.value.detail["capacity"] == 2
        assert g.count == 2

    def test_capacity_checked_before_duplicate(self) -> None:
        g = FriendshipGraph(capacity=1)
        g.add_vertex("A")
        with pytest.raises(CapacityExceededError):
            g.add_vertex("A")

    def test_capacity_frees_up_after_removal(self) -> None:
        g = FriendshipGraph(capacity=1)
        g.add_vertex("A")
        g.remove_vertex(0)
        assert g.add_vertex("B") == 0


class TestLookup:
    def test_find(self) -> None:
        g = build_graph(["Alice", "Bob"], [])
        assert g.find("Bob") == 1
        assert g.find("bob") is None
        assert g.find("Zed") is None

    def test_position_of_unknown_name(self) -> None:
        g = build_graph(["Alice"], [])
        with pytest.raises(InvalidVertexError) as excinfo:
            g.position_of("Zed")
        assert excinfo.value.detail == {"name": "Zed"}

    def test_contains(self) -> None:
        g = build_graph(["Alice"], [])
        assert "Alice" in g
        assert "Bob" not in g
        assert 0 not in g

    def test_name_of(self) -> None:
        g = build_graph(["Alice", "Bob"], [])
        assert g.name_of(1) == "Bob"

    @pytest.mark.parametrize("position", [-1, 2, 99])
    def test_out_of_range_positions(self, position: int) -> None:
        g = build_graph(["Alice", "Bob"], [])
        with pytest.raises(InvalidVertexError):
            g.name_of(position)
        with pytest.raises(InvalidVertexError):
            g.neighbors(position)

    def test_neighbors_returns_copy(self) -> None:
        g = build_graph(["A", "B"], [("A", "B")])
        g.neighbors(0).clear()
        assert g.neighbors(0) == [1]


# ---------------------------------------------------------------------------
# Edges
# ---------------------------------------------------------------------------


class TestAddEdge:
    def test_symmetric(self) -> None:
        g = build_graph(["A", "B"], [])
        g.add_edge(0, 1)
        assert g.has_edge(0, 1)
        assert g.has_edge(1, 0)
        assert g.edge_count == 1
        assert_consistent(g)

    def test_most_recent_friend_first(self) -> None:
        g = build_graph(["A", "B", "C", "D"], [("A", "B"), ("A", "C"), ("D", "A")])
        assert g.neighbors(0) == [3, 2, 1]

    def test_self_loop_for_every_vertex(self) -> None:
        g = build_graph(["A", "B", "C"], [("A", "B")])
        for x in range(g.count):
            with pytest.raises(SelfLoopError):
                g.add_edge(x, x)
        assert g.edges() == [(0, 1)]

    @pytest.mark.parametrize(("u", "v"), [(0, 3), (3, 0), (-1, 1), (0, -1)])
    def test_invalid_vertex(self, u: int, v: int) -> None:
        g = build_graph(["A", "B", "C"], [])
        with pytest.raises(InvalidVertexError):
            g.add_edge(u, v)
        assert g.edge_count == 0

    def test_out_of_range_beats_self_loop(self) -> None:
        g = build_graph(["A"], [])
        with pytest.raises(InvalidVertexError):
            g.add_edge(5, 5)

    def test_edge_exists_either_direction(self) -> None:
        g = build_graph(["A", "B"], [("A", "B")])
        with pytest.raises(EdgeExistsError):
            g.add_edge(0, 1)
        with pytest.raises(EdgeExistsError):
            g.add_edge(1, 0)
        assert g.neighbors(0) == [1]
        assert g.neighbors(1) == [0]

    def test_add_twice_remove_add_again(self) -> None:
        g = build_graph(["A", "B"], [])
        g.add_edge(0, 1)
        with pytest.raises(EdgeExistsError):
            g.add_edge(0, 1)
        g.remove_edge(0, 1)
        g.add_edge(0, 1)
        assert g.edges() == [(0, 1)]
        assert_consistent(g)


class TestRemoveEdge:
    def test_removes_both_sides(self) -> None:
        g = build_graph(["A", "B", "C"], [("A", "B"), ("A", "C")])
        g.remove_edge(1, 0)
        assert g.neighbors(0) == [2]
        assert g.neighbors(1) == []
        assert_consistent(g)

    def test_edge_not_found(self) -> None:
        g = build_graph(["A", "B"], [])
        with pytest.raises(EdgeNotFoundError) as excinfo:
            g.remove_edge(0, 1)
        assert excinfo.value.code == "EDGE_NOT_FOUND"

    def test_self_pair_not_found(self) -> None:
        g = build_graph(["A"], [])
        with pytest.raises(EdgeNotFoundError):
            g.remove_edge(0, 0)

    def test_invalid_vertex(self) -> None:
        g = build_graph(["A"], [])
        with pytest.raises(InvalidVertexError):
            g.remove_edge(0, 1)

    def test_preserves_order_of_remaining_friends(self) -> None:
        g = build_graph(["A", "B", "C", "D"], [("A", "B"), ("A", "C"), ("A", "D")])
        g.remove_edge(0, 2)
        assert g.neighbors(0) == [3, 1]


# ---------------------------------------------------------------------------
# Vertex removal and compaction
# ---------------------------------------------------------------------------


class TestRemoveVertex:
    def test_compaction(self) -> None:
        g = build_graph(["A", "B", "C", "D"], [("A", "C"), ("B", "D")])
        assert g.remove_vertex(1) == "B"
        assert g.vertices() == [(0, "A"), (1, "C"), (2, "D")]
        assert g.edges() == [(0, 1)]
        assert g.neighbors(2) == []
        assert g.neighbors(0) == [1]
        assert g.neighbors(1) == [0]
        assert_consistent(g)

    def test_renumbers_entries_after_target(self) -> None:
        g = build_graph(
            ["A", "B", "C", "D", "E"],
            [("A", "E"), ("C", "D"), ("B", "E"), ("A", "B")],
        )
        g.remove_vertex(1)
        assert [name for _, name in g.vertices()] == ["A", "C", "D", "E"]
        # E moved from 4 to 3; C and D from 2, 3 to 1, 2.
        assert g.neighbors(0) == [3]
        assert g.neighbors(1) == [2]
        assert g.neighbors(2) == [1]
        assert g.neighbors(3) == [0]
        assert_consistent(g)

    def test_remove_first(self) -> None:
        g = build_graph(["Alice", "Bob", "Carol"], [("Alice", "Bob"), ("Alice", "Carol")])
        g.remove_vertex(0)
        assert g.vertices() == [(0, "Bob"), (1, "Carol")]
        assert g.edges() == []

    def test_remove_last(self) -> None:
        g = build_graph(["A", "B", "C"], [("A", "C"), ("A", "B")])
        g.remove_vertex(2)
        assert g.vertices() == [(0, "A"), (1, "B")]
        assert g.neighbors(0) == [1]

    def test_remove_only_vertex(self) -> None:
        g = build_graph(["A"], [])
        g.remove_vertex(0)
        assert g.count == 0

    @pytest.mark.parametrize("target", [-1, 3])
    def test_invalid_vertex(self, target: int) -> None:
        g = build_graph(["A", "B", "C"], [("A", "B")])
        with pytest.raises(InvalidVertexError):
            g.remove_vertex(target)
        assert g.count == 3
        assert g.edges() == [(0, 1)]

    def test_name_is_free_again(self) -> None:
        g = build_graph(["A", "B"], [("A", "B")])
        g.remove_vertex(0)
        assert g.add_vertex("A") == 1
        assert g.neighbors(1) == []

    def test_clear(self) -> None:
        g = build_graph(["A", "B"], [("A", "B")])
        g.clear()
        assert g.count == 0
        assert g.edge_count == 0


class TestRandomOperationSequences:
    """Symmetry and range invariants hold after arbitrary mutation sequences."""

    @pytest.mark.parametrize("seed", range(25))
    def test_invariants(self, seed: int) -> None:
        rng = random.Random(seed)
        g = FriendshipGraph(capacity=8)
        counter = 0
        for _ in range(200):
            action = rng.choice(["add_vertex", "add_edge", "remove_edge", "remove_vertex"])
            n = g.count
            try:
                if action == "add_vertex":
                    counter += 1
                    g.add_vertex(f"p{rng.randrange(counter + 3)}")
                elif action == "add_edge":
                    g.add_edge(rng.randrange(-1, n + 1), rng.randrange(-1, n + 1))
                elif action == "remove_edge":
                    g.remove_edge(rng.randrange(-1, n + 1), rng.randrange(-1, n + 1))
                else:
                    g.remove_vertex(rng.randrange(-1, n + 1))
            except (
                CapacityExceededError,
                DuplicateNameError,
                InvalidVertexError,
                SelfLoopError,
                EdgeExistsError,
                EdgeNotFoundError,
            ):
                pass
            assert_consistent(g)
            assert g.count <= g.capacity


# ---------------------------------------------------------------------------
# Derived views
# ---------------------------------------------------------------------------


def _sample_graph() -> FriendshipGraph:
    return build_graph(list(SAMPLE_PEOPLE), list(SAMPLE_FRIENDSHIPS))


class TestViews:
    def test_adjacency_list(self) -> None:
        g = _sample_graph()
        rows = {entry.name: entry.neighbors for entry in g.adjacency_list()}
        assert rows == {
            "Alice": (2, 1),
            "Bob": (2, 3, 0),
            "Carol": (1, 4, 0),
            "Dave": (5, 1),
            "Eve": (5, 2),
            "Frank": (3, 4),
        }

    def test_adjacency_matrix(self) -> None:
        g = build_graph(["A", "B", "C"], [("A", "B"), ("B", "C")])
        assert g.adjacency_matrix() == [
            [False, True, False],
            [True, False, True],
            [False, True, False],
        ]

    def test_adjacency_matrix_empty(self, graph: FriendshipGraph) -> None:
        assert graph.adjacency_matrix() == []

    def test_edges_sorted(self) -> None:
        assert _sample_graph().edges() == [
            (0, 1),
            (0, 2),
            (1, 2),
            (1, 3),
            (2, 4),
            (3, 5),
            (4, 5),
        ]

    def test_incidence_matrix_columns(self) -> None:
        g = _sample_graph()
        incidence = g.incidence_matrix()
        assert len(incidence.edges) == g.edge_count == 7
        assert len(incidence.rows) == g.count
        for e, (u, v) in enumerate(incidence.edges):
            column = [row[e] for row in incidence.rows]
            assert column.count(True) == 2
            assert column[u] and column[v]

    def test_incidence_matrix_without_edges(self) -> None:
        g = build_graph(["A", "B"], [])
        incidence = g.incidence_matrix()
        assert incidence.edges == ()
        assert incidence.rows == ((), ())

    def test_views_follow_mutations(self) -> None:
        g = build_graph(["A", "B", "C"], [("A", "B")])
        before = g.adjacency_matrix()
        g.add_edge(1, 2)
        assert g.adjacency_matrix() != before
        assert g.adjacency_matrix()[1][2]
        g.remove_vertex(0)
        assert g.adjacency_matrix() == [[False, True], [True, False]]
        assert g.incidence_matrix().edges == ((0, 1),)


# ---------------------------------------------------------------------------
# Traversals
# ---------------------------------------------------------------------------


class TestBreadthFirst:
    def test_end_to_end_scenario(self) -> None:
        g = FriendshipGraph()
        assert [g.add_vertex(n) for n in ("Alice", "Bob", "Carol")] == [0, 1, 2]
        g.add_edge(g.position_of("Alice"), g.position_of("Bob"))
        g.add_edge(g.position_of("Alice"), g.position_of("Carol"))
        # Most recent friendship first: Carol before Bob.
        assert g.breadth_first(g.position_of("Alice")) == [0, 2, 1]

        g.remove_vertex(g.position_of("Alice"))
        assert g.vertices() == [(0, "Bob"), (1, "Carol")]
        assert g.edges() == []

    def test_sample_order(self) -> None:
        g = _sample_graph()
        order = [g.name_of(p) for p in g.breadth_first(0)]
        assert order == ["Alice", "Carol", "Bob", "Eve", "Dave", "Frank"]

    def test_triangle_terminates(self) -> None:
        g = build_graph(["A", "B", "C"], [("A", "B"), ("B", "C"), ("C", "A")])
        order = g.breadth_first(0)
        assert order[0] == 0
        assert sorted(order) == [0, 1, 2]

    def test_only_reachable_vertices(self) -> None:
        g = build_graph(["A", "B", "C", "D"], [("A", "B"), ("C", "D")])
        assert g.breadth_first(0) == [0, 1]
        assert g.breadth_first(3) == [3, 2]

    def test_isolated_start(self) -> None:
        g = build_graph(["A", "B"], [])
        assert g.breadth_first(1) == [1]

    def test_invalid_start(self) -> None:
        g = build_graph(["A"], [])
        with pytest.raises(InvalidVertexError):
            g.breadth_first(1)

    def test_level_order(self) -> None:
        # A - B - D and A - C - E: distance-1 people come before distance-2.
        g = build_graph(
            ["A", "B", "C", "D", "E"],
            [("A", "B"), ("A", "C"), ("B", "D"), ("C", "E")],
        )
        order = g.breadth_first(0)
        assert set(order[1:3]) == {1, 2}
        assert set(order[3:]) == {3, 4}


class TestDepthFirst:
    def test_sample_order(self) -> None:
        g = _sample_graph()
        order = [g.name_of(p) for p in g.depth_first(0)]
        assert order == ["Alice", "Carol", "Bob", "Dave", "Frank", "Eve"]

    def test_preorder_descends_before_siblings(self) -> None:
        # Star with a tail: A's friends (most recent first) are C, B; B has D.
        g = build_graph(["A", "B", "C", "D"], [("A", "B"), ("B", "D"), ("A", "C")])
        assert g.depth_first(0) == [0, 2, 1, 3]
        assert g.depth_first(1) == [1, 3, 0, 2]

    def test_cycle_terminates(self) -> None:
        g = build_graph(["A", "B", "C"], [("A", "B"), ("B", "C"), ("C", "A")])
        order = g.depth_first(0)
        assert len(order) == 3
        assert set(order) == {0, 1, 2}

    def test_long_chain(self) -> None:
        names = [f"p{i}" for i in range(20)]
        g = build_graph(names, list(zip(names, names[1:], strict=False)))
        assert g.depth_first(0) == list(range(20))

    def test_only_reachable_vertices(self) -> None:
        g = build_graph(["A", "B", "C"], [("B", "C")])
        assert g.depth_first(0) == [0]
        assert g.depth_first(2) == [2, 1]

    def test_invalid_start(self, graph: FriendshipGraph) -> None:
        with pytest.raises(InvalidVertexError):
            graph.depth_first(0)

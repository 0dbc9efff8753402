"""Shared pytest fixtures and test helpers for friendnet tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from friendnet.domain.graph import FriendshipGraph
from friendnet.services.network import NetworkService


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty directory with no config overrides.

    Keeps a developer's own friendnet.toml or FRIENDNET_* variables from
    leaking into results.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("FRIENDNET_CONFIG", raising=False)
    monkeypatch.delenv("FRIENDNET_SAMPLE", raising=False)
    monkeypatch.delenv("FRIENDNET_GRAPH__MAX_VERTICES", raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo the handler swap configure_logging() performs on each CLI run."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    app_logger = logging.getLogger("friendnet")
    app_level = app_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    app_logger.setLevel(app_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def graph() -> FriendshipGraph:
    """Empty graph with the default capacity."""
    return FriendshipGraph()


@pytest.fixture
def network(graph: FriendshipGraph) -> NetworkService:
    """NetworkService over the empty ``graph`` fixture."""
    return NetworkService(graph)


@pytest.fixture
def sample_network(network: NetworkService) -> NetworkService:
    """NetworkService with the sample network loaded."""
    result = network.load_sample()
    assert result.ok, result.error
    assert result.warnings == []
    return network


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def build_graph(
    names: list[str],
    edges: list[tuple[str, str]],
    *,
    capacity: int = 20,
) -> FriendshipGraph:
    """Build a graph from names and name pairs, in the given order."""
    g = FriendshipGraph(capacity=capacity)
    for name in names:
        g.add_vertex(name)
    for first, second in edges:
        g.add_edge(g.position_of(first), g.position_of(second))
    return g


def assert_consistent(g: FriendshipGraph) -> None:
    """Check the structural invariants through the public API."""
    n = g.count
    names = [name for _, name in g.vertices()]
    assert len(set(names)) == n
    for u in range(n):
        neighbors = g.neighbors(u)
        assert len(neighbors) == len(set(neighbors)), "duplicate adjacency entry"
        for v in neighbors:
            assert 0 <= v < n, "dangling adjacency entry"
            assert v != u, "self-loop"
            assert u in g.neighbors(v), "asymmetric edge"
    matrix = g.adjacency_matrix()
    for u in range(n):
        for v in range(n):
            assert matrix[u][v] == (v in g.neighbors(u))
            assert matrix[u][v] == matrix[v][u]

"""NetworkX snapshot of a friendship graph.

Built fresh from the engine's ``(position, name)`` and ``(u, v)``
enumerations on every call; nothing is cached across mutations.
At the engine's vertex limit a full build is effectively free.
"""

from __future__ import annotations

from collections.abc import Iterable

import networkx as nx


def build_snapshot(
    vertices: Iterable[tuple[int, str]],
    edges: Iterable[tuple[int, int]],
) -> nx.Graph[int]:
    """Build an undirected NetworkX graph keyed by position.

    Adds all vertices first (so people without friends are still present),
    then the edges. Each node carries its display name as ``name``.
    """
    g: nx.Graph[int] = nx.Graph()
    for position, name in vertices:
        g.add_node(position, name=name)
    g.add_edges_from(edges)
    return g

"""ExportService — graph description export (Graphviz DOT and JSON).

Builds a NetworkX snapshot of the current graph and serializes it.
Output is returned as a string in ``data["content"]``; writing it to a
file is the caller's concern.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any

import networkx as nx

from friendnet.infrastructure.graph.snapshot import build_snapshot
from friendnet.services.base import BaseService
from friendnet.services.result import ServiceResult

logger = logging.getLogger(__name__)

EXPORT_FORMATS = ("dot", "json")

_DOT_ID = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def _dot_string(text: str) -> str:
    """Quote *text* as a DOT string literal that stays on one line."""
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    escaped = escaped.replace("\r\n", "\\n").replace("\n", "\\n").replace("\r", "\\n")
    return f'"{escaped}"'


class ExportService(BaseService):
    """Export the friendship graph in portable text formats."""

    def export_graph(self, *, fmt: str = "dot", graph_name: str = "friendships") -> ServiceResult:
        """Export the current graph.

        Formats:
        - ``dot`` — Graphviz DOT, one line per person then one per friendship
        - ``json`` — ``{"nodes": [...], "links": [...]}`` keyed by position
        """
        fmt = fmt.lower()
        if fmt not in EXPORT_FORMATS:
            return self._error(
                "export_graph",
                "INVALID_FORMAT",
                f"Unknown graph format: {fmt}",
                format=fmt,
                valid=list(EXPORT_FORMATS),
            )

        g = build_snapshot(self._graph.vertices(), self._graph.edges())
        content = self._to_dot(g, graph_name) if fmt == "dot" else self._to_json(g)
        logger.debug(
            "Exported graph as %s (%d nodes, %d edges)",
            fmt,
            g.number_of_nodes(),
            g.number_of_edges(),
        )
        return ServiceResult(
            ok=True,
            op="export_graph",
            data={
                "format": fmt,
                "content": content,
                "node_count": g.number_of_nodes(),
                "edge_count": g.number_of_edges(),
            },
        )

    # ── Private helpers ───────────────────────────────────────────────

    @staticmethod
    def _sorted_edges(g: nx.Graph[int]) -> list[tuple[int, int]]:
        return sorted((min(u, v), max(u, v)) for u, v in g.edges())

    @classmethod
    def _to_dot(cls, g: nx.Graph[int], graph_name: str) -> str:
        """Generate undirected Graphviz DOT notation."""
        if not _DOT_ID.match(graph_name):
            graph_name = _dot_string(graph_name)
        lines = [f"graph {graph_name} {{"]

        for position in sorted(g.nodes()):
            label = _dot_string(str(g.nodes[position].get("name", position)))
            lines.append(f"  v{position} [label={label}];")

        for u, v in cls._sorted_edges(g):
            lines.append(f"  v{u} -- v{v};")

        lines.append("}")
        return "\n".join(lines) + "\n"

    @classmethod
    def _to_json(cls, g: nx.Graph[int]) -> str:
        nodes: list[dict[str, Any]] = [
            {"id": position, "name": g.nodes[position].get("name", "")}
            for position in sorted(g.nodes())
        ]
        links = [{"source": u, "target": v} for u, v in cls._sorted_edges(g)]
        return json.dumps({"nodes": nodes, "links": links}, indent=2) + "\n"

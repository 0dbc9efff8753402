"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.

Person names are user input, so they are always wrapped in ``Text``
rather than printed as markup strings.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from friendnet.output.console import create_console, get_output

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from friendnet.services.result import ServiceResult

type Renderer = Callable[..., None]

# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    Views and traversals print one name per line; everything else prints
    only the status line.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(str(item.get("name", "")) for item in items if isinstance(item, dict))
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="fn.ok"), Text(f"  {result.op}", style="fn.op"))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="fn.key")
    if key == "position":
        v = Text(str(value), style="fn.position")
    elif key == "name":
        v = Text(str(value), style="fn.name")
    elif isinstance(value, (dict, list)):
        v = Text(json.dumps(value, separators=(",", ":")))
    else:
        v = Text(str(value))
    console.print(k + v)


def _person(item: dict[str, Any]) -> Text:
    return Text.assemble((f"{item['position']}", "fn.position"), ": ", (item["name"], "fn.name"))


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(Text(f"    {k}: {v}"))


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="fn.error"),
        Text(f"  {result.op}", style="fn.op"),
        Text(" — ") + Text(msg),
    )

    if verbose and err:
        console.print(Text(f"  code: {err.code}", style="dim"))
        if err.detail:
            console.print(Text("  detail:", style="dim"))
            for k, v in err.detail.items():
                console.print(Text(f"    {k}: {v}"))


def _grid_table(columns: list[str]) -> Table:
    table = Table(show_edge=False, pad_edge=False)
    table.add_column("#", justify="right", style="fn.position")
    for column in columns:
        table.add_column(column, justify="right")
    table.add_column("name", style="fn.name")
    return table


def _cell(value: bool) -> Text:
    return Text("1", style="fn.edge") if value else Text("0", style="fn.none")


# ── Mutation renderers ────────────────────────────────────────────────


def _render_mutation(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render add/remove person and friendship results."""
    _status_line(console, result)
    data = result.data
    if "first" in data and "second" in data:
        console.print(
            Text("  ") + _person(data["first"]) + Text(" -- ") + _person(data["second"])
        )
    else:
        _field(console, "position", data.get("position"))
        _field(console, "name", data.get("name"))
    removed = data.get("removed_friendships")
    if removed:
        _field(console, "removed_friendships", ", ".join(removed))
    if verbose:
        _render_meta(console, result)


def _render_person(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render find_person: position, name, and friends."""
    _status_line(console, result)
    data = result.data
    _field(console, "position", data["position"])
    _field(console, "name", data["name"])
    friends = data.get("friends") or []
    _field(console, "friends", ", ".join(friends) if friends else "(none)")


def _render_sample(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    data = result.data
    _field(console, "people_added", len(data.get("people_added", [])))
    _field(console, "friendships_added", len(data.get("friendships_added", [])))
    _field(console, "count", data.get("count"))
    _field(console, "edge_count", data.get("edge_count"))
    if result.warnings:
        _field(console, "skipped", len(result.warnings))


# ── View renderers ────────────────────────────────────────────────────


def _render_adjacency_list(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    """Render each person followed by their friends in adjacency order."""
    console.print(Text("Adjacency list", style="fn.op"))
    items = result.data.get("items", [])
    if not items:
        console.print(Text("  (empty network)", style="fn.none"))
        return
    for item in items:
        line = Text(" ") + _person(item) + Text(" -> ")
        friends = item.get("friends", [])
        if friends:
            line += Text(" -> ").join(Text(f["name"]) for f in friends)
        else:
            line += Text("NULL", style="fn.none")
        console.print(line)


def _render_adjacency_matrix(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    names: list[str] = result.data.get("names", [])
    matrix: list[list[bool]] = result.data.get("matrix", [])
    console.print(Text("Adjacency matrix", style="fn.op"))
    table = _grid_table([str(j) for j in range(len(names))])
    for i, row in enumerate(matrix):
        table.add_row(str(i), *(_cell(v) for v in row), Text(names[i]))
    console.print(table)
    if not names:
        console.print(Text("(empty network)", style="fn.none"))


def _render_incidence_matrix(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    names: list[str] = result.data.get("names", [])
    edges: list[dict[str, Any]] = result.data.get("edges", [])
    matrix: list[list[bool]] = result.data.get("matrix", [])
    title = f"Incidence matrix ({len(names)} people x {len(edges)} friendships)"
    console.print(Text(title, style="fn.op"))
    table = _grid_table([f"e{edge['index']}" for edge in edges])
    for i, row in enumerate(matrix):
        table.add_row(str(i), *(_cell(v) for v in row), Text(names[i]))
    console.print(table)
    if not edges:
        console.print(Text("(no friendships)", style="fn.none"))
    elif verbose:
        for edge in edges:
            first, second = edge["names"]
            console.print(Text(f"  e{edge['index']}: {edge['u']}-{edge['v']} ({first} -- {second})"))


def _render_overview(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the compact friends view: ``[i] name -- friend, friend``."""
    console.print(Text("Friends", style="fn.op"))
    for item in result.data.get("items", []):
        line = Text.assemble((f"[{item['position']}] ", "fn.position"), (item["name"], "fn.name"))
        friends = item.get("friends", [])
        if friends:
            line += Text(" -- " + ", ".join(friends))
        else:
            line += Text(" -- (no friends)", style="fn.none")
        console.print(line)


def _render_traversal(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render breadth-first / depth-first visit order with a total."""
    data = result.data
    label = "Breadth-first" if data.get("algorithm") == "bfs" else "Depth-first"
    console.print(
        Text(f"{label} visit order from ", style="fn.op")
        + Text(data["start"]["name"], style="fn.name")
        + Text(":", style="fn.op")
    )
    for item in data.get("items", []):
        console.print(Text(" ") + _person(item))
    console.print(Text(f"Total visited: {data.get('count', 0)}", style="fn.key"))


def _render_export(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render an export summary (the content itself goes to a file or stdout)."""
    _status_line(console, result)
    data = result.data
    if "output_file" in data:
        _field(console, "output_file", data["output_file"])
    _field(console, "format", data.get("format"))
    _field(console, "node_count", data.get("node_count"))
    _field(console, "edge_count", data.get("edge_count"))


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Renderer] = {
    # Mutations
    "add_person": _render_mutation,
    "remove_person": _render_mutation,
    "add_friendship": _render_mutation,
    "remove_friendship": _render_mutation,
    "load_sample": _render_sample,
    # Lookup
    "find_person": _render_person,
    # Views
    "adjacency_list": _render_adjacency_list,
    "adjacency_matrix": _render_adjacency_matrix,
    "incidence_matrix": _render_incidence_matrix,
    "friends_overview": _render_overview,
    # Traversals
    "breadth_first": _render_traversal,
    "depth_first": _render_traversal,
    # Export
    "export_graph": _render_export,
}

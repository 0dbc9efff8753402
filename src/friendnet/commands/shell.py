"""Standalone command: interactive menu over one graph for the whole session.

Every failure is reported and the menu is shown again; only ``0`` or end
of input leaves the loop.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING

import click

from friendnet.commands._base import FriendnetCommand

if TYPE_CHECKING:
    from friendnet.commands._context import AppContext
    from friendnet.services.network import NetworkService
    from friendnet.services.result import ServiceResult

_MENU = """
===== Friendship network =====
1 - Add person
2 - Add friendship
3 - Remove person
4 - Remove friendship
5 - Show network (list, matrix, incidence)
6 - Breadth-first search
7 - Depth-first search
8 - Load sample network
9 - Write Graphviz DOT file
10 - Friends overview
0 - Exit"""


def _ask(label: str) -> str:
    return click.prompt(label, default="", show_default=False)


def _build_actions(app: AppContext, network: NetworkService) -> dict[str, Callable[[], None]]:
    """Map each menu choice to the handler that runs it."""

    def emit(*results: ServiceResult) -> None:
        for result in results:
            app.emit(result, fatal=False)

    def add_person() -> None:
        name = _ask("Name of the new person")
        if not name.strip():
            click.echo("Empty name. Cancelled.")
            return
        emit(network.add_person(name))

    def add_friendship() -> None:
        first = _ask("Person 1")
        second = _ask("Person 2")
        emit(network.add_friendship(first, second))

    def remove_person() -> None:
        emit(network.remove_person(_ask("Name of the person to remove")))

    def remove_friendship() -> None:
        first = _ask("Person 1")
        second = _ask("Person 2")
        emit(network.remove_friendship(first, second))

    def show_all() -> None:
        emit(network.adjacency_list(), network.adjacency_matrix(), network.incidence_matrix())

    def breadth_first() -> None:
        emit(network.breadth_first(_ask("Start breadth-first search from")))

    def depth_first() -> None:
        emit(network.depth_first(_ask("Start depth-first search from")))

    def write_dot() -> None:
        filename = click.prompt("DOT file", default=app.settings.export.dot_filename)
        result = app.exporter.export_graph(fmt="dot", graph_name=app.settings.export.graph_name)
        try:
            Path(filename).write_text(result.data["content"], encoding="utf-8")
        except OSError as exc:
            click.echo(f"ERROR: could not write '{filename}': {exc}", err=True)
            return
        click.echo(f"Wrote '{filename}'. Render with: dot -Tpng {filename} -o graph.png")

    return {
        "1": add_person,
        "2": add_friendship,
        "3": remove_person,
        "4": remove_friendship,
        "5": show_all,
        "6": breadth_first,
        "7": depth_first,
        "8": lambda: emit(network.load_sample()),
        "9": write_dot,
        "10": lambda: emit(network.friends_overview()),
    }


@click.command(
    cls=FriendnetCommand,
    examples="""\
  friendnet shell
  friendnet shell --sample
  printf '8\\n6\\nAlice\\n0\\n' | friendnet shell""",
)
@click.option(
    "--sample/--no-sample",
    default=None,
    help="Start with the sample network (default from config).",
)
@click.pass_obj
def shell(app: AppContext, sample: bool | None) -> None:
    """Interactive menu for building and exploring a network."""
    network = app.network
    load = app.settings.shell.load_sample if sample is None else sample
    # A root-level --sample has already seeded the graph.
    if load and not app.settings.sample:
        app.emit(network.load_sample(), fatal=False)

    actions = _build_actions(app, network)
    while True:
        click.echo(_MENU)
        try:
            choice = _ask("Choice").strip()
            if choice == "0":
                break
            action = actions.get(choice)
            if action is None:
                click.echo("Invalid option.")
                continue
            action()
        except click.Abort:
            # End of input
            break
    click.echo("Goodbye.")

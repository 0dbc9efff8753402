"""Standalone commands: breadth-first and depth-first traversal."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from friendnet.commands._base import FriendnetCommand

if TYPE_CHECKING:
    from friendnet.commands._context import AppContext


@click.command(
    cls=FriendnetCommand,
    examples="""\
  friendnet --sample bfs Alice
  friendnet -q --sample bfs Eve""",
)
@click.argument("name")
@click.pass_obj
def bfs(app: AppContext, name: str) -> None:
    """List everyone reachable from NAME, nearest friends first."""
    app.emit(app.network.breadth_first(name))


@click.command(
    cls=FriendnetCommand,
    examples="""\
  friendnet --sample dfs Alice
  friendnet --json --sample dfs Frank""",
)
@click.argument("name")
@click.pass_obj
def dfs(app: AppContext, name: str) -> None:
    """List everyone reachable from NAME, depth-first."""
    app.emit(app.network.depth_first(name))

"""Command group: add and remove friendships."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from friendnet.commands._base import FriendnetGroup

if TYPE_CHECKING:
    from friendnet.commands._context import AppContext

_FRIEND_EXAMPLES = """\
  friendnet -p Alice -p Bob friend add Alice Bob
  friendnet --sample friend remove Alice Bob"""


@click.group(cls=FriendnetGroup, examples=_FRIEND_EXAMPLES)
def friend() -> None:
    """Add and remove friendships."""


@friend.command(
    examples="""\
  friendnet -p Alice -p Bob friend add Alice Bob"""
)
@click.argument("first")
@click.argument("second")
@click.pass_obj
def add(app: AppContext, first: str, second: str) -> None:
    """Make FIRST and SECOND friends."""
    app.emit(app.network.add_friendship(first, second))


@friend.command(
    examples="""\
  friendnet --sample friend remove Alice Bob"""
)
@click.argument("first")
@click.argument("second")
@click.pass_obj
def remove(app: AppContext, first: str, second: str) -> None:
    """End the friendship between FIRST and SECOND."""
    app.emit(app.network.remove_friendship(first, second))

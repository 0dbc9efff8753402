"""Command group: add, remove, and look up people."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from friendnet.commands._base import FriendnetGroup

if TYPE_CHECKING:
    from friendnet.commands._context import AppContext

_PERSON_EXAMPLES = """\
  friendnet person add Alice
  friendnet --sample person remove Bob
  friendnet --sample person find Carol"""


@click.group(cls=FriendnetGroup, examples=_PERSON_EXAMPLES)
def person() -> None:
    """Add, remove, and look up people."""


@person.command(
    examples="""\
  friendnet person add Alice
  friendnet -p Alice person add Alice   # fails: duplicate name"""
)
@click.argument("name")
@click.pass_obj
def add(app: AppContext, name: str) -> None:
    """Add a person with no friends."""
    app.emit(app.network.add_person(name))


@person.command(
    examples="""\
  friendnet --sample person remove Bob
  friendnet --json --sample person remove Alice"""
)
@click.argument("name")
@click.pass_obj
def remove(app: AppContext, name: str) -> None:
    """Remove a person and all of their friendships."""
    app.emit(app.network.remove_person(name))


@person.command(
    examples="""\
  friendnet --sample person find Carol"""
)
@click.argument("name")
@click.pass_obj
def find(app: AppContext, name: str) -> None:
    """Show a person's current position and friends."""
    app.emit(app.network.find_person(name))

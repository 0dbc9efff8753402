"""Command group: structural views of the network."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from friendnet.commands._base import FriendnetGroup

if TYPE_CHECKING:
    from friendnet.commands._context import AppContext

_VIEW_EXAMPLES = """\
  friendnet --sample view list
  friendnet --sample view matrix
  friendnet --sample view incidence
  friendnet --sample view ascii
  friendnet --sample view all
  friendnet --json --sample view matrix"""


@click.group(cls=FriendnetGroup, examples=_VIEW_EXAMPLES)
def view() -> None:
    """Show the network as lists and matrices."""


@view.command(name="list")
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """Adjacency list: each person and their friends."""
    app.emit(app.network.adjacency_list())


@view.command()
@click.pass_obj
def matrix(app: AppContext) -> None:
    """Adjacency matrix (people x people)."""
    app.emit(app.network.adjacency_matrix())


@view.command()
@click.pass_obj
def incidence(app: AppContext) -> None:
    """Incidence matrix (people x friendships)."""
    app.emit(app.network.incidence_matrix())


@view.command(name="ascii")
@click.pass_obj
def ascii_view(app: AppContext) -> None:
    """Compact friends overview, one line per person."""
    app.emit(app.network.friends_overview())


@view.command()
@click.pass_obj
def summary(app: AppContext) -> None:
    """Number of people, friendships, and capacity."""
    app.emit(app.network.summary())


@view.command(name="all")
@click.pass_obj
def all_views(app: AppContext) -> None:
    """Adjacency list, adjacency matrix, and incidence matrix."""
    network = app.network
    app.emit(network.adjacency_list())
    app.emit(network.adjacency_matrix())
    app.emit(network.incidence_matrix())

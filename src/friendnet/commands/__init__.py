"""Subcommand modules for friendnet.

Provides register_commands() which attaches every group and standalone
command to the root CLI group.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group.

    3 groups (have subcommands) + 4 standalone commands.
    """
    # --- Groups ---
    from friendnet.commands.friends import friend
    from friendnet.commands.people import person
    from friendnet.commands.view import view

    cli.add_command(person)
    cli.add_command(friend)
    cli.add_command(view)

    # --- Standalone commands ---
    from friendnet.commands.export import export
    from friendnet.commands.shell import shell
    from friendnet.commands.traverse import bfs, dfs

    cli.add_command(bfs)
    cli.add_command(dfs)
    cli.add_command(export)
    cli.add_command(shell)

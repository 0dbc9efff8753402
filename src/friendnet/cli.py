"""Root CLI group for friendnet with global flags and command registration."""

from __future__ import annotations

import click

from friendnet import __version__
from friendnet.commands import register_commands
from friendnet.commands._context import AppContext
from friendnet.config.settings import FriendnetSettings


def _parse_friendships(
    _ctx: click.Context, _param: click.Parameter, value: tuple[str, ...]
) -> tuple[tuple[str, str], ...]:
    """Split each ``A:B`` option value into a name pair."""
    pairs: list[tuple[str, str]] = []
    for raw in value:
        first, sep, second = raw.partition(":")
        if not sep or not first.strip() or not second.strip():
            msg = f"expected FIRST:SECOND, got '{raw}'"
            raise click.BadParameter(msg)
        pairs.append((first, second))
    return tuple(pairs)


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="friendnet")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option("--sample", is_flag=True, help="Start from the predefined sample network.")
@click.option(
    "-p",
    "--person",
    "people",
    multiple=True,
    metavar="NAME",
    help="Add a person before running the command (repeatable).",
)
@click.option(
    "-f",
    "--friends",
    "friendships",
    multiple=True,
    metavar="A:B",
    callback=_parse_friendships,
    help="Add a friendship before running the command (repeatable).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    sample: bool,
    people: tuple[str, ...],
    friendships: tuple[tuple[str, str], ...],
) -> None:
    """friendnet — explore a friendship network as a graph.

    The network lives in memory for a single command; use ``--sample``,
    ``-p`` and ``-f`` to build one, or ``friendnet shell`` for a session.
    """
    settings = FriendnetSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        sample=sample,
    )
    ctx.obj = AppContext(settings, people=people, friendships=friendships)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)

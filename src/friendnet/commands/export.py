"""Standalone command: export the network as Graphviz DOT or JSON."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from friendnet.commands._base import FriendnetCommand
from friendnet.services.export import EXPORT_FORMATS
from friendnet.services.result import ServiceResult

if TYPE_CHECKING:
    from friendnet.commands._context import AppContext


@click.command(
    cls=FriendnetCommand,
    examples="""\
  friendnet --sample export
  friendnet --sample export --format json --output network.json
  friendnet --sample export --output friendnet.dot && dot -Tpng friendnet.dot -o graph.png""",
)
@click.option(
    "--format",
    "fmt",
    type=click.Choice(EXPORT_FORMATS, case_sensitive=False),
    default=None,
    help="Graph output format (default from config).",
)
@click.option(
    "--output",
    "output_file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Output file (omit to print to stdout).",
)
@click.pass_obj
def export(app: AppContext, fmt: str | None, output_file: str | None) -> None:
    """Export the network as a graph description."""
    result = app.exporter.export_graph(
        fmt=fmt or app.settings.export.default_format,
        graph_name=app.settings.export.graph_name,
    )

    if not result.ok:
        app.emit(result)
        return

    if output_file:
        Path(output_file).write_text(result.data["content"], encoding="utf-8")
        app.emit(
            ServiceResult(
                ok=True,
                op="export_graph",
                data={
                    "format": result.data["format"],
                    "output_file": output_file,
                    "node_count": result.data["node_count"],
                    "edge_count": result.data["edge_count"],
                },
            )
        )
    else:
        # Pipe-friendly: raw content to stdout
        click.echo(result.data["content"], nl=False)

"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Owns the single in-memory graph for the invocation
(built and seeded lazily, so ``--help`` never touches it) and centralizes
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from friendnet.domain.graph import FriendshipGraph
from friendnet.output.formatters import OutputSettings, format_result
from friendnet.services.export import ExportService
from friendnet.services.network import NetworkService

if TYPE_CHECKING:
    from collections.abc import Sequence

    from friendnet.config.settings import FriendnetSettings
    from friendnet.services.result import ServiceResult

logger = logging.getLogger(__name__)


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Seeds come from the root options: ``--sample`` first, then each
    ``--person``, then each ``--friends`` pair. A seed that fails is
    emitted like any other failed result.
    """

    def __init__(
        self,
        settings: FriendnetSettings,
        *,
        people: Sequence[str] = (),
        friendships: Sequence[tuple[str, str]] = (),
    ) -> None:
        self.settings = settings
        self._people = tuple(people)
        self._friendships = tuple(friendships)
        self._graph: FriendshipGraph | None = None

        from friendnet.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def graph(self) -> FriendshipGraph:
        """The graph for this invocation (created and seeded on first access)."""
        if self._graph is None:
            self._graph = FriendshipGraph(capacity=self.settings.graph.max_vertices)
            self._seed(self._graph)
        return self._graph

    @property
    def network(self) -> NetworkService:
        return NetworkService(self.graph, max_name_length=self.settings.graph.max_name_length)

    @property
    def exporter(self) -> ExportService:
        return ExportService(self.graph)

    def _seed(self, graph: FriendshipGraph) -> None:
        service = NetworkService(graph, max_name_length=self.settings.graph.max_name_length)
        if self.settings.sample:
            sample = service.load_sample()
            for warning in sample.warnings:
                logger.warning("Sample network: %s", warning)
        for name in self._people:
            result = service.add_person(name)
            if not result.ok:
                self.emit(result)
        for first, second in self._friendships:
            result = service.add_friendship(first, second)
            if not result.ok:
                self.emit(result)
        logger.debug("Seeded graph with %d people, %d friendships", graph.count, graph.edge_count)

    def emit(self, result: ServiceResult, *, fatal: bool = True) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr; exits with code 1 unless *fatal* is
          False (the interactive shell keeps going).
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
            return
        click.echo(output, err=True)
        if fatal:
            raise SystemExit(1)

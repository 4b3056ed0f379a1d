"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Builds the graph engine from command options and
centralizes result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, NoReturn

import click

from graphwalk.output.formatters import OutputSettings, format_result
from graphwalk.services.result import ServiceResult

if TYPE_CHECKING:
    from graphwalk.config.settings import GraphwalkSettings
    from graphwalk.infrastructure.graph.engine import GraphEngine


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: GraphwalkSettings) -> None:
        self.settings = settings

        from graphwalk.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from graphwalk.services.telemetry import enable_telemetry

            enable_telemetry()

    def build_engine(
        self,
        op: str,
        edges: Iterable[str],
        labels: Iterable[str] = (),
        nodes: Iterable[str] = (),
    ) -> GraphEngine:
        """Build a GraphEngine from CLI specs, emitting an error on bad input."""
        from graphwalk.infrastructure.graph.builder import GraphSpecError
        from graphwalk.infrastructure.graph.engine import GraphEngine

        try:
            return GraphEngine.from_specs(edges, label_specs=labels, nodes=nodes)
        except GraphSpecError as exc:
            self.fail(ServiceResult.failure(op, exc.code, str(exc)))

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout. Warnings go to stderr so they don't
          pollute piped output (in JSON mode they are in the payload).
        * Failure: writes to stderr, exits with code 1.
        """
        if not result.ok:
            self.fail(result)
        settings = self._output_settings()
        click.echo(format_result(result, settings=settings))
        if not settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)

    def fail(self, result: ServiceResult) -> NoReturn:
        """Write a failed result to stderr and exit 1."""
        click.echo(format_result(result, settings=self._output_settings()), err=True)
        raise SystemExit(1)

    def _output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

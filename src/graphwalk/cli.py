"""Root CLI group for graphwalk with global flags and command registration."""

from __future__ import annotations

import click

from graphwalk import __version__
from graphwalk.commands import register_commands
from graphwalk.commands._base import GwGroup
from graphwalk.commands._context import AppContext
from graphwalk.config.settings import GraphwalkSettings

_ROOT_EXAMPLES = """\
  graphwalk longest-word A -e A:B -e B:C -e C:A -l A=cat -l B=elephant -l C=cat
  graphwalk can-reach JFK LAX -e JFK:ORD -e ORD:LAX
  graphwalk --json unreachable A -e A:B -e C:A -n B"""


@click.group(cls=GwGroup, examples=_ROOT_EXAMPLES, invoke_without_command=True)
@click.version_option(version=__version__, prog_name="graphwalk")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the answer.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging and telemetry.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """graphwalk — depth-first queries over small directed graphs."""
    settings = GraphwalkSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)

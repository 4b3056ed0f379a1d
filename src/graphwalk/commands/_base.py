"""Custom Click base classes with --examples support.

``GwCommand`` and ``GwGroup`` accept an ``examples`` parameter. When
``--examples`` is passed, the command prints usage examples and exits,
keeping ``--help`` short.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import click


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command or group."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class GwCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class GwGroup(click.Group):
    """Click Group whose subcommands default to :class:`GwCommand`."""

    command_class = GwCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


def graph_options[F: Callable[..., Any]](func: F) -> F:
    """Add the repeated ``--edge``/``--label``/``--node`` graph options."""
    func = click.option(
        "-n",
        "--node",
        "nodes",
        multiple=True,
        metavar="ID",
        help="Declare a node with no outgoing edges (repeatable).",
    )(func)
    func = click.option(
        "-l",
        "--label",
        "labels",
        multiple=True,
        metavar="ID=LABEL",
        help="Set a vertex label; defaults to the id (repeatable).",
    )(func)
    func = click.option(
        "-e",
        "--edge",
        "edges",
        multiple=True,
        metavar="SRC:DST",
        help="Directed edge, in neighbor order (repeatable).",
    )(func)
    return func

"""Subcommand modules for graphwalk.

Provides register_commands(), which imports command modules lazily so
``graphwalk --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the traversal commands on the root CLI group."""
    from graphwalk.commands.walk import (
        can_reach,
        longest_word,
        self_loopers,
        short_words,
        unreachable,
    )

    cli.add_command(short_words)
    cli.add_command(longest_word)
    cli.add_command(self_loopers)
    cli.add_command(can_reach)
    cli.add_command(unreachable)

"""Allow ``python -m graphwalk``."""

from graphwalk.cli import cli

cli()

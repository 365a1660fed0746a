"""CLI entry point for textsplit."""

from __future__ import annotations

import logging

import click

from textsplit import config
from textsplit.cli import __version__
from textsplit.cli.commands import split, stats
from textsplit.config import LOG_LEVELS


@click.group()
@click.version_option(__version__, prog_name="textsplit")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=lambda: config.settings.LOG_LEVEL,
    show_default="from TEXTSPLIT_LOG_LEVEL",
    help="Logging verbosity",
)
def cli(log_level: str) -> None:
    """Split text documents into bounded, separator-aware chunks."""
    logging.basicConfig(level=log_level.upper(), format="%(asctime)s - %(levelname)s - %(message)s")


cli.add_command(split.split)
cli.add_command(stats.stats)


def main() -> None:
    """Run the textsplit CLI."""
    cli()

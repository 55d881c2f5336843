"""goose recipe CLI - command-line entry point."""

import logging

import click

from . import __version__
from .commands.recipe import recipe as recipe_group
from .logging_setup import init_json_logging

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(__version__)
@click.option("--log-level", default=None, help="Log level for the JSONL log (default: GOOSE_LOG_LEVEL or INFO)")
def cli(log_level: str | None):
    """goose - resolve, validate and share recipes."""
    init_json_logging(level=log_level)
    logger.debug("CLI started")


cli.add_command(recipe_group)


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()

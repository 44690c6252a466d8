"""viewfinder - resolve logical view names to template files."""

import logging
import os

import click

from .commands.extension import extension as extension_group
from .commands.find import find as find_cmd
from .commands.find import show as show_cmd
from .commands.location import location as location_group
from .commands.namespace import namespace as namespace_group
from .logging_setup import LOG_PATH_ENV
from .logging_setup import init_view_logging

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(package_name="viewfinder")
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write JSONL logs to this file (default: $VIEWFINDER_LOG_PATH)",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Log level for --log-file (default: $VIEWFINDER_LOG_LEVEL or INFO)",
)
def cli(log_file: str | None, log_level: str | None):
    """viewfinder - resolve logical view names to template files."""
    if log_file or os.environ.get(LOG_PATH_ENV):
        handler = init_view_logging(log_file, log_level)
        logger.debug(f"JSONL logging enabled: {handler.path}")


cli.add_command(find_cmd)
cli.add_command(show_cmd)
cli.add_command(location_group)
cli.add_command(extension_group)
cli.add_command(namespace_group)


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()

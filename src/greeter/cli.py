"""CLI entrypoint for the application."""

import logging
from typing import Optional

import click

from greeter import __version__
from greeter.greeting import InvocationArgs, greet

logger = logging.getLogger(__name__)


@click.command(
    name="cli",
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.option("-n", "--name", default=None, help="Name to greet")
@click.version_option(__version__, "-V", "--version", prog_name="cli")
def main(name: Optional[str]) -> None:
    """Print a greeting for NAME, or for the world when no name is given."""
    args = InvocationArgs(name=name)
    logger.debug("Parsed arguments: %r", args)
    click.echo(greet(args))


if __name__ == "__main__":
    main()

"""bemstyle CLI entry point: Click group with subcommands."""

import logging

import click

from bemstyle import __version__


@click.group()
@click.version_option(version=__version__, prog_name="bemstyle")
@click.option("-v", "--verbose", is_flag=True, help="Log each resolution at DEBUG level.")
def cli(verbose: bool) -> None:
    """bemstyle - resolve BEM class names and styles from nested style trees."""
    if verbose:
        logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
        logging.getLogger("bemstyle").setLevel(logging.DEBUG)


# Import and register subcommands
from bemstyle.cli.resolve import resolve  # noqa: E402
from bemstyle.cli.validate import validate  # noqa: E402
from bemstyle.cli.inspect import inspect  # noqa: E402

cli.add_command(resolve)
cli.add_command(validate)
cli.add_command(inspect)

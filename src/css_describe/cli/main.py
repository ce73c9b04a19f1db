"""css-describe CLI entry point: Click group with subcommands."""

import logging

import click

from css_describe import __version__


@click.group()
@click.version_option(version=__version__, prog_name="css-describe")
@click.option("--verbose", "-v", is_flag=True, help="Log each dispatched event")
def cli(verbose: bool) -> None:
    """css-describe - explain CSS selector walks in plain English."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


# Import and register subcommands
from css_describe.cli.describe import describe  # noqa: E402
from css_describe.cli.events import events  # noqa: E402

cli.add_command(describe)
cli.add_command(events)

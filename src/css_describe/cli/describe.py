"""CLI command: css-describe describe -- describe an event script."""

from __future__ import annotations

import sys

import click

from css_describe.config import DescriberConfig
from css_describe.errors import EventScriptError, InvalidFragmentError
from css_describe.events import describe as describe_events
from css_describe.script import load_script


@click.command()
@click.argument("script", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--legacy-dash-match",
    is_flag=True,
    help="Emit the uninterpolated |= template instead of naming the attribute",
)
def describe(script: str, legacy_dash_match: bool) -> None:
    """Print the English description of a JSON event script.

    Exits with code 1 if the script cannot be loaded or an event carries an
    empty name.
    """
    config = DescriberConfig(legacy_dash_match=legacy_dash_match)

    try:
        text = describe_events(load_script(script), config)
    except EventScriptError as exc:
        click.echo(f"Script error: {exc}", err=True)
        sys.exit(1)
    except InvalidFragmentError as exc:
        click.echo(f"Invalid event: {exc}", err=True)
        sys.exit(1)

    click.echo(text)

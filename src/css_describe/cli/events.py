"""CLI command: css-describe events -- list the event kinds a script may use."""

from __future__ import annotations

import dataclasses

import click

from css_describe.events import EVENT_TYPES


@click.command()
def events() -> None:
    """List event kinds and their arguments."""
    for kind, cls in EVENT_TYPES.items():
        args = [f.name for f in dataclasses.fields(cls)]
        if args:
            click.echo(f"{kind}  {' '.join(args)}")
        else:
            click.echo(kind)

"""CLI command: crow check -- parse several sources and report failures."""

from __future__ import annotations

import sys

import click

from crow.config import CrowConfig
from crow.dom import parse_document
from crow.errors import CrowError
from crow.loader import load_source
from crow.stylesheet import parse_stylesheet


@click.command()
@click.argument("sources", nargs=-1, required=True)
@click.pass_obj
def check(config: CrowConfig | None, sources: tuple[str, ...]) -> None:
    """Check that each source parses.

    Sources ending in .css are parsed as stylesheets, everything else as
    markup. Exits with code 1 if any source fails.
    """
    failures = 0
    for source in sources:
        try:
            text = load_source(source, config)
            if source.lower().endswith(".css"):
                parse_stylesheet(text)
            else:
                parse_document(text)
        except CrowError as exc:
            failures += 1
            click.echo(f"FAIL: {source}: {exc}")
        else:
            click.echo(f"OK: {source}")

    click.echo()
    click.echo(f"Summary: {len(sources) - failures} ok, {failures} failed")
    if failures:
        sys.exit(1)

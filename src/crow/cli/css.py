"""CLI command: crow css -- parse a stylesheet and display its rules."""

from __future__ import annotations

import sys

import click

from crow.config import CrowConfig
from crow.errors import LoadError, ParseError
from crow.loader import load_source
from crow.printer import format_stylesheet
from crow.stylesheet import parse_stylesheet


@click.command()
@click.argument("source")
@click.pass_obj
def css(config: CrowConfig | None, source: str) -> None:
    """Parse a stylesheet file or URL and print its rules.

    Selectors within each rule are listed most specific first.
    """
    try:
        text = load_source(source, config)
    except LoadError as exc:
        click.echo(f"Load error: {exc}", err=True)
        sys.exit(1)

    try:
        stylesheet = parse_stylesheet(text)
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    click.echo(f"Rules: {len(stylesheet.rules)}")
    click.echo()
    click.echo(format_stylesheet(stylesheet))

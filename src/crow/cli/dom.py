"""CLI command: crow dom -- parse markup and display the document tree."""

from __future__ import annotations

import sys

import click

from crow.config import CrowConfig
from crow.dom import parse_document
from crow.errors import LoadError, ParseError
from crow.loader import load_source
from crow.printer import format_tree, to_markup


@click.command()
@click.argument("source")
@click.option("--markup", is_flag=True, help="Print the tree re-serialized as markup")
@click.pass_obj
def dom(config: CrowConfig | None, source: str, markup: bool) -> None:
    """Parse a markup file or URL and print its document tree."""
    try:
        text = load_source(source, config)
    except LoadError as exc:
        click.echo(f"Load error: {exc}", err=True)
        sys.exit(1)

    try:
        root = parse_document(text)
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    click.echo(to_markup(root) if markup else format_tree(root))

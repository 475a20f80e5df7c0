"""Crow CLI entry point: Click group with subcommands."""

import logging
import sys

import click

from crow import __version__
from crow.config import CrowConfig
from crow.errors import ConfigError


@click.group()
@click.version_option(version=__version__, prog_name="crow")
@click.option("--verbose", "-v", is_flag=True, help="Log parser and loader activity")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Crow - parse a tiny subset of HTML and CSS and show the result."""
    try:
        config = CrowConfig.from_env()
    except ConfigError as exc:
        click.echo(f"Config error: {exc}", err=True)
        sys.exit(1)
    level = logging.DEBUG if verbose else getattr(logging, config.log_level, logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = config


# Import and register subcommands
from crow.cli.check import check  # noqa: E402
from crow.cli.css import css  # noqa: E402
from crow.cli.dom import dom  # noqa: E402

cli.add_command(dom)
cli.add_command(css)
cli.add_command(check)

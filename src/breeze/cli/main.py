"""Breeze CLI entry point: Click group with subcommands."""

import logging

import click

from breeze import __version__

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


@click.group()
@click.version_option(version=__version__, prog_name="breeze")
@click.option("-v", "--verbose", count=True, help="-v for progress, -vv for rejected candidates")
def cli(verbose: int) -> None:
    """Breeze - utility-class CSS generator."""
    level = {0: logging.WARNING, 1: logging.INFO}.get(verbose, logging.DEBUG)
    logging.basicConfig(level=level, format=LOG_FORMAT)


# Import and register subcommands
from breeze.cli.build import build  # noqa: E402
from breeze.cli.init import init  # noqa: E402
from breeze.cli.resolve import resolve  # noqa: E402
from breeze.cli.scan import scan  # noqa: E402

cli.add_command(build)
cli.add_command(resolve)
cli.add_command(scan)
cli.add_command(init)

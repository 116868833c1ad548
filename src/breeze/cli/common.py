"""Helpers shared by the CLI commands."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from breeze.config import BreezeConfig, find_config, load_config
from breeze.errors import BreezeError

config_option = click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Configuration file (default: breeze.config.yaml in the current directory)",
)


def load(config_path: str | None) -> BreezeConfig:
    """Load the given or discovered configuration, exiting with code 1 on error."""
    try:
        if config_path is not None:
            return load_config(config_path)
        found = find_config(Path.cwd())
        if found is not None:
            return load_config(found)
        return BreezeConfig()
    except BreezeError as exc:
        fail(exc)


def fail(exc: BreezeError) -> None:
    click.echo(f"Error: {exc}", err=True)
    sys.exit(1)

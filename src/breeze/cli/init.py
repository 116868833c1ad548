"""CLI command: breeze init -- write a starter configuration file."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from breeze.config import CONFIG_FILENAMES, DEFAULT_CONFIG_TEMPLATE


@click.command()
@click.option("--directory", "-d", type=click.Path(file_okay=False), default=".",
              help="Where to create the configuration")
@click.option("--force", is_flag=True, help="Overwrite an existing configuration")
def init(directory: str, force: bool) -> None:
    """Create breeze.config.yaml with the default content globs and plugins."""
    target = Path(directory) / CONFIG_FILENAMES[0]
    if target.exists() and not force:
        click.echo(f"Error: {target} already exists (use --force to overwrite)", err=True)
        sys.exit(1)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(DEFAULT_CONFIG_TEMPLATE, encoding="utf-8")
    click.echo(f"Created {target}")

"""CLI command: breeze scan -- list class candidates found in files."""

from __future__ import annotations

import click

from breeze.cli.common import config_option, fail, load
from breeze.engine import Engine
from breeze.errors import BreezeError


@click.command()
@config_option
@click.option("--resolvable", is_flag=True, help="Only list candidates that produce a rule")
@click.argument("paths", nargs=-1, type=click.Path(exists=True, dir_okay=False))
def scan(config_path: str | None, resolvable: bool, paths: tuple[str, ...]) -> None:
    """Print the distinct candidates in PATHS (or the configured content), one per line."""
    config = load(config_path)
    try:
        engine = Engine(config)
        candidates = engine.candidates(list(paths) or None)
    except BreezeError as exc:
        fail(exc)
    for candidate in candidates:
        if resolvable and engine.resolver.resolve(candidate) is None:
            continue
        click.echo(candidate)

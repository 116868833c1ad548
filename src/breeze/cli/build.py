"""CLI command: breeze build -- scan content and write the stylesheet."""

from __future__ import annotations

import click

from breeze.cli.common import config_option, fail, load
from breeze.engine import generate, write_stylesheet
from breeze.errors import BreezeError


@click.command()
@config_option
@click.option("-o", "--output", type=click.Path(dir_okay=False), default=None,
              help="Output file (default: stdout)")
@click.option("--minify", is_flag=True, help="Emit compact CSS")
@click.argument("sources", nargs=-1, type=click.Path(exists=True, dir_okay=False))
def build(config_path: str | None, output: str | None, minify: bool, sources: tuple[str, ...]) -> None:
    """Generate the stylesheet.

    Scans SOURCES when given, otherwise the configured content globs.
    """
    config = load(config_path)
    try:
        css = generate(config, list(sources) or None, minify=minify)
        if output is None:
            click.echo(css, nl=False)
            return
        path = write_stylesheet(output, css)
    except BreezeError as exc:
        fail(exc)
    click.echo(f"Wrote {len(css.encode('utf-8'))} bytes to {path}", err=True)

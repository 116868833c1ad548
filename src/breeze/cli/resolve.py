"""CLI command: breeze resolve -- show the CSS for individual class names."""

from __future__ import annotations

import sys

import click

from breeze.cli.common import config_option, fail, load
from breeze.engine import Engine
from breeze.errors import BreezeError
from breeze.events import CandidateRejected, EventRecorder


@click.command()
@config_option
@click.argument("candidates", nargs=-1, required=True)
def resolve(config_path: str | None, candidates: tuple[str, ...]) -> None:
    """Resolve CANDIDATES and print the resulting rules.

    Exits with code 1 if any candidate is rejected.
    """
    config = load(config_path)
    try:
        engine = Engine(config)
    except BreezeError as exc:
        fail(exc)
    recorder = EventRecorder(engine.event_bus)

    rules = []
    for order, candidate in enumerate(candidates):
        rule = engine.resolver.resolve(candidate, order)
        if rule is not None:
            rules.append(rule)
    if rules:
        click.echo(engine.emitter.emit(rules), nl=False)

    rejected = recorder.of_type(CandidateRejected)
    for event in rejected:
        detail = f": {event.detail}" if event.detail else ""
        click.echo(f"Rejected {event.candidate} ({event.reason.value}{detail})", err=True)
    sys.exit(1 if rejected else 0)

"""Generation engine: wires registry, plugins, scanner, resolver and emitter."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Iterable

from breeze.config import BreezeConfig
from breeze.emitter import StylesheetEmitter
from breeze.errors import BreezeError, ConfigError, UnknownToken
from breeze.events import types as events
from breeze.events.bus import EventBus
from breeze.generators import CorePlugin
from breeze.model.rule import ResolvedRule
from breeze.model.stylesheet import Stylesheet
from breeze.plugins.host import PluginHost
from breeze.plugins.loader import load_plugins
from breeze.plugins.preflight import PreflightPlugin
from breeze.resolver import StyleResolver
from breeze.scanner import scan_content, scan_files
from breeze.theme.registry import TokenRegistry

logger = logging.getLogger(__name__)


def build_host(
    config: BreezeConfig, registry: TokenRegistry, event_bus: EventBus | None = None
) -> PluginHost:
    """Apply core, preflight and configured plugins, then freeze the host.

    Any failure while loading or setting up a plugin is a :class:`ConfigError`.
    """
    host = PluginHost(registry, config, event_bus=event_bus)
    plugins = [CorePlugin()]
    if config.preflight:
        plugins.append(PreflightPlugin())
    plugins.extend(load_plugins(config.plugins))
    for plugin in plugins:
        name = getattr(plugin, "name", type(plugin).__name__)
        try:
            host.apply(plugin)
        except UnknownToken as exc:
            raise ConfigError(f"Plugin {name!r}: {exc}", key="plugins") from exc
        except BreezeError:
            raise
        except (TypeError, ValueError, KeyError, AttributeError) as exc:
            raise ConfigError(f"Plugin {name!r} failed during setup: {exc}", key="plugins") from exc
    host.freeze()
    logger.debug("Plugins applied: %s", ", ".join(host.plugins))
    return host


class Engine:
    """One configured generation pipeline.

    Construction does all fallible configuration work (theme resolution and
    plugin setup), so a :class:`ConfigError` surfaces before any file is
    scanned.  The engine keeps no state between :meth:`generate` calls.
    """

    def __init__(self, config: BreezeConfig, *, event_bus: EventBus | None = None) -> None:
        self.config = config
        self.event_bus = event_bus or EventBus()
        self.registry = TokenRegistry.from_config(config)
        self.host = build_host(config, self.registry, self.event_bus)
        self.resolver = StyleResolver(self.host, event_bus=self.event_bus)
        self.emitter = StylesheetEmitter(self.event_bus)

    def candidates(self, sources: Iterable[Path | str] | None = None) -> list[str]:
        """Scan *sources* (file paths), or the configured content when omitted."""
        if sources is None:
            found = scan_content(self.config.content, self.config.base_dir, self.config.workers)
            count = len(self.config.content)
        else:
            paths = sorted({Path(s).resolve() for s in sources})
            found = scan_files(paths, self.config.workers)
            count = len(paths)
        self.event_bus.emit(events.ScanCompleted(sources=count, candidates=len(found)))
        logger.info("Scanned %d sources, found %d candidates", count, len(found))
        return found

    def rules(self, candidates: Iterable[str]) -> list[ResolvedRule]:
        """Base rules followed by the rules resolved from *candidates*."""
        resolved = self.resolver.resolve_all(candidates, self.config.workers)
        return [*self.host.base_rules(), *resolved]

    def build(self, sources: Iterable[Path | str] | None = None) -> Stylesheet:
        return self.emitter.build(self.rules(self.candidates(sources)))

    def generate(self, sources: Iterable[Path | str] | None = None, minify: bool = False) -> str:
        """Run scan, resolve and emit; returns the stylesheet text."""
        sources = list(sources) if sources is not None else None
        self.event_bus.emit(
            events.GenerationStarted(
                sources=len(sources) if sources is not None else len(self.config.content)
            )
        )
        candidates = self.candidates(sources)
        stylesheet = self.emitter.build(self.rules(candidates))
        text = self.emitter.render(stylesheet, minify=minify)
        self.event_bus.emit(
            events.GenerationCompleted(
                candidates=len(candidates), rules=len(stylesheet), size=len(text.encode("utf-8"))
            )
        )
        logger.info(
            "Generated %d rules from %d candidates (%d bytes)",
            len(stylesheet),
            len(candidates),
            len(text.encode("utf-8")),
        )
        return text


def generate(
    config: BreezeConfig,
    sources: Iterable[Path | str] | None = None,
    *,
    event_bus: EventBus | None = None,
    minify: bool = False,
) -> str:
    """Generate a stylesheet for *config*.

    Raises :class:`ConfigError` for invalid configuration or plugins and
    :class:`ScanError` for unreadable content.
    """
    return Engine(config, event_bus=event_bus).generate(sources, minify=minify)


def write_stylesheet(path: Path | str, text: str) -> Path:
    """Write *text* atomically: a temporary file in the target directory is renamed over *path*."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", dir=target.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as handle:
            handle.write(text)
        os.replace(tmp_name, target)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    return target

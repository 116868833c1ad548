"""Configuration model and loader for Breeze."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from breeze.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAMES = ("breeze.config.yaml", "breeze.config.yml", "breeze.config.json")

DARK_MODES = frozenset({"media", "class"})

_KNOWN_KEYS = frozenset({
    "content",
    "theme",
    "plugins",
    "separator",
    "important",
    "dark_mode",
    "preflight",
    "workers",
})


@dataclass(frozen=True)
class RawContent:
    """Inline content supplied directly in configuration instead of a file."""

    text: str
    name: str = "<raw>"


@dataclass(frozen=True)
class PluginSpec:
    """A plugin reference plus its options, as written in configuration."""

    name: str
    options: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class BreezeConfig:
    """Declarative generation settings.

    Attributes:
        content: Glob patterns (``!`` prefix excludes) or :class:`RawContent`.
        theme: Token overrides; the ``extend`` key merges instead of replacing.
        plugins: Plugin references applied in order after the core plugin.
        separator: Variant separator inside class names.
        important: Mark every utility declaration ``!important``.
        dark_mode: ``media`` (prefers-color-scheme) or ``class`` (``.dark``).
        preflight: Emit the base reset.
        workers: Thread pool size for scanning and resolution.
        base_dir: Directory content globs are relative to.
    """

    content: tuple[str | RawContent, ...] = ()
    theme: Mapping[str, Any] = field(default_factory=dict)
    plugins: tuple[Any, ...] = ()
    separator: str = ":"
    important: bool = False
    dark_mode: str = "media"
    preflight: bool = True
    workers: int = 4
    base_dir: Path = field(default_factory=Path)

    def __post_init__(self) -> None:
        if not self.separator:
            raise ConfigError("separator must be a non-empty string", key="separator")
        if self.dark_mode not in DARK_MODES:
            raise ConfigError(
                f"dark_mode must be one of {sorted(DARK_MODES)}, got {self.dark_mode!r}",
                key="dark_mode",
            )
        if self.workers < 1:
            raise ConfigError("workers must be at least 1", key="workers")

    @classmethod
    def from_dict(
        cls, data: Mapping[str, Any], base_dir: Path | str | None = None
    ) -> BreezeConfig:
        """Validate a raw mapping (as loaded from YAML/JSON) into a config."""
        if not isinstance(data, Mapping):
            raise ConfigError("Configuration must be a mapping")
        unknown = set(data) - _KNOWN_KEYS
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {sorted(unknown)}")

        theme = data.get("theme")
        if theme is None:
            theme = {}
        if not isinstance(theme, Mapping):
            raise ConfigError("theme must be a mapping", key="theme")
        if "extend" in theme and not isinstance(theme["extend"], Mapping):
            raise ConfigError("theme.extend must be a mapping", key="theme.extend")

        return cls(
            content=_parse_content(data.get("content") or []),
            theme=theme,
            plugins=_parse_plugins(data.get("plugins") or []),
            separator=_typed(data, "separator", str, ":"),
            important=_typed(data, "important", bool, False),
            dark_mode=_typed(data, "dark_mode", str, "media"),
            preflight=_typed(data, "preflight", bool, True),
            workers=_typed(data, "workers", int, 4),
            base_dir=Path(base_dir) if base_dir is not None else Path(),
        )


def _typed(data: Mapping[str, Any], key: str, kind: type, default: Any) -> Any:
    value = data.get(key, default)
    # bool is a subclass of int; reject it where an int is expected.
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise ConfigError(
            f"{key} must be of type {kind.__name__}, got {type(value).__name__}", key=key
        )
    return value


def _parse_content(raw: Any) -> tuple[str | RawContent, ...]:
    if isinstance(raw, str):
        raw = [raw]
    if not isinstance(raw, (list, tuple)):
        raise ConfigError("content must be a list of glob patterns", key="content")
    entries: list[str | RawContent] = []
    for item in raw:
        if isinstance(item, str):
            entries.append(item)
        elif isinstance(item, RawContent):
            entries.append(item)
        elif isinstance(item, Mapping) and isinstance(item.get("raw"), str):
            entries.append(RawContent(text=item["raw"], name=str(item.get("name", "<raw>"))))
        else:
            raise ConfigError(f"Invalid content entry: {item!r}", key="content")
    return tuple(entries)


def _parse_plugins(raw: Any) -> tuple[Any, ...]:
    if not isinstance(raw, (list, tuple)):
        raise ConfigError("plugins must be a list", key="plugins")
    specs: list[Any] = []
    for item in raw:
        if isinstance(item, str):
            specs.append(PluginSpec(name=item))
        elif isinstance(item, Mapping):
            name = item.get("name")
            options = item.get("options") or {}
            if not isinstance(name, str) or not name:
                raise ConfigError(f"Plugin entry needs a name: {item!r}", key="plugins")
            if not isinstance(options, Mapping):
                raise ConfigError(f"Plugin options must be a mapping: {item!r}", key="plugins")
            specs.append(PluginSpec(name=name, options=dict(options)))
        else:
            # Plugin objects and setup callables from Python configurations.
            specs.append(item)
    return tuple(specs)


def load_config(path: Path | str) -> BreezeConfig:
    """Load a YAML or JSON configuration file.

    Content globs are resolved relative to the file's directory.
    """
    config_path = Path(path)
    try:
        text = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read configuration {config_path}: {exc}") from exc
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid configuration {config_path}: {exc}") from exc
    logger.debug("Loaded configuration from %s", config_path)
    return BreezeConfig.from_dict(data or {}, base_dir=config_path.parent)


def find_config(directory: Path | str = ".") -> Path | None:
    """Return the first known configuration file in *directory*, if any."""
    root = Path(directory)
    for name in CONFIG_FILENAMES:
        candidate = root / name
        if candidate.is_file():
            return candidate
    return None


DEFAULT_CONFIG_TEMPLATE = """\
content:
  - "./layouts/**/*.{html,js}"
  - "./content/**/*.md"
theme:
  container:
    center: true
plugins:
  - name: forms
    options:
      strategy: class
"""

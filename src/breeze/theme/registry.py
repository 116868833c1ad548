"""Token registry: resolves design tokens into concrete values."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from breeze.errors import ConfigError, UnknownToken
from breeze.model.token import DesignToken
from breeze.theme.defaults import DEFAULT_THEME, freeze
from breeze.theme.merge import merge_theme

if TYPE_CHECKING:
    from breeze.config import BreezeConfig

logger = logging.getLogger(__name__)

# Sections holding options rather than value scales.
OPTION_SECTIONS = frozenset({"container"})

_MISSING = object()


class _SectionResolver:
    """Evaluates callable sections against a ``theme(path)`` getter."""

    def __init__(self, theme: Mapping[str, Any]) -> None:
        self._theme = theme
        self._resolved: dict[str, Any] = {}
        self._resolving: list[str] = []

    def section(self, name: str) -> Any:
        if name in self._resolved:
            return self._resolved[name]
        if name not in self._theme:
            raise ConfigError(f"Unknown theme section {name!r}", key=f"theme.{name}")
        if name in self._resolving:
            chain = " -> ".join([*self._resolving, name])
            raise ConfigError(f"Circular theme reference: {chain}", key=f"theme.{name}")
        self._resolving.append(name)
        try:
            value = self._theme[name]
            if callable(value):
                try:
                    value = value(self.get)
                except (TypeError, ValueError, KeyError, AttributeError) as exc:
                    raise ConfigError(
                        f"Theme section {name!r} failed to evaluate: {exc}", key=f"theme.{name}"
                    ) from exc
        finally:
            self._resolving.pop()
        self._resolved[name] = value
        return value

    def get(self, path: str, default: Any = _MISSING) -> Any:
        head, *rest = path.split(".")
        if head not in self._theme:
            if default is _MISSING:
                raise ConfigError(f"Unknown theme section {head!r}", key=f"theme.{head}")
            return default
        value = self.section(head)
        for part in rest:
            if isinstance(value, Mapping) and part in value:
                value = value[part]
            elif default is _MISSING:
                raise ConfigError(f"Unknown theme path {path!r}", key=f"theme.{path}")
            else:
                return default
        return value

    def resolve_all(self) -> dict[str, Any]:
        return {name: self.section(name) for name in self._theme}


def _scalar(category: str, name: str, value: Any) -> str:
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise ConfigError(
            f"Token {category}.{name} must be a string or number, got {type(value).__name__}",
            key=f"theme.{category}.{name}",
        )
    return str(value)


def _make_token(category: str, name: str, value: Any) -> DesignToken:
    if isinstance(value, (list, tuple)):
        if len(value) == 2 and isinstance(value[1], Mapping):
            meta = tuple(
                (str(k), _scalar(category, name, v)) for k, v in value[1].items()
            )
            return DesignToken(category, name, _scalar(category, name, value[0]), meta)
        if category == "fontSize" and len(value) == 2:
            meta = (("lineHeight", _scalar(category, name, value[1])),)
            return DesignToken(category, name, _scalar(category, name, value[0]), meta)
        joined = ", ".join(_scalar(category, name, v) for v in value)
        return DesignToken(category, name, joined)
    return DesignToken(category, name, _scalar(category, name, value))


def flatten_section(category: str, section: Any) -> dict[str, DesignToken]:
    """Flatten a nested section into ``name -> DesignToken``.

    Nested keys join with ``-``; ``DEFAULT`` takes its parent's name.
    """
    if not isinstance(section, Mapping):
        raise ConfigError(
            f"Theme section {category!r} must be a mapping", key=f"theme.{category}"
        )
    tokens: dict[str, DesignToken] = {}

    def visit(prefix: str, value: Any) -> None:
        if isinstance(value, Mapping):
            for key, child in value.items():
                key = str(key)
                if key == "DEFAULT":
                    name = prefix or "DEFAULT"
                else:
                    name = f"{prefix}-{key}" if prefix else key
                visit(name, child)
            return
        if prefix in tokens:
            raise ConfigError(
                f"Duplicate token {prefix!r} in theme section {category!r}",
                key=f"theme.{category}.{prefix}",
            )
        tokens[prefix] = _make_token(category, prefix, value)

    visit("", section)
    return tokens


class TokenRegistry:
    """Read-only lookup of resolved design tokens, grouped by category.

    Built once from a merged theme; every value is resolved at construction
    and nothing is mutated afterwards.
    """

    def __init__(self, theme: Mapping[str, Any]) -> None:
        resolved = _SectionResolver(theme).resolve_all()
        tokens: dict[str, Mapping[str, DesignToken]] = {}
        sections: dict[str, Mapping[str, Any]] = {}
        for category, section in resolved.items():
            if category in OPTION_SECTIONS:
                if not isinstance(section, Mapping):
                    raise ConfigError(
                        f"Theme section {category!r} must be a mapping",
                        key=f"theme.{category}",
                    )
                sections[category] = freeze(section)
                continue
            tokens[category] = MappingProxyType(flatten_section(category, section))
        self._tokens = MappingProxyType(tokens)
        self._sections = MappingProxyType(sections)
        logger.debug(
            "Token registry built: %d categories, %d tokens",
            len(tokens),
            sum(len(t) for t in tokens.values()),
        )

    @classmethod
    def from_config(cls, config: BreezeConfig) -> TokenRegistry:
        """Build a registry from the defaults merged with ``config.theme``."""
        return cls(merge_theme(DEFAULT_THEME, config.theme))

    # --- lookups --------------------------------------------------------------

    def resolve(self, category: str, key: str) -> str:
        """Return the literal value of *key* in *category*.

        Raises :class:`UnknownToken` when the token does not exist.
        """
        token = self.lookup(category, key)
        if token is None:
            raise UnknownToken(category, key)
        return token.value

    def lookup(self, category: str, key: str) -> DesignToken | None:
        return self._tokens.get(category, {}).get(key)

    def get(self, category: str, key: str, default: str | None = None) -> str | None:
        token = self.lookup(category, key)
        return token.value if token is not None else default

    def category(self, name: str) -> Mapping[str, DesignToken]:
        return self._tokens.get(name, MappingProxyType({}))

    def categories(self) -> list[str]:
        return list(self._tokens)

    def section(self, name: str) -> Mapping[str, Any]:
        """Return an option section such as ``container``."""
        return self._sections.get(name, MappingProxyType({}))

    def screens(self) -> list[tuple[str, str]]:
        """Breakpoints in declaration order."""
        return [(name, token.value) for name, token in self.category("screens").items()]

    def __contains__(self, item: tuple[str, str]) -> bool:
        category, key = item
        return self.lookup(category, key) is not None

    def __repr__(self) -> str:
        return f"TokenRegistry(categories={list(self._tokens)})"

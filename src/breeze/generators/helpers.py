"""Shared building blocks for the core rule generators."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from breeze.css import looks_like_color, looks_like_length, normalize_arbitrary, with_opacity
from breeze.model.rule import Declaration, RuleBody
from breeze.plugins.host import Generator, UtilityValue

if TYPE_CHECKING:
    from breeze.plugins.api import PluginAPI


def declare(properties: tuple[str, ...] | list[str], value: str) -> list[RuleBody]:
    return [RuleBody(tuple(Declaration(prop, value) for prop in properties))]


def properties(*names: str, suffix: str = "") -> Generator:
    """Generator assigning the (signed) value to every property in *names*.

    Plain property values take no ``/modifier``; one is a miss.
    """

    def generate(value: UtilityValue) -> list[RuleBody]:
        resolved = value.signed()
        if resolved is None or value.modifier is not None:
            return []
        return [
            RuleBody(
                tuple(Declaration(prop, resolved) for prop in names),
                selector_suffix=suffix,
            )
        ]

    return generate


def keywords(api: PluginAPI, prefix: str, prop: str, mapping: dict[str, str]) -> None:
    """Register one static utility per ``mapping`` entry: ``prefix-key``."""
    for key, css_value in mapping.items():
        name = f"{prefix}-{key}" if prefix else key
        api.static(name, {prop: css_value})


def opacity_for(api: PluginAPI, modifier: str) -> str | None:
    """Resolve an opacity modifier: a scale key or a bracketed literal."""
    if modifier.startswith("[") and modifier.endswith("]"):
        return normalize_arbitrary(modifier[1:-1])
    return api.theme_value("opacity", modifier)


def color_of(api: PluginAPI, value: UtilityValue) -> str | None:
    """The color for *value*, with any ``/opacity`` modifier applied."""
    if value.value is None:
        return None
    if value.modifier is None:
        return value.value
    opacity = opacity_for(api, value.modifier)
    if opacity is None:
        return None
    return with_opacity(value.value, opacity)


def color_utility(api: PluginAPI, *names: str) -> Generator:
    """Generator for a color property; arbitrary values must look like colors."""

    def generate(value: UtilityValue) -> list[RuleBody]:
        if value.is_arbitrary and not looks_like_color(value.value or ""):
            return []
        color = color_of(api, value)
        if color is None:
            return []
        return declare(names, color)

    return generate


def by_type(
    *,
    color: Generator | None = None,
    length: Generator | None = None,
    categories: dict[str, Generator],
) -> Callable[[UtilityValue], list[RuleBody]]:
    """Dispatch on the matched theme category, or on the shape of an arbitrary value."""

    def generate(value: UtilityValue) -> list[RuleBody]:
        if value.is_arbitrary:
            literal = value.value or ""
            if color is not None and looks_like_color(literal):
                return color(value)
            if length is not None and looks_like_length(literal):
                return length(value)
            return []
        handler = categories.get(value.category or "")
        if handler is None:
            return []
        return handler(value)

    return generate

"""The handle plugins receive during setup."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Iterable

from breeze.model.rule import Declaration, Layer, RuleBody

if TYPE_CHECKING:
    from breeze.config import BreezeConfig
    from breeze.plugins.host import (
        Generator,
        PluginHost,
        UtilityDefinition,
        UtilityValue,
        VariantDefinition,
        VariantWrapper,
    )


class PluginAPI:
    """Token lookup, registration and rule helpers scoped to one plugin.

    Every registration made through the handle is attributed to the plugin
    name, which is what override warnings report.
    """

    def __init__(self, host: PluginHost, plugin_name: str) -> None:
        self._host = host
        self.plugin_name = plugin_name

    # --- tokens ---------------------------------------------------------------

    @property
    def config(self) -> BreezeConfig:
        return self._host.config

    def resolve(self, category: str, key: str) -> str:
        """Resolve a token; raises :class:`~breeze.errors.UnknownToken`."""
        return self._host.registry.resolve(category, key)

    def theme(self, category: str) -> dict[str, str]:
        """All ``name -> value`` pairs of a category."""
        return {
            name: token.value
            for name, token in self._host.registry.category(category).items()
        }

    def theme_value(self, category: str, key: str, default: str | None = None) -> str | None:
        return self._host.registry.get(category, key, default)

    def section(self, name: str) -> Mapping[str, Any]:
        return self._host.registry.section(name)

    def screens(self) -> list[tuple[str, str]]:
        return self._host.registry.screens()

    # --- registration ---------------------------------------------------------

    def register(self, name: str, generator: Generator, **options: Any) -> UtilityDefinition:
        return self._host.register(name, generator, plugin=self.plugin_name, **options)

    def register_variant(self, name: str, wrapper: VariantWrapper) -> VariantDefinition:
        return self._host.register_variant(name, wrapper, plugin=self.plugin_name)

    def add_base(
        self, selector: str, declarations: Mapping[str, str] | Iterable[Declaration]
    ) -> None:
        self._host.add_base(
            selector, self.declarations(declarations), plugin=self.plugin_name
        )

    def static(
        self,
        name: str,
        declarations: Mapping[str, str],
        *,
        suffix: str = "",
        layer: Layer = Layer.UTILITIES,
    ) -> UtilityDefinition:
        """Register a value-less utility that always yields the same block."""
        body = self.rule(declarations, suffix=suffix)

        def generate(value: UtilityValue) -> list[RuleBody]:
            return [body]

        return self.register(name, generate, layer=layer)

    # --- rule construction ----------------------------------------------------

    @staticmethod
    def declarations(
        source: Mapping[str, str] | Iterable[Declaration],
    ) -> tuple[Declaration, ...]:
        if isinstance(source, Mapping):
            return tuple(Declaration(prop, str(value)) for prop, value in source.items())
        return tuple(source)

    @classmethod
    def rule(
        cls,
        declarations: Mapping[str, str] | Iterable[Declaration],
        *,
        suffix: str = "",
        at_rule: str | None = None,
    ) -> RuleBody:
        return RuleBody(cls.declarations(declarations), selector_suffix=suffix, at_rule=at_rule)

"""Plugin host: the registry of utilities, variants and base rules."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Callable, Iterable, Union

from breeze.events import types as events
from breeze.events.bus import EventBus
from breeze.model.rule import Declaration, Layer, ResolvedRule, RuleBody
from breeze.model.token import DesignToken

if TYPE_CHECKING:
    from breeze.config import BreezeConfig
    from breeze.plugins.base import Plugin
    from breeze.theme.registry import TokenRegistry

logger = logging.getLogger(__name__)

ARBITRARY = "arbitrary"


@dataclass(frozen=True)
class UtilityValue:
    """The value handed to a rule generator.

    ``category`` is the theme category the key was found in, ``ARBITRARY``
    for bracketed values, or ``None`` for static utilities.
    """

    value: str | None = None
    key: str | None = None
    category: str | None = None
    token: DesignToken | None = None
    negative: bool = False
    modifier: str | None = None

    @property
    def is_arbitrary(self) -> bool:
        return self.category == ARBITRARY

    def signed(self) -> str | None:
        """The value with the negative marker applied."""
        if self.value is None or not self.negative:
            return self.value
        if self.value in ("0", "0px", "auto"):
            return self.value
        if self.value.startswith("-"):
            return self.value[1:]
        if self.value[0].isdigit() or self.value[0] == ".":
            return "-" + self.value
        return f"calc({self.value} * -1)"


Generator = Callable[[UtilityValue], list[RuleBody]]


@dataclass(frozen=True)
class UtilityDefinition:
    """A registered utility: name, generator and how its value is looked up."""

    name: str
    generator: Generator
    categories: tuple[str, ...] = ()
    negative: bool = False
    bare: bool = False
    modifiers: bool = False
    layer: Layer = Layer.UTILITIES
    plugin: str = "core"

    @property
    def is_static(self) -> bool:
        return not self.categories


@dataclass(frozen=True)
class VariantContext:
    """Selector and at-rule chain a variant wrapper transforms."""

    selector: str
    at_rules: tuple[str, ...] = ()


VariantWrapper = Union[str, Callable[[VariantContext], Union[VariantContext, None]]]


@dataclass(frozen=True)
class VariantDefinition:
    """A registered variant.

    The wrapper is a selector format using ``&`` for the current selector,
    an at-rule string starting with ``@``, or a callable returning a new
    context (``None`` when the variant does not apply).
    """

    name: str
    wrapper: VariantWrapper
    index: int
    plugin: str = "core"

    @property
    def mask(self) -> int:
        return 1 << self.index

    def apply(self, context: VariantContext) -> VariantContext | None:
        if callable(self.wrapper):
            return self.wrapper(context)
        if self.wrapper.startswith("@"):
            return replace(context, at_rules=(self.wrapper, *context.at_rules))
        return replace(context, selector=self.wrapper.replace("&", context.selector))


class PluginHost:
    """Collects registrations from plugins during a single init pass.

    A later registration for an existing name wins; the override is logged
    and published on the event bus.  After :meth:`freeze` the host is
    read-only and safe to share between worker threads.
    """

    def __init__(
        self,
        registry: TokenRegistry,
        config: BreezeConfig | None = None,
        *,
        event_bus: EventBus | None = None,
    ) -> None:
        from breeze.config import BreezeConfig

        self.registry = registry
        self.config = config or BreezeConfig()
        self.event_bus = event_bus or EventBus()
        self._utilities: dict[str, UtilityDefinition] = {}
        self._variants: dict[str, VariantDefinition] = {}
        self._base_rules: list[ResolvedRule] = []
        self._plugins: list[str] = []
        self._frozen = False

    # --- registration ---------------------------------------------------------

    def register(
        self,
        name: str,
        generator: Generator,
        *,
        categories: Iterable[str] = (),
        negative: bool = False,
        bare: bool = False,
        modifiers: bool = False,
        layer: Layer = Layer.UTILITIES,
        plugin: str = "core",
    ) -> UtilityDefinition:
        """Register a utility generator under *name*."""
        self._check_open()
        if not name:
            raise ValueError("Utility name must be a non-empty string")
        categories = tuple(categories)
        definition = UtilityDefinition(
            name=name,
            generator=generator,
            categories=categories,
            negative=negative,
            bare=bare or not categories,
            modifiers=modifiers,
            layer=layer,
            plugin=plugin,
        )
        previous = self._utilities.get(name)
        if previous is not None:
            logger.warning(
                "Utility %r from plugin %r overridden by plugin %r",
                name,
                previous.plugin,
                plugin,
            )
            self.event_bus.emit(
                events.UtilityOverridden(
                    name=name, previous_plugin=previous.plugin, plugin=plugin
                )
            )
        self._utilities[name] = definition
        return definition

    def register_variant(
        self, name: str, wrapper: VariantWrapper, *, plugin: str = "core"
    ) -> VariantDefinition:
        """Register a variant; an override keeps the original ordering slot."""
        self._check_open()
        if not name:
            raise ValueError("Variant name must be a non-empty string")
        previous = self._variants.get(name)
        if previous is not None:
            logger.warning(
                "Variant %r from plugin %r overridden by plugin %r",
                name,
                previous.plugin,
                plugin,
            )
            self.event_bus.emit(
                events.VariantOverridden(
                    name=name, previous_plugin=previous.plugin, plugin=plugin
                )
            )
            index = previous.index
        else:
            index = len(self._variants)
        definition = VariantDefinition(name=name, wrapper=wrapper, index=index, plugin=plugin)
        self._variants[name] = definition
        return definition

    def add_base(
        self,
        selector: str,
        declarations: Iterable[Declaration],
        *,
        at_rules: tuple[str, ...] = (),
        plugin: str = "core",
    ) -> ResolvedRule:
        """Add an unconditional rule to the base layer."""
        self._check_open()
        rule = ResolvedRule(
            candidate=f"<{plugin}>",
            selector=selector,
            declarations=tuple(declarations),
            layer=Layer.BASE,
            at_rules=at_rules,
            order=len(self._base_rules),
        )
        self._base_rules.append(rule)
        return rule

    def apply(self, plugin: Plugin) -> None:
        """Run a plugin's setup against a fresh API handle."""
        from breeze.plugins.api import PluginAPI

        self._check_open()
        name = getattr(plugin, "name", type(plugin).__name__)
        logger.debug("Applying plugin %r", name)
        plugin.setup(PluginAPI(self, name))
        self._plugins.append(name)

    def freeze(self) -> None:
        self._frozen = True

    def _check_open(self) -> None:
        if self._frozen:
            raise RuntimeError("PluginHost is frozen; register during initialization only")

    # --- queries --------------------------------------------------------------

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def plugins(self) -> list[str]:
        return list(self._plugins)

    def utility(self, name: str) -> UtilityDefinition | None:
        return self._utilities.get(name)

    def variant(self, name: str) -> VariantDefinition | None:
        return self._variants.get(name)

    def utilities(self) -> list[UtilityDefinition]:
        return list(self._utilities.values())

    def variants(self) -> list[VariantDefinition]:
        return sorted(self._variants.values(), key=lambda v: v.index)

    def base_rules(self) -> list[ResolvedRule]:
        return list(self._base_rules)

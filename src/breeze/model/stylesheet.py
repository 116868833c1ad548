"""Stylesheet model: ordered rules grouped by layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from breeze.model.rule import Layer, ResolvedRule

LAYER_ORDER: tuple[Layer, ...] = (Layer.BASE, Layer.COMPONENTS, Layer.UTILITIES)


@dataclass(frozen=True)
class Stylesheet:
    """The final, ordered and deduplicated set of rules."""

    layers: dict[Layer, tuple[ResolvedRule, ...]] = field(default_factory=dict)

    @property
    def rules(self) -> list[ResolvedRule]:
        """All rules in output order."""
        ordered: list[ResolvedRule] = []
        for layer in LAYER_ORDER:
            ordered.extend(self.layers.get(layer, ()))
        return ordered

    def selectors(self) -> list[str]:
        return [rule.selector for rule in self.rules]

    def __len__(self) -> int:
        return sum(len(rules) for rules in self.layers.values())

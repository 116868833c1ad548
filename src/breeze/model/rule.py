"""Rule model: declarations, generator output and resolved rules."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Layer(Enum):
    """Output bucket controlling which rules win under equal specificity."""

    BASE = "base"
    COMPONENTS = "components"
    UTILITIES = "utilities"

    @property
    def rank(self) -> int:
        return _LAYER_RANK[self]


_LAYER_RANK = {Layer.BASE: 0, Layer.COMPONENTS: 1, Layer.UTILITIES: 2}


@dataclass(frozen=True)
class Declaration:
    """A single ``property: value`` pair."""

    property: str
    value: str
    important: bool = False

    def __str__(self) -> str:
        suffix = " !important" if self.important else ""
        return f"{self.property}: {self.value}{suffix}"


@dataclass(frozen=True)
class RuleBody:
    """One block produced by a rule generator.

    ``selector_suffix`` is appended after the (variant-wrapped) class selector,
    e.g. ``" > :not([hidden]) ~ :not([hidden])"``.  ``at_rule`` nests the block
    inside an extra condition such as a breakpoint media query.
    """

    declarations: tuple[Declaration, ...]
    selector_suffix: str = ""
    at_rule: str | None = None


@dataclass(frozen=True)
class NestedBlock:
    """An additional block emitted right after its owning rule."""

    selector: str
    declarations: tuple[Declaration, ...]
    at_rules: tuple[str, ...] = ()


@dataclass(frozen=True)
class ResolvedRule:
    """A fully resolved rule, ready for ordering and serialization.

    Identity for deduplication is ``(layer, at_rules, selector)``.
    """

    candidate: str
    selector: str
    declarations: tuple[Declaration, ...]
    layer: Layer = Layer.UTILITIES
    at_rules: tuple[str, ...] = ()
    nested: tuple[NestedBlock, ...] = field(default=())
    variant_mask: int = 0
    order: int = 0

    @property
    def identity(self) -> tuple[Layer, tuple[str, ...], str]:
        return (self.layer, self.at_rules, self.selector)

    @property
    def sort_key(self) -> tuple[int, int, int]:
        return (self.layer.rank, self.variant_mask, self.order)

    def blocks(self) -> list[NestedBlock]:
        """Return the main block followed by all nested blocks."""
        main = NestedBlock(self.selector, self.declarations, self.at_rules)
        return [main, *self.nested]

    def same_output(self, other: ResolvedRule) -> bool:
        """True if both rules would serialize to identical CSS."""
        return self.blocks() == other.blocks()

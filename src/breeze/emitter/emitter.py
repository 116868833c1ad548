"""Stylesheet emitter: ordering, deduplication and serialization."""

from __future__ import annotations

import logging
from typing import Iterable

from breeze.events import types as events
from breeze.events.bus import EventBus
from breeze.model.rule import Layer, NestedBlock, ResolvedRule
from breeze.model.stylesheet import LAYER_ORDER, Stylesheet

logger = logging.getLogger(__name__)

INDENT = "  "


class StylesheetEmitter:
    """Builds a :class:`Stylesheet` from resolved rules and renders it to CSS.

    Ordering:
        1. Layers in fixed order: base, components, utilities.
        2. Within a layer, by variant mask: plain rules first, then variant
           rules in variant slot order.
        3. Ties keep first-discovered order.
    """

    def __init__(self, event_bus: EventBus | None = None) -> None:
        self.event_bus = event_bus or EventBus()

    def emit(self, rules: Iterable[ResolvedRule], minify: bool = False) -> str:
        return self.render(self.build(rules), minify=minify)

    # --- building -------------------------------------------------------------

    def build(self, rules: Iterable[ResolvedRule]) -> Stylesheet:
        kept: dict[tuple, ResolvedRule] = {}
        base: list[ResolvedRule] = []
        for rule in sorted(rules, key=lambda r: (r.layer.rank, r.order)):
            if rule.layer is Layer.BASE:
                # Base rules share selectors freely; only exact repeats collapse.
                if not any(rule.same_output(existing) for existing in base):
                    base.append(rule)
                continue
            previous = kept.get(rule.identity)
            if previous is None:
                kept[rule.identity] = rule
            elif not previous.same_output(rule):
                self._collision(kept=rule, dropped=previous)
                kept[rule.identity] = rule

        layers: dict[Layer, tuple[ResolvedRule, ...]] = {Layer.BASE: tuple(base)}
        for layer in LAYER_ORDER[1:]:
            layers[layer] = tuple(
                sorted(
                    (r for r in kept.values() if r.layer is layer),
                    key=lambda r: r.sort_key,
                )
            )
        return Stylesheet(layers=layers)

    def _collision(self, kept: ResolvedRule, dropped: ResolvedRule) -> None:
        logger.warning(
            "Rule collision on %r (%s): %r replaces %r",
            kept.selector,
            kept.layer.value,
            kept.candidate,
            dropped.candidate,
        )
        self.event_bus.emit(
            events.RuleCollision(
                selector=kept.selector,
                layer=kept.layer.value,
                kept_candidate=kept.candidate,
                dropped_candidate=dropped.candidate,
            )
        )

    # --- rendering ------------------------------------------------------------

    def render(self, stylesheet: Stylesheet, minify: bool = False) -> str:
        blocks: list[NestedBlock] = []
        for rule in stylesheet.rules:
            blocks.extend(rule.blocks())
        if not blocks:
            return ""
        groups = _group(blocks)
        if minify:
            return "".join(_render_min(at_rules, group) for at_rules, group in groups) + "\n"
        return "\n\n".join(_render_pretty(at_rules, group) for at_rules, group in groups) + "\n"


def _group(blocks: list[NestedBlock]) -> list[tuple[tuple[str, ...], list[NestedBlock]]]:
    """Group consecutive blocks sharing the same at-rule chain."""
    groups: list[tuple[tuple[str, ...], list[NestedBlock]]] = []
    for block in blocks:
        if groups and groups[-1][0] == block.at_rules:
            groups[-1][1].append(block)
        else:
            groups.append((block.at_rules, [block]))
    return groups


def _render_pretty(at_rules: tuple[str, ...], blocks: list[NestedBlock]) -> str:
    depth = len(at_rules)
    pad = INDENT * depth
    lines: list[str] = []
    for level, at_rule in enumerate(at_rules):
        lines.append(f"{INDENT * level}{at_rule} {{")
    for index, block in enumerate(blocks):
        if index:
            lines.append("")
        lines.append(f"{pad}{block.selector} {{")
        lines.extend(f"{pad}{INDENT}{declaration};" for declaration in block.declarations)
        lines.append(f"{pad}}}")
    for level in reversed(range(depth)):
        lines.append(f"{INDENT * level}}}")
    return "\n".join(lines)


def _render_min(at_rules: tuple[str, ...], blocks: list[NestedBlock]) -> str:
    body = "".join(
        block.selector
        + "{"
        + ";".join(
            f"{d.property}:{d.value}{'!important' if d.important else ''}"
            for d in block.declarations
        )
        + "}"
        for block in blocks
    )
    for at_rule in reversed(at_rules):
        body = f"{at_rule}{{{body}}}"
    return body

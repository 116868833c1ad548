"""Style resolver: one candidate string in, zero or one resolved rule out."""

from __future__ import annotations

import logging
import re
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Iterable

from breeze.css import class_selector, normalize_arbitrary
from breeze.errors import UnknownToken
from breeze.events import types as events
from breeze.events.bus import EventBus
from breeze.model.candidate import Candidate, parse_candidate, split_top_level
from breeze.model.rule import Declaration, Layer, NestedBlock, ResolvedRule, RuleBody
from breeze.plugins.host import ARBITRARY, UtilityValue, VariantContext

if TYPE_CHECKING:
    from breeze.plugins.host import PluginHost, UtilityDefinition, VariantDefinition

logger = logging.getLogger(__name__)

RejectReason = events.RejectReason

_PROPERTY_RE = re.compile(r"^(--[a-zA-Z0-9_-]+|-?[a-zA-Z][a-zA-Z0-9-]*)$")


class Rejected(Exception):
    """Internal signal: the candidate produces no rule."""

    def __init__(self, reason: RejectReason, detail: str = "") -> None:
        self.reason = reason
        self.detail = detail
        super().__init__(detail or reason.value)


@dataclass(frozen=True)
class _Match:
    bodies: list[RuleBody]
    layer: Layer = Layer.UTILITIES


def _split_points(base: str) -> list[tuple[str, str | None]]:
    """``(name, rest)`` pairs, longest name first, splitting at ``-`` outside brackets."""
    points: list[tuple[str, str | None]] = [(base, None)]
    depth = 0
    dashes: list[int] = []
    for i, ch in enumerate(base):
        if ch in "[(":
            depth += 1
        elif ch in "])":
            depth -= 1
        elif ch == "-" and depth == 0 and i > 0:
            dashes.append(i)
    for i in reversed(dashes):
        points.append((base[:i], base[i + 1 :]))
    return points


class StyleResolver:
    """Maps candidates to rules against a frozen plugin host.

    Stateless apart from the host it reads, so a single resolver can be
    shared by the worker threads of :meth:`resolve_all`.
    """

    def __init__(self, host: PluginHost, *, event_bus: EventBus | None = None) -> None:
        self.host = host
        self.registry = host.registry
        self.config = host.config
        self.event_bus = event_bus or host.event_bus

    # --- public API -----------------------------------------------------------

    def resolve(self, candidate: str, order: int = 0) -> ResolvedRule | None:
        """Resolve *candidate*; ``None`` (plus a ``CandidateRejected`` event) on failure."""
        try:
            return self._resolve(candidate, order)
        except Rejected as rejected:
            logger.debug(
                "Rejected candidate %r: %s %s", candidate, rejected.reason.value, rejected.detail
            )
            self.event_bus.emit(
                events.CandidateRejected(
                    candidate=candidate, reason=rejected.reason, detail=rejected.detail
                )
            )
            return None

    def resolve_all(self, candidates: Iterable[str], workers: int = 4) -> list[ResolvedRule]:
        """Resolve candidates on a thread pool; rules keep the input order."""
        ordered = list(candidates)
        if not ordered:
            return []
        with ThreadPoolExecutor(max_workers=max(1, min(workers, len(ordered)))) as pool:
            results = list(pool.map(self.resolve, ordered, range(len(ordered))))
        return [rule for rule in results if rule is not None]

    # --- pipeline -------------------------------------------------------------

    def _resolve(self, raw: str, order: int) -> ResolvedRule:
        candidate = parse_candidate(raw, self.config.separator)
        if candidate is None:
            raise Rejected(RejectReason.MALFORMED)

        variants = self._variants(candidate)
        if candidate.is_arbitrary_property:
            match = self._arbitrary_property(candidate)
        else:
            match = self._match_utility(candidate)

        context = VariantContext(selector=class_selector(raw))
        for variant in reversed(variants):
            applied = variant.apply(context)
            if applied is None:
                raise Rejected(RejectReason.NO_MATCH, f"variant {variant.name!r} does not apply")
            context = applied

        important = candidate.important or (
            self.config.important and match.layer is Layer.UTILITIES
        )
        blocks = [self._block(body, context, important) for body in match.bodies]
        main, nested = blocks[0], tuple(blocks[1:])
        mask = 0
        for variant in variants:
            mask |= variant.mask
        return ResolvedRule(
            candidate=raw,
            selector=main.selector,
            declarations=main.declarations,
            layer=match.layer,
            at_rules=main.at_rules,
            nested=nested,
            variant_mask=mask,
            order=order,
        )

    def _variants(self, candidate: Candidate) -> list[VariantDefinition]:
        found: list[VariantDefinition] = []
        for name in candidate.variants:
            variant = self.host.variant(name)
            if variant is None:
                raise Rejected(RejectReason.UNKNOWN_VARIANT, name)
            found.append(variant)
        return found

    @staticmethod
    def _block(body: RuleBody, context: VariantContext, important: bool) -> NestedBlock:
        declarations = body.declarations
        if important:
            declarations = tuple(replace(d, important=True) for d in declarations)
        at_rules = context.at_rules
        if body.at_rule:
            at_rules = (*at_rules, body.at_rule)
        return NestedBlock(
            selector=context.selector + body.selector_suffix,
            declarations=declarations,
            at_rules=at_rules,
        )

    # --- utility matching -----------------------------------------------------

    def _arbitrary_property(self, candidate: Candidate) -> _Match:
        if candidate.negative:
            raise Rejected(RejectReason.INVALID_VALUE, "arbitrary properties cannot be negative")
        parts = split_top_level(candidate.base[1:-1], ":")
        if not parts or len(parts) < 2:
            raise Rejected(RejectReason.MALFORMED, "expected [property:value]")
        prop, value = parts[0], ":".join(parts[1:])
        if not _PROPERTY_RE.match(prop):
            raise Rejected(RejectReason.INVALID_VALUE, f"invalid property {prop!r}")
        normalized = normalize_arbitrary(value)
        if normalized is None:
            raise Rejected(RejectReason.INVALID_VALUE, f"invalid value {value!r}")
        return _Match([RuleBody((Declaration(prop, normalized),))])

    def _match_utility(self, candidate: Candidate) -> _Match:
        failure: Rejected | None = None
        for name, rest in _split_points(candidate.base):
            definition = self.host.utility(name)
            if definition is None:
                continue
            try:
                value = self._value(definition, rest, candidate.negative)
                try:
                    bodies = definition.generator(value)
                except UnknownToken as exc:
                    raise Rejected(RejectReason.UNKNOWN_TOKEN, str(exc)) from exc
                if not bodies:
                    raise Rejected(RejectReason.NO_MATCH, f"{name!r} produced no rule")
            except Rejected as rejected:
                # A shorter utility name may still match.
                failure = failure or rejected
                continue
            return _Match(list(bodies), definition.layer)
        raise failure or Rejected(RejectReason.UNKNOWN_UTILITY, candidate.base)

    def _value(
        self, definition: UtilityDefinition, rest: str | None, negative: bool
    ) -> UtilityValue:
        if negative and not definition.negative:
            raise Rejected(
                RejectReason.INVALID_VALUE, f"{definition.name!r} has no negative form"
            )
        if rest is None:
            if not definition.bare:
                raise Rejected(RejectReason.NO_MATCH, f"{definition.name!r} needs a value")
            return self._default(definition, negative)
        if definition.is_static:
            raise Rejected(RejectReason.UNKNOWN_UTILITY, f"{definition.name}-{rest}")
        if rest.startswith("["):
            return self._arbitrary(definition, rest, negative)
        return self._scale(definition, rest, negative)

    def _default(self, definition: UtilityDefinition, negative: bool) -> UtilityValue:
        for category in definition.categories:
            token = self.registry.lookup(category, "DEFAULT")
            if token is not None:
                return UtilityValue(
                    value=token.value,
                    key="DEFAULT",
                    category=category,
                    token=token,
                    negative=negative,
                )
        return UtilityValue(negative=negative)

    def _scale(self, definition: UtilityDefinition, rest: str, negative: bool) -> UtilityValue:
        attempts = [(rest, None)]
        if definition.modifiers and "/" in rest:
            key, modifier = rest.rsplit("/", 1)
            if key and modifier:
                attempts.append((key, modifier))
        for key, modifier in attempts:
            for category in definition.categories:
                token = self.registry.lookup(category, key)
                if token is not None:
                    return UtilityValue(
                        value=token.value,
                        key=key,
                        category=category,
                        token=token,
                        negative=negative,
                        modifier=modifier,
                    )
        raise Rejected(
            RejectReason.UNKNOWN_TOKEN,
            f"{rest!r} not found in {', '.join(definition.categories)}",
        )

    def _arbitrary(self, definition: UtilityDefinition, rest: str, negative: bool) -> UtilityValue:
        parts = split_top_level(rest, "/")
        if parts is None:
            raise Rejected(RejectReason.INVALID_VALUE, f"unbalanced value {rest!r}")
        literal, modifier = parts[0], None
        if len(parts) == 2 and definition.modifiers and parts[1]:
            modifier = parts[1]
        elif len(parts) != 1:
            raise Rejected(RejectReason.INVALID_VALUE, f"unexpected modifier in {rest!r}")
        if not (literal.startswith("[") and literal.endswith("]")):
            raise Rejected(RejectReason.INVALID_VALUE, f"malformed arbitrary value {rest!r}")
        value = normalize_arbitrary(literal[1:-1])
        if value is None:
            raise Rejected(RejectReason.INVALID_VALUE, f"invalid arbitrary value {literal!r}")
        return UtilityValue(
            value=value, key=literal, category=ARBITRARY, negative=negative, modifier=modifier
        )

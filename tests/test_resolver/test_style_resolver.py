"""Tests for the style resolver."""

import logging

import pytest

from breeze.config import BreezeConfig
from breeze.engine import Engine
from breeze.events import CandidateRejected, EventRecorder, RejectReason
from breeze.model.rule import Declaration, Layer
from breeze.plugins import FunctionPlugin, VariantContext


def make_engine(**config) -> Engine:
    config.setdefault("preflight", False)
    return Engine(BreezeConfig(**config))


@pytest.fixture
def engine() -> Engine:
    return make_engine()


@pytest.fixture
def recorder(engine) -> EventRecorder:
    return EventRecorder(engine.event_bus)


def rejection(recorder: EventRecorder) -> RejectReason:
    events = recorder.of_type(CandidateRejected)
    assert len(events) == 1
    return events[0].reason


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------


class TestVariants:
    def test_responsive_variant(self, engine):
        rule = engine.resolver.resolve("md:p-8")
        assert rule.selector == ".md\\:p-8"
        assert rule.at_rules == ("@media (min-width: 768px)",)
        assert rule.declarations == (Declaration("padding", "2rem"),)

    def test_state_variant(self, engine):
        rule = engine.resolver.resolve("hover:bg-white")
        assert rule.selector == ".hover\\:bg-white:hover"
        assert rule.at_rules == ()

    def test_stacked_variants_apply_inner_first(self, engine):
        rule = engine.resolver.resolve("md:hover:underline")
        assert rule.selector == ".md\\:hover\\:underline:hover"
        assert rule.at_rules == ("@media (min-width: 768px)",)

    def test_outer_at_rule_wraps_inner(self, engine):
        rule = engine.resolver.resolve("print:md:block")
        assert rule.at_rules == ("@media print", "@media (min-width: 768px)")

    def test_group_variant(self, engine):
        rule = engine.resolver.resolve("group-hover:text-white")
        assert rule.selector == ".group:hover .group-hover\\:text-white"

    def test_dark_media_strategy(self, engine):
        rule = engine.resolver.resolve("dark:bg-black")
        assert rule.at_rules == ("@media (prefers-color-scheme: dark)",)

    def test_dark_class_strategy(self):
        rule = make_engine(dark_mode="class").resolver.resolve("dark:bg-black")
        assert rule.selector == ".dark .dark\\:bg-black"
        assert rule.at_rules == ()

    def test_variant_mask_orders_breakpoints(self, engine):
        sm = engine.resolver.resolve("sm:p-1")
        lg = engine.resolver.resolve("lg:p-1")
        hover = engine.resolver.resolve("hover:p-1")
        plain = engine.resolver.resolve("p-1")
        assert plain.variant_mask == 0
        assert 0 < hover.variant_mask < sm.variant_mask < lg.variant_mask

    def test_container_inside_variant_keeps_breakpoints(self, engine):
        rule = engine.resolver.resolve("print:container")
        assert rule.at_rules == ("@media print",)
        assert rule.nested[0].at_rules == ("@media print", "@media (min-width: 640px)")

    def test_custom_separator(self):
        engine = make_engine(separator="_")
        rule = engine.resolver.resolve("md_p-8")
        assert rule.at_rules == ("@media (min-width: 768px)",)

    def test_callable_variant_returning_none_rejects(self):
        def setup(api):
            api.register_variant("never", lambda ctx: None)

        engine = make_engine(plugins=(FunctionPlugin(setup),))
        recorder = EventRecorder(engine.event_bus)
        assert engine.resolver.resolve("never:p-4") is None
        assert rejection(recorder) is RejectReason.NO_MATCH

    def test_plugin_variant(self):
        def setup(api):
            api.register_variant(
                "rtl", lambda ctx: VariantContext(f"[dir='rtl'] {ctx.selector}", ctx.at_rules)
            )

        engine = make_engine(plugins=(FunctionPlugin(setup),))
        assert engine.resolver.resolve("rtl:ml-2").selector == "[dir='rtl'] .rtl\\:ml-2"


# ---------------------------------------------------------------------------
# Markers and arbitrary input
# ---------------------------------------------------------------------------


class TestMarkers:
    def test_leading_important(self, engine):
        rule = engine.resolver.resolve("!p-4")
        assert rule.selector == ".\\!p-4"
        assert rule.declarations == (Declaration("padding", "1rem", important=True),)

    def test_trailing_important(self, engine):
        rule = engine.resolver.resolve("p-4!")
        assert rule.declarations[0].important

    def test_global_important_marks_utilities_only(self):
        engine = make_engine(important=True)
        assert engine.resolver.resolve("p-4").declarations[0].important
        assert not engine.resolver.resolve("container").declarations[0].important

    def test_negative_arbitrary_value(self, engine):
        rule = engine.resolver.resolve("-mt-[3px]")
        assert rule.declarations == (Declaration("margin-top", "-3px"),)

    def test_negative_css_variable_uses_calc(self, engine):
        rule = engine.resolver.resolve("-mt-[var(--gap)]")
        assert rule.declarations[0].value == "calc(var(--gap) * -1)"


class TestArbitrary:
    def test_arbitrary_property(self, engine):
        rule = engine.resolver.resolve("[mask-type:luminance]")
        assert rule.selector == ".\\[mask-type\\:luminance\\]"
        assert rule.declarations == (Declaration("mask-type", "luminance"),)
        assert rule.layer is Layer.UTILITIES

    def test_arbitrary_property_with_variant(self, engine):
        rule = engine.resolver.resolve("hover:[color:red]")
        assert rule.selector.endswith(":hover")

    def test_arbitrary_custom_property(self, engine):
        rule = engine.resolver.resolve("[--brand:#123]")
        assert rule.declarations == (Declaration("--brand", "#123"),)

    def test_underscores_become_spaces(self, engine):
        rule = engine.resolver.resolve("[grid-template-areas:'a_b']")
        assert rule.declarations[0].value == "'a b'"

    @pytest.mark.parametrize(
        "candidate",
        [
            "[color:red;display:none]",
            "[color:{}]",
            "[1color:red]",
            "[color]",
            "w-[]",
            "w-[a;b]",
            "w-[(]",
        ],
    )
    def test_invalid_values_rejected(self, engine, recorder, candidate):
        assert engine.resolver.resolve(candidate) is None
        assert len(recorder.of_type(CandidateRejected)) == 1


# ---------------------------------------------------------------------------
# Rejections
# ---------------------------------------------------------------------------


class TestRejections:
    def test_unknown_variant(self, engine, recorder):
        assert engine.resolver.resolve("nope:p-4") is None
        event = recorder.of_type(CandidateRejected)[0]
        assert event.reason is RejectReason.UNKNOWN_VARIANT
        assert event.detail == "nope"

    def test_unbalanced_bracket_is_malformed(self, engine, recorder):
        assert engine.resolver.resolve("w-[100px") is None
        assert rejection(recorder) is RejectReason.MALFORMED

    def test_empty_variant_segment(self, engine, recorder):
        assert engine.resolver.resolve("md::p-4") is None
        assert rejection(recorder) is RejectReason.MALFORMED

    def test_unknown_utility(self, engine, recorder):
        assert engine.resolver.resolve("frobnicate") is None
        assert rejection(recorder) is RejectReason.UNKNOWN_UTILITY

    def test_unknown_token(self, engine, recorder):
        assert engine.resolver.resolve("p-13") is None
        assert rejection(recorder) is RejectReason.UNKNOWN_TOKEN

    def test_negative_not_supported(self, engine, recorder):
        assert engine.resolver.resolve("-bg-red-500") is None
        assert rejection(recorder) is RejectReason.INVALID_VALUE

    def test_width_with_modifier_is_no_match(self, engine, recorder):
        assert engine.resolver.resolve("border-2/50") is None
        assert rejection(recorder) is RejectReason.NO_MATCH

    def test_arbitrary_width_with_modifier_is_no_match(self, engine, recorder):
        assert engine.resolver.resolve("border-[3px]/50") is None
        assert rejection(recorder) is RejectReason.NO_MATCH

    def test_border_color_keeps_opacity_modifier(self, engine):
        rule = engine.resolver.resolve("border-red-500/50")
        assert rule.declarations == (Declaration("border-color", "rgb(239 68 68 / 0.5)"),)

    def test_rejection_logged_at_debug(self, engine, caplog):
        with caplog.at_level(logging.DEBUG, logger="breeze.resolver.resolver"):
            engine.resolver.resolve("nope:p-4")
        assert "nope:p-4" in caplog.text

    def test_generator_unknown_token_is_a_rejection(self):
        def setup(api):
            api.register("brand", lambda value: [api.rule({"color": api.resolve("colors", "brand")})])

        engine = make_engine(plugins=(FunctionPlugin(setup),))
        recorder = EventRecorder(engine.event_bus)
        assert engine.resolver.resolve("brand") is None
        assert rejection(recorder) is RejectReason.UNKNOWN_TOKEN


# ---------------------------------------------------------------------------
# Theme tokens through the resolver
# ---------------------------------------------------------------------------


TOKEN_UTILITIES = [
    ("p", "padding"),
    ("m", "margin"),
    ("gap", "gap"),
    ("inset", "inset"),
    ("w", "width"),
    ("h", "height"),
    ("min-w", "minWidth"),
    ("max-w", "maxWidth"),
    ("max-h", "maxHeight"),
    ("z", "zIndex"),
    ("bg", "backgroundColor"),
    ("text", "textColor"),
    ("text", "fontSize"),
    ("font", "fontWeight"),
    ("font", "fontFamily"),
    ("leading", "lineHeight"),
    ("tracking", "letterSpacing"),
    ("border", "borderWidth"),
    ("rounded", "borderRadius"),
    ("shadow", "boxShadow"),
    ("opacity", "opacity"),
]


class TestTokenRoundTrip:
    @pytest.mark.parametrize("prefix,category", TOKEN_UTILITIES)
    def test_every_token_reaches_the_declarations(self, engine, prefix, category):
        tokens = engine.registry.category(category)
        assert tokens
        for key, token in tokens.items():
            candidate = prefix if key == "DEFAULT" else f"{prefix}-{key}"
            rule = engine.resolver.resolve(candidate)
            assert rule is not None, candidate
            assert token.value in [d.value for d in rule.declarations], candidate


# ---------------------------------------------------------------------------
# Batch resolution
# ---------------------------------------------------------------------------


class TestResolveAll:
    def test_keeps_input_order_and_drops_rejections(self, engine):
        candidates = ["p-4", "nope:x", "m-2", "text-lg", "w-[1px", "block"]
        rules = engine.resolver.resolve_all(candidates, workers=4)
        assert [r.candidate for r in rules] == ["p-4", "m-2", "text-lg", "block"]
        assert [r.order for r in rules] == [0, 2, 3, 5]

    def test_empty_input(self, engine):
        assert engine.resolver.resolve_all([]) == []

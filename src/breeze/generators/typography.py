"""Typography utilities."""

from __future__ import annotations

from typing import TYPE_CHECKING

from breeze.css import normalize_arbitrary
from breeze.generators.helpers import by_type, color_utility, keywords, properties
from breeze.model.rule import Declaration, RuleBody

if TYPE_CHECKING:
    from breeze.plugins.api import PluginAPI
    from breeze.plugins.host import UtilityValue


def _font_size(api: PluginAPI):
    def generate(value: UtilityValue) -> list[RuleBody]:
        if value.value is None:
            return []
        line_height = value.token.meta_value("lineHeight") if value.token else None
        if value.modifier is not None:
            # text-lg/7: explicit line height from the scale or a literal.
            if value.modifier.startswith("["):
                line_height = normalize_arbitrary(value.modifier[1:-1])
            else:
                line_height = api.theme_value("lineHeight", value.modifier)
            if line_height is None:
                return []
        declarations = [Declaration("font-size", value.value)]
        if line_height is not None:
            declarations.append(Declaration("line-height", line_height))
        return [RuleBody(tuple(declarations))]

    return generate


def register(api: PluginAPI) -> None:
    keywords(api, "text", "text-align", {
        "left": "left",
        "center": "center",
        "right": "right",
        "justify": "justify",
        "start": "start",
        "end": "end",
    })
    size = _font_size(api)
    color = color_utility(api, "color")
    api.register(
        "text",
        by_type(color=color, length=size, categories={"fontSize": size, "textColor": color}),
        categories=("fontSize", "textColor"),
        modifiers=True,
    )

    weight = properties("font-weight")
    family = properties("font-family")
    api.register(
        "font",
        by_type(categories={"fontWeight": weight, "fontFamily": family}),
        categories=("fontWeight", "fontFamily"),
    )

    api.register("leading", properties("line-height"), categories=("lineHeight",))
    api.register("tracking", properties("letter-spacing"), categories=("letterSpacing",), negative=True)

    for name in ("uppercase", "lowercase", "capitalize"):
        api.static(name, {"text-transform": name})
    api.static("normal-case", {"text-transform": "none"})
    api.static("italic", {"font-style": "italic"})
    api.static("not-italic", {"font-style": "normal"})
    api.static("underline", {"text-decoration-line": "underline"})
    api.static("line-through", {"text-decoration-line": "line-through"})
    api.static("no-underline", {"text-decoration-line": "none"})
    api.static("antialiased", {
        "-webkit-font-smoothing": "antialiased",
        "-moz-osx-font-smoothing": "grayscale",
    })
    keywords(api, "whitespace", "white-space", {
        "normal": "normal",
        "nowrap": "nowrap",
        "pre": "pre",
        "pre-line": "pre-line",
        "pre-wrap": "pre-wrap",
    })
    keywords(api, "break", "overflow-wrap", {"normal": "normal", "words": "break-word"})
    keywords(api, "list", "list-style-type", {"none": "none", "disc": "disc", "decimal": "decimal"})

"""Form element reset plugin.

Two strategies:
    base   -- element-level rules in the base layer (``[type='text']``, ``select``...)
    class  -- opt-in component classes (``form-input``, ``form-checkbox``...)

Without a strategy both are generated.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from breeze.errors import ConfigError
from breeze.model.rule import Layer, RuleBody

if TYPE_CHECKING:
    from breeze.plugins.api import PluginAPI
    from breeze.plugins.host import UtilityValue

STRATEGIES = frozenset({"base", "class"})

_TEXT_TYPES = (
    "text", "email", "url", "password", "number", "date", "datetime-local",
    "month", "search", "tel", "time", "week",
)

_CHEVRON = (
    "url(\"data:image/svg+xml,%3csvg xmlns='http://www.w3.org/2000/svg' fill='none' "
    "viewBox='0 0 20 20'%3e%3cpath stroke='{color}' stroke-linecap='round' "
    "stroke-linejoin='round' stroke-width='1.5' d='M6 8l4 4 4-4'/%3e%3c/svg%3e\")"
)
_CHECKMARK = (
    "url(\"data:image/svg+xml,%3csvg viewBox='0 0 16 16' fill='white' "
    "xmlns='http://www.w3.org/2000/svg'%3e%3cpath d='M12.207 4.793a1 1 0 010 1.414l-5 "
    "5a1 1 0 01-1.414 0l-2-2a1 1 0 011.414-1.414L6.5 9.086l4.293-4.293a1 1 0 011.414 "
    "0z'/%3e%3c/svg%3e\")"
)
_DOT = (
    "url(\"data:image/svg+xml,%3csvg viewBox='0 0 16 16' fill='white' "
    "xmlns='http://www.w3.org/2000/svg'%3e%3ccircle cx='8' cy='8' r='3'/%3e%3c/svg%3e\")"
)


class FormsPlugin:
    """Resets form controls to a consistent, easily restyled baseline."""

    name = "forms"

    def __init__(self, strategy: str | None = None) -> None:
        if strategy is not None and strategy not in STRATEGIES:
            raise ConfigError(
                f"forms strategy must be one of {sorted(STRATEGIES)}, got {strategy!r}",
                key="plugins",
            )
        self.strategy = strategy

    def __repr__(self) -> str:
        return f"FormsPlugin(strategy={self.strategy!r})"

    def setup(self, api: PluginAPI) -> None:
        elements = _elements(api)
        if self.strategy in (None, "base"):
            for selectors, blocks in elements.values():
                for suffix, declarations in blocks:
                    api.add_base(",".join(s + suffix for s in selectors), declarations)
        if self.strategy in (None, "class"):
            for class_name, (_, blocks) in elements.items():
                api.register(
                    class_name,
                    _component(api, blocks),
                    layer=Layer.COMPONENTS,
                )


def _component(api: PluginAPI, blocks: list[tuple[str, dict[str, str]]]):
    bodies = [api.rule(declarations, suffix=suffix) for suffix, declarations in blocks]

    def generate(value: UtilityValue) -> list[RuleBody]:
        return list(bodies)

    return generate


def _elements(api: PluginAPI) -> dict[str, tuple[tuple[str, ...], list[tuple[str, dict[str, str]]]]]:
    gray = api.theme_value("colors", "gray-500", "#6b7280")
    blue = api.theme_value("colors", "blue-600", "#2563eb")
    white = api.theme_value("colors", "white", "#ffffff")
    pad_y = api.theme_value("spacing", "2", "0.5rem")
    pad_x = api.theme_value("spacing", "3", "0.75rem")
    pad_select = api.theme_value("spacing", "10", "2.5rem")
    box = api.theme_value("spacing", "4", "1rem")
    font_size = api.theme_value("fontSize", "base", "1rem")

    field = {
        "appearance": "none",
        "background-color": white,
        "border-color": gray,
        "border-width": "1px",
        "border-radius": "0px",
        "padding": f"{pad_y} {pad_x}",
        "font-size": font_size,
        "line-height": "1.5rem",
    }
    focus = {
        "outline": "2px solid transparent",
        "outline-offset": "2px",
        "border-color": blue,
        "box-shadow": f"0 0 0 1px {blue}",
    }
    placeholder = {"color": gray, "opacity": "1"}
    select = {
        **field,
        "background-image": _CHEVRON.format(color=gray.replace("#", "%23")),
        "background-position": f"right {pad_y} center",
        "background-repeat": "no-repeat",
        "background-size": "1.5em 1.5em",
        "padding-right": pad_select,
        "print-color-adjust": "exact",
    }
    multiselect = {**field, "background-image": "initial", "padding-right": pad_x}
    toggle = {
        "appearance": "none",
        "padding": "0",
        "print-color-adjust": "exact",
        "display": "inline-block",
        "vertical-align": "middle",
        "background-origin": "border-box",
        "user-select": "none",
        "flex-shrink": "0",
        "height": box,
        "width": box,
        "color": blue,
        "background-color": white,
        "border-color": gray,
        "border-width": "1px",
    }
    checked = {
        "border-color": "transparent",
        "background-color": "currentColor",
        "background-size": "100% 100%",
        "background-position": "center",
        "background-repeat": "no-repeat",
    }
    text_inputs = tuple(f"[type='{t}']" for t in _TEXT_TYPES) + ("input:where(:not([type]))",)

    return {
        "form-input": (
            text_inputs,
            [("", field), (":focus", focus), ("::placeholder", placeholder)],
        ),
        "form-textarea": (
            ("textarea",),
            [("", field), (":focus", focus), ("::placeholder", placeholder)],
        ),
        "form-select": (("select",), [("", select), (":focus", focus)]),
        "form-multiselect": (("select[multiple]",), [("", multiselect), (":focus", focus)]),
        "form-checkbox": (
            ("[type='checkbox']",),
            [
                ("", {**toggle, "border-radius": "0px"}),
                (":focus", focus),
                (":checked", {**checked, "background-image": _CHECKMARK}),
            ],
        ),
        "form-radio": (
            ("[type='radio']",),
            [
                ("", {**toggle, "border-radius": "100%"}),
                (":focus", focus),
                (":checked", {**checked, "background-image": _DOT}),
            ],
        ),
    }

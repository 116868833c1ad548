"""Layout utilities: container, display, position, inset, z-index, overflow."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from breeze.errors import ConfigError
from breeze.generators.helpers import keywords, properties
from breeze.model.rule import Layer, RuleBody

if TYPE_CHECKING:
    from breeze.plugins.api import PluginAPI
    from breeze.plugins.host import UtilityValue

DISPLAY = {
    "block": "block",
    "inline-block": "inline-block",
    "inline": "inline",
    "inline-flex": "inline-flex",
    "grid": "grid",
    "inline-grid": "inline-grid",
    "table": "table",
    "contents": "contents",
    "hidden": "none",
}

POSITION = ("static", "fixed", "absolute", "relative", "sticky")

OVERFLOW = ("auto", "hidden", "clip", "visible", "scroll")


def _container_screens(api: PluginAPI, options: Mapping) -> list[tuple[str, str]]:
    screens = options.get("screens")
    if screens is None:
        return api.screens()
    if not isinstance(screens, Mapping):
        raise ConfigError("theme.container.screens must be a mapping", key="theme.container")
    return [(str(name), str(width)) for name, width in screens.items()]


def _container_padding(options: Mapping) -> tuple[str | None, Mapping]:
    padding = options.get("padding")
    if padding is None:
        return None, {}
    if isinstance(padding, str):
        return padding, {}
    if isinstance(padding, Mapping):
        return padding.get("DEFAULT"), padding
    raise ConfigError(
        "theme.container.padding must be a string or a mapping", key="theme.container"
    )


def register_container(api: PluginAPI) -> None:
    """``container``: full width, capped at each breakpoint.

    ``theme.container.center`` adds horizontal auto margins and
    ``theme.container.padding`` (a value or a per-screen mapping) adds
    horizontal padding.
    """
    options = api.section("container")
    screens = _container_screens(api, options)
    default_padding, screen_padding = _container_padding(options)

    main = {"width": "100%"}
    if options.get("center"):
        main["margin-right"] = "auto"
        main["margin-left"] = "auto"
    if default_padding:
        main["padding-right"] = default_padding
        main["padding-left"] = default_padding

    bodies = [api.rule(main)]
    for name, width in screens:
        block = {"max-width": width}
        padding = screen_padding.get(name)
        if padding:
            block["padding-right"] = padding
            block["padding-left"] = padding
        bodies.append(api.rule(block, at_rule=f"@media (min-width: {width})"))

    def generate(value: UtilityValue) -> list[RuleBody]:
        return list(bodies)

    api.register("container", generate, layer=Layer.COMPONENTS)


def register(api: PluginAPI) -> None:
    register_container(api)

    for name, css_value in DISPLAY.items():
        api.static(name, {"display": css_value})
    for name in POSITION:
        api.static(name, {"position": name})
    api.static("visible", {"visibility": "visible"})
    api.static("invisible", {"visibility": "hidden"})
    api.static("sr-only", {
        "position": "absolute",
        "width": "1px",
        "height": "1px",
        "padding": "0",
        "margin": "-1px",
        "overflow": "hidden",
        "clip": "rect(0, 0, 0, 0)",
        "white-space": "nowrap",
        "border-width": "0",
    })
    api.static("truncate", {
        "overflow": "hidden",
        "text-overflow": "ellipsis",
        "white-space": "nowrap",
    })

    inset = ("inset",)
    api.register("inset", properties("top", "right", "bottom", "left"), categories=inset, negative=True)
    api.register("inset-x", properties("left", "right"), categories=inset, negative=True)
    api.register("inset-y", properties("top", "bottom"), categories=inset, negative=True)
    for side in ("top", "right", "bottom", "left"):
        api.register(side, properties(side), categories=inset, negative=True)

    api.register("z", properties("z-index"), categories=("zIndex",), negative=True)

    keywords(api, "overflow", "overflow", {k: k for k in OVERFLOW})
    keywords(api, "overflow-x", "overflow-x", {k: k for k in OVERFLOW})
    keywords(api, "overflow-y", "overflow-y", {k: k for k in OVERFLOW})

    keywords(api, "cursor", "cursor", {
        "auto": "auto",
        "default": "default",
        "pointer": "pointer",
        "wait": "wait",
        "text": "text",
        "move": "move",
        "not-allowed": "not-allowed",
    })
    keywords(api, "select", "user-select", {"none": "none", "text": "text", "all": "all", "auto": "auto"})
    keywords(api, "pointer-events", "pointer-events", {"none": "none", "auto": "auto"})

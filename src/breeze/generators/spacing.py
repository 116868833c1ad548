"""Spacing utilities: padding, margin, space-between and gap."""

from __future__ import annotations

from typing import TYPE_CHECKING

from breeze.generators.helpers import properties

if TYPE_CHECKING:
    from breeze.plugins.api import PluginAPI

# prefix -> properties, shared by padding (p*) and margin (m*).
SIDES: dict[str, tuple[str, ...]] = {
    "": ("{}",),
    "x": ("{}-left", "{}-right"),
    "y": ("{}-top", "{}-bottom"),
    "t": ("{}-top",),
    "r": ("{}-right",),
    "b": ("{}-bottom",),
    "l": ("{}-left",),
    "s": ("{}-inline-start",),
    "e": ("{}-inline-end",),
}

# Applied to every child but the first.
BETWEEN = " > :not([hidden]) ~ :not([hidden])"


def register(api: PluginAPI) -> None:
    for side, templates in SIDES.items():
        api.register(
            f"p{side}",
            properties(*(t.format("padding") for t in templates)),
            categories=("padding",),
        )
        api.register(
            f"m{side}",
            properties(*(t.format("margin") for t in templates)),
            categories=("margin",),
            negative=True,
        )

    api.register("space-x", properties("margin-left", suffix=BETWEEN), categories=("space",), negative=True)
    api.register("space-y", properties("margin-top", suffix=BETWEEN), categories=("space",), negative=True)

    api.register("gap", properties("gap"), categories=("gap",))
    api.register("gap-x", properties("column-gap"), categories=("gap",))
    api.register("gap-y", properties("row-gap"), categories=("gap",))

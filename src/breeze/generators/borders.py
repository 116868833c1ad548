"""Border width, color, style and radius utilities."""

from __future__ import annotations

from typing import TYPE_CHECKING

from breeze.generators.helpers import by_type, color_utility, keywords, properties

if TYPE_CHECKING:
    from breeze.plugins.api import PluginAPI

# suffix -> sides the utility targets
BORDER_SIDES: dict[str, tuple[str, ...]] = {
    "": (),
    "x": ("left", "right"),
    "y": ("top", "bottom"),
    "t": ("top",),
    "r": ("right",),
    "b": ("bottom",),
    "l": ("left",),
}

RADIUS_SIDES: dict[str, tuple[str, ...]] = {
    "": ("border-radius",),
    "t": ("border-top-left-radius", "border-top-right-radius"),
    "r": ("border-top-right-radius", "border-bottom-right-radius"),
    "b": ("border-bottom-right-radius", "border-bottom-left-radius"),
    "l": ("border-top-left-radius", "border-bottom-left-radius"),
    "tl": ("border-top-left-radius",),
    "tr": ("border-top-right-radius",),
    "br": ("border-bottom-right-radius",),
    "bl": ("border-bottom-left-radius",),
}


def _border_props(sides: tuple[str, ...], kind: str) -> tuple[str, ...]:
    if not sides:
        return (f"border-{kind}",)
    return tuple(f"border-{side}-{kind}" for side in sides)


def register(api: PluginAPI) -> None:
    for suffix, sides in BORDER_SIDES.items():
        name = f"border-{suffix}" if suffix else "border"
        width = properties(*_border_props(sides, "width"))
        color = color_utility(api, *_border_props(sides, "color"))
        api.register(
            name,
            by_type(
                color=color,
                length=width,
                categories={"borderWidth": width, "borderColor": color},
            ),
            categories=("borderWidth", "borderColor"),
            bare=True,
            modifiers=True,
        )

    keywords(api, "border", "border-style", {
        "solid": "solid",
        "dashed": "dashed",
        "dotted": "dotted",
        "double": "double",
        "none": "none",
    })

    for suffix, props in RADIUS_SIDES.items():
        name = f"rounded-{suffix}" if suffix else "rounded"
        api.register(name, properties(*props), categories=("borderRadius",), bare=True)

"""Sizing utilities."""

from __future__ import annotations

from typing import TYPE_CHECKING

from breeze.generators.helpers import properties

if TYPE_CHECKING:
    from breeze.plugins.api import PluginAPI

SIZING = {
    "w": ("width", "width"),
    "h": ("height", "height"),
    "min-w": ("min-width", "minWidth"),
    "min-h": ("min-height", "minHeight"),
    "max-w": ("max-width", "maxWidth"),
    "max-h": ("max-height", "maxHeight"),
}


def register(api: PluginAPI) -> None:
    for name, (prop, category) in SIZING.items():
        api.register(name, properties(prop), categories=(category,))
    api.register("size", properties("width", "height"), categories=("width",))

"""Built-in rule generators and variants.

The core plugin always runs first; every other plugin can override what it
registers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from breeze.generators import (
    borders,
    color,
    effects,
    flexbox,
    layout,
    sizing,
    spacing,
    typography,
    variants,
)

if TYPE_CHECKING:
    from breeze.plugins.api import PluginAPI

MODULES = (layout, spacing, sizing, flexbox, typography, color, borders, effects)


class CorePlugin:
    """Registers the built-in utilities and variants."""

    name = "core"

    def setup(self, api: PluginAPI) -> None:
        variants.register(api)
        for module in MODULES:
            module.register(api)


__all__ = ["CorePlugin", "MODULES"]

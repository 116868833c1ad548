"""Shadow and opacity utilities."""

from __future__ import annotations

from typing import TYPE_CHECKING

from breeze.generators.helpers import properties

if TYPE_CHECKING:
    from breeze.plugins.api import PluginAPI


def register(api: PluginAPI) -> None:
    api.register("shadow", properties("box-shadow"), categories=("boxShadow",), bare=True)
    api.register("opacity", properties("opacity"), categories=("opacity",))

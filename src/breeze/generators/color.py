"""Background utilities."""

from __future__ import annotations

from typing import TYPE_CHECKING

from breeze.generators.helpers import color_utility, keywords

if TYPE_CHECKING:
    from breeze.plugins.api import PluginAPI


def register(api: PluginAPI) -> None:
    api.register(
        "bg",
        color_utility(api, "background-color"),
        categories=("backgroundColor",),
        modifiers=True,
    )
    keywords(api, "bg", "background-attachment", {
        "fixed": "fixed",
        "local": "local",
        "scroll": "scroll",
    })
    keywords(api, "bg", "background-size", {
        "auto": "auto",
        "cover": "cover",
        "contain": "contain",
    })
    keywords(api, "bg", "background-repeat", {
        "repeat": "repeat",
        "no-repeat": "no-repeat",
    })

"""Flexbox and grid utilities."""

from __future__ import annotations

from typing import TYPE_CHECKING

from breeze.generators.helpers import declare, keywords, properties
from breeze.model.rule import RuleBody

if TYPE_CHECKING:
    from breeze.plugins.api import PluginAPI
    from breeze.plugins.host import UtilityValue


def _flex(value: UtilityValue) -> list[RuleBody]:
    # Bare "flex" is the display utility; "flex-<key>" reads the flex scale.
    if value.value is None:
        return declare(("display",), "flex")
    return declare(("flex",), value.value)


ALIGN = {
    "start": "flex-start",
    "end": "flex-end",
    "center": "center",
    "baseline": "baseline",
    "stretch": "stretch",
}

JUSTIFY = {
    "normal": "normal",
    "start": "flex-start",
    "end": "flex-end",
    "center": "center",
    "between": "space-between",
    "around": "space-around",
    "evenly": "space-evenly",
}


def register(api: PluginAPI) -> None:
    keywords(api, "flex", "flex-direction", {
        "row": "row",
        "row-reverse": "row-reverse",
        "col": "column",
        "col-reverse": "column-reverse",
    })
    keywords(api, "flex", "flex-wrap", {
        "wrap": "wrap",
        "wrap-reverse": "wrap-reverse",
        "nowrap": "nowrap",
    })
    api.register("flex", _flex, categories=("flex",), bare=True)
    api.register("grow", properties("flex-grow"), categories=("flexGrow",), bare=True)
    api.register("shrink", properties("flex-shrink"), categories=("flexShrink",), bare=True)

    keywords(api, "items", "align-items", ALIGN)
    keywords(api, "self", "align-self", {"auto": "auto", **ALIGN})
    keywords(api, "content", "align-content", {
        k: v for k, v in JUSTIFY.items() if k != "normal"
    })
    keywords(api, "justify", "justify-content", JUSTIFY)

    api.register(
        "grid-cols",
        properties("grid-template-columns"),
        categories=("gridTemplateColumns",),
    )
    api.register("col", properties("grid-column"), categories=("gridColumn",))
    api.register("col-span", properties("grid-column"), categories=("gridColumn",))

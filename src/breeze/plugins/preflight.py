"""Preflight: a compact base-layer reset emitted ahead of everything else."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from breeze.plugins.api import PluginAPI


class PreflightPlugin:
    name = "preflight"

    def setup(self, api: PluginAPI) -> None:
        border = api.theme_value("borderColor", "DEFAULT", "currentColor")
        sans = api.theme_value("fontFamily", "sans", "sans-serif")
        mono = api.theme_value("fontFamily", "mono", "monospace")

        api.add_base("*,::before,::after", {
            "box-sizing": "border-box",
            "border-width": "0",
            "border-style": "solid",
            "border-color": border,
        })
        api.add_base("html", {
            "line-height": "1.5",
            "-webkit-text-size-adjust": "100%",
            "tab-size": "4",
            "font-family": sans,
        })
        api.add_base("body", {"margin": "0", "line-height": "inherit"})
        api.add_base("hr", {"height": "0", "color": "inherit", "border-top-width": "1px"})
        api.add_base("h1,h2,h3,h4,h5,h6", {"font-size": "inherit", "font-weight": "inherit"})
        api.add_base("a", {"color": "inherit", "text-decoration": "inherit"})
        api.add_base("b,strong", {"font-weight": "bolder"})
        api.add_base("code,kbd,samp,pre", {"font-family": mono, "font-size": "1em"})
        api.add_base("blockquote,dl,dd,h1,h2,h3,h4,h5,h6,hr,figure,p,pre", {"margin": "0"})
        api.add_base("ol,ul,menu", {"list-style": "none", "margin": "0", "padding": "0"})
        api.add_base("button,input,optgroup,select,textarea", {
            "font-family": "inherit",
            "font-size": "100%",
            "line-height": "inherit",
            "color": "inherit",
            "margin": "0",
            "padding": "0",
        })
        api.add_base("button,[role=\"button\"]", {"cursor": "pointer"})
        api.add_base("img,svg,video,canvas,audio,iframe,embed,object", {
            "display": "block",
            "vertical-align": "middle",
        })
        api.add_base("img,video", {"max-width": "100%", "height": "auto"})
        api.add_base("[hidden]", {"display": "none"})

"""Core variants, registered in ordering slot order."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from breeze.plugins.api import PluginAPI

PSEUDO_CLASSES = [
    ("first", "&:first-child"),
    ("last", "&:last-child"),
    ("odd", "&:nth-child(odd)"),
    ("even", "&:nth-child(even)"),
    ("visited", "&:visited"),
    ("checked", "&:checked"),
    ("focus-within", "&:focus-within"),
    ("hover", "&:hover"),
    ("focus", "&:focus"),
    ("focus-visible", "&:focus-visible"),
    ("active", "&:active"),
    ("disabled", "&:disabled"),
    ("placeholder", "&::placeholder"),
    ("group-hover", ".group:hover &"),
    ("group-focus", ".group:focus &"),
    ("motion-safe", "@media (prefers-reduced-motion: no-preference)"),
    ("motion-reduce", "@media (prefers-reduced-motion: reduce)"),
]

DARK = {
    "media": "@media (prefers-color-scheme: dark)",
    "class": ".dark &",
}


def register(api: PluginAPI) -> None:
    for name, wrapper in PSEUDO_CLASSES:
        api.register_variant(name, wrapper)
    api.register_variant("dark", DARK[api.config.dark_mode])
    # Later screens get higher slots so wider breakpoints win.
    for name, width in api.screens():
        api.register_variant(name, f"@media (min-width: {width})")
    api.register_variant("print", "@media print")

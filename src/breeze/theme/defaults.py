"""Default design tokens.

Sections may be callables taking a ``theme(path)`` getter; they are resolved
once when a :class:`~breeze.theme.registry.TokenRegistry` is built.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any


def freeze(value: Any) -> Any:
    """Return a recursively read-only view of nested mappings."""
    if isinstance(value, Mapping):
        return MappingProxyType({k: freeze(v) for k, v in value.items()})
    if isinstance(value, list):
        return tuple(freeze(v) for v in value)
    return value


SCREENS = {
    "sm": "640px",
    "md": "768px",
    "lg": "1024px",
    "xl": "1280px",
    "2xl": "1536px",
}

SPACING = {
    "px": "1px",
    "0": "0px",
    "0.5": "0.125rem",
    "1": "0.25rem",
    "1.5": "0.375rem",
    "2": "0.5rem",
    "2.5": "0.625rem",
    "3": "0.75rem",
    "3.5": "0.875rem",
    "4": "1rem",
    "5": "1.25rem",
    "6": "1.5rem",
    "7": "1.75rem",
    "8": "2rem",
    "9": "2.25rem",
    "10": "2.5rem",
    "11": "2.75rem",
    "12": "3rem",
    "14": "3.5rem",
    "16": "4rem",
    "20": "5rem",
    "24": "6rem",
    "28": "7rem",
    "32": "8rem",
    "36": "9rem",
    "40": "10rem",
    "44": "11rem",
    "48": "12rem",
    "52": "13rem",
    "56": "14rem",
    "60": "15rem",
    "64": "16rem",
    "72": "18rem",
    "80": "20rem",
    "96": "24rem",
}

COLORS = {
    "inherit": "inherit",
    "current": "currentColor",
    "transparent": "transparent",
    "black": "#000000",
    "white": "#ffffff",
    "slate": {
        "50": "#f8fafc", "100": "#f1f5f9", "200": "#e2e8f0", "300": "#cbd5e1",
        "400": "#94a3b8", "500": "#64748b", "600": "#475569", "700": "#334155",
        "800": "#1e293b", "900": "#0f172a", "950": "#020617",
    },
    "gray": {
        "50": "#f9fafb", "100": "#f3f4f6", "200": "#e5e7eb", "300": "#d1d5db",
        "400": "#9ca3af", "500": "#6b7280", "600": "#4b5563", "700": "#374151",
        "800": "#1f2937", "900": "#111827", "950": "#030712",
    },
    "red": {
        "50": "#fef2f2", "100": "#fee2e2", "200": "#fecaca", "300": "#fca5a5",
        "400": "#f87171", "500": "#ef4444", "600": "#dc2626", "700": "#b91c1c",
        "800": "#991b1b", "900": "#7f1d1d", "950": "#450a0a",
    },
    "yellow": {
        "50": "#fefce8", "100": "#fef9c3", "200": "#fef08a", "300": "#fde047",
        "400": "#facc15", "500": "#eab308", "600": "#ca8a04", "700": "#a16207",
        "800": "#854d0e", "900": "#713f12", "950": "#422006",
    },
    "green": {
        "50": "#f0fdf4", "100": "#dcfce7", "200": "#bbf7d0", "300": "#86efac",
        "400": "#4ade80", "500": "#22c55e", "600": "#16a34a", "700": "#15803d",
        "800": "#166534", "900": "#14532d", "950": "#052e16",
    },
    "blue": {
        "50": "#eff6ff", "100": "#dbeafe", "200": "#bfdbfe", "300": "#93c5fd",
        "400": "#60a5fa", "500": "#3b82f6", "600": "#2563eb", "700": "#1d4ed8",
        "800": "#1e40af", "900": "#1e3a8a", "950": "#172554",
    },
    "indigo": {
        "50": "#eef2ff", "100": "#e0e7ff", "200": "#c7d2fe", "300": "#a5b4fc",
        "400": "#818cf8", "500": "#6366f1", "600": "#4f46e5", "700": "#4338ca",
        "800": "#3730a3", "900": "#312e81", "950": "#1e1b4b",
    },
    "pink": {
        "50": "#fdf2f8", "100": "#fce7f3", "200": "#fbcfe8", "300": "#f9a8d4",
        "400": "#f472b6", "500": "#ec4899", "600": "#db2777", "700": "#be185d",
        "800": "#9d174d", "900": "#831843", "950": "#500724",
    },
}


def _spacing_plus(**extra: str):
    def section(theme):
        return {**theme("spacing"), **extra}
    return section


def _margin(theme):
    return {"auto": "auto", **theme("spacing")}


_FRACTIONS = {
    "1/2": "50%",
    "1/3": "33.333333%",
    "2/3": "66.666667%",
    "1/4": "25%",
    "3/4": "75%",
    "full": "100%",
}

DEFAULT_THEME: Mapping[str, Any] = freeze({
    "screens": SCREENS,
    "colors": COLORS,
    "spacing": SPACING,
    "container": {},
    "backgroundColor": lambda theme: theme("colors"),
    "textColor": lambda theme: theme("colors"),
    "borderColor": lambda theme: {
        "DEFAULT": theme("colors.gray.200", "currentColor"),
        **theme("colors"),
    },
    "padding": lambda theme: theme("spacing"),
    "margin": _margin,
    "gap": lambda theme: theme("spacing"),
    "space": lambda theme: theme("spacing"),
    "inset": lambda theme: {"auto": "auto", **_FRACTIONS, **theme("spacing")},
    "width": _spacing_plus(
        auto="auto", screen="100vw", min="min-content", max="max-content", fit="fit-content",
        **_FRACTIONS,
    ),
    "height": _spacing_plus(auto="auto", screen="100vh", full="100%", fit="fit-content"),
    "minWidth": {"0": "0px", "full": "100%", "min": "min-content", "max": "max-content"},
    "minHeight": {"0": "0px", "full": "100%", "screen": "100vh"},
    "maxWidth": lambda theme: {
        "none": "none",
        "0": "0rem",
        "xs": "20rem",
        "sm": "24rem",
        "md": "28rem",
        "lg": "32rem",
        "xl": "36rem",
        "2xl": "42rem",
        "3xl": "48rem",
        "4xl": "56rem",
        "5xl": "64rem",
        "6xl": "72rem",
        "7xl": "80rem",
        "full": "100%",
        "prose": "65ch",
        **{f"screen-{k}": v for k, v in theme("screens").items()},
    },
    "maxHeight": _spacing_plus(none="none", full="100%", screen="100vh"),
    "zIndex": {"0": "0", "10": "10", "20": "20", "30": "30", "40": "40", "50": "50", "auto": "auto"},
    "flex": {"1": "1 1 0%", "auto": "1 1 auto", "initial": "0 1 auto", "none": "none"},
    "flexGrow": {"DEFAULT": "1", "0": "0"},
    "flexShrink": {"DEFAULT": "1", "0": "0"},
    "gridTemplateColumns": {str(n): f"repeat({n}, minmax(0, 1fr))" for n in range(1, 13)}
    | {"none": "none"},
    "gridColumn": {"auto": "auto", "full": "1 / -1"}
    | {str(n): f"span {n} / span {n}" for n in range(1, 13)},
    "fontFamily": {
        "sans": ["ui-sans-serif", "system-ui", "sans-serif"],
        "serif": ["ui-serif", "Georgia", "serif"],
        "mono": ["ui-monospace", "SFMono-Regular", "Menlo", "monospace"],
    },
    "fontSize": {
        "xs": ["0.75rem", {"lineHeight": "1rem"}],
        "sm": ["0.875rem", {"lineHeight": "1.25rem"}],
        "base": ["1rem", {"lineHeight": "1.5rem"}],
        "lg": ["1.125rem", {"lineHeight": "1.75rem"}],
        "xl": ["1.25rem", {"lineHeight": "1.75rem"}],
        "2xl": ["1.5rem", {"lineHeight": "2rem"}],
        "3xl": ["1.875rem", {"lineHeight": "2.25rem"}],
        "4xl": ["2.25rem", {"lineHeight": "2.5rem"}],
        "5xl": ["3rem", {"lineHeight": "1"}],
        "6xl": ["3.75rem", {"lineHeight": "1"}],
    },
    "fontWeight": {
        "thin": "100",
        "extralight": "200",
        "light": "300",
        "normal": "400",
        "medium": "500",
        "semibold": "600",
        "bold": "700",
        "extrabold": "800",
        "black": "900",
    },
    "lineHeight": {
        "none": "1",
        "tight": "1.25",
        "snug": "1.375",
        "normal": "1.5",
        "relaxed": "1.625",
        "loose": "2",
        "3": ".75rem",
        "4": "1rem",
        "5": "1.25rem",
        "6": "1.5rem",
        "7": "1.75rem",
        "8": "2rem",
    },
    "letterSpacing": {
        "tighter": "-0.05em",
        "tight": "-0.025em",
        "normal": "0em",
        "wide": "0.025em",
        "wider": "0.05em",
        "widest": "0.1em",
    },
    "borderWidth": {"DEFAULT": "1px", "0": "0px", "2": "2px", "4": "4px", "8": "8px"},
    "borderRadius": {
        "none": "0px",
        "sm": "0.125rem",
        "DEFAULT": "0.25rem",
        "md": "0.375rem",
        "lg": "0.5rem",
        "xl": "0.75rem",
        "2xl": "1rem",
        "3xl": "1.5rem",
        "full": "9999px",
    },
    "boxShadow": {
        "sm": "0 1px 2px 0 rgb(0 0 0 / 0.05)",
        "DEFAULT": "0 1px 3px 0 rgb(0 0 0 / 0.1), 0 1px 2px -1px rgb(0 0 0 / 0.1)",
        "md": "0 4px 6px -1px rgb(0 0 0 / 0.1), 0 2px 4px -2px rgb(0 0 0 / 0.1)",
        "lg": "0 10px 15px -3px rgb(0 0 0 / 0.1), 0 4px 6px -4px rgb(0 0 0 / 0.1)",
        "xl": "0 20px 25px -5px rgb(0 0 0 / 0.1), 0 8px 10px -6px rgb(0 0 0 / 0.1)",
        "inner": "inset 0 2px 4px 0 rgb(0 0 0 / 0.05)",
        "none": "none",
    },
    "opacity": {
        "0": "0", "5": "0.05", "10": "0.1", "20": "0.2", "25": "0.25", "30": "0.3",
        "40": "0.4", "50": "0.5", "60": "0.6", "70": "0.7", "75": "0.75", "80": "0.8",
        "90": "0.9", "95": "0.95", "100": "1",
    },
})

"""CSS text helpers: identifier escaping and arbitrary value checks."""

from __future__ import annotations

_PAIRS = {"(": ")", "[": "]", "{": "}"}
_CLOSERS = {v: k for k, v in _PAIRS.items()}
_QUOTES = "'\""


def escape_class(name: str) -> str:
    """Escape *name* for use as a CSS class selector (CSSOM ``CSS.escape``)."""
    out: list[str] = []
    for index, ch in enumerate(name):
        code = ord(ch)
        if code == 0:
            out.append("\ufffd")
        elif (
            0x1 <= code <= 0x1F
            or code == 0x7F
            or (index == 0 and "0" <= ch <= "9")
            or (index == 1 and "0" <= ch <= "9" and name[0] == "-")
        ):
            out.append(f"\\{code:x} ")
        elif index == 0 and ch == "-" and len(name) == 1:
            out.append("\\-")
        elif code >= 0x80 or ch in "-_" or ch.isalnum():
            out.append(ch)
        else:
            out.append("\\" + ch)
    return "".join(out)


def class_selector(name: str) -> str:
    return "." + escape_class(name)


def is_balanced(text: str) -> bool:
    """True if brackets and quotes in *text* are balanced and properly nested."""
    stack: list[str] = []
    quote: str | None = None
    escaped = False
    for ch in text:
        if escaped:
            escaped = False
            continue
        if ch == "\\":
            escaped = True
            continue
        if quote:
            if ch == quote:
                quote = None
            continue
        if ch in _QUOTES:
            quote = ch
        elif ch in _PAIRS:
            stack.append(ch)
        elif ch in _CLOSERS:
            if not stack or stack.pop() != _CLOSERS[ch]:
                return False
    return not stack and quote is None and not escaped


def normalize_arbitrary(raw: str) -> str | None:
    """Turn the inside of a ``[...]`` value into a CSS value.

    Underscores become spaces (``\\_`` keeps a literal underscore).  Returns
    ``None`` when the value is not well formed: empty, unbalanced, or able
    to break out of its declaration.
    """
    if not raw or not raw.strip("_"):
        return None
    if not is_balanced(raw):
        return None
    if any(ch in raw for ch in ";{}"):
        return None
    value = raw.replace("\\_", "\x00").replace("_", " ").replace("\x00", "_")
    return value.strip() or None


def looks_like_color(value: str) -> bool:
    """Heuristic type check used to disambiguate arbitrary values."""
    lowered = value.lower()
    return (
        lowered.startswith("#")
        or lowered.startswith(("rgb", "hsl", "hwb", "lab(", "lch(", "oklab", "oklch", "color("))
        or lowered in {"transparent", "currentcolor", "inherit"}
    )


def looks_like_length(value: str) -> bool:
    lowered = value.lower()
    if lowered.startswith(("calc(", "min(", "max(", "clamp(", "var(")):
        return True
    digits = lowered.lstrip("+-.0123456789")
    return digits != lowered and digits in {
        "", "px", "rem", "em", "%", "vh", "vw", "ch", "ex", "pt", "vmin", "vmax", "dvh", "svh",
    }


def with_opacity(color: str, opacity: str) -> str | None:
    """Apply an opacity modifier to a hex color; other colors use color-mix."""
    if color.startswith("#"):
        hex_value = color[1:]
        if len(hex_value) == 3:
            hex_value = "".join(ch * 2 for ch in hex_value)
        if len(hex_value) != 6:
            return None
        try:
            r, g, b = (int(hex_value[i : i + 2], 16) for i in (0, 2, 4))
        except ValueError:
            return None
        return f"rgb({r} {g} {b} / {opacity})"
    if color in {"transparent", "inherit", "currentColor"}:
        return None
    return f"color-mix(in srgb, {color} calc({opacity} * 100%), transparent)"

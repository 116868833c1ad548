"""Candidate model: a scanned string decomposed into variants and a base."""

from __future__ import annotations

from dataclasses import dataclass

_OPEN = "[("
_CLOSE = "])"


@dataclass(frozen=True)
class Candidate:
    """A raw class token split into its structural parts.

    Attributes:
        raw: The token exactly as scanned.
        variants: Variant names, outermost first.
        base: The utility part with important/negative markers removed.
        important: A leading or trailing ``!`` was present.
        negative: A leading ``-`` was present.
    """

    raw: str
    variants: tuple[str, ...]
    base: str
    important: bool = False
    negative: bool = False

    @property
    def is_arbitrary_property(self) -> bool:
        return self.base.startswith("[") and self.base.endswith("]")


def split_top_level(text: str, separator: str) -> list[str] | None:
    """Split *text* on *separator* outside of brackets and parentheses.

    Returns ``None`` when the brackets are unbalanced.
    """
    parts: list[str] = []
    depth = 0
    start = 0
    i = 0
    while i < len(text):
        ch = text[i]
        if ch in _OPEN:
            depth += 1
        elif ch in _CLOSE:
            depth -= 1
            if depth < 0:
                return None
        elif depth == 0 and text.startswith(separator, i):
            parts.append(text[start:i])
            i += len(separator)
            start = i
            continue
        i += 1
    if depth != 0:
        return None
    parts.append(text[start:])
    return parts


def parse_candidate(raw: str, separator: str = ":") -> Candidate | None:
    """Decompose *raw* into a :class:`Candidate`.

    Returns ``None`` for structurally invalid tokens: unbalanced brackets,
    empty variant segments or an empty base.
    """
    parts = split_top_level(raw, separator)
    if not parts or any(not p for p in parts):
        return None
    *variants, base = parts

    important = False
    if base.startswith("!"):
        important, base = True, base[1:]
    elif base.endswith("!"):
        important, base = True, base[:-1]

    negative = False
    if base.startswith("-"):
        negative, base = True, base[1:]

    if not base or base.startswith("-") or base.startswith("!"):
        return None
    return Candidate(
        raw=raw,
        variants=tuple(variants),
        base=base,
        important=important,
        negative=negative,
    )

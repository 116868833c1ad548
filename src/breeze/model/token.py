"""Design token model."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class DesignToken:
    """A named, fully resolved theme value.

    Attributes:
        category: Theme section the token belongs to (``spacing``, ``colors``...).
        name: Flattened key, unique within the category (``red-500``, ``4``).
        value: The literal CSS value.
        meta: Secondary values paired with the token, e.g. ``lineHeight`` for
            font sizes.
    """

    category: str
    name: str
    value: str
    meta: tuple[tuple[str, str], ...] = field(default=())

    def meta_value(self, key: str, default: str | None = None) -> str | None:
        for name, value in self.meta:
            if name == key:
                return value
        return default

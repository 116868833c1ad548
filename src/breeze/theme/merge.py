"""Pure merge functions for theme configuration.

Neither input is ever mutated: every merge builds new dictionaries, so the
read-only defaults can be shared freely between registries.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable

EXTEND_KEY = "extend"


def deep_merge(base: Any, override: Any) -> Any:
    """Recursively merge *override* into *base*, returning a new value.

    Mappings merge key by key; any other override value replaces the base.
    When either side is a callable section, the merge is deferred into a new
    callable evaluated against the theme getter at load time.
    """
    if callable(base) or callable(override):
        return _deferred_merge(base, override)
    if isinstance(base, Mapping) and isinstance(override, Mapping):
        merged: dict[str, Any] = {k: v for k, v in base.items()}
        for key, value in override.items():
            if key in merged:
                merged[key] = deep_merge(merged[key], value)
            else:
                merged[key] = value
        return merged
    return override


def _deferred_merge(base: Any, override: Any) -> Callable[[Callable], Any]:
    def section(theme: Callable[[str], Any]) -> Any:
        left = base(theme) if callable(base) else base
        right = override(theme) if callable(override) else override
        return deep_merge(left, right)

    return section


def merge_theme(defaults: Mapping[str, Any], overrides: Mapping[str, Any]) -> dict[str, Any]:
    """Merge user theme *overrides* over *defaults*.

    A top-level key replaces the default section wholesale.  Sections listed
    under ``extend`` are deep-merged into whatever the section is after
    replacement.
    """
    result: dict[str, Any] = {k: v for k, v in defaults.items()}
    for key, value in overrides.items():
        if key == EXTEND_KEY:
            continue
        result[key] = value
    for key, value in (overrides.get(EXTEND_KEY) or {}).items():
        result[key] = deep_merge(result.get(key, {}), value)
    return result

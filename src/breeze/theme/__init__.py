"""Theme layer: default tokens, pure merging and the token registry."""

from breeze.theme.defaults import DEFAULT_THEME, freeze
from breeze.theme.merge import deep_merge, merge_theme
from breeze.theme.registry import TokenRegistry, flatten_section

__all__ = [
    "DEFAULT_THEME",
    "TokenRegistry",
    "deep_merge",
    "flatten_section",
    "freeze",
    "merge_theme",
]

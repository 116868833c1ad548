"""Base protocol for plugins."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Protocol

if TYPE_CHECKING:
    from breeze.plugins.api import PluginAPI


class Plugin(Protocol):
    """A named registration step run once against a :class:`PluginAPI`."""

    name: str

    def setup(self, api: PluginAPI) -> None: ...


class FunctionPlugin:
    """Adapts a plain ``setup(api)`` callable to the :class:`Plugin` protocol."""

    def __init__(self, func: Callable[[PluginAPI], None], name: str | None = None) -> None:
        self._func = func
        self.name = name or getattr(func, "__name__", "plugin")

    def setup(self, api: PluginAPI) -> None:
        self._func(api)

    def __repr__(self) -> str:
        return f"FunctionPlugin({self.name!r})"

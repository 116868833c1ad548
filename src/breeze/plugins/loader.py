"""Turns plugin references from configuration into plugin objects."""

from __future__ import annotations

import importlib
import inspect
import logging
from typing import Any, Callable

from breeze.config import PluginSpec
from breeze.errors import ConfigError
from breeze.plugins.base import FunctionPlugin, Plugin
from breeze.plugins.forms import FormsPlugin

logger = logging.getLogger(__name__)

BUILTIN_PLUGINS: dict[str, Callable[..., Plugin]] = {
    "forms": FormsPlugin,
}


def _import_target(path: str) -> Any:
    module_name, _, attr = path.partition(":")
    if not module_name or not attr:
        raise ConfigError(
            f"Unknown plugin {path!r}; use a built-in name or 'module:attribute'",
            key="plugins",
        )
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise ConfigError(f"Cannot import plugin module {module_name!r}: {exc}", key="plugins") from exc
    try:
        return getattr(module, attr)
    except AttributeError as exc:
        raise ConfigError(f"Module {module_name!r} has no attribute {attr!r}", key="plugins") from exc


def _instantiate(target: Any, options: dict[str, Any], label: str) -> Plugin:
    if inspect.isclass(target) or (options and callable(target) and not hasattr(target, "setup")):
        try:
            target = target(**options)
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Invalid options for plugin {label!r}: {exc}", key="plugins") from exc
    elif options:
        raise ConfigError(f"Plugin {label!r} does not accept options", key="plugins")

    if hasattr(target, "setup"):
        return target
    if callable(target):
        return FunctionPlugin(target, name=label)
    raise ConfigError(f"Plugin {label!r} is neither a plugin nor a callable", key="plugins")


def load_plugin(reference: Any) -> Plugin:
    """Resolve one configured plugin reference.

    Accepts a :class:`PluginSpec` naming a built-in plugin or a
    ``module:attribute`` path, a plugin object, or a ``setup(api)`` callable.
    """
    if isinstance(reference, PluginSpec):
        options = dict(reference.options)
        factory = BUILTIN_PLUGINS.get(reference.name)
        if factory is not None:
            return _instantiate(factory, options, reference.name)
        target = _import_target(reference.name)
        logger.debug("Imported plugin %s", reference.name)
        return _instantiate(target, options, reference.name)
    if isinstance(reference, str):
        return load_plugin(PluginSpec(name=reference))
    label = getattr(reference, "name", None) or getattr(
        reference, "__name__", type(reference).__name__
    )
    return _instantiate(reference, {}, label)


def load_plugins(references: tuple[Any, ...] | list[Any]) -> list[Plugin]:
    return [load_plugin(ref) for ref in references]

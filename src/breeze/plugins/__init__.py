"""Plugin layer: the host registry, the plugin handle and built-in plugins."""

from breeze.plugins.api import PluginAPI
from breeze.plugins.base import FunctionPlugin, Plugin
from breeze.plugins.forms import FormsPlugin
from breeze.plugins.host import (
    ARBITRARY,
    PluginHost,
    UtilityDefinition,
    UtilityValue,
    VariantContext,
    VariantDefinition,
)
from breeze.plugins.loader import BUILTIN_PLUGINS, load_plugin, load_plugins
from breeze.plugins.preflight import PreflightPlugin

__all__ = [
    "ARBITRARY",
    "BUILTIN_PLUGINS",
    "FormsPlugin",
    "FunctionPlugin",
    "Plugin",
    "PluginAPI",
    "PluginHost",
    "PreflightPlugin",
    "UtilityDefinition",
    "UtilityValue",
    "VariantContext",
    "VariantDefinition",
    "load_plugin",
    "load_plugins",
]

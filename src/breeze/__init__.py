"""Breeze: a utility-class CSS generation engine."""

from breeze.config import BreezeConfig, RawContent, load_config
from breeze.engine import Engine, generate, write_stylesheet
from breeze.errors import BreezeError, ConfigError, ScanError, UnknownToken

__version__ = "0.1.0"

__all__ = [
    "BreezeConfig",
    "BreezeError",
    "ConfigError",
    "Engine",
    "RawContent",
    "ScanError",
    "UnknownToken",
    "__version__",
    "generate",
    "load_config",
    "write_stylesheet",
]

"""Generation engine: the ``generate`` entry point and stylesheet output."""

from breeze.engine.engine import Engine, build_host, generate, write_stylesheet

__all__ = ["Engine", "build_host", "generate", "write_stylesheet"]

"""Style resolver: maps candidates to resolved rules."""

from breeze.resolver.resolver import StyleResolver

__all__ = ["StyleResolver"]

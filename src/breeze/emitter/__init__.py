"""Stylesheet emitter: orders, deduplicates and serializes rules."""

from breeze.emitter.emitter import StylesheetEmitter

__all__ = ["StylesheetEmitter"]

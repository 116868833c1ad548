"""Error types surfaced by the generation pipeline."""

from __future__ import annotations


class BreezeError(Exception):
    """Base class for all Breeze errors."""


class ConfigError(BreezeError):
    """Raised when the configuration is malformed or self-contradictory."""

    def __init__(self, message: str, key: str | None = None) -> None:
        self.key = key
        super().__init__(message)


class ScanError(BreezeError):
    """Raised when a content source cannot be read."""

    def __init__(self, message: str, path: str | None = None) -> None:
        self.path = path
        super().__init__(message)


class UnknownToken(BreezeError, KeyError):
    """Raised by the token registry when a category/key pair is missing."""

    def __init__(self, category: str, key: str) -> None:
        self.category = category
        self.key = key
        super().__init__(f"Unknown token {key!r} in category {category!r}")

    def __str__(self) -> str:
        return self.args[0]

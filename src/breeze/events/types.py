"""Event types emitted while building a stylesheet."""

from dataclasses import dataclass
from enum import Enum


class RejectReason(Enum):
    """Why a scanned candidate produced no rule."""

    MALFORMED = "malformed"
    UNKNOWN_VARIANT = "unknown_variant"
    UNKNOWN_UTILITY = "unknown_utility"
    UNKNOWN_TOKEN = "unknown_token"
    INVALID_VALUE = "invalid_value"
    NO_MATCH = "no_match"


@dataclass(frozen=True)
class GenerationStarted:
    sources: int


@dataclass(frozen=True)
class GenerationCompleted:
    candidates: int
    rules: int
    size: int


@dataclass(frozen=True)
class ScanCompleted:
    sources: int
    candidates: int


@dataclass(frozen=True)
class UtilityOverridden:
    name: str
    previous_plugin: str
    plugin: str


@dataclass(frozen=True)
class VariantOverridden:
    name: str
    previous_plugin: str
    plugin: str


@dataclass(frozen=True)
class CandidateRejected:
    candidate: str
    reason: RejectReason
    detail: str = ""


@dataclass(frozen=True)
class RuleCollision:
    selector: str
    layer: str
    kept_candidate: str
    dropped_candidate: str

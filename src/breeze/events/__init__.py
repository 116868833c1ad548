"""Event system: bus and event types for the generation pipeline."""

from breeze.events.bus import EventBus, EventRecorder
from breeze.events.types import (
    CandidateRejected,
    GenerationCompleted,
    GenerationStarted,
    RejectReason,
    RuleCollision,
    ScanCompleted,
    UtilityOverridden,
    VariantOverridden,
)

__all__ = [
    "EventBus",
    "EventRecorder",
    "CandidateRejected",
    "GenerationCompleted",
    "GenerationStarted",
    "RejectReason",
    "RuleCollision",
    "ScanCompleted",
    "UtilityOverridden",
    "VariantOverridden",
]

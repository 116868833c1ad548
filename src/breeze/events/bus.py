"""Simple synchronous event bus for generation events."""

from __future__ import annotations

import threading
from typing import Any, Callable


class EventBus:
    """Synchronous publish-subscribe event bus.

    Listeners can subscribe to specific event types or receive all events.
    Events are dispatched synchronously in registration order.  Emission may
    happen from worker threads during scanning and resolution, so listener
    bookkeeping is guarded by a lock.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._listeners: dict[type, list[Callable]] = {}
        self._global_listeners: list[Callable] = []

    def subscribe(self, event_type: type, callback: Callable) -> None:
        """Register a callback for a specific event type."""
        with self._lock:
            self._listeners.setdefault(event_type, []).append(callback)

    def on_all(self, callback: Callable) -> None:
        """Register a callback that receives every event."""
        with self._lock:
            self._global_listeners.append(callback)

    def emit(self, event: Any) -> None:
        """Dispatch an event to all matching listeners."""
        with self._lock:
            listeners = list(self._global_listeners)
            listeners.extend(self._listeners.get(type(event), []))
        for cb in listeners:
            cb(event)


class EventRecorder:
    """Listener that keeps every event it receives, in arrival order."""

    def __init__(self, bus: EventBus | None = None) -> None:
        self._lock = threading.Lock()
        self.events: list[Any] = []
        if bus is not None:
            bus.on_all(self)

    def __call__(self, event: Any) -> None:
        with self._lock:
            self.events.append(event)

    def of_type(self, event_type: type) -> list[Any]:
        with self._lock:
            return [e for e in self.events if isinstance(e, event_type)]

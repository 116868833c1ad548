"""Tests for the event bus."""

import threading

from breeze.events import (
    CandidateRejected,
    EventBus,
    EventRecorder,
    RejectReason,
    ScanCompleted,
)


class TestEventBus:
    def test_subscribe_by_type(self):
        bus = EventBus()
        received = []
        bus.subscribe(ScanCompleted, received.append)
        bus.emit(ScanCompleted(sources=1, candidates=2))
        bus.emit(CandidateRejected("x", RejectReason.MALFORMED))
        assert received == [ScanCompleted(sources=1, candidates=2)]

    def test_global_listeners_run_first(self):
        bus = EventBus()
        order = []
        bus.subscribe(ScanCompleted, lambda e: order.append("typed"))
        bus.on_all(lambda e: order.append("all"))
        bus.emit(ScanCompleted(sources=0, candidates=0))
        assert order == ["all", "typed"]

    def test_recorder_filters_by_type(self):
        bus = EventBus()
        recorder = EventRecorder(bus)
        bus.emit(ScanCompleted(sources=0, candidates=0))
        bus.emit(CandidateRejected("x", RejectReason.NO_MATCH))
        assert len(recorder.events) == 2
        assert recorder.of_type(CandidateRejected)[0].candidate == "x"

    def test_concurrent_emit(self):
        bus = EventBus()
        recorder = EventRecorder(bus)

        def worker():
            for _ in range(100):
                bus.emit(CandidateRejected("x", RejectReason.NO_MATCH))

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        assert len(recorder.events) == 400

"""Tests for Server."""

import threading
import time

import pytest

from cannon.components import Server
from cannon.distributions import UniformLatency
from cannon.instrumentation import MetricsSink


class TestServerRequest:

    def test_request_sleeps_for_modeled_latency(self, fixed_latency):
        """A 50ms model blocks for about 50ms and records it."""
        sink = MetricsSink()
        server = Server(fixed_latency(50), sink)

        started = time.perf_counter()
        server.request()
        elapsed_ms = (time.perf_counter() - started) * 1000

        assert elapsed_ms >= 45
        snap = sink.snapshot()
        assert snap.count == 1
        assert snap.mean >= 45

    def test_records_once_per_request(self, fixed_latency):
        sink = MetricsSink()
        server = Server(fixed_latency(1), sink)

        for _ in range(10):
            server.request()

        assert sink.count == 10

    def test_interrupted_request_records_elapsed(self, fixed_latency):
        """Setting the interrupt ends the sleep early without raising."""
        sink = MetricsSink()
        server = Server(fixed_latency(5000), sink)
        interrupt = threading.Event()

        timer = threading.Timer(0.05, interrupt.set)
        timer.start()
        started = time.perf_counter()
        server.request(interrupt)
        elapsed = time.perf_counter() - started
        timer.join()

        assert elapsed < 2.0
        snap = sink.snapshot()
        assert snap.count == 1
        assert 0 < snap.mean < 2000

    def test_already_set_interrupt_returns_immediately(self, fixed_latency):
        sink = MetricsSink()
        server = Server(fixed_latency(5000), sink)
        interrupt = threading.Event()
        interrupt.set()

        server.request(interrupt)

        assert sink.count == 1

    def test_records_even_when_model_raises(self):
        """The timer wraps the latency lookup too."""

        class BrokenModel(UniformLatency):
            def response(self, now_ms=None):
                raise RuntimeError("model failed")

        sink = MetricsSink()
        server = Server(BrokenModel(10), sink)

        with pytest.raises(RuntimeError):
            server.request()
        assert sink.count == 1


class TestServerNaming:

    def test_defaults_to_model_repr(self):
        server = Server(UniformLatency(5), MetricsSink())
        assert server.name == "UniformLatency(avg=5)"
        assert repr(server) == "UniformLatency(avg=5)"

    def test_explicit_name(self):
        server = Server(UniformLatency(5), MetricsSink(), name="edge-1")
        assert server.name == "edge-1"
        assert repr([server]) == "[edge-1]"

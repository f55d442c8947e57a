"""Simulated server: blocks the caller for a modeled response time."""

from __future__ import annotations

import logging
import threading
import time

from cannon.distributions.latency_model import LatencyModel
from cannon.instrumentation.metrics import MetricsSink

logger = logging.getLogger(__name__)


class Server:
    """Wraps a LatencyModel and records every request into a MetricsSink.

    A server has no queue and no concurrency limit: any number of client
    threads may be inside ``request()`` at once, each sleeping for its own
    sampled delay.

    Args:
        model: Source of per-request response times.
        sink: Shared timer that every completed request is recorded into.
        name: Identifier for logging. Defaults to the model's repr.
    """

    def __init__(self, model: LatencyModel, sink: MetricsSink, name: str | None = None):
        self._model = model
        self._sink = sink
        self._name = name if name is not None else repr(model)

    @property
    def name(self) -> str:
        return self._name

    @property
    def model(self) -> LatencyModel:
        return self._model

    def request(self, interrupt: threading.Event | None = None) -> None:
        """Handle one request, blocking for the modeled response time.

        When ``interrupt`` is given the sleep ends early as soon as it is
        set. An interrupted request is not an error: the time elapsed so
        far is still recorded.
        """
        with self._sink.time():
            delay_s = self._model.response() / 1000.0
            if interrupt is None:
                time.sleep(delay_s)
            elif interrupt.wait(delay_s):
                logger.debug("%s: request interrupted", self._name)

    def __repr__(self) -> str:
        return self._name

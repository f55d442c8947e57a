"""A server that periodically degrades.

PeriodicDegradationLatency answers in ``average`` milliseconds while
healthy and ``DEGRADATION_FACTOR * average`` milliseconds while degraded.
Time is measured in whole seconds since the model was created; within
every ``period`` seconds the model is degraded when

    0 < elapsed % period < duration

so the first second of each cycle (``elapsed % period == 0``) is healthy.

Example:
    A 10ms server that spends seconds 1..19 of every minute at 1000ms:

        model = PeriodicDegradationLatency(average=10, period=60, duration=20)
"""

from __future__ import annotations

import logging
from typing import Callable

from cannon.distributions.latency_model import LatencyModel, wall_clock_ms

logger = logging.getLogger(__name__)

DEGRADATION_FACTOR = 100


class PeriodicDegradationLatency(LatencyModel):
    """Constant latency with a recurring degraded window.

    State transitions are logged once per transition, not once per call.
    The remembered state is read and written by every client thread without
    a lock; a lost update can only repeat or skip a transition log line,
    never change the returned latency.

    Args:
        average: Healthy response time in milliseconds.
        period: Cycle length in seconds.
        duration: Upper bound (exclusive) of the degraded window in seconds.
            Must be less than ``period``.
        clock: Millisecond wall clock. Defaults to ``time.time_ns() // 1e6``.
        start_ms: Origin of the cycle. Defaults to ``clock()`` at construction.
    """

    def __init__(
        self,
        average: int,
        period: int,
        duration: int,
        clock: Callable[[], int] = wall_clock_ms,
        start_ms: int | None = None,
    ):
        super().__init__(average)
        if period <= 0:
            raise ValueError(f"period must be positive, got {period}")
        if duration <= 0:
            raise ValueError(f"duration must be positive, got {duration}")
        if duration >= period:
            raise ValueError(f"duration must be less than period ({period}), got {duration}")

        self._period = period
        self._duration = duration
        self._clock = clock
        self._start_ms = clock() if start_ms is None else start_ms
        self._degraded = False

    @property
    def period(self) -> int:
        return self._period

    @property
    def duration(self) -> int:
        return self._duration

    @property
    def degraded(self) -> bool:
        """State observed by the most recent ``response()`` call."""
        return self._degraded

    def is_degraded(self, now_ms: int | None = None) -> bool:
        """Whether the model is inside its degraded window at ``now_ms``."""
        if now_ms is None:
            now_ms = self._clock()
        elapsed = now_ms // 1000 - self._start_ms // 1000
        mod = elapsed % self._period
        return 0 < mod < self._duration

    def response(self, now_ms: int | None = None) -> int:
        degraded = self.is_degraded(now_ms)
        if degraded != self._degraded:
            if degraded:
                logger.info("%r degrading now", self)
            else:
                logger.info("%r recovered", self)
        self._degraded = degraded

        if degraded:
            return DEGRADATION_FACTOR * self._average
        return self._average

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(avg={self._average}, "
            f"per={self._period}, dur={self._duration})"
        )

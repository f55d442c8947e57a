"""Thread-safe response timer shared by every simulated server.

MetricsSink is written by all client threads (one ``record`` per completed
request) and read once per second by the reporter. A single lock guards
the aggregate, so the count observed by a reader never loses or duplicates
an increment.

Percentiles come from a fixed-size uniform reservoir (Vitter's Algorithm R)
rather than from every sample, since a run has no natural end.
"""

from __future__ import annotations

import math
import random
import threading
import time
from dataclasses import dataclass
from typing import Callable

DEFAULT_RESERVOIR_SIZE = 1028


@dataclass(frozen=True)
class TimerSnapshot:
    """Point-in-time view of a MetricsSink. Latencies are in milliseconds."""
    count: int
    mean: float
    min: float
    max: float
    std: float
    p50: float
    p99: float


def _percentile(sorted_vals: list[float], p: float) -> float:
    """Linear-interpolated percentile of already-sorted values."""
    if not sorted_vals:
        return 0.0
    if p <= 0:
        return sorted_vals[0]
    if p >= 1:
        return sorted_vals[-1]
    pos = p * (len(sorted_vals) - 1)
    lo = int(pos)
    hi = min(lo + 1, len(sorted_vals) - 1)
    frac = pos - lo
    return sorted_vals[lo] * (1.0 - frac) + sorted_vals[hi] * frac


class TimerContext:
    """Times one request; records into the sink exactly once.

    Usable as a context manager, so the elapsed time is recorded on every
    exit path including exceptions.
    """

    def __init__(self, sink: MetricsSink, clock: Callable[[], float]):
        self._sink = sink
        self._clock = clock
        self._start = clock()
        self._elapsed_ms: float | None = None

    def stop(self) -> float:
        """Record and return the elapsed milliseconds. Later calls are no-ops."""
        if self._elapsed_ms is None:
            self._elapsed_ms = (self._clock() - self._start) * 1000.0
            self._sink.record(self._elapsed_ms)
        return self._elapsed_ms

    def __enter__(self) -> TimerContext:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()


class MetricsSink:
    """Counter and latency timer for completed requests.

    Args:
        reservoir_size: Number of latency samples kept for percentiles.
        clock: Monotonic clock in seconds, used by ``time()``.
        seed: Random seed for reservoir replacement.
    """

    def __init__(
        self,
        reservoir_size: int = DEFAULT_RESERVOIR_SIZE,
        clock: Callable[[], float] = time.perf_counter,
        seed: int | None = None,
    ):
        if reservoir_size <= 0:
            raise ValueError(f"reservoir_size must be positive, got {reservoir_size}")

        self._lock = threading.Lock()
        self._clock = clock
        self._rng = random.Random(seed)
        self._reservoir_size = reservoir_size
        self._reservoir: list[float] = []

        self._count = 0
        self._sum = 0.0
        self._sum_sq = 0.0
        self._min = math.inf
        self._max = -math.inf

    def time(self) -> TimerContext:
        """Start timing a request."""
        return TimerContext(self, self._clock)

    def record(self, latency_ms: float) -> None:
        """Record one completed request."""
        with self._lock:
            self._count += 1
            self._sum += latency_ms
            self._sum_sq += latency_ms * latency_ms
            self._min = min(self._min, latency_ms)
            self._max = max(self._max, latency_ms)

            if len(self._reservoir) < self._reservoir_size:
                self._reservoir.append(latency_ms)
            else:
                j = self._rng.randint(0, self._count - 1)
                if j < self._reservoir_size:
                    self._reservoir[j] = latency_ms

    @property
    def count(self) -> int:
        """Total completed requests since creation."""
        with self._lock:
            return self._count

    def snapshot(self) -> TimerSnapshot:
        """Consistent view of count and latency statistics."""
        with self._lock:
            count = self._count
            if count == 0:
                return TimerSnapshot(count=0, mean=0.0, min=0.0, max=0.0, std=0.0, p50=0.0, p99=0.0)
            mean = self._sum / count
            variance = max(self._sum_sq / count - mean * mean, 0.0)
            sample = sorted(self._reservoir)
            return TimerSnapshot(
                count=count,
                mean=mean,
                min=self._min,
                max=self._max,
                std=math.sqrt(variance),
                p50=_percentile(sample, 0.50),
                p99=_percentile(sample, 0.99),
            )

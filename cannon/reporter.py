"""Once-per-second throughput reporting.

ThroughputReporter polls a MetricsSink at a fixed rate and logs how many
requests completed since the previous poll. The sleep after each tick is
``interval - time spent in the tick``, so lateness in one tick does not
accumulate into the next.
"""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable

from cannon.instrumentation.metrics import MetricsSink

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL_S = 1.0


@dataclass(frozen=True)
class ThroughputSample:
    """Requests completed in one reporting interval.

    Attributes:
        count: Completed requests since the previous tick.
        timestamp: Wall-clock time of the tick, seconds since the epoch.
    """
    count: int
    timestamp: float


class ThroughputReporter:
    """Emits one ThroughputSample per interval.

    Args:
        sink: Metrics sink shared with the servers.
        interval_s: Reporting interval in seconds.
        clock: Monotonic clock used to measure time spent per tick.
        wall_clock: Clock used for sample timestamps.
        sleep: Sleep function, used when ``run`` has no stop event.
    """

    def __init__(
        self,
        sink: MetricsSink,
        interval_s: float = DEFAULT_INTERVAL_S,
        clock: Callable[[], float] = time.monotonic,
        wall_clock: Callable[[], float] = time.time,
        sleep: Callable[[float], None] = time.sleep,
    ):
        if interval_s <= 0:
            raise ValueError(f"interval_s must be positive, got {interval_s}")

        self._sink = sink
        self._interval_s = interval_s
        self._clock = clock
        self._wall_clock = wall_clock
        self._sleep = sleep
        self._last_count = 0
        self.samples: list[ThroughputSample] = []

    @property
    def interval_s(self) -> float:
        return self._interval_s

    def tick(self) -> ThroughputSample:
        """Read the sink, log and return the delta since the last tick."""
        total = self._sink.count
        sample = ThroughputSample(count=total - self._last_count, timestamp=self._wall_clock())
        self._last_count = total
        self.samples.append(sample)
        logger.info("%d req/sec", sample.count)
        return sample

    def run(
        self,
        max_ticks: int | None = None,
        stop_event: threading.Event | None = None,
    ) -> list[ThroughputSample]:
        """Report until ``max_ticks`` samples, ``stop_event`` or Ctrl-C.

        KeyboardInterrupt is the normal way to end an unbounded run: it is
        logged and the loop returns instead of propagating it.

        Returns:
            Samples emitted by this call.
        """
        emitted: list[ThroughputSample] = []
        try:
            while max_ticks is None or len(emitted) < max_ticks:
                started = self._clock()
                emitted.append(self.tick())
                if max_ticks is not None and len(emitted) >= max_ticks:
                    break

                remaining = max(self._interval_s - (self._clock() - started), 0.0)
                if stop_event is None:
                    self._sleep(remaining)
                elif stop_event.wait(remaining):
                    logger.info("reporter stopped")
                    break
        except KeyboardInterrupt:
            logger.error("interrupted")
        return emitted

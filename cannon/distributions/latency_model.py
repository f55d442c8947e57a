"""Base class for simulated server response times."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod


def wall_clock_ms() -> int:
    """Current wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


class LatencyModel(ABC):
    """Produces the simulated response delay for one request.

    Subclasses return a non-negative integer number of milliseconds.
    ``now_ms`` is the wall-clock time of the request; only time-dependent
    models look at it.
    """

    def __init__(self, average: int):
        if average <= 0:
            raise ValueError(f"average must be positive, got {average}")
        self._average = average

    @property
    def average(self) -> int:
        """Mean (or nominal) response time in milliseconds."""
        return self._average

    @abstractmethod
    def response(self, now_ms: int | None = None) -> int:
        """Return the response delay in milliseconds."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(avg={self._average})"

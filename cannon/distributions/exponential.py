"""Exponentially distributed response times.

ExponentialLatency draws the delay by inverse transform sampling,
``-ln(U) / (1 / average)``, so the mean delay equals ``average``. Samples
have high variance: most responses are fast, a few are several multiples
of the mean.
"""

from __future__ import annotations

import math
import random

from cannon.distributions.latency_model import LatencyModel


class ExponentialLatency(LatencyModel):
    """Latency model sampling from an exponential distribution.

    Args:
        average: Mean response time in milliseconds.
        seed: Random seed for reproducibility.
    """

    def __init__(self, average: int, seed: int | None = None):
        super().__init__(average)
        self._lambda = 1 / average
        self._rng = random.Random(seed)

    def _uniform(self) -> float:
        """Draw U in (0, 1); random() may return exactly 0.0, log(0) is undefined."""
        u = self._rng.random()
        while u == 0.0:
            u = self._rng.random()
        return u

    def response(self, now_ms: int | None = None) -> int:
        return round(-math.log(self._uniform()) / self._lambda)

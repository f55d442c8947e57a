"""Uniformly distributed response times on [0, average]."""

from __future__ import annotations

import random

from cannon.distributions.latency_model import LatencyModel


class UniformLatency(LatencyModel):
    """Latency model drawing ``U * average`` with U uniform in [0, 1).

    Note the mean of this model is ``average / 2``; ``average`` is the
    upper bound.
    """

    def __init__(self, average: int, seed: int | None = None):
        super().__init__(average)
        self._rng = random.Random(seed)

    def response(self, now_ms: int | None = None) -> int:
        return round(self._rng.random() * self._average)

"""The fixed cluster the simulator runs against."""

from __future__ import annotations

from cannon.components.server import Server
from cannon.distributions import ExponentialLatency, PeriodicDegradationLatency
from cannon.instrumentation.metrics import MetricsSink
from cannon.reporter import DEFAULT_INTERVAL_S
from cannon.workload import DEFAULT_NUM_WORKERS

NUM_WORKERS = DEFAULT_NUM_WORKERS
REPORT_INTERVAL_S = DEFAULT_INTERVAL_S


def default_servers(sink: MetricsSink) -> list[Server]:
    """Two exponential servers and one that degrades 19s of every minute."""
    return [
        Server(ExponentialLatency(average=10), sink),
        Server(ExponentialLatency(average=11), sink),
        Server(PeriodicDegradationLatency(average=10, period=60, duration=20), sink),
    ]

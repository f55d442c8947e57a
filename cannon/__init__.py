"""Cannon, a distributed systems modelling tool.

Simulates client threads routing requests across servers with different
latency behaviour and reports the resulting throughput once per second.
"""

import logging

from cannon.logging_config import (
    configure_from_env,
    disable_logging,
    enable_console_logging,
    enable_file_logging,
    enable_json_logging,
    set_level,
)

logging.getLogger("cannon").addHandler(logging.NullHandler())

from cannon.components import (
    AffinityStrategy,
    RandomStrategy,
    RoutingStrategy,
    Server,
    strategy_from_name,
)
from cannon.distributions import (
    ExponentialLatency,
    LatencyModel,
    PeriodicDegradationLatency,
    UniformLatency,
)
from cannon.instrumentation import MetricsSink, TimerSnapshot
from cannon.reporter import ThroughputReporter, ThroughputSample
from cannon.topology import default_servers
from cannon.workload import WorkloadGenerator

__version__ = "0.1.0"

__all__ = [
    "AffinityStrategy",
    "ExponentialLatency",
    "LatencyModel",
    "MetricsSink",
    "PeriodicDegradationLatency",
    "RandomStrategy",
    "RoutingStrategy",
    "Server",
    "ThroughputReporter",
    "ThroughputSample",
    "TimerSnapshot",
    "UniformLatency",
    "WorkloadGenerator",
    "configure_from_env",
    "default_servers",
    "disable_logging",
    "enable_console_logging",
    "enable_file_logging",
    "enable_json_logging",
    "set_level",
    "strategy_from_name",
]

"""Latency models for simulated servers."""

from cannon.distributions.exponential import ExponentialLatency
from cannon.distributions.latency_model import LatencyModel
from cannon.distributions.periodic_degradation import (
    DEGRADATION_FACTOR,
    PeriodicDegradationLatency,
)
from cannon.distributions.uniform import UniformLatency

__all__ = [
    "DEGRADATION_FACTOR",
    "ExponentialLatency",
    "LatencyModel",
    "PeriodicDegradationLatency",
    "UniformLatency",
]

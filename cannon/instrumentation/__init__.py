"""Request metrics shared by servers and the reporter."""

from cannon.instrumentation.metrics import MetricsSink, TimerContext, TimerSnapshot

__all__ = [
    "MetricsSink",
    "TimerContext",
    "TimerSnapshot",
]

"""Analysis of reporter output."""

from cannon.analysis.throughput import (
    ThroughputSummary,
    samples_to_dataframe,
    save_throughput_chart,
    summarize_throughput,
)

__all__ = [
    "ThroughputSummary",
    "samples_to_dataframe",
    "save_throughput_chart",
    "summarize_throughput",
]

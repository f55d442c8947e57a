"""Post-run analysis of throughput samples.

Samples collected by ThroughputReporter can be exported as a pandas
DataFrame for ad-hoc analysis, summarized, or rendered as a line chart.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

import pandas as pd

from cannon.reporter import ThroughputSample

TIMESTAMP = "timestamp"
REQUESTS_PER_SEC = "requests_per_sec"


@dataclass(frozen=True)
class ThroughputSummary:
    """Aggregate of a run's per-interval request counts."""
    samples: int
    mean: float
    min: int
    max: int


def samples_to_dataframe(samples: Sequence[ThroughputSample]) -> pd.DataFrame:
    """One row per sample with ``timestamp`` and ``requests_per_sec`` columns."""
    return pd.DataFrame(
        {
            TIMESTAMP: [s.timestamp for s in samples],
            REQUESTS_PER_SEC: [s.count for s in samples],
        },
        columns=[TIMESTAMP, REQUESTS_PER_SEC],
    )


def summarize_throughput(samples: Sequence[ThroughputSample]) -> ThroughputSummary:
    """Mean, min and max requests per interval. All zero if empty."""
    if not samples:
        return ThroughputSummary(samples=0, mean=0.0, min=0, max=0)
    counts = [s.count for s in samples]
    return ThroughputSummary(
        samples=len(counts),
        mean=sum(counts) / len(counts),
        min=min(counts),
        max=max(counts),
    )


def save_throughput_chart(
    samples: Sequence[ThroughputSample],
    path: str | Path,
    title: str = "Throughput",
) -> Path:
    """Render requests per second over time to an image file.

    Returns:
        The path the chart was written to.
    """
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    df = samples_to_dataframe(samples)
    elapsed = df[TIMESTAMP] - df[TIMESTAMP].iloc[0] if len(df) else df[TIMESTAMP]

    fig, ax = plt.subplots(figsize=(10, 4))
    ax.plot(elapsed, df[REQUESTS_PER_SEC], color="steelblue", linewidth=1.5)
    ax.set_xlabel("Time (s)")
    ax.set_ylabel("req/sec")
    ax.set_title(title)
    ax.grid(True, alpha=0.2)
    fig.tight_layout()

    fig.savefig(path, dpi=150)
    plt.close(fig)
    return path

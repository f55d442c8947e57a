"""Tests for throughput analysis helpers."""

import pandas as pd

from cannon.analysis import samples_to_dataframe, save_throughput_chart, summarize_throughput
from cannon.reporter import ThroughputSample

SAMPLES = [
    ThroughputSample(count=400, timestamp=1000.0),
    ThroughputSample(count=420, timestamp=1001.0),
    ThroughputSample(count=20, timestamp=1002.0),
]


class TestDataFrame:

    def test_columns_and_rows(self):
        df = samples_to_dataframe(SAMPLES)

        assert isinstance(df, pd.DataFrame)
        assert list(df.columns) == ["timestamp", "requests_per_sec"]
        assert df["requests_per_sec"].tolist() == [400, 420, 20]
        assert df["timestamp"].tolist() == [1000.0, 1001.0, 1002.0]

    def test_empty(self):
        df = samples_to_dataframe([])
        assert len(df) == 0
        assert list(df.columns) == ["timestamp", "requests_per_sec"]


class TestSummary:

    def test_summary_values(self):
        summary = summarize_throughput(SAMPLES)
        assert summary.samples == 3
        assert summary.mean == 280.0
        assert summary.min == 20
        assert summary.max == 420

    def test_empty_summary(self):
        assert summarize_throughput([]).samples == 0


class TestChart:

    def test_writes_png(self, test_output_dir):
        path = save_throughput_chart(SAMPLES, test_output_dir / "throughput.png")

        assert path.exists()
        assert path.stat().st_size > 0

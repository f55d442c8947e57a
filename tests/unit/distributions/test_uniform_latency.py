"""Tests for UniformLatency."""

import pytest

from cannon.distributions import UniformLatency


class TestUniformLatency:

    def test_rejects_non_positive_average(self):
        with pytest.raises(ValueError, match="average must be positive"):
            UniformLatency(average=0)

    @pytest.mark.parametrize("average", [1, 5, 10, 1000])
    def test_samples_within_bounds(self, average):
        """Responses fall in [0, average]."""
        model = UniformLatency(average=average, seed=7)
        for _ in range(5_000):
            assert 0 <= model.response() <= average

    def test_mean_is_half_average(self):
        """U * average has mean average / 2."""
        model = UniformLatency(average=100, seed=3)
        samples = [model.response() for _ in range(50_000)]
        assert sum(samples) / len(samples) == pytest.approx(50, rel=0.03)

    def test_repr(self):
        assert repr(UniformLatency(average=5)) == "UniformLatency(avg=5)"

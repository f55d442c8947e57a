"""Tests for ExponentialLatency."""

import math

import pytest

from cannon.distributions import ExponentialLatency


class TestExponentialConstruction:

    def test_rejects_non_positive_average(self):
        """average must be > 0."""
        with pytest.raises(ValueError, match="average must be positive"):
            ExponentialLatency(average=0)
        with pytest.raises(ValueError):
            ExponentialLatency(average=-5)

    def test_repr_names_parameters(self):
        """repr is used in the startup log line."""
        assert repr(ExponentialLatency(average=10)) == "ExponentialLatency(avg=10)"


class TestExponentialSampling:

    def test_samples_are_non_negative_integers(self):
        """Every response is an int >= 0."""
        model = ExponentialLatency(average=10, seed=1)
        for _ in range(10_000):
            value = model.response()
            assert isinstance(value, int)
            assert value >= 0

    def test_mean_close_to_average(self):
        """Sample mean converges to the configured average."""
        model = ExponentialLatency(average=50, seed=42)
        samples = [model.response() for _ in range(50_000)]
        assert sum(samples) / len(samples) == pytest.approx(50, rel=0.05)

    def test_zero_draw_is_redrawn(self):
        """A random source returning exactly 0.0 never reaches log()."""
        model = ExponentialLatency(average=10)
        draws = iter([0.0, 0.0, 0.5])
        model._rng.random = lambda: next(draws)

        value = model.response()

        assert value == round(-math.log(0.5) * 10)

    def test_draw_close_to_zero_is_finite(self):
        """A tiny draw gives a large but finite latency."""
        model = ExponentialLatency(average=10)
        model._rng.random = lambda: 5e-324

        value = model.response()

        assert value > 0
        assert not math.isnan(value)

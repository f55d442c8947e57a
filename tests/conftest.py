"""
Shared pytest fixtures for cannon tests.
"""

import logging
from pathlib import Path

import pytest

from cannon.distributions.latency_model import LatencyModel


@pytest.fixture(scope="session")
def test_output_root() -> Path:
    """
    Returns the root test_output directory. Created once per test session.
    Files here persist after tests complete for easy access.
    """
    output_dir = Path(__file__).parent.parent / "test_output"
    output_dir.mkdir(exist_ok=True)
    return output_dir


@pytest.fixture
def test_output_dir(request, test_output_root) -> Path:
    """
    Returns a directory for the current test to write output files.
    Directory structure: test_output/<module_name>/<test_name>/
    """
    module_name = request.module.__name__.split(".")[-1]
    test_name = request.node.name

    test_dir = test_output_root / module_name / test_name
    test_dir.mkdir(parents=True, exist_ok=True)
    return test_dir


@pytest.fixture(autouse=True)
def reset_cannon_logging():
    """Reset the cannon logger before and after each test.

    Removes all handlers except a NullHandler and resets the level to
    NOTSET, so logging configured by one test never leaks into another.
    """
    logger = logging.getLogger("cannon")

    def _reset():
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
            if not isinstance(handler, logging.NullHandler):
                handler.close()
        logger.addHandler(logging.NullHandler())
        logger.setLevel(logging.NOTSET)

    _reset()
    yield
    _reset()


class FixedLatency(LatencyModel):
    """Latency model that always answers in ``average`` milliseconds."""

    def response(self, now_ms=None) -> int:
        return self._average


@pytest.fixture
def fixed_latency():
    """Factory for constant-latency models."""
    return FixedLatency

"""
Pytest configuration and shared fixtures.
"""

import pytest

from src.core.sampler import make_rng
from src.utils.types import SampleParameters


@pytest.fixture
def default_params():
    """Default classroom: 30 students, mean 75, standard deviation 12."""
    return SampleParameters(count=30, mean=75.0, std_dev=12.0)


@pytest.fixture
def wide_params():
    """Large spread around a high mean, so many scores hit the upper bound."""
    return SampleParameters(count=200, mean=95.0, std_dev=25.0)


@pytest.fixture
def rng():
    """Seeded generator for reproducible samples."""
    return make_rng(12345)


@pytest.fixture
def quartet():
    """Four evenly spaced scores."""
    return (10.0, 20.0, 30.0, 40.0)


@pytest.fixture(autouse=True)
def _clear_seed_env(monkeypatch):
    """Tests must not depend on a seed pinned in the environment."""
    monkeypatch.delenv("SCORE_ANALYZER_SEED", raising=False)

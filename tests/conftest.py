"""Pytest configuration file with shared fixtures for MathKit tests."""

import numpy as np
import pytest

__all__ = ["rng"]


@pytest.fixture
def rng():
    """Return a seeded NumPy generator so property checks are reproducible."""
    return np.random.default_rng(20130101)

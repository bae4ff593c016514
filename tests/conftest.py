"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def one_to_five():
    """Odd-length dataset 1..5."""
    return [1.0, 2.0, 3.0, 4.0, 5.0]


@pytest.fixture
def skewed_eight():
    """Even-length dataset with repeats and a right tail, given unsorted."""
    return [5.0, 2.0, 9.0, 4.0, 4.0, 7.0, 5.0, 4.0]

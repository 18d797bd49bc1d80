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
def odd_values():
    """Odd-length sample with a single true median."""
    return [1.0, 2.0, 3.0, 4.0, 5.0]


@pytest.fixture
def even_values():
    """Even-length sample; median() and interpolated_median() disagree."""
    return [1.0, 2.0, 3.0, 4.0]


@pytest.fixture
def bimodal_values():
    """Two values tie for the highest frequency."""
    return [1.0, 1.0, 2.0, 2.0, 3.0]

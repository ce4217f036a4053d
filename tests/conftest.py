"""
Pytest configuration and shared fixtures.
"""

import matplotlib

matplotlib.use("Agg")

import pytest
import numpy as np


@pytest.fixture
def path_adjacency():
    """Directed path 0 → 1 → 2 → 3."""
    a = np.zeros((4, 4))
    a[0, 1] = a[1, 2] = a[2, 3] = 1
    return a


@pytest.fixture
def triangle_adjacency():
    """Feed-forward triangle 0 → 1, 0 → 2, 1 → 2."""
    a = np.zeros((3, 3))
    a[0, 1] = a[0, 2] = a[1, 2] = 1
    return a


@pytest.fixture
def rng():
    """Reproducible random number generator."""
    return np.random.default_rng(seed=42)

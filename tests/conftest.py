"""
pytest configuration and shared fixtures.
"""

import numpy as np
import pytest


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def unit_circle_samples():
    """Four samples exactly on the unit circle."""
    return [(1.0, 0.0), (-1.0, 0.0), (0.0, 1.0), (0.0, -1.0)]


@pytest.fixture
def segment_samples():
    """Ordered samples exactly on y = 1.75 x - 0.5, from (0, -0.5) to (2, 3)."""
    xs = [0.0, 0.5, 1.0, 1.5, 2.0]
    return [(x, 1.75 * x - 0.5) for x in xs]


@pytest.fixture
def noisy_circle_samples(rng):
    """100 samples around center (2, -1), radius 3, noise sigma 0.01."""
    n = 100
    theta = np.linspace(0.0, 2.0 * np.pi, n, endpoint=False)
    x = 2.0 + 3.0 * np.cos(theta) + rng.normal(0.0, 0.01, n)
    y = -1.0 + 3.0 * np.sin(theta) + rng.normal(0.0, 0.01, n)
    return np.column_stack([x, y])


@pytest.fixture
def noisy_segment_samples(rng):
    """100 ordered samples along (-2, 1) -> (3, 7), noise sigma 0.01."""
    n = 100
    t = np.linspace(0.0, 1.0, n)
    x = -2.0 + 5.0 * t + rng.normal(0.0, 0.01, n)
    y = 1.0 + 6.0 * t + rng.normal(0.0, 0.01, n)
    return np.column_stack([x, y])

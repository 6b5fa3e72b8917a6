"""
pytest configuration and shared fixtures.
"""

import math

import numpy as np
import pytest


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


def wide_interval(x):
    """Interval that contains every real number."""
    return -math.inf, math.inf


def disjoint_interval(x):
    """Interval that never meets a [0, 1]-valued target."""
    return 2.0, 3.0


def wald_interval(x):
    """Normal-approximation 95% interval for the mean."""
    n = len(x)
    m = float(np.mean(x))
    half = 1.959963984540054 * float(np.std(x, ddof=1)) / math.sqrt(n)
    return m - half, m + half


@pytest.fixture
def wide():
    return wide_interval


@pytest.fixture
def disjoint():
    return disjoint_interval


@pytest.fixture
def wald():
    return wald_interval

"""
Sample generators for the supported distribution families.

Pure functions of (rng, n, parameters). Randomness always comes from the
numpy Generator passed in by the caller; nothing here touches global
random state, so independent generators give independent samples.
"""

from __future__ import annotations

from typing import Any, Callable

import numpy as np
from numpy.typing import NDArray

from cicoverage.core.validation import check_positive_int
from cicoverage.distributions.design import Distribution, DistributionKind


def sample_bernoulli(
    rng: np.random.Generator, n: int, theta: float,
) -> NDArray[np.floating[Any]]:
    """n i.i.d. Bernoulli(theta) draws as 0.0/1.0."""
    return (rng.random(n) < theta).astype(np.float64)


def sample_uniform(
    rng: np.random.Generator, n: int, a: float, b: float,
) -> NDArray[np.floating[Any]]:
    """n i.i.d. draws from the continuous range [a, b]."""
    return a + (b - a) * rng.random(n)


def sample_normal(
    rng: np.random.Generator, n: int, mu: float, sigma: float, clip: bool = True,
) -> NDArray[np.floating[Any]]:
    """
    n i.i.d. Normal(mu, sigma) draws, clamped into [0, 1] when clip is set.
    """
    x = mu + sigma * rng.standard_normal(n)
    if clip:
        np.clip(x, 0.0, 1.0, out=x)
    return x


_SAMPLERS: dict[DistributionKind, Callable[..., NDArray]] = {
    DistributionKind.BERNOULLI: lambda rng, n, d: sample_bernoulli(
        rng, n, d.params["theta"]),
    DistributionKind.UNIFORM: lambda rng, n, d: sample_uniform(
        rng, n, d.params["a"], d.params["b"]),
    DistributionKind.NORMAL: lambda rng, n, d: sample_normal(
        rng, n, d.params["mu"], d.params["sigma"], d.clip),
}


def generate(
    distribution: Distribution,
    n: int,
    rng: np.random.Generator,
) -> NDArray[np.floating[Any]]:
    """
    Draw n i.i.d. values from a distribution.

    Args:
        distribution: Validated distribution.
        n: Sample size, >= 1.
        rng: Source of randomness.

    Returns:
        Array of shape (n,), dtype float64.

    Raises:
        ConfigurationError: If n is not a positive integer.
    """
    n = check_positive_int(n, "n")
    return _SAMPLERS[distribution.kind](rng, n, distribution)

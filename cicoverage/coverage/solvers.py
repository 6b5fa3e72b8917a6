"""
Solver dispatch for coverage evaluation.

Provides coverage_test() for the full scenario battery and evaluate() for a
single (scenario, sample size) bucket.
"""

from __future__ import annotations

import warnings
from typing import Any, Callable, Literal

import numpy as np

from cicoverage.core.exceptions import ValidationError
from cicoverage.core.protocols import Backend
from cicoverage.core.validation import check_positive_int
from cicoverage.coverage._common import CoverageParams
from cicoverage.coverage.backends.cpu import CPUCoverageBackend, count_covering_trials
from cicoverage.coverage.design import CoverageConfig, CoverageDesign
from cicoverage.coverage.estimators import Estimator, as_estimators
from cicoverage.coverage.solution import CoverageSolution
from cicoverage.distributions.design import Scenario


BackendChoice = Literal['cpu']


def _get_backend(backend: str = 'cpu') -> Backend[CoverageDesign, CoverageParams]:
    """Select backend for coverage evaluation."""
    if backend in ('cpu', 'auto'):
        return CPUCoverageBackend()
    raise ValidationError(f"Unknown backend: {backend!r}. Use 'cpu'.")


def coverage_test(
    estimators,
    *,
    sample_sizes=None,
    alphas=None,
    repeats: int | None = None,
    config: CoverageConfig | None = None,
    scenarios=None,
    dispatch: Callable[[Any, Any], Any] | None = None,
    seed: int | None = None,
    backend: BackendChoice = 'cpu',
) -> CoverageSolution:
    """
    Run the coverage battery for one or more CI estimators.

    For every estimator, every scenario and every sample size, draws
    ``repeats`` independent samples, calls the estimator once per sample
    and records how often the returned interval contains the scenario's
    true value.

    Parameters
    ----------
    estimators : callable, mapping, or sequence
        ``fn(sample) -> (lower, upper)``; a mapping ``{label: fn}``; a
        sequence of such callables (labelled 1, 2, ...); or a sequence of
        identifiers together with ``dispatch``.
    sample_sizes : sequence of int, optional
        Default (10, 100, 1000, 10000).
    alphas : sequence of float, optional
        Nominal significance levels. Default (0.25, 0.1, 0.05).
    repeats : int, optional
        Trials per (scenario, sample size). Default 10000.
    config : CoverageConfig, optional
        Base configuration; the three arguments above override it.
    scenarios : sequence of Scenario, optional
        Defaults to the nine-scenario catalog.
    dispatch : callable, optional
        ``dispatch(sample, identifier) -> (lower, upper)``.
    seed : int, optional
        Root seed. Identical seed and configuration give identical results.
    backend : str
        'cpu'.

    Returns
    -------
    CoverageSolution

    Raises
    ------
    ConfigurationError
        Invalid sample sizes, alphas, repeats or seed (before any trial).
    EstimatorError
        An estimator raised or returned a malformed interval. The whole
        battery stops at the first such trial.
    """
    design = CoverageDesign.for_coverage(
        estimators,
        config=config,
        sample_sizes=sample_sizes,
        alphas=alphas,
        repeats=repeats,
        scenarios=scenarios,
        dispatch=dispatch,
        seed=seed,
    )
    be = _get_backend(backend)
    result = be.solve(design)

    for message in result.warnings:
        warnings.warn(message, RuntimeWarning, stacklevel=2)

    return CoverageSolution(_result=result, _design=design)


def evaluate(
    scenario: Scenario,
    sample_size: int,
    repeat_count: int,
    estimator: Callable | Estimator,
    *,
    seed: int | None = None,
    rng: np.random.Generator | None = None,
) -> float:
    """
    Miss fraction of one estimator on one scenario at one sample size.

    Args:
        scenario: Scenario providing the distribution and the true value.
        sample_size: Size of each drawn sample.
        repeat_count: Number of independent trials.
        estimator: fn(sample) -> (lower, upper), or an Estimator.
        seed: Seed for a fresh generator; ignored when rng is given.
        rng: Generator to draw from.

    Returns:
        1 - covering trials / repeat_count, in [0, 1].

    Raises:
        ConfigurationError: If sample_size or repeat_count is not positive.
        EstimatorError: If the estimator breaks its contract.
    """
    if not isinstance(scenario, Scenario):
        raise ValidationError(
            f"scenario: expected Scenario, got {type(scenario).__name__}"
        )
    sample_size = check_positive_int(sample_size, "sample_size")
    repeat_count = check_positive_int(repeat_count, "repeat_count")
    if not isinstance(estimator, Estimator):
        (estimator,) = as_estimators([estimator])
    if rng is None:
        rng = np.random.default_rng(seed)

    counts = count_covering_trials(scenario, sample_size, repeat_count, estimator, rng)
    if counts.n_inverted:
        warnings.warn(
            f"estimator {estimator.label!r} returned lower > upper in "
            f"{counts.n_inverted} of {counts.n_trials} trials; counted as misses",
            RuntimeWarning,
            stacklevel=2,
        )
    return counts.miss_fraction

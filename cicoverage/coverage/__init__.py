"""
Monte Carlo coverage evaluation of confidence-interval estimators.

Draws repeated samples from known distributions, asks each estimator under
test for an interval, and reports how often the interval misses the true
parameter next to the nominal significance levels.

Usage:
    from cicoverage.coverage import coverage_test, evaluate

    def wald(x):
        m = x.mean()
        half = 1.96 * x.std(ddof=1) / np.sqrt(len(x))
        return m - half, m + half

    result = coverage_test({'wald': wald}, repeats=1000, seed=42)
    print(result.summary())

    miss = evaluate(Scenario.bernoulli(0.5), 100, 1000, wald, seed=1)
"""

from cicoverage.coverage.solvers import coverage_test, evaluate
from cicoverage.coverage.design import (
    CoverageConfig,
    CoverageDesign,
    DEFAULT_ALPHAS,
    DEFAULT_REPEATS,
    DEFAULT_SAMPLE_SIZES,
)
from cicoverage.coverage.estimators import Estimator, as_estimators
from cicoverage.coverage._common import CoverageParams, ScenarioCoverage, TrialCounts
from cicoverage.coverage.solution import CoverageSolution

__all__ = [
    "coverage_test",
    "evaluate",
    "CoverageConfig",
    "CoverageDesign",
    "DEFAULT_ALPHAS",
    "DEFAULT_REPEATS",
    "DEFAULT_SAMPLE_SIZES",
    "Estimator",
    "as_estimators",
    "CoverageParams",
    "ScenarioCoverage",
    "TrialCounts",
    "CoverageSolution",
]

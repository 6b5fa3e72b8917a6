"""
cicoverage: Monte Carlo validation of confidence-interval estimators.

Submodules:
    distributions: Bernoulli, Uniform and clamped Normal samplers, scenarios
    coverage: the coverage engine, configuration and report
    core: exceptions, validation, result envelope, timing
"""

__version__ = "0.1.0"

from cicoverage import distributions
from cicoverage import coverage
from cicoverage.coverage import (
    coverage_test,
    evaluate,
    CoverageConfig,
    CoverageSolution,
    Estimator,
)
from cicoverage.distributions import Scenario, SCENARIO_CATALOG

__all__ = [
    "__version__",
    "distributions",
    "coverage",
    "coverage_test",
    "evaluate",
    "CoverageConfig",
    "CoverageSolution",
    "Estimator",
    "Scenario",
    "SCENARIO_CATALOG",
]

"""
Sampling distributions and the scenario catalog.

Usage:
    from cicoverage.distributions import Scenario, SCENARIO_CATALOG, generate

    s = Scenario.uniform(0.95, 1.0, "upper edge")
    x = generate(s.distribution, 100, np.random.default_rng(0))
"""

from cicoverage.distributions.design import Distribution, DistributionKind, Scenario
from cicoverage.distributions.catalog import (
    SCENARIO_CATALOG,
    catalog_scenarios,
    group_by_kind,
    group_indices_by_kind,
)
from cicoverage.distributions._samplers import (
    generate,
    sample_bernoulli,
    sample_uniform,
    sample_normal,
)

__all__ = [
    "Distribution",
    "DistributionKind",
    "Scenario",
    "SCENARIO_CATALOG",
    "catalog_scenarios",
    "group_by_kind",
    "group_indices_by_kind",
    "generate",
    "sample_bernoulli",
    "sample_uniform",
    "sample_normal",
]

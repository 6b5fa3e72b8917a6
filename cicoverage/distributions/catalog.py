"""
The fixed scenario catalog.

Three distribution families, three parameterizations each, chosen to probe
the centre and both edges of the unit interval:

    Bernoulli  theta = 0.5, 0.01, 0.99
    Uniform    [0, 1], [0, 0.05], [0.95, 1]
    Normal     (0, 1), (0.5, 0.1), (0.5, 0.9), clamped to [0, 1]
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from cicoverage.distributions.design import DistributionKind, Scenario


SCENARIO_CATALOG: Mapping[DistributionKind, tuple[Scenario, ...]] = MappingProxyType({
    DistributionKind.BERNOULLI: (
        Scenario.bernoulli(0.5, "balanced"),
        Scenario.bernoulli(0.01, "rare events"),
        Scenario.bernoulli(0.99, "common events"),
    ),
    DistributionKind.UNIFORM: (
        Scenario.uniform(0.0, 1.0, "full range"),
        Scenario.uniform(0.0, 0.05, "lower edge"),
        Scenario.uniform(0.95, 1.0, "upper edge"),
    ),
    DistributionKind.NORMAL: (
        Scenario.normal(0.0, 1.0, "standard normal"),
        Scenario.normal(0.5, 0.1, "small variance"),
        Scenario.normal(0.5, 0.9, "large variance"),
    ),
})


def catalog_scenarios() -> tuple[Scenario, ...]:
    """All catalog scenarios in report order (family by family)."""
    return tuple(s for group in SCENARIO_CATALOG.values() for s in group)


def group_indices_by_kind(
    scenarios: tuple[Scenario, ...],
) -> dict[DistributionKind, tuple[int, ...]]:
    """
    Positions of the scenarios, grouped by distribution family.

    Families appear in order of first occurrence. Positions are kept even
    when the same scenario is listed twice.
    """
    groups: dict[DistributionKind, list[int]] = {}
    for i, s in enumerate(scenarios):
        groups.setdefault(s.kind, []).append(i)
    return {k: tuple(v) for k, v in groups.items()}


def group_by_kind(
    scenarios: tuple[Scenario, ...],
) -> dict[DistributionKind, tuple[Scenario, ...]]:
    """
    Group scenarios by distribution family.

    Families appear in order of first occurrence; scenario order within a
    family is preserved.
    """
    return {
        kind: tuple(scenarios[i] for i in indices)
        for kind, indices in group_indices_by_kind(scenarios).items()
    }

"""
Tests for Distribution / Scenario construction and the scenario catalog.
"""

import math

import pytest

from cicoverage.core.exceptions import DistributionError, ValidationError
from cicoverage.distributions import (
    SCENARIO_CATALOG,
    Distribution,
    DistributionKind,
    Scenario,
    catalog_scenarios,
    group_by_kind,
    group_indices_by_kind,
)


# ---------------------------------------------------------------------------
# Tests: Parameter validation
# ---------------------------------------------------------------------------

class TestDistributionValidation:

    @pytest.mark.parametrize("theta", [-0.01, 1.01, 2.0])
    def test_theta_outside_unit_interval(self, theta):
        with pytest.raises(DistributionError, match="theta") as exc_info:
            Distribution.bernoulli(theta)
        assert exc_info.value.distribution == "bernoulli"
        assert exc_info.value.parameter == "theta"

    @pytest.mark.parametrize("theta", [0.0, 1.0])
    def test_theta_boundaries_allowed(self, theta):
        assert Distribution.bernoulli(theta).params["theta"] == theta

    def test_uniform_a_greater_than_b(self):
        with pytest.raises(DistributionError, match="exceeds"):
            Distribution.uniform(1.0, 0.0)

    def test_uniform_equal_bounds_allowed(self):
        assert Distribution.uniform(0.3, 0.3).target == 0.3

    def test_negative_sigma(self):
        with pytest.raises(DistributionError, match="sigma") as exc_info:
            Distribution.normal(0.5, -0.1)
        assert exc_info.value.parameter == "sigma"

    def test_zero_sigma_allowed(self):
        assert Distribution.normal(0.5, 0.0).params["sigma"] == 0.0

    @pytest.mark.parametrize("value", [math.nan, math.inf])
    def test_non_finite_parameter(self, value):
        with pytest.raises(DistributionError, match="finite"):
            Distribution.normal(value, 1.0)

    def test_non_numeric_parameter(self):
        with pytest.raises(DistributionError):
            Distribution.bernoulli("0.5")

    def test_distribution_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            Distribution.uniform(0.9, 0.1)

    def test_normal_clips_by_default(self):
        assert Distribution.normal(0.0, 1.0).clip is True
        assert Distribution.normal(0.0, 1.0, clip=False).clip is False


# ---------------------------------------------------------------------------
# Tests: True values
# ---------------------------------------------------------------------------

class TestTrueValue:

    def test_bernoulli_true_value_is_theta(self):
        assert Scenario.bernoulli(0.01).true_value == 0.01

    def test_uniform_true_value_is_midpoint(self):
        assert Scenario.uniform(0.95, 1.0).true_value == pytest.approx(0.975)
        assert Scenario.uniform(0.0, 1.0).true_value == 0.5

    def test_normal_true_value_is_mu_even_when_clipped(self):
        assert Scenario.normal(0.0, 1.0).true_value == 0.0

    def test_default_label(self):
        s = Scenario.bernoulli(0.25)
        assert s.label == "bernoulli (theta = 0.25)"

    def test_parameters_is_a_copy(self):
        s = Scenario.uniform(0.0, 0.05)
        params = s.parameters
        params["a"] = 99.0
        assert s.parameters["a"] == 0.0

    def test_params_detached_from_caller_dict(self):
        source = {"theta": 0.3}
        d = Distribution(kind=DistributionKind.BERNOULLI, params=source)
        source["theta"] = 0.7
        assert d.target == 0.3
        with pytest.raises(TypeError):
            d.params["theta"] = 0.7

    def test_describe_normal(self):
        assert Distribution.normal(0.5, 0.9).describe() == "μ=0.50, σ=0.90"
        assert (Distribution.normal(0.5, 0.9, clip=False).describe()
                == "μ=0.50, σ=0.90, unclipped")

    def test_from_distribution_rejects_other_types(self):
        with pytest.raises(ValidationError, match="Distribution"):
            Scenario.from_distribution({"theta": 0.5})


# ---------------------------------------------------------------------------
# Tests: Catalog
# ---------------------------------------------------------------------------

class TestCatalog:

    def test_three_families_three_scenarios_each(self):
        assert list(SCENARIO_CATALOG) == [
            DistributionKind.BERNOULLI,
            DistributionKind.UNIFORM,
            DistributionKind.NORMAL,
        ]
        assert all(len(group) == 3 for group in SCENARIO_CATALOG.values())
        assert len(catalog_scenarios()) == 9

    def test_catalog_is_read_only(self):
        with pytest.raises(TypeError):
            SCENARIO_CATALOG[DistributionKind.BERNOULLI] = ()

    def test_bernoulli_entries(self):
        group = SCENARIO_CATALOG[DistributionKind.BERNOULLI]
        assert [s.label for s in group] == ["balanced", "rare events", "common events"]
        assert [s.true_value for s in group] == [0.5, 0.01, 0.99]

    def test_uniform_entries(self):
        group = SCENARIO_CATALOG[DistributionKind.UNIFORM]
        assert [s.label for s in group] == ["full range", "lower edge", "upper edge"]
        assert [s.true_value for s in group] == pytest.approx([0.5, 0.025, 0.975])

    def test_normal_entries(self):
        group = SCENARIO_CATALOG[DistributionKind.NORMAL]
        assert [s.label for s in group] == [
            "standard normal", "small variance", "large variance",
        ]
        assert [s.true_value for s in group] == [0.0, 0.5, 0.5]
        assert [s.parameters["sigma"] for s in group] == [1.0, 0.1, 0.9]
        assert all(s.distribution.clip for s in group)

    def test_group_by_kind_preserves_order(self):
        scenarios = (
            Scenario.normal(0.5, 0.1, "n1"),
            Scenario.bernoulli(0.5, "b1"),
            Scenario.normal(0.2, 0.1, "n2"),
        )
        groups = group_by_kind(scenarios)
        assert list(groups) == [DistributionKind.NORMAL, DistributionKind.BERNOULLI]
        assert [s.label for s in groups[DistributionKind.NORMAL]] == ["n1", "n2"]

    def test_group_indices_keep_repeats(self):
        s = Scenario.bernoulli(0.5, "b1")
        groups = group_indices_by_kind((s, Scenario.uniform(0.0, 1.0), s))
        assert groups == {
            DistributionKind.BERNOULLI: (0, 2),
            DistributionKind.UNIFORM: (1,),
        }

    def test_catalog_parameters_cannot_be_changed(self):
        balanced = SCENARIO_CATALOG[DistributionKind.BERNOULLI][0]
        with pytest.raises(TypeError):
            balanced.distribution.params["theta"] = 0.9
        assert balanced.distribution.params["theta"] == 0.5
        assert balanced.true_value == 0.5

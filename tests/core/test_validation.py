"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_scalar / check_finite_scalar: numeric type and finiteness
    - check_positive_int: counts
    - check_open_unit_interval: probabilities in (0, 1)
    - check_positive_int_sequence / check_open_unit_sequence
"""

import math

import numpy as np
import pytest

from cicoverage.core.exceptions import ConfigurationError, ValidationError
from cicoverage.core.validation import (
    check_finite_scalar,
    check_open_unit_interval,
    check_open_unit_sequence,
    check_positive_int,
    check_positive_int_sequence,
    check_scalar,
)


# ═══════════════════════════════════════════════════════════════════════
# check_scalar / check_finite_scalar
# ═══════════════════════════════════════════════════════════════════════


class TestCheckScalar:

    def test_int_to_float(self):
        result = check_scalar(3, "x")
        assert result == 3.0
        assert isinstance(result, float)

    def test_numpy_float_accepted(self):
        assert check_scalar(np.float32(0.5), "x") == 0.5

    def test_infinity_accepted(self):
        assert check_scalar(math.inf, "x") == math.inf

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="x"):
            check_scalar(True, "x")

    def test_string_rejected(self):
        with pytest.raises(ValidationError, match="str"):
            check_scalar("0.5", "x")

    def test_none_rejected(self):
        with pytest.raises(ValidationError):
            check_scalar(None, "x")


class TestCheckFiniteScalar:

    def test_finite_passes(self):
        assert check_finite_scalar(-2.5, "mu") == -2.5

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_rejected(self, value):
        with pytest.raises(ValidationError, match="mu: must be finite"):
            check_finite_scalar(value, "mu")


# ═══════════════════════════════════════════════════════════════════════
# check_positive_int
# ═══════════════════════════════════════════════════════════════════════


class TestCheckPositiveInt:

    def test_int_passes(self):
        assert check_positive_int(10, "n") == 10

    def test_numpy_int_passes(self):
        result = check_positive_int(np.int64(7), "n")
        assert result == 7
        assert type(result) is int

    def test_integral_float_passes(self):
        assert check_positive_int(100.0, "n") == 100

    def test_fractional_float_rejected(self):
        with pytest.raises(ConfigurationError, match="positive integer"):
            check_positive_int(10.5, "n")

    @pytest.mark.parametrize("value", [0, -1, -100])
    def test_non_positive_rejected(self, value):
        with pytest.raises(ConfigurationError, match=">= 1") as exc_info:
            check_positive_int(value, "repeats")
        assert exc_info.value.parameter == "repeats"
        assert exc_info.value.value == value

    def test_bool_rejected(self):
        with pytest.raises(ConfigurationError):
            check_positive_int(True, "n")

    def test_string_rejected(self):
        with pytest.raises(ConfigurationError):
            check_positive_int("10", "n")


# ═══════════════════════════════════════════════════════════════════════
# check_open_unit_interval
# ═══════════════════════════════════════════════════════════════════════


class TestCheckOpenUnitInterval:

    @pytest.mark.parametrize("value", [0.05, 0.5, 0.999])
    def test_inside_passes(self, value):
        assert check_open_unit_interval(value, "alpha") == value

    @pytest.mark.parametrize("value", [0.0, 1.0, -0.1, 1.5])
    def test_boundaries_and_outside_rejected(self, value):
        with pytest.raises(ConfigurationError, match=r"alpha: must be in \(0, 1\)"):
            check_open_unit_interval(value, "alpha")

    def test_nan_rejected(self):
        with pytest.raises(ConfigurationError):
            check_open_unit_interval(math.nan, "alpha")

    def test_non_number_is_configuration_error(self):
        with pytest.raises(ConfigurationError) as exc_info:
            check_open_unit_interval("0.05", "alpha")
        assert exc_info.value.parameter == "alpha"


# ═══════════════════════════════════════════════════════════════════════
# Sequences
# ═══════════════════════════════════════════════════════════════════════


class TestSequences:

    def test_int_sequence_order_preserved(self):
        assert check_positive_int_sequence([100, 10, 1000], "Ns") == (100, 10, 1000)

    def test_numpy_array_accepted(self):
        assert check_positive_int_sequence(np.array([10, 100]), "Ns") == (10, 100)

    def test_empty_rejected(self):
        with pytest.raises(ConfigurationError, match="at least one"):
            check_positive_int_sequence([], "Ns")

    def test_scalar_rejected(self):
        with pytest.raises(ConfigurationError, match="expected a sequence"):
            check_positive_int_sequence(10, "Ns")

    def test_string_rejected(self):
        with pytest.raises(ConfigurationError, match="expected a sequence"):
            check_positive_int_sequence("10", "Ns")

    def test_bad_element_names_index(self):
        with pytest.raises(ConfigurationError, match=r"Ns\[1\]"):
            check_positive_int_sequence([10, 0, 100], "Ns")

    def test_alpha_sequence(self):
        assert check_open_unit_sequence((0.25, 0.1, 0.05), "alphas") == (0.25, 0.1, 0.05)

    def test_alpha_sequence_bad_element(self):
        with pytest.raises(ConfigurationError, match=r"alphas\[2\]"):
            check_open_unit_sequence([0.25, 0.1, 1.0], "alphas")

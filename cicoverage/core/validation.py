"""
Input validation utilities for cicoverage.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent. Everything a run needs is checked
before the first trial is drawn.

Design principles:
    - No silent type coercion (integral floats are accepted for counts,
      fractional ones are not)
    - Booleans are never numbers
    - Each function validates ONE thing
    - Parameter names and actual values included in all error messages
"""

import math
import numbers
from collections.abc import Iterable
from typing import Any

import numpy as np

from cicoverage.core.exceptions import ValidationError, ConfigurationError


def check_scalar(value: Any, name: str) -> float:
    """
    Validate that a value is a real number and return it as float.

    Args:
        value: Input to validate
        name: Parameter name for error messages

    Returns:
        The value as a Python float

    Raises:
        ValidationError: If the value is not a real number
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__} {value!r}"
        )
    return float(value)


def check_finite_scalar(value: Any, name: str) -> float:
    """
    Validate that a value is a finite real number.

    Raises:
        ValidationError: If the value is not real, or is NaN/Inf
    """
    result = check_scalar(value, name)
    if not math.isfinite(result):
        raise ValidationError(f"{name}: must be finite, got {result}")
    return result


def check_positive_int(value: Any, name: str) -> int:
    """
    Validate a strictly positive integer count.

    Integral floats (``100.0``) are accepted; fractional values, booleans
    and non-numbers are not.

    Args:
        value: Input to validate
        name: Parameter name for error messages

    Returns:
        The value as a Python int

    Raises:
        ConfigurationError: If the value is not a positive integer
    """
    if isinstance(value, (bool, np.bool_)):
        raise ConfigurationError(
            f"{name}: expected a positive integer, got {value!r}",
            parameter=name, value=value,
        )
    if isinstance(value, numbers.Integral):
        result = int(value)
    elif isinstance(value, numbers.Real) and float(value).is_integer():
        result = int(value)
    else:
        raise ConfigurationError(
            f"{name}: expected a positive integer, got {value!r}",
            parameter=name, value=value,
        )
    if result < 1:
        raise ConfigurationError(
            f"{name}: must be >= 1, got {result}",
            parameter=name, value=value,
        )
    return result


def check_open_unit_interval(value: Any, name: str) -> float:
    """
    Validate a probability strictly inside (0, 1), e.g. a significance level.

    Raises:
        ConfigurationError: If the value is not a real number in (0, 1)
    """
    try:
        result = check_scalar(value, name)
    except ValidationError as e:
        raise ConfigurationError(str(e), parameter=name, value=value) from e
    if not (0.0 < result < 1.0):
        raise ConfigurationError(
            f"{name}: must be in (0, 1), got {result}",
            parameter=name, value=value,
        )
    return result


def _as_sequence(values: Any, name: str) -> tuple[Any, ...]:
    """Turn an iterable (list, tuple, 1D array) into a non-empty tuple."""
    if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        raise ConfigurationError(
            f"{name}: expected a sequence, got {type(values).__name__} {values!r}",
            parameter=name, value=values,
        )
    if isinstance(values, np.ndarray):
        items = tuple(values.ravel().tolist())
    else:
        items = tuple(values)
    if not items:
        raise ConfigurationError(
            f"{name}: must contain at least one value",
            parameter=name, value=values,
        )
    return items


def check_positive_int_sequence(values: Any, name: str) -> tuple[int, ...]:
    """
    Validate an ordered, non-empty sequence of positive integers.

    Order is preserved; duplicates are allowed (each is evaluated
    independently).

    Raises:
        ConfigurationError: If the sequence is empty or any element is invalid
    """
    items = _as_sequence(values, name)
    return tuple(
        check_positive_int(v, f"{name}[{i}]") for i, v in enumerate(items)
    )


def check_open_unit_sequence(values: Any, name: str) -> tuple[float, ...]:
    """
    Validate an ordered, non-empty sequence of probabilities in (0, 1).

    Raises:
        ConfigurationError: If the sequence is empty or any element is invalid
    """
    items = _as_sequence(values, name)
    return tuple(
        check_open_unit_interval(v, f"{name}[{i}]") for i, v in enumerate(items)
    )

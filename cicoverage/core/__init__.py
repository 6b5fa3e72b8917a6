"""
Core infrastructure for cicoverage.

This module provides shared abstractions and utilities used by the
domain subpackages (distributions, coverage).

Key components:
    protocols: IntervalEstimator, Backend protocols
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing
"""

from cicoverage.core.protocols import IntervalEstimator, Backend
from cicoverage.core.result import Result
from cicoverage.core.exceptions import (
    CICoverageError,
    ValidationError,
    ConfigurationError,
    DistributionError,
    EstimatorError,
)

__all__ = [
    # Protocols
    "IntervalEstimator",
    "Backend",
    # Result
    "Result",
    # Exceptions
    "CICoverageError",
    "ValidationError",
    "ConfigurationError",
    "DistributionError",
    "EstimatorError",
]

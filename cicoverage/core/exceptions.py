"""
Exception hierarchy for cicoverage.

All exceptions inherit from CICoverageError to allow catching any
library-specific error. Domain-specific exceptions inherit from the
appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from typing import Any


class CICoverageError(Exception):
    """Base exception for all cicoverage errors."""
    pass


class ValidationError(CICoverageError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class ConfigurationError(ValidationError):
    """
    Run configuration is malformed.

    Raised before any trial is executed when sample sizes, confidence
    levels or the repeat count are out of range.

    Attributes:
        parameter: Name of the offending configuration field
        value: The rejected value
    """

    def __init__(
        self,
        message: str,
        parameter: str | None = None,
        value: Any = None,
    ):
        super().__init__(message)
        self.parameter = parameter
        self.value = value


class DistributionError(ValidationError):
    """
    Distribution parameters are outside their domain.

    Raised at scenario construction (theta outside [0, 1], a > b,
    sigma < 0, non-finite values), never in the middle of a run.

    Attributes:
        distribution: Distribution family name
        parameter: Name of the offending parameter
    """

    def __init__(
        self,
        message: str,
        distribution: str | None = None,
        parameter: str | None = None,
    ):
        super().__init__(message)
        self.distribution = distribution
        self.parameter = parameter


class EstimatorError(CICoverageError):
    """
    An estimator under test violated its contract.

    Raised when the estimator raises, returns something that is not a
    (lower, upper) pair of numbers, or returns a NaN bound. The evaluation
    of the battery stops at the failing trial.

    Attributes:
        estimator: Label of the failing estimator
        scenario: Label of the scenario being evaluated
        sample_size: Sample size of the failing trial
        trial: Zero-based index of the failing trial
    """

    def __init__(
        self,
        message: str,
        estimator: Any = None,
        scenario: str | None = None,
        sample_size: int | None = None,
        trial: int | None = None,
    ):
        super().__init__(message)
        self.estimator = estimator
        self.scenario = scenario
        self.sample_size = sample_size
        self.trial = trial

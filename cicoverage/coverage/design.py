"""
Design classes for coverage evaluation.

CoverageConfig holds the run configuration (sample sizes, nominal levels,
repeat count); CoverageDesign bundles it with the estimators under test, the
scenarios and the seed. Both are immutable and validated at construction so
that configuration mistakes surface before the first trial.
"""

from __future__ import annotations

import dataclasses
import numbers
from dataclasses import dataclass, field
from typing import Any, Callable

from cicoverage.core.exceptions import ConfigurationError, ValidationError
from cicoverage.core.validation import (
    check_open_unit_sequence,
    check_positive_int,
    check_positive_int_sequence,
)
from cicoverage.coverage.estimators import Estimator, as_estimators
from cicoverage.distributions.catalog import catalog_scenarios
from cicoverage.distributions.design import Scenario


DEFAULT_SAMPLE_SIZES: tuple[int, ...] = (10, 100, 1000, 10000)
DEFAULT_ALPHAS: tuple[float, ...] = (0.25, 0.1, 0.05)
DEFAULT_REPEATS: int = 10000


@dataclass(frozen=True)
class CoverageConfig:
    """
    Frozen run configuration.

    Attributes:
        sample_sizes: Ordered positive sample sizes; report order follows it.
        alphas: Ordered nominal significance levels, each in (0, 1).
        repeats: Number of independent trials per (scenario, sample size).

    Raises:
        ConfigurationError: On construction, if any field is out of range.
    """
    sample_sizes: tuple[int, ...] = DEFAULT_SAMPLE_SIZES
    alphas: tuple[float, ...] = DEFAULT_ALPHAS
    repeats: int = DEFAULT_REPEATS

    def __post_init__(self) -> None:
        object.__setattr__(
            self, 'sample_sizes',
            check_positive_int_sequence(self.sample_sizes, "sample_sizes"),
        )
        object.__setattr__(
            self, 'alphas', check_open_unit_sequence(self.alphas, "alphas"),
        )
        object.__setattr__(
            self, 'repeats', check_positive_int(self.repeats, "repeats"),
        )

    def with_overrides(
        self,
        *,
        sample_sizes=None,
        alphas=None,
        repeats: int | None = None,
    ) -> CoverageConfig:
        """Copy with the given fields replaced; None keeps the current value."""
        changes: dict[str, Any] = {}
        if sample_sizes is not None:
            changes['sample_sizes'] = sample_sizes
        if alphas is not None:
            changes['alphas'] = alphas
        if repeats is not None:
            changes['repeats'] = repeats
        return dataclasses.replace(self, **changes)


def _check_seed(seed: Any) -> int | None:
    if seed is None:
        return None
    if isinstance(seed, bool) or not isinstance(seed, numbers.Integral) or seed < 0:
        raise ConfigurationError(
            f"seed: expected a non-negative integer or None, got {seed!r}",
            parameter="seed", value=seed,
        )
    return int(seed)


@dataclass(frozen=True)
class CoverageDesign:
    """
    Frozen design for a coverage battery.

    Attributes:
        estimators: Procedures under test, each with a unique label.
        scenarios: Scenarios to evaluate, in report order.
        config: Sample sizes, nominal levels and repeat count.
        seed: Root seed, or None for fresh OS entropy.
    """
    estimators: tuple[Estimator, ...]
    scenarios: tuple[Scenario, ...]
    config: CoverageConfig = field(default_factory=CoverageConfig)
    seed: int | None = None

    @classmethod
    def for_coverage(
        cls,
        estimators,
        *,
        config: CoverageConfig | None = None,
        sample_sizes=None,
        alphas=None,
        repeats: int | None = None,
        scenarios=None,
        dispatch: Callable[[Any, Any], Any] | None = None,
        seed: int | None = None,
    ) -> CoverageDesign:
        """
        Create a coverage design with validation.

        Args:
            estimators: Callable, mapping {label: callable}, sequence of
                callables, or sequence of identifiers with ``dispatch``.
            config: Base configuration; defaults to CoverageConfig().
            sample_sizes: Overrides config.sample_sizes.
            alphas: Overrides config.alphas.
            repeats: Overrides config.repeats.
            scenarios: Scenarios to run; defaults to the full catalog.
            dispatch: dispatch(sample, identifier) -> (lower, upper).
            seed: Non-negative root seed for reproducible runs.

        Returns:
            Validated CoverageDesign.

        Raises:
            ConfigurationError: If the configuration or seed is invalid.
            ValidationError: If estimators or scenarios are malformed.
        """
        base = config if config is not None else CoverageConfig()
        if not isinstance(base, CoverageConfig):
            raise ValidationError(
                f"config: expected CoverageConfig, got {type(base).__name__}"
            )
        cfg = base.with_overrides(
            sample_sizes=sample_sizes, alphas=alphas, repeats=repeats,
        )
        seed = _check_seed(seed)

        if scenarios is None:
            scenario_tuple = catalog_scenarios()
        else:
            if isinstance(scenarios, Scenario):
                scenarios = [scenarios]
            scenario_tuple = tuple(scenarios)
            if not scenario_tuple:
                raise ValidationError("scenarios: at least one scenario is required")
            for i, s in enumerate(scenario_tuple):
                if not isinstance(s, Scenario):
                    raise ValidationError(
                        f"scenarios[{i}]: expected Scenario, got {type(s).__name__}"
                    )

        return cls(
            estimators=as_estimators(estimators, dispatch=dispatch),
            scenarios=scenario_tuple,
            config=cfg,
            seed=seed,
        )

    @property
    def n_buckets(self) -> int:
        """Number of (estimator, scenario, sample size) evaluations."""
        return (
            len(self.estimators) * len(self.scenarios)
            * len(self.config.sample_sizes)
        )

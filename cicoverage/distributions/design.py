"""
Design classes for the sampling distributions.

Distribution captures one distribution family together with validated
parameters; Scenario pairs a distribution with a report label and the true
value a confidence interval is expected to cover. Both are immutable and
validated at construction, so a bad parameter fails before any trial runs.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from cicoverage.core.exceptions import DistributionError, ValidationError
from cicoverage.core.validation import check_finite_scalar


class DistributionKind(str, enum.Enum):
    """Supported distribution families."""
    BERNOULLI = "bernoulli"
    UNIFORM = "uniform"
    NORMAL = "normal"

    @property
    def display_name(self) -> str:
        """Human-readable family name used in report headings."""
        return self.value.capitalize()


def _finite(value: Any, kind: DistributionKind, name: str) -> float:
    """Validate a finite parameter, reporting failures as DistributionError."""
    try:
        return check_finite_scalar(value, name)
    except ValidationError as e:
        raise DistributionError(
            f"{kind.value}: {e}", distribution=kind.value, parameter=name,
        ) from e


@dataclass(frozen=True)
class Distribution:
    """
    Frozen distribution family plus parameters.

    Attributes:
        kind: Distribution family.
        params: Read-only parameter mapping. Bernoulli: {'theta'};
            Uniform: {'a', 'b'}; Normal: {'mu', 'sigma'}.
        clip: Normal only. Clamp draws into [0, 1].

    Do not construct directly; use the factory classmethods.
    """
    kind: DistributionKind
    params: Mapping[str, float] = field(hash=False)
    clip: bool = False

    def __post_init__(self) -> None:
        # Sampler and true value must keep reading the same parameters.
        object.__setattr__(self, 'params', MappingProxyType(dict(self.params)))

    @classmethod
    def bernoulli(cls, theta: float) -> Distribution:
        """
        Bernoulli(theta): 1 with probability theta, else 0.

        theta = 0 or 1 is allowed and yields a constant sample.

        Raises:
            DistributionError: If theta is not in [0, 1].
        """
        kind = DistributionKind.BERNOULLI
        theta = _finite(theta, kind, "theta")
        if not (0.0 <= theta <= 1.0):
            raise DistributionError(
                f"bernoulli: theta must be in [0, 1], got {theta}",
                distribution=kind.value, parameter="theta",
            )
        return cls(kind=kind, params={"theta": theta})

    @classmethod
    def uniform(cls, a: float, b: float) -> Distribution:
        """
        Continuous Uniform on [a, b]. a == b yields a constant sample.

        Raises:
            DistributionError: If a > b or either bound is not finite.
        """
        kind = DistributionKind.UNIFORM
        a = _finite(a, kind, "a")
        b = _finite(b, kind, "b")
        if a > b:
            raise DistributionError(
                f"uniform: lower bound a={a} exceeds upper bound b={b}",
                distribution=kind.value, parameter="a",
            )
        return cls(kind=kind, params={"a": a, "b": b})

    @classmethod
    def normal(cls, mu: float, sigma: float, *, clip: bool = True) -> Distribution:
        """
        Gaussian with mean mu and standard deviation sigma.

        With clip=True (the default) every draw is clamped into [0, 1]:
        values below 0 become 0 and values above 1 become 1. This changes
        the tails of the effective distribution while the coverage target
        stays mu.

        Raises:
            DistributionError: If sigma < 0 or a parameter is not finite.
        """
        kind = DistributionKind.NORMAL
        mu = _finite(mu, kind, "mu")
        sigma = _finite(sigma, kind, "sigma")
        if sigma < 0.0:
            raise DistributionError(
                f"normal: sigma must be >= 0, got {sigma}",
                distribution=kind.value, parameter="sigma",
            )
        return cls(kind=kind, params={"mu": mu, "sigma": sigma}, clip=bool(clip))

    @property
    def target(self) -> float:
        """
        The parameter a confidence interval for the mean should cover.

        theta for Bernoulli, (a + b) / 2 for Uniform, mu for Normal.
        """
        p = self.params
        if self.kind is DistributionKind.BERNOULLI:
            return p["theta"]
        if self.kind is DistributionKind.UNIFORM:
            return (p["a"] + p["b"]) / 2.0
        return p["mu"]

    def describe(self) -> str:
        """Parameter summary as shown in report headings."""
        p = self.params
        if self.kind is DistributionKind.BERNOULLI:
            return f"theta = {p['theta']:.2f}"
        if self.kind is DistributionKind.UNIFORM:
            return f"[{p['a']:.2f}, {p['b']:.2f}]"
        text = f"μ={p['mu']:.2f}, σ={p['sigma']:.2f}"
        if not self.clip:
            text += ", unclipped"
        return text


@dataclass(frozen=True)
class Scenario:
    """
    One test scenario: a distribution, its label and the true value.

    The true value is fixed for the lifetime of the scenario and is the
    same for every repeat and every sample size.

    Attributes:
        distribution: Validated sampling distribution.
        label: Short description, e.g. "rare events".
        true_value: Value the interval must contain to count as a cover.
    """
    distribution: Distribution
    label: str
    true_value: float

    @classmethod
    def from_distribution(
        cls,
        distribution: Distribution,
        label: str | None = None,
    ) -> Scenario:
        """Build a scenario whose true value is the distribution's target."""
        if not isinstance(distribution, Distribution):
            raise ValidationError(
                f"distribution: expected Distribution, got "
                f"{type(distribution).__name__}"
            )
        if label is None:
            label = f"{distribution.kind.value} ({distribution.describe()})"
        return cls(
            distribution=distribution,
            label=str(label),
            true_value=distribution.target,
        )

    @classmethod
    def bernoulli(cls, theta: float, label: str | None = None) -> Scenario:
        return cls.from_distribution(Distribution.bernoulli(theta), label)

    @classmethod
    def uniform(cls, a: float, b: float, label: str | None = None) -> Scenario:
        return cls.from_distribution(Distribution.uniform(a, b), label)

    @classmethod
    def normal(
        cls,
        mu: float,
        sigma: float,
        label: str | None = None,
        *,
        clip: bool = True,
    ) -> Scenario:
        return cls.from_distribution(Distribution.normal(mu, sigma, clip=clip), label)

    @property
    def kind(self) -> DistributionKind:
        return self.distribution.kind

    @property
    def parameters(self) -> dict[str, float]:
        """Copy of the distribution parameters."""
        return dict(self.distribution.params)

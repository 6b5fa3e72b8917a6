"""
Common data structures for coverage evaluation.

TrialCounts is the raw per-bucket tally, ScenarioCoverage is one row of the
report and CoverageParams is the payload wrapped by Result[P] and exposed
through CoverageSolution.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Hashable, TYPE_CHECKING

from scipy import stats as sp_stats

from cicoverage.core.validation import check_open_unit_interval

if TYPE_CHECKING:
    from cicoverage.coverage.design import CoverageConfig
    from cicoverage.distributions.design import Scenario


def miss_fraction(n_covered: int, n_trials: int) -> float:
    """1 - covered / trials, the empirical non-coverage rate."""
    # Computed from the miss count so that 5 misses in 100 equals 0.05.
    return (n_trials - n_covered) / n_trials


@dataclass(frozen=True)
class TrialCounts:
    """
    Tally of one (scenario, sample size) bucket.

    - n_trials: number of sample draws, one estimator call each
    - n_covered: trials with lower <= true value <= upper
    - n_inverted: trials whose interval had lower > upper (never covering)
    """
    n_trials: int
    n_covered: int
    n_inverted: int = 0

    @property
    def miss_fraction(self) -> float:
        return miss_fraction(self.n_covered, self.n_trials)


@dataclass(frozen=True)
class ScenarioCoverage:
    """
    Coverage of one estimator on one scenario at one sample size.
    """
    estimator: Hashable
    scenario: 'Scenario'
    sample_size: int
    n_trials: int
    n_covered: int
    n_inverted: int = 0

    @property
    def miss_fraction(self) -> float:
        """Fraction of trials whose interval missed the true value."""
        return miss_fraction(self.n_covered, self.n_trials)

    @property
    def coverage(self) -> float:
        """Fraction of trials whose interval contained the true value."""
        return self.n_covered / self.n_trials

    @property
    def mcse(self) -> float:
        """Monte Carlo standard error of the miss fraction."""
        p = self.miss_fraction
        return math.sqrt(max(p * (1.0 - p), 0.0) / self.n_trials)

    def is_valid(self, alpha: float, *, mc_confidence: float | None = None) -> bool:
        """
        Whether the achieved miss fraction respects the nominal level alpha.

        Without mc_confidence this is ``miss_fraction <= alpha``. With it,
        the threshold is widened by the one-sided Monte Carlo margin
        ``z * sqrt(alpha * (1 - alpha) / n_trials)``, z being the
        mc_confidence quantile of the standard normal, so that a valid
        estimator is not rejected for simulation noise alone.
        """
        threshold = check_open_unit_interval(alpha, "alpha")
        if mc_confidence is not None:
            mc_confidence = check_open_unit_interval(mc_confidence, "mc_confidence")
            z = float(sp_stats.norm.ppf(mc_confidence))
            threshold += z * math.sqrt(alpha * (1.0 - alpha) / self.n_trials)
        return self.miss_fraction <= threshold


@dataclass(frozen=True)
class CoverageParams:
    """
    Parameter payload for a coverage battery.

    - records: one ScenarioCoverage per (estimator, scenario, sample size),
      ordered estimator-major, then scenario, then sample size as configured
    - config: the configuration that produced them
    """
    records: tuple[ScenarioCoverage, ...]
    config: 'CoverageConfig'

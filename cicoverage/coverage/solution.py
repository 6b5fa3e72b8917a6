"""
Solution wrapper for coverage results.

CoverageSolution wraps Result[CoverageParams] and provides accessors,
structured records and the plain-text coverage report.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Hashable, TYPE_CHECKING

from cicoverage.core.exceptions import ValidationError
from cicoverage.core.result import Result
from cicoverage.coverage._common import CoverageParams, ScenarioCoverage
from cicoverage.distributions.catalog import group_indices_by_kind
from cicoverage.distributions.design import Scenario

if TYPE_CHECKING:
    import pandas as pd
    from cicoverage.coverage.design import CoverageConfig, CoverageDesign


RULE = "=" * 53
THIN_RULE = "-" * 53

RECORD_FIELDS = (
    'estimator', 'distribution', 'scenario', 'parameters', 'true_value',
    'sample_size', 'alpha', 'n_trials', 'n_covered', 'n_inverted',
    'miss_fraction', 'valid',
)


@dataclass
class CoverageSolution:
    """
    User-facing coverage results.

    One ScenarioCoverage per (estimator, scenario, sample size). The miss
    fraction does not depend on the nominal level; alphas only decide
    which levels the report and records compare it against.
    """
    _result: Result[CoverageParams]
    _design: 'CoverageDesign'

    # --- Core fields ---

    @property
    def records(self) -> tuple[ScenarioCoverage, ...]:
        """All coverage rows, estimator-major, then scenario, then N."""
        return self._result.params.records

    @property
    def config(self) -> 'CoverageConfig':
        return self._result.params.config

    @property
    def sample_sizes(self) -> tuple[int, ...]:
        return self.config.sample_sizes

    @property
    def alphas(self) -> tuple[float, ...]:
        return self.config.alphas

    @property
    def repeats(self) -> int:
        return self.config.repeats

    @property
    def estimators(self) -> tuple[Hashable, ...]:
        """Estimator labels in run order."""
        return tuple(e.label for e in self._design.estimators)

    @property
    def scenarios(self) -> tuple[Scenario, ...]:
        return self._design.scenarios

    # --- Metadata ---

    @property
    def seed(self) -> int | None:
        """Root seed used."""
        return self._design.seed

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def total_seconds(self) -> float | None:
        return self._result.total_seconds

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    # --- Lookup ---

    def _scenario_index(self, scenario: Scenario | str) -> int:
        if isinstance(scenario, Scenario):
            matches = [i for i, s in enumerate(self.scenarios) if s == scenario]
        else:
            matches = [i for i, s in enumerate(self.scenarios) if s.label == scenario]
        if len(matches) == 1:
            return matches[0]
        if len(matches) > 1:
            raise ValidationError(
                f"scenario {scenario!r} occurs {len(matches)} times in this run "
                f"and is ambiguous; use records_for(estimator) and pick by position"
            )
        labels = [s.label for s in self.scenarios]
        raise KeyError(f"No scenario {scenario!r}. Available: {labels}")

    def _estimator_index(self, estimator: Hashable) -> int:
        try:
            return self.estimators.index(estimator)
        except ValueError:
            raise KeyError(
                f"No estimator {estimator!r}. Available: {list(self.estimators)}"
            ) from None

    def _bucket(self, est_index: int, scen_index: int) -> tuple[ScenarioCoverage, ...]:
        # Records are stored estimator-major, then scenario, then sample size.
        n_sizes = len(self.sample_sizes)
        start = (est_index * len(self.scenarios) + scen_index) * n_sizes
        return self.records[start:start + n_sizes]

    def records_for(
        self,
        estimator: Hashable,
        scenario: Scenario | str | None = None,
    ) -> tuple[ScenarioCoverage, ...]:
        """
        Rows of one estimator, optionally restricted to one scenario.

        Raises:
            KeyError: If the estimator or scenario is not part of this run.
            ValidationError: If the scenario occurs more than once.
        """
        e = self._estimator_index(estimator)
        if scenario is None:
            per_estimator = len(self.scenarios) * len(self.sample_sizes)
            return self.records[e * per_estimator:(e + 1) * per_estimator]
        return self._bucket(e, self._scenario_index(scenario))

    def miss_fractions(
        self,
        estimator: Hashable,
        scenario: Scenario | str,
    ) -> tuple[float, ...]:
        """Miss fraction per configured sample size, in configuration order."""
        return tuple(r.miss_fraction for r in self.records_for(estimator, scenario))

    def exactness(
        self,
        estimator: Hashable,
        alpha: float,
        *,
        mc_confidence: float | None = None,
    ) -> str:
        """
        Classify an estimator at nominal level alpha.

        Returns:
            'exact' if the miss fraction is within alpha at every sample
            size of every scenario; 'asymptotic' if that only holds at the
            largest configured sample size of every scenario; 'invalid'
            otherwise.
        """
        rows = self.records_for(estimator)
        if all(r.is_valid(alpha, mc_confidence=mc_confidence) for r in rows):
            return 'exact'
        largest = max(self.sample_sizes)
        if all(
            r.is_valid(alpha, mc_confidence=mc_confidence)
            for r in rows if r.sample_size == largest
        ):
            return 'asymptotic'
        return 'invalid'

    # --- Export ---

    def to_records(self) -> list[dict[str, Any]]:
        """
        One flat dict per (estimator, scenario, sample size, alpha).

        Keys are listed in RECORD_FIELDS. ``valid`` is
        ``miss_fraction <= alpha``.
        """
        out: list[dict[str, Any]] = []
        for r in self.records:
            for alpha in self.alphas:
                out.append({
                    'estimator': r.estimator,
                    'distribution': r.scenario.kind.value,
                    'scenario': r.scenario.label,
                    'parameters': r.scenario.parameters,
                    'true_value': r.scenario.true_value,
                    'sample_size': r.sample_size,
                    'alpha': alpha,
                    'n_trials': r.n_trials,
                    'n_covered': r.n_covered,
                    'n_inverted': r.n_inverted,
                    'miss_fraction': r.miss_fraction,
                    'valid': r.is_valid(alpha),
                })
        return out

    def to_dataframe(self) -> 'pd.DataFrame':
        """to_records() as a pandas DataFrame (requires pandas)."""
        import pandas as pd
        return pd.DataFrame(self.to_records(), columns=list(RECORD_FIELDS))

    # --- Display ---

    def _scenario_block(
        self, scenario: Scenario, rows: tuple[ScenarioCoverage, ...],
    ) -> list[str]:
        lines = [
            "",
            f"Test case: {scenario.label} ({scenario.distribution.describe()})",
        ]
        for alpha in self.alphas:
            for r in rows:
                lines.append(
                    f"alpha: {alpha:1.2f}\t N: {r.sample_size:5d}\t "
                    f"fraction missed: {r.miss_fraction:1.3f}"
                )
            lines.append("")
        lines.append(THIN_RULE)
        return lines

    def summary(self) -> str:
        """
        Plain-text coverage report.

        Per estimator a header, then per distribution family a section and
        per scenario one line for every (alpha, N) pair:

            Function 1:
            =====================================================

            Running Bernoulli Distribution Tests:
            =====================================

            Test case: balanced (theta = 0.50)
            alpha: 0.25	 N:    10	 fraction missed: 0.000
            ...

        Every scenario passed to the run gets its own block, including
        repeated ones.
        """
        lines: list[str] = []
        groups = group_indices_by_kind(self.scenarios)

        for e, label in enumerate(self.estimators):
            lines.append("")
            lines.append(f"Function {label}:")
            lines.append(RULE)

            for kind, indices in groups.items():
                title = f"Running {kind.display_name} Distribution Tests:"
                lines.append("")
                lines.append(title)
                lines.append("=" * len(title))
                for j in indices:
                    lines.extend(
                        self._scenario_block(self.scenarios[j], self._bucket(e, j))
                    )

            lines.append("")
            lines.append(f"----------------END OF FUNCTION: {label}------------------")
            lines.append("")

        if self.warnings:
            lines.append("Warnings:")
            lines.extend(f"  {w}" for w in self.warnings)
            lines.append("")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"CoverageSolution(estimators={len(self.estimators)}, "
            f"scenarios={len(self.scenarios)}, "
            f"sample_sizes={self.sample_sizes}, repeats={self.repeats}, "
            f"backend={self.backend_name!r})"
        )

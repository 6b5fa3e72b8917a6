"""
CPU backend for coverage evaluation.

count_covering_trials: the trial loop for one (scenario, sample size) bucket.
CPUCoverageBackend: runs every bucket of a CoverageDesign in order.

Each bucket draws from its own generator, spawned from the design seed
(estimator -> scenario -> sample size), so buckets are statistically
independent and a fixed seed reproduces every miss fraction.
"""

from __future__ import annotations

import numpy as np

from cicoverage.core.exceptions import EstimatorError
from cicoverage.core.result import Result
from cicoverage.core.compute.timing import Timer
from cicoverage.coverage._common import CoverageParams, ScenarioCoverage, TrialCounts
from cicoverage.coverage.design import CoverageDesign
from cicoverage.coverage.estimators import Estimator
from cicoverage.distributions._samplers import generate
from cicoverage.distributions.design import Scenario


def count_covering_trials(
    scenario: Scenario,
    sample_size: int,
    repeat_count: int,
    estimator: Estimator,
    rng: np.random.Generator,
) -> TrialCounts:
    """
    Run repeat_count independent trials and count the covering ones.

    One trial draws a fresh sample of sample_size values, calls the
    estimator once and checks lower <= true_value <= upper (both ends
    inclusive). Bounds are used verbatim; an inverted interval is tallied
    as such and never covers.

    Raises:
        EstimatorError: At the first trial whose estimator call fails,
            annotated with scenario, sample size and trial index.
    """
    distribution = scenario.distribution
    true_value = scenario.true_value
    covered = 0
    inverted = 0

    for trial in range(repeat_count):
        x = generate(distribution, sample_size, rng)
        try:
            lower, upper = estimator.interval(x)
        except EstimatorError as e:
            raise EstimatorError(
                f"{e} (scenario {scenario.label!r}, N={sample_size}, "
                f"trial {trial})",
                estimator=estimator.label,
                scenario=scenario.label,
                sample_size=sample_size,
                trial=trial,
            ) from e

        if lower > upper:
            inverted += 1
        elif lower <= true_value <= upper:
            covered += 1

    return TrialCounts(n_trials=repeat_count, n_covered=covered, n_inverted=inverted)


class CPUCoverageBackend:
    """
    CPU backend for coverage batteries.

    Single-threaded and synchronous: estimators are assumed to be
    ordinary Python callables without side effects.
    """

    @property
    def name(self) -> str:
        return 'cpu_coverage'

    def solve(self, design: CoverageDesign) -> Result[CoverageParams]:
        """Run every bucket and return Result[CoverageParams]."""
        timer = Timer()
        timer.start()

        config = design.config
        sizes = config.sample_sizes
        root = np.random.SeedSequence(design.seed)

        records: list[ScenarioCoverage] = []
        warnings_list: list[str] = []

        for estimator, est_seq in zip(
            design.estimators, root.spawn(len(design.estimators))
        ):
            scenario_seqs = est_seq.spawn(len(design.scenarios))
            for scenario, scen_seq in zip(design.scenarios, scenario_seqs):
                with timer.section(scenario.kind.value):
                    for n, size_seq in zip(sizes, scen_seq.spawn(len(sizes))):
                        counts = count_covering_trials(
                            scenario, n, config.repeats, estimator,
                            np.random.default_rng(size_seq),
                        )
                        records.append(ScenarioCoverage(
                            estimator=estimator.label,
                            scenario=scenario,
                            sample_size=n,
                            n_trials=counts.n_trials,
                            n_covered=counts.n_covered,
                            n_inverted=counts.n_inverted,
                        ))
                        if counts.n_inverted:
                            warnings_list.append(
                                f"estimator {estimator.label!r} returned "
                                f"lower > upper in {counts.n_inverted} of "
                                f"{counts.n_trials} trials (scenario "
                                f"{scenario.label!r}, N={n}); counted as misses"
                            )

        timer.stop()

        params = CoverageParams(records=tuple(records), config=config)

        return Result(
            params=params,
            info={
                'seed': design.seed,
                'entropy': root.entropy,
                'n_estimators': len(design.estimators),
                'n_scenarios': len(design.scenarios),
                'n_trials': len(records) * config.repeats,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )

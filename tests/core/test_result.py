"""
Tests for the Result[P] envelope and the Timer.

Validates:
    - Generic type parameter works with arbitrary payload types
    - Frozen immutability
    - Default warnings, has_warning(), total_seconds
    - Timer sections accumulate and result() requires stop()
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from cicoverage.core.compute.timing import Timer
from cicoverage.core.result import Result


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


# ═══════════════════════════════════════════════════════════════════════
# Result
# ═══════════════════════════════════════════════════════════════════════


class TestResult:

    def test_basic_creation(self):
        result = Result(
            params=FakeParams(value=0.05),
            info={"seed": 1},
            timing={"total_seconds": 0.01},
            backend_name="cpu_coverage",
        )
        assert result.params.value == 0.05
        assert result.info["seed"] == 1
        assert result.backend_name == "cpu_coverage"
        assert result.warnings == ()

    def test_frozen(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None,
                        backend_name="cpu")
        with pytest.raises(FrozenInstanceError):
            result.backend_name = "gpu"

    def test_has_warning(self):
        result = Result(
            params=FakeParams(1.0), info={}, timing=None, backend_name="cpu",
            warnings=("estimator 1 returned lower > upper in 3 of 10 trials",),
        )
        assert result.has_warning("lower > upper")
        assert not result.has_warning("NaN")

    def test_total_seconds(self):
        result = Result(params=FakeParams(1.0), info={},
                        timing={"total_seconds": 2.5, "uniform": 1.0},
                        backend_name="cpu")
        assert result.total_seconds == 2.5

    def test_total_seconds_without_timing(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None,
                        backend_name="cpu")
        assert result.total_seconds is None


# ═══════════════════════════════════════════════════════════════════════
# Timer
# ═══════════════════════════════════════════════════════════════════════


class TestTimer:

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        with timer.section("bernoulli"):
            pass
        with timer.section("bernoulli"):
            pass
        with timer.section("normal"):
            pass
        timer.stop()
        result = timer.result()
        assert set(result) == {"total_seconds", "bernoulli", "normal"}
        assert all(v >= 0.0 for v in result.values())

    def test_result_before_stop_raises(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError, match="before stop"):
            timer.result()

    def test_stop_before_start_raises(self):
        with pytest.raises(RuntimeError, match="before start"):
            Timer().stop()

    def test_section_recorded_on_exception(self):
        timer = Timer()
        timer.start()
        with pytest.raises(ValueError):
            with timer.section("failing"):
                raise ValueError("boom")
        timer.stop()
        assert "failing" in timer.result()

"""
Tests for the structural protocols.
"""

import numpy as np

from cicoverage.core.protocols import Backend, IntervalEstimator
from cicoverage.coverage.backends import CPUCoverageBackend
from cicoverage.coverage.estimators import Estimator


def _unit(sample):
    return 0.0, 1.0


class _CallableObject:
    def __call__(self, sample):
        return float(np.min(sample)), float(np.max(sample))


class TestIntervalEstimator:

    def test_plain_function_conforms(self):
        assert isinstance(_unit, IntervalEstimator)

    def test_callable_object_conforms(self):
        assert isinstance(_CallableObject(), IntervalEstimator)

    def test_adapter_conforms(self):
        assert isinstance(Estimator(label=1, fn=_unit), IntervalEstimator)

    def test_non_callable_does_not_conform(self):
        assert not isinstance((0.0, 1.0), IntervalEstimator)


class TestBackend:

    def test_cpu_backend_conforms(self):
        backend = CPUCoverageBackend()
        assert isinstance(backend, Backend)
        assert backend.name == "cpu_coverage"

    def test_non_backend(self):
        assert not isinstance(object(), Backend)

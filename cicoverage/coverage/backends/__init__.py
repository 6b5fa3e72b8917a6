"""
Coverage backends.

Available backends:
    CPUCoverageBackend: single-threaded reference implementation
"""

from cicoverage.coverage.backends.cpu import CPUCoverageBackend, count_covering_trials

__all__ = [
    "CPUCoverageBackend",
    "count_covering_trials",
]

"""
Compute utilities shared across cicoverage subpackages.
"""

from cicoverage.core.compute.timing import Timer

__all__ = [
    "Timer",
]

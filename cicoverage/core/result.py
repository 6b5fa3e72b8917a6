"""
Generic result container for all cicoverage computations.

The Result class provides a standardized envelope that domain-specific
results use. Timing, warnings and backend identification live here so the
reporting layer can treat every run the same way, while each domain defines
its own parameter payload.

Design decisions:
    - Generic over parameter payload P
    - info dict for flexible metadata (seed, counts, scenario totals)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for coverage computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific payload (coverage records, etc.)
        info: Structured metadata (seed, number of trials, ...)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=CoverageParams(records=records, config=config),
        ...     info={'seed': 42, 'n_estimators': 1},
        ...     timing={'total_seconds': 0.5},
        ...     backend_name='cpu_coverage'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)

    @property
    def total_seconds(self) -> float | None:
        """Wall-clock duration of the whole computation, if timed."""
        if self.timing is None:
            return None
        return self.timing.get('total_seconds')

"""
Core protocols for cicoverage.

These define structural interfaces the coverage engine relies on. We use
Protocol (structural typing) rather than ABC (nominal typing) so that any
plain function, bound method or callable object can be put under test
without subclassing anything.

Design Principles:
    - Minimal contracts: an estimator is "sample in, bound pair out"
    - Backends are stateless: everything they need is in the design
"""

from typing import Protocol, TypeVar, Any, TYPE_CHECKING, runtime_checkable

import numpy as np
from numpy.typing import NDArray

if TYPE_CHECKING:
    from cicoverage.core.result import Result

# Type variables for generic payloads
P = TypeVar('P')  # Parameter payload type
D = TypeVar('D', contravariant=True)  # Design type


@runtime_checkable
class IntervalEstimator(Protocol):
    """
    Capability contract for a confidence-interval procedure under test.

    Accepts a finite, non-empty 1D sample and returns ``(lower, upper)``.
    Nothing else is required: the procedure need not be valid,
    deterministic or fast. ``lower <= upper`` is expected but not enforced;
    an inverted pair simply never counts as covering.
    """

    def __call__(self, sample: NDArray[np.floating[Any]]) -> tuple[float, float]:
        ...


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend takes a domain-specific design and produces a
    domain-specific parameter payload wrapped in a Result.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}', e.g. 'cpu_coverage'.
        """
        ...

    def solve(self, design: D) -> 'Result[P]':
        """
        Execute the computation.

        Args:
            design: Validated, immutable design

        Returns:
            Result envelope containing parameter payload and metadata

        Raises:
            EstimatorError: If an estimator under test violates its contract
        """
        ...

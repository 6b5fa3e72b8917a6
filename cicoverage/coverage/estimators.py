"""
Estimator adapter.

The coverage engine never looks inside an estimator. Every procedure under
test is wrapped in an Estimator that carries a stable label for reporting
and turns the raw reply into a (lower, upper) pair of floats. Anything that
breaks the "sample in, bound pair out" contract becomes an EstimatorError.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Callable, Hashable

import numpy as np
from numpy.typing import NDArray

from cicoverage.core.exceptions import EstimatorError, ValidationError
from cicoverage.core.protocols import IntervalEstimator


def _coerce_bound(value: Any, which: str, label: Hashable) -> float:
    """Convert one bound to float; NaN and non-numbers are contract errors."""
    if isinstance(value, np.ndarray) and value.size == 1:
        value = value.item()
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise EstimatorError(
            f"estimator {label!r}: {which} bound is not a real number "
            f"({type(value).__name__} {value!r})",
            estimator=label,
        )
    result = float(value)
    if math.isnan(result):
        raise EstimatorError(
            f"estimator {label!r}: {which} bound is NaN",
            estimator=label,
        )
    return result


def coerce_bounds(reply: Any, label: Hashable) -> tuple[float, float]:
    """
    Normalize an estimator reply to (lower, upper).

    Accepts any two-element sequence or array. Infinite bounds are valid;
    inverted bounds (lower > upper) are returned unchanged.

    Raises:
        EstimatorError: If the reply is not a pair of real, non-NaN numbers.
    """
    if isinstance(reply, np.ndarray):
        reply = reply.ravel().tolist()
    try:
        lower, upper = reply
    except (TypeError, ValueError) as e:
        raise EstimatorError(
            f"estimator {label!r}: expected a (lower, upper) pair, got "
            f"{type(reply).__name__} {reply!r}",
            estimator=label,
        ) from e
    return (
        _coerce_bound(lower, "lower", label),
        _coerce_bound(upper, "upper", label),
    )


@dataclass(frozen=True)
class Estimator:
    """
    A labelled confidence-interval procedure under test.

    Attributes:
        label: Stable identifier used only for report sectioning.
        fn: fn(sample) -> (lower, upper).
    """
    label: Hashable
    fn: IntervalEstimator

    def interval(self, sample: NDArray[np.floating[Any]]) -> tuple[float, float]:
        """
        Run the procedure on one sample and return its bounds.

        Raises:
            EstimatorError: If the procedure raises or its reply is malformed.
        """
        try:
            reply = self.fn(sample)
        except Exception as e:
            raise EstimatorError(
                f"estimator {self.label!r} raised {type(e).__name__}: {e}",
                estimator=self.label,
            ) from e
        return coerce_bounds(reply, self.label)

    def __call__(self, sample: NDArray[np.floating[Any]]) -> tuple[float, float]:
        return self.interval(sample)


class _Dispatched:
    """Binds an identifier to an external dispatch(sample, identifier) table."""

    def __init__(self, dispatch: Callable[[Any, Any], Any], identifier: Hashable):
        self._dispatch = dispatch
        self._identifier = identifier

    def __call__(self, sample):
        return self._dispatch(sample, self._identifier)

    def __repr__(self) -> str:
        return f"<dispatched estimator {self._identifier!r}>"


def as_estimators(
    estimators: Any,
    dispatch: Callable[[Any, Any], Any] | None = None,
) -> tuple[Estimator, ...]:
    """
    Normalize the caller's estimators into a tuple of Estimator.

    Accepted forms:
        - a single callable or Estimator (labelled 1)
        - a mapping {label: callable}
        - a sequence of callables (labelled 1, 2, ...) or Estimator objects
        - a sequence of identifiers plus ``dispatch(sample, identifier)``,
          in which case each identifier is its own label

    Raises:
        ValidationError: If the collection is empty, an entry is not
            callable, or labels collide.
    """
    if isinstance(estimators, Estimator) or (
        dispatch is None and callable(estimators)
        and not isinstance(estimators, Mapping)
    ):
        estimators = [estimators]

    result: list[Estimator] = []
    if isinstance(estimators, Mapping):
        if dispatch is not None:
            raise ValidationError(
                "dispatch cannot be combined with a mapping of estimators"
            )
        for label, fn in estimators.items():
            if not callable(fn):
                raise ValidationError(
                    f"estimators[{label!r}]: expected a callable, got "
                    f"{type(fn).__name__}"
                )
            result.append(Estimator(label=label, fn=fn))
    else:
        if isinstance(estimators, (str, bytes)) or (
            dispatch is not None and not isinstance(estimators, Iterable)
        ):
            estimators = [estimators]
        try:
            items = list(estimators)
        except TypeError as e:
            raise ValidationError(
                f"estimators: expected a callable, mapping or sequence, got "
                f"{type(estimators).__name__}"
            ) from e
        if dispatch is not None and not callable(dispatch):
            raise ValidationError(
                f"dispatch: expected a callable, got {type(dispatch).__name__}"
            )
        for i, item in enumerate(items):
            if isinstance(item, Estimator):
                result.append(item)
            elif dispatch is not None:
                result.append(Estimator(label=item, fn=_Dispatched(dispatch, item)))
            elif callable(item):
                result.append(Estimator(label=i + 1, fn=item))
            else:
                raise ValidationError(
                    f"estimators[{i}]: expected a callable, got "
                    f"{type(item).__name__} {item!r} (pass dispatch= to use "
                    f"identifiers)"
                )

    if not result:
        raise ValidationError("estimators: at least one estimator is required")

    labels = [e.label for e in result]
    duplicates = sorted({repr(lbl) for lbl in labels if labels.count(lbl) > 1})
    if duplicates:
        raise ValidationError(
            f"estimators: labels must be unique, duplicated: {', '.join(duplicates)}"
        )

    return tuple(result)

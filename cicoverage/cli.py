"""
Command-line entry point.

Usage:
    python -m cicoverage mypkg.intervals:wald mypkg.intervals:wilson
    python -m cicoverage wald=mypkg.intervals:wald --repeats 1000 --seed 42
    python -m cicoverage mypkg.intervals:wald --sample-sizes 10 100 --alphas 0.05

Each ESTIMATOR is an import path ``module:attribute`` to a callable
``fn(sample) -> (lower, upper)``, optionally prefixed with ``label=``.
"""

from __future__ import annotations

import argparse
import importlib
import sys
from typing import Any, Callable

from cicoverage import __version__
from cicoverage.core.exceptions import EstimatorError, ValidationError
from cicoverage.coverage.design import DEFAULT_ALPHAS, DEFAULT_REPEATS, DEFAULT_SAMPLE_SIZES
from cicoverage.coverage.solution import RECORD_FIELDS
from cicoverage.coverage.solvers import coverage_test


def load_estimator(entry: str) -> tuple[str, Callable[..., Any]]:
    """
    Resolve ``[label=]module:attribute`` to (label, callable).

    Without an explicit label the attribute name is used.

    Raises:
        ValidationError: If the entry is malformed or does not resolve to
            a callable.
    """
    label, sep, target = entry.partition("=")
    if not sep:
        label, target = "", entry
    module_name, colon, attr_path = target.partition(":")
    if not colon or not module_name or not attr_path:
        raise ValidationError(
            f"estimator {entry!r}: expected 'module:callable' or "
            f"'label=module:callable'"
        )
    try:
        obj: Any = importlib.import_module(module_name)
    except Exception as e:
        # Any failure while importing user code, not only a missing module.
        raise ValidationError(
            f"estimator {entry!r}: cannot import {module_name!r}: "
            f"{type(e).__name__}: {e}"
        ) from e
    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise ValidationError(
                f"estimator {entry!r}: {module_name!r} has no attribute {attr_path!r}"
            ) from e
    if not callable(obj):
        raise ValidationError(f"estimator {entry!r}: {attr_path!r} is not callable")
    return (label or attr_path), obj


def _format_records(records: list[dict[str, Any]]) -> str:
    lines = ["\t".join(RECORD_FIELDS)]
    for rec in records:
        cells = []
        for key in RECORD_FIELDS:
            value = rec[key]
            if key == 'parameters':
                value = ",".join(f"{k}={v:g}" for k, v in value.items())
            elif isinstance(value, float):
                value = f"{value:.6g}"
            cells.append(str(value))
        lines.append("\t".join(cells))
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cicoverage",
        description=(
            "Monte Carlo coverage check of confidence-interval estimators "
            "against Bernoulli, Uniform and clamped Normal scenarios."
        ),
    )
    parser.add_argument(
        "estimators", nargs="+", metavar="ESTIMATOR",
        help="[label=]module:callable returning (lower, upper) for a sample",
    )
    parser.add_argument(
        "--sample-sizes", "-N", nargs="+", type=int,
        default=list(DEFAULT_SAMPLE_SIZES), metavar="N",
        help="sample sizes to test (default: %(default)s)",
    )
    parser.add_argument(
        "--alphas", "-a", nargs="+", type=float,
        default=list(DEFAULT_ALPHAS), metavar="ALPHA",
        help="nominal significance levels (default: %(default)s)",
    )
    parser.add_argument(
        "--repeats", "-r", type=int, default=DEFAULT_REPEATS,
        help="Monte Carlo trials per scenario and sample size (default: %(default)s)",
    )
    parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="root random seed for a reproducible run",
    )
    parser.add_argument(
        "--format", "-f", choices=("text", "records"), default="text",
        help="text report or tab-separated records (default: %(default)s)",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        estimators = dict(load_estimator(entry) for entry in args.estimators)
        if len(estimators) != len(args.estimators):
            raise ValidationError("estimator labels must be unique")
        result = coverage_test(
            estimators,
            sample_sizes=args.sample_sizes,
            alphas=args.alphas,
            repeats=args.repeats,
            seed=args.seed,
        )
    except ValidationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    except EstimatorError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.format == "records":
        print(_format_records(result.to_records()))
    else:
        print(result.summary())

    total = result.total_seconds
    if total is not None:
        print(f"completed {result.info['n_trials']} trials in {total:.2f}s",
              file=sys.stderr)
    return 0

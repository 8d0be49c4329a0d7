"""
Command-line interface for the lognormal_dist package.
"""

import argparse
from typing import List, Optional

from .config import LogNormalConfig
from .errors import InvalidArgumentError

STATISTICS = (
    "mean",
    "median",
    "mode",
    "variance",
    "stdev",
    "skewness",
    "kurtosis",
    "entropy",
)

EVALUATORS = ("cdf", "logcdf", "pdf", "logpdf", "quantile")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Lognormal distribution - summary statistics and pointwise evaluation"
    )

    parser.add_argument(
        "--mu",
        type=float,
        default=LogNormalConfig.mu,
        help="Location parameter (mean of the underlying normal)"
    )

    parser.add_argument(
        "--sigma",
        type=float,
        default=LogNormalConfig.sigma,
        help="Scale parameter (standard deviation of the underlying normal)"
    )

    for evaluator in EVALUATORS:
        metavar = "P" if evaluator == "quantile" else "X"
        parser.add_argument(
            f"--{evaluator}",
            type=float,
            action="append",
            default=[],
            metavar=metavar,
            help=f"Evaluate {evaluator} at {metavar} (repeatable)"
        )

    parser.add_argument(
        "--precision",
        type=int,
        default=6,
        help="Significant digits in printed values"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.precision < 1:
        parser.error("--precision must be >= 1")

    try:
        dist = LogNormalConfig(mu=args.mu, sigma=args.sigma).build()
    except InvalidArgumentError as exc:
        parser.error(str(exc))

    fmt = f"{{:.{args.precision}g}}"

    print(f"Distribution: {dist}")
    for stat in STATISTICS:
        print(f"{stat:>9}: {fmt.format(getattr(dist, stat))}")

    for evaluator in EVALUATORS:
        method = getattr(dist, evaluator)
        for value in getattr(args, evaluator):
            print(f"{evaluator}({value:g}) = {fmt.format(method(value))}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())

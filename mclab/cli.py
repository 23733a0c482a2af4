"""Command-line entry point running the simulation exercises."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from mclab import lesson1, lesson23
from mclab.rng import from_files


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mclab", description="Run Monte Carlo simulation exercises."
    )
    parser.add_argument("--primes", default="Primes", help="file with the two primes")
    parser.add_argument("--seed", default="seed.in", help="file with RANDOMSEED")
    parser.add_argument("--outdir", default=".", help="directory for result files")
    parser.add_argument(
        "--seed-out", default="seed.out", help="where to save the final seed"
    )
    parser.add_argument(
        "--lesson",
        choices=("1", "2", "3", "all"),
        default="all",
        help="which exercises to run",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the chosen exercises; return the process exit status."""
    args = _parser().parse_args(argv)
    try:
        rng = from_files(args.primes, args.seed)
    except (OSError, ValueError) as exc:
        print(f"PROBLEM: {exc}", file=sys.stderr)
        return 1

    runners = {
        "1": lesson1.run_lesson1,
        "2": lesson23.run_lesson2,
        "3": lesson23.run_lesson3,
    }
    chosen = sorted(runners) if args.lesson == "all" else [args.lesson]
    outdir = Path(args.outdir)
    for key in chosen:
        for path in runners[key](rng, outdir):
            print(path)

    try:
        rng.save_seed(args.seed_out)
    except OSError as exc:
        print(f"PROBLEM: Unable to open {args.seed_out}: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
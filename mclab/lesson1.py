"""Uniform-generator checks, central-limit sums and Buffon's needle."""

from __future__ import annotations

import math
from collections.abc import Sequence
from enum import Enum
from os import PathLike
from pathlib import Path
from typing import Union

from mclab.rng import Random
from mclab.stats import BlockResult, block_stat, block_stat_pi, write_progressive, write_values

PathType = Union[str, "PathLike[str]"]

THROWS = 100000
BLOCKS = 100
BINS = 100
TRIALS = 100
PARTIAL_SAMPLES = 10000
PARTIAL_SIZES = (1, 2, 10, 100)
PI_THROWS = 100000
PI_BLOCKS = 500
NEEDLE_LENGTH = 1 - 0.223


class Distribution(str, Enum):
    """Distributions whose partial sums can be sampled."""

    UNIFORM = "uniform"
    EXPONENTIAL = "exp"
    LORENTZ = "lorentz"


def uniform_mean(rng: Random, throws: int = THROWS, blocks: int = BLOCKS) -> BlockResult:
    """Blocking analysis of the mean of uniform numbers in [0, 1)."""
    return block_stat([rng.rannyu() for _ in range(throws)], blocks)


def uniform_variance(
    rng: Random, throws: int = THROWS, blocks: int = BLOCKS
) -> BlockResult:
    """Blocking analysis of the variance of uniform numbers in [0, 1)."""
    return block_stat([(rng.rannyu() - 0.5) ** 2 for _ in range(throws)], blocks)


def chi_squared(
    rng: Random, bins: int = BINS, trials: int = TRIALS, throws: int = THROWS
) -> list[float]:
    """Chi-squared of uniform draws histogrammed into ``bins`` bins, once per trial."""
    if bins <= 0 or throws <= 0:
        raise ValueError("bins and throws must be positive")
    expected = throws // bins
    results = []
    for _ in range(trials):
        counts = [0] * bins
        for _ in range(throws):
            counts[math.floor(rng.rannyu() * bins)] += 1
        total = sum((c - expected) ** 2 for c in counts)
        results.append(bins * total / throws)
    return results


def partial_sums(
    rng: Random,
    kind: Union[str, Distribution],
    samples: int = PARTIAL_SAMPLES,
    sizes: Sequence[int] = PARTIAL_SIZES,
) -> list[list[float]]:
    """Rows of sample means of ``n`` draws, one column per ``n`` in ``sizes``."""
    dist = Distribution(kind)
    if any(n <= 0 for n in sizes):
        raise ValueError("sizes must be positive")
    draws = {
        Distribution.UNIFORM: rng.rannyu,
        Distribution.EXPONENTIAL: lambda: rng.exp(1.0),
        Distribution.LORENTZ: lambda: rng.lorentz(0.0, 1.0),
    }
    draw = draws[dist]
    return [
        [sum(draw() for _ in range(n)) / n for n in sizes] for _ in range(samples)
    ]


def buffon_pi(
    rng: Random,
    throws: int = PI_THROWS,
    blocks: int = PI_BLOCKS,
    needle_length: float = NEEDLE_LENGTH,
) -> BlockResult:
    """Blocking analysis of Buffon-needle estimates of pi."""
    if blocks <= 0:
        raise ValueError("number of blocks must be positive")
    half = needle_length
    x1: list[float] = []
    y2: list[float] = []
    for _ in range(throws):
        x1.append(rng.rannyu())
        y2.append(rng.uniform(-half, half))
    x2: list[float] = []
    for centre, y in zip(x1, y2):
        if abs(y) == half:
            x2.append(centre)
        else:
            reach = math.sqrt(half**2 - y**2)
            x2.append(reach if rng.uniform(-1.0, 1.0) > 0 else -reach)
    return block_stat_pi(blocks, half, int(throws / blocks), x1, x2, y2)


def _write_rows(path: Path, rows: list[list[float]]) -> None:
    with path.open("w") as out:
        for i, row in enumerate(rows, start=1):
            out.write(",".join([str(i), *(format(v, ".6g") for v in row)]) + "\n")


def run_lesson1(rng: Random, outdir: PathType) -> list[Path]:
    """Run all lesson-one exercises and write their result files to ``outdir``."""
    target = Path(outdir)
    target.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []

    for name, analysis in (("Out1.dat", uniform_mean), ("Out2.dat", uniform_variance)):
        result = analysis(rng, THROWS, BLOCKS)
        path = target / name
        write_progressive(path, result.progressive, result.errors, BLOCKS)
        written.append(path)

    path = target / "Out3.dat"
    write_values(path, chi_squared(rng, BINS, TRIALS, THROWS))
    written.append(path)

    for name, dist in (
        ("Unif", Distribution.UNIFORM),
        ("Exp", Distribution.EXPONENTIAL),
        ("Lor", Distribution.LORENTZ),
    ):
        path = target / name
        _write_rows(path, partial_sums(rng, dist, PARTIAL_SAMPLES, PARTIAL_SIZES))
        written.append(path)

    result = buffon_pi(rng, PI_THROWS, PI_BLOCKS, NEEDLE_LENGTH)
    path = target / "Pi.dat"
    write_progressive(path, result.progressive, result.errors, PI_BLOCKS)
    written.append(path)
    return written
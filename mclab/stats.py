"""Descriptive statistics, blocking analysis and result writers."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from itertools import accumulate, islice
from os import PathLike
from pathlib import Path
from typing import Union

PathType = Union[str, "PathLike[str]"]

# Only this many leading pairs enter the cross moment of ``correlation``.
_CORRELATION_PAIRS = 10000


@dataclass
class BlockResult:
    """Per-block averages and their progressive averages with uncertainties."""

    averages: list[float] = field(default_factory=list)
    squared_averages: list[float] = field(default_factory=list)
    progressive: list[float] = field(default_factory=list)
    progressive_squared: list[float] = field(default_factory=list)
    errors: list[float] = field(default_factory=list)


def _as_list(values: Iterable[float]) -> list[float]:
    items = list(values)
    if not items:
        raise ValueError("empty sequence")
    return items


def mean(values: Iterable[float]) -> float:
    """Arithmetic mean."""
    items = _as_list(values)
    return sum(items) / len(items)


def median(values: Iterable[float]) -> float:
    """Median; the average of the two central values for even lengths."""
    items = sorted(_as_list(values))
    half = len(items) // 2
    if len(items) % 2 == 0:
        return (items[half] + items[half - 1]) / 2
    return float(items[half])


def variance(values: Iterable[float]) -> float:
    """Population variance."""
    items = _as_list(values)
    centre = mean(items)
    return sum((v - centre) ** 2 for v in items) / len(items)


def sigma(values: Iterable[float]) -> float:
    """Standard deviation as sqrt(<x^2> - <x>^2)."""
    items = _as_list(values)
    spread = mean(v**2 for v in items) - mean(items) ** 2
    return math.sqrt(spread) if spread >= 0 else math.nan


def correlation(x: Sequence[float], y: Sequence[float]) -> float:
    """Pearson correlation coefficient of two samples."""
    products = [a * b for a, b in islice(zip(x, y), _CORRELATION_PAIRS)]
    return (mean(products) - mean(x) * mean(y)) / (sigma(x) * sigma(y))


def std_dev(values: Iterable[float]) -> float:
    """Population standard deviation."""
    return math.sqrt(variance(values))


def sample_std_dev(values: Iterable[float]) -> float:
    """Sample standard deviation with the n - 1 denominator."""
    items = _as_list(values)
    if len(items) < 2:
        raise ValueError("sample standard deviation needs at least two values")
    centre = mean(items)
    return math.sqrt(sum((v - centre) ** 2 for v in items) / (len(items) - 1))


def get_max(values: Iterable[float]) -> float:
    """Largest value, never below zero."""
    return float(max(0.0, *values)) if values else 0.0


def get_min(values: Iterable[float]) -> float:
    """Smallest value, never above zero."""
    return float(min(0.0, *values)) if values else 0.0


def progressive_error(ave: Sequence[float], ave2: Sequence[float], n: int) -> float:
    """Statistical uncertainty after ``n + 1`` blocks from progressive averages."""
    if n == 0:
        return 0.0
    spread = (ave2[n] - ave[n] ** 2) / n
    if math.isnan(spread) or spread < 0:
        return math.nan
    return math.sqrt(spread)


def _from_block_averages(averages: list[float]) -> BlockResult:
    squared = [a**2 for a in averages]
    progressive = [s / (i + 1) for i, s in enumerate(accumulate(averages))]
    progressive_squared = [s / (i + 1) for i, s in enumerate(accumulate(squared))]
    errors = [
        progressive_error(progressive, progressive_squared, i)
        for i in range(len(averages))
    ]
    return BlockResult(averages, squared, progressive, progressive_squared, errors)


def block_stat(data: Sequence[float], n_blocks: int) -> BlockResult:
    """Split ``data`` into ``n_blocks`` equal blocks and run the blocking analysis."""
    if n_blocks <= 0:
        raise ValueError("number of blocks must be positive")
    size = len(data) // n_blocks
    if size == 0:
        raise ValueError(f"{len(data)} values cannot fill {n_blocks} blocks")
    averages = [
        sum(data[start : start + size]) / size
        for start in range(0, n_blocks * size, size)
    ]
    return _from_block_averages(averages)


def needle_crosses(x1: float, x2: float, y2: float) -> bool:
    """Whether a needle end at ``x2`` lies outside the unit strip containing ``x1``."""
    right = int(x1) + 1
    left = int(x1)
    return x2 > right or x2 < left


def block_stat_pi(
    n_blocks: int,
    length: float,
    block_size: int,
    x1: Sequence[float],
    x2: Sequence[float],
    y2: Sequence[float],
) -> BlockResult:
    """Blocking analysis of Buffon-needle estimates of pi."""
    if block_size <= 0:
        raise ValueError("block size must be positive")
    needed = n_blocks * block_size
    if min(len(x1), len(x2), len(y2)) < needed:
        raise IndexError(f"need {needed} throws for {n_blocks} blocks")
    averages = []
    for start in range(0, needed, block_size):
        hits = sum(
            needle_crosses(a, b, c)
            for a, b, c in zip(
                x1[start : start + block_size],
                x2[start : start + block_size],
                y2[start : start + block_size],
            )
        )
        averages.append((2 * length * block_size) / hits if hits else math.inf)
    return _from_block_averages(averages)


def _fmt(value: float) -> str:
    return format(value, ".6g")


def write_progressive(
    path: PathType, means: Sequence[float], errors: Sequence[float], size: int
) -> None:
    """Write ``size`` lines of ``index mean error``."""
    if size > len(means) or size > len(errors):
        raise IndexError(f"cannot write {size} rows from shorter sequences")
    with Path(path).open("w") as out:
        for i, (m, e) in enumerate(zip(means[:size], errors[:size])):
            out.write(f"{i} {_fmt(m)} {_fmt(e)}\n")


def write_values(path: PathType, values: Iterable[float]) -> None:
    """Write one value per line."""
    with Path(path).open("w") as out:
        for value in values:
            out.write(f"{_fmt(value)}\n")
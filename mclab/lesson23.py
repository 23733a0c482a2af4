"""Monte Carlo integration, option pricing and random-walk exercises."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from os import PathLike
from pathlib import Path
from typing import Union

from mclab.functions import Cosine, Line
from mclab.integration import importance_sampling, mean_integral
from mclab.randomwalk import distances_by_step, walk_continuum, walk_lattice
from mclab.rng import Random
from mclab.stats import BlockResult, block_stat, write_progressive

PathType = Union[str, "PathLike[str]"]
Walker = Callable[[int, Random], list[float]]

INTEGRAL_ESTIMATES = 500000
INTEGRAL_BLOCKS = 500
INTEGRAL_POINTS = 1000
INTEGRAND = Cosine(math.pi / 2, math.pi / 2, 0.0, 0.0)
SAMPLING_PDF = Line(-2.0, 2.0)

OPTION_THROWS = 100000
OPTION_BLOCKS = 100
OPTION_STEPS = 100
ASSET_PRICE = 100.0
EXPIRY = 1.0
STRIKE = 100.0
RATE = 0.1
VOLATILITY = 0.25

WALKS = 100000
WALK_BLOCKS = 100
WALK_LENGTH = 100

WALKERS: dict[str, Walker] = {
    "lattice": walk_lattice,
    "continuum": walk_continuum,
}


def integral_estimates(
    rng: Random,
    estimates: int = INTEGRAL_ESTIMATES,
    blocks: int = INTEGRAL_BLOCKS,
    points: int = INTEGRAL_POINTS,
) -> tuple[BlockResult, BlockResult]:
    """Blocking analysis of the integral of (pi/2) cos(pi x / 2) on [0, 1].

    Returns the results of the mean method and of importance sampling.
    """
    plain = [
        mean_integral(INTEGRAND, 0.0, 1.0, points, rng) for _ in range(estimates)
    ]
    weighted = [
        importance_sampling(INTEGRAND, SAMPLING_PDF, 0.0, 1.0, points, rng)
        for _ in range(estimates)
    ]
    return block_stat(plain, blocks), block_stat(weighted, blocks)


def _price_options(
    finals: Sequence[float], strike: float, rate: float, expiry: float, blocks: int
) -> tuple[BlockResult, BlockResult]:
    discount = math.exp(-rate * expiry)
    calls = [discount * max(s - strike, 0.0) for s in finals]
    puts = [discount * max(strike - s, 0.0) for s in finals]
    return block_stat(calls, blocks), block_stat(puts, blocks)


def option_prices_direct(
    rng: Random,
    throws: int = OPTION_THROWS,
    blocks: int = OPTION_BLOCKS,
    s0: float = ASSET_PRICE,
    expiry: float = EXPIRY,
    strike: float = STRIKE,
    rate: float = RATE,
    volatility: float = VOLATILITY,
) -> tuple[BlockResult, BlockResult]:
    """Call and put prices from the asset price sampled directly at expiry."""
    sigma2 = volatility**2
    finals = [rng.gbm_direct(expiry, s0, rate, sigma2) for _ in range(throws)]
    return _price_options(finals, strike, rate, expiry, blocks)


def option_prices_discrete(
    rng: Random,
    throws: int = OPTION_THROWS,
    blocks: int = OPTION_BLOCKS,
    steps: int = OPTION_STEPS,
    s0: float = ASSET_PRICE,
    expiry: float = EXPIRY,
    strike: float = STRIKE,
    rate: float = RATE,
    volatility: float = VOLATILITY,
) -> tuple[BlockResult, BlockResult]:
    """Call and put prices from asset paths advanced in ``steps`` time steps."""
    if steps <= 0:
        raise ValueError("number of steps must be positive")
    sigma2 = volatility**2
    dt = expiry / steps
    finals = []
    for _ in range(throws):
        price = s0
        for _ in range(steps):
            price = rng.gbm_step(dt, price, rate, sigma2)
        finals.append(price)
    return _price_options(finals, strike, rate, expiry, blocks)


def walk_distances(
    rng: Random,
    walker: Union[str, Walker],
    walks: int = WALKS,
    blocks: int = WALK_BLOCKS,
    length: int = WALK_LENGTH,
) -> tuple[list[float], list[float]]:
    """Mean distance from the origin at each step, with its uncertainty."""
    if isinstance(walker, str):
        try:
            walk = WALKERS[walker]
        except KeyError:
            raise ValueError(f"unknown walker {walker!r}") from None
    else:
        walk = walker
    if blocks < length:
        raise IndexError(f"{blocks} blocks cannot report {length} steps")
    per_step = distances_by_step([walk(length, rng) for _ in range(walks)])
    distances: list[float] = []
    errors: list[float] = []
    for i, values in enumerate(per_step):
        result = block_stat(values, blocks)
        distances.append(result.progressive[i])
        errors.append(result.errors[i])
    return distances, errors


def run_lesson2(rng: Random, outdir: PathType) -> list[Path]:
    """Run the integration and random-walk exercises and write their result files."""
    target = Path(outdir)
    target.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []

    plain, weighted = integral_estimates(
        rng, INTEGRAL_ESTIMATES, INTEGRAL_BLOCKS, INTEGRAL_POINTS
    )
    for name, result in (("Media.dat", plain), ("ImpSampling.dat", weighted)):
        path = target / name
        write_progressive(path, result.progressive, result.errors, INTEGRAL_BLOCKS)
        written.append(path)

    for name, walker in (("RWZ3.dat", "lattice"), ("RWR3.dat", "continuum")):
        distances, errors = walk_distances(
            rng, walker, WALKS, WALK_BLOCKS, WALK_LENGTH
        )
        path = target / name
        write_progressive(path, distances, errors, WALK_LENGTH)
        written.append(path)
    return written


def run_lesson3(rng: Random, outdir: PathType) -> list[Path]:
    """Run the option-pricing exercises and write their result files."""
    target = Path(outdir)
    target.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []

    direct = option_prices_direct(
        rng, OPTION_THROWS, OPTION_BLOCKS, ASSET_PRICE, EXPIRY, STRIKE, RATE, VOLATILITY
    )
    discrete = option_prices_discrete(
        rng,
        OPTION_THROWS,
        OPTION_BLOCKS,
        OPTION_STEPS,
        ASSET_PRICE,
        EXPIRY,
        STRIKE,
        RATE,
        VOLATILITY,
    )
    for suffix, (call, put) in (("1", direct), ("2", discrete)):
        for kind, result in (("Call", call), ("Put", put)):
            path = target / f"{kind}OptionPrice_{suffix}.dat"
            write_progressive(path, result.progressive, result.errors, OPTION_BLOCKS)
            written.append(path)
    return written
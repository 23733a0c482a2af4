"""Monte Carlo estimates of one-dimensional integrals."""

from __future__ import annotations

from collections.abc import Callable

from mclab.rng import Random

RealFunction = Callable[[float], float]


def _check_points(points: int) -> None:
    if points <= 0:
        raise ValueError("number of points must be positive")


def mean_integral(
    f: RealFunction, xmin: float, xmax: float, points: int, rng: Random
) -> float:
    """Integral of ``f`` on [xmin, xmax] from its mean over uniform samples."""
    _check_points(points)
    total = sum(f(rng.uniform(xmin, xmax)) for _ in range(points))
    return (total / points) * (xmax - xmin)


def importance_sampling(
    f: RealFunction,
    pdf: RealFunction,
    xmin: float,
    xmax: float,
    points: int,
    rng: Random,
) -> float:
    """Integral of ``f`` on [xmin, xmax] weighted by samples of the linear density."""
    _check_points(points)
    total = 0.0
    for _ in range(points):
        x = rng.sample_linear_pdf(xmin, xmax)
        total += f(x) / pdf(x)
    return (total / points) * (xmax - xmin)
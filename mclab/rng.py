"""Portable 48-bit linear congruential generator and the samplers built on it."""

from __future__ import annotations

import math
from collections.abc import Sequence
from os import PathLike
from pathlib import Path
from typing import Union

PathType = Union[str, "PathLike[str]"]

_MULTIPLIERS = (502, 1521, 4071, 2107)
_BASE = 4096
_TWO_M12 = 0.000244140625
# Value of pi used by the Cauchy sampler.
_PI = 3.14159265


class Random:
    """Generator whose state is four 12-bit limbs plus a two-prime increment."""

    def __init__(self, seed: Sequence[int], p1: int, p2: int) -> None:
        self.set_random(seed, p1, p2)

    def set_random(self, seed: Sequence[int], p1: int, p2: int) -> None:
        """Reset the generator to the given four seeds and primes."""
        seed = tuple(int(s) for s in seed)
        if len(seed) != 4:
            raise ValueError(f"expected 4 seed values, got {len(seed)}")
        self._m1, self._m2, self._m3, self._m4 = _MULTIPLIERS
        self._l1, self._l2, self._l3, self._l4 = seed
        self._n1 = 0
        self._n2 = 0
        self._n3 = int(p1)
        self._n4 = int(p2)

    def state(self) -> tuple[int, int, int, int]:
        """Return the current four seed limbs."""
        return (self._l1, self._l2, self._l3, self._l4)

    def save_seed(self, path: PathType) -> None:
        """Write the current seed limbs to ``path`` on one line."""
        Path(path).write_text(" ".join(str(v) for v in self.state()) + "\n")

    def rannyu(self) -> float:
        """Return the next uniform number in [0, 1)."""
        l1, l2, l3, l4 = self._l1, self._l2, self._l3, self._l4
        m1, m2, m3, m4 = self._m1, self._m2, self._m3, self._m4
        i1 = l1 * m4 + l2 * m3 + l3 * m2 + l4 * m1 + self._n1
        i2 = l2 * m4 + l3 * m3 + l4 * m2 + self._n2
        i3 = l3 * m4 + l4 * m3 + self._n3
        i4 = l4 * m4 + self._n4
        l4 = i4 % _BASE
        i3 += i4 // _BASE
        l3 = i3 % _BASE
        i2 += i3 // _BASE
        l2 = i2 % _BASE
        l1 = (i1 + i2 // _BASE) % _BASE
        self._l1, self._l2, self._l3, self._l4 = l1, l2, l3, l4
        return _TWO_M12 * (l1 + _TWO_M12 * (l2 + _TWO_M12 * (l3 + _TWO_M12 * l4)))

    def uniform(self, low: float, high: float) -> float:
        """Return a uniform number in [low, high)."""
        return low + (high - low) * self.rannyu()

    def gauss(self, mean: float, sigma: float) -> float:
        """Return a normal deviate by the Box-Muller transform."""
        s = self.rannyu()
        t = self.rannyu()
        x = math.sqrt(-2.0 * math.log(1.0 - s)) * math.cos(2.0 * math.pi * t)
        return mean + x * sigma

    def exp(self, rate: float) -> float:
        """Return an exponential deviate with the given rate."""
        y = self.rannyu()
        return -(1.0 / rate) * math.log(1.0 - y)

    def lorentz(self, mu: float, gamma: float) -> float:
        """Return a Cauchy deviate centred on ``mu`` with half-width ``gamma``."""
        y = self.rannyu()
        return gamma * math.tan(_PI * (y - 0.5)) + mu

    def choice(self, low: float, high: float) -> float:
        """Return ``low`` or ``high`` with equal probability."""
        x = self.uniform(-1.0, 1.0)
        while x == 0:
            x = self.rannyu()
        return high if x > 0 else low

    def randint(self, low: float, high: float) -> int:
        """Return a uniform number in [low, high) truncated toward zero."""
        return int(self.uniform(low, high))

    def sample_linear_pdf(self, xmin: float, xmax: float) -> float:
        """Inverse-cumulative sample for the linear density 2(1 - x), scaled to [xmin, xmax]."""
        return xmin + (xmax - xmin) * (1.0 + math.sqrt(1.0 - self.rannyu()))

    def gbm_direct(self, t: float, s0: float, mu: float, sigma2: float) -> float:
        """Sample geometric Brownian motion at time ``t`` in one step."""
        a = math.exp((mu - 0.5 * sigma2) * t)
        b = math.exp(math.sqrt(sigma2) * self.gauss(0.0, t))
        return s0 * a * b

    def gbm_step(self, t: float, s0: float, mu: float, sigma2: float) -> float:
        """Advance geometric Brownian motion from ``s0`` by a time step ``t``."""
        a = math.exp((mu - 0.5 * sigma2) * t)
        b = math.exp(math.sqrt(sigma2) * self.gauss(0.0, 1.0) * math.sqrt(t))
        return s0 * a * b


def read_primes(path: PathType) -> tuple[int, int]:
    """Read the first two integers of a primes file."""
    tokens = Path(path).read_text().split()
    if len(tokens) < 2:
        raise ValueError(f"{path}: expected two primes")
    return int(tokens[0]), int(tokens[1])


def read_seed(path: PathType) -> tuple[int, int, int, int]:
    """Read the four integers following the last RANDOMSEED keyword."""
    tokens = Path(path).read_text().split()
    seed: tuple[int, int, int, int] | None = None
    for pos, token in enumerate(tokens):
        if token == "RANDOMSEED":
            values = tokens[pos + 1 : pos + 5]
            if len(values) != 4:
                raise ValueError(f"{path}: RANDOMSEED needs four values")
            seed = (int(values[0]), int(values[1]), int(values[2]), int(values[3]))
    if seed is None:
        raise ValueError(f"{path}: no RANDOMSEED entry")
    return seed


def from_files(primes_path: PathType, seed_path: PathType) -> Random:
    """Build a generator from a primes file and a seed file."""
    p1, p2 = read_primes(primes_path)
    return Random(read_seed(seed_path), p1, p2)
"""Real functions of one variable, including Black-Scholes option prices."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass


def _fmt(value: float) -> str:
    return format(value, ".6g")


class Function(ABC):
    """A function that can be evaluated at a point."""

    @abstractmethod
    def eval(self, x: float) -> float:
        """Value of the function at ``x``."""

    def __call__(self, x: float) -> float:
        return self.eval(x)


@dataclass
class Parabola(Function):
    """a x^2 + b x + c."""

    a: float
    b: float
    c: float

    def eval(self, x: float) -> float:
        return self.a * x * x + self.b * x + self.c

    def inverse(self, x: float) -> float:
        """Inverse cumulative of the density 2(1 - x) on [0, 1]."""
        return 1 - math.sqrt(1 - x)

    def __str__(self) -> str:
        return f"f(x) = {_fmt(self.a)}x^2 + {_fmt(self.b)}x + {_fmt(self.c)}"


@dataclass
class Cosine(Function):
    """a cos(b x + c) + d."""

    a: float = 0.0
    b: float = 1.0
    c: float = 0.0
    d: float = 0.0

    def eval(self, x: float) -> float:
        return self.a * math.cos(self.b * x + self.c) + self.d

    def __str__(self) -> str:
        return (
            f"f(x) = {_fmt(self.a)}cos({_fmt(self.b)}x + {_fmt(self.c)})"
            f" + {_fmt(self.d)}"
        )


@dataclass
class Line(Function):
    """a x + b."""

    a: float = 0.0
    b: float = 0.0

    def eval(self, x: float) -> float:
        return self.a * x + self.b

    def inverse(self, x: float) -> float:
        """Inverse cumulative of the density 2(1 - x) on [0, 1]."""
        return 1 - math.sqrt(1 - x)

    def __str__(self) -> str:
        return f"f(x) = {_fmt(self.a)}x + {_fmt(self.b)}"


def _ratio(num: float, den: float) -> float:
    if den == 0:
        if num == 0 or math.isnan(num):
            return math.nan
        return math.copysign(math.inf, num)
    return num / den


@dataclass
class _Option(Function):
    expiry: float
    sigma: float
    strike: float
    price: float
    rate: float

    def _terms(self, t: float) -> tuple[float, float, float]:
        if not 0 <= t <= 1:
            raise ValueError(f"time {t} outside the model range [0, 1]")
        tau = self.expiry - t
        root = math.sqrt(tau) if tau >= 0 else math.nan
        d1 = _ratio(
            math.log(self.price / self.strike) + (self.rate + 0.5 * tau * self.sigma**2),
            self.sigma * root,
        )
        d2 = d1 - self.sigma * root
        n1 = 0.5 * (1 + math.erf(d1 / math.sqrt(2)))
        n2 = 0.5 * (1 + math.erf(d2 / math.sqrt(2)))
        discount = self.strike * math.exp(-tau * self.rate)
        return n1, n2, discount


class CallOption(_Option):
    """Black-Scholes price of a European call at time ``t``."""

    def eval(self, t: float) -> float:
        n1, n2, discount = self._terms(t)
        return self.price * n1 - discount * n2


class PutOption(_Option):
    """Black-Scholes price of a European put at time ``t``."""

    def eval(self, t: float) -> float:
        n1, n2, discount = self._terms(t)
        return self.price * (n1 - 1) - discount * (n2 - 1)
"""Points in three-dimensional space."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """A point with Cartesian coordinates."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def r(self) -> float:
        """Spherical radius."""
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    def phi(self) -> float:
        """Azimuth as atan(y / x)."""
        if self.x == 0:
            if self.y == 0:
                return math.nan
            return math.copysign(math.pi / 2, self.y)
        return math.atan(self.y / self.x)

    def theta(self) -> float:
        """Polar angle measured from the z axis."""
        radius = self.r()
        if radius == 0:
            return math.nan
        return math.acos(self.z / radius)

    def rho(self) -> float:
        """Cylindrical radius."""
        return math.sqrt(self.x**2 + self.y**2)

    def distance(self, other: Position) -> float:
        """Euclidean distance to ``other``."""
        return math.sqrt(
            (other.x - self.x) ** 2 + (other.y - self.y) ** 2 + (other.z - self.z) ** 2
        )

    def __add__(self, other: Position) -> Position:
        if not isinstance(other, Position):
            return NotImplemented
        return Position(self.x + other.x, self.y + other.y, self.z + other.z)

    def __truediv__(self, divisor: float) -> Position:
        return Position(self.x / divisor, self.y / divisor, self.z / divisor)
"""Random walks in three dimensions, on a cubic lattice and in the continuum."""

from __future__ import annotations

import math
from collections.abc import Sequence

from mclab.position import Position
from mclab.rng import Random

_STEP = 1.0


def _distances(trajectory: list[Position], length: int) -> list[float]:
    origin = trajectory[0]
    return [point.distance(origin) for point in trajectory[:length]]


def walk_lattice(length: int, rng: Random) -> list[float]:
    """Distances from the origin of a lattice walk, one per step before it is taken."""
    moves = [(rng.randint(1, 4), int(rng.choice(-1, 1))) for _ in range(length)]
    trajectory = [Position(0.0, 0.0, 0.0)]
    for axis, sign in moves:
        here = trajectory[-1]
        delta = sign * _STEP
        if axis == 1:
            trajectory.append(Position(here.x + delta, here.y, here.z))
        elif axis == 2:
            trajectory.append(Position(here.x, here.y + delta, here.z))
        elif axis == 3:
            trajectory.append(Position(here.x, here.y, here.z + delta))
        else:
            raise RuntimeError(f"invalid lattice axis {axis}")
    return _distances(trajectory, length)


def walk_continuum(length: int, rng: Random) -> list[float]:
    """Distances from the origin of a walk with unit steps in random directions."""
    trajectory = [Position(0.0, 0.0, 0.0)]
    for _ in range(length):
        theta = math.acos(1 - 2 * rng.uniform(0.0, 1.0))
        phi = 2 * math.pi * rng.uniform(0.0, 1.0)
        step = Position(
            _STEP * math.sin(theta) * math.cos(phi),
            _STEP * math.sin(theta) * math.sin(phi),
            _STEP * math.cos(theta),
        )
        trajectory.append(trajectory[-1] + step)
    return _distances(trajectory, length)


def distances_by_step(walks: Sequence[Sequence[float]]) -> list[list[float]]:
    """Regroup per-walk distances into per-step lists across all walks."""
    return [list(step) for step in zip(*walks, strict=True)]
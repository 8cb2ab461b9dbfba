"""
Fixed-step gravitational integrator.

Integrates with semi-implicit Euler:
    velocity += acceleration * dt
    position += velocity * dt
i.e. the position update uses next-step's velocity. First-order, but
symplectic: energy error oscillates instead of drifting.

Pairwise forces are O(n^2); meant for tens of bodies, not thousands.
"""

import math
from typing import Sequence, Tuple

import numpy as np
from numba import njit

from .planet import Planet


class DegenerateGeometryError(ArithmeticError):
    """The step cannot produce a finite planet set."""


class CoincidentPlanetsError(DegenerateGeometryError):
    """Two planets are too close for the force between them to be computed."""

    def __init__(self, first: int, second: int):
        super().__init__(f"Planets #{first} and #{second} occupy the same position")
        self.first = first
        self.second = second


@njit(cache=True)
def compute_accelerations(positions: np.ndarray, masses: np.ndarray,
                          accelerations: np.ndarray) -> int:
    """
    Fill accelerations with the pull of every other body.

    Returns -1 on success, or i * n + j for the first pair (i, j) so close
    that r^3 underflows to zero. accelerations is left partially filled
    in that case.
    """
    n = positions.shape[0]
    for i in range(n):
        ax = 0.0
        ay = 0.0
        for j in range(n):
            if i == j:
                continue
            dx = positions[j, 0] - positions[i, 0]
            dy = positions[j, 1] - positions[i, 1]
            dist_sq = dx * dx + dy * dy
            denom = dist_sq * math.sqrt(dist_sq)
            if denom == 0.0:
                return i * n + j
            # unit direction * m / r^2
            scale = masses[j] / denom
            ax += dx * scale
            ay += dy * scale
        accelerations[i, 0] = ax
        accelerations[i, 1] = ay
    return -1


def advance(time_step: float, planets: Sequence[Planet]) -> Tuple[Planet, ...]:
    """
    Advance every planet by one time step.

    Raises:
        ValueError: time_step is not positive
        CoincidentPlanetsError: two planets are at (or numerically at) the same position
        DegenerateGeometryError: the step overflows to a non-finite state
    """
    if not time_step > 0:
        raise ValueError(f"Time step must be positive, got {time_step!r}")

    n = len(planets)
    if n == 0:
        return ()

    positions = np.array([p.position for p in planets], dtype=np.float64)
    velocities = np.array([p.velocity for p in planets], dtype=np.float64)
    masses = np.array([p.mass for p in planets], dtype=np.float64)
    accelerations = np.zeros((n, 2), dtype=np.float64)

    collision = compute_accelerations(positions, masses, accelerations)
    if collision >= 0:
        raise CoincidentPlanetsError(*divmod(int(collision), n))

    with np.errstate(over="ignore", invalid="ignore"):
        velocities += accelerations * time_step
        positions += velocities * time_step
    if not (np.isfinite(positions).all() and np.isfinite(velocities).all()):
        raise DegenerateGeometryError("Step overflowed to a non-finite planet state")

    return tuple(
        Planet(
            position=(float(pos[0]), float(pos[1])),
            velocity=(float(vel[0]), float(vel[1])),
            mass=planet.mass,
            color=planet.color,
        )
        for planet, pos, vel in zip(planets, positions, velocities)
    )

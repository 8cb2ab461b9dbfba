"""Planet value type."""

import math
from dataclasses import dataclass
from typing import Tuple

Vector = Tuple[float, float]
Color = Tuple[float, float, float, float]


@dataclass(frozen=True)
class Planet:
    """
    A single gravitating body.

    Attributes:
        position: 2D position in world units
        velocity: 2D velocity in world units per unit of simulated time
        mass: Positive mass (G is normalized to 1)
        color: RGBA color tuple (0-1 range), ignored by the physics
    """
    position: Vector
    velocity: Vector
    mass: float
    color: Color = (1.0, 1.0, 1.0, 1.0)

    def __post_init__(self):
        mass = float(self.mass)
        if not math.isfinite(mass) or mass <= 0.0:
            raise ValueError(f"Planet mass must be positive, got {self.mass!r}")
        # frozen: normalize through object.__setattr__
        object.__setattr__(self, "mass", mass)
        object.__setattr__(self, "position", _vector(self.position, "position"))
        object.__setattr__(self, "velocity", _vector(self.velocity, "velocity"))
        object.__setattr__(self, "color", tuple(float(c) for c in self.color))


def _vector(value, name: str) -> Vector:
    x, y = value
    x, y = float(x), float(y)
    if not (math.isfinite(x) and math.isfinite(y)):
        raise ValueError(f"Planet {name} must be finite, got {value!r}")
    return (x, y)

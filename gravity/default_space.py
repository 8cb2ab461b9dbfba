"""Canonical starting configuration."""

from typing import Tuple

from .planet import Planet

RED = (1.0, 0.0, 0.0, 1.0)
GREEN = (0.0, 1.0, 0.0, 1.0)
BLUE = (0.0, 0.0, 1.0, 1.0)
CYAN = (0.0, 1.0, 1.0, 1.0)


def get_planets() -> Tuple[Planet, ...]:
    """One heavy body at rest plus three light bodies on wider, slower orbits."""
    return (
        Planet(position=(0.0, 0.0), velocity=(0.0, 0.0), mass=200.0, color=RED),
        Planet(position=(100.0, 0.0), velocity=(0.0, 1.3), mass=5.0, color=GREEN),
        Planet(position=(200.0, 0.0), velocity=(0.0, 1.1), mass=2.0, color=BLUE),
        Planet(position=(300.0, 0.0), velocity=(0.0, 0.9), mass=2.0, color=CYAN),
    )

"""Geometry for drawing planets."""

import numpy as np

CIRCLE_SEGMENTS = 24


def planet_radius(mass: float) -> float:
    """Cube root of mass, but never smaller than one unit."""
    return mass ** (1.0 / 3.0) if mass > 1.0 else 1.0


def circle_vertices(center, radius: float, segments: int = CIRCLE_SEGMENTS) -> np.ndarray:
    """Triangle-fan vertices: the center followed by a closed ring."""
    angles = np.linspace(0.0, 2.0 * np.pi, segments + 1)
    ring = np.column_stack([np.cos(angles), np.sin(angles)]) * radius + np.asarray(center)
    return np.vstack([np.asarray(center, dtype=np.float64), ring])

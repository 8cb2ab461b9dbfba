"""Viewpoint transform derived from the selected references."""

import math
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import numpy as np

from .barycenter import barycenter
from .planet import Planet
from .reference import BARYCENTER, PlanetRef, Reference


@dataclass(frozen=True)
class Viewpoint:
    """
    Content-space transform: translate by -center, then rotate by angle.

    Applied to everything drawn in world space. The output viewport itself
    is not transformed.

    Attributes:
        center: World point placed at the view origin
        angle: Rotation in radians (counter-clockwise in y-up terms)
    """
    center: Tuple[float, float]
    angle: float = 0.0

    def matrix(self) -> np.ndarray:
        """3x3 homogeneous matrix rotate(angle) @ translate(-center)."""
        c, s = math.cos(self.angle), math.sin(self.angle)
        rotate = np.array([
            [c, -s, 0.0],
            [s, c, 0.0],
            [0.0, 0.0, 1.0],
        ])
        translate = np.array([
            [1.0, 0.0, -self.center[0]],
            [0.0, 1.0, -self.center[1]],
            [0.0, 0.0, 1.0],
        ])
        return rotate @ translate

    def apply(self, points) -> np.ndarray:
        """Map world points of shape (n, 2) or (2,) into view space."""
        pts = np.asarray(points, dtype=np.float64)
        flat = pts.reshape(-1, 2)
        homogeneous = np.hstack([flat, np.ones((flat.shape[0], 1))])
        mapped = homogeneous @ self.matrix().T
        return mapped[:, :2].reshape(pts.shape)


def resolve(reference: Reference, planets: Sequence[Planet]) -> Tuple[float, float]:
    """World position of a reference."""
    if isinstance(reference, PlanetRef):
        return planets[reference.index].position
    return barycenter(planets)


def build_viewpoint(planets: Sequence[Planet], centered_at: Reference = BARYCENTER,
                    rotate_with: Optional[Reference] = None) -> Viewpoint:
    """
    Center on centered_at; with a rotation lock, rotate so the rotate_with
    target sits on the positive x axis (to the right of the center).
    """
    center = resolve(centered_at, planets)
    if rotate_with is None:
        return Viewpoint(center=center)

    target = resolve(rotate_with, planets)
    dx = target[0] - center[0]
    dy = target[1] - center[1]
    # Negative: cancel the target's rotation around the center
    angle = -math.atan2(dy, dx) if (dx or dy) else 0.0
    return Viewpoint(center=center, angle=angle)

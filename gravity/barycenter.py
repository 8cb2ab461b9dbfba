"""Mass-weighted center of a planet set."""

from typing import Sequence, Tuple

import numpy as np

from .planet import Planet


def barycenter(planets: Sequence[Planet]) -> Tuple[float, float]:
    if len(planets) == 0:
        raise ValueError("Barycenter of an empty planet set is undefined")
    positions = np.array([p.position for p in planets], dtype=np.float64)
    masses = np.array([p.mass for p in planets], dtype=np.float64)
    center = masses @ positions / masses.sum()
    return float(center[0]), float(center[1])

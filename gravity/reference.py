"""
Viewpoint references and the cycling rules for them.

A reference names either the barycenter or a planet by index. The session
keeps two of them:
- centered_at: what the view is centered on (never absent)
- rotate_with: what the view keeps at a fixed bearing (optional)

rotate_with is never allowed to equal centered_at, since the direction
from a point to itself has no angle.
"""

from dataclasses import dataclass
from typing import List, Optional, Union


@dataclass(frozen=True)
class Barycenter:
    def describe(self) -> str:
        return "barycenter"


@dataclass(frozen=True)
class PlanetRef:
    index: int

    def describe(self) -> str:
        return f"planet #{self.index}"


BARYCENTER = Barycenter()

Reference = Union[Barycenter, PlanetRef]


def is_valid(reference: Optional[Reference], count: int) -> bool:
    """Whether the reference can be resolved against a set of count planets."""
    if isinstance(reference, PlanetRef):
        return 0 <= reference.index < count
    return True


def next_center(current: Reference, count: int) -> Reference:
    """Barycenter -> planet #0 -> ... -> planet #(count-1) -> Barycenter."""
    if isinstance(current, PlanetRef):
        following = current.index + 1
        if 0 <= following < count:
            return PlanetRef(following)
        return BARYCENTER
    return PlanetRef(0) if count > 0 else BARYCENTER


def _rotation_cycle(count: int) -> List[Optional[Reference]]:
    return [None, BARYCENTER] + [PlanetRef(i) for i in range(count)]


def next_rotation(current: Optional[Reference], centered_at: Reference,
                  count: int) -> Optional[Reference]:
    """
    None -> Barycenter -> planet #0 -> ... -> planet #(count-1) -> None,
    stepping past whichever value equals centered_at.

    The cycle always holds None and Barycenter, so one extra step is enough
    to get away from centered_at.
    """
    cycle = _rotation_cycle(count)
    position = cycle.index(current) if current in cycle else 0
    candidate = cycle[(position + 1) % len(cycle)]
    if candidate is not None and candidate == centered_at:
        candidate = cycle[(position + 2) % len(cycle)]
    return candidate


class ReferenceSelector:
    """Owns the centered_at and rotate_with slots."""

    def __init__(self):
        self.centered_at: Reference = BARYCENTER
        self.rotate_with: Optional[Reference] = None

    def cycle_center(self, count: int):
        self.centered_at = next_center(self.centered_at, count)
        # Moving the center onto the rotation target would make the lock degenerate
        if self.rotate_with is not None and self.rotate_with == self.centered_at:
            self.rotate_with = None

    def cycle_rotation(self, count: int):
        self.rotate_with = next_rotation(self.rotate_with, self.centered_at, count)

    def reset(self):
        """Back to defaults; used whenever the planet set is replaced wholesale."""
        self.centered_at = BARYCENTER
        self.rotate_with = None

    def validate(self, count: int) -> bool:
        """
        Reset any slot that names a planet index outside the current set.
        Returns True if something was reset.
        """
        changed = False
        if not is_valid(self.centered_at, count):
            self.centered_at = BARYCENTER
            changed = True
        if not is_valid(self.rotate_with, count):
            self.rotate_with = None
            changed = True
        if self.rotate_with is not None and self.rotate_with == self.centered_at:
            self.rotate_with = None
            changed = True
        return changed

    def describe_center(self) -> str:
        return self.centered_at.describe()

    def describe_rotation(self) -> str:
        if self.rotate_with is None:
            return "no"
        if isinstance(self.rotate_with, PlanetRef):
            return f"fixing planet #{self.rotate_with.index}"
        return self.rotate_with.describe()

"""2D gravitational N-body simulation and viewpoint engine."""

from .planet import Planet
from .integrator import advance, CoincidentPlanetsError, DegenerateGeometryError
from .barycenter import barycenter
from .reference import BARYCENTER, PlanetRef, ReferenceSelector
from .viewpoint import Viewpoint, build_viewpoint
from .persistence import PersistenceError
from .commands import Command
from .session import Session, Status

__all__ = [
    "Planet", "advance", "CoincidentPlanetsError", "DegenerateGeometryError",
    "barycenter",
    "BARYCENTER", "PlanetRef", "ReferenceSelector", "Viewpoint",
    "build_viewpoint", "PersistenceError", "Command", "Session", "Status",
]

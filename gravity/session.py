"""
Simulation session: the single owner of all mutable simulation state.

The driver calls tick() on its schedule and execute() for each decoded
command, strictly one after the other.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from config import gravity as config
from . import default_space, persistence
from .commands import Command
from .integrator import DegenerateGeometryError, advance
from .planet import Planet
from .reference import ReferenceSelector
from .viewpoint import Viewpoint, build_viewpoint


@dataclass(frozen=True)
class Status:
    """Values behind the status overlay; formatting is up to the renderer."""
    paused: bool
    time_step: float
    updates_per_second: float
    requested_updates_per_second: float
    centering: str
    rotation: str
    clear_screen: bool
    planet_count: int


class Session:
    """Planet set, pause flag, time resolution and viewpoint references."""

    def __init__(self, planets: Optional[Sequence[Planet]] = None):
        sim_cfg = config.SIMULATION
        self.planets: Tuple[Planet, ...] = (
            tuple(planets) if planets is not None else default_space.get_planets()
        )
        self.paused = bool(sim_cfg["start_paused"])
        self.time_step = float(sim_cfg["time_step"])
        self.tick_interval = float(sim_cfg["tick_interval"])
        self.clear_screen = True
        self.selector = ReferenceSelector()

    @classmethod
    def from_buffer(cls, buffer: Optional[bytes]) -> "Session":
        """Start from a saved buffer, or from the default system if it is unusable."""
        return cls(persistence.load_or_default(buffer))

    # ------------------------------------------------------------------
    # Ticks
    # ------------------------------------------------------------------

    def tick(self) -> bool:
        """
        Advance the planets once unless paused.
        Returns True if the planet set moved.
        """
        if self.paused:
            return False
        try:
            self.planets = advance(self.time_step, self.planets)
        except DegenerateGeometryError as e:
            # Keep the last good state rather than propagate NaNs
            print(f"[Session] {e}; pausing")
            self.paused = True
            return False
        return True

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def execute(self, command: Command, arg=None):
        """Apply an in-memory command. SAVE and LOAD_NAMED go through save()/load()."""
        if command is Command.TOGGLE_PAUSE:
            self.paused = not self.paused
            print(f"[Session] {'Paused' if self.paused else 'Running'}")
        elif command is Command.SCALE_TIME_STEP:
            self.time_step *= _factor(arg)
        elif command is Command.SCALE_TICK_RATE:
            # More ticks per second means a shorter delay between them
            self.tick_interval /= _factor(arg)
        elif command is Command.CYCLE_CENTER:
            self.selector.cycle_center(len(self.planets))
        elif command is Command.CYCLE_ROTATION:
            self.selector.cycle_rotation(len(self.planets))
        elif command is Command.RESET_DEFAULT:
            self.replace(default_space.get_planets())
        elif command is Command.TOGGLE_TRAILS:
            self.clear_screen = not self.clear_screen
        else:
            raise ValueError(f"Command {command} needs storage, use save()/load()")

    def replace(self, planets: Sequence[Planet]):
        """Swap in a whole new planet set; references go back to defaults."""
        self.planets = tuple(planets)
        self.selector.reset()

    def load(self, buffer: Optional[bytes]):
        self.replace(persistence.load_or_default(buffer))
        print(f"[Session] Loaded {len(self.planets)} planets")

    def save(self) -> bytes:
        return persistence.save(self.planets)

    # ------------------------------------------------------------------
    # Per-frame outputs
    # ------------------------------------------------------------------

    @property
    def requested_updates_per_second(self) -> float:
        return 1.0 / self.tick_interval

    @property
    def updates_per_second(self) -> float:
        """Rate the driver can actually deliver, given its per-frame tick cap."""
        sim_cfg = config.SIMULATION
        ceiling = float(sim_cfg["max_ticks_per_frame"] * sim_cfg["frame_rate"])
        return min(self.requested_updates_per_second, ceiling)

    def viewpoint(self) -> Viewpoint:
        self.selector.validate(len(self.planets))
        return build_viewpoint(self.planets, self.selector.centered_at,
                               self.selector.rotate_with)

    def status(self) -> Status:
        return Status(
            paused=self.paused,
            time_step=self.time_step,
            updates_per_second=self.updates_per_second,
            requested_updates_per_second=self.requested_updates_per_second,
            centering=self.selector.describe_center(),
            rotation=self.selector.describe_rotation(),
            clear_screen=self.clear_screen,
            planet_count=len(self.planets),
        )


def _factor(arg) -> float:
    factor = float(arg)
    if not factor > 0:
        raise ValueError(f"Scale factor must be positive, got {arg!r}")
    return factor

"""Status overlay text."""

from typing import List

from gravity import Status

CONTROLS = [
    "Controls:",
    "----------",
    "<+ -> change update rate, <space> pause",
    "</ *> change time step",
    "<S> save, <L> load",
    "<C> center on planet, <R> rotate with planet",
    "<Tab> toggle screen clearing (planets leave trails)",
    "",
    "Sample systems:",
    "---------------",
    "<F1> default, unstable",
    "<F2> stable, with moon",
    "<F3> stable in L5 point",
    "<F4> binary star",
    "",
]


def status_lines(status: Status) -> List[str]:
    """Controls help followed by the current session values."""
    return CONTROLS + [
        f"Centered at: {status.centering}",
        f"Rotation: {status.rotation}",
        f"Paused: {str(status.paused).lower()}",
        f"Simulation time step: {status.time_step:g}",
        _rate_line(status),
        f"Planets: {status.planet_count}",
    ]


def _rate_line(status: Status) -> str:
    line = f"Update rate: {status.updates_per_second:g} updates/sec"
    if status.updates_per_second < status.requested_updates_per_second:
        line += f" (requested {status.requested_updates_per_second:g})"
    return line

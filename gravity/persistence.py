"""
Planet set (de)serialization.

The buffer is UTF-8 JSON: a list with one object per planet, in order:
    {"position": [x, y], "velocity": [vx, vy], "mass": m, "color": [r, g, b, a]}
There is no versioning; a buffer that does not match is rejected.
"""

import json
from typing import Optional, Sequence, Tuple

from . import default_space
from .planet import Planet

FIELDS = ("position", "velocity", "mass", "color")


class PersistenceError(ValueError):
    """Buffer could not be decoded into a valid planet set."""


def save(planets: Sequence[Planet]) -> bytes:
    """Encode planets to bytes."""
    records = [
        {
            "position": list(planet.position),
            "velocity": list(planet.velocity),
            "mass": planet.mass,
            "color": list(planet.color),
        }
        for planet in planets
    ]
    return json.dumps(records, indent=2).encode("utf-8")


def load(buffer: bytes) -> Tuple[Planet, ...]:
    """
    Decode bytes produced by save().

    Raises:
        PersistenceError: malformed JSON, wrong structure, invalid planet
            values, or an empty set
    """
    try:
        records = json.loads(buffer)
    except (TypeError, RecursionError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise PersistenceError(f"Not a planet buffer: {e}") from e

    if not isinstance(records, list) or not records:
        raise PersistenceError("Expected a non-empty list of planets")

    planets = []
    for index, record in enumerate(records):
        if not isinstance(record, dict) or set(record) != set(FIELDS):
            raise PersistenceError(f"Planet #{index} does not have fields {FIELDS}")
        try:
            position = _pair(record["position"])
            velocity = _pair(record["velocity"])
            color = tuple(record["color"])
            if len(color) != 4:
                raise ValueError("color must have 4 components")
            _reject_bools(color, "color")
            _reject_bools((record["mass"],), "mass")
            planets.append(Planet(position=position, velocity=velocity,
                                  mass=record["mass"], color=color))
        except (TypeError, ValueError, OverflowError) as e:
            raise PersistenceError(f"Planet #{index} is invalid: {e}") from e
    return tuple(planets)


def load_or_default(buffer: Optional[bytes]) -> Tuple[Planet, ...]:
    """Decode buffer, or fall back to the default system when it is missing or invalid."""
    if buffer is None:
        print("[Persistence] No saved system, using default")
        return default_space.get_planets()
    try:
        return load(buffer)
    except PersistenceError as e:
        print(f"[Persistence] {e}; using default system")
        return default_space.get_planets()


def _pair(value):
    if isinstance(value, (str, bytes)) or len(value) != 2:
        raise ValueError(f"expected two components, got {value!r}")
    _reject_bools(value, "vector")
    return tuple(value)


def _reject_bools(values, name: str):
    # JSON true/false would otherwise pass as 1.0/0.0
    if any(isinstance(v, bool) for v in values):
        raise ValueError(f"{name} must be numeric, got {list(values)!r}")

import json

import pytest

from gravity import default_space
from gravity.persistence import PersistenceError, load, load_or_default, save
from gravity.planet import Planet


def test_round_trip_default_system():
    planets = default_space.get_planets()
    assert load(save(planets)) == planets


def test_round_trip_awkward_floats():
    planets = (
        Planet(position=(0.1, -1e-300), velocity=(1 / 3, 2.5e10), mass=7e-5,
               color=(0.2, 0.4, 0.6, 0.8)),
        Planet(position=(-123.456, 0.0), velocity=(0.0, -0.0), mass=1e12),
    )
    assert load(save(planets)) == planets


def test_save_is_json_list():
    records = json.loads(save(default_space.get_planets()))
    assert len(records) == 4
    assert records[0] == {
        "position": [0.0, 0.0],
        "velocity": [0.0, 0.0],
        "mass": 200.0,
        "color": [1.0, 0.0, 0.0, 1.0],
    }


@pytest.mark.parametrize("buffer", [
    b"",
    b"\xff\xfe\x00garbage",
    b"{not json",
    b"{}",
    b"[]",
    b"[1, 2, 3]",
    b'[{"position": [0, 0], "velocity": [0, 0], "mass": 1}]',
    b'[{"position": [0, 0], "velocity": [0, 0], "mass": 0, "color": [1, 1, 1, 1]}]',
    b'[{"position": [0], "velocity": [0, 0], "mass": 1, "color": [1, 1, 1, 1]}]',
    b'[{"position": "ab", "velocity": [0, 0], "mass": 1, "color": [1, 1, 1, 1]}]',
    b'[{"position": [0, 0], "velocity": [0, 0], "mass": "x", "color": [1, 1, 1, 1]}]',
    b'[{"position": [0, 0], "velocity": [0, 0], "mass": 1, "color": [1, 1]}]',
    b"[" * 100000,
    b'[{"position": [0, 0], "velocity": [0, 0], "mass": 1' + b"0" * 400 + b', "color": [1, 1, 1, 1]}]',
    b'[{"position": [0, 0], "velocity": [0, 0], "mass": true, "color": [1, 1, 1, 1]}]',
    b'[{"position": [true, 0], "velocity": [0, 0], "mass": 1, "color": [1, 1, 1, 1]}]',
    b'[{"position": [0, 0], "velocity": [0, 0], "mass": 1, "color": [1, false, 1, 1]}]',
])
def test_corrupted_buffers_rejected(buffer):
    with pytest.raises(PersistenceError):
        load(buffer)


def test_corrupted_buffer_falls_back_to_default():
    assert load_or_default(b"\x00\x01corrupt") == default_space.get_planets()


def test_deeply_nested_buffer_falls_back_to_default():
    assert load_or_default(b"[" * 100000) == default_space.get_planets()


def test_missing_buffer_falls_back_to_default():
    assert load_or_default(None) == default_space.get_planets()


def test_valid_buffer_is_used():
    planets = (Planet(position=(1, 2), velocity=(3, 4), mass=5),)
    assert load_or_default(save(planets)) == planets

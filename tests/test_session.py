import pytest

from config import gravity as config
from gravity import default_space
from gravity.commands import Command
from gravity.persistence import save
from gravity.planet import Planet
from gravity.reference import BARYCENTER, PlanetRef
from gravity.session import Session


def running_session(planets=None):
    session = Session(planets)
    session.execute(Command.TOGGLE_PAUSE)
    return session


def test_starts_paused_on_default_system():
    session = Session()
    assert session.paused
    assert session.planets == default_space.get_planets()
    assert session.selector.centered_at == BARYCENTER
    assert session.selector.rotate_with is None


def test_tick_does_nothing_while_paused():
    session = Session()
    before = session.planets
    assert not session.tick()
    assert session.planets is before


def test_tick_advances_when_running():
    session = running_session()
    before = session.planets
    assert session.tick()
    assert session.planets != before
    assert len(session.planets) == len(before)


def test_tick_preserves_references():
    session = running_session()
    session.execute(Command.CYCLE_CENTER)
    session.execute(Command.CYCLE_ROTATION)
    session.tick()
    assert session.selector.centered_at == PlanetRef(0)
    assert session.selector.rotate_with == BARYCENTER


def test_coincident_planets_pause_and_keep_state():
    planets = (
        Planet(position=(1.0, 1.0), velocity=(0, 0), mass=1.0),
        Planet(position=(1.0, 1.0), velocity=(0, 0), mass=1.0),
    )
    session = running_session(planets)
    assert not session.tick()
    assert session.paused
    assert session.planets == planets


def test_near_coincident_planets_pause_and_keep_state():
    planets = (
        Planet(position=(0.0, 0.0), velocity=(0, 0), mass=1.0),
        Planet(position=(1e-120, 0.0), velocity=(0, 0), mass=1.0),
    )
    session = running_session(planets)
    assert not session.tick()
    assert session.paused
    assert session.planets == planets


def test_overflowing_step_pauses_and_keeps_state():
    planets = (
        Planet(position=(0.0, 0.0), velocity=(0, 0), mass=1e300),
        Planet(position=(1e-10, 0.0), velocity=(0, 0), mass=1.0),
    )
    session = running_session(planets)
    assert not session.tick()
    assert session.paused
    assert session.planets == planets


def test_reported_rate_capped_by_frame_budget():
    session = Session()
    sim_cfg = config.SIMULATION
    ceiling = sim_cfg["max_ticks_per_frame"] * sim_cfg["frame_rate"]
    assert session.requested_updates_per_second > ceiling
    assert session.updates_per_second == pytest.approx(ceiling)

    session.tick_interval = 1.0
    assert session.updates_per_second == pytest.approx(1.0)


def test_scale_time_step():
    session = Session()
    start = session.time_step
    session.execute(Command.SCALE_TIME_STEP, 2.0)
    assert session.time_step == pytest.approx(start * 2)
    session.execute(Command.SCALE_TIME_STEP, 0.5)
    session.execute(Command.SCALE_TIME_STEP, 0.5)
    assert session.time_step == pytest.approx(start / 2)


def test_scale_tick_rate_shortens_interval():
    session = Session()
    rate = session.requested_updates_per_second
    session.execute(Command.SCALE_TICK_RATE, 2.0)
    assert session.requested_updates_per_second == pytest.approx(rate * 2)


@pytest.mark.parametrize("command", [Command.SCALE_TIME_STEP, Command.SCALE_TICK_RATE])
@pytest.mark.parametrize("factor", [0, -2.0])
def test_non_positive_factors_rejected(command, factor):
    session = Session()
    with pytest.raises(ValueError):
        session.execute(command, factor)


def test_toggle_trails():
    session = Session()
    session.execute(Command.TOGGLE_TRAILS)
    assert not session.clear_screen
    assert not session.status().clear_screen


def test_storage_commands_not_executed_in_memory():
    session = Session()
    with pytest.raises(ValueError):
        session.execute(Command.SAVE)
    with pytest.raises(ValueError):
        session.execute(Command.LOAD_NAMED, "profile1")


def test_reload_smaller_system_resets_references():
    session = Session()
    for _ in range(4):
        session.execute(Command.CYCLE_CENTER)
    session.execute(Command.CYCLE_ROTATION)
    assert session.selector.centered_at == PlanetRef(3)
    assert session.selector.rotate_with == BARYCENTER

    single = (Planet(position=(0, 0), velocity=(0, 0), mass=1.0),)
    session.load(save(single))

    assert session.planets == single
    assert session.selector.centered_at == BARYCENTER
    assert session.selector.rotate_with is None


def test_reset_default_resets_references():
    session = Session((Planet(position=(0, 0), velocity=(0, 0), mass=1.0),
                       Planet(position=(5, 0), velocity=(0, 0), mass=1.0)))
    session.execute(Command.CYCLE_CENTER)
    session.execute(Command.RESET_DEFAULT)
    assert session.planets == default_space.get_planets()
    assert session.selector.centered_at == BARYCENTER


def test_load_corrupted_buffer_uses_default():
    session = Session((Planet(position=(0, 0), velocity=(0, 0), mass=1.0),))
    session.load(b"definitely not json")
    assert session.planets == default_space.get_planets()


def test_save_does_not_mutate():
    session = Session()
    before = session.planets
    data = session.save()
    assert session.planets is before
    assert Session.from_buffer(data).planets == before


def test_viewpoint_follows_center():
    session = Session()
    session.execute(Command.CYCLE_CENTER)
    session.execute(Command.CYCLE_CENTER)
    assert session.viewpoint().center == session.planets[1].position


def test_viewpoint_resets_stale_reference():
    session = Session()
    session.selector.centered_at = PlanetRef(10)
    view = session.viewpoint()
    assert session.selector.centered_at == BARYCENTER
    assert view.center == pytest.approx((sum(p.mass * p.position[0] for p in session.planets)
                                         / sum(p.mass for p in session.planets), 0.0))


def test_status_values():
    session = Session()
    session.execute(Command.CYCLE_CENTER)
    session.execute(Command.CYCLE_ROTATION)
    status = session.status()
    assert status.paused
    assert status.centering == "planet #0"
    assert status.rotation == "barycenter"
    assert status.planet_count == 4
    assert status.requested_updates_per_second == pytest.approx(1.0 / session.tick_interval)

"""Discrete commands accepted by a simulation session."""

from enum import Enum


class Command(Enum):
    TOGGLE_PAUSE = "toggle_pause"
    SCALE_TIME_STEP = "scale_time_step"      # arg: factor
    SCALE_TICK_RATE = "scale_tick_rate"      # arg: factor
    CYCLE_CENTER = "cycle_center"
    CYCLE_ROTATION = "cycle_rotation"
    RESET_DEFAULT = "reset_default"
    LOAD_NAMED = "load_named"                # arg: system name
    SAVE = "save"
    TOGGLE_TRAILS = "toggle_trails"

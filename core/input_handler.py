"""Keyboard bindings: pygame events to session commands."""

from typing import Optional, Tuple

import pygame
from pygame.locals import *

from config import gravity as config
from gravity import Command

Action = Tuple[Command, object]

KEY_BINDINGS = {
    K_SPACE: (Command.TOGGLE_PAUSE, None),
    K_KP_MULTIPLY: (Command.SCALE_TIME_STEP, 2.0),
    K_KP_DIVIDE: (Command.SCALE_TIME_STEP, 0.5),
    # Add => faster simulation => shorter delay between ticks
    K_KP_PLUS: (Command.SCALE_TICK_RATE, 2.0),
    K_KP_MINUS: (Command.SCALE_TICK_RATE, 0.5),
    K_s: (Command.SAVE, None),
    K_l: (Command.LOAD_NAMED, config.SAVES["profile"]),
    K_F1: (Command.RESET_DEFAULT, None),
    K_F2: (Command.LOAD_NAMED, config.SYSTEMS["samples"][0]),
    K_F3: (Command.LOAD_NAMED, config.SYSTEMS["samples"][1]),
    K_F4: (Command.LOAD_NAMED, config.SYSTEMS["samples"][2]),
    K_c: (Command.CYCLE_CENTER, None),
    K_r: (Command.CYCLE_ROTATION, None),
    K_TAB: (Command.TOGGLE_TRAILS, None),
}


class InputHandler:
    """Translates key presses; holds no simulation state."""

    def __init__(self, bindings: dict = None):
        self.bindings = dict(KEY_BINDINGS if bindings is None else bindings)
        self.quit_requested = False

    def handle_event(self, event: pygame.event.Event) -> Optional[Action]:
        """
        Translate a single pygame event.
        Returns the bound (command, arg) or None. QUIT and ESC set quit_requested.
        """
        if event.type == QUIT:
            self.quit_requested = True
        elif event.type == KEYDOWN:
            if event.key == K_ESCAPE:
                self.quit_requested = True
            else:
                return self.bindings.get(event.key)
        return None

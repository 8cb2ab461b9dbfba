"""Main application: window, tick scheduling, command dispatch and drawing."""

import pygame
from pygame.locals import *
from OpenGL.GL import *

from config import gravity as config
from gravity import Command, Session
from rendering.hud import status_lines
from rendering.planets import PlanetRenderer
from rendering.text import TextRenderer
from .camera import ViewCamera
from .input_handler import InputHandler
from .storage import SaveStore


class Application:
    """Drives a Session: ticks on a fixed interval, commands between frames."""

    def __init__(self):
        pygame.init()
        pygame.display.set_mode(
            (config.WINDOW["width"], config.WINDOW["height"]),
            DOUBLEBUF | OPENGL
        )
        pygame.display.set_caption(config.WINDOW["title"])

        self.store = SaveStore()
        self.session = Session.from_buffer(self.store.read(config.SAVES["profile"]))

        self.camera = ViewCamera()
        self.input_handler = InputHandler()
        self.planet_renderer = PlanetRenderer()
        self.text_renderer = TextRenderer(config.HUD["font"], config.HUD["font_size"])

        self.clock = pygame.time.Clock()
        self.running = True
        self._tick_backlog = 0.0

        glClearColor(*config.COLORS["background"])
        print("[App] Ready!")

    def _handle_events(self):
        for event in pygame.event.get():
            action = self.input_handler.handle_event(event)
            if self.input_handler.quit_requested:
                self.running = False
            elif action is not None:
                self.dispatch(*action)

    def dispatch(self, command: Command, arg=None):
        """Route storage commands through the SaveStore, everything else to the session."""
        if command is Command.SAVE:
            self._save()
        elif command is Command.LOAD_NAMED:
            self.session.load(self.store.read(arg))
        else:
            self.session.execute(command, arg)

    def _save(self):
        try:
            path = self.store.write(config.SAVES["profile"], self.session.save())
        except OSError as e:
            print(f"[App] Can't save planet data: {e}")
            return
        print(f"[App] Saved {len(self.session.planets)} planets to {path}")

    def _update(self, dt: float):
        """Run as many fixed ticks as real time allows, capped per frame."""
        if self.session.paused:
            self._tick_backlog = 0.0
            return
        self._tick_backlog += dt
        ticks = 0
        max_ticks = config.SIMULATION["max_ticks_per_frame"]
        while self._tick_backlog >= self.session.tick_interval and ticks < max_ticks:
            self._tick_backlog -= self.session.tick_interval
            ticks += 1
            if not self.session.tick():
                break
        if ticks == max_ticks:
            # Drop the rest instead of spiralling behind
            self._tick_backlog = 0.0

    def _render(self):
        if self.session.clear_screen:
            glClear(GL_COLOR_BUFFER_BIT)

        self.camera.apply(self.session.viewpoint())
        self.planet_renderer.draw(self.session.planets)

        screen_size = (config.WINDOW["width"], config.WINDOW["height"])
        self.text_renderer.draw_lines(
            status_lines(self.session.status()),
            config.HUD["margin"], config.HUD["margin"], screen_size
        )

        pygame.display.flip()

    def run(self):
        """Main application loop."""
        while self.running:
            dt = self.clock.tick(config.SIMULATION["frame_rate"]) / 1000.0
            self._handle_events()
            self._update(dt)
            self._render()

        pygame.quit()
        print("[App] Shutdown complete")

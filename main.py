"""
QuickGrav
=========

An interactive 2D gravitational N-body simulation.

Controls:
    - SPACE: Pause/Resume simulation
    - Keypad * and /: Double/halve the simulation time step
    - Keypad + and -: Double/halve the update rate
    - S / L: Save / load the profile
    - F1: Default system
    - F2-F4: Sample systems (moon, L5 point, binary star)
    - C: Cycle the view center (barycenter, then each planet)
    - R: Cycle the rotation lock
    - TAB: Toggle screen clearing (planets leave trails)
    - ESC: Quit
"""

from core.application import Application


def main():
    app = Application()
    app.run()


if __name__ == "__main__":
    main()

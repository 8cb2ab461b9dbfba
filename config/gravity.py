"""Configuration for the 2D gravity simulator."""

WINDOW = {
    "width": 1200,
    "height": 900,
    "title": "QuickGrav"
}

# Simulation parameters (gravitational constant is normalized to 1)
SIMULATION = {
    "time_step": 0.001,            # Simulated time per tick
    "tick_interval": 0.00001,      # Real seconds between ticks (requested)
    "frame_rate": 60,              # Frames per second of the main loop
    "max_ticks_per_frame": 200,    # Catch-up cap when frames are slow
    "start_paused": True,
}

SAVES = {
    "directory": "saves",
    "profile": "profile1",
}

# Sample systems bound to F2..F4
SYSTEMS = {
    "directory": "systems",
    "samples": ["system1", "system2", "system3"],
}

COLORS = {
    "background": (0.0, 0.0, 0.0, 1.0),
    "text": (255, 255, 255)
}

HUD = {
    "font": "monospace",
    "font_size": 16,
    "margin": 10,
}

"""
Rendering components for the gravity simulator.

rendering.hud and rendering.shapes are pure; rendering.planets and
rendering.text draw with OpenGL.
"""

"""Planet rendering as filled circles in world space."""

from OpenGL.GL import *

from .shapes import circle_vertices, planet_radius


class PlanetRenderer:
    """Draws each planet with its own color; expects the view matrix already set."""

    def draw(self, planets):
        for planet in planets:
            glColor4f(*planet.color)
            glBegin(GL_TRIANGLE_FAN)
            for x, y in circle_vertices(planet.position, planet_radius(planet.mass)):
                glVertex2f(x, y)
            glEnd()

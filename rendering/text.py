"""Text rendering for the HUD overlay."""

import pygame
from OpenGL.GL import *

from config import gravity as config


class TextRenderer:
    """
    Renders text overlays using pygame fonts and OpenGL.

    Rendering glyphs is slow, so the last rendered block is cached and only
    redrawn when its text changes.
    """

    def __init__(self, font_name: str = "monospace", font_size: int = 16):
        pygame.font.init()
        self.font = pygame.font.SysFont(font_name, font_size)
        self._cached_text = None
        self._cached_image = None

    def _render_block(self, lines):
        text = "\n".join(lines)
        if text == self._cached_text:
            return self._cached_image

        color = config.COLORS["text"]
        line_height = self.font.get_linesize()
        rendered = [self.font.render(line, True, color) for line in lines]
        width = max((s.get_width() for s in rendered), default=1)
        block = pygame.Surface((max(width, 1), max(line_height * len(lines), 1)), pygame.SRCALPHA)
        for i, surface in enumerate(rendered):
            block.blit(surface, (0, i * line_height))

        self._cached_text = text
        self._cached_image = (pygame.image.tostring(block, "RGBA", True), block.get_size())
        return self._cached_image

    def draw_lines(self, lines, x: int, y: int, screen_size: tuple):
        """
        Draw a block of lines in screen space, untouched by the view transform.

        Args:
            lines: Strings, top to bottom
            x: X position from left edge
            y: Y position from top edge
            screen_size: (width, height) of the screen
        """
        data, (w, h) = self._render_block(lines)

        # Switch to a pixel-space projection for 2D rendering
        glMatrixMode(GL_PROJECTION)
        glPushMatrix()
        glLoadIdentity()
        glOrtho(0, screen_size[0], 0, screen_size[1], -1, 1)
        glMatrixMode(GL_MODELVIEW)
        glPushMatrix()
        glLoadIdentity()

        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)
        glRasterPos2f(x, screen_size[1] - y - h)
        glDrawPixels(w, h, GL_RGBA, GL_UNSIGNED_BYTE, data)
        glDisable(GL_BLEND)

        # Restore projection
        glPopMatrix()
        glMatrixMode(GL_PROJECTION)
        glPopMatrix()
        glMatrixMode(GL_MODELVIEW)

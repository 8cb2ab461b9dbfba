"""2D camera: loads a viewpoint transform into OpenGL."""

import numpy as np
from OpenGL.GL import *

from config import gravity as config
from gravity import Viewpoint


def gl_matrix(viewpoint: Viewpoint) -> np.ndarray:
    """Expand the 3x3 affine into a column-major 4x4 for glLoadMatrixd."""
    m = viewpoint.matrix()
    full = np.identity(4)
    full[:2, :2] = m[:2, :2]
    full[:2, 3] = m[:2, 2]
    return full.T.copy()


class ViewCamera:
    """Orthographic view centered on the window, y pointing down."""

    def __init__(self, width: int = None, height: int = None):
        self.width = width or config.WINDOW["width"]
        self.height = height or config.WINDOW["height"]

    def apply(self, viewpoint: Viewpoint):
        """
        Set the projection to the window rectangle centered at (0, 0) and
        the modelview to the viewpoint. Only content is transformed.
        """
        half_w = self.width / 2.0
        half_h = self.height / 2.0
        glMatrixMode(GL_PROJECTION)
        glLoadIdentity()
        glOrtho(-half_w, half_w, half_h, -half_h, -1.0, 1.0)
        glMatrixMode(GL_MODELVIEW)
        glLoadMatrixd(gl_matrix(viewpoint))

"""
Helper functions for OpenGL setup of the 2D drawing surface.
"""

from __future__ import annotations
import logging
import OpenGL.GL as gl  # noqa: N811

logger = logging.getLogger(__name__)


def setup_opengl(width: int, height: int) -> None:
    """
    Configure OpenGL for 2D drawing in window pixels: viewport, an
    orthographic projection with the origin at the top-left corner, and
    alpha blending.
    """
    gl.glViewport(0, 0, width, height)
    gl.glMatrixMode(gl.GL_PROJECTION)
    gl.glLoadIdentity()
    gl.glOrtho(0, width, height, 0, -1, 1)
    gl.glMatrixMode(gl.GL_MODELVIEW)
    gl.glLoadIdentity()
    gl.glDisable(gl.GL_DEPTH_TEST)
    gl.glEnable(gl.GL_BLEND)
    gl.glBlendFunc(gl.GL_SRC_ALPHA, gl.GL_ONE_MINUS_SRC_ALPHA)
    logger.debug("OpenGL configured for %dx%d", width, height)

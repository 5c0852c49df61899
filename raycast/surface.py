"""
Drawing surface interface used by the renderers, and its OpenGL implementation.
"""

from __future__ import annotations
import contextlib
import math
import OpenGL.GL as gl  # noqa: N811
from typing import Iterator
from .config import CIRCLE_SEGMENTS
from .gl_utils import setup_opengl
from .vector import Color, Vector2D


class Surface:
    """Abstract base class for drawing surfaces."""

    width: int
    height: int

    def size(self) -> Vector2D:
        return Vector2D(float(self.width), float(self.height))

    def fill_rect(self, position: Vector2D, size: Vector2D, color: Color) -> None:
        raise NotImplementedError("Surface.fill_rect must be implemented by subclasses")

    def fill_circle(self, center: Vector2D, radius: float, color: Color) -> None:
        raise NotImplementedError("Surface.fill_circle must be implemented by subclasses")

    def stroke_line(self, p1: Vector2D, p2: Vector2D, color: Color) -> None:
        raise NotImplementedError("Surface.stroke_line must be implemented by subclasses")

    def translate(self, offset: Vector2D) -> None:
        raise NotImplementedError("Surface.translate must be implemented by subclasses")

    def scale(self, factors: Vector2D) -> None:
        raise NotImplementedError("Surface.scale must be implemented by subclasses")

    def save(self) -> None:
        raise NotImplementedError("Surface.save must be implemented by subclasses")

    def restore(self) -> None:
        raise NotImplementedError("Surface.restore must be implemented by subclasses")

    @contextlib.contextmanager
    def transformed(self) -> Iterator[Surface]:
        """Context-manager for save(), restores the transform on exit."""
        self.save()
        try:
            yield self
        finally:
            self.restore()


class GLSurface(Surface):
    """
    Immediate-mode OpenGL surface in window pixel coordinates. Needs a current
    GL context (a pygame window opened with pygame.OPENGL).
    """

    def __init__(self, width: int, height: int, segments: int = CIRCLE_SEGMENTS) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Surface size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.segments = segments
        setup_opengl(width, height)

    def fill_rect(self, position: Vector2D, size: Vector2D, color: Color) -> None:
        x0, y0 = position
        x1, y1 = position.add(size)
        gl.glColor4f(*color)
        gl.glBegin(gl.GL_QUADS)
        gl.glVertex2f(x0, y0)
        gl.glVertex2f(x1, y0)
        gl.glVertex2f(x1, y1)
        gl.glVertex2f(x0, y1)
        gl.glEnd()

    def fill_circle(self, center: Vector2D, radius: float, color: Color) -> None:
        gl.glColor4f(*color)
        gl.glBegin(gl.GL_TRIANGLE_FAN)
        gl.glVertex2f(center.x, center.y)
        for i in range(self.segments + 1):
            angle = 2 * math.pi * i / self.segments
            gl.glVertex2f(
                center.x + math.cos(angle) * radius,
                center.y + math.sin(angle) * radius,
            )
        gl.glEnd()

    def stroke_line(self, p1: Vector2D, p2: Vector2D, color: Color) -> None:
        gl.glColor4f(*color)
        gl.glBegin(gl.GL_LINES)
        gl.glVertex2f(p1.x, p1.y)
        gl.glVertex2f(p2.x, p2.y)
        gl.glEnd()

    def translate(self, offset: Vector2D) -> None:
        gl.glTranslatef(offset.x, offset.y, 0.0)

    def scale(self, factors: Vector2D) -> None:
        gl.glScalef(factors.x, factors.y, 1.0)

    def save(self) -> None:
        gl.glPushMatrix()

    def restore(self) -> None:
        gl.glPopMatrix()

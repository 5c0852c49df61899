"""
Small immutable value types for 2D geometry and colors.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple, Union


@dataclass(frozen=True)
class Vector2D:
    """A point or direction in map space. Every operation returns a new vector."""

    x: float
    y: float

    @staticmethod
    def zero() -> Vector2D:
        return Vector2D(0.0, 0.0)

    @staticmethod
    def from_angle(angle: float) -> Vector2D:
        """Unit vector pointing along `angle` (radians)."""
        return Vector2D(math.cos(angle), math.sin(angle))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def add(self, that: Vector2D) -> Vector2D:
        return Vector2D(self.x + that.x, self.y + that.y)

    def subtract(self, that: Vector2D) -> Vector2D:
        return Vector2D(self.x - that.x, self.y - that.y)

    def multiply(self, that: Vector2D) -> Vector2D:
        return Vector2D(self.x * that.x, self.y * that.y)

    def divide(self, that: Vector2D) -> Vector2D:
        return Vector2D(self.x / that.x, self.y / that.y)

    def scale(self, value: float) -> Vector2D:
        return Vector2D(self.x * value, self.y * value)

    def dot(self, that: Vector2D) -> float:
        return self.x * that.x + self.y * that.y

    def length(self) -> float:
        return math.sqrt(self.sqr_length())

    def sqr_length(self) -> float:
        return self.x * self.x + self.y * self.y

    def normalize(self) -> Vector2D:
        """Unit vector in the same direction; the zero vector stays zero."""
        l = self.length()
        if l == 0:
            return Vector2D(0.0, 0.0)
        return Vector2D(self.x / l, self.y / l)

    def rotate90(self) -> Vector2D:
        return Vector2D(-self.y, self.x)

    def lerp(self, that: Vector2D, t: float) -> Vector2D:
        """Point at fraction `t` of the way from this vector to `that`."""
        return that.subtract(self).scale(t).add(self)

    def distance_to(self, that: Vector2D) -> float:
        return that.subtract(self).length()

    def sqr_distance_to(self, that: Vector2D) -> float:
        return that.subtract(self).sqr_length()

    def floor(self) -> Tuple[int, int]:
        """Integer cell coordinates (col, row) containing this point."""
        return math.floor(self.x), math.floor(self.y)


@dataclass(frozen=True)
class Color:
    """
    RGBA color with components nominally in [0, 1].
    brightness() does not clamp, so shaded colors may exceed 1.0.
    """

    r: float
    g: float
    b: float
    a: float = 1.0

    @staticmethod
    def red() -> Color:
        return Color(1.0, 0.0, 0.0, 1.0)

    @staticmethod
    def green() -> Color:
        return Color(0.0, 1.0, 0.0, 1.0)

    @staticmethod
    def blue() -> Color:
        return Color(0.0, 0.0, 1.0, 1.0)

    @staticmethod
    def yellow() -> Color:
        return Color(1.0, 1.0, 0.0, 1.0)

    @staticmethod
    def purple() -> Color:
        return Color(1.0, 0.0, 1.0, 1.0)

    @staticmethod
    def cyan() -> Color:
        return Color(0.0, 1.0, 1.0, 1.0)

    @staticmethod
    def from_hex(value: str) -> Color:
        """Parse '#rrggbb' or '#rrggbbaa'."""
        digits = value.lstrip("#")
        if len(digits) not in (6, 8):
            raise ValueError(f"Invalid hex color: {value!r}")
        try:
            channels = [int(digits[i:i + 2], 16) / 255.0 for i in range(0, len(digits), 2)]
        except ValueError:
            raise ValueError(f"Invalid hex color: {value!r}") from None
        return Color(*channels)

    @staticmethod
    def from_value(value: Union[str, Sequence[float]]) -> Color:
        """Build a color from a hex string or a 3/4-element component list."""
        if isinstance(value, str):
            return Color.from_hex(value)
        if isinstance(value, (list, tuple)) and len(value) in (3, 4):
            return Color(*(float(c) for c in value))
        raise ValueError(f"Invalid color value: {value!r}")

    def brightness(self, factor: float) -> Color:
        """Scale the RGB channels by `factor`; alpha is kept."""
        return Color(factor * self.r, factor * self.g, factor * self.b, self.a)

    def __iter__(self) -> Iterator[float]:
        yield self.r
        yield self.g
        yield self.b
        yield self.a

"""
Field-of-view geometry: the near-plane segment that screen columns sample.
"""

from __future__ import annotations
import math
from typing import Iterator, Tuple
from .config import FOV, NEAR_CLIPPING_PLANE
from .vector import Vector2D


def fov_range(
    position: Vector2D,
    direction: float,
    fov: float = FOV,
    near: float = NEAR_CLIPPING_PLANE,
) -> Tuple[Vector2D, Vector2D]:
    """
    Return the (left, right) endpoints of the near-plane segment seen from
    `position` facing `direction` (radians).
    """
    half_width = math.tan(fov * 0.5) * near
    center = position.add(Vector2D.from_angle(direction).scale(near))
    side = center.subtract(position).rotate90().normalize().scale(half_width)
    return center.subtract(side), center.add(side)


def column_targets(
    left: Vector2D, right: Vector2D, columns: int
) -> Iterator[Vector2D]:
    # Interpolate along the segment, not the angle, so columns are evenly
    # spaced on the projection plane.
    for i in range(columns):
        yield left.lerp(right, i / columns)

"""
Grid traversal (DDA-style stepping between grid-line crossings) and the ray
casting loop built on it.

A ray is carried as two points: p1, the previous grid crossing, and p2, the
current point further along the same line.
"""

from __future__ import annotations
import math
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Tuple
from .config import EPSILON, FAR_CLIPPING_PLANE, RAY_STEP_LIMIT
from .vector import Vector2D

if TYPE_CHECKING:
    from .scene import Scene, Wall

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RayHit:
    """Result of cast_ray. `wall` is None when nothing was hit."""

    point: Vector2D
    cell: Tuple[int, int]
    wall: Optional[Wall] = None

    @property
    def hit(self) -> bool:
        return self.wall is not None


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


def snap_to_neighbor(x: float, dx: float) -> float:
    """Next integer grid line past `x` in the direction of `dx`."""
    if dx > 0:
        return math.ceil(x + EPSILON)
    if dx < 0:
        return math.floor(x - EPSILON)
    return x


def hitting_cell(p1: Vector2D, p2: Vector2D) -> Tuple[int, int]:
    """
    Cell (col, row) the ray p1 -> p2 enters at p2. A point sitting on a grid
    line belongs to the cell on the far side in the direction of travel.
    """
    delta = p2.subtract(p1)
    nudge = Vector2D(_sign(delta.x) * EPSILON, _sign(delta.y) * EPSILON)
    return p2.add(nudge).floor()


def ray_step(p1: Vector2D, p2: Vector2D) -> Vector2D:
    """Return the next point after p2 where the line p1 -> p2 crosses a grid line."""
    delta = p2.subtract(p1)
    p3 = p2
    if delta.x != 0:
        # y = k * x + c
        k = delta.y / delta.x
        c = p1.y - k * p1.x

        x3 = snap_to_neighbor(p2.x, delta.x)
        p3 = Vector2D(x3, x3 * k + c)

        if k != 0:
            y3 = snap_to_neighbor(p2.y, delta.y)
            candidate = Vector2D((y3 - c) / k, y3)
            if p2.sqr_distance_to(candidate) < p2.sqr_distance_to(p3):
                p3 = candidate
    elif delta.y != 0:
        # vertical ray
        p3 = Vector2D(p2.x, snap_to_neighbor(p2.y, delta.y))
    return p3


def cast_ray(
    scene: Scene,
    origin: Vector2D,
    towards: Vector2D,
    far: float = FAR_CLIPPING_PLANE,
    max_steps: int = RAY_STEP_LIMIT,
) -> RayHit:
    """
    Walk from `origin` through `towards` until a wall cell is entered, the
    ray passes the far clipping distance, or `max_steps` crossings were made.
    """
    far_sqr = far * far
    p1, p2 = origin, towards
    for _ in range(max_steps):
        cell = hitting_cell(p1, p2)
        wall = scene.wall_at(*cell)
        if wall is not None:
            return RayHit(p2, cell, wall)
        if origin.sqr_distance_to(p1) > far_sqr:
            return RayHit(p2, cell)
        p1, p2 = p2, ray_step(p1, p2)
    logger.debug(
        "Ray from %s towards %s gave up after %d steps", origin, towards, max_steps
    )
    return RayHit(p2, hitting_cell(p1, p2))

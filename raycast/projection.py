"""
Perspective projection of the scene: one cast ray per screen column.
"""

from __future__ import annotations
import math
import numpy as np
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional
from .config import (
    SCREEN_COLUMNS,
    FOV,
    NEAR_CLIPPING_PLANE,
    FAR_CLIPPING_PLANE,
)
from .fov import fov_range, column_targets
from .raycaster import cast_ray
from .vector import Color, Vector2D

if TYPE_CHECKING:
    from .scene import Scene
    from .player import Player
    from .surface import Surface


@dataclass(frozen=True)
class WallSlice:
    """A wall hit seen through one screen column."""

    column: int
    depth: float
    color: Color


class ProjectionRenderer:
    """Casts one ray per column and draws depth-scaled, depth-shaded wall strips."""

    def __init__(
        self,
        columns: int = SCREEN_COLUMNS,
        fov: float = FOV,
        near: float = NEAR_CLIPPING_PLANE,
        far: float = FAR_CLIPPING_PLANE,
    ) -> None:
        if columns <= 0:
            raise ValueError(f"Column count must be positive, got {columns}")
        self.columns = columns
        self.fov = fov
        self.near = near
        self.far = far
        # Perpendicular depth per column from the last cast (inf where nothing was hit)
        self.depth_buffer = np.full(self.columns, np.inf, dtype=np.float64)

    def cast_columns(self, scene: Scene, player: Player) -> List[Optional[WallSlice]]:
        left, right = fov_range(player.position, player.direction, self.fov, self.near)
        view_dir = Vector2D.from_angle(player.direction)
        slices: List[Optional[WallSlice]] = []
        self.depth_buffer.fill(np.inf)
        for i, target in enumerate(column_targets(left, right, self.columns)):
            hit = cast_ray(scene, player.position, target, self.far)
            if not hit.hit:
                slices.append(None)
                continue
            # Project onto the view axis instead of using the straight-line
            # distance, otherwise walls bulge towards the screen edges.
            depth = hit.point.subtract(player.position).dot(view_dir)
            if depth <= 0:
                slices.append(None)
                continue
            self.depth_buffer[i] = depth
            slices.append(WallSlice(i, depth, hit.wall.color.brightness(1.0 / depth)))
        return slices

    def render(self, surface: Surface, scene: Scene, player: Player) -> None:
        strip_width = math.ceil(surface.width / self.columns)
        slices = self.cast_columns(scene, player)
        # Strip heights for every column at once; misses (inf depth) come out as 0
        heights = surface.height / self.depth_buffer
        for wall_slice in slices:
            if wall_slice is None:
                continue
            strip_height = float(heights[wall_slice.column])
            surface.fill_rect(
                Vector2D(
                    float(wall_slice.column * strip_width),
                    (surface.height - strip_height) * 0.5,
                ),
                Vector2D(float(strip_width), strip_height),
                wall_slice.color,
            )

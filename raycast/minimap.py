"""
Top-down minimap: scene grid, player marker and field-of-view wedge.
"""

from __future__ import annotations
from typing import TYPE_CHECKING
from .config import (
    BACKGROUND_COLOR,
    GRID_COLOR,
    PLAYER_COLOR,
    PLAYER_MARKER_RADIUS,
    FOV,
    NEAR_CLIPPING_PLANE,
)
from .vector import Color, Vector2D

if TYPE_CHECKING:
    from .scene import Scene
    from .player import Player
    from .surface import Surface


class MinimapRenderer:
    """Draws the scene in map units, scaled into a rectangle of the surface."""

    def __init__(
        self,
        fov: float = FOV,
        near: float = NEAR_CLIPPING_PLANE,
        marker_radius: float = PLAYER_MARKER_RADIUS,
    ) -> None:
        self.fov = fov
        self.near = near
        self.marker_radius = marker_radius
        self.background = Color.from_hex(BACKGROUND_COLOR)
        self.grid_color = Color.from_hex(GRID_COLOR)
        self.player_color = Color.from_hex(PLAYER_COLOR)

    def render(
        self,
        surface: Surface,
        scene: Scene,
        player: Player,
        position: Vector2D,
        size: Vector2D,
    ) -> None:
        grid_size = scene.size()
        with surface.transformed():
            surface.translate(position)
            surface.scale(size.divide(grid_size))

            surface.fill_rect(Vector2D.zero(), grid_size, self.background)
            for col, row, wall in scene.walls():
                surface.fill_rect(
                    Vector2D(float(col), float(row)), Vector2D(1.0, 1.0), wall.color
                )

            # Grid lines
            for x in range(scene.width + 1):
                surface.stroke_line(
                    Vector2D(float(x), 0.0), Vector2D(float(x), grid_size.y), self.grid_color
                )
            for y in range(scene.height + 1):
                surface.stroke_line(
                    Vector2D(0.0, float(y)), Vector2D(grid_size.x, float(y)), self.grid_color
                )

            surface.fill_circle(player.position, self.marker_radius, self.player_color)
            left, right = player.fov_range(self.fov, self.near)
            surface.stroke_line(left, right, self.player_color)
            surface.stroke_line(player.position, left, self.player_color)
            surface.stroke_line(player.position, right, self.player_color)

"""
Frame composition: background, first-person projection, then the minimap overlay.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Optional, Tuple
from .config import (
    BACKGROUND_COLOR,
    SCREEN_COLUMNS,
    FOV,
    NEAR_CLIPPING_PLANE,
    FAR_CLIPPING_PLANE,
    MINIMAP_MARGIN,
    MINIMAP_CELL_FRACTION,
)
from .minimap import MinimapRenderer
from .projection import ProjectionRenderer
from .vector import Color, Vector2D

if TYPE_CHECKING:
    from .scene import Scene
    from .player import Player
    from .surface import Surface


class Renderer:
    """Draws a complete frame onto a Surface."""

    def __init__(
        self,
        columns: int = SCREEN_COLUMNS,
        fov: float = FOV,
        near: float = NEAR_CLIPPING_PLANE,
        far: float = FAR_CLIPPING_PLANE,
        projection: Optional[ProjectionRenderer] = None,
        minimap: Optional[MinimapRenderer] = None,
    ) -> None:
        self.projection = projection or ProjectionRenderer(columns, fov, near, far)
        self.minimap = minimap or MinimapRenderer(fov, near)
        self.background = Color.from_hex(BACKGROUND_COLOR)

    def minimap_rect(self, surface: Surface, scene: Scene) -> Tuple[Vector2D, Vector2D]:
        """Minimap (position, size) in surface pixels: fixed-size cells, offset from the corner."""
        position = surface.size().scale(MINIMAP_MARGIN)
        cell_size = surface.width * MINIMAP_CELL_FRACTION
        return position, scene.size().scale(cell_size)

    def render(self, surface: Surface, scene: Scene, player: Player) -> None:
        surface.fill_rect(Vector2D.zero(), surface.size(), self.background)
        self.projection.render(surface, scene, player)
        if scene.width > 0 and scene.height > 0:
            position, size = self.minimap_rect(surface, scene)
            self.minimap.render(surface, scene, player, position, size)

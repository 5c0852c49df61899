from __future__ import annotations
import os
import json
import math
import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Union
from .config import WORLD_FILE
from .vector import Color, Vector2D

logger = logging.getLogger(__name__)


class Empty:
    """Traversable cell with no color. Use the EMPTY singleton."""

    _instance: Optional[Empty] = None

    def __new__(cls) -> Empty:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "EMPTY"


EMPTY = Empty()


@dataclass(frozen=True)
class Wall:
    """Solid cell drawn with a flat color."""

    color: Color


Cell = Union[Empty, Wall]


def to_cell(value: Optional[Color]) -> Cell:
    """Convert a nullable color from a raw grid into a Cell."""
    if value is None:
        return EMPTY
    if isinstance(value, Color):
        return Wall(value)
    raise ValueError(f"Scene cells must be None or Color, got {value!r}")


class Scene:
    """
    Read-only rectangular grid of cells addressed by (col, row).
    Rows may be ragged; the logical width is the longest row.
    """

    def __init__(
        self,
        grid: Sequence[Sequence[Optional[Color]]],
        start_position: Optional[Vector2D] = None,
        start_direction: Optional[float] = None,
    ) -> None:
        self._rows: List[List[Cell]] = [[to_cell(v) for v in row] for row in grid]
        self.height = len(self._rows)
        self.width = max((len(row) for row in self._rows), default=0)
        # Optional player start read from the world file
        self.start_position = start_position
        self.start_direction = start_direction

    @classmethod
    def load(cls, path: Optional[str] = None) -> Scene:
        """Load a scene from a JSON world file (default: WORLD_FILE)."""
        if path is None:
            path = os.path.join(os.path.dirname(__file__), WORLD_FILE)
        try:
            with open(path, "r") as f:
                data = json.load(f)
            grid = [
                [None if v is None else Color.from_value(v) for v in row]
                for row in data["scene"]
            ]
            start_position = None
            start_direction = None
            player = data.get("player")
            # Player start: {"pos": [x, y], "angle": degrees}, both optional
            if isinstance(player, dict):
                pos = player.get("pos")
                if isinstance(pos, (list, tuple)) and len(pos) == 2:
                    start_position = Vector2D(float(pos[0]), float(pos[1]))
                ang = player.get("angle")
                if ang is not None:
                    start_direction = math.radians(float(ang))
        except (OSError, ValueError, KeyError, TypeError) as e:
            logger.error("Failed to load world %s: %s", path, e)
            raise RuntimeError(f"Failed to load world from {path}: {e}")
        scene = cls(grid, start_position, start_direction)
        logger.info(
            "Loaded world %s (%dx%d cells)", path, scene.width, scene.height
        )
        return scene

    def size(self) -> Vector2D:
        return Vector2D(float(self.width), float(self.height))

    def in_bounds(self, col: int, row: int) -> bool:
        return 0 <= col < self.width and 0 <= row < self.height

    def cell_at(self, col: int, row: int) -> Cell:
        """Return the cell at (col, row); anything outside the grid is EMPTY."""
        if not self.in_bounds(col, row):
            return EMPTY
        cells = self._rows[row]
        if col >= len(cells):
            return EMPTY
        return cells[col]

    def wall_at(self, col: int, row: int) -> Optional[Wall]:
        cell = self.cell_at(col, row)
        if isinstance(cell, Wall):
            return cell
        if isinstance(cell, Empty):
            return None
        raise TypeError(f"Unknown cell variant: {cell!r}")

    def walls(self):
        """Yield (col, row, wall) for every wall cell, row by row."""
        for row in range(self.height):
            for col in range(self.width):
                wall = self.wall_at(col, row)
                if wall is not None:
                    yield col, row, wall

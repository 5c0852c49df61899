from __future__ import annotations
from typing import TYPE_CHECKING, Optional, Tuple
from .config import MOVE_SPEED, ROT_SPEED, FOV, NEAR_CLIPPING_PLANE
from .fov import fov_range
from .vector import Vector2D

if TYPE_CHECKING:
    from .state import Intents


class Player:
    """Player (viewpoint) state and movement."""

    def __init__(
        self,
        position: Optional[Vector2D] = None,
        direction: float = 0.0,
        move_speed: float = MOVE_SPEED,
        rot_speed: float = ROT_SPEED,
    ) -> None:
        """
        Initialize the player.
        position: starting position in map units (not snapped to cells).
        direction: facing direction in radians, unbounded.
        move_speed: movement speed in map units per second.
        rot_speed: rotation speed in radians per second.
        """
        self.position = position if position is not None else Vector2D.zero()
        self.direction = direction
        self.move_speed = move_speed
        self.rot_speed = rot_speed

    def facing(self) -> Vector2D:
        """Unit vector along the view direction."""
        return Vector2D.from_angle(self.direction)

    def fov_range(
        self, fov: float = FOV, near: float = NEAR_CLIPPING_PLANE
    ) -> Tuple[Vector2D, Vector2D]:
        return fov_range(self.position, self.direction, fov, near)

    def move(self, direction: int, dt: float) -> None:
        """Move the player forward (direction=1) or backward (direction=-1)."""
        velocity = self.facing().scale(self.move_speed * direction)
        self.position = self.position.add(velocity.scale(dt))

    def rotate(self, direction: int, dt: float) -> None:
        """Rotate the player left (direction=-1) or right (direction=1)."""
        self.direction += self.rot_speed * dt * direction

    def integrate(self, intents: Intents, dt: float) -> None:
        """
        Advance one explicit Euler step from the latched intents. Opposing
        intents cancel out. Velocity uses the direction from before this step.
        """
        heading = int(intents.forward) - int(intents.backward)
        turn = int(intents.turn_right) - int(intents.turn_left)
        # Translate first so the step follows the pre-turn heading
        self.move(heading, dt)
        self.rotate(turn, dt)

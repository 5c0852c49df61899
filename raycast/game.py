from __future__ import annotations
import logging
import pygame
from typing import Optional

from .config import (
    SCREEN_WIDTH,
    SCREEN_HEIGHT,
    FPS,
    WINDOW_TITLE,
    MOVE_SPEED,
    ROT_SPEED,
    SCREEN_COLUMNS,
    FOV,
    NEAR_CLIPPING_PLANE,
    FAR_CLIPPING_PLANE,
    PLAYER_START_FRACTION,
    PLAYER_START_DIRECTION,
)
from .input_handler import InputHandler
from .player import Player
from .renderer import Renderer
from .scene import Scene
from .state import AppState, advance
from .surface import GLSurface
from .vector import Vector2D

logger = logging.getLogger(__name__)


class Game:
    """Main Game class: handles initialization, loop, and high-level coordination."""

    def __init__(
        self,
        clock: Optional[pygame.time.Clock] = None,
        scene: Optional[Scene] = None,
        world_path: Optional[str] = None,
    ) -> None:
        # Initialize Pygame and its subsystems
        pygame.init()
        self.screen_width = SCREEN_WIDTH
        self.screen_height = SCREEN_HEIGHT
        # Without a drawing surface there is nothing to do: fail immediately
        try:
            self.screen = pygame.display.set_mode(
                (self.screen_width, self.screen_height),
                pygame.OPENGL | pygame.DOUBLEBUF,
            )
        except pygame.error as e:
            logger.error("Could not create an OpenGL window: %s", e)
            raise RuntimeError(f"Failed to create drawing surface: {e}") from e
        pygame.display.set_caption(WINDOW_TITLE)
        logger.info(
            "Opened %dx%d OpenGL window", self.screen_width, self.screen_height
        )
        self.surface = GLSurface(self.screen_width, self.screen_height)
        # Clock for frame rate (injectable for testing)
        self.clock = clock or pygame.time.Clock()
        self.fps = FPS
        self.scene = scene if scene is not None else Scene.load(world_path)
        self.state = AppState(self._spawn_player(self.scene))
        self.renderer = Renderer(
            SCREEN_COLUMNS, FOV, NEAR_CLIPPING_PLANE, FAR_CLIPPING_PLANE
        )
        self.input = InputHandler(self.state.intents)
        self.running = True

    @staticmethod
    def _spawn_player(scene: Scene) -> Player:
        """Place the player where the world file says, else at a fixed fraction of the scene."""
        position = scene.start_position
        if position is None:
            position = scene.size().multiply(Vector2D(*PLAYER_START_FRACTION))
        direction = scene.start_direction
        if direction is None:
            direction = PLAYER_START_DIRECTION
        return Player(position, direction, MOVE_SPEED, ROT_SPEED)

    @property
    def player(self) -> Player:
        return self.state.player

    def handle_events(self) -> None:
        """Process input events via InputHandler and handle the quit action."""
        self.input.process_events()
        if self.input.should_quit():
            self.running = False

    def update(self, timestamp: float) -> float:
        """Advance the simulation to `timestamp` (ms). Returns elapsed seconds."""
        return advance(self.state, timestamp)

    def render(self) -> None:
        """Render the entire scene and present it."""
        self.renderer.render(self.surface, self.scene, self.player)
        pygame.display.flip()

    def run(self) -> None:
        """Main loop: handle events, update, and render once per frame."""
        while self.running:
            self.clock.tick(self.fps)
            self.handle_events()
            self.update(pygame.time.get_ticks())
            self.render()
        logger.info("Shutting down")
        pygame.quit()

"""
Input handling abstraction to decouple Pygame input from game logic.
"""

from __future__ import annotations
import pygame
from typing import TYPE_CHECKING, Dict, Iterable, Optional, Set

if TYPE_CHECKING:
    from .state import Intents

# Key -> name of the Intents attribute it drives
KEY_BINDINGS: Dict[int, str] = {
    pygame.K_w: "forward",
    pygame.K_UP: "forward",
    pygame.K_s: "backward",
    pygame.K_DOWN: "backward",
    pygame.K_a: "turn_left",
    pygame.K_LEFT: "turn_left",
    pygame.K_d: "turn_right",
    pygame.K_RIGHT: "turn_right",
}


class InputHandler:
    """
    Turns Pygame key events into latched movement intents. An intent is set
    on the first key-down and cleared on key-up; repeated key-down events
    for a key that is already held are ignored.
    """

    def __init__(
        self, intents: Intents, bindings: Optional[Dict[int, str]] = None
    ) -> None:
        self.intents = intents
        self.bindings = dict(KEY_BINDINGS if bindings is None else bindings)
        self._held: Set[int] = set()
        self._quit = False

    def process_events(self, events: Optional[Iterable[pygame.event.Event]] = None) -> None:
        """Handle the given events, or everything queued in Pygame."""
        if events is None:
            events = pygame.event.get()
        for event in events:
            self.handle_event(event)

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self._quit = True
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self._quit = True
            elif event.key in self.bindings and event.key not in self._held:
                self._held.add(event.key)
                setattr(self.intents, self.bindings[event.key], True)
        elif event.type == pygame.KEYUP:
            if event.key in self.bindings and event.key in self._held:
                self._held.discard(event.key)
                name = self.bindings[event.key]
                # Stay latched while another key bound to the same intent is held
                still_held = any(self.bindings[k] == name for k in self._held)
                setattr(self.intents, name, still_held)
        elif event.type == pygame.WINDOWFOCUSLOST:
            # Key-up events go to the other window, so drop everything held
            self._held.clear()
            self.intents.clear()

    def should_quit(self) -> bool:
        """Return True once a quit command has been issued."""
        return self._quit

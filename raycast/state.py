"""
Explicit per-session application state, shared by input handling and the
frame callback.
"""

from __future__ import annotations
from typing import Optional
from .player import Player


class Intents:
    """Latched movement intents, set on key press and cleared on release."""

    def __init__(self) -> None:
        self.forward = False
        self.backward = False
        self.turn_left = False
        self.turn_right = False

    def clear(self) -> None:
        self.forward = False
        self.backward = False
        self.turn_left = False
        self.turn_right = False

    def __repr__(self) -> str:
        return (
            f"<Intents forward={self.forward} backward={self.backward} "
            f"turn_left={self.turn_left} turn_right={self.turn_right}>"
        )


class AppState:
    """Everything that changes between frames."""

    def __init__(self, player: Player, intents: Optional[Intents] = None) -> None:
        self.player = player
        self.intents = intents if intents is not None else Intents()
        # Timestamp (ms) of the previous frame; None until the first frame
        self.prev_timestamp: Optional[float] = None


def advance(state: AppState, timestamp: float) -> float:
    """
    Integrate player motion up to `timestamp` (milliseconds, monotonic).
    The first call only seeds the time origin. Returns the elapsed seconds.
    """
    if state.prev_timestamp is None:
        dt = 0.0
    else:
        dt = (timestamp - state.prev_timestamp) / 1000.0
    state.prev_timestamp = timestamp
    state.player.integrate(state.intents, dt)
    return dt

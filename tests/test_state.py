import math

import pytest

from raycast.player import Player
from raycast.state import AppState, Intents, advance
from raycast.vector import Vector2D


def make_state():
    return AppState(Player(Vector2D(2.0, 2.0), 0.0, move_speed=2.0, rot_speed=1.0))


def test_first_frame_seeds_time_origin():
    state = make_state()
    state.intents.forward = True
    dt = advance(state, 16000.0)
    assert dt == 0.0
    assert state.prev_timestamp == 16000.0
    # No motion on the very first frame
    assert state.player.position == Vector2D(2.0, 2.0)


def test_later_frames_integrate_elapsed_time():
    state = make_state()
    advance(state, 1000.0)
    state.intents.forward = True
    dt = advance(state, 1100.0)
    assert dt == pytest.approx(0.1)
    assert state.player.position.x == pytest.approx(2.2)
    assert state.player.position.y == pytest.approx(2.0)


def test_turning_over_several_frames():
    state = make_state()
    state.intents.turn_right = True
    for timestamp in (0.0, 250.0, 500.0, 750.0, 1000.0):
        advance(state, timestamp)
    assert state.player.direction == pytest.approx(1.0)
    assert math.isclose(state.player.position.x, 2.0)


def test_intents_clear():
    intents = Intents()
    intents.forward = intents.turn_left = True
    intents.clear()
    assert not any(
        (intents.forward, intents.backward, intents.turn_left, intents.turn_right)
    )
    assert "forward=False" in repr(intents)

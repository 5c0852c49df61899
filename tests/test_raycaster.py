import math

import pytest

from raycast.config import FAR_CLIPPING_PLANE, NEAR_CLIPPING_PLANE
from raycast.raycaster import (
    snap_to_neighbor,
    hitting_cell,
    ray_step,
    cast_ray,
)
from raycast.scene import Scene
from raycast.vector import Color, Vector2D


def make_colored_scene():
    red, green, blue = Color.red(), Color.green(), Color.blue()
    cyan, purple, yellow = Color.cyan(), Color.purple(), Color.yellow()
    return Scene(
        [
            [None, None, cyan, purple, None, None, None, None],
            [None, None, None, yellow, None, None, None, None],
            [None, red, green, blue, None, None, None, None],
            [None] * 8,
            [None] * 8,
            [None] * 8,
            [None] * 8,
        ]
    )


def _on_grid_line(value):
    return math.isclose(value, round(value), abs_tol=1e-9)


@pytest.mark.parametrize(
    "x,dx,expected",
    [
        (2.0, 1.0, 3),
        (2.5, 1.0, 3),
        (2.0, -1.0, 1),
        (2.5, -0.3, 2),
        (2.5, 0.0, 2.5),
    ],
)
def test_snap_to_neighbor(x, dx, expected):
    assert snap_to_neighbor(x, dx) == expected


def test_hitting_cell_resolves_boundary_by_direction():
    # Point on the x=1 line belongs to cell 1 moving right, cell 0 moving left
    assert hitting_cell(Vector2D(0.5, 0.5), Vector2D(1.0, 0.5)) == (1, 0)
    assert hitting_cell(Vector2D(1.5, 0.5), Vector2D(1.0, 0.5)) == (0, 0)
    assert hitting_cell(Vector2D(0.5, 2.5), Vector2D(0.5, 2.0)) == (0, 1)


def test_ray_step_horizontal():
    p3 = ray_step(Vector2D(0.5, 0.5), Vector2D(0.75, 0.5))
    assert p3 == Vector2D(1.0, 0.5)


def test_ray_step_vertical():
    p3 = ray_step(Vector2D(0.5, 0.5), Vector2D(0.5, 0.25))
    assert p3 == Vector2D(0.5, 0.0)


def test_ray_step_picks_nearest_crossing():
    # Line y = 2x - 0.5: crosses y=1 at x=0.75 before x=1 at y=1.5
    p3 = ray_step(Vector2D(0.5, 0.5), Vector2D(0.6, 0.7))
    assert p3.x == pytest.approx(0.75)
    assert p3.y == 1.0


def test_ray_step_from_grid_line_does_not_stall():
    # p2 already sits on x=1; the next crossing must be x=2
    assert ray_step(Vector2D(0.5, 0.5), Vector2D(1.0, 0.5)) == Vector2D(2.0, 0.5)
    assert ray_step(Vector2D(0.5, 0.5), Vector2D(0.5, 0.0)) == Vector2D(0.5, -1.0)


def test_ray_step_zero_length_returns_p2():
    p = Vector2D(1.3, 2.7)
    assert ray_step(p, p) == p


@pytest.mark.parametrize("angle", [0.3, 1.1, 2.5, 3.3, 4.0, 5.5])
def test_ray_step_always_progresses_to_grid_line(angle):
    p1 = Vector2D(3.3, 4.7)
    p2 = p1.add(Vector2D.from_angle(angle).scale(0.1))
    for _ in range(20):
        p3 = ray_step(p1, p2)
        assert p3 != p2
        assert _on_grid_line(p3.x) or _on_grid_line(p3.y)
        # Moves forward along the ray
        assert p3.subtract(p2).dot(Vector2D.from_angle(angle)) > 0
        p1, p2 = p2, p3


def test_cast_ray_along_view_direction_hits_row_two():
    scene = make_colored_scene()
    position = scene.size().multiply(Vector2D(0.63, 0.63))
    direction = math.pi * 1.25
    towards = position.add(Vector2D.from_angle(direction).scale(NEAR_CLIPPING_PLANE))
    hit = cast_ray(scene, position, towards)
    assert hit.hit
    # The line y = x - 0.63 enters row 2 at x = 3.63
    assert hit.cell == (3, 2)
    assert hit.wall.color == Color.blue()
    assert hit.point.x == pytest.approx(3.63)
    assert hit.point.y == pytest.approx(3.0)
    assert position.distance_to(hit.point) < FAR_CLIPPING_PLANE


def test_cast_ray_straight_up_hits_red_cell():
    scene = make_colored_scene()
    position = Vector2D(1.5, 4.5)
    hit = cast_ray(scene, position, Vector2D(1.5, 4.25))
    assert hit.cell == (1, 2)
    assert hit.wall.color == Color.red()
    assert hit.point == Vector2D(1.5, 3.0)


def test_cast_ray_returns_neighbor_point_when_it_is_a_wall():
    scene = Scene([[None, Color.red()]])
    towards = Vector2D(1.25, 0.5)
    hit = cast_ray(scene, Vector2D(0.5, 0.5), towards)
    assert hit.hit
    assert hit.point == towards
    assert hit.cell == (1, 0)


def test_cast_ray_never_wraps_negative_indices():
    # A plain list lookup at col -1 would find the wall at the end of the row
    scene = Scene([[None, None, Color.red()]])
    hit = cast_ray(scene, Vector2D(1.5, 0.5), Vector2D(1.25, 0.5))
    assert not hit.hit
    assert hit.wall is None


def test_cast_ray_ignores_cells_past_short_rows():
    scene = Scene([[None], [None, None, None, Color.red()]])
    assert scene.width == 4
    hit = cast_ray(scene, Vector2D(0.5, 0.5), Vector2D(0.75, 0.5))
    assert not hit.hit


def test_cast_ray_stops_after_far_clip():
    scene = Scene([[None] * 3 for _ in range(3)])
    origin = Vector2D(1.5, 1.5)
    hit = cast_ray(scene, origin, Vector2D(1.75, 1.5), far=2.0)
    assert not hit.hit
    travelled = origin.distance_to(hit.point)
    assert 2.0 < travelled <= 4.0


def test_cast_ray_zero_length_ray_terminates():
    scene = Scene([[None, None], [None, None]])
    origin = Vector2D(0.5, 0.5)
    hit = cast_ray(scene, origin, origin, max_steps=5)
    assert not hit.hit
    assert hit.point == origin


def test_cast_ray_step_cap_reports_no_hit():
    scene = Scene([[None] * 10 + [Color.red()]])
    hit = cast_ray(scene, Vector2D(0.5, 0.5), Vector2D(0.75, 0.5), max_steps=3)
    assert not hit.hit

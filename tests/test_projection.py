import math

import pytest

from fdf.projection import (
    Camera,
    Point,
    isometric,
    project,
    rotate_x,
    rotate_y,
    rotate_z,
)


@pytest.mark.parametrize("rotate", [rotate_x, rotate_y, rotate_z])
def test_zero_angle_is_identity(rotate):
    assert rotate(7, -3, 0.0) == (7, -3)


def test_rotate_z_quarter_turn():
    assert rotate_z(10, 0, math.pi / 2) == (0, 10)


def test_rotate_z_truncates_toward_zero():
    assert rotate_z(-10, 0, math.pi / 2) == (0, -10)


def test_rotate_x_half_turn_negates():
    assert rotate_x(4, 6, math.pi) == (-4, -6)


def test_rotate_y_half_turn_negates():
    assert rotate_y(4, 6, math.pi) == (-4, -6)


def test_isometric_origin_raised():
    assert isometric(0, 0, 5) == (0, -5)


def test_isometric_diagonal_has_zero_x():
    x, _ = isometric(12, 12, 0)
    assert x == 0


def test_isometric_symmetry():
    x1, y1 = isometric(10, 3, 2)
    x2, y2 = isometric(3, 10, 2)
    assert x1 == -x2
    assert y1 == y2


def test_project_flat_zoom_one_only_shifts():
    camera = Camera(zoom=1)
    assert project(Point(3, 4, 2), camera, 100, 200) == Point(103, 204, 2)


def test_project_default_camera_scales_by_zoom():
    camera = Camera()
    result = project(Point(1, 2, 3), camera, 0, 0)
    assert result == Point(camera.zoom, 2 * camera.zoom, 3 * camera.zoom)


def test_project_height_scale():
    camera = Camera(zoom=1, z_dev=2.0)
    assert project(Point(0, 0, 3), camera, 0, 0).z == 6


def test_project_isometric_matches_isometric():
    camera = Camera(zoom=1, projection=1)
    assert camera.isometric
    result = project(Point(10, 3, 2), camera, 5, 7)
    x, y = isometric(10, 3, 2)
    assert (result.x, result.y) == (x + 5, y + 7)


def test_projection_counter_selects_isometric():
    assert Camera(projection=2).isometric
    assert not Camera().isometric
import pytest

from fdf.controls import (
    Key,
    Quit,
    choose_projection,
    key_press,
    move,
    rise,
    rotate,
    zoom,
)
from fdf.render import Scene


@pytest.fixture
def scene():
    return Scene([[0, 1, 0], [1, 2, 1], [0, 1, 0]], 60, 60)


def test_zoom_in_increments(scene):
    start = scene.camera.zoom
    zoom(scene, Key.NUM_PLUS)
    assert scene.camera.zoom == start + 1


def test_zoom_out_never_below_one(scene):
    scene.camera.zoom = 1
    zoom(scene, Key.NUM_MINUS)
    assert scene.camera.zoom == 1


def test_zoom_redraws(scene):
    assert max(scene.image.data) == 0
    zoom(scene, Key.NUM_PLUS)
    assert max(scene.image.data) == 0xFF


@pytest.mark.parametrize(
    "key, dx, dy",
    [
        (Key.ARROW_LEFT, -5, 0),
        (Key.ARROW_RIGHT, 5, 0),
        (Key.ARROW_UP, 0, -5),
        (Key.ARROW_DOWN, 0, 5),
    ],
)
def test_move(scene, key, dx, dy):
    x0, y0 = scene.x_center, scene.y_center
    move(scene, key)
    assert (scene.x_center, scene.y_center) == (x0 + dx, y0 + dy)


@pytest.mark.parametrize(
    "key, attribute, sign",
    [
        (Key.KEY_Z, "alpha", -1),
        (Key.KEY_A, "alpha", 1),
        (Key.KEY_S, "beta", 1),
        (Key.KEY_X, "beta", -1),
        (Key.KEY_D, "gamma", 1),
        (Key.KEY_C, "gamma", -1),
    ],
)
def test_rotate(scene, key, attribute, sign):
    rotate(scene, key)
    assert getattr(scene.camera, attribute) == pytest.approx(sign * 0.02)


def test_rise_up(scene):
    rise(scene, Key.KEY_PLUS)
    assert scene.camera.z_dev == pytest.approx(1.1)


def test_rise_capped_at_ten(scene):
    scene.camera.z_dev = 12.0
    rise(scene, Key.KEY_PLUS)
    assert scene.camera.z_dev == 10


def test_rise_down_and_floor(scene):
    rise(scene, Key.KEY_MINUS)
    assert scene.camera.z_dev == pytest.approx(0.9)
    scene.camera.z_dev = 0.05
    rise(scene, Key.KEY_MINUS)
    assert scene.camera.z_dev == pytest.approx(0.1)


def test_choose_projection_resets_and_switches(scene):
    scene.camera.alpha = scene.camera.beta = scene.camera.gamma = 0.4
    choose_projection(scene, Key.KEY_1)
    camera = scene.camera
    assert (camera.alpha, camera.beta, camera.gamma) == (0, 0, 0)
    assert camera.projection == 1
    assert camera.isometric


def test_key_press_escape_quits(scene):
    with pytest.raises(Quit):
        key_press(scene, Key.ESC)


def test_key_press_accepts_plain_ints(scene):
    start = scene.camera.zoom
    key_press(scene, int(Key.NUM_PLUS))
    assert scene.camera.zoom == start + 1


def test_key_press_dispatches_rotation(scene):
    key_press(scene, Key.KEY_D)
    assert scene.camera.gamma == pytest.approx(0.02)


def test_key_press_unknown_key_changes_nothing(scene):
    before = (scene.camera.zoom, scene.x_center, scene.y_center, scene.camera.z_dev)
    key_press(scene, 999)
    after = (scene.camera.zoom, scene.x_center, scene.y_center, scene.camera.z_dev)
    assert after == before
    assert max(scene.image.data) == 0
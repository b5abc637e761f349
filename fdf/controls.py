"""Keyboard controls that change the camera of a scene and redraw it."""

from __future__ import annotations

from enum import IntEnum

from .render import Scene

__all__ = [
    "Key",
    "Quit",
    "zoom",
    "move",
    "rotate",
    "rise",
    "choose_projection",
    "key_press",
]

_MOVE_STEP = 5
_ANGLE_STEP = 0.02
_HEIGHT_STEP = 0.1
_HEIGHT_MIN = 0.1
_HEIGHT_MAX = 10.0


class Key(IntEnum):
    """Key codes understood by the controls."""

    KEY_A = 0
    KEY_S = 1
    KEY_D = 2
    KEY_Z = 6
    KEY_X = 7
    KEY_C = 8
    KEY_1 = 18
    KEY_PLUS = 24
    KEY_MINUS = 27
    ESC = 53
    NUM_PLUS = 69
    NUM_MINUS = 78
    ARROW_LEFT = 123
    ARROW_RIGHT = 124
    ARROW_DOWN = 125
    ARROW_UP = 126


_ZOOM_KEYS = frozenset({Key.NUM_PLUS, Key.NUM_MINUS})
_MOVE_KEYS = frozenset({Key.ARROW_LEFT, Key.ARROW_RIGHT, Key.ARROW_DOWN, Key.ARROW_UP})
_ROTATE_KEYS = frozenset(
    {Key.KEY_Z, Key.KEY_X, Key.KEY_C, Key.KEY_A, Key.KEY_S, Key.KEY_D}
)
_RISE_KEYS = frozenset({Key.KEY_PLUS, Key.KEY_MINUS})


class Quit(Exception):
    """Raised when the user asks to leave the program."""


def zoom(scene: Scene, key: int) -> None:
    """Zoom in or out by one step; the zoom never drops below 1."""
    camera = scene.camera
    if key == Key.NUM_PLUS:
        camera.zoom += 1
    elif key == Key.NUM_MINUS:
        camera.zoom -= 1
    camera.zoom = max(camera.zoom, 1)
    scene.draw()


def move(scene: Scene, key: int) -> None:
    """Shift the picture by a few pixels in the direction of an arrow key."""
    if key == Key.ARROW_LEFT:
        scene.x_center -= _MOVE_STEP
    elif key == Key.ARROW_RIGHT:
        scene.x_center += _MOVE_STEP
    elif key == Key.ARROW_UP:
        scene.y_center -= _MOVE_STEP
    else:
        scene.y_center += _MOVE_STEP
    scene.draw()


def rotate(scene: Scene, key: int) -> None:
    """Turn the camera a little about one of its three axes."""
    camera = scene.camera
    if key == Key.KEY_Z:
        camera.alpha -= _ANGLE_STEP
    elif key == Key.KEY_A:
        camera.alpha += _ANGLE_STEP
    elif key == Key.KEY_S:
        camera.beta += _ANGLE_STEP
    elif key == Key.KEY_X:
        camera.beta -= _ANGLE_STEP
    elif key == Key.KEY_D:
        camera.gamma += _ANGLE_STEP
    else:
        camera.gamma -= _ANGLE_STEP
    scene.draw()


def rise(scene: Scene, key: int) -> None:
    """Raise or lower the height scale of the map."""
    camera = scene.camera
    if key == Key.KEY_PLUS:
        if camera.z_dev > _HEIGHT_MAX:
            camera.z_dev = _HEIGHT_MAX
        else:
            camera.z_dev += _HEIGHT_STEP
    elif camera.z_dev < _HEIGHT_MIN:
        camera.z_dev = _HEIGHT_MIN
    else:
        camera.z_dev -= _HEIGHT_STEP
    scene.draw()


def choose_projection(scene: Scene, key: int) -> None:
    """Reset the rotation; the projection key also selects the isometric view."""
    camera = scene.camera
    camera.alpha = 0.0
    camera.beta = 0.0
    camera.gamma = 0.0
    if key == Key.KEY_1:
        camera.projection += 1
    scene.draw()


def key_press(scene: Scene, key: int) -> None:
    """Dispatch a key press to its control. Raises Quit for the escape key."""
    if key == Key.ESC:
        raise Quit()
    if key in _ZOOM_KEYS:
        zoom(scene, key)
    elif key in _MOVE_KEYS:
        move(scene, key)
    elif key in _ROTATE_KEYS:
        rotate(scene, key)
    elif key in _RISE_KEYS:
        rise(scene, key)
    elif key == Key.KEY_1:
        choose_projection(scene, key)
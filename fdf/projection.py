"""Camera state and the projection of map points onto the screen."""

from __future__ import annotations

import math
from dataclasses import dataclass

__all__ = [
    "Camera",
    "Point",
    "rotate_x",
    "rotate_y",
    "rotate_z",
    "isometric",
    "project",
]

_ISO_ANGLE = 0.523599


@dataclass
class Camera:
    """View settings: zoom, height scale, rotation angles and projection mode.

    ``projection`` counts the requests for an isometric view; any non-zero
    value selects it.
    """

    zoom: int = 5
    z_dev: float = 1.0
    alpha: float = 0.0
    beta: float = 0.0
    gamma: float = 0.0
    projection: int = 0

    @property
    def isometric(self) -> bool:
        return bool(self.projection)


@dataclass(frozen=True)
class Point:
    """A point with integer coordinates."""

    x: int
    y: int
    z: int = 0


def rotate_x(y: int, z: int, alpha: float) -> tuple[int, int]:
    """Rotate (y, z) about the x axis; results are truncated to integers."""
    cos, sin = math.cos(alpha), math.sin(alpha)
    return int(y * cos + z * sin), int(-y * sin + z * cos)


def rotate_y(x: int, z: int, beta: float) -> tuple[int, int]:
    """Rotate (x, z) about the y axis; results are truncated to integers."""
    cos, sin = math.cos(beta), math.sin(beta)
    return int(x * cos + z * sin), int(-x * sin + z * cos)


def rotate_z(x: int, y: int, gamma: float) -> tuple[int, int]:
    """Rotate (x, y) about the z axis; results are truncated to integers."""
    cos, sin = math.cos(gamma), math.sin(gamma)
    return int(x * cos - y * sin), int(x * sin + y * cos)


def isometric(x: int, y: int, z: int) -> tuple[int, int]:
    """Return the isometric screen position of (x, y, z)."""
    return (
        int((x - y) * math.cos(_ISO_ANGLE)),
        int(-z + (x + y) * math.sin(_ISO_ANGLE)),
    )


def project(point: Point, camera: Camera, x_center: int, y_center: int) -> Point:
    """Scale, rotate and optionally flatten a point, then shift it by the centre."""
    x = point.x * camera.zoom
    y = point.y * camera.zoom
    z = int(point.z * camera.zoom * camera.z_dev)
    y, z = rotate_x(y, z, camera.alpha)
    x, z = rotate_y(x, z, camera.beta)
    x, y = rotate_z(x, y, camera.gamma)
    if camera.isometric:
        x, y = isometric(x, y, z)
    return Point(x + x_center, y + y_center, z)
"""Drawing a height map as a wire frame into an image."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from .image import Image
from .projection import Camera, Point, project

__all__ = ["Scene", "line_points", "draw_line"]

_LINE_COLOR = 0xFFFFFF


def _half(value: int) -> int:
    """Halve an integer, rounding toward zero."""
    return value // 2 if value >= 0 else -((-value) // 2)


def line_points(start: Point, end: Point) -> Iterator[tuple[int, int]]:
    """Yield the pixels of a line from start up to, but not including, end."""
    dx = abs(start.x - end.x)
    dy = abs(start.y - end.y)
    step_x = 1 if start.x < end.x else -1
    step_y = 1 if start.y < end.y else -1
    error = dx - dy
    x, y = start.x, start.y
    while x != end.x or y != end.y:
        yield x, y
        doubled = error * 2
        if doubled > -dy:
            error -= dy
            x += step_x
        if doubled < dx:
            error += dx
            y += step_y


def draw_line(image: Image, start: Point, end: Point, color: int = _LINE_COLOR) -> None:
    """Draw a line into the image, skipping pixels that fall outside it."""
    for x, y in line_points(start, end):
        if 0 <= x < image.width and 0 <= y < image.height:
            image.put_pixel(x, y, color)


class Scene:
    """A height map together with its camera and the image it is drawn into."""

    def __init__(
        self, heights: Sequence[Sequence[int]], width: int = 1920, height: int = 1080
    ) -> None:
        if not heights or not heights[0]:
            raise ValueError("a scene needs a non-empty height map")
        self.heights = [list(row) for row in heights]
        self.rows = len(self.heights)
        self.columns = len(self.heights[0])
        self.camera = Camera()
        self.image = Image(width, height, 32)
        self.x_center = _half(width - self.camera.zoom * self.columns)
        self.y_center = _half(height - self.camera.zoom * self.rows)

    def coords(self, x: int, y: int) -> Point:
        """Return the map point at column x, row y, scaled by the zoom."""
        zoom = self.camera.zoom
        return Point(x * zoom, y * zoom, self.heights[y][x])

    def _projected(self, x: int, y: int) -> Point:
        return project(self.coords(x, y), self.camera, self.x_center, self.y_center)

    def draw(self) -> Image:
        """Clear the image and draw the wire frame of the map into it."""
        self.image.clear()
        for y in range(self.rows):
            for x in range(self.columns):
                here = self._projected(x, y)
                if x != self.columns - 1:
                    draw_line(self.image, here, self._projected(x + 1, y))
                if y != self.rows - 1:
                    draw_line(self.image, here, self._projected(x, y + 1))
        return self.image
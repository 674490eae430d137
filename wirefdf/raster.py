"""Software rasterisation of the wireframe into an RGB pixel buffer."""

from __future__ import annotations

from collections.abc import Iterator

from wirefdf.geometry import (
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    Camera,
    Point,
    edges,
    interpolate_color,
)
from wirefdf.heightmap import HeightMap


class Canvas:
    """A fixed-size 24-bit RGB image; pixels outside it are silently dropped."""

    def __init__(self, width: int = WINDOW_WIDTH, height: int = WINDOW_HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid canvas size {width}x{height}")
        self.width = width
        self.height = height
        self.data = bytearray(width * height * 3)

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _offset(self, x: int, y: int) -> int:
        return (y * self.width + x) * 3

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel to the low 24 bits of ``color``; ignore it if off the canvas."""
        if not self._inside(x, y):
            return
        offset = self._offset(x, y)
        self.data[offset:offset + 3] = ((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the 0xRRGGBB colour of one pixel."""
        if not self._inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside the canvas")
        offset = self._offset(x, y)
        red, green, blue = self.data[offset:offset + 3]
        return (red << 16) | (green << 8) | blue

    def clear(self) -> None:
        """Set every pixel to black."""
        self.data[:] = bytes(len(self.data))


def line_pixels(p0: Point, p1: Point) -> Iterator[tuple[int, int, int]]:
    """Yield (x, y, color) for each pixel of the segment, with a colour gradient."""
    if abs(p1.x - p0.x) > abs(p1.y - p0.y):
        if p0.x > p1.x:
            p0, p1 = p1, p0
        dx = p1.x - p0.x
        dy = p1.y - p0.y
        step = -1 if dy < 0 else 1
        dy = abs(dy)
        x, y = p0.x, p0.y
        error = 2 * dy - dx
        for _ in range(dx + 1):
            ratio = (x - p0.x) / dx
            yield x, y, interpolate_color(p0.color, p1.color, ratio)
            if error >= 0:
                y += step
                error -= 2 * dx
            error += 2 * dy
            x += 1
    else:
        if p0.y > p1.y:
            p0, p1 = p1, p0
        dx = p1.x - p0.x
        dy = p1.y - p0.y
        if not dy:
            return
        step = -1 if dx < 0 else 1
        dx = abs(dx)
        x, y = p0.x, p0.y
        error = 2 * dx - dy
        for _ in range(dy + 1):
            ratio = (y - p0.y) / dy
            yield x, y, interpolate_color(p0.color, p1.color, ratio)
            if error >= 0:
                x += step
                error -= 2 * dy
            error += 2 * dx
            y += 1


def draw_line(canvas: Canvas, p0: Point, p1: Point) -> None:
    """Draw one segment onto the canvas."""
    for x, y, color in line_pixels(p0, p1):
        canvas.put_pixel(x, y, color)


def render(canvas: Canvas, camera: Camera, hmap: HeightMap) -> None:
    """Clear the canvas and draw the whole wireframe as seen by the camera."""
    canvas.clear()
    for start, end in edges(camera, hmap):
        draw_line(canvas, start, end)
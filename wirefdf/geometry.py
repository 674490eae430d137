"""Projection of height-map points onto the screen."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import IntEnum

from wirefdf.heightmap import HeightMap

WINDOW_WIDTH = 1980
WINDOW_HEIGHT = 1080
SCALE = 53
ISO_ANGLE = 0.523599


class ViewMode(IntEnum):
    """How the map is projected."""

    ISOMETRIC = 0
    TOP = 1
    FRONT = 2
    SIDE = 3


@dataclass(frozen=True)
class Point:
    """A screen or space point with a colour."""

    x: int
    y: int
    z: int = 0
    color: int = 0


@dataclass
class Camera:
    """Zoom, position, rotation angles and projection mode."""

    zoom: int = SCALE
    position_x: int = WINDOW_WIDTH // 2
    position_y: int = WINDOW_HEIGHT // 2
    alpha: float = 0.0
    theta: float = 0.0
    gamma: float = 0.0
    mode: ViewMode = field(default=ViewMode.ISOMETRIC)


def _half(value: int) -> int:
    """Integer halving that rounds toward zero."""
    return value // 2 if value >= 0 else -((-value) // 2)


def rotate_x(y: int, z: int, center: Point, angle: float) -> tuple[int, int]:
    """Rotate (y, z) about the x axis through ``center``."""
    ty, tz = y - center.y, z - center.z
    ry = int(ty * math.cos(angle) - tz * math.sin(angle))
    rz = int(ty * math.sin(angle) + tz * math.cos(angle))
    return ry + center.y, rz + center.z


def rotate_y(x: int, z: int, center: Point, angle: float) -> tuple[int, int]:
    """Rotate (x, z) about the y axis through ``center``."""
    tx, tz = x - center.x, z - center.z
    rx = int(tx * math.cos(angle) + tz * math.sin(angle))
    rz = int(tz * math.cos(angle) - tx * math.sin(angle))
    return rx + center.x, rz + center.z


def rotate_z(x: int, y: int, center: Point, angle: float) -> tuple[int, int]:
    """Rotate (x, y) about the z axis through ``center``."""
    tx, ty = x - center.x, y - center.y
    rx = int(tx * math.cos(angle) - ty * math.sin(angle))
    ry = int(tx * math.sin(angle) + ty * math.cos(angle))
    return rx + center.x, ry + center.y


def center_point(hmap: HeightMap, zoom: int) -> Point:
    """Return the scaled middle of the map."""
    return Point(
        _half(hmap.width - 1) * zoom,
        _half(hmap.depth - 1) * zoom,
        _half(hmap.z_max + hmap.z_min) * zoom,
    )


def interpolate_color(color0: int, color1: int, ratio: float) -> int:
    """Blend two 0xRRGGBB colours channel by channel."""
    result = 0
    for shift in (16, 8, 0):
        c0 = (color0 >> shift) & 0xFF
        c1 = (color1 >> shift) & 0xFF
        result |= int(c0 + (c1 - c0) * ratio) << shift
    return result


def isometric(camera: Camera, hmap: HeightMap, x: int, y: int) -> Point:
    """Project grid point (x, y) with rotation and isometric view."""
    color = hmap.colors[y][x]
    z = hmap.heights[y][x] * camera.zoom
    x *= camera.zoom
    y *= camera.zoom
    center = center_point(hmap, camera.zoom)
    y, z = rotate_x(y, z, center, camera.alpha)
    x, z = rotate_y(x, z, center, camera.theta)
    x, y = rotate_z(x, y, center, camera.gamma)
    x -= center.x
    y -= center.y
    z -= center.z
    return Point(
        int((x - y) * math.cos(ISO_ANGLE) + camera.position_x),
        int((x + y) * math.sin(ISO_ANGLE) - z + camera.position_y),
        z,
        color,
    )


def orthographic(camera: Camera, hmap: HeightMap, x: int, y: int) -> Point:
    """Project grid point (x, y) in the camera's top, front or side view."""
    center = center_point(hmap, camera.zoom)
    z = hmap.heights[y][x]
    zoom = camera.zoom
    if camera.mode == ViewMode.TOP:
        px = x * zoom + camera.position_x - center.x
        py = y * zoom + camera.position_y - center.y
    elif camera.mode == ViewMode.FRONT:
        px = x * zoom + camera.position_x - center.x
        py = -z * zoom + camera.position_y + center.z
    elif camera.mode == ViewMode.SIDE:
        px = y * zoom + camera.position_x - center.y
        py = -z * zoom + camera.position_y + center.z
    else:
        raise ValueError(f"not an orthographic view: {camera.mode!r}")
    return Point(px, py, z, hmap.colors[y][x])


def project(camera: Camera, hmap: HeightMap, x: int, y: int) -> Point:
    """Project a grid point using the camera's current mode."""
    if camera.mode in (ViewMode.TOP, ViewMode.FRONT, ViewMode.SIDE):
        return orthographic(camera, hmap, x, y)
    return isometric(camera, hmap, x, y)


def edges(camera: Camera, hmap: HeightMap) -> Iterator[tuple[Point, Point]]:
    """Yield projected segments joining each point to its right and lower neighbours."""
    width, depth = hmap.width, hmap.depth
    for i in range(depth):
        for j in range(width):
            start = project(camera, hmap, j, i)
            if j + 1 < width:
                yield start, project(camera, hmap, j + 1, i)
            if i + 1 < depth:
                yield start, project(camera, hmap, j, i + 1)
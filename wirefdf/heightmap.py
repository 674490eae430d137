"""Reading, validating and editing .fdf height-map files."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path

DEFAULT_COLOR_STEP = 500

_FIELD = re.compile(r"[^ \n]+")
_POINT = re.compile(r"-?[0-9]*(?:,0x[0-9a-fA-F]*)?")
_INT_PREFIX = re.compile(r"\s*([-+]?[0-9]*)")
_HEX_PREFIX = re.compile(r"\s*([0-9a-fA-F]*)")


class MapError(ValueError):
    """Raised when a map file is malformed."""


@dataclass
class HeightMap:
    """A grid of heights with one 0xRRGGBB colour per point."""

    heights: list[list[int]]
    colors: list[list[int]]
    z_min: int = 0
    z_max: int = 0

    @property
    def width(self) -> int:
        """Number of points in each row."""
        return len(self.heights[0]) if self.heights else 0

    @property
    def depth(self) -> int:
        """Number of rows."""
        return len(self.heights)

    def shift_heights(self, step: int) -> None:
        """Move every non-zero height by ``step``, never letting it reach zero."""
        self.heights = [[_shift(value, step) for value in row] for row in self.heights]


def _shift(value: int, step: int) -> int:
    if not value:
        return value
    value += step
    if not value:
        value += step
    return value


def count_points(line: str) -> int:
    """Count the points on one map line, raising MapError on a bad field."""
    count = 0
    for match in _FIELD.finditer(line):
        field = match.group()
        if not _POINT.fullmatch(field):
            raise MapError(f"invalid point {field!r}")
        # A lone '-' at the very end of the text is not a point.
        if field == "-" and match.end() == len(line):
            continue
        count += 1
    return count


def _read_lines(path: str | os.PathLike[str]) -> list[str]:
    with open(path, "rb") as stream:
        return [raw.decode("latin-1") for raw in stream]


def validate_file(path: str | os.PathLike[str]) -> tuple[int, int]:
    """Check a map file and return its (width, depth)."""
    lines = _read_lines(path)
    if not lines:
        raise MapError(f"{Path(path)}: empty map")
    width = count_points(lines[0])
    for line in lines[1:]:
        if count_points(line) != width:
            raise MapError(f"{Path(path)}: rows have different lengths")
    return width, len(lines)


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    digits = match.group(1) if match else ""
    if digits in ("", "-", "+"):
        return 0
    return int(digits)


def _hex(text: str) -> int:
    match = _HEX_PREFIX.match(text)
    digits = match.group(1) if match else ""
    return int(digits, 16) & 0xFFFFFFFF if digits else 0


def parse_map(path: str | os.PathLike[str], default_color: int | None = None) -> HeightMap:
    """Validate and load a map file into a HeightMap."""
    width, _ = validate_file(path)
    if default_color is None:
        default_color = random_color()
    heights: list[list[int]] = []
    colors: list[list[int]] = []
    z_min = z_max = 0
    for line in _read_lines(path):
        row_heights: list[int] = []
        row_colors: list[int] = []
        for field in line.split()[:width]:
            parts = [part for part in field.split(",") if part]
            z = _atoi(parts[0]) if parts else 0
            z_min = min(z_min, z)
            z_max = max(z_max, z)
            if len(parts) > 1:
                color = _hex(parts[1][2:])
            else:
                color = (default_color + z * DEFAULT_COLOR_STEP) & 0xFFFFFFFF
            row_heights.append(z)
            row_colors.append(color)
        heights.append(row_heights)
        colors.append(row_colors)
    return HeightMap(heights=heights, colors=colors, z_min=z_min, z_max=z_max)


def random_color() -> int:
    """Return a random signed 32-bit value used as the base colour."""
    return int.from_bytes(os.urandom(4), "little", signed=True)
from __future__ import annotations

import math
from dataclasses import dataclass
from math import sqrt

from .coords import AnyHex, FractionalHex, Point
from .errors import InvalidCorner


@dataclass(frozen=True, slots=True)
class Orientation:
    name: str
    f0: float; f1: float; f2: float; f3: float  # cube(q,r) -> pixel
    b0: float; b1: float; b2: float; b3: float  # pixel -> cube(q,r)
    start_angle: float                           # corner 0, in sixths of a turn


_POINTY_MATRIX = dict(
    f0 = sqrt(3.0),     f1 = sqrt(3.0)/2.0,
    f2 = 0.0,           f3 = 3.0/2.0,
    b0 = sqrt(3.0)/3.0, b1 = -1.0/3.0,
    b2 = 0.0,           b3 = 2.0/3.0,
    start_angle = 0.5,
)
_FLAT_MATRIX = dict(
    f0 = 3.0/2.0,       f1 = 0.0,
    f2 = sqrt(3.0)/2.0, f3 = sqrt(3.0),
    b0 = 2.0/3.0,       b1 = 0.0,
    b2 = -1.0/3.0,      b3 = sqrt(3.0)/3.0,
    start_angle = 0.0,
)

POINTY = Orientation(name="pointy", **_POINTY_MATRIX)
FLAT = Orientation(name="flat", **_FLAT_MATRIX)

# Triangle presets share the pointy/flat matrices; their names select the
# triangular region shape in ``hexlattice.grid``.
TRIANGLE_UP = Orientation(name="triangle-up", **_POINTY_MATRIX)
TRIANGLE_DOWN = Orientation(name="triangle-down", **_POINTY_MATRIX)
TRIANGLE_LEFT = Orientation(name="triangle-left", **_FLAT_MATRIX)
TRIANGLE_RIGHT = Orientation(name="triangle-right", **_FLAT_MATRIX)

ORIENTATIONS: dict[str, Orientation] = {
    o.name: o
    for o in (POINTY, FLAT, TRIANGLE_UP, TRIANGLE_DOWN, TRIANGLE_LEFT, TRIANGLE_RIGHT)
}


def orientation_by_name(name: str) -> Orientation:
    try:
        return ORIENTATIONS[name]
    except KeyError:
        raise ValueError(f"Unknown orientation: {name!r}") from None


@dataclass(frozen=True, slots=True)
class Layout:
    orientation: Orientation
    size: Point    # independent x/y scale
    origin: Point  # pixel position of Hex(0, 0, 0)


def hex_to_pixel(layout: Layout, h: AnyHex) -> Point:
    M = layout.orientation
    x = (M.f0 * h.q + M.f1 * h.r) * layout.size.x
    y = (M.f2 * h.q + M.f3 * h.r) * layout.size.y
    return Point(x + layout.origin.x, y + layout.origin.y)


def pixel_to_hex(layout: Layout, p: Point) -> FractionalHex:
    """Map a pixel back to cube space without rounding.

    The result is generally not a lattice point; pass it through
    :func:`~hexlattice.geometry.rounding.hex_round` to get a :class:`Hex`.
    """

    M = layout.orientation
    px = (p.x - layout.origin.x) / layout.size.x
    py = (p.y - layout.origin.y) / layout.size.y
    q = M.b0 * px + M.b1 * py
    r = M.b2 * px + M.b3 * py
    return FractionalHex(q, r, -q - r)


def hex_corner_offset(layout: Layout, corner: int) -> Point:
    if not 0 <= corner < 6:
        raise InvalidCorner(f"Invalid corner {corner}: expected 0 to 5")
    angle = 2.0 * math.pi * (layout.orientation.start_angle + corner) / 6
    return Point(layout.size.x * math.cos(angle), layout.size.y * math.sin(angle))


def polygon_corners(layout: Layout, h: AnyHex) -> list[Point]:
    """Return the six corners of ``h`` in increasing corner order."""

    center = hex_to_pixel(layout, h)
    corners: list[Point] = []
    for index in range(6):
        offset = hex_corner_offset(layout, index)
        corners.append(Point(center.x + offset.x, center.y + offset.y))
    return corners

"""Bulk generation of hexagonal and triangular grid regions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from .geometry import (
    POINTY,
    TRIANGLE_DOWN,
    TRIANGLE_LEFT,
    TRIANGLE_RIGHT,
    TRIANGLE_UP,
    Hex,
    Orientation,
    hex_length,
)

GridKey = tuple[int, int, int]

_VERTICAL_TRIANGLES = frozenset({TRIANGLE_UP.name, TRIANGLE_DOWN.name})
_HORIZONTAL_TRIANGLES = frozenset({TRIANGLE_LEFT.name, TRIANGLE_RIGHT.name})


class GridShape(str, Enum):
    """Region shapes the generator knows how to enumerate."""

    HEXAGON = "hexagon"
    TRIANGLE = "triangle"


@dataclass(frozen=True, slots=True)
class GridEntry:
    coordinates: Hex
    distance: int

    @property
    def key(self) -> GridKey:
        return grid_key(self.coordinates)


HexGrid = dict[GridKey, GridEntry]


def grid_key(h: Hex) -> GridKey:
    return (h.q, h.r, h.s)


def canonical_key(h: Hex) -> str:
    """Return the ``"q,r,s"`` string form used for element ids."""

    return f"{h.q},{h.r},{h.s}"


def _check_radius(radius: int) -> None:
    if radius < 0:
        raise ValueError("radius must be non-negative")


def iter_hexagon_region(radius: int) -> Iterator[Hex]:
    """Yield every hex within ``radius`` steps of the origin, q-major."""

    _check_radius(radius)
    for q in range(-radius, radius + 1):
        r1 = max(-radius, -q - radius)
        r2 = min(radius, -q + radius)
        for r in range(r1, r2 + 1):
            yield Hex(q, r, -q - r)


def iter_triangle_region(radius: int, orientation: Orientation) -> Iterator[Hex]:
    """Yield the triangular region selected by ``orientation``.

    Only the four triangle presets select a region; any other orientation
    (pointy, flat, or a custom one) yields nothing.
    """

    _check_radius(radius)
    if orientation.name in _VERTICAL_TRIANGLES:
        for q in range(-radius, radius + 1):
            for r in range(0, radius - q + 1):
                yield Hex(q, r, -q - r)
    elif orientation.name in _HORIZONTAL_TRIANGLES:
        for r in range(-radius, radius + 1):
            for q in range(0, radius - r + 1):
                yield Hex(q, r, -q - r)


def _collect(hexes: Iterator[Hex]) -> HexGrid:
    grid: HexGrid = {}
    for h in hexes:
        grid[grid_key(h)] = GridEntry(coordinates=h, distance=hex_length(h))
    return grid


def generate_hexagon_grid(radius: int) -> HexGrid:
    return _collect(iter_hexagon_region(radius))


def generate_triangle_grid(radius: int, orientation: Orientation) -> HexGrid:
    return _collect(iter_triangle_region(radius, orientation))


def generate_grid(
    shape: GridShape, radius: int, orientation: Orientation = POINTY
) -> HexGrid:
    """Dispatch to the generator for ``shape``."""

    shape = GridShape(shape)
    if shape is GridShape.HEXAGON:
        return generate_hexagon_grid(radius)
    return generate_triangle_grid(radius, orientation)


__all__ = [
    "GridEntry",
    "GridKey",
    "GridShape",
    "HexGrid",
    "canonical_key",
    "generate_grid",
    "generate_hexagon_grid",
    "generate_triangle_grid",
    "grid_key",
    "iter_hexagon_region",
    "iter_triangle_region",
]

"""Project generated grids into pixel-space corner polygons."""

from __future__ import annotations

import math

import numpy as np

from .geometry import Layout, Point, polygon_corners
from .grid import HexGrid


def generate_hex_corners(layout: Layout, grid: HexGrid) -> list[list[Point]]:
    """Return one six-point polygon per grid entry, in the grid's iteration order.

    ``result[i]`` belongs to the ``i``-th entry of ``grid``; renderers rely on
    that alignment.
    """

    return [polygon_corners(layout, entry.coordinates) for entry in grid.values()]


def corner_array(layout: Layout, grid: HexGrid) -> np.ndarray:
    """Vectorised :func:`generate_hex_corners` returning shape ``(n, 6, 2)``."""

    M = layout.orientation
    coords = np.array(
        [(entry.coordinates.q, entry.coordinates.r) for entry in grid.values()],
        dtype=np.float64,
    ).reshape(-1, 2)
    q = coords[:, 0]
    r = coords[:, 1]
    centers = np.column_stack(
        (
            (M.f0 * q + M.f1 * r) * layout.size.x + layout.origin.x,
            (M.f2 * q + M.f3 * r) * layout.size.y + layout.origin.y,
        )
    )
    angles = 2.0 * math.pi * (M.start_angle + np.arange(6)) / 6
    offsets = np.column_stack(
        (layout.size.x * np.cos(angles), layout.size.y * np.sin(angles))
    )
    return centers[:, np.newaxis, :] + offsets[np.newaxis, :, :]


__all__ = ["corner_array", "generate_hex_corners"]

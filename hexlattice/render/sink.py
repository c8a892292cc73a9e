"""Boundary between the geometry core and anything that draws it."""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from ..corners import generate_hex_corners
from ..geometry import Layout, Point
from ..grid import GridEntry, HexGrid


@runtime_checkable
class RenderSink(Protocol):
    """Receives one call per grid entry, in corner-projector order."""

    def draw(self, entry: GridEntry, corners: Sequence[Point], index: int) -> None:
        ...


def render_grid(layout: Layout, grid: HexGrid, sink: RenderSink) -> int:
    """Feed every entry of ``grid`` and its polygon to ``sink``.

    Returns the number of entries drawn.
    """

    polygons = generate_hex_corners(layout, grid)
    count = 0
    for index, (entry, corners) in enumerate(zip(grid.values(), polygons)):
        sink.draw(entry, corners, index)
        count += 1
    return count


def polygon_centroid(corners: Sequence[Point]) -> Point:
    n = len(corners)
    return Point(sum(p.x for p in corners) / n, sum(p.y for p in corners) / n)


__all__ = ["RenderSink", "polygon_centroid", "render_grid"]

"""Write a triangular grid to ``triangle.svg``."""

from __future__ import annotations

from pathlib import Path

from hexlattice.geometry import TRIANGLE_UP, Layout, Point
from hexlattice.grid import generate_triangle_grid
from hexlattice.render import SvgSink, render_grid


if __name__ == "__main__":
    layout = Layout(TRIANGLE_UP, size=Point(18.0, 18.0), origin=Point(0.0, 0.0))
    grid = generate_triangle_grid(4, TRIANGLE_UP)
    sink = SvgSink()
    render_grid(layout, grid, sink)
    Path("triangle.svg").write_text(sink.document(), encoding="utf-8")
    print(f"wrote {sink.element_count} hexagons to triangle.svg")

import polars as pl
import pytest

from hexlattice.frames import grid_frame
from hexlattice.geometry import POINTY, Layout, Point
from hexlattice.grid import generate_hexagon_grid, generate_triangle_grid


def test_frame_rows_follow_grid_order():
    grid = generate_hexagon_grid(1)
    frame = grid_frame(grid)
    assert frame.columns == ["key", "q", "r", "s", "distance"]
    assert frame.height == 7
    assert frame["key"].to_list()[0] == "-1,0,1"
    assert frame["distance"].sum() == 6
    assert frame.schema["q"] == pl.Int64


def test_frame_with_layout_adds_centres():
    layout = Layout(POINTY, Point(10.0, 10.0), Point(5.0, 7.0))
    frame = grid_frame(generate_hexagon_grid(1), layout)
    assert frame.columns[-2:] == ["x", "y"]
    centre = frame.filter(pl.col("key") == "0,0,0").row(0, named=True)
    assert (centre["x"], centre["y"]) == pytest.approx((5.0, 7.0))


def test_empty_frame_keeps_schema():
    frame = grid_frame(generate_triangle_grid(2, POINTY))
    assert frame.height == 0
    assert frame.columns == ["key", "q", "r", "s", "distance"]

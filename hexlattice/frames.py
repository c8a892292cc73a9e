"""Columnar export of generated grids."""

from __future__ import annotations

from typing import Dict

import polars as pl

from .geometry import Layout, hex_to_pixel
from .grid import HexGrid, canonical_key

_GRID_FRAME_SCHEMA: Dict[str, pl.datatypes.DataType] = {
    "key": pl.String,
    "q": pl.Int64,
    "r": pl.Int64,
    "s": pl.Int64,
    "distance": pl.Int64,
}

_CENTRE_SCHEMA: Dict[str, pl.datatypes.DataType] = {
    "x": pl.Float64,
    "y": pl.Float64,
}


def grid_frame(grid: HexGrid, layout: Layout | None = None) -> pl.DataFrame:
    """Return one row per grid entry, in grid order.

    When ``layout`` is given the pixel centre of each hex is added as
    ``x`` and ``y`` columns.
    """

    schema = dict(_GRID_FRAME_SCHEMA)
    if layout is not None:
        schema.update(_CENTRE_SCHEMA)

    rows = []
    for entry in grid.values():
        h = entry.coordinates
        row = {
            "key": canonical_key(h),
            "q": h.q,
            "r": h.r,
            "s": h.s,
            "distance": entry.distance,
        }
        if layout is not None:
            centre = hex_to_pixel(layout, h)
            row["x"] = centre.x
            row["y"] = centre.y
        rows.append(row)

    if not rows:
        return pl.DataFrame(schema=schema)
    return pl.DataFrame(rows, schema=schema)


__all__ = ["grid_frame"]

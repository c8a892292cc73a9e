"""Hexagonal grid coordinates, layout transforms and grid generation."""

from .geometry import (
    Axial,
    FractionalHex,
    Hex,
    Layout,
    Orientation,
    Point,
    hex_distance,
    hex_round,
    hex_to_pixel,
    pixel_to_hex,
    polygon_corners,
)
from .grid import (
    GridEntry,
    GridShape,
    HexGrid,
    generate_grid,
    generate_hexagon_grid,
    generate_triangle_grid,
)
from .corners import corner_array, generate_hex_corners

__version__ = "0.1.0"

__all__ = [
    "Axial",
    "FractionalHex",
    "GridEntry",
    "GridShape",
    "Hex",
    "HexGrid",
    "Layout",
    "Orientation",
    "Point",
    "corner_array",
    "generate_grid",
    "generate_hex_corners",
    "generate_hexagon_grid",
    "generate_triangle_grid",
    "hex_distance",
    "hex_round",
    "hex_to_pixel",
    "pixel_to_hex",
    "polygon_corners",
    "__version__",
]

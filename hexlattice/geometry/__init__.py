from .errors import HexGeometryError, InvalidCoordinate, InvalidCorner, InvalidDirection
from .coords import (
    AnyHex,
    Axial,
    FractionalHex,
    Hex,
    Point,
    hex_add,
    hex_equal,
    hex_scale,
    hex_subtract,
    make_hex,
)
from .conversions import axial_to_cube, cube_to_axial
from .directions import HEX_DIRECTIONS, hex_direction, hex_neighbor, hex_neighbors
from .metrics import hex_distance, hex_length, hex_lerp, hex_linedraw
from .rounding import hex_round
from .layout import (
    FLAT,
    ORIENTATIONS,
    POINTY,
    TRIANGLE_DOWN,
    TRIANGLE_LEFT,
    TRIANGLE_RIGHT,
    TRIANGLE_UP,
    Layout,
    Orientation,
    hex_corner_offset,
    hex_to_pixel,
    orientation_by_name,
    pixel_to_hex,
    polygon_corners,
)

__all__ = [
    "HexGeometryError",
    "InvalidCoordinate",
    "InvalidCorner",
    "InvalidDirection",
    "AnyHex",
    "Axial",
    "FractionalHex",
    "Hex",
    "Point",
    "hex_add",
    "hex_equal",
    "hex_scale",
    "hex_subtract",
    "make_hex",
    "axial_to_cube",
    "cube_to_axial",
    "HEX_DIRECTIONS",
    "hex_direction",
    "hex_neighbor",
    "hex_neighbors",
    "hex_distance",
    "hex_length",
    "hex_lerp",
    "hex_linedraw",
    "hex_round",
    "FLAT",
    "ORIENTATIONS",
    "POINTY",
    "TRIANGLE_DOWN",
    "TRIANGLE_LEFT",
    "TRIANGLE_RIGHT",
    "TRIANGLE_UP",
    "Layout",
    "Orientation",
    "hex_corner_offset",
    "hex_to_pixel",
    "orientation_by_name",
    "pixel_to_hex",
    "polygon_corners",
]

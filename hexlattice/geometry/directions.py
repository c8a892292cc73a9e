from __future__ import annotations

from typing import Iterator

from .coords import AnyHex, Hex, hex_add
from .errors import InvalidDirection

# Index 0 points along +q/-s; each following entry is the next 60 degree step,
# in the same rotational sense as corner indices in ``layout``.
HEX_DIRECTIONS: tuple[Hex, ...] = (
    Hex(1, 0, -1),
    Hex(1, -1, 0),
    Hex(0, -1, 1),
    Hex(-1, 0, 1),
    Hex(-1, 1, 0),
    Hex(0, 1, -1),
)


def hex_direction(direction: int) -> Hex:
    """Return the unit hex for ``direction`` (0..5)."""

    if not 0 <= direction < len(HEX_DIRECTIONS):
        raise InvalidDirection(f"Invalid direction {direction}: expected 0 to 5")
    return HEX_DIRECTIONS[direction]


def hex_neighbor(h: AnyHex, direction: int) -> AnyHex:
    return hex_add(h, hex_direction(direction))


def hex_neighbors(h: AnyHex) -> Iterator[AnyHex]:
    for d in HEX_DIRECTIONS:
        yield hex_add(h, d)

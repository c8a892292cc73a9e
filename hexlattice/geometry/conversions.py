from __future__ import annotations

from .coords import Axial, Hex


def axial_to_cube(a: Axial) -> Hex:
    return Hex(a.q, a.r, a.s)


def cube_to_axial(h: Hex) -> Axial:
    return Axial(h.q, h.r)

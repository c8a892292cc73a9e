from __future__ import annotations

import math

from .coords import FractionalHex, Hex


def _round_half_up(value: float) -> int:
    # .5 goes toward +infinity, unlike Python's round-half-to-even.
    return math.floor(value + 0.5)


def hex_round(h: FractionalHex) -> Hex:
    """Snap a fractional cube coordinate to the nearest lattice hex.

    Each component is rounded on its own, then the component with the
    largest rounding error is rebuilt from the other two so that
    ``q + r + s == 0`` holds again. Comparisons are strict: on a tie
    ``q`` loses to ``r``/``s`` and ``r`` loses to ``s``.
    """

    q = _round_half_up(h.q)
    r = _round_half_up(h.r)
    s = _round_half_up(h.s)

    dq = abs(q - h.q)
    dr = abs(r - h.r)
    ds = abs(s - h.s)

    if dq > dr and dq > ds:
        q = -r - s
    elif dr > ds:
        r = -q - s
    else:
        s = -q - r
    return Hex(q, r, s)

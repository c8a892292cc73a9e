from __future__ import annotations

from .coords import AnyHex, FractionalHex, Hex, hex_subtract
from .rounding import hex_round

# Endpoint nudge for line drawing so that samples on a shared edge land on
# the same side every time.
_LINE_NUDGE = (1e-6, 1e-6, -2e-6)


def hex_length(h: AnyHex) -> int:
    """Number of steps from the origin to ``h``."""

    total = abs(h.q) + abs(h.r) + abs(h.s)
    return int(total // 2)


def hex_distance(a: AnyHex, b: AnyHex) -> int:
    return hex_length(hex_subtract(a, b))


def hex_lerp(a: AnyHex, b: AnyHex, t: float) -> FractionalHex:
    return FractionalHex(
        a.q * (1.0 - t) + b.q * t,
        a.r * (1.0 - t) + b.r * t,
        a.s * (1.0 - t) + b.s * t,
    )


def hex_linedraw(a: Hex, b: Hex) -> list[Hex]:
    """Return the lattice hexes on the straight line from ``a`` to ``b``, inclusive."""

    n = hex_distance(a, b)
    dq, dr, ds = _LINE_NUDGE
    a_nudge = FractionalHex(a.q + dq, a.r + dr, a.s + ds)
    b_nudge = FractionalHex(b.q + dq, b.r + dr, b.s + ds)
    step = 1.0 / max(n, 1)
    return [hex_round(hex_lerp(a_nudge, b_nudge, step * i)) for i in range(n + 1)]

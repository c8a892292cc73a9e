from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidCoordinate

# Relative tolerance for the sum-zero check on fractional coordinates.
FRACTIONAL_TOLERANCE = 1e-9


@dataclass(frozen=True, slots=True)
class Hex:
    """Integer cube coordinate on the hex lattice."""

    q: int
    r: int
    s: int

    def __post_init__(self) -> None:
        if self.q + self.r + self.s != 0:
            raise InvalidCoordinate(
                f"Invalid cube coordinates ({self.q}, {self.r}, {self.s}): q + r + s must be 0"
            )


@dataclass(frozen=True, slots=True)
class FractionalHex:
    """Cube coordinate with real components, e.g. an unrounded pixel lookup."""

    q: float
    r: float
    s: float

    def __post_init__(self) -> None:
        scale = max(1.0, abs(self.q) + abs(self.r) + abs(self.s))
        if abs(self.q + self.r + self.s) > FRACTIONAL_TOLERANCE * scale:
            raise InvalidCoordinate(
                f"Invalid cube coordinates ({self.q}, {self.r}, {self.s}): q + r + s must be 0"
            )


AnyHex = Hex | FractionalHex


@dataclass(frozen=True, slots=True)
class Axial:
    """Two-component view of a cube coordinate; ``s`` is derived on read."""

    q: int
    r: int

    @property
    def s(self) -> int:
        return -self.q - self.r

    @classmethod
    def from_cube(cls, q: int, r: int, s: int) -> "Axial":
        """Validate the three logical components and keep only ``q`` and ``r``."""

        if q + r + s != 0:
            raise InvalidCoordinate(f"Invalid cube coordinates ({q}, {r}, {s}): q + r + s must be 0")
        return cls(q, r)


@dataclass(frozen=True, slots=True)
class Point:
    x: float
    y: float


def make_hex(q: float, r: float, s: float) -> AnyHex:
    """Return a :class:`Hex` for integer components, otherwise a :class:`FractionalHex`."""

    if isinstance(q, int) and isinstance(r, int) and isinstance(s, int):
        return Hex(q, r, s)
    return FractionalHex(float(q), float(r), float(s))


def hex_equal(a: AnyHex, b: AnyHex) -> bool:
    return a.q == b.q and a.r == b.r and a.s == b.s


def hex_add(a: AnyHex, b: AnyHex) -> AnyHex:
    return make_hex(a.q + b.q, a.r + b.r, a.s + b.s)


def hex_subtract(a: AnyHex, b: AnyHex) -> AnyHex:
    return make_hex(a.q - b.q, a.r - b.r, a.s - b.s)


def hex_scale(a: AnyHex, k: float) -> AnyHex:
    return make_hex(a.q * k, a.r * k, a.s * k)


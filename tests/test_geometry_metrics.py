import itertools

import pytest

from hexlattice.geometry import (
    FractionalHex,
    Hex,
    hex_distance,
    hex_length,
    hex_lerp,
    hex_linedraw,
)
from hexlattice.grid import iter_hexagon_region

SAMPLE = [Hex(0, 0, 0), Hex(1, -1, 0), Hex(3, -7, 4), Hex(-2, 5, -3), Hex(4, 0, -4)]


def test_length():
    assert hex_length(Hex(0, 0, 0)) == 0
    assert hex_length(Hex(3, -7, 4)) == 7


def test_length_zero_only_at_origin():
    for h in iter_hexagon_region(3):
        assert hex_length(h) >= 0
        assert (hex_length(h) == 0) == (h == Hex(0, 0, 0))


def test_length_floors_fractional_values():
    assert hex_length(FractionalHex(0.5, 0.5, -1.0)) == 1
    assert hex_length(FractionalHex(0.6, 0.3, -0.9)) == 0


def test_distance():
    assert hex_distance(Hex(3, -7, 4), Hex(0, 0, 0)) == 7


@pytest.mark.parametrize(("a", "b"), itertools.product(SAMPLE, repeat=2))
def test_distance_is_symmetric(a, b):
    assert hex_distance(a, b) == hex_distance(b, a)
    assert hex_distance(a, a) == 0


@pytest.mark.parametrize(("a", "b", "c"), itertools.product(SAMPLE, repeat=3))
def test_triangle_inequality(a, b, c):
    assert hex_distance(a, c) <= hex_distance(a, b) + hex_distance(b, c)


def test_lerp_midpoint():
    mid = hex_lerp(Hex(0, 0, 0), Hex(2, -2, 0), 0.5)
    assert (mid.q, mid.r, mid.s) == pytest.approx((1.0, -1.0, 0.0))


def test_linedraw_steps_one_hex_at_a_time():
    a, b = Hex(0, 0, 0), Hex(1, -5, 4)
    line = hex_linedraw(a, b)
    assert line[0] == a and line[-1] == b
    assert len(line) == hex_distance(a, b) + 1
    for first, second in zip(line, line[1:]):
        assert hex_distance(first, second) == 1


def test_linedraw_single_hex():
    assert hex_linedraw(Hex(2, -1, -1), Hex(2, -1, -1)) == [Hex(2, -1, -1)]

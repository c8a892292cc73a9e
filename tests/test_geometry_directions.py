import pytest

from hexlattice.geometry import (
    HEX_DIRECTIONS,
    Hex,
    InvalidDirection,
    hex_direction,
    hex_distance,
    hex_neighbor,
    hex_neighbors,
)


def test_direction_table_order():
    assert [hex_direction(i) for i in range(6)] == [
        Hex(1, 0, -1),
        Hex(1, -1, 0),
        Hex(0, -1, 1),
        Hex(-1, 0, 1),
        Hex(-1, 1, 0),
        Hex(0, 1, -1),
    ]
    assert HEX_DIRECTIONS[0] == Hex(1, 0, -1)


@pytest.mark.parametrize("index", [-1, 6, 7, 100])
def test_direction_out_of_range(index):
    with pytest.raises(InvalidDirection):
        hex_direction(index)


def test_neighbor_out_of_range_propagates():
    with pytest.raises(InvalidDirection):
        hex_neighbor(Hex(0, 0, 0), 6)


def test_neighbor():
    assert hex_neighbor(Hex(1, -2, 1), 2) == Hex(1, -3, 2)


@pytest.mark.parametrize("origin", [Hex(0, 0, 0), Hex(3, -5, 2), Hex(-4, 1, 3)])
def test_neighbors_are_distinct_and_adjacent(origin):
    ring = [hex_neighbor(origin, i) for i in range(6)]
    assert len(set(ring)) == 6
    assert all(hex_distance(origin, n) == 1 for n in ring)
    assert list(hex_neighbors(origin)) == ring


@pytest.mark.parametrize("index", range(6))
def test_opposite_direction_returns_home(index):
    h = Hex(2, -1, -1)
    assert hex_neighbor(hex_neighbor(h, index), (index + 3) % 6) == h

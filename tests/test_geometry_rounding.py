import pytest

from hexlattice.geometry import FractionalHex, Hex, hex_round


def test_round_exact_lattice_point():
    assert hex_round(FractionalHex(2.0, -1.0, -1.0)) == Hex(2, -1, -1)


def test_round_rebuilds_axis_with_largest_error():
    # naive (0, 0, -1); q error 0.4 is the largest
    assert hex_round(FractionalHex(0.4, 0.3, -0.7)) == Hex(1, 0, -1)


def test_round_tie_between_q_and_r_goes_to_r():
    # naive (1, 1, -1) with errors (0.5, 0.5, 0.0): q is not strictly
    # greatest, r beats s, so r is recomputed.
    assert hex_round(FractionalHex(0.5, 0.5, -1.0)) == Hex(1, 0, -1)


def test_round_tie_between_q_and_s_goes_to_s():
    # naive (0, 1, 0) with errors (0.5, 0.0, 0.5)
    assert hex_round(FractionalHex(-0.5, 1.0, -0.5)) == Hex(0, 1, -1)


def test_round_tie_between_r_and_s_goes_to_s():
    # naive (-1, 1, 1) with errors (0.0, 0.5, 0.5)
    assert hex_round(FractionalHex(-1.0, 0.5, 0.5)) == Hex(-1, 1, 0)


def test_round_half_values_go_up():
    # 2.5 -> 3 and -2.5 -> -2, not banker's rounding
    assert hex_round(FractionalHex(2.5, -2.5, 0.0)) == Hex(3, -3, 0)


@pytest.mark.parametrize(
    "fractional",
    [
        FractionalHex(0.1, 0.1, -0.2),
        FractionalHex(-1.2, 2.7, -1.5),
        FractionalHex(3.49, -1.01, -2.48),
    ],
)
def test_round_result_is_valid_and_close(fractional):
    h = hex_round(fractional)
    assert h.q + h.r + h.s == 0
    assert max(abs(h.q - fractional.q), abs(h.r - fractional.r), abs(h.s - fractional.s)) <= 1.0

import math

import pytest

from maecdsp.dsputil import (
    bit_reverse,
    multiply_signals,
    real_complex_naive,
    real_eop_complex,
    sinc,
)


def test_bit_reverse_eight():
    assert bit_reverse(range(8)) == [0, 4, 2, 6, 1, 5, 3, 7]


@pytest.mark.parametrize("size", [2, 4, 16, 32, 64])
def test_bit_reverse_is_involution(size):
    data = list(range(size))
    assert bit_reverse(bit_reverse(data)) == data


@pytest.mark.parametrize("size", [4, 16, 128])
def test_bit_reverse_is_permutation(size):
    data = list(range(size))
    assert sorted(bit_reverse(data)) == data


def test_bit_reverse_does_not_mutate_input():
    data = [1.0, 2.0, 3.0, 4.0]
    bit_reverse(data)
    assert data == [1.0, 2.0, 3.0, 4.0]


def test_bit_reverse_small_inputs():
    assert bit_reverse([]) == []
    assert bit_reverse([7]) == [7]


def test_sinc_zero_at_pi():
    assert sinc(math.pi) == pytest.approx(0.0, abs=1e-12)


def test_sinc_is_even():
    for x in (0.3, 1.7, 5.0):
        assert sinc(x) == pytest.approx(sinc(-x))


def test_sinc_near_zero_approaches_one():
    assert sinc(1e-8) == pytest.approx(1.0)


def test_sinc_zero_raises():
    with pytest.raises(ZeroDivisionError):
        sinc(0)


def test_multiply_signals_by_ones_is_identity():
    signal = [0.5, -1.25, 3.0]
    assert multiply_signals(signal, [1, 1, 1]) == signal


def test_multiply_signals_commutes():
    a = [1 + 2j, 3 - 1j, 0.5j]
    b = [2 - 1j, 1j, 4]
    assert multiply_signals(a, b) == multiply_signals(b, a)


def test_multiply_signals_length_mismatch():
    with pytest.raises(ValueError):
        multiply_signals([1, 2], [1])


def test_real_complex_naive():
    values = [1.5, -2.0, 0.0]
    result = real_complex_naive(values)
    assert [c.real for c in result] == values
    assert all(c.imag == 0 for c in result)


def test_real_eop_complex_pairs():
    assert real_eop_complex([1, 2, 3, 4]) == [complex(1, 2), complex(3, 4)]


def test_real_eop_complex_drops_odd_tail():
    assert real_eop_complex([1, 2, 3]) == [complex(1, 2)]
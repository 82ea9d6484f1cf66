import pytest

from maecdsp.samples import (
    char_int16,
    char_int32,
    char_mf,
    char_uint32,
    int16_char,
    int16_mf,
    int32_char,
    mf_char,
    mf_float,
    mf_int16,
    mf_null,
    mf_uchar,
    mf_uint16,
    squish_inter,
    squish_null,
    squish_seq,
    uchar_mf,
    uint16_mf,
    uint32_char,
)

CHAN1 = [0, 1, 2, 3, 4, 5, 6, 7, 8, 9]
CHAN2 = [10, 11, 12, 13, 14, 15, 16, 17, 18, 19]
CHAN3 = [20, 21, 22, 23, 24, 25, 26, 27, 28, 29]
DATA = [CHAN1, CHAN2, CHAN3]
IDATA = [0, 10, 20, 1, 11, 21, 2, 12, 22, 3,
         13, 23, 4, 14, 24, 5, 15, 25, 6, 16,
         26, 7, 17, 27, 8, 18, 28, 9, 19, 29]
SDATA = list(range(30))


def test_squish_inter_matches_interleaved_layout():
    assert squish_inter(DATA, mf_null) == IDATA


def test_squish_seq_matches_sequential_layout():
    assert squish_seq(DATA, mf_null) == SDATA


def test_squish_applies_conversion():
    assert squish_seq([[1.0, -1.0]], mf_int16) == [32767, -32767]


def test_squish_rejects_ragged_channels():
    with pytest.raises(ValueError):
        squish_inter([[1, 2], [3]], mf_null)


def test_squish_null_outputs_nothing():
    assert squish_null(DATA, mf_null) == []


def test_mf_null_is_identity():
    assert mf_null(0.123) == 0.123


def test_mf_float_is_single_precision():
    assert mf_float(0.5) == 0.5
    assert abs(mf_float(0.1) - 0.1) < 1e-7


def test_mf_int16_extremes():
    assert mf_int16(1.0) == 32767
    assert mf_int16(-1.0) == -32767
    assert mf_int16(0.0) == 0


def test_mf_int16_out_of_range():
    with pytest.raises(ValueError):
        mf_int16(2.0)


def test_mf_uint16_flips_sign_bit():
    assert mf_uint16(0.0) == 32768
    assert mf_uint16(1.0) == 65535


def test_mf_char_extremes():
    assert mf_char(1.0) == 127
    assert mf_char(-1.0) == -127


def test_mf_uchar_extremes():
    assert mf_uchar(-1.0) == 0
    assert mf_uchar(1.0) == 255


@pytest.mark.parametrize("value", [-1.0, -0.5, 0.0, 0.25, 0.9, 1.0])
def test_int16_round_trip(value):
    assert int16_mf(mf_int16(value)) == pytest.approx(value, abs=1 / 32767)


@pytest.mark.parametrize("value", [-1.0, -0.3, 0.0, 0.7, 1.0])
def test_char_round_trip(value):
    assert char_mf(mf_char(value)) == pytest.approx(value, abs=1 / 127)


@pytest.mark.parametrize("value", [-1.0, -0.3, 0.0, 0.7, 1.0])
def test_uchar_round_trip(value):
    assert uchar_mf(mf_uchar(value)) == pytest.approx(value, abs=2 / 255)


def test_uint16_mf_limits():
    assert uint16_mf(0) == -1.0
    assert uint16_mf(65535) == 1.0


def test_int16_bytes_little_endian():
    assert int16_char(1) == b"\x01\x00"
    assert char_int16(b"\x01\x00") == 1


@pytest.mark.parametrize("value", [-32768, -1, 0, 1, 255, 256, 32767])
def test_int16_bytes_round_trip(value):
    assert char_int16(int16_char(value)) == value


@pytest.mark.parametrize("value", [-2147483648, -1, 0, 65536, 2147483647])
def test_int32_bytes_round_trip(value):
    assert char_int32(int32_char(value)) == value


def test_int32_minus_one_bytes():
    assert int32_char(-1) == b"\xff\xff\xff\xff"


@pytest.mark.parametrize("value", [0, 1, 44100, 4294967295])
def test_uint32_bytes_round_trip(value):
    assert char_uint32(uint32_char(value)) == value


def test_uint32_and_int32_share_bytes():
    assert char_uint32(b"\xff\xff\xff\xff") == 4294967295
    assert char_int32(b"\xff\xff\xff\xff") == -1


def test_decode_ignores_trailing_bytes():
    assert char_int16(b"\x02\x00\xff\xff") == 2


def test_decode_requires_enough_bytes():
    with pytest.raises(ValueError):
        char_int32(b"\x00\x00")


def test_encode_rejects_out_of_range():
    with pytest.raises(ValueError):
        int16_char(40000)
    with pytest.raises(ValueError):
        uint32_char(-1)
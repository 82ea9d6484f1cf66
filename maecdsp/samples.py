"""Conversions between the internal sample format and other encodings.

The internal ("mf") format is a float in the range -1 to 1. Functions
named ``mf_<other>`` convert from it, ``<other>_mf`` convert to it.
The byte helpers encode and decode little-endian integers. The squish
helpers flatten multi-channel audio into a single stream.
"""

from __future__ import annotations

import math
import struct
from collections.abc import Callable, Iterable, Sequence

INT16_SCALE = 32767
CHAR_SCALE = 127
UINT16_MAX = 65535
UCHAR_MAX = 255


def _truncate(value: float, low: int, high: int, kind: str) -> int:
    result = int(value)
    if not low <= result <= high:
        raise ValueError(f"{value!r} does not fit in {kind}")
    return result


# mf -> other


def mf_float(val: float) -> float:
    """Return the value rounded to single precision."""
    return struct.unpack("<f", struct.pack("<f", val))[0]


def mf_null(val: float) -> float:
    """Return the value as an mf sample, without scaling it."""
    return float(val)


def mf_int16(val: float) -> int:
    """Scale by 32767 and truncate to a signed 16-bit integer."""
    return _truncate(val * INT16_SCALE, -32768, 32767, "int16")


def mf_uint16(val: float) -> int:
    """Scale to a signed 16-bit integer, then flip its most significant bit."""
    return (mf_int16(val) & 0xFFFF) ^ 0x8000


def mf_char(val: float) -> int:
    """Scale by 127 and truncate to a signed 8-bit integer."""
    return _truncate(val * CHAR_SCALE, -128, 127, "char")


def mf_uchar(val: float) -> int:
    """Map -1..1 onto 0..255, rounding half away from zero."""
    scaled = (val + 1.0) / 2.0 * UCHAR_MAX
    rounded = math.floor(scaled + 0.5) if scaled >= 0 else math.ceil(scaled - 0.5)
    if not 0 <= rounded <= UCHAR_MAX:
        raise ValueError(f"{val!r} does not fit in an unsigned char")
    return rounded


# other -> mf


def int16_mf(val: int) -> float:
    """Divide a signed 16-bit sample by 32767."""
    return val / INT16_SCALE


def uint16_mf(val: int) -> float:
    """Normalise an unsigned 16-bit sample by 65535, double it and subtract 1."""
    return val / UINT16_MAX * 2.0 - 1.0


def char_mf(val: int) -> float:
    """Divide a signed 8-bit sample by 127."""
    return val / CHAR_SCALE


def uchar_mf(val: int) -> float:
    """Normalise an unsigned 8-bit sample by 255, double it and subtract 1."""
    return val / UCHAR_MAX * 2.0 - 1.0


# bytes -> integers


def _take(data: bytes | bytearray | Sequence[int], count: int) -> bytes:
    chunk = bytes(b & 0xFF for b in data[:count])
    if len(chunk) < count:
        raise ValueError(f"need {count} bytes, got {len(chunk)}")
    return chunk


def char_int16(data: bytes | bytearray | Sequence[int]) -> int:
    """Decode a little-endian signed 16-bit integer from the first 2 bytes."""
    return int.from_bytes(_take(data, 2), "little", signed=True)


def char_int32(data: bytes | bytearray | Sequence[int]) -> int:
    """Decode a little-endian signed 32-bit integer from the first 4 bytes."""
    return int.from_bytes(_take(data, 4), "little", signed=True)


def char_uint32(data: bytes | bytearray | Sequence[int]) -> int:
    """Decode a little-endian unsigned 32-bit integer from the first 4 bytes."""
    return int.from_bytes(_take(data, 4), "little", signed=False)


# integers -> bytes


def _encode(val: int, length: int, signed: bool, kind: str) -> bytes:
    try:
        return int(val).to_bytes(length, "little", signed=signed)
    except OverflowError as exc:
        raise ValueError(f"{val!r} does not fit in {kind}") from exc


def int16_char(val: int) -> bytes:
    """Encode a signed 16-bit integer as 2 little-endian bytes."""
    return _encode(val, 2, True, "int16")


def int32_char(val: int) -> bytes:
    """Encode a signed 32-bit integer as 4 little-endian bytes."""
    return _encode(val, 4, True, "int32")


def uint32_char(val: int) -> bytes:
    """Encode an unsigned 32-bit integer as 4 little-endian bytes."""
    return _encode(val, 4, False, "uint32")


# squishers


def _channel_lists(channels: Iterable[Iterable]) -> list[list]:
    lists = [list(channel) for channel in channels]
    if lists and any(len(channel) != len(lists[0]) for channel in lists):
        raise ValueError("channels differ in length")
    return lists


def squish_inter(channels: Iterable[Iterable], oper: Callable = mf_null) -> list:
    """Interleave channels frame by frame, converting each sample with ``oper``."""
    lists = _channel_lists(channels)
    return [oper(sample) for frame in zip(*lists) for sample in frame]


def squish_seq(channels: Iterable[Iterable], oper: Callable = mf_null) -> list:
    """Lay channels out one after another, converting each sample with ``oper``."""
    lists = _channel_lists(channels)
    return [oper(sample) for channel in lists for sample in channel]


def squish_null(channels: Iterable[Iterable], oper: Callable = mf_null) -> list:
    """Check that the channels agree in length, then produce no output."""
    _channel_lists(channels)
    return []
"""Small helpers shared by the signal-processing modules."""

from __future__ import annotations

import enum
import math
from collections.abc import Iterable, Sequence

#: Default sample rate, in samples per second.
SAMPLE_RATE = 44100


class FilterType(enum.Enum):
    """Kinds of filter a kernel can implement."""

    LOW_PASS = enum.auto()
    HIGH_PASS = enum.auto()
    BAND_PASS = enum.auto()
    BAND_REJECT = enum.auto()


def bit_reverse(values: Iterable) -> list:
    """Return the values reordered by bit-reversed index.

    This is the permutation used by radix-2 FFTs; applying it twice to a
    sequence whose length is a power of two gives back the original order.
    """
    result = list(values)
    size = len(result)
    i = 0
    for j in range(1, size - 1):
        k = size >> 1
        i ^= k
        while k > i:
            k >>= 1
            i ^= k
        if i < j:
            result[i], result[j] = result[j], result[i]
    return result


def sinc(x: float) -> float:
    """Return sin(x) / x; zero is not a valid argument."""
    return math.sin(x) / x


def multiply_signals(first: Sequence, second: Sequence) -> list:
    """Multiply two signals sample by sample."""
    if len(first) != len(second):
        raise ValueError(
            f"signals differ in length: {len(first)} and {len(second)}"
        )
    return [a * b for a, b in zip(first, second)]


def real_complex_naive(values: Iterable[float]) -> list[complex]:
    """Turn real samples into complex numbers with a zero imaginary part."""
    return [complex(value, 0.0) for value in values]


def real_eop_complex(values: Iterable[float]) -> list[complex]:
    """Pack even/odd sample pairs into complex numbers.

    Even-indexed samples become the real parts and odd-indexed samples
    the imaginary parts; a trailing unpaired sample is dropped.
    """
    data = list(values)
    return [complex(data[n], data[n + 1]) for n in range(0, len(data) - 1, 2)]
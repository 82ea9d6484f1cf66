"""Generation and manipulation of FIR filter kernels."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable

from maecdsp.dsputil import sinc

WindowFunction = Callable[[int, int], float]


def _blackman(index: int, size: int) -> float:
    phase = 2.0 * math.pi * index / (size - 1)
    return 0.42 - 0.5 * math.cos(phase) + 0.08 * math.cos(2.0 * phase)


def spectral_inversion(kernel: Iterable[float]) -> list[float]:
    """Flip a kernel's frequency response top for bottom.

    Every sample is negated and one is added at index ``len // 2 + 1``.
    """
    result = [-value for value in kernel]
    centre = len(result) // 2 + 1
    if centre >= len(result):
        raise ValueError("kernel is too short to invert")
    result[centre] += 1
    return result


def spectral_reversal(kernel: Iterable[float]) -> list[float]:
    """Negate every other sample, starting with the first."""
    return [-value if n % 2 == 0 else value for n, value in enumerate(kernel)]


def sinc_kernel(
    freq: float, size: int, window: WindowFunction = _blackman
) -> list[float]:
    """Build a normalised windowed-sinc low-pass kernel.

    ``freq`` is the cutoff as a fraction of the sample rate. The window
    function is called as ``window(index, size)``.
    """
    if size < 1:
        raise ValueError("kernel size must be positive")
    half_size = (size - 1) // 2
    inner = 2.0 * math.pi * freq
    output = [0.0] * size
    total = 1.0
    for i in range(half_size):
        value = sinc(inner * (i - half_size)) * window(i, size)
        output[i] = value
        output[size - i - 1] = value
        total += 2.0 * value
    output[half_size] = 1.0
    return [value / total for value in output]
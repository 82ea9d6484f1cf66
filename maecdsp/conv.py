"""Direct convolution by the input-side and output-side algorithms."""

from __future__ import annotations

from collections.abc import Sequence


def length_conv(size1: int, size2: int) -> int:
    """Return the length of the convolution of signals of the given sizes."""
    return size1 + size2 - 1


def input_conv(signal: Sequence[float], kernel: Sequence[float]) -> list[float]:
    """Convolve by spreading each input sample through the kernel."""
    output = [0.0] * max(length_conv(len(signal), len(kernel)), 0)
    for i, sample in enumerate(signal):
        for j, weight in enumerate(kernel):
            output[i + j] += sample * weight
    return output


def output_conv(signal: Sequence[float], kernel: Sequence[float]) -> list[float]:
    """Convolve by gathering the contributions to each output sample."""
    size = length_conv(len(signal), len(kernel))
    output = []
    for i in range(max(size, 0)):
        output.append(
            sum(
                weight * signal[i - j]
                for j, weight in enumerate(kernel)
                if 0 <= i - j < len(signal)
            )
        )
    return output
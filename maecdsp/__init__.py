"""Audio DSP helpers: convolution, filter kernels, sample conversion and PCM wave I/O."""

__version__ = "0.1.0"

__all__ = ["dsputil", "matrix", "kernel", "conv", "samples", "wav"]
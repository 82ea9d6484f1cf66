# maecdsp

Small audio DSP building blocks in plain Python, with no dependencies
outside the standard library.

## Modules

### `maecdsp.dsputil`

- `SAMPLE_RATE`: the default sample rate, 44100.
- `FilterType`: an enum with `LOW_PASS`, `HIGH_PASS`, `BAND_PASS` and
  `BAND_REJECT`.
- `bit_reverse(values)`: returns a new list reordered by bit-reversed index,
  the permutation used by radix-2 FFTs.
- `sinc(x)`: `sin(x) / x`. Zero is not a valid argument.
- `multiply_signals(first, second)`: sample-by-sample product. Raises
  `ValueError` if the lengths differ.
- `real_complex_naive(values)`: real samples to complex numbers with a zero
  imaginary part.
- `real_eop_complex(values)`: packs even/odd sample pairs into complex
  numbers. A trailing unpaired sample is dropped.

### `maecdsp.matrix`

- `dot_product(first, second, num)`: sum of products of the first `num`
  values of each input. Raises `ValueError` if either input is too short or
  `num` is negative.
- `matrix_mult(first, second)`: multiplies matrices given as lists of rows.
  Raises `ValueError` on ragged rows or mismatched inner dimensions.

### `maecdsp.kernel`

- `sinc_kernel(freq, size, window=...)`: a normalised windowed-sinc low-pass
  kernel. `freq` is the cutoff as a fraction of the sample rate. The default
  window is Blackman. A custom window is called as `window(index, size)`.
- `spectral_inversion(kernel)`: negates every sample and adds one at index
  `len(kernel) // 2 + 1`. Raises `ValueError` if the kernel is too short.
- `spectral_reversal(kernel)`: negates every other sample, starting with
  the first.

### `maecdsp.conv`

- `length_conv(size1, size2)`: `size1 + size2 - 1`.
- `input_conv(signal, kernel)`: direct convolution by the input-side
  algorithm.
- `output_conv(signal, kernel)`: direct convolution by the output-side
  algorithm.

Both return a new list of length `length_conv(len(signal), len(kernel))`.

### `maecdsp.samples`

The internal sample format is a float from -1 to 1.

- `mf_float`, `mf_null`, `mf_int16`, `mf_uint16`, `mf_char` and `mf_uchar`
  convert from that format.
- `int16_mf`, `uint16_mf`, `char_mf` and `uchar_mf` convert back to it.

Integer conversions raise `ValueError` when the result would not fit.

- `char_int16`, `char_int32` and `char_uint32` decode little-endian
  integers from bytes.
- `int16_char`, `int32_char` and `uint32_char` encode them.
- `squish_inter(channels, oper)` interleaves channels frame by frame and
  applies `oper` to each sample.
- `squish_seq(channels, oper)` lays channels out one after another.
- `squish_null(channels, oper)` only checks that the channels agree in
  length and returns an empty list.

### `maecdsp.wav`

- Chunk structures `ChunkHeader`, `WavHeader`, `WavFormat` and
  `UnknownChunk`. They `encode` themselves to a binary stream and `decode`
  from one. `ChunkHeader` also has `encode_bytes` and `decode_bytes`.
- `BaseWave`: holds the wave parameters. Setting `channels`, `sample_rate`,
  `bits_per_sample` or `bytes_per_sample` keeps `byte_rate` and
  `block_align` consistent.
- `WaveReader(stream, buffer_size)`:
  - `start()` reads the RIFF header and format chunk.
  - `get_data()` returns the next `buffer_size` frames as one list per
    channel. Past the end of the audio it fills with zeros.
  - `done()` reports when all data is consumed.
  - `stop()` closes the stream.
  - Chunks other than `fmt ` and `data` are skipped.
- `WaveWriter(stream)`:
  - `start()` writes the headers.
  - `write_data(channels)` appends one buffer.
  - `stop()` pads odd-length data, patches the sizes in the headers when
    the stream is seekable, and closes the stream.
- Both classes work as context managers.
- Malformed, truncated or unsupported data raises `WavError`, a subclass of
  `ValueError`.

Only uncompressed PCM with 8-bit or 16-bit samples is supported.

## Installing

```
pip install .
```

With the test dependencies:

```
pip install .[test]
```

## Example

```python
from maecdsp.conv import input_conv, length_conv
from maecdsp.kernel import sinc_kernel
from maecdsp.wav import WaveReader, WaveWriter

signal = [0.0, 0.5, 1.0, 0.5]
kernel = [0.25, 0.5, 0.25]
out = input_conv(signal, kernel)
assert len(out) == length_conv(len(signal), len(kernel))

lowpass = sinc_kernel(0.1, 31)

writer = WaveWriter(open("tone.wav", "wb"))
writer.channels = 1
writer.sample_rate = 44100
writer.bits_per_sample = 16
with writer:
    writer.write_data([out])

with WaveReader(open("tone.wav", "rb"), buffer_size=len(out)) as reader:
    (channel,) = reader.get_data()
```

## What it does not do

There is no FFT or FFT-based convolution. Convolution is direct only.
There is no audio playback or capture, no streaming processing chain, and
no command-line program. Wave support is limited to reading and writing
uncompressed 8-bit and 16-bit PCM through binary streams.

## Running the tests

```
pytest
```
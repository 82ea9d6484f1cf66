"""Reading and writing of uncompressed PCM wave data.

Chunk structures encode and decode themselves to binary streams. The
``WaveReader`` and ``WaveWriter`` classes handle whole wave files, with
audio exchanged as lists of channels holding samples in the range -1 to 1.
"""

from __future__ import annotations

import struct
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import BinaryIO, NamedTuple

from maecdsp.dsputil import SAMPLE_RATE
from maecdsp.samples import (
    char_uint32,
    int16_mf,
    mf_int16,
    mf_uchar,
    squish_inter,
    uchar_mf,
    uint32_char,
)

_HEADER_SIZE = 8
_FORMAT_BODY = struct.Struct("<HHIIHH")
_PCM = 1


class WavError(ValueError):
    """Raised for malformed, truncated or unsupported wave data."""


def _read_exact(stream: BinaryIO, count: int) -> bytes:
    data = stream.read(count) or b""
    if len(data) < count:
        raise WavError(
            f"unexpected end of stream: wanted {count} bytes, got {len(data)}"
        )
    return bytes(data)


def _encode_id(chunk_id: str) -> bytes:
    try:
        raw = chunk_id.encode("ascii")
    except UnicodeEncodeError as exc:
        raise WavError(f"chunk id {chunk_id!r} is not ASCII") from exc
    if len(raw) != 4:
        raise WavError(f"chunk id {chunk_id!r} must be exactly 4 characters")
    return raw


@dataclass
class ChunkHeader:
    """The id and size that open every chunk."""

    chunk_id: str = "    "
    chunk_size: int = 0

    def size(self) -> int:
        """Return the encoded size in bytes."""
        return _HEADER_SIZE

    def decode(self, stream: BinaryIO) -> None:
        """Read the id and size from a stream."""
        self.decode_bytes(_read_exact(stream, _HEADER_SIZE))

    def decode_bytes(self, data: bytes) -> None:
        """Read the id and size from the first 8 bytes of ``data``."""
        if len(data) < _HEADER_SIZE:
            raise WavError(f"chunk header needs {_HEADER_SIZE} bytes, got {len(data)}")
        self.chunk_id = bytes(data[:4]).decode("latin-1")
        self.chunk_size = char_uint32(data[4:_HEADER_SIZE])

    def encode(self, stream: BinaryIO) -> None:
        """Write the id and size to a stream."""
        stream.write(self.encode_bytes())

    def encode_bytes(self) -> bytes:
        """Return the id and size as 8 bytes."""
        try:
            size = uint32_char(self.chunk_size)
        except ValueError as exc:
            raise WavError(str(exc)) from exc
        return _encode_id(self.chunk_id) + size


@dataclass
class WavHeader(ChunkHeader):
    """The RIFF header that opens a wave file."""

    chunk_id: str = "RIFF"
    format: str = "WAVE"

    def size(self) -> int:
        """Return the encoded size in bytes."""
        return _HEADER_SIZE + 4

    def decode(self, stream: BinaryIO) -> None:
        """Read the header from a stream."""
        super().decode(stream)
        self._decode_body(stream)

    def _decode_body(self, stream: BinaryIO) -> None:
        self.format = _read_exact(stream, 4).decode("latin-1")

    def encode(self, stream: BinaryIO) -> None:
        """Write the header to a stream."""
        super().encode(stream)
        stream.write(_encode_id(self.format))


@dataclass
class WavFormat(ChunkHeader):
    """The format chunk describing how the audio data is laid out."""

    chunk_id: str = "fmt "
    chunk_size: int = _FORMAT_BODY.size
    format: int = _PCM
    channels: int = 0
    sample_rate: int = 0
    byte_rate: int = 0
    block_align: int = 0
    bits_per_sample: int = 0

    def size(self) -> int:
        """Return the encoded size in bytes."""
        return _HEADER_SIZE + _FORMAT_BODY.size

    def decode(self, stream: BinaryIO) -> None:
        """Read the chunk from a stream, discarding any extension bytes."""
        super().decode(stream)
        self._decode_body(stream)

    def _decode_body(self, stream: BinaryIO) -> None:
        if self.chunk_size < _FORMAT_BODY.size:
            raise WavError(f"format chunk too small: {self.chunk_size} bytes")
        (
            self.format,
            self.channels,
            self.sample_rate,
            self.byte_rate,
            self.block_align,
            self.bits_per_sample,
        ) = _FORMAT_BODY.unpack(_read_exact(stream, _FORMAT_BODY.size))
        extra = self.chunk_size - _FORMAT_BODY.size
        if extra:
            _read_exact(stream, extra)

    def encode(self, stream: BinaryIO) -> None:
        """Write the chunk to a stream."""
        try:
            body = _FORMAT_BODY.pack(
                self.format,
                self.channels,
                self.sample_rate,
                self.byte_rate,
                self.block_align,
                self.bits_per_sample,
            )
        except struct.error as exc:
            raise WavError(f"format field out of range: {exc}") from exc
        self.chunk_size = _FORMAT_BODY.size
        super().encode(stream)
        stream.write(body)


@dataclass
class UnknownChunk(ChunkHeader):
    """A chunk of unrecognised purpose, kept as raw bytes."""

    data: bytes = b""

    def __post_init__(self) -> None:
        self.data = bytes(self.data)
        if not self.chunk_size:
            self.chunk_size = len(self.data)

    def size(self) -> int:
        """Return the encoded size in bytes."""
        return _HEADER_SIZE + len(self.data)

    def decode(self, stream: BinaryIO) -> None:
        """Read the chunk from a stream."""
        super().decode(stream)
        self._decode_body(stream)

    def _decode_body(self, stream: BinaryIO) -> None:
        self.data = _read_exact(stream, self.chunk_size)

    def encode(self, stream: BinaryIO) -> None:
        """Write the chunk to a stream."""
        self.chunk_size = len(self.data)
        super().encode(stream)
        stream.write(self.data)


class _Codec(NamedTuple):
    from_mf: Callable[[float], int]
    pack: Callable[[list[int]], bytes]
    unpack: Callable[[bytes], list[float]]


def _pack_int16(samples: list[int]) -> bytes:
    return struct.pack(f"<{len(samples)}h", *samples)


def _unpack_int16(raw: bytes) -> list[float]:
    return [int16_mf(value) for (value,) in struct.iter_unpack("<h", raw)]


_CODECS = {
    1: _Codec(mf_uchar, bytes, lambda raw: [uchar_mf(b) for b in raw]),
    2: _Codec(mf_int16, _pack_int16, _unpack_int16),
}


class BaseWave:
    """Wave parameters shared by readers and writers.

    Changing the channel count, sample rate or sample width keeps the
    byte rate and block align consistent.
    """

    def __init__(self) -> None:
        self.format = _PCM
        self._channels = 1
        self._sample_rate = SAMPLE_RATE
        self.byte_rate = 0
        self.block_align = 0
        self._bits_per_sample = 0
        self._bytes_per_sample = 0
        self.size = 0

    def _refresh_byte_rate(self) -> None:
        self.byte_rate = self._channels * self._sample_rate * self._bytes_per_sample

    def _refresh_block_align(self) -> None:
        self.block_align = self._channels * self._bytes_per_sample

    @property
    def channels(self) -> int:
        """Number of audio channels."""
        return self._channels

    @channels.setter
    def channels(self, value: int) -> None:
        self._channels = value
        self._refresh_byte_rate()
        self._refresh_block_align()

    @property
    def sample_rate(self) -> int:
        """Samples per second in each channel."""
        return self._sample_rate

    @sample_rate.setter
    def sample_rate(self, value: int) -> None:
        self._sample_rate = value
        self._refresh_byte_rate()

    @property
    def bits_per_sample(self) -> int:
        """Bits used by a single sample."""
        return self._bits_per_sample

    @bits_per_sample.setter
    def bits_per_sample(self, value: int) -> None:
        self._bits_per_sample = value
        self._bytes_per_sample = value // 8
        self._refresh_byte_rate()
        self._refresh_block_align()

    @property
    def bytes_per_sample(self) -> int:
        """Bytes used by a single sample."""
        return self._bytes_per_sample

    @bytes_per_sample.setter
    def bytes_per_sample(self, value: int) -> None:
        self._bytes_per_sample = value
        self._bits_per_sample = value * 8
        self._refresh_byte_rate()
        self._refresh_block_align()


class WaveReader(BaseWave):
    """Reads audio from a wave stream in buffers of ``buffer_size`` frames."""

    def __init__(self, stream: BinaryIO | None = None, buffer_size: int = 0) -> None:
        super().__init__()
        self.stream = stream
        self.buffer_size = buffer_size
        self.total_read = 0
        self._head = ChunkHeader()
        self._needs_chunk = True
        self._chunk_read = 0
        self._bad = False
        self._started = False

    def __enter__(self) -> WaveReader:
        self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop()

    def _require_stream(self) -> BinaryIO:
        if self.stream is None:
            raise WavError("no stream has been set")
        return self.stream

    def _read_chunk_header(self) -> ChunkHeader:
        head = ChunkHeader()
        head.decode(self._require_stream())
        self.total_read += _HEADER_SIZE
        return head

    def _skip(self, count: int) -> None:
        if count:
            _read_exact(self._require_stream(), count)
            self.total_read += count

    def _skip_pad(self, chunk_size: int) -> None:
        if chunk_size & 1 and not self.done():
            if self._require_stream().read(1):
                self.total_read += 1

    def start(self) -> None:
        """Read the RIFF header and format chunk, leaving the reader at the audio."""
        stream = self._require_stream()
        riff = WavHeader()
        riff.decode(stream)
        if riff.chunk_id != "RIFF" or riff.format != "WAVE":
            raise WavError("stream is not RIFF/WAVE data")
        self.size = riff.chunk_size
        self.total_read = 4
        self._bad = False
        self._needs_chunk = True
        self._chunk_read = 0
        while True:
            if self.done():
                raise WavError("no format chunk found")
            head = self._read_chunk_header()
            if head.chunk_id == "fmt ":
                fmt = WavFormat(chunk_id=head.chunk_id, chunk_size=head.chunk_size)
                fmt._decode_body(stream)
                self.total_read += head.chunk_size
                self._skip_pad(head.chunk_size)
                break
            if head.chunk_id == "data":
                raise WavError("data chunk precedes the format chunk")
            self._skip(head.chunk_size)
            self._skip_pad(head.chunk_size)
        self._apply_format(fmt)
        self._started = True

    def _apply_format(self, fmt: WavFormat) -> None:
        if fmt.format != _PCM:
            raise WavError(f"compressed wave format {fmt.format} is not supported")
        if fmt.bits_per_sample // 8 not in _CODECS or fmt.bits_per_sample % 8:
            raise WavError(f"{fmt.bits_per_sample} bits per sample is not supported")
        if fmt.channels < 1:
            raise WavError("wave data declares no channels")
        if fmt.block_align != fmt.channels * fmt.bits_per_sample // 8:
            raise WavError(f"block align {fmt.block_align} does not match the format")
        self.format = fmt.format
        self.bits_per_sample = fmt.bits_per_sample
        self.channels = fmt.channels
        self.sample_rate = fmt.sample_rate
        self.byte_rate = fmt.byte_rate
        self.block_align = fmt.block_align

    def stop(self) -> None:
        """Close the stream."""
        if self.stream is not None:
            self.stream.close()
        self._started = False

    def done(self) -> bool:
        """Return True once all data is consumed or the stream has failed."""
        return self.total_read >= self.size or self._bad

    def get_data(self) -> list[list[float]]:
        """Return the next buffer, one list per channel, zero-filled past the end."""
        if not self._started:
            raise WavError("reader has not been started")
        if self.buffer_size <= 0:
            raise ValueError("buffer size must be positive")
        channels = [[0.0] * self.buffer_size for _ in range(self.channels)]
        codec = _CODECS[self.bytes_per_sample]
        stream = self._require_stream()
        frame = 0
        try:
            while frame < self.buffer_size and not self.done():
                if self._needs_chunk:
                    head = self._read_chunk_header()
                    if head.chunk_id != "data":
                        self._skip(head.chunk_size)
                        self._skip_pad(head.chunk_size)
                        continue
                    self._head = head
                    self._chunk_read = 0
                    self._needs_chunk = False
                remaining = self._head.chunk_size - self._chunk_read
                count = min(remaining // self.block_align, self.buffer_size - frame)
                if count == 0:
                    self._skip(remaining)
                    self._chunk_read += remaining
                else:
                    raw = _read_exact(stream, count * self.block_align)
                    self._chunk_read += len(raw)
                    self.total_read += len(raw)
                    samples = codec.unpack(raw)
                    for index, channel in enumerate(channels):
                        channel[frame:frame + count] = samples[index::self.channels]
                    frame += count
                if self._chunk_read >= self._head.chunk_size:
                    self._skip_pad(self._head.chunk_size)
                    self._needs_chunk = True
        except WavError:
            self._bad = True
        return channels


class WaveWriter(BaseWave):
    """Writes audio as a single PCM data chunk.

    Configure channels, sample rate and sample width before ``start``.
    """

    def __init__(self, stream: BinaryIO | None = None) -> None:
        super().__init__()
        self.stream = stream
        self._origin = 0
        self._started = False

    def __enter__(self) -> WaveWriter:
        self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop()

    def _require_stream(self) -> BinaryIO:
        if self.stream is None:
            raise WavError("no stream has been set")
        return self.stream

    def _riff_size(self) -> int:
        pad = self.size & 1
        return 4 + WavFormat().size() + ChunkHeader().size() + self.size + pad

    def start(self) -> None:
        """Write the headers that precede the audio data."""
        stream = self._require_stream()
        if self.format != _PCM:
            raise WavError(f"only PCM output is supported, not format {self.format}")
        if self.bytes_per_sample not in _CODECS or self.bits_per_sample % 8:
            raise WavError(f"{self.bits_per_sample} bits per sample is not supported")
        if self.channels < 1:
            raise WavError("at least one channel is required")
        self.size = 0
        self._origin = stream.tell() if stream.seekable() else 0
        WavHeader(chunk_size=self._riff_size()).encode(stream)
        WavFormat(
            format=self.format,
            channels=self.channels,
            sample_rate=self.sample_rate,
            byte_rate=self.byte_rate,
            block_align=self.block_align,
            bits_per_sample=self.bits_per_sample,
        ).encode(stream)
        ChunkHeader("data", 0).encode(stream)
        self._started = True

    def write_data(self, channels: Iterable[Iterable[float]]) -> None:
        """Encode and append one buffer given as a list of channels."""
        if not self._started:
            raise WavError("writer has not been started")
        lists = [list(channel) for channel in channels]
        if len(lists) != self.channels:
            raise ValueError(
                f"expected {self.channels} channels, got {len(lists)}"
            )
        codec = _CODECS[self.bytes_per_sample]
        raw = codec.pack(squish_inter(lists, codec.from_mf))
        self._require_stream().write(raw)
        self.size += len(raw)

    def stop(self) -> None:
        """Pad the data, fix up the sizes in the headers and close the stream."""
        stream = self._require_stream()
        if self._started:
            if self.size & 1:
                stream.write(b"\x00")
            if stream.seekable():
                end = stream.tell()
                stream.seek(self._origin + 4)
                stream.write(uint32_char(self._riff_size()))
                stream.seek(
                    self._origin + WavHeader().size() + WavFormat().size() + 4
                )
                stream.write(uint32_char(self.size))
                stream.seek(end)
        stream.close()
        self._started = False
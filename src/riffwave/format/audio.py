"""In-memory WAVE audio.

``AudioBuffer`` holds the fmt chunk fields of one WAVE stream together with
its raw payload. It is created empty with :meth:`AudioBuffer.new` or filled
by :func:`riffwave.format.codec.decode`, and behaves as a minimal binary
stream: ``read`` consumes the payload from a cursor, ``write`` appends to it.
"""

from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from riffwave.format.riff import InvalidBitsPerSample
from riffwave.format.samples import to_float64_samples, to_int32_samples
from riffwave.format.types import FormatTag


@dataclass
class AudioBuffer:
    """A WAVE stream: header fields plus interleaved little-endian payload.

    Buffers built by :meth:`new` keep ``block_align`` and
    ``avg_bytes_per_sec`` consistent with the other fields. Decoded buffers
    carry the values found in the stream verbatim, so that encoding them
    again reproduces the input byte for byte.
    """

    format_tag: int
    """Header layout, WAVE_FORMAT_PCM or WAVE_FORMAT_EXTENSIBLE."""

    channels: int
    """Number of interleaved channels."""

    samples_per_sec: int
    """Sample rate in Hz."""

    avg_bytes_per_sec: int
    """samples_per_sec * block_align."""

    block_align: int
    """Bytes per frame across all channels."""

    bits_per_sample: int
    """Native sample width in bits."""

    data: bytearray = field(default_factory=bytearray, repr=False)
    """Raw payload of the data chunk."""

    _cursor: int = field(default=0, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.data, bytearray):
            self.data = bytearray(self.data)

    @classmethod
    def new(cls, samples_per_sec: int, bits_per_sample: int, channels: int) -> "AudioBuffer":
        """Create an empty buffer.

        Args:
            samples_per_sec: Sample rate in Hz.
            bits_per_sample: Sample width, must be a multiple of 8.
            channels: Number of channels.

        Returns:
            An AudioBuffer with no payload. The format tag is EXTENSIBLE for
            depths above 16 bits and PCM otherwise.

        Raises:
            InvalidBitsPerSample: If bits_per_sample is not a multiple of 8.
        """
        if bits_per_sample % 8 != 0:
            raise InvalidBitsPerSample(bits_per_sample)

        block_align = channels * bits_per_sample // 8
        return cls(
            format_tag=FormatTag.from_bits_per_sample(bits_per_sample),
            channels=channels,
            samples_per_sec=samples_per_sec,
            avg_bytes_per_sec=samples_per_sec * block_align,
            block_align=block_align,
            bits_per_sample=bits_per_sample,
        )

    @property
    def length(self) -> int:
        """Payload size in bytes."""
        return len(self.data)

    @property
    def samples(self) -> int:
        """Total number of scalar samples across all channels.

        Ten seconds of 16 bit / 44.1 kHz stereo audio holds 882000 samples.
        """
        if self.channels <= 0:
            return 0
        width = self.block_align // self.channels
        if width <= 0:
            return 0
        return self.length // width

    @property
    def frames(self) -> int:
        """Number of multichannel sample frames."""
        if self.block_align <= 0:
            return 0
        return self.length // self.block_align

    @property
    def duration(self) -> float:
        """Playback time in seconds."""
        if self.samples_per_sec <= 0:
            return 0.0
        return self.frames / self.samples_per_sec

    @property
    def read_cursor(self) -> int:
        """Offset of the next byte returned by :meth:`read`."""
        return self._cursor

    def read(self, size: int | None = -1) -> bytes:
        """Read up to ``size`` payload bytes, advancing the cursor.

        Returns ``b""`` once the whole payload has been consumed. A negative
        or ``None`` size reads everything that remains.
        """
        remaining = self.length - self._cursor
        if remaining <= 0:
            return b""
        if size is None or size < 0 or size > remaining:
            size = remaining
        chunk = bytes(self.data[self._cursor : self._cursor + size])
        self._cursor += size
        return chunk

    def readinto(self, buffer: bytearray | memoryview) -> int:
        """Read payload bytes into a pre-allocated buffer."""
        view = memoryview(buffer).cast("B")
        chunk = self.read(len(view))
        view[: len(chunk)] = chunk
        return len(chunk)

    def write(self, b: bytes | bytearray | memoryview) -> int:
        """Append bytes to the payload and return how many were written."""
        before = self.length
        self.data.extend(b)
        return self.length - before

    def getvalue(self) -> bytes:
        """Get a copy of the whole payload."""
        return bytes(self.data)

    def int32s(self) -> NDArray[np.int32]:
        """Get the payload as full-scale int32 samples."""
        return to_int32_samples(self.data, self.bits_per_sample, self.samples)

    def float64s(self) -> NDArray[np.float64]:
        """Get the payload as float64 samples in [-1.0, 1.0)."""
        return to_float64_samples(self.data, self.bits_per_sample, self.samples)

    def __str__(self) -> str:
        return f"{self.samples_per_sec} Hz / {self.bits_per_sample} bit {self.channels} channel(s)"


def new(samples_per_sec: int, bits_per_sample: int, channels: int) -> AudioBuffer:
    """Create an empty AudioBuffer. See :meth:`AudioBuffer.new`."""
    return AudioBuffer.new(samples_per_sec, bits_per_sample, channels)

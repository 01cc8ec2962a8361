"""Property-based tests (Hypothesis) for the format module.

These tests use property-based testing to verify that:
1. Round-trip preservation: encode -> decode -> encode is byte-exact
2. Construction invariants: block_align and avg_bytes_per_sec stay derived
3. Stream behaviour: reads and writes account for every byte
4. Conversion scaling: every bit depth widens onto the int32 range
"""

import struct

import numpy as np
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from riffwave.format import (
    AudioBuffer,
    FormatTag,
    InvalidBitsPerSample,
    decode,
    encode,
)


def bit_depth_strategy() -> st.SearchStrategy[int]:
    """Generate a supported bit depth."""
    return st.sampled_from([8, 16, 24, 32])


def sample_rate_strategy() -> st.SearchStrategy[int]:
    """Generate a common sample rate."""
    return st.sampled_from([8000, 22050, 44100, 48000, 96000, 192000])


@st.composite
def audio_buffer_strategy(draw: st.DrawFn) -> AudioBuffer:
    """Generate a buffer with a whole number of frames of random payload."""
    bits = draw(bit_depth_strategy())
    channels = draw(st.integers(min_value=1, max_value=8))
    rate = draw(sample_rate_strategy())
    frames = draw(st.integers(min_value=0, max_value=64))

    audio = AudioBuffer.new(rate, bits, channels)
    size = frames * audio.block_align
    audio.write(draw(st.binary(min_size=size, max_size=size)))
    return audio


class TestRoundTripPreservation:
    """Property tests for encode/decode round-trips."""

    @settings(max_examples=100, suppress_health_check=[HealthCheck.too_slow], deadline=None)
    @given(audio=audio_buffer_strategy())
    def test_stream_round_trip(self, audio: AudioBuffer) -> None:
        """Re-encoding a decoded stream reproduces it byte for byte."""
        stream = encode(audio)
        assert encode(decode(stream)) == stream

    @settings(max_examples=100, suppress_health_check=[HealthCheck.too_slow], deadline=None)
    @given(audio=audio_buffer_strategy())
    def test_fields_preserved(self, audio: AudioBuffer) -> None:
        """Decoding an encoded buffer yields an equal buffer."""
        assert decode(encode(audio)) == audio

    @settings(max_examples=50, deadline=None)
    @given(audio=audio_buffer_strategy())
    def test_stream_size(self, audio: AudioBuffer) -> None:
        """The RIFF size field accounts for everything after itself."""
        stream = encode(audio)
        assert struct.unpack_from("<I", stream, 4)[0] == len(stream) - 8


class TestConstructionInvariants:
    """Property tests for AudioBuffer.new."""

    @given(
        rate=sample_rate_strategy(),
        bits=st.integers(min_value=1, max_value=64),
        channels=st.integers(min_value=1, max_value=16),
    )
    def test_fails_iff_partial_byte(self, rate: int, bits: int, channels: int) -> None:
        try:
            audio = AudioBuffer.new(rate, bits, channels)
        except InvalidBitsPerSample:
            assert bits % 8 != 0
            return

        assert bits % 8 == 0
        assert audio.block_align == channels * bits // 8
        assert audio.avg_bytes_per_sec == rate * audio.block_align
        if bits > 16:
            assert audio.format_tag == FormatTag.EXTENSIBLE
        else:
            assert audio.format_tag == FormatTag.PCM

    @given(audio=audio_buffer_strategy())
    def test_invariants_hold_after_decode(self, audio: AudioBuffer) -> None:
        decoded = decode(encode(audio))
        assert decoded.block_align == decoded.channels * decoded.bits_per_sample // 8
        assert decoded.avg_bytes_per_sec == decoded.samples_per_sec * decoded.block_align


class TestStreamBehaviour:
    """Property tests for sequential read and write."""

    @given(chunks=st.lists(st.binary(max_size=64), max_size=20))
    def test_write_accumulates(self, chunks: list[bytes]) -> None:
        audio = AudioBuffer.new(44100, 16, 2)
        for chunk in chunks:
            before = audio.length
            assert audio.write(chunk) == len(chunk)
            assert audio.length == before + len(chunk)
        assert audio.getvalue() == b"".join(chunks)

    @given(payload=st.binary(max_size=512), size=st.integers(min_value=1, max_value=64))
    def test_read_returns_everything_in_order(self, payload: bytes, size: int) -> None:
        audio = AudioBuffer.new(44100, 8, 1)
        audio.write(payload)

        pieces = []
        while chunk := audio.read(size):
            pieces.append(chunk)
            # End of data is never signalled early
            assert audio.read_cursor <= len(payload)

        assert b"".join(pieces) == payload
        assert audio.read_cursor == len(payload)


class TestConversionScaling:
    """Property tests for sample widening."""

    @given(values=st.lists(st.integers(min_value=-32768, max_value=32767), max_size=64))
    def test_16bit(self, values: list[int]) -> None:
        audio = AudioBuffer.new(44100, 16, 1)
        audio.write(struct.pack(f"<{len(values)}h", *values))
        np.testing.assert_array_equal(audio.int32s(), np.array(values, dtype=np.int64) << 16)

    @given(values=st.lists(st.integers(min_value=-(2**23), max_value=2**23 - 1), max_size=64))
    def test_24bit(self, values: list[int]) -> None:
        audio = AudioBuffer.new(44100, 24, 1)
        audio.write(b"".join(v.to_bytes(3, "little", signed=True) for v in values))
        np.testing.assert_array_equal(audio.int32s(), np.array(values, dtype=np.int64) << 8)

    @given(audio=audio_buffer_strategy())
    def test_float_range(self, audio: AudioBuffer) -> None:
        f64 = audio.float64s()
        assert len(f64) == audio.samples
        assert np.all(f64 >= -1.0)
        assert np.all(f64 < 1.0)

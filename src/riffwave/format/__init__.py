"""WAVE container and sample format module.

This module provides functionality for decoding and encoding WAVE streams
held in memory, and for widening their raw payload to numeric samples.

Format Overview
---------------
Decoding reads header fields from fixed offsets, so streams must follow one
of the two layouts produced by the encoder:

    +----------------------------------------+
    | RIFF Header ("WAVE")                   |
    +----------------------------------------+
    | fmt  chunk                             |
    |   - PCM: 16 bytes                      |
    |   - EXTENSIBLE: 40 bytes (mask, GUID)  |
    +----------------------------------------+
    | fact chunk (EXTENSIBLE only)           |
    |   - frame count                        |
    +----------------------------------------+
    | data chunk (interleaved samples)       |
    |   - 8/16/24/32-bit little-endian       |
    +----------------------------------------+

Example Usage
-------------
>>> from riffwave.format import AudioBuffer, decode, encode
>>> audio = AudioBuffer.new(44100, 16, 2)
>>> audio.write(b"\\x00\\x01" * 4)
8
>>> stream = encode(audio)
>>> decode(stream).int32s().tolist()
[16777216, 16777216, 16777216, 16777216]
"""

from riffwave.format.audio import AudioBuffer, new
from riffwave.format.codec import decode, encode
from riffwave.format.files import load_wav, save_wav
from riffwave.format.riff import (
    WAVE_FORMAT_EXTENSIBLE,
    WAVE_FORMAT_PCM,
    FormatError,
    InvalidBitsPerSample,
    InvalidFormatTag,
    TruncatedDataError,
    UnsupportedFormatTag,
    channel_mask,
)
from riffwave.format.samples import to_float64_samples, to_int32_samples
from riffwave.format.types import FormatTag
from riffwave.format.validation import ValidationResult, validate_header

__all__ = [
    # Types
    "AudioBuffer",
    "FormatTag",
    "WAVE_FORMAT_PCM",
    "WAVE_FORMAT_EXTENSIBLE",
    "new",
    # Codec
    "decode",
    "encode",
    "channel_mask",
    # Samples
    "to_int32_samples",
    "to_float64_samples",
    # Files
    "load_wav",
    "save_wav",
    # Validation
    "validate_header",
    "ValidationResult",
    # Errors
    "FormatError",
    "InvalidBitsPerSample",
    "UnsupportedFormatTag",
    "InvalidFormatTag",
    "TruncatedDataError",
]

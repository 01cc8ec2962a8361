"""riffwave - WAVE file codec and sample conversion.

This package parses and produces RIFF/WAVE streams (PCM and
WAVE_FORMAT_EXTENSIBLE) and converts their raw payload between bit depths.

Example Usage
-------------
>>> from riffwave import load_wav, save_wav
>>>
>>> audio = load_wav("input.wav")  # doctest: +SKIP
>>> print(audio)  # doctest: +SKIP
44100 Hz / 16 bit 2 channel(s)
>>> samples = audio.float64s()  # doctest: +SKIP
>>> save_wav("copy.wav", audio)  # doctest: +SKIP
"""

# Re-export format module for convenience
from riffwave.format import (
    WAVE_FORMAT_EXTENSIBLE,
    WAVE_FORMAT_PCM,
    AudioBuffer,
    FormatError,
    FormatTag,
    InvalidBitsPerSample,
    InvalidFormatTag,
    TruncatedDataError,
    UnsupportedFormatTag,
    ValidationResult,
    channel_mask,
    decode,
    encode,
    load_wav,
    new,
    save_wav,
    to_float64_samples,
    to_int32_samples,
    validate_header,
)

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

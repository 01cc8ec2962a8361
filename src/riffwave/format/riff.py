"""RIFF/WAVE constants and errors.

This module holds the fixed values of the WAVE layout understood by
riffwave: FourCC identifiers, format tag codes, the PCM sub-format GUID,
the speaker mask table and the byte offsets of every header field.

Two header profiles are supported:

    PCM (44 byte header)            EXTENSIBLE (80 byte header)
    +---------------------------+   +---------------------------+
    | RIFF <size> WAVE          |   | RIFF <size> WAVE          |
    | fmt  16 <core fields>     |   | fmt  40 <core fields>     |
    | data <length> <payload>   |   |   cbSize, validBits,      |
    +---------------------------+   |   channelMask, GUID       |
                                    | fact 4 <frame count>      |
                                    | data <length> <payload>   |
                                    +---------------------------+
"""

# FourCC identifiers
RIFF_ID = b"RIFF"
WAVE_ID = b"WAVE"
FMT_ID = b"fmt "
FACT_ID = b"fact"
DATA_ID = b"data"

# Format tag codes
WAVE_FORMAT_PCM = 0x0001
WAVE_FORMAT_EXTENSIBLE = 0xFFFE

# KSDATAFORMAT_SUBTYPE_PCM as stored on disk
PCM_SUBFORMAT_GUID = bytes(
    [0x01, 0x00, 0x00, 0x00, 0x00, 0x00, 0x10, 0x00, 0x80, 0x00, 0x00, 0xAA, 0x00, 0x38, 0x9B, 0x71]
)

# Speaker position masks keyed by channel count
CHANNEL_MASKS: dict[int, int] = {
    1: 0x4,  # front center
    2: 0x3,  # front left | front right
    4: 0x33,  # quad
    6: 0x3F,  # 5.1
    8: 0x63F,  # 7.1
}

# fmt chunk sizes
PCM_FMT_SIZE = 16
EXTENSIBLE_FMT_SIZE = 40
EXTENSIBLE_CB_SIZE = 22
FACT_SIZE = 4

# Bytes following the RIFF size field, excluding the payload
PCM_RIFF_OVERHEAD = 36
EXTENSIBLE_RIFF_OVERHEAD = 72

# Core field offsets, identical for both profiles
FORMAT_TAG_OFFSET = 20
CHANNELS_OFFSET = 22
SAMPLES_PER_SEC_OFFSET = 24
AVG_BYTES_PER_SEC_OFFSET = 28
BLOCK_ALIGN_OFFSET = 32
BITS_PER_SAMPLE_OFFSET = 34

# Payload length field and payload start, per profile
PCM_LENGTH_OFFSET = 40
PCM_DATA_OFFSET = 44
EXTENSIBLE_LENGTH_OFFSET = 76
EXTENSIBLE_DATA_OFFSET = 80


class FormatError(Exception):
    """Error reading or writing WAVE data."""


class InvalidBitsPerSample(FormatError):
    """Bit depth is not a whole number of bytes."""

    def __init__(self, bits_per_sample: int) -> None:
        self.bits_per_sample = bits_per_sample
        super().__init__(f"invalid bits per sample ({bits_per_sample} bit)")


class UnsupportedFormatTag(FormatError):
    """A decoded stream declares a format tag other than PCM or EXTENSIBLE."""

    def __init__(self, format_tag: int) -> None:
        self.format_tag = format_tag
        super().__init__(f"unsupported format tag 0x{format_tag:04X}")


class InvalidFormatTag(FormatError):
    """An AudioBuffer carries a format tag that cannot be encoded."""

    def __init__(self, format_tag: int) -> None:
        self.format_tag = format_tag
        super().__init__(f"invalid format tag 0x{format_tag:04X}")


class TruncatedDataError(FormatError):
    """The stream is shorter than its header or declared payload."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"stream truncated: expected {expected} bytes, got {actual}")


def channel_mask(channels: int) -> int:
    """Return the speaker mask written for ``channels``, or 0 when there is no standard layout."""
    return CHANNEL_MASKS.get(channels, 0)


def header_size(format_tag: int) -> int:
    """Return the header size in bytes preceding the payload."""
    if format_tag == WAVE_FORMAT_EXTENSIBLE:
        return EXTENSIBLE_DATA_OFFSET
    return PCM_DATA_OFFSET

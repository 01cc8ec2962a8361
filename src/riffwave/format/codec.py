"""WAVE container encoding and decoding.

Decoding reads every header field from a fixed byte offset instead of
walking the chunk list, so it accepts exactly the two layouts written by
:func:`encode`: a 44 byte PCM header, or an 80 byte EXTENSIBLE header that
carries a fact chunk ahead of the data chunk.
"""

import logging
import struct

from riffwave.format.audio import AudioBuffer
from riffwave.format.riff import (
    AVG_BYTES_PER_SEC_OFFSET,
    BITS_PER_SAMPLE_OFFSET,
    BLOCK_ALIGN_OFFSET,
    CHANNELS_OFFSET,
    DATA_ID,
    EXTENSIBLE_CB_SIZE,
    EXTENSIBLE_FMT_SIZE,
    EXTENSIBLE_LENGTH_OFFSET,
    EXTENSIBLE_RIFF_OVERHEAD,
    FACT_ID,
    FACT_SIZE,
    FMT_ID,
    FORMAT_TAG_OFFSET,
    PCM_DATA_OFFSET,
    PCM_FMT_SIZE,
    PCM_LENGTH_OFFSET,
    PCM_RIFF_OVERHEAD,
    PCM_SUBFORMAT_GUID,
    RIFF_ID,
    SAMPLES_PER_SEC_OFFSET,
    WAVE_FORMAT_EXTENSIBLE,
    WAVE_FORMAT_PCM,
    WAVE_ID,
    FormatError,
    InvalidFormatTag,
    TruncatedDataError,
    UnsupportedFormatTag,
    channel_mask,
    header_size,
)
from riffwave.format.types import FormatTag

logger = logging.getLogger(__name__)

# format_tag, channels, samples_per_sec, avg_bytes_per_sec, block_align, bits_per_sample
_CORE_FIELDS = struct.Struct("<HHIIHH")
_U16 = struct.Struct("<H")
_U32 = struct.Struct("<I")


def decode(stream: bytes | bytearray | memoryview, *, strict: bool = False) -> AudioBuffer:
    """Parse a WAVE stream into an AudioBuffer.

    Args:
        stream: The complete file contents.
        strict: Also check the RIFF/WAVE tags and reject streams shorter
            than their header or declared payload.

    Returns:
        AudioBuffer holding the header fields and a copy of the payload.

    Raises:
        UnsupportedFormatTag: If the format tag is neither PCM nor EXTENSIBLE.
        FormatError: In strict mode, if the RIFF/WAVE tags are missing.
        TruncatedDataError: In strict mode, if the stream is too short.
    """
    stream = bytes(stream)

    if strict:
        _check_tags(stream)

    format_tag = _read_u16(stream, FORMAT_TAG_OFFSET)
    if not FormatTag.is_supported(format_tag):
        raise UnsupportedFormatTag(format_tag)
    format_tag = FormatTag(format_tag)

    if format_tag == FormatTag.PCM:
        length_offset = PCM_LENGTH_OFFSET
    else:
        length_offset = EXTENSIBLE_LENGTH_OFFSET
    data_offset = header_size(format_tag)

    if strict and len(stream) < data_offset:
        raise TruncatedDataError(data_offset, len(stream))

    length = _read_u32(stream, length_offset)
    data = stream[data_offset : data_offset + length]

    if len(data) < length:
        if strict:
            raise TruncatedDataError(data_offset + length, len(stream))
        logger.warning(
            "Payload truncated: header declares %d bytes, stream holds %d", length, len(data)
        )

    audio = AudioBuffer(
        format_tag=format_tag,
        channels=_read_u16(stream, CHANNELS_OFFSET),
        samples_per_sec=_read_u32(stream, SAMPLES_PER_SEC_OFFSET),
        avg_bytes_per_sec=_read_u32(stream, AVG_BYTES_PER_SEC_OFFSET),
        block_align=_read_u16(stream, BLOCK_ALIGN_OFFSET),
        bits_per_sample=_read_u16(stream, BITS_PER_SAMPLE_OFFSET),
        data=bytearray(data),
    )
    logger.debug(
        "Decoded %s stream: %s, %d payload bytes", format_tag.display_name, audio, audio.length
    )
    return audio


def encode(audio: AudioBuffer) -> bytes:
    """Serialize an AudioBuffer as a WAVE stream.

    Args:
        audio: The buffer to serialize.

    Returns:
        The complete file contents.

    Raises:
        InvalidFormatTag: If the format tag is neither PCM nor EXTENSIBLE.
        FormatError: If a header field does not fit its on-disk width.
    """
    if audio.format_tag == WAVE_FORMAT_PCM:
        riff_size = audio.length + PCM_RIFF_OVERHEAD
        fmt_size = PCM_FMT_SIZE
    elif audio.format_tag == WAVE_FORMAT_EXTENSIBLE:
        riff_size = audio.length + EXTENSIBLE_RIFF_OVERHEAD
        fmt_size = EXTENSIBLE_FMT_SIZE
    else:
        raise InvalidFormatTag(audio.format_tag)

    wav = bytearray()

    try:
        # RIFF header
        wav.extend(RIFF_ID)
        wav.extend(_U32.pack(riff_size))
        wav.extend(WAVE_ID)

        # fmt chunk
        wav.extend(FMT_ID)
        wav.extend(_U32.pack(fmt_size))
        wav.extend(
            _CORE_FIELDS.pack(
                audio.format_tag,
                audio.channels,
                audio.samples_per_sec,
                audio.avg_bytes_per_sec,
                audio.block_align,
                audio.bits_per_sample,
            )
        )

        if audio.format_tag == WAVE_FORMAT_EXTENSIBLE:
            wav.extend(_U16.pack(EXTENSIBLE_CB_SIZE))
            wav.extend(_U16.pack(audio.bits_per_sample))  # valid bits per sample
            wav.extend(_U32.pack(channel_mask(audio.channels)))
            wav.extend(PCM_SUBFORMAT_GUID)

            # fact chunk
            wav.extend(FACT_ID)
            wav.extend(_U32.pack(FACT_SIZE))
            wav.extend(_U32.pack(audio.frames))

        # data chunk
        wav.extend(DATA_ID)
        wav.extend(_U32.pack(audio.length))
    except struct.error as e:
        raise FormatError(f"Header field out of range: {e}") from e

    wav.extend(audio.data)

    logger.debug(
        "Encoded %s stream: %s, %d bytes", FormatTag(audio.format_tag).name, audio, len(wav)
    )
    return bytes(wav)


def _check_tags(stream: bytes) -> None:
    """Verify the fixed FourCC tags of the RIFF header."""
    if len(stream) < PCM_DATA_OFFSET:
        raise TruncatedDataError(PCM_DATA_OFFSET, len(stream))

    if stream[0:4] != RIFF_ID:
        raise FormatError("Not a RIFF file")

    if stream[8:12] != WAVE_ID or stream[12:16] != FMT_ID:
        raise FormatError("Not a WAVE file with a leading fmt chunk")


def _read_u16(stream: bytes, offset: int) -> int:
    """Read a little-endian uint16, or 0 when the field is not fully present."""
    if len(stream) < offset + _U16.size:
        return 0
    return _U16.unpack_from(stream, offset)[0]


def _read_u32(stream: bytes, offset: int) -> int:
    """Read a little-endian uint32, or 0 when the field is not fully present."""
    if len(stream) < offset + _U32.size:
        return 0
    return _U32.unpack_from(stream, offset)[0]

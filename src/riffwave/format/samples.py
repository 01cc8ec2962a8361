"""Sample bit-depth conversion.

Raw WAVE payloads keep each sample at its native width. The functions here
widen them to full-scale signed 32-bit integers, so that every supported
depth shares one numeric range, and from there to float64 in [-1.0, 1.0).

    8-bit   ->  value << 24
    16-bit  ->  value << 16
    24-bit  ->  value << 8
    32-bit  ->  value

Unsupported depths produce an empty array rather than an error.
"""

import numpy as np
from numpy.typing import NDArray

# 2^31, maps the int32 range onto [-1.0, 1.0)
FLOAT_SCALE = float(1 << 31)

SUPPORTED_BIT_DEPTHS = (8, 16, 24, 32)


def bytes_per_sample(bits_per_sample: int) -> int:
    """Get the storage width of a single sample in bytes."""
    return bits_per_sample // 8


def to_int32_samples(
    data: bytes | bytearray | memoryview,
    bits_per_sample: int,
    num_samples: int,
) -> NDArray[np.int32]:
    """Convert a raw little-endian payload to full-scale int32 samples.

    Args:
        data: Interleaved payload bytes.
        bits_per_sample: Native sample width (8, 16, 24 or 32).
        num_samples: Number of scalar samples to decode.

    Returns:
        Array of ``num_samples`` int32 values, or an empty array when the
        bit depth is unsupported.
    """
    if bits_per_sample not in SUPPORTED_BIT_DEPTHS:
        return np.empty(0, dtype=np.int32)

    width = bytes_per_sample(bits_per_sample)
    # Trailing bytes that do not form a whole sample are ignored
    buf = memoryview(data).cast("B")
    count = min(num_samples, len(buf) // width)
    if count <= 0:
        return np.empty(0, dtype=np.int32)
    raw = buf[: count * width]

    if bits_per_sample == 8:
        return _from_s8(raw)
    elif bits_per_sample == 16:
        return _from_s16(raw)
    elif bits_per_sample == 24:
        return _from_s24(raw)
    return _from_s32(raw)


def to_float64_samples(
    data: bytes | bytearray | memoryview,
    bits_per_sample: int,
    num_samples: int,
) -> NDArray[np.float64]:
    """Convert a raw payload to float64 samples in [-1.0, 1.0)."""
    s32 = to_int32_samples(data, bits_per_sample, num_samples)
    return s32.astype(np.float64) / FLOAT_SCALE


def _from_s8(raw: memoryview) -> NDArray[np.int32]:
    """Decode signed 8-bit samples."""
    s8 = np.frombuffer(raw, dtype=np.int8)
    return s8.astype(np.int32) << 24


def _from_s16(raw: memoryview) -> NDArray[np.int32]:
    """Decode signed little-endian 16-bit samples."""
    s16 = np.frombuffer(raw, dtype="<i2")
    return s16.astype(np.int32) << 16


def _from_s24(raw: memoryview) -> NDArray[np.int32]:
    """Decode signed little-endian 24-bit samples.

    Each 3 byte sample is placed in the upper three bytes of a 32-bit word
    with a zero low byte. Reading that word as int32 sign-extends the
    sample and scales it by 2^8 in a single step.
    """
    triplets = np.frombuffer(raw, dtype=np.uint8).reshape(-1, 3)
    words = np.zeros((triplets.shape[0], 4), dtype=np.uint8)
    words[:, 1:] = triplets
    return words.reshape(-1).view("<i4").astype(np.int32)


def _from_s32(raw: memoryview) -> NDArray[np.int32]:
    """Decode signed little-endian 32-bit samples."""
    return np.frombuffer(raw, dtype="<i4").astype(np.int32)

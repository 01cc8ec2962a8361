"""Validation of WAVE header fields.

Decoding trusts the values stored in a stream. This module checks a decoded
(or hand-built) AudioBuffer against the relationships a well-formed header
must satisfy, reporting problems instead of raising.
"""

from dataclasses import dataclass

from riffwave.format.audio import AudioBuffer
from riffwave.format.samples import SUPPORTED_BIT_DEPTHS
from riffwave.format.types import FormatTag


@dataclass
class ValidationResult:
    """Outcome of checking one header: blocking errors plus advisory warnings."""

    valid: bool
    errors: list[str]
    warnings: list[str]

    @classmethod
    def success(cls, warnings: list[str] | None = None) -> "ValidationResult":
        return cls(valid=True, errors=[], warnings=warnings or [])

    @classmethod
    def failure(cls, errors: list[str], warnings: list[str] | None = None) -> "ValidationResult":
        return cls(valid=False, errors=errors, warnings=warnings or [])

    def promote_warnings(self) -> "ValidationResult":
        """Result with every warning counted as an error, for strict checking."""
        if not self.warnings:
            return self
        promoted = [f"Strict mode: {w}" for w in self.warnings]
        return ValidationResult.failure(self.errors + promoted, self.warnings)

    def to_dict(self) -> dict[str, object]:
        return {"valid": self.valid, "errors": list(self.errors), "warnings": list(self.warnings)}


def validate_header(audio: AudioBuffer) -> ValidationResult:
    """Validate the header fields of an AudioBuffer.

    Errors:
    - format_tag is PCM or EXTENSIBLE
    - channels > 0
    - bits_per_sample is a multiple of 8
    - block_align == channels * bits_per_sample / 8
    - avg_bytes_per_sec == samples_per_sec * block_align

    Warnings:
    - format_tag follows the EXTENSIBLE-above-16-bit policy
    - bits_per_sample is one of 8, 16, 24, 32
    - payload is a whole number of frames

    Args:
        audio: The buffer to validate.

    Returns:
        ValidationResult with errors and warnings.
    """
    errors: list[str] = []
    warnings: list[str] = []

    if not FormatTag.is_supported(audio.format_tag):
        errors.append(f"format_tag must be PCM or EXTENSIBLE, got 0x{audio.format_tag:04X}")
    elif audio.format_tag != FormatTag.from_bits_per_sample(audio.bits_per_sample):
        expected = FormatTag.from_bits_per_sample(audio.bits_per_sample)
        warnings.append(
            f"{audio.bits_per_sample} bit audio is normally stored as {expected.display_name}, "
            f"got {FormatTag(audio.format_tag).display_name}"
        )

    if audio.channels == 0:
        errors.append("channels must be > 0")

    if audio.bits_per_sample % 8 != 0:
        errors.append(f"bits_per_sample must be a multiple of 8, got {audio.bits_per_sample}")
    elif audio.bits_per_sample not in SUPPORTED_BIT_DEPTHS:
        warnings.append(
            f"bits_per_sample {audio.bits_per_sample} cannot be converted to samples"
        )

    expected_block_align = audio.channels * audio.bits_per_sample // 8
    if audio.block_align != expected_block_align:
        errors.append(
            f"block_align ({audio.block_align}) must equal channels * bits_per_sample / 8 "
            f"({expected_block_align})"
        )

    expected_byte_rate = audio.samples_per_sec * audio.block_align
    if audio.avg_bytes_per_sec != expected_byte_rate:
        errors.append(
            f"avg_bytes_per_sec ({audio.avg_bytes_per_sec}) must equal "
            f"samples_per_sec * block_align ({expected_byte_rate})"
        )

    if audio.block_align > 0 and audio.length % audio.block_align != 0:
        warnings.append(
            f"payload length {audio.length} is not a multiple of block_align {audio.block_align}"
        )

    if errors:
        return ValidationResult.failure(errors, warnings)
    return ValidationResult.success(warnings)

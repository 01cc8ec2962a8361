"""Python types for WAVE header values."""

from enum import IntEnum

from riffwave.format.riff import WAVE_FORMAT_EXTENSIBLE, WAVE_FORMAT_PCM


class FormatTag(IntEnum):
    """Header layout selector stored in the fmt chunk."""

    PCM = WAVE_FORMAT_PCM
    """WAVE_FORMAT_PCM, 16 byte fmt chunk."""

    EXTENSIBLE = WAVE_FORMAT_EXTENSIBLE
    """WAVE_FORMAT_EXTENSIBLE, 40 byte fmt chunk followed by a fact chunk."""

    @classmethod
    def from_bits_per_sample(cls, bits_per_sample: int) -> "FormatTag":
        """Pick the layout used for new buffers: EXTENSIBLE above 16 bits."""
        if bits_per_sample > 16:
            return cls.EXTENSIBLE
        return cls.PCM

    @classmethod
    def is_supported(cls, value: int) -> bool:
        """Whether ``value`` is one of the known tag codes."""
        return any(value == member.value for member in cls)

    @property
    def display_name(self) -> str:
        """Human-readable name for this tag."""
        names = {
            FormatTag.PCM: "PCM",
            FormatTag.EXTENSIBLE: "Extensible",
        }
        return names.get(self, "Unknown")

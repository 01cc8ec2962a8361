"""Reading and writing WAVE files on disk."""

from pathlib import Path

from riffwave.format.audio import AudioBuffer
from riffwave.format.codec import decode, encode
from riffwave.format.riff import FormatError


def load_wav(path: Path | str, *, strict: bool = False) -> AudioBuffer:
    """Load a WAVE file.

    Args:
        path: Path to the WAV file.
        strict: Reject files with bad RIFF tags or truncated payloads.

    Returns:
        The decoded AudioBuffer.

    Raises:
        FormatError: If the file cannot be read or decoded.
    """
    path = Path(path)

    try:
        stream = path.read_bytes()
    except FileNotFoundError as e:
        raise FormatError(f"File not found: {path}") from e
    except OSError as e:
        raise FormatError(f"Cannot open file: {path}") from e

    return decode(stream, strict=strict)


def save_wav(path: Path | str, audio: AudioBuffer) -> None:
    """Write an AudioBuffer as a WAVE file, creating parent directories.

    Raises:
        FormatError: If the buffer cannot be encoded.
    """
    path = Path(path)
    stream = encode(audio)

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(stream)

"""Unit tests for loading and saving WAVE files."""

from pathlib import Path

import pytest

from riffwave.format import AudioBuffer, FormatError, TruncatedDataError, load_wav, save_wav


class TestLoadSave:
    """Tests for load_wav and save_wav."""

    def test_basic_roundtrip(self, tmp_path: Path) -> None:
        audio = AudioBuffer.new(48000, 24, 2)
        audio.write(bytes(range(120)))

        output_path = tmp_path / "nested" / "dir" / "test.wav"
        save_wav(output_path, audio)
        loaded = load_wav(output_path)

        assert output_path.exists()
        assert loaded == audio
        assert str(loaded) == "48000 Hz / 24 bit 2 channel(s)"

    def test_accepts_str_path(self, tmp_path: Path) -> None:
        audio = AudioBuffer.new(8000, 8, 1)
        save_wav(str(tmp_path / "mono.wav"), audio)
        assert load_wav(str(tmp_path / "mono.wav")) == audio

    def test_file_not_found(self) -> None:
        with pytest.raises(FormatError, match="File not found"):
            load_wav(Path("/nonexistent/path/file.wav"))

    def test_invalid_file(self, tmp_path: Path) -> None:
        invalid_path = tmp_path / "invalid.wav"
        invalid_path.write_bytes(b"not a wav file")

        with pytest.raises(FormatError):
            load_wav(invalid_path)

    def test_strict_truncated_file(self, tmp_path: Path) -> None:
        audio = AudioBuffer.new(44100, 16, 2)
        audio.write(bytes(400))
        path = tmp_path / "cut.wav"
        save_wav(path, audio)
        path.write_bytes(path.read_bytes()[:-100])

        assert load_wav(path).length == 300
        with pytest.raises(TruncatedDataError):
            load_wav(path, strict=True)

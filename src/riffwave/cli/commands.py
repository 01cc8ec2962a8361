import json
import logging
import sys
from pathlib import Path
from typing import Annotated, Literal

from cyclopts import App, Parameter
from rich.console import Console
from rich.table import Table

from riffwave.cli.validators import (
    validate_bits_per_sample,
    validate_non_negative_float,
    validate_positive_integer,
)
from riffwave.format import (
    AudioBuffer,
    FormatError,
    FormatTag,
    ValidationResult,
    channel_mask,
    load_wav,
    save_wav,
    validate_header,
)

SampleFormat = Literal["int32", "float64"]

app = App(name="riffwave", help="A utility for inspecting and converting WAVE files")
console = Console()
logger = logging.getLogger(__name__)


STATUS_STYLES = {"error": "bold red", "success": "bold green", "warning": "bold yellow"}


def print_status(status: str, message: str) -> None:
    console.print(message, style=STATUS_STYLES[status])


def print_json(payload: dict[str, object]) -> None:
    console.print(json.dumps(payload, indent=2), markup=False, soft_wrap=True)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )


@app.command
def info(file: Path, verbose: bool = False) -> int:
    """
    Display header information about a WAVE file.

    Parameters
    ----------
    file: Path
        The path to the .wav file
    verbose: bool
        Enable debug logging
    """
    configure_logging(verbose)

    try:
        audio = load_wav(file)
    except FormatError as e:
        print_status("error", f"Error: {e}")
        return 1

    tag = FormatTag(audio.format_tag)

    table = Table(title=str(file), show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("Format tag", f"0x{tag.value:04X} ({tag.display_name})")
    table.add_row("Channels", str(audio.channels))
    table.add_row("Sample rate", f"{audio.samples_per_sec} Hz")
    table.add_row("Bits per sample", str(audio.bits_per_sample))
    table.add_row("Block align", str(audio.block_align))
    table.add_row("Avg bytes per sec", str(audio.avg_bytes_per_sec))
    if tag == FormatTag.EXTENSIBLE:
        table.add_row("Channel mask (encoded)", f"0x{channel_mask(audio.channels):X}")
    table.add_row("Payload length", f"{audio.length} bytes")
    table.add_row("Samples", str(audio.samples))
    table.add_row("Frames", str(audio.frames))
    table.add_row("Duration", f"{audio.duration:.3f} s")
    console.print(table)

    return 0


@app.command
def validate(
    file: Path,
    strict: bool = False,
    output_json: Annotated[bool, Parameter(name=["--json"])] = False,
    verbose: bool = False,
) -> int:
    """
    Validate the header of a WAVE file.

    Checks the format tag, block alignment, byte rate and payload size.

    Parameters
    ----------
    file: Path
        The path to the .wav file to validate
    strict: bool
        Reject truncated files and treat warnings as errors (default: False)
    output_json: bool
        Output results as JSON (default: False)
    verbose: bool
        Enable debug logging
    """
    configure_logging(verbose)

    try:
        audio = load_wav(file, strict=strict)
    except FormatError as e:
        if output_json:
            print_json({"file": str(file), **ValidationResult.failure([str(e)]).to_dict()})
        else:
            print_status("error", f"[FAIL] {file}")
            console.print(f"  {e}")
        return 1

    result = validate_header(audio)
    if strict:
        result = result.promote_warnings()

    if output_json:
        print_json({"file": str(file), **result.to_dict()})
    elif result.valid:
        print_status("success", f"[PASS] {file}")
        console.print(f"  {audio}")
        for warning in result.warnings:
            print_status("warning", f"  [WARN] {warning}")
    else:
        print_status("error", f"[FAIL] {file}")
        for error in result.errors:
            console.print(f"  {error}")

    return 0 if result.valid else 1


@app.command
def create(
    output: Path,
    sample_rate: Annotated[int, Parameter(validator=validate_positive_integer)] = 44100,
    bits: Annotated[int, Parameter(validator=validate_bits_per_sample)] = 16,
    channels: Annotated[int, Parameter(validator=validate_positive_integer)] = 2,
    seconds: Annotated[float, Parameter(validator=validate_non_negative_float)] = 1.0,
    verbose: bool = False,
) -> int:
    """
    Create a silent WAVE file.

    Parameters
    ----------
    output: Path
        The output destination for the .wav file
    sample_rate: int
        The sample rate in Hz
    bits: int
        The bits per sample. Must be a multiple of 8.
    channels: int
        The number of channels
    seconds: float
        The duration of silence in seconds
    verbose: bool
        Enable debug logging
    """
    configure_logging(verbose)

    try:
        audio = AudioBuffer.new(sample_rate, bits, channels)
        frames = int(round(seconds * sample_rate))
        audio.write(bytes(frames * audio.block_align))
        save_wav(output, audio)
    except (FormatError, OSError) as e:
        print_status("error", f"Error writing output: {e}")
        return 1

    print_status("success", f"Created {output}")
    console.print(f"  {audio}, {audio.frames} frames")
    return 0


@app.command
def export(
    file: Path,
    output: Path,
    sample_format: Annotated[SampleFormat, Parameter(name=["--format"])] = "int32",
    verbose: bool = False,
) -> int:
    """
    Export the samples of a WAVE file as raw little-endian binary.

    Parameters
    ----------
    file: Path
        The path to the source .wav file
    output: Path
        The output destination for the raw samples
    sample_format: SampleFormat
        Sample representation, full-scale int32 or float64 in [-1, 1)
    verbose: bool
        Enable debug logging
    """
    configure_logging(verbose)

    try:
        audio = load_wav(file)
    except FormatError as e:
        print_status("error", f"Error: {e}")
        return 1

    if sample_format == "int32":
        samples = audio.int32s().astype("<i4")
    else:
        samples = audio.float64s().astype("<f8")

    if samples.size == 0 and audio.length > 0:
        print_status("warning", f"{audio.bits_per_sample} bit samples cannot be converted")

    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_bytes(samples.tobytes())
    except OSError as e:
        print_status("error", f"Error writing output: {e}")
        return 1

    logger.debug("Wrote %d %s samples to %s", samples.size, sample_format, output)
    print_status("success", f"Exported {samples.size} samples -> {output}")
    return 0


def main() -> None:
    sys.exit(app())


if __name__ == "__main__":
    main()

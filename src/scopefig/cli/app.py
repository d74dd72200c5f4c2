"""CLI application entry point for scopefig.

This module provides the main CLI interface using Typer.
"""

import time
from pathlib import Path
from typing import Annotated

import typer

from scopefig import __version__
from scopefig.cli.output import (
    console,
    print_document_info,
    print_error,
    print_header,
    print_live_info,
    print_step,
    print_stopped,
    print_success,
    print_timing_info,
)
from scopefig.config import (
    CurveKind,
    GeometryConfig,
    LiveConfig,
    LoggingConfig,
    OutputConfig,
    ScopefigSettings,
    TimingConfig,
)
from scopefig.core import Synthesizer
from scopefig.exceptions import (
    AudioWriteError,
    ConfigurationError,
    DocumentLoadError,
    EmptyGeometryError,
    ScopefigError,
)
from scopefig.io import AudioWriter, CurveSource, LiveOutput, LoopSource
from scopefig.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="scopefig",
    help="Draw SVG figures on an oscilloscope in XY mode using stereo audio.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Scopefig[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Draw SVG figures on an oscilloscope in XY mode using stereo audio."""


@app.command()
def render(
    input_svg: Annotated[
        Path,
        typer.Argument(
            help="Path to input SVG document",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output WAV path (default: {name}.wav)",
        ),
    ] = None,
    sample_rate: Annotated[
        int,
        typer.Option("--sample-rate", "-r", help="Sample rate in Hz", min=1),
    ] = 44100,
    dwell: Annotated[
        float,
        typer.Option("--dwell", "-d", help="Stroke time in seconds per unit length", min=0.0),
    ] = 0.01,
    velocity: Annotated[
        float | None,
        typer.Option("--velocity", help="Constant stroke velocity in units/s (overrides --dwell)"),
    ] = None,
    transit: Annotated[
        float,
        typer.Option("--transit", "-t", help="Jump time in seconds per unit length", min=0.0),
    ] = 0.0005,
    tolerance: Annotated[
        float,
        typer.Option("--tolerance", help="Curve flattening tolerance in canonical units"),
    ] = 0.01,
    loops: Annotated[
        int,
        typer.Option("--loops", "-n", help="Number of times the drawing is repeated", min=1),
    ] = 1,
    easing_order: Annotated[
        int,
        typer.Option("--easing-order", "-k", help="Order of the transit easing curve", min=2),
    ] = 10,
    clip: Annotated[
        bool,
        typer.Option("--clip", help="Hard-limit samples to [-1, 1]"),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option("--log-file", help="Write detailed logs to file"),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="Logging level (DEBUG|INFO|WARNING|ERROR)"),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Verbose console output"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Minimal console output"),
    ] = False,
) -> None:
    """Render an SVG document to a looping XY WAV file.

    Left channel carries X, right channel carries Y.

    Example:
        scopefig render logo.svg --loops 200

    This will create logo.wav, about as long as 200 traversals of the drawing.
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if not input_svg.exists():
        print_error(
            f"Input file not found: {input_svg}",
            details=f"The file '{input_svg}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not input_svg.is_file():
        print_error(
            f"Input path is not a file: {input_svg}",
            details="Please provide a path to an SVG document.",
        )
        raise typer.Exit(code=1)

    try:
        settings = ScopefigSettings(
            timing=TimingConfig(
                sample_rate=sample_rate,
                dwell_time=dwell,
                velocity=velocity,
                transit_time=transit,
                easing_order=easing_order,
            ),
            geometry=GeometryConfig(tolerance=tolerance),
            output=OutputConfig(loop_count=loops, clip=clip),
            logging=LoggingConfig(
                log_file=log_file,
                log_level="DEBUG" if verbose else log_level,
            ),
        )
    except ValueError as e:
        print_error("Invalid options", details=str(e))
        raise typer.Exit(code=1)

    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    if not quiet:
        print_header(__version__)

    output_path = output if output is not None else AudioWriter.get_output_path(input_svg)

    try:
        if not quiet:
            print_step("Synthesizing")
            print_timing_info(sample_rate, dwell, velocity)

        synthesizer = Synthesizer(settings, logger=logger)
        result = synthesizer.synthesize_file(input_svg)
        stats = result.stats

        if not quiet:
            print_document_info(
                document_path=str(input_svg),
                shape_count=stats.shape_count,
                width=result.view_box.width,
                height=result.view_box.height,
            )
            print_step("Writing")

        synthesizer.write(result, output_path)

        if not quiet:
            print_success(
                output_path=str(output_path),
                file_size=_format_file_size(output_path),
                total_time_s=stats.duration_seconds,
                shapes=stats.shape_count,
                subpaths=stats.subpath_count,
                waypoints=stats.waypoint_count,
                playback_s=stats.playback_seconds,
                refresh_hz=stats.refresh_rate,
            )

    except DocumentLoadError as e:
        print_error(f"Could not load document: {e.reason}")
        raise typer.Exit(code=1)
    except EmptyGeometryError:
        print_error("Nothing to draw", details="The document contains no drawable paths.")
        raise typer.Exit(code=1)
    except AudioWriteError as e:
        print_error(f"Could not write audio: {e.reason}")
        raise typer.Exit(code=1)
    except ScopefigError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


@app.command()
def live(
    input_svg: Annotated[
        Path | None,
        typer.Argument(
            help="SVG document to loop (default: draw a parametric curve)",
            show_default=False,
        ),
    ] = None,
    curve: Annotated[
        CurveKind,
        typer.Option("--curve", "-c", help="Parametric curve to draw without a document"),
    ] = CurveKind.HEART,
    scan_rate: Annotated[
        float,
        typer.Option("--scan-rate", help="Curve traversals per second", min=0.1),
    ] = 100.0,
    amplitude: Annotated[
        float,
        typer.Option("--amplitude", "-a", help="Output gain (0-1]", min=0.0, max=1.0),
    ] = 0.8,
    sample_rate: Annotated[
        int,
        typer.Option("--sample-rate", "-r", help="Sample rate in Hz", min=1),
    ] = 48000,
    device: Annotated[
        str | None,
        typer.Option("--device", help="Output device name or index"),
    ] = None,
    seconds: Annotated[
        float | None,
        typer.Option("--seconds", "-s", help="Stop after this many seconds"),
    ] = None,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Minimal console output"),
    ] = False,
) -> None:
    """Play a drawing or parametric curve on the sound card in real time.

    Example:
        scopefig live --curve heart
    """
    device_id: int | str | None = int(device) if device and device.isdigit() else device

    try:
        live_config = LiveConfig(
            curve=curve,
            scan_rate=scan_rate,
            amplitude=amplitude,
            device=device_id,
        )
    except ValueError as e:
        print_error("Invalid options", details=str(e))
        raise typer.Exit(code=1)

    configure_logging(console_level="WARNING", quiet=quiet)

    if not quiet:
        print_header(__version__)

    try:
        if input_svg is not None:
            settings = ScopefigSettings(timing=TimingConfig(sample_rate=sample_rate))
            result = Synthesizer(settings).synthesize_file(input_svg)
            source: CurveSource | LoopSource = LoopSource(result.waypoints)
            label = str(input_svg)
        else:
            source = CurveSource(curve, scan_rate, sample_rate)
            label = f"{curve.value} curve"
    except FileNotFoundError:
        print_error(f"Input file not found: {input_svg}")
        raise typer.Exit(code=1)
    except ScopefigError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if not quiet:
        print_step("Playing")
        print_live_info(label, sample_rate, seconds)

    output = LiveOutput(source, sample_rate, live_config)
    try:
        with output:
            if seconds is not None:
                time.sleep(seconds)
            else:
                while True:
                    time.sleep(0.1)
    except KeyboardInterrupt:
        if not quiet:
            print_stopped(output.overrun_count)
        raise typer.Exit(code=130) from None  # Standard Unix SIGINT exit code
    except ConfigurationError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except Exception as e:
        print_error(f"Audio device error: {e}")
        raise typer.Exit(code=1)

    if not quiet:
        print_stopped(output.overrun_count)


def _format_file_size(path: Path) -> str:
    """Format file size in human-readable form.

    Args:
        path: Path to file

    Returns:
        Human-readable file size (e.g., "428 KB")
    """
    try:
        size_bytes = path.stat().st_size
        if size_bytes < 1024:
            return f"{size_bytes} B"
        elif size_bytes < 1024 * 1024:
            return f"{size_bytes / 1024:.0f} KB"
        else:
            return f"{size_bytes / (1024 * 1024):.1f} MB"
    except OSError:
        return "unknown"


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()

"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with formatted messages and run summaries.
"""

from rich.console import Console
from rich.text import Text

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Scopefig[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_document_info(document_path: str, shape_count: int, width: float, height: float) -> None:
    """Print document information.

    Args:
        document_path: Path to the SVG file
        shape_count: Number of drawable shapes
        width: Canvas width
        height: Canvas height
    """
    # Use Text to safely handle paths with special characters
    line1 = Text("  ")
    line1.append(document_path)
    console.print(line1)
    console.print(f"  {shape_count:,} shapes {SYM_DOT} {width:g}×{height:g} canvas")


def print_timing_info(sample_rate: int, dwell_time: float, velocity: float | None) -> None:
    """Print stroke timing configuration."""
    if velocity is not None:
        pace = f"{velocity:g} units/s"
    else:
        pace = f"{dwell_time:g} s/unit"
    console.print(f"  {sample_rate:,} Hz {SYM_DOT} {pace}")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_success(
    output_path: str,
    file_size: str,
    total_time_s: float,
    shapes: int,
    subpaths: int,
    waypoints: int,
    playback_s: float,
    refresh_hz: float,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        file_size: Human-readable file size string
        total_time_s: Total synthesis time in seconds
        shapes: Number of shapes drawn
        subpaths: Number of subpaths drawn
        waypoints: Waypoints per traversal of the drawing
        playback_s: Length of the audio in seconds
        refresh_hz: Traversals of the drawing per second
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({file_size})")
    console.print(line)

    console.print(
        f"  {shapes} shapes {SYM_DOT} {subpaths} subpaths {SYM_DOT} {waypoints:,} waypoints"
    )

    refresh_style = "yellow" if refresh_hz < 25 else "green"
    console.print(
        f"  {_format_time(playback_s)} audio {SYM_DOT} "
        f"[{refresh_style}]{refresh_hz:.1f} Hz refresh[/{refresh_style}]"
    )


def print_live_info(source: str, sample_rate: int, seconds: float | None) -> None:
    """Print live output configuration."""
    limit = _format_time(seconds) if seconds else "until Ctrl+C"
    console.print(f"  {source} {SYM_DOT} {sample_rate:,} Hz {SYM_DOT} {limit}")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")


def print_stopped(overruns: int) -> None:
    """Print live output shutdown summary."""
    console.print(f"\n{SYM_DOT} [bold]Stopped[/bold]")
    if overruns:
        console.print(f"  [yellow]{overruns} buffer overruns[/yellow]")

"""Configuration settings for Scopefig."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class CurveKind(str, Enum):
    """Parametric curve drawn by the live output."""

    HEART = "heart"
    CARDIOID = "cardioid"
    ROSE = "rose"
    LISSAJOUS = "lissajous"


class TimingConfig(BaseModel):
    """Configuration for sample timing along strokes and transits.

    Times are expressed in seconds per unit of canonical distance, so a
    drawing that spans the full canonical range takes roughly
    ``canonical_span * dwell_time`` seconds per stroke traversal.
    """

    sample_rate: int = Field(
        default=44100,
        gt=0,
        description="Output sample rate in Hz",
    )
    dwell_time: float = Field(
        default=0.01,
        gt=0.0,
        description="Seconds spent per unit length while drawing a stroke",
    )
    velocity: float | None = Field(
        default=None,
        gt=0.0,
        description="Constant stroke velocity in units per second (overrides dwell_time)",
    )
    transit_time: float = Field(
        default=0.0005,
        ge=0.0,
        description="Seconds spent per unit length while jumping between subpaths",
    )
    easing_order: int = Field(
        default=10,
        ge=2,
        le=64,
        description="Exponent of the ease-in/ease-out curve used for transits",
    )


class GeometryConfig(BaseModel):
    """Configuration for canonical space and curve flattening."""

    tolerance: float = Field(
        default=0.01,
        gt=0.0,
        le=1.0,
        description="Maximum curve flattening deviation in canonical units",
    )
    canonical_span: float = Field(
        default=2.0,
        gt=0.0,
        description="Size of the larger drawing dimension in canonical space",
    )
    home: tuple[float, float] = Field(
        default=(0.0, 0.0),
        description="Point the beam returns to after the last shape",
    )


class OutputConfig(BaseModel):
    """Configuration for the rendered sample stream."""

    loop_count: int = Field(
        default=1,
        ge=1,
        description="Number of times the drawing is repeated in the output",
    )
    clip: bool = Field(
        default=False,
        description="Hard-limit samples to [-1, 1] before writing",
    )
    subtype: str = Field(
        default="FLOAT",
        description="libsndfile sample subtype of the WAV file",
    )


class LiveConfig(BaseModel):
    """Configuration for real-time sound card output."""

    curve: CurveKind = Field(
        default=CurveKind.HEART,
        description="Parametric curve to draw when no document is given",
    )
    scan_rate: float = Field(
        default=100.0,
        gt=0.0,
        le=5000.0,
        description="Curve traversals per second",
    )
    amplitude: float = Field(
        default=0.8,
        gt=0.0,
        le=1.0,
        description="Output gain applied to both channels",
    )
    blocksize: int = Field(
        default=1024,
        ge=64,
        le=16384,
        description="Frames per audio callback",
    )
    device: int | str | None = Field(
        default=None,
        description="Sound card output device (None = system default)",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class ScopefigSettings(BaseModel):
    """Main application settings."""

    timing: TimingConfig = Field(default_factory=TimingConfig)
    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    live: LiveConfig = Field(default_factory=LiveConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> ScopefigSettings:
    """Get default application settings."""
    return ScopefigSettings()

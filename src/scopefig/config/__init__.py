"""Configuration management for scopefig.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- TimingConfig: Sample rate, dwell and transit timing
- GeometryConfig: Flattening tolerance and canonical space settings
- OutputConfig: Loop count and audio sample format
- LiveConfig: Real-time sound card output settings
- LoggingConfig: Logging settings
- ScopefigSettings: Main application settings
"""

from scopefig.config.settings import (
    CurveKind,
    GeometryConfig,
    LiveConfig,
    LoggingConfig,
    OutputConfig,
    ScopefigSettings,
    TimingConfig,
    get_default_settings,
)

__all__ = [
    "CurveKind",
    "GeometryConfig",
    "LiveConfig",
    "LoggingConfig",
    "OutputConfig",
    "ScopefigSettings",
    "TimingConfig",
    "get_default_settings",
]

"""Logging utilities for Scopefig."""

import logging
from dataclasses import dataclass
from pathlib import Path

import structlog

from scopefig.domain import Extent


@dataclass
class SynthesisStats:
    """Statistics from a synthesis run."""

    shape_count: int = 0
    subpath_count: int = 0
    segment_count: int = 0
    transit_count: int = 0
    waypoint_count: int = 0
    frame_count: int = 0
    loop_count: int = 1
    sample_rate: int = 44100
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def playback_seconds(self) -> float:
        """Length of the rendered audio."""
        return self.waypoint_count * self.loop_count / self.sample_rate

    @property
    def refresh_rate(self) -> float:
        """How many times per second the whole drawing is traced."""
        if self.waypoint_count == 0:
            return 0.0
        return self.sample_rate / self.waypoint_count


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("scopefig")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class SynthesisLogger:
    """Logger for tracking synthesis progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger, stats: SynthesisStats | None = None) -> None:
        self._logger = logger
        self._stats = stats or SynthesisStats()

    def log_shape_start(self, index: int, shape_id: str | None) -> None:
        """Log start of shape accumulation."""
        self._logger.debug("Accumulating shape", index=index, shape=shape_id)

    def log_shape_complete(
        self,
        index: int,
        shape_id: str | None,
        waypoints: int,
        duration_ms: float,
    ) -> None:
        """Log a shape whose events have been consumed."""
        self._logger.debug(
            "Shape accumulated",
            index=index,
            shape=shape_id,
            waypoints=waypoints,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.shape_count += 1

    def log_shape_error(self, index: int, shape_id: str | None, error: Exception) -> None:
        """Log a shape that aborted the run."""
        self._logger.error(
            "Shape synthesis failed",
            index=index,
            shape=shape_id,
            error=str(error),
            error_type=type(error).__name__,
        )

    def log_normalization(self, before: Extent, after: Extent) -> None:
        """Log the extents around normalization."""
        self._logger.debug(
            "Waypoints normalized",
            width=round(before.width, 6),
            height=round(before.height, 6),
            span=round(after.span, 6),
        )

    def log_stream(self, frames: int, loop_count: int, seconds: float) -> None:
        """Log the assembled stream."""
        self._logger.info(
            "Sample stream assembled",
            frames=frames,
            loops=loop_count,
            seconds=round(seconds, 3),
        )
        self._stats.frame_count = frames
        self._stats.loop_count = loop_count

    @property
    def stats(self) -> SynthesisStats:
        """Get current synthesis statistics."""
        return self._stats

"""Assembly of the interleaved, looped sample stream."""

from collections.abc import Sequence

import numpy as np

from scopefig.domain import Point
from scopefig.exceptions import ConfigurationError, EmptyGeometryError


def assemble(points: Sequence[Point], loop_count: int = 1) -> np.ndarray:
    """Repeat a waypoint buffer and interleave its channels.

    Looping is plain repetition: no samples are added at the seam.

    Args:
        points: Normalized waypoints
        loop_count: Number of repetitions, at least 1

    Returns:
        1-D float32 array ``x0, y0, x1, y1, ...`` of length
        ``2 * loop_count * len(points)``

    Raises:
        EmptyGeometryError: If there are no points
        ConfigurationError: If loop_count is below 1
    """
    if not points:
        raise EmptyGeometryError("Cannot assemble a sample stream from an empty buffer")
    if loop_count < 1:
        raise ConfigurationError(f"Loop count must be at least 1, got {loop_count}")

    frame = np.array([p.to_tuple() for p in points], dtype=np.float32).reshape(-1)
    return np.tile(frame, loop_count)


def duration_seconds(points: Sequence[Point], loop_count: int, sample_rate: int) -> float:
    """Playback time of the assembled stream."""
    return len(points) * loop_count / sample_rate

"""Sampling of straight strokes at a fixed sample rate."""

import math

from scopefig.domain import Point, Segment
from scopefig.exceptions import ConfigurationError


class SegmentSampler:
    """Turns a straight segment into evenly spaced waypoints.

    Two timing policies are supported. With a dwell time the beam spends
    ``dwell_time`` seconds per unit of length; with a velocity it moves at
    ``velocity`` units per second. Either way every segment yields at least
    one sample so that no stroke is silently dropped.

    The output starts at the segment's start point and stops short of its end
    point, which is supplied by whatever comes next in the drawing.

    Example:
        sampler = SegmentSampler(sample_rate=44100, dwell_time=0.01)
        points = sampler.sample(Segment(Point(0, 0), Point(1, 0)))
    """

    def __init__(
        self,
        sample_rate: int,
        dwell_time: float = 0.01,
        velocity: float | None = None,
    ) -> None:
        """Initialize the sampler.

        Args:
            sample_rate: Samples per second
            dwell_time: Seconds per unit length (ignored if velocity is set)
            velocity: Units per second, or None to use dwell_time

        Raises:
            ConfigurationError: If any timing parameter is not positive
        """
        if sample_rate <= 0:
            raise ConfigurationError(f"Sample rate must be positive, got {sample_rate}")
        if velocity is None and dwell_time <= 0:
            raise ConfigurationError(f"Dwell time must be positive, got {dwell_time}")
        if velocity is not None and velocity <= 0:
            raise ConfigurationError(f"Velocity must be positive, got {velocity}")

        self.sample_rate = sample_rate
        self.dwell_time = dwell_time
        self.velocity = velocity

    def sample_count(self, length: float) -> int:
        """Number of samples spent on a segment of the given length."""
        if self.velocity is not None:
            n = math.floor(self.sample_rate * length / self.velocity)
        else:
            n = math.floor(self.sample_rate * length * self.dwell_time)
        return max(1, n)

    def sample(self, segment: Segment) -> list[Point]:
        """Sample a segment.

        Args:
            segment: Segment in canonical space

        Returns:
            ``n`` points at parameters ``i/n`` for ``i`` in ``range(n)``
        """
        n = self.sample_count(segment.length)
        start, end = segment.start, segment.end
        return [start.lerp(end, i / n) for i in range(n)]

"""Eased blanking moves between disconnected subpaths.

A jump drawn at constant speed leaves a visible streak across the display.
The transit instead follows a symmetric ease-in/ease-out profile so the beam
spends most of the transit time near its endpoints, which are already lit.
"""

import math

from scopefig.domain import Point
from scopefig.exceptions import ConfigurationError


def ease(x: float, order: int) -> float:
    """Symmetric polynomial ease-in/ease-out.

    Args:
        x: Normalized progress in [0, 1]
        order: Polynomial order, at least 2

    Returns:
        Eased progress in [0, 1]; 0 at x=0, 0.5 at x=0.5 and 1 at x=1

    Raises:
        ConfigurationError: If order is below 2

    Examples:
        >>> ease(0.0, 10)
        0.0
        >>> ease(0.5, 10)
        0.5
        >>> ease(1.0, 10)
        1.0
    """
    if order < 2:
        raise ConfigurationError(f"Easing order must be at least 2, got {order}")

    if x <= 0.5:
        return x**order / 0.5 ** (order - 1)
    return 1.0 - (2.0 - 2.0 * x) ** order / 2.0


class TransitSynthesizer:
    """Generates the eased trajectory of a jump between two points.

    Example:
        transit = TransitSynthesizer(sample_rate=44100, transit_time=0.0005)
        points = transit.synthesize(Point(0, 0), Point(10, 0))
    """

    def __init__(
        self,
        sample_rate: int,
        transit_time: float = 0.0005,
        easing_order: int = 10,
    ) -> None:
        """Initialize the synthesizer.

        Args:
            sample_rate: Samples per second
            transit_time: Seconds per unit length of the jump
            easing_order: Order of the easing polynomial

        Raises:
            ConfigurationError: If a parameter is out of range
        """
        if sample_rate <= 0:
            raise ConfigurationError(f"Sample rate must be positive, got {sample_rate}")
        if transit_time < 0:
            raise ConfigurationError(f"Transit time must not be negative, got {transit_time}")
        if easing_order < 2:
            raise ConfigurationError(f"Easing order must be at least 2, got {easing_order}")

        self.sample_rate = sample_rate
        self.transit_time = transit_time
        self.easing_order = easing_order

    def sample_count(self, length: float) -> int:
        """Number of samples spent on a jump of the given length."""
        return math.floor(self.sample_rate * self.transit_time * length)

    def synthesize(self, start: Point | None, end: Point) -> list[Point]:
        """Build the transit from ``start`` to ``end``.

        Args:
            start: Current beam position, or None if nothing was drawn yet
            end: Destination

        Returns:
            ``[end]`` when there is no start or the transit is too short to
            sample, otherwise ``n`` eased points starting at ``start``
        """
        if start is None:
            return [end]

        n = self.sample_count(start.distance_to(end))
        if n == 0:
            return [end]

        return [start.lerp(end, ease(i / n, self.easing_order)) for i in range(n)]

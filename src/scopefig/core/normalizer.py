"""Extent normalization of waypoint buffers.

Normalization runs in two linear passes: the first measures the bounding box
of the buffer, the second recenters every point on the origin and scales the
buffer uniformly so its larger dimension equals the canonical span.
"""

from collections.abc import Sequence

from scopefig.core.transform import DEFAULT_CANONICAL_SPAN
from scopefig.domain import Extent, Point
from scopefig.exceptions import ConfigurationError, DegenerateGeometryError, EmptyGeometryError

EXTENT_TOLERANCE = 1e-6


def compute_extent(points: Sequence[Point]) -> Extent:
    """Calculate the bounding box of a waypoint buffer.

    Args:
        points: Waypoints

    Returns:
        Extent of the points

    Raises:
        EmptyGeometryError: If there are no points
    """
    if not points:
        raise EmptyGeometryError("Waypoint buffer is empty; nothing to normalize")

    xs = [p.x for p in points]
    ys = [p.y for p in points]
    return Extent(min(xs), min(ys), max(xs), max(ys))


def normalize(
    points: Sequence[Point],
    canonical_span: float = DEFAULT_CANONICAL_SPAN,
) -> list[Point]:
    """Center and rescale a waypoint buffer.

    Aspect ratio is preserved. Applying the function to its own output
    returns the same buffer.

    Args:
        points: Waypoints in drawing order
        canonical_span: Size of the larger dimension after normalization

    Returns:
        New buffer, same length and order as the input

    Raises:
        EmptyGeometryError: If there are no points
        DegenerateGeometryError: If all points coincide
        ConfigurationError: If canonical_span is not positive

    Examples:
        >>> normalize([Point(0.0, 0.0), Point(4.0, 2.0)])
        [Point(x=-1.0, y=-0.5), Point(x=1.0, y=0.5)]
    """
    if canonical_span <= 0:
        raise ConfigurationError(f"Canonical span must be positive, got {canonical_span}")

    extent = compute_extent(points)
    span = extent.span
    if span == 0:
        raise DegenerateGeometryError(
            f"All {len(points)} waypoints coincide at "
            f"({extent.min_x}, {extent.min_y}); cannot derive a scale"
        )

    scale = canonical_span / span
    offset_x = extent.min_x + extent.width / 2
    offset_y = extent.min_y + extent.height / 2

    normalized = [Point((p.x - offset_x) * scale, (p.y - offset_y) * scale) for p in points]

    verify_normalized(normalized, canonical_span)
    return normalized


def verify_normalized(
    points: Sequence[Point],
    canonical_span: float = DEFAULT_CANONICAL_SPAN,
    tolerance: float = EXTENT_TOLERANCE,
) -> Extent:
    """Check that a buffer is centered with the expected span.

    Args:
        points: Normalized waypoints
        canonical_span: Expected size of the larger dimension
        tolerance: Allowed error relative to the span

    Returns:
        Recomputed extent

    Raises:
        DegenerateGeometryError: If the post-condition does not hold
    """
    extent = compute_extent(points)
    center = extent.center
    limit = tolerance * canonical_span

    if abs(center.x) > limit or abs(center.y) > limit:
        raise DegenerateGeometryError(
            f"Normalized extent is off-center at ({center.x}, {center.y})"
        )
    if abs(extent.span - canonical_span) > limit:
        raise DegenerateGeometryError(
            f"Normalized span {extent.span} differs from {canonical_span}"
        )
    return extent

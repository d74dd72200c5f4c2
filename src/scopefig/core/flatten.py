"""Curve flattening of path events.

Curved events are replaced by runs of ``Line`` events using recursive
midpoint subdivision, so that every emitted chord stays within the given
tolerance of the true curve. Straight events pass through unchanged.
"""

import math
from collections.abc import Iterable, Iterator

from scopefig.domain import Cubic, Line, PathEvent, Point, Quadratic
from scopefig.exceptions import ConfigurationError

# Guards against runaway recursion on pathological control points
MAX_DEPTH = 16


def _mid(p: Point, q: Point) -> Point:
    return Point((p.x + q.x) / 2, (p.y + q.y) / 2)


def flatten_quadratic(
    start: Point, control: Point, end: Point, tolerance: float, depth: int = 0
) -> list[Point]:
    """Flatten a quadratic Bezier curve using recursive subdivision.

    Args:
        start: First endpoint
        control: Control point
        end: Second endpoint
        tolerance: Maximum distance from true curve
        depth: Current recursion depth

    Returns:
        List of points approximating the curve, including both endpoints
    """
    # Curve midpoint (at t=0.5)
    curve_mid = Point(
        0.25 * start.x + 0.5 * control.x + 0.25 * end.x,
        0.25 * start.y + 0.5 * control.y + 0.25 * end.y,
    )
    chord_mid = _mid(start, end)

    if depth >= MAX_DEPTH or curve_mid.distance_to(chord_mid) <= tolerance:
        return [start, end]

    left = flatten_quadratic(start, _mid(start, control), curve_mid, tolerance, depth + 1)
    right = flatten_quadratic(curve_mid, _mid(control, end), end, tolerance, depth + 1)

    # Combine, avoiding duplicate midpoint
    return left[:-1] + right


def flatten_cubic(
    start: Point,
    control1: Point,
    control2: Point,
    end: Point,
    tolerance: float,
    depth: int = 0,
) -> list[Point]:
    """Flatten a cubic Bezier curve using recursive subdivision.

    Uses De Casteljau's algorithm for subdivision. The flatness test checks
    both the curve midpoint and the control points against the chord, so an
    S-shaped curve whose midpoint lies on its chord is still subdivided.

    Args:
        start: First endpoint
        control1: First control point
        control2: Second control point
        end: Second endpoint
        tolerance: Maximum distance from true curve
        depth: Current recursion depth

    Returns:
        List of points approximating the curve, including both endpoints
    """
    # De Casteljau levels
    q1 = _mid(start, control1)
    q2 = _mid(control1, control2)
    q3 = _mid(control2, end)
    r1 = _mid(q1, q2)
    r2 = _mid(q2, q3)
    mid = _mid(r1, r2)

    deviation = max(
        mid.distance_to(_mid(start, end)),
        _chord_distance(control1, start, end),
        _chord_distance(control2, start, end),
    )

    if depth >= MAX_DEPTH or deviation <= tolerance:
        return [start, end]

    left = flatten_cubic(start, q1, r1, mid, tolerance, depth + 1)
    right = flatten_cubic(mid, r2, q3, end, tolerance, depth + 1)

    return left[:-1] + right


def _chord_distance(point: Point, start: Point, end: Point) -> float:
    """Distance from a point to the line through start and end."""
    dx = end.x - start.x
    dy = end.y - start.y
    length = math.hypot(dx, dy)
    if length == 0:
        return point.distance_to(start)
    return abs(dx * (start.y - point.y) - dy * (start.x - point.x)) / length


def flatten_events(events: Iterable[PathEvent], tolerance: float) -> Iterator[PathEvent]:
    """Replace curved events with straight line events.

    Args:
        events: Raw path events, consumed lazily
        tolerance: Maximum deviation in the events' coordinate units

    Yields:
        Path events containing no curves

    Raises:
        ConfigurationError: If tolerance is not positive
    """
    if tolerance <= 0:
        raise ConfigurationError(f"Flattening tolerance must be positive, got {tolerance}")

    for event in events:
        if isinstance(event, Quadratic):
            polyline = flatten_quadratic(event.start, event.control, event.end, tolerance)
        elif isinstance(event, Cubic):
            polyline = flatten_cubic(
                event.start, event.control1, event.control2, event.end, tolerance
            )
        else:
            yield event
            continue

        for a, b in zip(polyline, polyline[1:]):
            yield Line(a, b)

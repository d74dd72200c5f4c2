"""Conversion of svgelements path segments to path events.

svgelements describes a path as a flat list of segments (``Move``, ``Line``,
``Close``, Bezier curves and arcs). The waypoint pipeline instead wants every
subpath framed by a ``Begin`` and an ``End`` event, so the converter tracks
the subpath's first point and the previous pen position while walking the
segments.
"""

from collections.abc import Iterable, Iterator

from svgelements import Arc, Close, CubicBezier, Move, QuadraticBezier
from svgelements import Line as SvgLine
from svgelements import Point as SvgPoint

from scopefig.domain import Begin, Cubic, End, Line, PathEvent, Point, Quadratic

DRAWING_SEGMENTS = (SvgLine, QuadraticBezier, CubicBezier, Arc)


def to_point(point: SvgPoint) -> Point:
    """Convert an svgelements point to a domain point."""
    return Point(float(point.x), float(point.y))


def segments_to_events(segments: Iterable[object]) -> Iterator[PathEvent]:
    """Walk svgelements segments and yield path events.

    Every subpath yields exactly one ``Begin`` and one ``End``. A ``Close``
    yields a closed ``End``; a new ``Move`` or the end of the data yields an
    open ``End`` for the subpath in progress. Drawing commands following a
    ``Close`` without a ``Move`` start a new subpath at the closed subpath's
    first point. Arcs are converted to cubic curves.

    Args:
        segments: svgelements path segments in untransformed coordinates

    Yields:
        Path events, curves included
    """
    first: Point | None = None
    prev: Point | None = None
    in_subpath = False

    for segment in segments:
        if isinstance(segment, Move):
            if in_subpath:
                yield End(last=prev, first=first, closed=False)
            first = prev = to_point(segment.end)
            in_subpath = True
            yield Begin(first)
            continue

        if isinstance(segment, Close):
            if in_subpath:
                yield End(last=prev, first=first, closed=True)
                prev = first
                in_subpath = False
            continue

        if not isinstance(segment, DRAWING_SEGMENTS):
            # Unknown segment kinds are passed on so the accumulator rejects them
            yield segment  # type: ignore[misc]
            continue

        if prev is None:
            prev = to_point(segment.start)
        if not in_subpath:
            first = prev
            in_subpath = True
            yield Begin(first)

        if isinstance(segment, SvgLine):
            end = to_point(segment.end)
            yield Line(prev, end)
        elif isinstance(segment, QuadraticBezier):
            end = to_point(segment.end)
            yield Quadratic(prev, to_point(segment.control), end)
        elif isinstance(segment, CubicBezier):
            end = to_point(segment.end)
            yield Cubic(prev, to_point(segment.control1), to_point(segment.control2), end)
        else:
            end = prev
            for curve in segment.as_cubic_curves():
                end = to_point(curve.end)
                yield Cubic(
                    to_point(curve.start),
                    to_point(curve.control1),
                    to_point(curve.control2),
                    end,
                )
        prev = end

    if in_subpath:
        yield End(last=prev, first=first, closed=False)

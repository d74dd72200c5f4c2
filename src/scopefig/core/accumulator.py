"""Waypoint accumulation from path events.

The accumulator is a small state machine that walks the path events of every
shape in document order and appends the waypoints of strokes and transits to
a single buffer describing one full pass over the drawing.
"""

from collections.abc import Iterable
from enum import Enum, auto

from scopefig.core.sampler import SegmentSampler
from scopefig.core.transit import TransitSynthesizer
from scopefig.domain import Begin, End, Line, PathEvent, Point, Segment, Transform
from scopefig.exceptions import ConfigurationError, UnsupportedGeometryError


class AccumulatorState(Enum):
    """Pen state of the accumulator."""

    IDLE = auto()
    DRAWING = auto()
    FINISHED = auto()


class WaypointAccumulator:
    """Builds the waypoint buffer for one traversal of a drawing.

    The pen position is the last logical point of the drawing. It is not
    necessarily emitted yet: a stroke's end point is produced as the first
    sample of whatever follows it, either the next stroke or a transit.

    Example:
        accumulator = WaypointAccumulator(sampler, transit)
        accumulator.feed(events, transform)
        points = accumulator.finish()
    """

    def __init__(
        self,
        sampler: SegmentSampler,
        transit: TransitSynthesizer,
        home: Point = Point(0.0, 0.0),
    ) -> None:
        """Initialize the accumulator.

        Args:
            sampler: Sampler for drawn strokes
            transit: Synthesizer for blanking moves
            home: Point the beam returns to when the drawing is finished
        """
        self.sampler = sampler
        self.transit = transit
        self.home = home
        self.state = AccumulatorState.IDLE
        self.pen: Point | None = None
        self.subpath_count = 0
        self.segment_count = 0
        self.transit_count = 0
        self._points: list[Point] = []

    @property
    def points(self) -> list[Point]:
        """Waypoints accumulated so far (a copy)."""
        return list(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def feed(self, events: Iterable[PathEvent], transform: Transform | None = None) -> None:
        """Consume the events of one shape.

        The iterable is consumed exactly once.

        Args:
            events: Flattened path events of the shape
            transform: Map from event coordinates to canonical space
                (identity if None)

        Raises:
            UnsupportedGeometryError: If a curved or unknown event is found
            ConfigurationError: If the accumulator is already finished
        """
        for event in events:
            if transform is not None and isinstance(event, (Begin, Line, End)):
                event = event.transformed(transform)
            self.handle(event)

    def handle(self, event: PathEvent) -> None:
        """Apply a single canonical-space event."""
        if self.state is AccumulatorState.FINISHED:
            raise ConfigurationError("Cannot add path events after the drawing is finished")

        if isinstance(event, Begin):
            self._begin(event.at)
        elif isinstance(event, Line):
            self._stroke(event.start, event.end)
        elif isinstance(event, End):
            if event.closed:
                self._stroke(event.last, event.first)
                self.pen = event.first
            else:
                self.pen = event.last
        else:
            raise UnsupportedGeometryError(event)

    def finish(self) -> list[Point]:
        """Return the beam home and close the buffer.

        A drawing that never started stays empty.

        Returns:
            The complete waypoint buffer
        """
        if self.state is AccumulatorState.DRAWING:
            self._transit_to(self.home)
        self.state = AccumulatorState.FINISHED
        return self.points

    def _begin(self, at: Point) -> None:
        if self.state is AccumulatorState.IDLE:
            self._points.append(at)
            self.state = AccumulatorState.DRAWING
            self.pen = at
        else:
            self._transit_to(at)
        self.subpath_count += 1

    def _stroke(self, start: Point, end: Point) -> None:
        self._extend(self.sampler.sample(Segment(start, end)))
        self.state = AccumulatorState.DRAWING
        self.pen = end
        self.segment_count += 1

    def _transit_to(self, target: Point) -> None:
        path = self.transit.synthesize(self.pen, target)
        # A jump too short to sample would skip the pending stroke end
        if path[0] != self.pen and (not self._points or self._points[-1] != self.pen):
            self._points.append(self.pen)
        self._extend(path)
        self.transit_count += 1
        self.pen = target

    def _extend(self, points: list[Point]) -> None:
        self._points.extend(points)

"""Path events produced by the document converter.

A subpath is described by a ``Begin``, any number of drawing events and a
terminating ``End``. Only ``Begin``, ``Line`` and ``End`` may reach the
waypoint accumulator; ``Quadratic`` and ``Cubic`` must be flattened first.
"""

from dataclasses import dataclass
from typing import TypeAlias

from scopefig.domain.geometry import Point, Transform


@dataclass(frozen=True, slots=True)
class Begin:
    """Start of a subpath at ``at``."""

    at: Point

    def transformed(self, transform: Transform) -> "Begin":
        return Begin(transform.apply(self.at))


@dataclass(frozen=True, slots=True)
class Line:
    """Straight stroke from ``start`` to ``end``."""

    start: Point
    end: Point

    def transformed(self, transform: Transform) -> "Line":
        return Line(transform.apply(self.start), transform.apply(self.end))


@dataclass(frozen=True, slots=True)
class Quadratic:
    """Quadratic Bezier stroke."""

    start: Point
    control: Point
    end: Point


@dataclass(frozen=True, slots=True)
class Cubic:
    """Cubic Bezier stroke."""

    start: Point
    control1: Point
    control2: Point
    end: Point


@dataclass(frozen=True, slots=True)
class End:
    """End of a subpath.

    Attributes:
        last: Final pen position of the subpath
        first: Point the subpath began at
        closed: Whether a closing stroke from ``last`` to ``first`` is drawn
    """

    last: Point
    first: Point
    closed: bool

    def transformed(self, transform: Transform) -> "End":
        return End(transform.apply(self.last), transform.apply(self.first), self.closed)


PathEvent: TypeAlias = Begin | Line | Quadratic | Cubic | End

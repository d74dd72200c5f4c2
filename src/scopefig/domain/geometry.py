"""Core geometric types for waypoint synthesis.

This module defines the value types shared by every pipeline stage:
- Point: A 2D point in source, canonical or device space
- Segment: A straight line between two points
- Extent: Axis-aligned bounding box of a set of points
- Transform: A 2D affine map
- ViewBox: The document canvas rectangle
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable; points are copied by value between stages.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def lerp(self, other: "Point", t: float) -> "Point":
        """Linearly interpolate towards another point.

        Args:
            other: Target point (reached at t=1)
            t: Interpolation parameter

        Returns:
            Point at ``self + t * (other - self)``
        """
        return Point(self.x + t * (other.x - self.x), self.y + t * (other.y - self.y))

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        return math.hypot(other.x - self.x, other.y - self.y)


@dataclass(frozen=True, slots=True)
class Segment:
    """A straight line segment from ``start`` to ``end``."""

    start: Point
    end: Point

    @property
    def length(self) -> float:
        """Euclidean length of the segment."""
        return self.start.distance_to(self.end)


@dataclass(frozen=True, slots=True)
class Extent:
    """Axis-aligned bounding box.

    Attributes:
        min_x: Smallest x coordinate
        min_y: Smallest y coordinate
        max_x: Largest x coordinate
        max_y: Largest y coordinate
    """

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def span(self) -> float:
        """Larger of width and height."""
        return max(self.width, self.height)

    @property
    def center(self) -> Point:
        return Point((self.min_x + self.max_x) / 2, (self.min_y + self.max_y) / 2)


@dataclass(frozen=True, slots=True)
class Transform:
    """A 2D affine transform in SVG matrix convention.

    Maps ``(x, y)`` to ``(a*x + c*y + e, b*x + d*y + f)``.
    """

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0

    @classmethod
    def identity(cls) -> "Transform":
        return cls()

    @classmethod
    def translation(cls, tx: float, ty: float) -> "Transform":
        return cls(e=tx, f=ty)

    @classmethod
    def scaling(cls, sx: float, sy: float) -> "Transform":
        return cls(a=sx, d=sy)

    def then(self, other: "Transform") -> "Transform":
        """Compose with another transform applied after this one.

        Args:
            other: Transform applied to the output of ``self``

        Returns:
            Transform equivalent to ``other.apply(self.apply(p))``
        """
        return Transform(
            a=other.a * self.a + other.c * self.b,
            b=other.b * self.a + other.d * self.b,
            c=other.a * self.c + other.c * self.d,
            d=other.b * self.c + other.d * self.d,
            e=other.a * self.e + other.c * self.f + other.e,
            f=other.b * self.e + other.d * self.f + other.f,
        )

    def apply(self, point: Point) -> Point:
        """Map a point through the transform."""
        return Point(
            self.a * point.x + self.c * point.y + self.e,
            self.b * point.x + self.d * point.y + self.f,
        )

    def scale_factor(self) -> float:
        """Average linear scale of the transform (square root of |det|)."""
        return math.sqrt(abs(self.a * self.d - self.b * self.c))


@dataclass(frozen=True, slots=True)
class ViewBox:
    """Document canvas: origin plus width and height in source units."""

    x: float
    y: float
    width: float
    height: float

    @property
    def center(self) -> Point:
        return Point(self.x + self.width / 2, self.y + self.height / 2)

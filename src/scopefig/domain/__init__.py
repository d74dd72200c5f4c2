"""Domain models for scopefig.

This module contains the value types flowing through the synthesis pipeline.
All geometric values are immutable (frozen dataclasses) and independent of
the SVG and audio libraries used at the edges.

Key classes:
- Point, Segment, Extent: Basic 2D geometry
- Transform, ViewBox: Coordinate system description
- Begin, Line, Quadratic, Cubic, End: Path events of one subpath
- Shape, Document: Parsed document containers
"""

from scopefig.domain.events import Begin, Cubic, End, Line, PathEvent, Quadratic
from scopefig.domain.geometry import Extent, Point, Segment, Transform, ViewBox
from scopefig.domain.shape import Document, Shape

__all__: list[str] = [
    # Geometry
    "Point",
    "Segment",
    "Extent",
    "Transform",
    "ViewBox",
    # Events
    "Begin",
    "Line",
    "Quadratic",
    "Cubic",
    "End",
    "PathEvent",
    # Containers
    "Shape",
    "Document",
]

"""Shape and document containers handed over by the document reader."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from scopefig.domain.events import PathEvent
from scopefig.domain.geometry import Transform, ViewBox


@dataclass
class Shape:
    """One path-like element of a document.

    Attributes:
        events: Lazy, non-restartable sequence of raw path events in the
            shape's own coordinate system
        transform: Declared transform from shape coordinates to canvas
        shape_id: Element id, if the document gave one
    """

    events: Iterable[PathEvent]
    transform: Transform = field(default_factory=Transform.identity)
    shape_id: str | None = None


@dataclass
class Document:
    """A parsed document: canvas plus shapes in drawing order."""

    view_box: ViewBox
    shapes: list[Shape] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.shapes

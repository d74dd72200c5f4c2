"""SVG document reader.

This module provides the DocumentReader class for loading SVG files with
svgelements and exposing their shapes as domain models.
"""

from collections.abc import Iterator
from pathlib import Path

from svgelements import SVG, Shape as SvgShape

from scopefig.domain import Document, Shape, Transform, ViewBox
from scopefig.exceptions import DocumentLoadError
from scopefig.io.converter import segments_to_events


class DocumentReader:
    """Loads SVG documents and extracts their shapes.

    Shapes are kept in their own coordinate systems: each shape carries the
    transform declared for it by the document (including the root viewport
    mapping) and its raw path events.

    Example:
        with DocumentReader(Path("logo.svg")) as reader:
            for shape in reader.iter_shapes():
                print(shape.shape_id)
    """

    def __init__(self, document_path: Path) -> None:
        """Initialize the document reader.

        Args:
            document_path: Path to the SVG file
        """
        self._document_path = document_path
        self._svg: SVG | None = None

    def load(self) -> None:
        """Load and parse the document.

        Raises:
            FileNotFoundError: If the document does not exist
            DocumentLoadError: If the document cannot be parsed
        """
        if not self._document_path.exists():
            raise FileNotFoundError(f"Document not found: {self._document_path}")

        try:
            self._svg = SVG.parse(str(self._document_path), reify=False)
        except Exception as e:
            raise DocumentLoadError(str(self._document_path), str(e)) from e

    def _require_svg(self) -> SVG:
        if self._svg is None:
            raise RuntimeError("Document not loaded. Call load() first.")
        return self._svg

    @property
    def view_box(self) -> ViewBox:
        """Canvas that shape transforms map into.

        Raises:
            RuntimeError: If the document has not been loaded yet
        """
        svg = self._require_svg()
        return ViewBox(0.0, 0.0, float(svg.width), float(svg.height))

    @property
    def shape_count(self) -> int:
        """Number of drawable shapes in the document."""
        return sum(1 for _ in self._iter_svg_shapes())

    def _iter_svg_shapes(self) -> Iterator[SvgShape]:
        svg = self._require_svg()
        for element in svg.elements():
            if not isinstance(element, SvgShape):
                continue
            if element.values.get("visibility") in ("hidden", "collapse"):
                continue
            yield element

    def iter_shapes(self) -> Iterator[Shape]:
        """Iterate over shapes in document order.

        Yields:
            Shape domain models with lazy event sequences

        Raises:
            RuntimeError: If the document has not been loaded yet
        """
        for element in self._iter_svg_shapes():
            matrix = element.transform
            yield Shape(
                events=segments_to_events(element.segments(transformed=False)),
                transform=Transform(
                    a=float(matrix.a),
                    b=float(matrix.b),
                    c=float(matrix.c),
                    d=float(matrix.d),
                    e=float(matrix.e),
                    f=float(matrix.f),
                ),
                shape_id=element.id,
            )

    def read(self) -> Document:
        """Collect the whole document."""
        return Document(view_box=self.view_box, shapes=list(self.iter_shapes()))

    def close(self) -> None:
        """Release the parsed document."""
        self._svg = None

    def __enter__(self) -> "DocumentReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()

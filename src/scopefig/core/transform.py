"""Composition of source-to-canonical transforms.

Canonical space is centered on the origin, has Y pointing up and maps the
larger view box dimension onto ``canonical_span`` units.
"""

from scopefig.domain import Transform, ViewBox
from scopefig.exceptions import ConfigurationError

DEFAULT_CANONICAL_SPAN = 2.0


def compose_transform(
    declared: Transform,
    view_box: ViewBox,
    canonical_span: float = DEFAULT_CANONICAL_SPAN,
) -> Transform:
    """Build the map from a shape's coordinates to canonical space.

    The shape's declared transform is applied first, then the canvas is
    centered on the origin, then a uniform scale with Y negated flips the
    document's downward Y axis so that "up" is positive.

    Args:
        declared: Transform declared by the document for the shape
        view_box: Document canvas
        canonical_span: Canonical size of the larger canvas dimension

    Returns:
        Composed transform

    Raises:
        ConfigurationError: If the view box has no extent or the span is
            not positive
    """
    if canonical_span <= 0:
        raise ConfigurationError(f"Canonical span must be positive, got {canonical_span}")

    largest = max(view_box.width, view_box.height)
    if largest <= 0:
        raise ConfigurationError(
            f"View box {view_box.width}x{view_box.height} has no extent; scale is undefined"
        )

    scale = canonical_span / largest
    center = view_box.center

    return declared.then(Transform.translation(-center.x, -center.y)).then(
        Transform.scaling(scale, -scale)
    )

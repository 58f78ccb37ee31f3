"""Fit the prototile outline into the editor viewport."""

from constants import VIEWPORT_MARGIN
from utils.transform_math import compose


def fit_viewport(bounds, width, height, margin=VIEWPORT_MARGIN):
    """Transform that centres and uniformly scales bounds into the viewport.

    Prototile space is Y-up and the editor surface is Y-down, so the Y axis
    is negated. The bounding box centre lands on the viewport centre.

    Args:
        bounds: BoundingBox of the outline
        width: Viewport width in surface units
        height: Viewport height in surface units
        margin: Total space left free per axis

    Returns:
        Affine from prototile coordinates to surface coordinates

    Raises:
        ValueError: If the bounding box has zero width or height
    """
    if bounds is None or bounds.width == 0.0 or bounds.height == 0.0:
        raise ValueError(f"Cannot fit degenerate bounding box {bounds}")

    sc = min((width - margin) / bounds.width, (height - margin) / bounds.height)
    center = bounds.center

    return compose(
        (sc, 0.0, 0.5 * width, 0.0, -sc, 0.5 * height),
        (1.0, 0.0, -center.x, 0.0, 1.0, -center.y),
    )

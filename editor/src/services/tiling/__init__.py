"""Tiling classifier registry.

Each classifier describes one prototile family: its edge shapes, their
symmetry classes, their placement around the boundary and the parameters
that move the polygon's vertices.
"""

from .base_classifier import EdgeOccurrence, TilePlacement, TilingClassifier
from .polygon_tiling import (
    PolygonTiling, SideSpec,
    ParallelogramTiling, QuadRotationTiling,
    RectangleMirrorTiling, TriangleRotationTiling,
)

# Registry of available tilings
AVAILABLE_TILINGS = {
    'parallelogram': ParallelogramTiling,
    'quad_rotation': QuadRotationTiling,
    'rectangle_mirror': RectangleMirrorTiling,
    'triangle_rotation': TriangleRotationTiling,
}


def get_tiling(tiling_type: str) -> TilingClassifier:
    """Get tiling instance by type.

    Args:
        tiling_type: Tiling type identifier

    Returns:
        Tiling instance or None if not found
    """
    tiling_class = AVAILABLE_TILINGS.get(tiling_type)
    if tiling_class:
        return tiling_class()
    return None


def get_available_tilings():
    """Get list of available tiling types.

    Returns:
        List of (name, display_name) tuples
    """
    tilings = []
    for name, cls in AVAILABLE_TILINGS.items():
        instance = cls()
        tilings.append((name, instance.get_display_name()))
    return tilings

"""UI components for the Prototile Edge Editor

Direct imports:
"""

from .tile_canvas import TileCanvas

__all__ = [
    'TileCanvas',
]

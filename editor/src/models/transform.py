"""Coordinate and affine transform data structures."""
from dataclasses import dataclass
from typing import Tuple


@dataclass
class Vec2:
    """2D vector for coordinate pairs.

    Used for any x/y coordinate pair across different spaces:
    - Local edge coordinates (edge runs from (0,0) to (1,0))
    - Prototile coordinates (Y-up)
    - Editor surface pixels (Y-down)
    """
    x: float
    y: float

    def __iter__(self):
        """Allow tuple unpacking: x, y = vec2"""
        return iter((self.x, self.y))

    def __getitem__(self, index):
        """Allow indexing like an (x, y) tuple"""
        return (self.x, self.y)[index]

    def __len__(self):
        return 2


# Row-major 2x3 affine matrix (a, b, c, d, e, f):
#   x' = a*x + b*y + c
#   y' = d*x + e*y + f
Affine = Tuple[float, float, float, float, float, float]

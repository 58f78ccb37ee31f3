"""Boundary outline of the prototile.

The outline is the flattened, closed polyline of the whole prototile in
prototile (local) coordinates. It is rebuilt from the edge curves and the
classifier's occurrence list and is used both for painting and for fitting
the editor viewport.
"""

from dataclasses import dataclass, field
from typing import List

import numpy as np

from models.edge_curves import sample_edge
from models.transform import Vec2
from utils.transform_math import apply


@dataclass
class BoundingBox:
    xmin: float
    xmax: float
    ymin: float
    ymax: float

    @property
    def width(self) -> float:
        return self.xmax - self.xmin

    @property
    def height(self) -> float:
        return self.ymax - self.ymin

    @property
    def center(self) -> Vec2:
        return Vec2(0.5 * (self.xmin + self.xmax), 0.5 * (self.ymin + self.ymax))

    @property
    def is_degenerate(self) -> bool:
        return self.width <= 0.0 or self.height <= 0.0


@dataclass
class BoundaryOutline:
    """Closed polyline of the prototile plus its bounding box."""
    points: List[Vec2] = field(default_factory=list)
    bounds: BoundingBox = None

    def as_array(self) -> np.ndarray:
        """Points as an (N, 2) float array."""
        return np.array([(p.x, p.y) for p in self.points], dtype=float).reshape(-1, 2)

    def __len__(self):
        return len(self.points)

    def __iter__(self):
        return iter(self.points)


def compute_bounds(points) -> BoundingBox:
    """Axis-aligned bounds of a point list (None for an empty list)."""
    if not points:
        return None
    arr = np.array([(p[0], p[1]) for p in points], dtype=float)
    xmin, ymin = arr.min(axis=0)
    xmax, ymax = arr.max(axis=0)
    return BoundingBox(float(xmin), float(xmax), float(ymin), float(ymax))


def build_outline(curves, occurrences) -> BoundaryOutline:
    """Tessellate the full prototile boundary.

    Each occurrence's edge is sampled in its walking direction and mapped
    through its placement transform. Consecutive occurrences share a
    vertex, so the first sample of every occurrence after the first is
    dropped.

    Args:
        curves: EdgeCurveModel holding the current edge shapes
        occurrences: EdgeOccurrence list in boundary order

    Returns:
        BoundaryOutline with points and bounds
    """
    points = []
    first_edge = True
    for occ in occurrences:
        samples = sample_edge(curves.get(occ.edge_id), occ.reversed)
        for idx, sample in enumerate(samples):
            if not first_edge and idx == 0:
                continue
            points.append(apply(occ.transform, sample))
        first_edge = False

    return BoundaryOutline(points, compute_bounds(points))

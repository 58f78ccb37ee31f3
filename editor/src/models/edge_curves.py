"""
Prototile Edge Editor - Edge Curve Model

Owns the control points of every distinct edge shape of the prototile.

Each edge shape is drawn in its own local frame running from (0,0) to (1,0).
The endpoints are implicit and never stored; only interior control points
live in EdgeCurve.control_points. The symmetry class assigned by the tiling
classifier decides what may be edited:

- PLAIN: straight, no points, not editable
- GENERIC: any number of points, free editing
- POINT_SYMMETRIC / MIRROR_SYMMETRIC: exactly one canonical point. The
  complementary occurrence is produced by the classifier's placement
  transform, so only the canonical point is stored here.

Usage:
    model = EdgeCurveModel(curve_amount=1.0)
    model.initialize_defaults(classifier.edge_shape_list())
    model.move_point(edge_id, 0, Vec2(0.4, 0.2))
    samples = list(sample_edge(model.get(edge_id), reverse=False))
"""

import logging
from copy import deepcopy
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple

from constants import (
    EDGE_SAMPLE_STEPS,
    DEFAULT_BUMP_AMPLITUDE,
    DEFAULT_GENERIC_POINTS,
    DEFAULT_SYMMETRIC_POINT,
    DEFAULT_CURVE_AMOUNT,
)
from models.transform import Vec2
from utils.geometry import evaluate_cubic


class EdgeShapeClass(Enum):
    """Symmetry category of an edge shape, assigned by the tiling classifier."""
    PLAIN = 'plain'
    GENERIC = 'generic'
    POINT_SYMMETRIC = 'point_symmetric'
    MIRROR_SYMMETRIC = 'mirror_symmetric'

    @property
    def is_symmetric(self) -> bool:
        return self in (EdgeShapeClass.POINT_SYMMETRIC, EdgeShapeClass.MIRROR_SYMMETRIC)


@dataclass
class EdgeCurve:
    """Interior control points of one edge shape (endpoints implicit)."""
    shape_class: EdgeShapeClass
    control_points: List[Vec2] = field(default_factory=list)

    def full_points(self) -> List[Vec2]:
        """Control points with the implicit (0,0) and (1,0) endpoints added."""
        return [Vec2(0.0, 0.0)] + [Vec2(p.x, p.y) for p in self.control_points] + [Vec2(1.0, 0.0)]


class EdgeSamples:
    """Lazy, restartable sequence of points tracing one edge.

    Iterating twice yields the same points; nothing is computed until
    iteration starts.
    """

    def __init__(self, curve: EdgeCurve, reverse: bool = False, steps: int = EDGE_SAMPLE_STEPS):
        self._points = curve.full_points()
        self._reverse = reverse
        self._steps = steps

    @property
    def is_cubic(self) -> bool:
        return len(self._points) == 4

    def __len__(self):
        return self._steps + 1 if self.is_cubic else len(self._points)

    def __iter__(self):
        if self.is_cubic:
            P0, P1, P2, P3 = self._points
            for idx in range(self._steps + 1):
                # Index walks backwards so reversed output is the exact reverse
                i = self._steps - idx if self._reverse else idx
                yield evaluate_cubic(P0, P1, P2, P3, i / self._steps)
        else:
            pts = reversed(self._points) if self._reverse else self._points
            for p in pts:
                yield Vec2(p.x, p.y)


def sample_edge(curve: EdgeCurve, reverse: bool = False) -> EdgeSamples:
    """Flatten an edge curve into points from start to end (or end to start).

    Two interior points are read as a cubic Bezier and sampled at
    EDGE_SAMPLE_STEPS + 1 points; any other count is returned as the
    control polyline including the endpoints.
    """
    return EdgeSamples(curve, reverse)


class EdgeCurveModel:
    """Per-edge-shape control point storage with symmetry-class rules.

    Mutations return True when applied and False when rejected. A rejected
    mutation leaves the model untouched.
    """

    def __init__(self, curve_amount: float = DEFAULT_CURVE_AMOUNT):
        self._logger = logging.getLogger('EdgeCurveModel')
        self._curve_amount = max(0.0, curve_amount)
        self._edge_list: List[Tuple[int, EdgeShapeClass]] = []
        self._curves: Dict[int, EdgeCurve] = {}
        self._base_curves: Optional[Dict[int, List[Tuple[float, float]]]] = None

    # ------------------------------------------------------------------
    # Defaults
    # ------------------------------------------------------------------

    def initialize_defaults(self, edge_list: Iterable[Tuple[int, EdgeShapeClass]]):
        """Build one default curve per (identifier, shape class) pair.

        Any previous curves and seed curves are discarded.
        """
        self._edge_list = [(edge_id, EdgeShapeClass(shape)) for edge_id, shape in edge_list]
        self._base_curves = None
        self._build_default_curves()

    def _build_default_curves(self):
        self._curves = {}
        for edge_id, shape in self._edge_list:
            self._curves[edge_id] = self._create_default_curve(edge_id, shape)
        self._logger.debug(f"Built {len(self._curves)} default curves (amount={self._curve_amount})")

    def _create_default_curve(self, edge_id, shape):
        if shape == EdgeShapeClass.PLAIN:
            return EdgeCurve(shape, [])

        if self._base_curves is not None and edge_id in self._base_curves:
            points = [Vec2(x, y * self._curve_amount) for x, y in self._base_curves[edge_id]]
            return EdgeCurve(shape, points)

        amp = DEFAULT_BUMP_AMPLITUDE * self._curve_amount
        if shape == EdgeShapeClass.GENERIC:
            return EdgeCurve(shape, [Vec2(x, ry * amp) for x, ry in DEFAULT_GENERIC_POINTS])

        x, ry = DEFAULT_SYMMETRIC_POINT
        return EdgeCurve(shape, [Vec2(x, ry * amp)])

    @property
    def curve_amount(self) -> float:
        return self._curve_amount

    def set_curve_amount(self, amount: float):
        """Set the curve amount and rebuild every default curve.

        This is a reset: manual edits are discarded. Negative amounts clamp
        to zero.
        """
        self._curve_amount = max(0.0, float(amount))
        self._build_default_curves()

    def set_base_curves(self, base_curves: Dict[int, List[Tuple[float, float]]]):
        """Use seed shapes instead of the fixed default bumps.

        Seed y coordinates are multiplied by the curve amount whenever the
        defaults are rebuilt. Seeds with the wrong cardinality for their
        class are rejected.
        """
        for edge_id, shape in self._edge_list:
            pts = base_curves.get(edge_id)
            if pts is None:
                continue
            if shape == EdgeShapeClass.PLAIN and pts:
                raise ValueError(f"Plain edge {edge_id} cannot have control points")
            if shape.is_symmetric and len(pts) != 1:
                raise ValueError(f"Symmetric edge {edge_id} needs exactly one control point, got {len(pts)}")
        self._base_curves = {k: [tuple(p) for p in v] for k, v in base_curves.items()}
        self._build_default_curves()

    def randomize_curves(self, rng):
        """Seed random edge shapes and rebuild.

        Args:
            rng: numpy.random.Generator
        """
        base = {}
        for edge_id, shape in self._edge_list:
            if shape == EdgeShapeClass.GENERIC:
                base[edge_id] = [
                    (float(rng.uniform(0.0, 0.6)), float(rng.uniform(-0.5, 0.5))),
                    (float(rng.uniform(0.4, 1.0)), float(rng.uniform(-0.5, 0.5))),
                ]
            elif shape.is_symmetric:
                base[edge_id] = [(float(rng.uniform(0.0, 0.6)), float(rng.uniform(-0.5, 0.5)))]
        self.set_base_curves(base)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get(self, edge_id) -> EdgeCurve:
        return self._curves[edge_id]

    def shape_class(self, edge_id) -> EdgeShapeClass:
        return self._curves[edge_id].shape_class

    def edge_ids(self) -> List[int]:
        return [edge_id for edge_id, _ in self._edge_list]

    def __contains__(self, edge_id):
        return edge_id in self._curves

    def __len__(self):
        return len(self._curves)

    def copy(self) -> 'EdgeCurveModel':
        """Independent copy of the current curves (for comparisons)."""
        other = EdgeCurveModel(self._curve_amount)
        other._edge_list = list(self._edge_list)
        other._curves = deepcopy(self._curves)
        other._base_curves = deepcopy(self._base_curves)
        return other

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def insert_point(self, edge_id, index: int, point) -> bool:
        """Insert an interior point before stored position `index`.

        Only GENERIC edges accept insertions; `index` may range over
        0..len(points) since the endpoints are not part of the list.
        """
        curve = self._curves.get(edge_id)
        if curve is None or curve.shape_class != EdgeShapeClass.GENERIC:
            self._logger.debug(f"Rejected insert on edge {edge_id}")
            return False
        if not 0 <= index <= len(curve.control_points):
            self._logger.debug(f"Rejected insert at {index} on edge {edge_id}")
            return False

        x, y = point
        curve.control_points.insert(index, Vec2(float(x), float(y)))
        self._logger.debug(f"Inserted point {index} on edge {edge_id}")
        return True

    def move_point(self, edge_id, index: int, point) -> bool:
        """Replace stored point `index` of an editable edge."""
        curve = self._curves.get(edge_id)
        if curve is None or curve.shape_class == EdgeShapeClass.PLAIN:
            self._logger.debug(f"Rejected move on edge {edge_id}")
            return False
        if not 0 <= index < len(curve.control_points):
            self._logger.debug(f"Rejected move of {index} on edge {edge_id}")
            return False

        x, y = point
        curve.control_points[index] = Vec2(float(x), float(y))
        return True

    def delete_point(self, edge_id, index: int) -> bool:
        """Remove stored point `index` of a GENERIC edge."""
        curve = self._curves.get(edge_id)
        if curve is None or curve.shape_class != EdgeShapeClass.GENERIC:
            self._logger.debug(f"Rejected delete on edge {edge_id}")
            return False
        if not 0 <= index < len(curve.control_points):
            self._logger.debug(f"Rejected delete of {index} on edge {edge_id}")
            return False

        del curve.control_points[index]
        self._logger.debug(f"Deleted point {index} on edge {edge_id}")
        return True

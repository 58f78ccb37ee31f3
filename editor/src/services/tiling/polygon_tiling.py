"""Polygon-based tiling classifiers.

A PolygonTiling describes a prototile as a polygon whose vertices are a
function of the shape parameters, plus one SideSpec per polygon side that
says which edge shape sits on that side and how it is placed.

Symmetric sides are split at their midpoint M into two half-edge
occurrences. The first half maps the local frame onto A->M. The second half
is the first one carried over by the side's symmetry:
- point: 180 degree rotation about M
- mirror: reflection across the perpendicular bisector of the side
so the stored canonical point drives both halves. For mirror sides the
local line x = 1 is the mirror axis.
"""

from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from models.edge_curves import EdgeShapeClass
from utils.geometry import normalize, sub
from utils.transform_math import IDENTITY, compose, segment_frame, translation
from .base_classifier import EdgeOccurrence, TilePlacement, TilingClassifier


SIDE_KINDS = {
    'plain': EdgeShapeClass.PLAIN,
    'generic': EdgeShapeClass.GENERIC,
    'point': EdgeShapeClass.POINT_SYMMETRIC,
    'mirror': EdgeShapeClass.MIRROR_SYMMETRIC,
}


@dataclass
class SideSpec:
    """Placement of one edge shape on one polygon side.

    edge_id: Edge shape identifier (may repeat on several sides)
    kind: 'plain', 'generic', 'point' or 'mirror'
    reversed: Edge frame starts at the side's end vertex
    partner: Side carries a copy of an edge already placed elsewhere
    """
    edge_id: int
    kind: str
    reversed: bool = False
    partner: bool = False


def point_reflection(center):
    """180 degree rotation about center."""
    cx, cy = center
    return (-1.0, 0.0, 2.0 * cx, 0.0, -1.0, 2.0 * cy)


def line_reflection(center, direction):
    """Reflection across the line through center perpendicular to direction."""
    nx, ny = normalize(direction)
    a = 1.0 - 2.0 * nx * nx
    b = -2.0 * nx * ny
    e = 1.0 - 2.0 * ny * ny
    cx, cy = center
    return (a, b, cx - (a * cx + b * cy), b, e, cy - (b * cx + e * cy))


class PolygonTiling(TilingClassifier):
    """Tiling classifier built from a parametrised polygon and side specs.

    Subclasses define NAME, DISPLAY_NAME, DEFAULT_PARAMETERS, SIDES,
    vertices() and lattice().
    """

    NAME = ''
    DISPLAY_NAME = ''
    DEFAULT_PARAMETERS: List[float] = []
    SIDES: List[SideSpec] = []

    # Extra lattice cells enumerated around a fill region
    FILL_MARGIN = 2

    def __init__(self):
        super().__init__()
        self._params = list(self.DEFAULT_PARAMETERS)

    def get_name(self) -> str:
        return self.NAME

    def get_display_name(self) -> str:
        return self.DISPLAY_NAME

    def vertices(self, params) -> List[Tuple[float, float]]:
        """Polygon vertices (counter-clockwise) for the given parameters."""
        raise NotImplementedError

    def edge_shape_list(self):
        shapes = []
        seen = set()
        for side in self.SIDES:
            if side.edge_id in seen:
                continue
            seen.add(side.edge_id)
            shapes.append((side.edge_id, SIDE_KINDS[side.kind]))
        shapes.sort(key=lambda item: item[0])
        return shapes

    def boundary_occurrences(self):
        verts = self.vertices(self._params)
        occurrences = []
        for idx, side in enumerate(self.SIDES):
            A = verts[idx]
            B = verts[(idx + 1) % len(verts)]
            occurrences.extend(self._place_side(side, A, B))
        return occurrences

    def _place_side(self, side, A, B):
        shape = SIDE_KINDS[side.kind]

        if shape in (EdgeShapeClass.PLAIN, EdgeShapeClass.GENERIC):
            if side.reversed:
                return [EdgeOccurrence(side.edge_id, shape, side.partner, True, segment_frame(B, A))]
            return [EdgeOccurrence(side.edge_id, shape, side.partner, False, segment_frame(A, B))]

        M = ((A[0] + B[0]) / 2.0, (A[1] + B[1]) / 2.0)
        if shape == EdgeShapeClass.POINT_SYMMETRIC:
            symmetry = point_reflection(M)
        else:
            symmetry = line_reflection(M, sub(B, A))

        # The canonical half starts at the side's start vertex, or at its
        # end vertex when the side is reversed.
        base = segment_frame(B if side.reversed else A, M)
        other = compose(symmetry, base)

        canonical = EdgeOccurrence(side.edge_id, shape, side.partner, side.reversed, base)
        complement = EdgeOccurrence(side.edge_id, shape, True, not side.reversed, other)
        if side.reversed:
            return [complement, canonical]
        return [canonical, complement]

    def parameter_count(self) -> int:
        return len(self._params)

    def get_parameters(self):
        return list(self._params)

    def set_parameters(self, values):
        values = [float(v) for v in values]
        if len(values) != len(self._params):
            raise ValueError(
                f"{self.NAME} expects {len(self._params)} parameters, got {len(values)}")
        self._params = values
        self._notify_changed()

    def lattice(self, params):
        """Translation lattice of the tiling.

        Returns:
            (u, v, aspects): the two lattice vectors and the transforms of
            the prototile copies inside one lattice cell, identity first
        """
        raise NotImplementedError

    def fill_region(self, bounds):
        """Prototile copies covering bounds, with FILL_MARGIN cells to spare.

        Every lattice cell whose origin lies within the region (widened by
        the margin in lattice coordinates) contributes all of its aspects.
        A degenerate lattice yields only the prototile itself.
        """
        u, v, aspects = self.lattice(self._params)
        basis = np.array([[u[0], v[0]], [u[1], v[1]]], dtype=float)
        if abs(np.linalg.det(basis)) < 1e-12:
            return [TilePlacement(IDENTITY, 0, 0, 0)]

        corners = np.array([
            [bounds.xmin, bounds.xmax, bounds.xmin, bounds.xmax],
            [bounds.ymin, bounds.ymin, bounds.ymax, bounds.ymax],
        ], dtype=float)
        coords = np.linalg.solve(basis, corners)
        lo = np.floor(coords.min(axis=1)).astype(int) - self.FILL_MARGIN
        hi = np.ceil(coords.max(axis=1)).astype(int) + self.FILL_MARGIN

        placements = []
        for t1 in range(int(lo[0]), int(hi[0]) + 1):
            for t2 in range(int(lo[1]), int(hi[1]) + 1):
                shift = translation(t1 * u[0] + t2 * v[0], t1 * u[1] + t2 * v[1])
                for aspect, T in enumerate(aspects):
                    placements.append(TilePlacement(compose(shift, T), t1, t2, aspect))
        return placements

    def get_colour(self, t1, t2, aspect):
        # Translation-only tilings cycle three colours along the lattice
        return (t1 - t2) % 3


class ParallelogramTiling(PolygonTiling):
    """Translations only: opposite sides carry the same generic edge."""

    NAME = 'parallelogram'
    DISPLAY_NAME = 'Parallelogram'
    DEFAULT_PARAMETERS = [0.0, 1.0]  # skew, height
    SIDES = [
        SideSpec(0, 'generic'),
        SideSpec(1, 'generic'),
        SideSpec(0, 'generic', reversed=True, partner=True),
        SideSpec(1, 'generic', reversed=True, partner=True),
    ]

    def vertices(self, params):
        skew, height = params
        return [(0.0, 0.0), (1.0, 0.0), (1.0 + skew, height), (skew, height)]

    def lattice(self, params):
        skew, height = params
        return (1.0, 0.0), (skew, height), [IDENTITY]


class QuadRotationTiling(PolygonTiling):
    """Any quadrilateral, rotated 180 degrees about each side midpoint."""

    NAME = 'quad_rotation'
    DISPLAY_NAME = 'Quadrilateral (2-fold rotations)'
    DEFAULT_PARAMETERS = [1.0, 1.0]  # free corner x, y
    SIDES = [
        SideSpec(0, 'point'),
        SideSpec(1, 'point'),
        SideSpec(2, 'point'),
        SideSpec(3, 'point'),
    ]

    def vertices(self, params):
        cx, cy = params
        return [(0.0, 0.0), (1.0, 0.0), (cx, cy), (0.0, 1.0)]

    def lattice(self, params):
        # Rotations about two adjacent side midpoints compose to a diagonal
        p0, p1, p2, p3 = self.vertices(params)
        u = (p2[0] - p0[0], p2[1] - p0[1])
        v = (p3[0] - p1[0], p3[1] - p1[1])
        rotated = point_reflection(((p0[0] + p1[0]) / 2.0, (p0[1] + p1[1]) / 2.0))
        return u, v, [IDENTITY, rotated]

    def get_colour(self, t1, t2, aspect):
        return aspect


class RectangleMirrorTiling(PolygonTiling):
    """Rectangle with mirror-symmetric edges, opposite sides translated."""

    NAME = 'rectangle_mirror'
    DISPLAY_NAME = 'Rectangle (mirror edges)'
    DEFAULT_PARAMETERS = [1.0]  # height
    SIDES = [
        SideSpec(0, 'mirror'),
        SideSpec(1, 'mirror'),
        SideSpec(0, 'mirror', reversed=True, partner=True),
        SideSpec(1, 'mirror', reversed=True, partner=True),
    ]

    def vertices(self, params):
        height, = params
        return [(0.0, 0.0), (1.0, 0.0), (1.0, height), (0.0, height)]

    def lattice(self, params):
        height, = params
        return (1.0, 0.0), (0.0, height), [IDENTITY]


class TriangleRotationTiling(PolygonTiling):
    """Triangle with one straight side and two point-symmetric sides."""

    NAME = 'triangle_rotation'
    DISPLAY_NAME = 'Triangle (2-fold rotations)'
    DEFAULT_PARAMETERS = [0.5, 0.8]  # apex x, y
    SIDES = [
        SideSpec(0, 'plain'),
        SideSpec(1, 'point'),
        SideSpec(2, 'point'),
    ]

    def vertices(self, params):
        ax, ay = params
        return [(0.0, 0.0), (1.0, 0.0), (ax, ay)]

    def lattice(self, params):
        # Prototile and its turn about the midpoint of side 1 form a parallelogram
        ax, ay = params
        rotated = point_reflection(((1.0 + ax) / 2.0, ay / 2.0))
        return (1.0, 0.0), (ax, ay), [IDENTITY, rotated]

    def get_colour(self, t1, t2, aspect):
        return aspect

"""
Prototile Edge Editor - Editor Instance

TileEditor owns everything needed to edit one prototile:
- The tiling classifier describing the prototile's symmetry
- The edge curve model (control points per edge shape)
- The cached boundary outline, rebuilt after every change
- The viewport transform from prototile space to the editor surface
- The current edit session, if a pointer is pressed

It also enumerates the surrounding prototile copies for the tiling preview
and can jump to a random tiling type with jittered parameters.

Pointer handling is a two-state machine. begin_edit() picks a vertex or a
segment under the pointer and enters the dragging state, update_edit()
moves the picked point and end_edit() returns to idle. A sustained press on
a generic vertex deletes it through a single-shot QTimer owned by the
session.

Usage:
    editor = TileEditor(EditorConfig())
    editor.set_shape_family('parallelogram')
    if editor.begin_edit((x, y)):
        editor.update_edit((x2, y2))
        editor.end_edit()
    outline = editor.get_tile_outline()
"""

import logging

import numpy as np
from PyQt5.QtCore import QObject, QTimer, pyqtSignal

from constants import MIRROR_AXIS_X
from models.edge_curves import EdgeCurveModel, EdgeShapeClass
from models.edit_session import EditSession
from models.editor_config import EditorConfig
from models.outline import BoundaryOutline, build_outline, compute_bounds
from models.transform import Vec2
from services.tiling import AVAILABLE_TILINGS, TilingClassifier, get_tiling
from services.viewport_fit import fit_viewport
from utils.geometry import distance, distance_to_segment
from utils.transform_math import IDENTITY, apply, compose, invert


class TileEditor(QObject):
    """Interactive editor for the edge curves of one prototile."""

    # Signals
    outlineChanged = pyqtSignal()            # Outline rebuilt
    transformChanged = pyqtSignal()          # Editor transform replaced
    editStarted = pyqtSignal(int, int)       # edge_id, point index
    editFinished = pyqtSignal()
    pointDeleted = pyqtSignal(int, int)      # edge_id, point index

    def __init__(self, config: EditorConfig = None, parent=None):
        super().__init__(parent)
        self._logger = logging.getLogger('TileEditor')
        self.config = config if config else EditorConfig()

        self.tiling = None
        self.params = []
        self.curves = EdgeCurveModel(self.config.curve_amount)
        self._outline = BoundaryOutline()

        self.edit_w = self.config.viewport_width
        self.edit_h = self.config.viewport_height
        self.editor_T = IDENTITY

        self.session = None

    # ========================================
    # Shape family and curves
    # ========================================

    def set_shape_family(self, tiling):
        """Switch to a new prototile and reset all edges to their defaults.

        Args:
            tiling: TilingClassifier instance or registered tiling name
        """
        if isinstance(tiling, str):
            name = tiling
            tiling = get_tiling(name)
            if tiling is None:
                raise ValueError(f"Unknown tiling type: {name}")
        if not isinstance(tiling, TilingClassifier):
            raise TypeError(f"Expected a TilingClassifier, got {type(tiling).__name__}")

        self.cancel_edit()
        if self.tiling is not None:
            self.tiling.set_change_callback(None)

        self.tiling = tiling
        self.params = tiling.get_parameters()
        tiling.set_change_callback(self._on_parameters_changed)

        self.curves.initialize_defaults(tiling.edge_shape_list())
        self._logger.debug(f"Shape family set to {tiling.get_name()}")
        self._rebuild_outline()
        self.calc_editor_transform()

    def get_prototile(self):
        return self.tiling

    def set_curve_amount(self, amount):
        """Reset every edge to its default curve scaled by amount."""
        self.cancel_edit()
        self.curves.set_curve_amount(amount)
        if self.tiling is not None:
            self._rebuild_outline()
            self.calc_editor_transform()

    def get_curve_amount(self):
        return self.curves.curve_amount

    def randomize_curves(self, rng=None):
        """Seed random edge shapes (scaled by the curve amount).

        Args:
            rng: numpy.random.Generator, a fresh one if omitted
        """
        if self.tiling is None:
            return
        self.cancel_edit()
        self.curves.randomize_curves(rng if rng is not None else np.random.default_rng())
        self._rebuild_outline()
        self.calc_editor_transform()

    def get_edge_curve(self, edge_id):
        return self.curves.get(edge_id)

    def randomize_tiling(self, rng=None, jitter=0.05):
        """Switch to a random tiling type with jittered parameters and edges.

        Each default parameter moves by up to jitter either way.

        Args:
            rng: numpy.random.Generator, a fresh one if omitted
            jitter: Largest parameter offset

        Returns:
            str: Name of the chosen tiling type
        """
        rng = rng if rng is not None else np.random.default_rng()
        names = sorted(AVAILABLE_TILINGS)
        name = names[int(rng.integers(len(names)))]

        tiling = get_tiling(name)
        params = tiling.get_parameters()
        tiling.set_parameters([p + float(rng.uniform(-jitter, jitter)) for p in params])

        self.set_shape_family(tiling)
        self.randomize_curves(rng)
        self._logger.debug(f"Random tiling {name} with parameters {self.params}")
        return name

    # ========================================
    # Outline cache
    # ========================================

    def _rebuild_outline(self):
        if self.tiling is None:
            self._outline = BoundaryOutline()
        else:
            self._outline = build_outline(self.curves, self.tiling.boundary_occurrences())
        self.outlineChanged.emit()

    def get_tile_outline(self) -> BoundaryOutline:
        return self._outline

    def preview_placements(self):
        """Prototile copies covering the visible editor surface.

        Returns:
            List of TilePlacement, empty without a shape family
        """
        if self.tiling is None:
            return []
        inv = invert(self.editor_T)
        corners = [apply(inv, (x, y)) for x in (0.0, self.edit_w) for y in (0.0, self.edit_h)]
        return self.tiling.fill_region(compute_bounds(corners))

    # ========================================
    # Viewport
    # ========================================

    def calc_editor_transform(self):
        """Fit the current outline into the editor viewport.

        A degenerate outline keeps the previous transform. Without a shape
        family there is nothing to fit.
        """
        if self.tiling is None:
            return
        bounds = self._outline.bounds
        if bounds is None or bounds.is_degenerate:
            self._logger.warning(f"Outline bounds {bounds} are degenerate, keeping editor transform")
            return
        self.editor_T = fit_viewport(bounds, self.edit_w, self.edit_h, self.config.viewport_margin)
        self.transformChanged.emit()

    def set_viewport_size(self, width, height):
        self.edit_w = width
        self.edit_h = height
        self.calc_editor_transform()

    def get_editor_transform(self):
        return self.editor_T

    def set_editor_transform(self, T):
        """Replace the editor transform (e.g. for pan/zoom)."""
        self.editor_T = tuple(float(v) for v in T)
        self.transformChanged.emit()

    # ========================================
    # Shape parameters
    # ========================================

    def num_params(self):
        return self.tiling.parameter_count() if self.tiling is not None else 0

    def get_param(self, idx):
        return self.params[idx]

    def set_param(self, idx, v):
        self.params[idx] = float(v)
        self.tiling.set_parameters(self.params)

    def set_params(self, vs):
        self.tiling.set_parameters(list(vs))

    def _on_parameters_changed(self):
        # Recorded drag frames are stale once placements move
        self.cancel_edit()
        self.params = self.tiling.get_parameters()
        self._rebuild_outline()
        self.calc_editor_transform()

    # ========================================
    # Edit session
    # ========================================

    @property
    def is_editing(self) -> bool:
        return self.session is not None

    def control_handles(self):
        """Surface positions of all editable control points.

        Returns:
            List of (edge_id, point_index, Vec2) for every non-plain occurrence
        """
        handles = []
        if self.tiling is None:
            return handles
        for occ in self.tiling.boundary_occurrences():
            if occ.shape_class == EdgeShapeClass.PLAIN:
                continue
            T = compose(self.editor_T, occ.transform)
            for idx, cp in enumerate(self.curves.get(occ.edge_id).control_points):
                handles.append((occ.edge_id, idx, apply(T, cp)))
        return handles

    def begin_edit(self, pt, explicit_delete=False):
        """Start editing at a surface point.

        Vertices within half a physical unit are picked first, across all
        edge occurrences, walking each occurrence's stored points and then
        its implicit end vertex:

        - End vertex: immovable, the pick is refused and that occurrence is
          left out of the segment pass.
        - Generic point: dragged, and deleted by a sustained press or by
          explicit_delete.
        - Point-symmetric point: dragged, never deleted.
        - Mirror-symmetric point: dragged with x pinned to the mirror axis on
          the first occurrence, refused on the second.

        Failing a vertex, a press near a segment of a generic edge inserts a
        new point there and drags it.

        Args:
            pt: Surface position (Vec2 or (x, y))
            explicit_delete: Delete the picked vertex instead of dragging it

        Returns:
            bool: True if a drag session started
        """
        if self.tiling is None:
            return False

        self.cancel_edit()
        pt = Vec2(float(pt[0]), float(pt[1]))
        occurrences = self.tiling.boundary_occurrences()
        refused = set()

        # Vertex hits
        for occ_idx, occ in enumerate(occurrences):
            if occ.shape_class == EdgeShapeClass.PLAIN:
                continue

            T = compose(self.editor_T, occ.transform)
            walk = self.curves.get(occ.edge_id).full_points()
            end = len(walk) - 1

            for pos in range(1, len(walk)):
                if distance(apply(T, walk[pos]), pt) >= self.config.pick_radius:
                    continue

                idx = pos - 1
                if pos == end or (occ.shape_class == EdgeShapeClass.MIRROR_SYMMETRIC and occ.second):
                    refused.add(occ_idx)
                    break

                if explicit_delete:
                    if self.curves.delete_point(occ.edge_id, idx):
                        self._rebuild_outline()
                        self.pointDeleted.emit(occ.edge_id, idx)
                    return False

                constrain = occ.shape_class == EdgeShapeClass.MIRROR_SYMMETRIC
                self._start_session(occ, idx, invert(T), pt, constrain,
                                    arm_delete=not constrain)
                return True

        # Segment hits insert a new point
        for occ_idx, occ in enumerate(occurrences):
            if occ.shape_class != EdgeShapeClass.GENERIC or occ_idx in refused:
                continue

            T = compose(self.editor_T, occ.transform)
            walk = [apply(T, p) for p in self.curves.get(occ.edge_id).full_points()]

            for idx in range(1, len(walk)):
                if distance_to_segment(pt, walk[idx - 1], walk[idx]) >= self.config.segment_tolerance:
                    continue

                inv = invert(T)
                if not self.curves.insert_point(occ.edge_id, idx - 1, apply(inv, pt)):
                    return False
                self._rebuild_outline()
                # A point created by this press is not deletable by it
                self._start_session(occ, idx - 1, inv, pt, False, arm_delete=False)
                return True

        return False

    def _start_session(self, occ, idx, inverse, pt, constrain, arm_delete):
        self.session = EditSession(occ.edge_id, idx, inverse, pt, constrain)

        if arm_delete and occ.shape_class == EdgeShapeClass.GENERIC:
            timer = QTimer(self)
            timer.setSingleShot(True)
            timer.setInterval(int(self.config.delete_hold_ms))
            timer.timeout.connect(self._on_delete_timeout)
            self.session.delete_timer = timer
            timer.start()

        self._logger.debug(f"Editing edge {occ.edge_id} point {idx} (constrained={constrain})")
        self.editStarted.emit(occ.edge_id, idx)

    def update_edit(self, pt):
        """Drag the pressed point to a surface position. No-op when idle."""
        session = self.session
        if session is None:
            return

        pt = Vec2(float(pt[0]), float(pt[1]))
        npt = apply(session.inverse_transform, pt)
        if session.mirror_constrain:
            npt.x = MIRROR_AXIS_X

        if distance(pt, session.press_origin) > self.config.drag_cancel_distance:
            # Far enough to be a drag
            session.disarm_delete()

        if self.curves.move_point(session.edge_id, session.point_index, npt):
            self._rebuild_outline()

    def end_edit(self):
        """Finish the current session. No-op when idle."""
        session = self.session
        if session is None:
            return
        session.disarm_delete()
        session.mirror_constrain = False
        self.session = None
        self.editFinished.emit()

    def cancel_edit(self):
        self.end_edit()

    def _on_delete_timeout(self):
        session = self.session
        if session is None:
            return

        timer = session.delete_timer
        session.delete_timer = None
        if timer is not None:
            timer.deleteLater()

        # Session ends with the deleted point
        self.session = None
        if self.curves.delete_point(session.edge_id, session.point_index):
            self._logger.debug(f"Long press deleted edge {session.edge_id} point {session.point_index}")
            self._rebuild_outline()
            self.pointDeleted.emit(session.edge_id, session.point_index)
        self.editFinished.emit()

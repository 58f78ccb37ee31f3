"""Tile Canvas - editing surface for the prototile outline

Paints the prototile outline and its control points and forwards mouse
input to the TileEditor:
- Left press: pick a vertex / insert on a segment (Shift+press deletes)
- Drag: move the picked point
- Release: finish the edit
- Ctrl+wheel: zoom around the cursor

Surrounding copies of the prototile are painted underneath it so the
edges can be judged in context.
"""

from PyQt5.QtCore import QPointF, Qt
from PyQt5.QtGui import QBrush, QColor, QPainter, QPen, QPolygonF
from PyQt5.QtWidgets import QWidget

from constants import (
    CANVAS_BACKGROUND_COLOR, TILE_FILL_COLOR, TILE_OUTLINE_COLOR,
    CONTROL_POINT_COLOR, CONTROL_POINT_RADIUS,
    TILE_COLORS, PREVIEW_OUTLINE_COLOR,
)
from services.tile_editor import TileEditor
from utils.transform_math import apply, compose, scaling, translation


class TileCanvas(QWidget):
    """Widget hosting one TileEditor"""

    ZOOM_STEP = 1.25

    def __init__(self, parent=None, config=None):
        super().__init__(parent)
        self.editor = TileEditor(config, self)
        self.editor.outlineChanged.connect(self.update)
        self.editor.transformChanged.connect(self.update)
        self.show_tiling = True
        self.setMinimumSize(200, 200)

    def resizeEvent(self, event):
        """Refit the outline when the surface changes size"""
        self.editor.set_viewport_size(self.width(), self.height())
        super().resizeEvent(event)

    # ========================================
    # Rendering
    # ========================================

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)
        painter.fillRect(self.rect(), QColor(CANVAS_BACKGROUND_COLOR))

        outline = self.editor.get_tile_outline()
        if len(outline) > 0:
            T = self.editor.get_editor_transform()
            if self.show_tiling:
                self._paint_tiling(painter, outline, T)

            polygon = QPolygonF([QPointF(*apply(T, p)) for p in outline])
            painter.setPen(QPen(QColor(TILE_OUTLINE_COLOR), 1.5))
            painter.setBrush(QBrush(QColor(TILE_FILL_COLOR)))
            painter.drawPolygon(polygon)

            painter.setPen(QPen(QColor(TILE_OUTLINE_COLOR), 1))
            painter.setBrush(QBrush(QColor(CONTROL_POINT_COLOR)))
            for _, _, pos in self.editor.control_handles():
                painter.drawEllipse(QPointF(pos.x, pos.y), CONTROL_POINT_RADIUS, CONTROL_POINT_RADIUS)

        painter.end()

    def _paint_tiling(self, painter, outline, T):
        tiling = self.editor.get_prototile()
        painter.setPen(QPen(QColor(PREVIEW_OUTLINE_COLOR), 1))
        for placement in self.editor.preview_placements():
            colour = tiling.get_colour(placement.t1, placement.t2, placement.aspect)
            painter.setBrush(QBrush(QColor(TILE_COLORS[colour % len(TILE_COLORS)])))
            S = compose(T, placement.transform)
            painter.drawPolygon(QPolygonF([QPointF(*apply(S, p)) for p in outline]))

    def set_show_tiling(self, show):
        self.show_tiling = bool(show)
        self.update()

    # ========================================
    # Mouse Event Handlers
    # ========================================

    def mousePressEvent(self, event):
        if event.button() == Qt.LeftButton:
            explicit_delete = bool(event.modifiers() & Qt.ShiftModifier)
            if self.editor.begin_edit((event.x(), event.y()), explicit_delete):
                self.setCursor(Qt.ClosedHandCursor)
            return
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event):
        if self.editor.is_editing:
            self.editor.update_edit((event.x(), event.y()))
            return
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.LeftButton:
            self.editor.end_edit()
            self.setCursor(Qt.ArrowCursor)
            return
        super().mouseReleaseEvent(event)

    def wheelEvent(self, event):
        """Ctrl+wheel zooms the editor transform around the cursor"""
        if not event.modifiers() & Qt.ControlModifier:
            return
        delta = event.angleDelta().y()
        if delta == 0:
            return
        factor = self.ZOOM_STEP if delta > 0 else 1.0 / self.ZOOM_STEP
        self.zoom_at(event.pos().x(), event.pos().y(), factor)

    def zoom_at(self, x, y, factor):
        """Scale the view by factor keeping surface point (x, y) fixed"""
        zoom = compose(translation(x, y), compose(scaling(factor, factor), translation(-x, -y)))
        self.editor.set_editor_transform(compose(zoom, self.editor.get_editor_transform()))

    def reset_view(self):
        self.editor.calc_editor_transform()

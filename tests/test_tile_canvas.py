"""
pytest-qt widget tests for the editing surface and main window.

These tests use qtbot to:
- Drive TileCanvas with real mouse events
- Check zoom keeps the cursor point fixed
- Check the main window's tiling picker and parameter sliders
- Check the tiling preview painted around the prototile
"""
import numpy as np
import pytest
from PyQt5.QtCore import QEvent, QPoint, QPointF, Qt
from PyQt5.QtGui import QColor, QMouseEvent
from PyQt5.QtTest import QTest

from conftest import occurrence_surface_transform
from constants import CANVAS_BACKGROUND_COLOR
from models.transform import Vec2
from utils.transform_math import apply, invert


@pytest.fixture
def canvas(qtbot):
    from components.tile_canvas import TileCanvas
    from models.editor_config import EditorConfig

    widget = TileCanvas(config=EditorConfig(curve_amount=1.0))
    qtbot.addWidget(widget)
    widget.editor.set_shape_family('parallelogram')
    widget.resize(600, 600)
    widget.show()
    qtbot.waitExposed(widget)
    return widget


def first_handle(canvas):
    _, _, pos = canvas.editor.control_handles()[0]
    return QPoint(int(round(pos.x)), int(round(pos.y)))


def send_move(canvas, point):
    event = QMouseEvent(QEvent.MouseMove, QPointF(point), Qt.NoButton, Qt.LeftButton, Qt.NoModifier)
    canvas.mouseMoveEvent(event)


class TestTileCanvasMouse:
    def test_resize_sets_viewport(self, canvas):
        assert (canvas.editor.edit_w, canvas.editor.edit_h) == (canvas.width(), canvas.height())

    def test_press_drag_release(self, canvas):
        editor = canvas.editor
        start = first_handle(canvas)

        QTest.mousePress(canvas, Qt.LeftButton, Qt.NoModifier, start)
        assert editor.is_editing

        target = start + QPoint(20, -30)
        send_move(canvas, target)
        QTest.mouseRelease(canvas, Qt.LeftButton, Qt.NoModifier, target)

        assert not editor.is_editing
        occ = editor.tiling.boundary_occurrences()[0]
        T = occurrence_surface_transform(editor, occ)
        expected = apply(invert(T), (target.x(), target.y()))
        moved = editor.get_edge_curve(0).control_points[0]
        assert moved.x == pytest.approx(expected.x)
        assert moved.y == pytest.approx(expected.y)

    def test_shift_press_deletes(self, canvas, qtbot):
        editor = canvas.editor
        with qtbot.waitSignal(editor.pointDeleted):
            QTest.mousePress(canvas, Qt.LeftButton, Qt.ShiftModifier, first_handle(canvas))
        assert not editor.is_editing
        assert len(editor.get_edge_curve(0).control_points) == 1

    def test_move_without_press_is_ignored(self, canvas, qtbot):
        with qtbot.assertNotEmitted(canvas.editor.outlineChanged):
            send_move(canvas, QPoint(300, 300))

    def test_right_button_ignored(self, canvas):
        QTest.mousePress(canvas, Qt.RightButton, Qt.NoModifier, first_handle(canvas))
        assert not canvas.editor.is_editing

    def test_paint(self, canvas):
        pixmap = canvas.grab()
        assert not pixmap.isNull()
        assert pixmap.width() == canvas.width()

    def test_tiling_preview_fills_background(self, canvas):
        # Corner lies outside the fitted prototile
        assert canvas.show_tiling
        assert canvas.grab().toImage().pixelColor(2, 2) != QColor(CANVAS_BACKGROUND_COLOR)

        canvas.set_show_tiling(False)
        assert canvas.grab().toImage().pixelColor(2, 2) == QColor(CANVAS_BACKGROUND_COLOR)


class TestTileCanvasZoom:
    def test_zoom_keeps_cursor_point(self, canvas):
        editor = canvas.editor
        before = editor.get_editor_transform()
        proto = apply(invert(before), (200.0, 150.0))

        canvas.zoom_at(200.0, 150.0, 2.0)

        after = editor.get_editor_transform()
        fixed = apply(after, proto)
        assert fixed.x == pytest.approx(200.0)
        assert fixed.y == pytest.approx(150.0)
        assert after[0] == pytest.approx(2.0 * before[0])
        assert after[4] == pytest.approx(2.0 * before[4])

    def test_reset_view(self, canvas):
        before = canvas.editor.get_editor_transform()
        canvas.zoom_at(10.0, 10.0, 0.5)
        canvas.reset_view()
        assert canvas.editor.get_editor_transform() == pytest.approx(before)

    def test_handles_follow_zoom(self, canvas):
        canvas.zoom_at(300.0, 300.0, 1.25)
        pos = Vec2(*canvas.editor.control_handles()[0][2])
        assert canvas.editor.begin_edit(pos)
        canvas.editor.end_edit()


class TestNumberSliderWidget:
    @pytest.fixture
    def slider(self, qtbot):
        from utils.ui_utils import NumberSliderWidget
        widget = NumberSliderWidget("Amount", 0.5, min_val=0.0, max_val=2.0)
        qtbot.addWidget(widget)
        return widget

    def test_initial_value(self, slider):
        assert slider.value() == 0.5
        assert slider.value_input.text() == "0.50"

    def test_slider_emits(self, slider, qtbot):
        with qtbot.waitSignal(slider.valueChanged) as blocker:
            slider.slider.setValue(150)
        assert blocker.args == [1.5]
        assert slider.value_input.text() == "1.50"

    def test_set_value_is_silent(self, slider, qtbot):
        with qtbot.assertNotEmitted(slider.valueChanged):
            slider.setValue(1.25)
        assert slider.value() == 1.25

    def test_text_input_clamped(self, slider, qtbot):
        slider.value_input.setText("5")
        with qtbot.waitSignal(slider.valueChanged) as blocker:
            slider.value_input.editingFinished.emit()
        assert blocker.args == [2.0]
        assert slider.value() == 2.0

    def test_bad_text_restored(self, slider, qtbot):
        slider.value_input.setText("abc")
        with qtbot.assertNotEmitted(slider.valueChanged):
            slider.value_input.editingFinished.emit()
        assert slider.value_input.text() == "0.50"


class TestMainWindow:
    @pytest.fixture
    def window(self, qtbot):
        from main import PrototileEditorWindow
        win = PrototileEditorWindow(tiling_type='quad_rotation')
        qtbot.addWidget(win)
        return win

    def test_initial_tiling(self, window):
        assert window.editor.get_prototile().get_name() == 'quad_rotation'
        assert len(window.param_widgets) == 2

    def test_switch_tiling_rebuilds_params(self, window):
        index = window.tiling_combo.findData('rectangle_mirror')
        window.tiling_combo.setCurrentIndex(index)
        assert window.editor.get_prototile().get_name() == 'rectangle_mirror'
        assert len(window.param_widgets) == 1

    def test_param_slider_drives_editor(self, window):
        window.param_widgets[0].slider.setValue(150)
        assert window.editor.get_param(0) == 1.5
        assert window.editor.get_prototile().get_parameters()[0] == 1.5

    def test_curve_slider_drives_editor(self, window):
        window.curve_slider.slider.setValue(50)
        assert window.editor.get_curve_amount() == 0.5

    def test_random_tiling_syncs_picker(self, window):
        name = window.random_tiling(np.random.default_rng(3))
        assert window.tiling_combo.currentData() == name
        assert window.editor.get_prototile().get_name() == name
        assert len(window.param_widgets) == window.editor.num_params()
        # Jittered parameters survive the picker update
        assert window.editor.params == window.editor.get_prototile().get_parameters()
        defaults = type(window.editor.get_prototile()).DEFAULT_PARAMETERS
        assert all(abs(v - d) <= 0.05 for v, d in zip(window.editor.params, defaults))

    def test_show_tiling_checkbox(self, window):
        assert window.show_tiling_check.isChecked()
        window.show_tiling_check.setChecked(False)
        assert not window.canvas.show_tiling

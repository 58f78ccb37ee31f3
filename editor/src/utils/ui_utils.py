"""
UI Utility Widgets - reusable controls for the editor window
"""

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLabel, QSlider, QLineEdit
from PyQt5.QtCore import Qt, pyqtSignal


class NumberSliderWidget(QWidget):
    """Labelled float input with a synchronised slider and text box.

    The slider works in integer steps of 1/resolution; the text box accepts
    any value inside [min_val, max_val].

    Usage:
        widget = NumberSliderWidget("Curve amount", 0.0, min_val=0.0, max_val=2.0)
        widget.valueChanged.connect(editor.set_curve_amount)
    """

    valueChanged = pyqtSignal(float)

    def __init__(self, label, value=0.0, min_val=0.0, max_val=1.0,
                 decimals=2, resolution=100, parent=None):
        super().__init__(parent)
        self.min_val = min_val
        self.max_val = max_val
        self.decimals = decimals
        self.resolution = resolution

        # Block signal recursion during programmatic updates
        self._updating = False

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(2)

        self.label = QLabel(f"{label}:")
        layout.addWidget(self.label)

        row = QHBoxLayout()
        row.setSpacing(5)

        self.value_input = QLineEdit(self._format(value))
        self.value_input.setFixedWidth(50)
        self.value_input.editingFinished.connect(self._on_input_finished)
        row.addWidget(self.value_input)

        self.slider = QSlider(Qt.Horizontal)
        self.slider.setMinimum(self._to_slider(min_val))
        self.slider.setMaximum(self._to_slider(max_val))
        self.slider.setValue(self._to_slider(value))
        self.slider.valueChanged.connect(self._on_slider_changed)
        row.addWidget(self.slider)

        layout.addLayout(row)

    def _format(self, value):
        return f"{value:.{self.decimals}f}"

    def _to_slider(self, value):
        return int(round(value * self.resolution))

    def _on_slider_changed(self, slider_value):
        if self._updating:
            return
        value = slider_value / self.resolution
        self._updating = True
        self.value_input.setText(self._format(value))
        self._updating = False
        self.valueChanged.emit(value)

    def _on_input_finished(self):
        if self._updating:
            return
        try:
            value = float(self.value_input.text())
        except ValueError:
            self.value_input.setText(self._format(self.value()))
            return
        value = max(self.min_val, min(self.max_val, value))
        self.setValue(value)
        self.valueChanged.emit(value)

    def value(self):
        return self.slider.value() / self.resolution

    def setValue(self, value):
        """Set value without emitting valueChanged"""
        self._updating = True
        self.value_input.setText(self._format(value))
        self.slider.setValue(self._to_slider(value))
        self._updating = False

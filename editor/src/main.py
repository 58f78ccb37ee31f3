import sys
import os
import argparse
import logging

# Configure logging
logging.basicConfig(
    level=logging.WARNING,  # Only show warnings and errors
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout)  # Output to console
    ]
)

# Add editor/src to path so imports work when running directly
if __name__ == "__main__":
    current_dir = os.path.dirname(os.path.abspath(__file__))
    if current_dir not in sys.path:
        sys.path.insert(0, current_dir)

from PyQt5.QtWidgets import (
    QApplication, QCheckBox, QComboBox, QHBoxLayout, QMainWindow, QPushButton,
    QVBoxLayout, QWidget,
)

from components.tile_canvas import TileCanvas
from models.editor_config import load_editor_config
from services.tiling import get_available_tilings
from utils.logger import set_main_window
from utils.ui_utils import NumberSliderWidget


class PrototileEditorWindow(QMainWindow):
    """Main window: tiling picker, curve amount, shape parameters, canvas"""

    def __init__(self, config=None, tiling_type='parallelogram'):
        super().__init__()
        self.setWindowTitle("Prototile Edge Editor")
        self.resize(900, 640)
        set_main_window(self)

        self.canvas = TileCanvas(config=config)
        self.editor = self.canvas.editor
        self.param_widgets = []

        central = QWidget()
        self.setCentralWidget(central)
        layout = QHBoxLayout(central)

        self.sidebar = QVBoxLayout()
        layout.addLayout(self.sidebar)
        layout.addWidget(self.canvas, 1)

        self.tiling_combo = QComboBox()
        for name, display_name in get_available_tilings():
            self.tiling_combo.addItem(display_name, name)
        self.sidebar.addWidget(self.tiling_combo)

        self.curve_slider = NumberSliderWidget("Curve amount", self.editor.get_curve_amount(),
                                               min_val=0.0, max_val=2.0)
        self.curve_slider.valueChanged.connect(self.editor.set_curve_amount)
        self.sidebar.addWidget(self.curve_slider)

        randomize_button = QPushButton("Randomize edges")
        randomize_button.clicked.connect(lambda: self.editor.randomize_curves())
        self.sidebar.addWidget(randomize_button)

        random_tiling_button = QPushButton("Random tiling")
        random_tiling_button.clicked.connect(lambda: self.random_tiling())
        self.sidebar.addWidget(random_tiling_button)

        self.show_tiling_check = QCheckBox("Show tiling")
        self.show_tiling_check.setChecked(self.canvas.show_tiling)
        self.show_tiling_check.toggled.connect(self.canvas.set_show_tiling)
        self.sidebar.addWidget(self.show_tiling_check)

        self.params_layout = QVBoxLayout()
        self.sidebar.addLayout(self.params_layout)
        self.sidebar.addStretch(1)

        index = self.tiling_combo.findData(tiling_type)
        self.tiling_combo.setCurrentIndex(max(index, 0))
        self._on_tiling_selected(self.tiling_combo.currentIndex())
        self.tiling_combo.currentIndexChanged.connect(self._on_tiling_selected)

    def _on_tiling_selected(self, index):
        self.editor.set_shape_family(self.tiling_combo.itemData(index))
        self._rebuild_param_widgets()

    def random_tiling(self, rng=None):
        """Pick a random tiling type and show it without resetting its parameters"""
        name = self.editor.randomize_tiling(rng)
        self.tiling_combo.blockSignals(True)
        self.tiling_combo.setCurrentIndex(self.tiling_combo.findData(name))
        self.tiling_combo.blockSignals(False)
        self._rebuild_param_widgets()
        return name

    def _rebuild_param_widgets(self):
        for widget in self.param_widgets:
            self.params_layout.removeWidget(widget)
            widget.deleteLater()
        self.param_widgets = []

        for idx in range(self.editor.num_params()):
            widget = NumberSliderWidget(f"Parameter {idx + 1}", self.editor.get_param(idx),
                                        min_val=-2.0, max_val=2.0)
            widget.valueChanged.connect(lambda v, i=idx: self.editor.set_param(i, v))
            self.params_layout.addWidget(widget)
            self.param_widgets.append(widget)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Interactive prototile edge editor")
    parser.add_argument('--config', default=os.path.join(os.path.expanduser("~"), ".prototile", "config.json"),
                        help="JSON file overriding editor settings")
    parser.add_argument('--tiling', default='parallelogram', help="Initial tiling type")
    parser.add_argument('--debug', action='store_true', help="Log at DEBUG level")
    args = parser.parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    app = QApplication(sys.argv[:1])
    window = PrototileEditorWindow(load_editor_config(args.config), args.tiling)
    window.show()
    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())

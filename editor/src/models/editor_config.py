"""Editor configuration.

Tunable interaction and viewport settings. Defaults come from constants.py;
a JSON file may override any subset of the fields.
"""

import json
import logging
import os
from dataclasses import dataclass, fields

from constants import (
    DEFAULT_PHYS_UNIT, SEGMENT_HIT_TOLERANCE, DELETE_HOLD_MS,
    DRAG_CANCEL_DISTANCE, VIEWPORT_MARGIN,
    DEFAULT_VIEWPORT_WIDTH, DEFAULT_VIEWPORT_HEIGHT,
    DEFAULT_CURVE_AMOUNT,
)
from utils.logger import loggerRaise

_logger = logging.getLogger('EditorConfig')


@dataclass
class EditorConfig:
    phys_unit: float = DEFAULT_PHYS_UNIT              # vertices picked within half of this
    segment_tolerance: float = SEGMENT_HIT_TOLERANCE  # surface pixels
    delete_hold_ms: int = DELETE_HOLD_MS
    drag_cancel_distance: float = DRAG_CANCEL_DISTANCE
    viewport_margin: float = VIEWPORT_MARGIN
    viewport_width: float = DEFAULT_VIEWPORT_WIDTH
    viewport_height: float = DEFAULT_VIEWPORT_HEIGHT
    curve_amount: float = DEFAULT_CURVE_AMOUNT

    @property
    def pick_radius(self) -> float:
        return 0.5 * self.phys_unit

    @classmethod
    def from_dict(cls, data: dict) -> 'EditorConfig':
        """Build a config from a dict, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in data.items():
            if key not in known:
                _logger.warning(f"Ignoring unknown config key: {key}")
                continue
            values[key] = int(value) if key == 'delete_hold_ms' else float(value)
        return cls(**values)


def load_editor_config(path) -> EditorConfig:
    """Load an EditorConfig from a JSON file.

    A missing file gives the defaults. A file that cannot be parsed is
    reported through loggerRaise.
    """
    if not os.path.exists(path):
        _logger.debug(f"No config at {path}, using defaults")
        return EditorConfig()

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Config root must be an object, got {type(data).__name__}")
        return EditorConfig.from_dict(data)
    except Exception as e:
        loggerRaise(e, f"Error loading editor config {path}")

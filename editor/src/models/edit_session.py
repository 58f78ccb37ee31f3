"""Edit session dataclass for the prototile editor.

Holds everything needed while a pointer button is down on a control point.
"""

from dataclasses import dataclass
from typing import Optional

from PyQt5.QtCore import QTimer

from models.transform import Affine, Vec2


@dataclass
class EditSession:
    """Drag state for one pressed control point.

    inverse_transform maps surface coordinates back into the pressed edge
    occurrence's local frame.
    """
    edge_id: int
    point_index: int
    inverse_transform: Affine
    press_origin: Vec2
    mirror_constrain: bool = False
    delete_timer: Optional[QTimer] = None  # armed while a sustained press may delete

    @property
    def delete_armed(self) -> bool:
        return self.delete_timer is not None

    def disarm_delete(self):
        """Stop and drop the deletion timer if one is armed."""
        if self.delete_timer is not None:
            self.delete_timer.stop()
            self.delete_timer.deleteLater()
            self.delete_timer = None

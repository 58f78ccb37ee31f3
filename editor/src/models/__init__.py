"""
Prototile Edge Editor - Data Models

This module contains the data model classes for the prototile editor.
This is the MODEL in MVC architecture.

Public API: Vec2, EdgeShapeClass, EdgeCurve, EdgeCurveModel,
BoundaryOutline, EditorConfig.
"""

from .transform import Vec2
from .edge_curves import EdgeShapeClass, EdgeCurve, EdgeCurveModel, sample_edge
from .outline import BoundaryOutline, BoundingBox, build_outline
from .editor_config import EditorConfig, load_editor_config

__all__ = [
    'Vec2', 'EdgeShapeClass', 'EdgeCurve', 'EdgeCurveModel', 'sample_edge',
    'BoundaryOutline', 'BoundingBox', 'build_outline',
    'EditorConfig', 'load_editor_config',
]

"""
Shared fixtures for Prototile Edge Editor tests.

Provides editors for each tiling family and helpers that locate control
points on the editor surface.
"""
import sys
import os
import pytest

# Ensure editor/src is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'editor', 'src'))

# Widgets are created without a display in CI
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')


# ── Surface helpers ─────────────────────────────────────────────────────

def occurrence_surface_transform(editor, occurrence):
    """Transform from an occurrence's local frame to editor surface pixels"""
    from utils.transform_math import compose
    return compose(editor.get_editor_transform(), occurrence.transform)


def surface_point(editor, occurrence, local_point):
    """Surface position of a local edge point on one occurrence"""
    from utils.transform_math import apply
    return apply(occurrence_surface_transform(editor, occurrence), local_point)


@pytest.fixture
def make_editor(qapp):
    """Factory: TileEditor on a named tiling with a given curve amount"""
    from models.editor_config import EditorConfig
    from services.tile_editor import TileEditor

    def _make(tiling='parallelogram', curve_amount=1.0, **config_overrides):
        editor = TileEditor(EditorConfig(**config_overrides))
        editor.set_shape_family(tiling)
        editor.set_curve_amount(curve_amount)
        return editor

    return _make


@pytest.fixture
def parallelogram_editor(make_editor):
    """Unit square with two generic edges, default bumps"""
    return make_editor('parallelogram')


@pytest.fixture
def mirror_editor(make_editor):
    """Rectangle with mirror-symmetric edges"""
    return make_editor('rectangle_mirror')


@pytest.fixture
def rotation_editor(make_editor):
    """Quadrilateral with point-symmetric edges"""
    return make_editor('quad_rotation')


@pytest.fixture
def triangle_editor(make_editor):
    """Triangle with one plain and two point-symmetric edges"""
    return make_editor('triangle_rotation')

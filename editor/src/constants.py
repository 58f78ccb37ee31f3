"""
Prototile Edge Editor - Constants and Configuration

This module contains all constant values used throughout the application:
- Edge sampling and default curve shapes
- Pointer interaction thresholds
- Viewport fitting
- Canvas rendering colours

Values here are the defaults; EditorConfig (models/editor_config.py) can
override the tunable ones from a JSON file.
"""

# ======================================================================
# EDGE CURVES
# ======================================================================

# Number of segments used to flatten a cubic edge (17 samples incl. endpoints)
EDGE_SAMPLE_STEPS = 16

# Default bump height per unit of curve amount
DEFAULT_BUMP_AMPLITUDE = 0.35

# Default interior control points (x, relative y) before amplitude scaling
DEFAULT_GENERIC_POINTS = [(0.35, 1.0), (0.65, 0.5)]
DEFAULT_SYMMETRIC_POINT = (0.33, 1.0)

DEFAULT_CURVE_AMOUNT = 0.0

# Local x coordinate of the mirror axis for mirror-symmetric half edges
MIRROR_AXIS_X = 1.0

# ======================================================================
# POINTER INTERACTION
# ======================================================================

# Size of one physical editing unit in surface pixels.
# Vertices are picked within half a unit.
DEFAULT_PHYS_UNIT = 20.0

# Distance from a segment (surface pixels) that counts as a segment hit
SEGMENT_HIT_TOLERANCE = 20.0

# Sustained press duration that deletes a vertex
DELETE_HOLD_MS = 1000

# Pointer travel that turns a press into a drag (cancels deletion)
DRAG_CANCEL_DISTANCE = 10.0

# ======================================================================
# VIEWPORT
# ======================================================================

# Total margin per axis left around the fitted outline
VIEWPORT_MARGIN = 50.0

DEFAULT_VIEWPORT_WIDTH = 600
DEFAULT_VIEWPORT_HEIGHT = 600

# ======================================================================
# CANVAS RENDERING
# ======================================================================

CANVAS_BACKGROUND_COLOR = '#2b2b2b'
TILE_FILL_COLOR = '#5a8dbf'
TILE_OUTLINE_COLOR = '#ffffff'
CONTROL_POINT_COLOR = '#e0a030'
CONTROL_POINT_RADIUS = 4.0

# Fill colours for the surrounding copies in the tiling preview, picked by
# the classifier's colour index
TILE_COLORS = ['#3c5a78', '#6b4f7a', '#4f7a5a']
PREVIEW_OUTLINE_COLOR = '#1a1a1a'

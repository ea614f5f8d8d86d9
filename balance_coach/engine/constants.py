"""Shared constants for the composition engine.

Board geometry is expressed in board-relative pixels. The fulcrum is always
the vertical centerline of the board, and the floor band is a strip at the
bottom of the board that shapes may not enter.
"""

# Grid unit for snapping positions and sizes.
GRID_UNIT = 20

# Height of the floor band at the bottom of the board.
FLOOR_HEIGHT = 140

# Default board dimensions (the conceptual artboard).
BOARD_WIDTH = 800
BOARD_HEIGHT = 600

# Shade levels run 1..5; tables are indexed by shade - 1.
SHADE_LEVELS = (1, 2, 3, 4, 5)
SHADE_NAMES = ("Lightest", "Light", "Medium", "Dark", "Darkest")
SHADE_WEIGHT_MULTIPLIERS = (1.0, 1.25, 1.5, 1.75, 2.0)
SHADE_SATURATIONS = (0.3, 0.475, 0.65, 0.825, 1.0)

COLORS = {
    "square": "#3b82f6",  # blue-500
    "rectangle": "#dc2626",  # red-600
}

# Random placement retry budget.
PLACEMENT_ATTEMPTS = 50

# Size slider range for manual shapes (shape height).
MIN_SHAPE_SIZE = 80
MAX_SHAPE_SIZE = 200
DEFAULT_SHAPE_SIZE = 100

# Torque difference → display degrees.
TILT_SCALE = 8000.0
MAX_DISPLAY_TILT = 25.0
BALANCED_TOLERANCE = 0.5

# Challenge puzzles: unique sizes drawn from this pool.
CHALLENGE_SIZES = (60, 70, 80, 90, 100, 110, 120, 130, 140, 150)
CHALLENGE_COUNTS = (6, 8)

# Presentational guide overlays, in toggle order.
GUIDE_MODES = ("none", "thirds", "columns")

"""Constants for the Pitchside TUI."""

# Board colours
PITCH_COLOR = "#2e8b57"
BOARD_BACKGROUND = "#303030"
BENCH_BACKGROUND = "#2a2a2a"
LINE_COLOR = "#d8e8dc"

# Height/width ratio of one terminal cell
CELL_ASPECT = 2.0

# Physical pitch proportions (depth / length)
PITCH_ASPECT = 0.7

# Board x range kept visible so the bench strip fits right of the pitch
MIN_BOARD_EXTENT = 125.0
BENCH_MARGIN = 10.0

# Zoom steps for the board panel
ZOOM_STEP = 0.1
MIN_ZOOM = 0.5
MAX_ZOOM = 1.5

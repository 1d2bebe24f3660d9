"""
Global parameters for the alternating-color maze.
"""

# Wall colors
RED = "red"
BLUE = "blue"
BLACK = "black"

PASSABLE_COLORS = (RED, BLUE)

# Fixed id of the unbounded outer room (stable across recomputation)
OUTER_ROOM_ID = "outside"

# Prefix used for enclosed room ids ("room_1", "room_2", ...)
ROOM_ID_PREFIX = "room_"

# Face tracing gives up after SAFETY_FACTOR * |points| steps
SAFETY_FACTOR = 2

# Tolerance for geometric comparisons (areas, coordinates)
EPSILON = 1e-9

# Grid generator defaults
GRID_COLS = 4
GRID_ROWS = 5
CANVAS_WIDTH = 600
CANVAS_HEIGHT = 700
CANVAS_PADDING = 50

# Labels shown on the start and goal rooms
START_LABEL = "IN"
GOAL_LABEL = "OUT"

# Logging
LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(message)s"

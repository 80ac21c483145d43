from __future__ import annotations

# Grid
MAP_WIDTH = 32
MAP_HEIGHT = 16
START_TAIL = 2

# Pacing (seconds)
STEP_INTERVAL = 0.100
STEP_ACCEL = 0.05
FPS_LIMIT = 60

# Apple placement gives up sampling after this many draws per grid cell
# and falls back to scanning the grid.
PLACEMENT_ATTEMPTS_PER_CELL = 8

# Window frontend
CELL_SIZE = 24
STATUS_HEIGHT = 28
BLACK = (0, 0, 0)
GREEN = (0, 160, 0)
DARK_GREEN = (0, 100, 0)
RED = (220, 0, 0)
MAGENTA = (200, 0, 200)
YELLOW = (230, 200, 0)
GREY = (60, 60, 60)

"""
Configuration constants for grid path search.

Map symbols, render glyphs, algorithm ordering and CLI defaults live here.
The log level can be overridden from the environment.
"""

import os

# =============================================================================
# Map symbols
# =============================================================================

OPEN_CELL = "."
BLOCKED_CELL = "#"

# Directive keywords recognised by the map loader
MAP_DIRECTIVES = ("WIDTH", "HEIGHT", "START", "GOAL")

# =============================================================================
# Render glyphs
# =============================================================================

VISITED_GLYPH = "+"
PATH_GLYPH = "*"
START_GLYPH = "S"
GOAL_GLYPH = "G"

# =============================================================================
# Search configuration
# =============================================================================

# Order used when every algorithm is requested ("all")
ALGORITHM_ORDER = ("bfs", "dijkstra", "astar")

# Cost of a single 4-connected move
UNIT_EDGE_COST = 1.0

# =============================================================================
# Plot configuration
# =============================================================================

PLOT_DPI = 120
# Figure inches per grid cell, with a floor so tiny maps stay readable
PLOT_CELL_INCHES = 0.2
PLOT_MIN_INCHES = 3.0

# =============================================================================
# Logging
# =============================================================================

LOG_LEVEL_ENV = "GRIDSEARCH_LOG_LEVEL"
LOG_LEVEL = os.getenv(LOG_LEVEL_ENV, "WARNING").upper()
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

# -*- coding: utf-8 -*-
"""
Grid maps: representation, loading and rendering.
Exposes:
- Grid (flat row-major cell array with start/goal)
- load_map(path) / parse_map(lines)
- render_ascii(grid, result) / save_plot(grid, result, path)
- GridSearchError, MapFormatError, PreconditionError
"""

from __future__ import annotations

from .errors import GridSearchError, MapFormatError, PreconditionError
from .grid import Grid
from .loader import load_map, parse_map
from .render import render_ascii, save_plot, status_line

__all__ = [
    "Grid",
    "load_map",
    "parse_map",
    "render_ascii",
    "save_plot",
    "status_line",
    "GridSearchError",
    "MapFormatError",
    "PreconditionError",
]

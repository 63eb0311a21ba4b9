#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
render.py
---------
Turn a search result into something a person can look at.

ASCII overlay (render_ascii):
  '.' unvisited open cell, '+' visited, '*' on the final path,
  '#' blocked (never overwritten), 'S' start, 'G' goal.
  Start and goal are drawn last so they always show.

PNG figure (save_plot): same layers drawn with matplotlib.
"""

from __future__ import annotations

import os
from typing import Optional

import numpy as np

from config import (BLOCKED_CELL, GOAL_GLYPH, PATH_GLYPH, PLOT_CELL_INCHES,
                    PLOT_DPI, PLOT_MIN_INCHES, START_GLYPH, VISITED_GLYPH)
from envs.grid import Grid


def overlay_cells(grid: Grid, result) -> np.ndarray:
    """Flat array of glyphs with the visited/path overlay applied."""
    out = grid.cells.copy()
    open_mask = out != BLOCKED_CELL
    out[np.asarray(result.visited, dtype=bool) & open_mask] = VISITED_GLYPH
    for idx in result.path:
        if open_mask[idx]:
            out[idx] = PATH_GLYPH
    out[grid.start_index] = START_GLYPH
    out[grid.goal_index] = GOAL_GLYPH
    return out


def status_line(result) -> str:
    if result.found:
        return f"Path found: {result.path_length} steps, {result.visited_count} cells visited"
    return f"No path found: {result.visited_count} cells visited"


def render_ascii(grid: Grid, result) -> str:
    """Grid overlay followed by a line saying whether a path was found."""
    cells = overlay_cells(grid, result)
    lines = ["".join(cells[r * grid.width:(r + 1) * grid.width]) for r in range(grid.height)]
    lines.append(status_line(result))
    return "\n".join(lines)


def save_plot(grid: Grid, result, path: str, title: Optional[str] = None) -> str:
    """
    Save a PNG of the grid with visited cells, the path and start/goal markers.
    Returns the written path.
    """
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    H, W = grid.shape
    figsize = (max(PLOT_MIN_INCHES, W * PLOT_CELL_INCHES), max(PLOT_MIN_INCHES, H * PLOT_CELL_INCHES))
    fig, ax = plt.subplots(figsize=figsize, dpi=PLOT_DPI)

    # Base = white, visited = light blue, obstacles = dark gray
    rgb = np.ones((H, W, 3), dtype=float)
    visited = np.asarray(result.visited, dtype=bool).reshape(H, W)
    rgb[visited] = (0.75, 0.85, 1.0)
    rgb[grid.blocked_mask()] = 0.2

    ax.imshow(rgb, interpolation="nearest", origin="upper")
    ax.set_xticks([]); ax.set_yticks([])

    if result.found and len(result.path) > 1:
        rr, cc = zip(*(grid.from_index(i) for i in result.path))
        ax.plot(cc, rr, color="lime", lw=2, alpha=0.8)

    sr, sc = grid.start
    gr, gc = grid.goal
    ax.plot(sc, sr, marker="*", markersize=10, markeredgecolor="k", markerfacecolor="lime", lw=0)
    ax.text(sc + 0.2, sr - 0.2, START_GLYPH, color="k", fontsize=8)
    ax.plot(gc, gr, marker="*", markersize=10, markeredgecolor="k", markerfacecolor="red", lw=0)
    ax.text(gc + 0.2, gr - 0.2, GOAL_GLYPH, color="k", fontsize=8)

    if title:
        ax.set_title(title, fontsize=10)

    out_dir = os.path.dirname(path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    fig.tight_layout()
    fig.savefig(path, bbox_inches="tight")
    plt.close(fig)
    return path

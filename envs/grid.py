#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
grid.py
-------
Fixed-size 2D grid stored as a flat, row-major array of single-character
cells. A cell's linear index is row * width + col.

Conventions:
- '#' is blocked, '.' is open; any other symbol is kept as-is and counts as open.
- Neighbors are 4-connected and always enumerated up, down, left, right.
  Planners rely on this order for reproducible tie-breaking.
- The cell array is read-only once the grid is built; use copy() to get an
  independent grid.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, List, Tuple

import numpy as np

from config import BLOCKED_CELL
from envs.errors import MapFormatError, PreconditionError

Coord = Tuple[int, int]  # (row, col)

# 4-connected deltas: up, down, left, right
DELTAS_4 = np.array([(-1, 0), (1, 0), (0, -1), (0, 1)], dtype=np.int8)


@dataclass
class Grid:
    """Occupancy grid with a designated start and goal cell."""
    width: int
    height: int
    start: Coord
    goal: Coord
    cells: np.ndarray   # (width*height,) array of 1-char strings, row-major

    def __post_init__(self):
        self.cells = np.array(self.cells, dtype="<U1").reshape(-1)
        self.cells.flags.writeable = False

    @classmethod
    def from_rows(cls, rows: Iterable[str], start: Coord, goal: Coord) -> "Grid":
        rows = list(rows)
        height = len(rows)
        width = len(rows[0]) if rows else 0
        cells = np.array(list("".join(rows)), dtype="<U1")
        return cls(width=width, height=height, start=tuple(start), goal=tuple(goal), cells=cells)

    # ------------------------------------------------------------------ #
    @property
    def size(self) -> int:
        return self.width * self.height

    @property
    def shape(self) -> Tuple[int, int]:
        return self.height, self.width

    @property
    def start_index(self) -> int:
        return self.to_index(*self.start)

    @property
    def goal_index(self) -> int:
        return self.to_index(*self.goal)

    # ------------------------------------------------------------------ #
    def in_bounds(self, row: int, col: int) -> bool:
        return (0 <= row < self.height) and (0 <= col < self.width)

    def is_blocked(self, row: int, col: int) -> bool:
        # numpy would silently wrap negative indices, so check explicitly
        if not self.in_bounds(row, col):
            raise IndexError(f"cell ({row}, {col}) is outside a {self.height}x{self.width} grid")
        return bool(self.cells[self.to_index(row, col)] == BLOCKED_CELL)

    def to_index(self, row: int, col: int) -> int:
        return row * self.width + col

    def from_index(self, index: int) -> Coord:
        row, col = divmod(index, self.width)
        return int(row), int(col)

    def neighbors(self, index: int) -> List[int]:
        r, c = self.from_index(index)
        out: List[int] = []
        for dr, dc in DELTAS_4:
            nr, nc = r + int(dr), c + int(dc)
            if not self.in_bounds(nr, nc):
                continue
            if self.is_blocked(nr, nc):
                continue
            out.append(self.to_index(nr, nc))
        return out

    # ------------------------------------------------------------------ #
    def validate(self) -> None:
        """
        Reject grids a planner must never see.

        Raises MapFormatError for a malformed shape and PreconditionError for a
        start/goal that is out of bounds or blocked.
        """
        if self.width <= 0 or self.height <= 0:
            raise MapFormatError(f"grid must be non-empty, got {self.height}x{self.width}")
        if self.cells.size != self.width * self.height:
            raise MapFormatError(
                f"grid has {self.cells.size} cells, expected {self.width}*{self.height}={self.size}"
            )
        for label, (r, c) in (("start", self.start), ("goal", self.goal)):
            if not self.in_bounds(r, c):
                raise PreconditionError(
                    f"{label} ({r}, {c}) is outside a {self.height}x{self.width} grid"
                )
            if self.is_blocked(r, c):
                raise PreconditionError(f"{label} ({r}, {c}) is on a blocked cell")

    def copy(self) -> "Grid":
        return replace(self, cells=self.cells.copy())

    def blocked_mask(self) -> np.ndarray:
        """(H, W) bool array, True where the cell is blocked."""
        return (self.cells == BLOCKED_CELL).reshape(self.height, self.width)

    def rows(self) -> List[str]:
        return ["".join(self.cells[r * self.width:(r + 1) * self.width]) for r in range(self.height)]

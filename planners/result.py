# -*- coding: utf-8 -*-
"""Search result shared by every planner."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

import numpy as np

from envs.grid import Grid


@dataclass(frozen=True)
class SearchResult:
    algorithm: str
    found: bool
    # BFS marks cells on discovery, so its visited set can include queued cells
    # that were never dequeued; Dijkstra and A* mark only settled cells.
    visited: np.ndarray                             # (width*height,) bool
    path: List[int] = field(default_factory=list)   # cell indices, start -> goal
    expanded: int = 0                               # cells taken off the frontier

    @property
    def path_length(self) -> int:
        """Number of edges on the path (0 when not found or start == goal)."""
        return max(len(self.path) - 1, 0)

    @property
    def visited_count(self) -> int:
        return int(np.count_nonzero(self.visited))

    def to_dict(self, grid: Grid) -> Dict:
        """{'success': bool, 'path': [(r, c), ...] or None}"""
        if not self.found:
            return {'success': False, 'path': None}
        return {'success': True, 'path': [grid.from_index(i) for i in self.path]}

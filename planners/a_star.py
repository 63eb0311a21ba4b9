#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
A* path planner for 4-connected grid maps.
- Heuristic: Manhattan distance to the goal.
- The cost array holds g; heap entries are keyed on (f, h) with f = g + h.
  Equal f pops the cell closer to the goal first, then the lower index.
"""

from __future__ import annotations

from envs.grid import Grid
from planners.frontier import FrontierPlanner, Key
from planners.heuristics import manhattan_distance


class AStarPlanner(FrontierPlanner):
    name = "astar"

    def priority(self, grid: Grid, index: int, cost: float) -> Key:
        h = manhattan_distance(grid.from_index(index), grid.goal)
        return (cost + h, h)

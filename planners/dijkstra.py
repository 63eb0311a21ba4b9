#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Dijkstra planner for grid maps.
- Uniform edge relaxation, no heuristic (A* with h=0).
- A cell is settled when popped; later duplicates in the heap are skipped.
- Ties on cost pop the lower cell index first.
"""

from __future__ import annotations

from planners.frontier import FrontierPlanner, PriorityFrontier


class DijkstraPlanner(FrontierPlanner):
    name = "dijkstra"

    def make_frontier(self):
        return PriorityFrontier()

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Breadth-First Search planner (unweighted shortest hops).
- 4-connected grid, every move costs 1.
- Cells are marked visited when enqueued, so nothing is queued twice and
  the FIFO order yields a shortest path in edge count.
"""

from __future__ import annotations

from planners.frontier import FifoFrontier, FrontierPlanner


class BFSPlanner(FrontierPlanner):
    name = "bfs"
    mark_on_discovery = True

    def make_frontier(self):
        return FifoFrontier()

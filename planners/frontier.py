#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Generic frontier search on a Grid.

BFS, Dijkstra and A* differ only in:
- how the frontier orders cells (FIFO vs. min-heap on a priority),
- when a cell counts as visited (on discovery for BFS, on pop otherwise),
- the priority pushed with a cell ((g,) for Dijkstra, (g + h, h) for A*).
Everything else (neighbor expansion, parent bookkeeping, path
reconstruction, termination) lives here.
"""

from __future__ import annotations

import heapq
import logging
from collections import deque
from typing import List, Tuple

import numpy as np

from config import UNIT_EDGE_COST
from envs.grid import Grid
from planners.result import SearchResult

logger = logging.getLogger(__name__)

NO_PARENT = -1

# Heap ordering key, compared lexicographically
Key = Tuple[float, ...]


class FifoFrontier:
    """First-in first-out queue; priorities are ignored."""

    def __init__(self):
        self._dq = deque()

    def push(self, index: int, priority: Key) -> None:
        self._dq.append(index)

    def pop(self) -> int:
        return self._dq.popleft()

    def __len__(self) -> int:
        return len(self._dq)


class PriorityFrontier:
    """
    Min-heap keyed on (priority key, cell index).

    The key is a tuple supplied by the planner; equal keys pop the lower
    cell index first. A cell may be pushed several times; stale entries
    are skipped by the search once the cell is settled.
    """

    def __init__(self):
        self._heap: List[Tuple[Key, int]] = []

    def push(self, index: int, priority: Key) -> None:
        heapq.heappush(self._heap, (priority, index))

    def pop(self) -> int:
        return heapq.heappop(self._heap)[1]

    def __len__(self) -> int:
        return len(self._heap)


def reconstruct_path(parents: np.ndarray, goal: int) -> List[int]:
    """Walk parent pointers back from goal to the sentinel, then reverse."""
    path: List[int] = []
    node = goal
    while node != NO_PARENT:
        path.append(int(node))
        node = int(parents[node])
    path.reverse()
    return path


class FrontierPlanner:
    """Base class; subclasses pick the frontier policy and the priority."""

    name = "frontier"
    # True: mark visited when pushed (BFS). False: mark when popped (settled).
    mark_on_discovery = False

    def make_frontier(self):
        return PriorityFrontier()

    def edge_cost(self, grid: Grid, src: int, dst: int) -> float:
        return UNIT_EDGE_COST

    def priority(self, grid: Grid, index: int, cost: float) -> Key:
        return (cost,)

    def plan(self, grid: Grid) -> SearchResult:
        grid.validate()
        n = grid.size
        start, goal = grid.start_index, grid.goal_index

        cost = np.full(n, np.inf, dtype=np.float64)
        parents = np.full(n, NO_PARENT, dtype=np.int64)
        visited = np.zeros(n, dtype=bool)

        cost[start] = 0.0
        frontier = self.make_frontier()
        frontier.push(start, self.priority(grid, start, 0.0))
        if self.mark_on_discovery:
            visited[start] = True

        expanded = 0
        found = False
        while frontier:
            current = frontier.pop()
            if not self.mark_on_discovery:
                if visited[current]:
                    continue
                visited[current] = True
            expanded += 1

            if current == goal:
                found = True
                break

            for nb in grid.neighbors(current):
                if visited[nb]:
                    continue
                new_cost = cost[current] + self.edge_cost(grid, current, nb)
                if new_cost >= cost[nb]:
                    continue
                cost[nb] = new_cost
                parents[nb] = current
                if self.mark_on_discovery:
                    visited[nb] = True
                frontier.push(nb, self.priority(grid, nb, new_cost))

        path = reconstruct_path(parents, goal) if found else []
        visited.flags.writeable = False
        logger.debug("%s: found=%s expanded=%d visited=%d path_len=%d",
                     self.name, found, expanded, int(visited.sum()), max(len(path) - 1, 0))
        return SearchResult(algorithm=self.name, found=found, visited=visited,
                            path=path, expanded=expanded)

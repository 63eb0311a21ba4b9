# -*- coding: utf-8 -*-
"""
Planners on grid maps with a unified API:
planner.plan(grid: envs.Grid) -> SearchResult(found, visited, path, expanded)
"""

from __future__ import annotations
from typing import Dict, Type

from .a_star import AStarPlanner
from .dijkstra import DijkstraPlanner
from .bfs import BFSPlanner
from .frontier import FrontierPlanner
from .heuristics import manhattan_distance
from .result import SearchResult

# Mapping used by factories/CLIs
PLANNERS: Dict[str, Type[FrontierPlanner]] = {
    "bfs": BFSPlanner,
    "dijkstra": DijkstraPlanner,
    "astar": AStarPlanner,
}

_ALIASES = {"a_star": "astar", "a*": "astar"}


def get_planner(name: str) -> FrontierPlanner:
    """
    Factory: instantiate a planner by name.

    Parameters
    ----------
    name : str
        One of: 'bfs', 'dijkstra', 'astar' (alias 'a_star')

    Returns
    -------
    planner instance
    """
    key = name.strip().lower()
    key = _ALIASES.get(key, key)
    if key not in PLANNERS:
        raise ValueError(f"Unknown planner '{name}'. Available: {sorted(PLANNERS)}")
    return PLANNERS[key]()


__all__ = [
    "AStarPlanner",
    "DijkstraPlanner",
    "BFSPlanner",
    "FrontierPlanner",
    "SearchResult",
    "manhattan_distance",
    "PLANNERS",
    "get_planner",
]

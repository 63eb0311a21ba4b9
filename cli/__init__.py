# -*- coding: utf-8 -*-
"""
Command-line entry points (run with `python -m cli.<name>`):

- run_search        : load a map, run bfs/dijkstra/astar (or all), print ASCII overlays
"""
__all__ = [
    "run_search",
]

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
run_search.py
-------------
Load a grid map, run one or all planners on it and print each result as
an ASCII overlay.

Example:
    python -m cli.run_search --map maps/maze.txt --algo all
    python -m cli.run_search --map maps/maze.txt --algo astar --plot-dir out/

Exit status: 0 on success, 2 on bad arguments, 1 on map/file/start-goal errors.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
import time
from typing import List, Optional

from config import ALGORITHM_ORDER, LOG_FORMAT, LOG_LEVEL
from envs import GridSearchError, load_map, render_ascii, save_plot
from planners import get_planner

logger = logging.getLogger(__name__)

ALGO_CHOICES = list(ALGORITHM_ORDER) + ["all"]
LOG_LEVEL_CHOICES = ["DEBUG", "INFO", "WARNING", "ERROR"]


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Find a path on a grid map with BFS, Dijkstra or A*.")
    mode = ap.add_mutually_exclusive_group(required=True)
    mode.add_argument("--map", type=str, help="Path to a map file")
    mode.add_argument("--generate", action="store_true",
                      help="Generate a random map (not supported)")
    ap.add_argument("--algo", type=str, required=True, choices=ALGO_CHOICES,
                    help="Algorithm to run, or 'all' for bfs, dijkstra and astar in order")
    ap.add_argument("--plot-dir", type=str, default=None,
                    help="If set, also save one PNG per run into this directory")
    ap.add_argument("--log-level", type=str.upper, default=LOG_LEVEL,
                    choices=LOG_LEVEL_CHOICES,
                    help="Logging verbosity (default from GRIDSEARCH_LOG_LEVEL)")
    return ap


def run(map_path: str, algorithms: List[str], plot_dir: Optional[str] = None) -> None:
    base = load_map(map_path)
    for name in algorithms:
        grid = base.copy()
        planner = get_planner(name)
        t0 = time.perf_counter()
        result = planner.plan(grid)
        t1 = time.perf_counter()
        logger.info("%s finished in %.3f ms", name, (t1 - t0) * 1e3)

        print(f"=== {name} ===")
        print(render_ascii(grid, result))
        print(f"expanded={result.expanded} time_ms={(t1 - t0) * 1e3:.3f}")
        if plot_dir:
            fname = os.path.join(plot_dir, f"{name}_path.png")
            title = f"{name}: {'success' if result.found else 'fail'}"
            print(f"Saved: {save_plot(grid, result, fname, title=title)}")
        print()


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    if args.generate:
        ap.error("map generation is not supported; pass --map PATH")
    # argparse does not check defaults against choices
    if args.log_level not in LOG_LEVEL_CHOICES:
        ap.error(f"invalid log level '{args.log_level}' (choose from {', '.join(LOG_LEVEL_CHOICES)})")

    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)

    algorithms = list(ALGORITHM_ORDER) if args.algo == "all" else [args.algo]
    try:
        run(args.map, algorithms, plot_dir=args.plot_dir)
    except GridSearchError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

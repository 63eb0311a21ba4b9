#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
loader.py
---------
Read a grid map from a line-oriented text file.

Format:
    WIDTH <int>
    HEIGHT <int>
    START <row> <col>
    GOAL <row> <col>
    <HEIGHT rows of WIDTH characters>

Directives may appear in any order, each exactly once. Blank lines are
ignored anywhere. Every other line is a grid row.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Tuple

from config import MAP_DIRECTIVES
from envs.errors import MapFormatError
from envs.grid import Grid

logger = logging.getLogger(__name__)

# Number of integer arguments per directive
_ARITY = {"WIDTH": 1, "HEIGHT": 1, "START": 2, "GOAL": 2}


def _parse_directive(keyword: str, args: List[str], lineno: int) -> Tuple[int, ...]:
    if len(args) != _ARITY[keyword]:
        raise MapFormatError(
            f"line {lineno}: {keyword} expects {_ARITY[keyword]} integer(s), got {len(args)}"
        )
    try:
        return tuple(int(a) for a in args)
    except ValueError:
        raise MapFormatError(f"line {lineno}: {keyword} arguments must be integers: {' '.join(args)}") from None


def parse_map(lines: Iterable[str]) -> Grid:
    """Build a validated Grid from map-file lines."""
    settings: Dict[str, Tuple[int, ...]] = {}
    rows: List[Tuple[int, str]] = []

    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line:
            continue
        tokens = line.split()
        keyword = tokens[0]
        if keyword in MAP_DIRECTIVES:
            if keyword in settings:
                raise MapFormatError(f"line {lineno}: duplicate {keyword} directive")
            settings[keyword] = _parse_directive(keyword, tokens[1:], lineno)
        else:
            rows.append((lineno, line))

    missing = [k for k in MAP_DIRECTIVES if k not in settings]
    if missing:
        raise MapFormatError(f"missing directive(s): {', '.join(missing)}")

    (width,), (height,) = settings["WIDTH"], settings["HEIGHT"]
    if width <= 0 or height <= 0:
        raise MapFormatError(f"WIDTH and HEIGHT must be positive, got {width}x{height}")
    if len(rows) != height:
        raise MapFormatError(f"expected {height} grid rows, found {len(rows)}")
    for lineno, row in rows:
        if len(row) != width:
            raise MapFormatError(f"line {lineno}: row has {len(row)} cells, expected {width}")

    grid = Grid.from_rows((row for _, row in rows), start=settings["START"], goal=settings["GOAL"])
    grid.validate()
    logger.debug("parsed %dx%d map, start=%s goal=%s", height, width, grid.start, grid.goal)
    return grid


def load_map(path: str) -> Grid:
    """Read and validate a map file. Raises MapFormatError if it cannot be opened or decoded."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            lines = f.readlines()
    except OSError as e:
        raise MapFormatError(f"cannot open map file '{path}': {e.strerror or e}") from e
    except UnicodeDecodeError as e:
        raise MapFormatError(f"cannot read map file '{path}': {e}") from e
    logger.debug("read %d lines from %s", len(lines), path)
    return parse_map(lines)

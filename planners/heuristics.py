# -*- coding: utf-8 -*-
"""Distance heuristics for informed search on 4-connected grids."""

from __future__ import annotations

from typing import Tuple


def manhattan_distance(a: Tuple[int, int], b: Tuple[int, int]) -> int:
    # Admissible and consistent for unit-cost 4-connected moves
    return abs(a[0] - b[0]) + abs(a[1] - b[1])

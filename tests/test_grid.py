#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import numpy as np
import pytest

from envs import Grid, MapFormatError, PreconditionError


def _grid(rows, start=(0, 0), goal=None):
    goal = goal if goal is not None else (len(rows) - 1, len(rows[0]) - 1)
    return Grid.from_rows(rows, start=start, goal=goal)


def test_index_round_trip_all_cells():
    g = _grid(["....", "....", "...."])
    for r in range(g.height):
        for c in range(g.width):
            assert g.from_index(g.to_index(r, c)) == (r, c)
    for i in range(g.size):
        assert g.to_index(*g.from_index(i)) == i


def test_in_bounds_edges():
    g = _grid(["...", "..."])
    assert g.in_bounds(0, 0) and g.in_bounds(1, 2)
    assert not g.in_bounds(-1, 0)
    assert not g.in_bounds(0, -1)
    assert not g.in_bounds(2, 0)
    assert not g.in_bounds(0, 3)


def test_is_blocked_and_out_of_bounds_raises():
    g = _grid([".#.", "..."])
    assert g.is_blocked(0, 1)
    assert not g.is_blocked(1, 1)
    with pytest.raises(IndexError):
        g.is_blocked(-1, 0)
    with pytest.raises(IndexError):
        g.is_blocked(0, 3)


def test_other_symbols_count_as_open():
    g = _grid([".~.", "..."])
    assert not g.is_blocked(0, 1)
    assert g.to_index(0, 1) in g.neighbors(g.to_index(0, 0))


def test_neighbors_order_up_down_left_right():
    g = _grid(["...", "...", "..."])
    center = g.to_index(1, 1)
    assert g.neighbors(center) == [
        g.to_index(0, 1),  # up
        g.to_index(2, 1),  # down
        g.to_index(1, 0),  # left
        g.to_index(1, 2),  # right
    ]


def test_neighbors_skip_blocked_and_out_of_bounds():
    g = _grid([".#.", "#..", "..."], goal=(2, 2))
    # top-left corner is boxed in
    assert g.neighbors(g.to_index(0, 0)) == []
    for i in range(g.size):
        if g.is_blocked(*g.from_index(i)):
            continue
        nbs = g.neighbors(i)
        assert len(nbs) <= 4
        for nb in nbs:
            r, c = g.from_index(nb)
            assert g.in_bounds(r, c) and not g.is_blocked(r, c)


def test_validate_rejects_blocked_start_and_goal():
    with pytest.raises(PreconditionError):
        _grid(["#..", "..."], start=(0, 0), goal=(1, 2)).validate()
    with pytest.raises(PreconditionError):
        _grid(["...", "..#"], start=(0, 0), goal=(1, 2)).validate()


def test_validate_rejects_out_of_bounds_start_and_goal():
    with pytest.raises(PreconditionError):
        _grid(["...", "..."], start=(2, 0), goal=(1, 2)).validate()
    with pytest.raises(PreconditionError):
        _grid(["...", "..."], start=(0, 0), goal=(1, -1)).validate()


def test_validate_rejects_empty_and_mismatched_grids():
    with pytest.raises(MapFormatError):
        Grid(width=0, height=0, start=(0, 0), goal=(0, 0), cells=np.array([], dtype="<U1")).validate()
    with pytest.raises(MapFormatError):
        Grid(width=3, height=2, start=(0, 0), goal=(0, 1), cells=np.array(list("....."))).validate()


def test_cells_are_read_only_and_copy_is_independent():
    g = _grid(["...", "..."])
    with pytest.raises(ValueError):
        g.cells[0] = "#"
    g2 = g.copy()
    assert g2 is not g
    assert not np.shares_memory(g.cells, g2.cells)
    assert g2.rows() == g.rows()
    assert (g2.start, g2.goal) == (g.start, g.goal)


def test_blocked_mask_shape():
    g = _grid([".#.", "..."])
    mask = g.blocked_mask()
    assert mask.shape == (2, 3)
    assert mask[0, 1] and mask.sum() == 1

"""
Pytest configuration and shared fixtures.

Maps are written as text (the same format the loader reads) so every
test goes through the real parser.
"""

import pytest

from envs import parse_map


def make_map_text(rows, start, goal):
    """Render rows + start/goal into map-file text."""
    header = [
        f"WIDTH {len(rows[0])}",
        f"HEIGHT {len(rows)}",
        f"START {start[0]} {start[1]}",
        f"GOAL {goal[0]} {goal[1]}",
    ]
    return "\n".join(header + list(rows)) + "\n"


def make_grid(rows, start, goal):
    return parse_map(make_map_text(rows, start, goal).splitlines())


@pytest.fixture
def open_grid():
    """5x5 all-open grid, start top-left, goal bottom-right."""
    return make_grid(["....."] * 5, (0, 0), (4, 4))


@pytest.fixture
def walled_grid():
    """A full row of walls separates the top two rows from the bottom two."""
    rows = [".....", ".....", "#####", ".....", "....."]
    return make_grid(rows, (0, 0), (4, 4))


@pytest.fixture
def snake_grid():
    """Single winding corridor; the only path from start to goal is 16 steps."""
    rows = [".....", "####.", ".....", ".####", "....."]
    return make_grid(rows, (0, 0), (4, 4))


@pytest.fixture
def map_file(tmp_path):
    """Write a map to disk and return its path."""
    def _write(rows, start, goal, name="map.txt"):
        p = tmp_path / name
        p.write_text(make_map_text(rows, start, goal), encoding="utf-8")
        return str(p)
    return _write

# -*- coding: utf-8 -*-
"""
Exceptions raised while loading or validating a grid map.

All of them derive from ValueError so callers that only care about
"bad input" can catch that.
"""


class GridSearchError(ValueError):
    """Base class for map and configuration problems detected before search."""


class MapFormatError(GridSearchError):
    """The map file could not be read or does not match its declared shape."""


class PreconditionError(GridSearchError):
    """Start or goal is out of bounds or sits on a blocked cell."""

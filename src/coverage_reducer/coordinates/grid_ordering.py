"""
Coverage Reducer Grid Coordinate Ordering

Canonical ordering of 2D grid indices: x-index first, then y-index. Sorting
with this order makes the y-index vary fastest, matching the usual on-disk
layout where the last dimension varies fastest.
"""

from functools import cmp_to_key
from typing import Iterable, List, Tuple, Union

from ..core.core_types import GridCoordinates

GridIndex = Union[GridCoordinates, Tuple[int, int]]


def _as_pair(coords: GridIndex) -> Tuple[int, int]:
    if isinstance(coords, GridCoordinates):
        return coords.x, coords.y
    x, y = coords
    return int(x), int(y)


def compare_grid_coordinates(c1: GridIndex, c2: GridIndex) -> int:
    """
    Compare two grid index pairs.

    Args:
        c1: First (x, y) pair
        c2: Second (x, y) pair

    Returns:
        int: Negative, zero or positive as c1 is less than, equal to, or
             greater than c2
    """
    x1, y1 = _as_pair(c1)
    x2, y2 = _as_pair(c2)
    if x1 != x2:
        return -1 if x1 < x2 else 1
    if y1 != y2:
        return -1 if y1 < y2 else 1
    return 0


grid_sort_key = cmp_to_key(compare_grid_coordinates)


def sort_grid_coordinates(coords: Iterable[GridIndex]) -> List[GridCoordinates]:
    """Sort grid index pairs into canonical (y fastest) order."""
    return [GridCoordinates(*_as_pair(c)) for c in sorted(coords, key=grid_sort_key)]

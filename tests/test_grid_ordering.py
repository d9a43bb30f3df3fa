"""
Tests for the canonical ordering of grid indices.
"""

import itertools
import random

from coverage_reducer import GridCoordinates, compare_grid_coordinates, sort_grid_coordinates
from coverage_reducer.coordinates import grid_sort_key


def _sign(n):
    return (n > 0) - (n < 0)


class TestComparator:
    """Comparator properties."""

    def test_x_is_primary_key(self):
        assert compare_grid_coordinates((0, 9), (1, 0)) < 0
        assert compare_grid_coordinates((2, 0), (1, 9)) > 0

    def test_y_breaks_x_ties(self):
        assert compare_grid_coordinates((3, 1), (3, 2)) < 0
        assert compare_grid_coordinates((3, 5), (3, 2)) > 0

    def test_equal(self):
        assert compare_grid_coordinates(GridCoordinates(4, 4), (4, 4)) == 0

    def test_antisymmetric_and_transitive(self):
        coords = [(x, y) for x in range(3) for y in range(3)]
        for a, b in itertools.product(coords, repeat=2):
            assert _sign(compare_grid_coordinates(a, b)) == -_sign(compare_grid_coordinates(b, a))
            assert (compare_grid_coordinates(a, b) == 0) == (a == b)
        for a, b, c in itertools.product(coords, repeat=3):
            if compare_grid_coordinates(a, b) < 0 and compare_grid_coordinates(b, c) < 0:
                assert compare_grid_coordinates(a, c) < 0

    def test_matches_dataclass_order(self):
        a, b = GridCoordinates(1, 5), GridCoordinates(2, 0)
        assert (a < b) == (compare_grid_coordinates(a, b) < 0)


class TestSorting:
    """Sorting puts y varying fastest."""

    def test_y_varies_fastest(self):
        coords = [(x, y) for y in range(3) for x in range(2)]
        random.Random(0).shuffle(coords)
        ordered = sort_grid_coordinates(coords)
        assert ordered == [
            GridCoordinates(0, 0), GridCoordinates(0, 1), GridCoordinates(0, 2),
            GridCoordinates(1, 0), GridCoordinates(1, 1), GridCoordinates(1, 2),
        ]

    def test_sort_key_stable_across_calls(self):
        coords = [(2, 1), (0, 3), (2, 0), (0, 1)]
        assert sorted(coords, key=grid_sort_key) == sorted(coords, key=grid_sort_key)
        assert sorted(coords, key=grid_sort_key) == [(0, 1), (0, 3), (2, 0), (2, 1)]

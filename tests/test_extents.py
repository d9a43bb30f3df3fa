"""
Tests for dataset extent aggregation.
"""

import itertools

import numpy as np

from coverage_reducer import BoundingBox, Extent, aggregate_domain_extents

from conftest import make_variable


class TestAggregation:
    """Folding per-variable extents into dataset extents."""

    def test_vertical_union(self):
        variables = [
            make_variable("a", (0, 0, 1, 1), z_range=[0.0, 10.0]),
            make_variable("b", (0, 0, 1, 1), z_range=[5.0, 20.0]),
        ]
        extents = aggregate_domain_extents(variables)
        assert extents.vertical_extent == Extent(0.0, 20.0)

    def test_bounding_box_union(self):
        variables = [
            make_variable("a", (-10, 40, 0, 50)),
            make_variable("b", (-5, 45, 5, 60)),
        ]
        extents = aggregate_domain_extents(variables)
        assert extents.bounding_box == BoundingBox(-10, 40, 5, 60, "EPSG:4326")

    def test_no_temporal_domain_is_absent(self):
        variables = [
            make_variable("a", (0, 0, 1, 1), z_range=[0.0, 10.0]),
            make_variable("b", (0, 0, 2, 2)),
        ]
        extents = aggregate_domain_extents(variables)
        assert extents.time_extent is None
        assert extents.vertical_extent == Extent(0.0, 10.0)

    def test_no_vertical_domain_is_absent(self):
        extents = aggregate_domain_extents([make_variable("a", (0, 0, 1, 1))])
        assert extents.vertical_extent is None

    def test_temporal_union(self):
        variables = [
            make_variable("a", (0, 0, 1, 1), t_range=["2020-01-01", "2020-03-01"]),
            make_variable("b", (0, 0, 1, 1), t_range=["2019-12-15", "2020-02-01"]),
            make_variable("c", (0, 0, 1, 1)),
        ]
        extents = aggregate_domain_extents(variables)
        assert extents.time_extent.low == np.datetime64("2019-12-15", "ns")
        assert extents.time_extent.high == np.datetime64("2020-03-01", "ns")

    def test_empty_input_is_all_absent(self):
        extents = aggregate_domain_extents([])
        assert extents.bounding_box is None
        assert extents.vertical_extent is None
        assert extents.time_extent is None

    def test_order_independent(self):
        variables = [
            make_variable("a", (-10, 40, 0, 50), z_range=[0.0, 10.0], t_range=["2020-01-01"]),
            make_variable("b", (-5, 45, 5, 60), z_range=[5.0, 20.0]),
            make_variable("c", (2, -3, 4, 1), t_range=["2021-01-01", "2021-06-01"]),
        ]
        results = {aggregate_domain_extents(perm) for perm in itertools.permutations(variables)}
        assert len(results) == 1

    def test_accepts_generator(self):
        extents = aggregate_domain_extents(
            make_variable(str(i), (i, i, i + 1, i + 1)) for i in range(3)
        )
        assert extents.bounding_box == BoundingBox(0, 0, 3, 3)

"""
Tests for extents, bounding boxes and the plotting query.
"""

import numpy as np
import pytest

from coverage_reducer import BoundingBox, Extent, ParameterError, PlottingQuery


class TestExtent:
    """Closed intervals."""

    def test_contains_is_closed(self):
        extent = Extent(15.0, 25.0)
        assert extent.contains(15.0)
        assert extent.contains(25.0)
        assert not extent.contains(14.999)

    def test_inverted_rejected(self):
        with pytest.raises(ValueError):
            Extent(10.0, 0.0)

    def test_nan_rejected(self):
        with pytest.raises(ValueError):
            Extent(np.nan, 1.0)

    def test_union(self):
        assert Extent(0.0, 10.0).union(Extent(5.0, 20.0)) == Extent(0.0, 20.0)
        assert Extent(0.0, 10.0).union(None) == Extent(0.0, 10.0)

    def test_overlaps(self):
        assert Extent(0.0, 30.0).overlaps(Extent(15.0, 25.0))
        assert Extent(0.0, 10.0).overlaps(Extent(10.0, 12.0))
        assert not Extent(0.0, 10.0).overlaps(Extent(11.0, 12.0))

    def test_from_values(self):
        assert Extent.from_values([3.0, -1.0, 7.0]) == Extent(-1.0, 7.0)
        assert Extent.from_values([]) is None

    def test_time_extent(self):
        extent = Extent(np.datetime64("2020-01-01", "ns"), np.datetime64("2020-01-31", "ns"))
        assert extent.contains(np.datetime64("2020-01-15T06:00", "ns"))
        assert not extent.contains(np.datetime64("2020-02-01", "ns"))


class TestBoundingBox:
    """Horizontal boxes."""

    def test_default_crs(self):
        assert BoundingBox(0, 0, 1, 1).crs == "EPSG:4326"

    def test_contains(self):
        bbox = BoundingBox(-10.0, 40.0, 10.0, 60.0)
        assert bbox.contains(0.0, 50.0)
        assert bbox.contains(10.0, 60.0)
        assert not bbox.contains(11.0, 50.0)

    def test_union(self):
        merged = BoundingBox(0, 0, 1, 1).union(BoundingBox(-1, 0.5, 0.5, 3))
        assert merged == BoundingBox(-1, 0, 1, 3)

    def test_union_rejects_mixed_crs(self):
        with pytest.raises(ValueError):
            BoundingBox(0, 0, 1, 1).union(BoundingBox(0, 0, 1, 1, crs="EPSG:3857"))

    def test_inverted_rejected(self):
        with pytest.raises(ValueError):
            BoundingBox(1, 0, 0, 1)


class TestPlottingQuery:
    """Query normalization and validation."""

    def test_defaults_have_no_constraints(self):
        query = PlottingQuery()
        assert not query.has_vertical_constraint
        assert not query.has_temporal_constraint

    def test_tuple_extents_coerced(self):
        query = PlottingQuery(z_extent=(15, 25), t_extent=("2020-01-01", "2020-01-31"))
        assert query.z_extent == Extent(15.0, 25.0)
        assert query.t_extent.low == np.datetime64("2020-01-01", "ns")

    def test_target_time_normalized(self):
        query = PlottingQuery(target_t="2020-01-02T03:00:00")
        assert query.target_t == np.datetime64("2020-01-02T03:00", "ns")

    def test_non_finite_target_rejected(self):
        with pytest.raises(ParameterError):
            PlottingQuery(target_z=float("nan"))

    def test_nat_target_time_rejected(self):
        with pytest.raises(ParameterError):
            PlottingQuery(target_t=np.datetime64("NaT"))

    def test_utc_designator_accepted(self):
        query = PlottingQuery(target_t="2020-01-02T03:00:00Z")
        assert query.target_t == np.datetime64("2020-01-02T03:00", "ns")

    def test_inverted_z_extent_rejected(self):
        with pytest.raises(ParameterError):
            PlottingQuery(z_extent=(25, 15))

    def test_bad_extent_length_rejected(self):
        with pytest.raises(ParameterError):
            PlottingQuery(z_extent=(1, 2, 3))

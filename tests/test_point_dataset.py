"""
Tests for the point dataset, the in-memory reader, export and info helpers.
"""

import numpy as np
import pytest

from coverage_reducer import (
    BoundingBox, DataReadingError, Extent, FeatureReader, InMemoryFeatureReader,
    PlottingQuery, PointDataset, PointFeature, VariableNotFoundError,
    get_dataset_info, open_point_dataset, point_features_to_dataset,
)
from coverage_reducer.io.feature_reader import feature_matches_query

from conftest import make_profile, make_series, make_variable


@pytest.fixture
def variables():
    return [
        make_variable("temperature", (-40, 30, 0, 60), z_range=[0.0, 500.0], t_range=["2020-01-01", "2020-12-31"]),
        make_variable("salinity", (-10, 40, 20, 70), z_range=[-5.0, -5.0], t_range=["2020-01-01", "2020-01-04"]),
    ]


@pytest.fixture
def features():
    return [
        make_profile("p1", x=-30.0, y=45.0, temperature=np.array([20.0, 18.0, 15.0, 12.0])),
        make_profile("p2", x=-20.0, y=35.0, z_values=(0.0, 50.0), temperature=np.array([19.0, 14.0])),
        make_series("s1", x=10.0, y=50.0),
    ]


class TestPointDataset:
    """Dataset-level extents and map feature extraction."""

    def test_extents_aggregated(self, variables, features):
        ds = open_point_dataset("obs", variables, features)
        assert ds.bounding_box == BoundingBox(-40, 30, 20, 70)
        assert ds.vertical_extent == Extent(-5.0, 500.0)
        assert ds.time_extent.low == np.datetime64("2020-01-01", "ns")

    def test_explicit_extents_kept(self, variables, features):
        bbox = BoundingBox(0, 0, 1, 1)
        ds = PointDataset("obs", variables, InMemoryFeatureReader(features), bounding_box=bbox)
        assert ds.bounding_box == bbox
        assert ds.vertical_extent is None

    def test_extract_profiles(self, variables, features):
        ds = open_point_dataset("obs", variables, features)
        points = ds.extract_map_features(["temperature"], PlottingQuery(target_z=12.0))
        assert [p.id for p in points] == ["p1:10.0", "p2:0.0"]
        assert points[0].get_value("temperature") == 18.0

    def test_extract_respects_bbox(self, variables, features):
        ds = open_point_dataset("obs", variables, features)
        query = PlottingQuery(bbox=BoundingBox(-35, 40, -25, 50), target_z=0.0)
        points = ds.extract_map_features(["temperature", "salinity"], query)
        assert [p.id for p in points] == ["p1:0.0"]

    def test_extract_restricts_parameters(self, variables):
        profile = make_profile(
            "p3", temperature=np.array([1.0, 2.0, 3.0, 4.0]), salinity=np.array([5.0, 6.0, 7.0, 8.0])
        )
        ds = open_point_dataset("obs", variables, [profile])
        points = ds.extract_map_features(["salinity"], PlottingQuery(target_z=0.0))
        assert points[0].parameter_ids == ["salinity"]
        assert list(points[0].parameter_map) == ["salinity"]

    def test_extent_mismatch_omits(self, variables, features):
        """p1 spans 0-30 which overlaps 15-25, but the chosen level 10 does not."""
        ds = open_point_dataset("obs", variables, features)
        query = PlottingQuery(target_z=12.0, z_extent=(15.0, 25.0))
        assert ds.extract_map_features(["temperature"], query) == []

    def test_unknown_variable(self, variables, features):
        ds = open_point_dataset("obs", variables, features)
        with pytest.raises(VariableNotFoundError):
            ds.extract_map_features(["oxygen"])
        with pytest.raises(VariableNotFoundError):
            ds.get_variable_metadata("oxygen")

    def test_map_feature_type(self, variables, features):
        ds = open_point_dataset("obs", variables, features)
        assert ds.map_feature_type("temperature") is PointFeature

    def test_reader_errors_propagate(self, variables):
        class BrokenReader(FeatureReader):
            def read_features(self, var_ids, query):
                raise DataReadingError("broken store", "connection reset")

        ds = PointDataset("obs", variables, BrokenReader())
        with pytest.raises(DataReadingError):
            ds.extract_map_features(["temperature"])


class TestFeatureMatching:
    """Envelope filtering done by the in-memory reader."""

    def test_envelope_overlap_passes(self):
        profile = make_profile(z_values=(0.0, 30.0))
        assert feature_matches_query(profile, PlottingQuery(z_extent=(15.0, 25.0)))

    def test_envelope_disjoint_fails(self):
        profile = make_profile(z_values=(0.0, 30.0))
        assert not feature_matches_query(profile, PlottingQuery(z_extent=(40.0, 50.0)))

    def test_series_time_envelope(self):
        series = make_series()
        assert not feature_matches_query(series, PlottingQuery(t_extent=("2021-01-01", "2021-02-01")))
        assert feature_matches_query(series, PlottingQuery(t_extent=("2020-01-03", "2021-02-01")))


class TestExportAndInfo:
    """Export to xarray and dataset summaries."""

    def test_point_features_to_dataset(self, variables, features):
        ds = open_point_dataset("obs", variables, features)
        query = PlottingQuery(target_z=0.0, target_t="2020-01-02")
        points = ds.extract_map_features(["temperature", "salinity"], query)
        out = point_features_to_dataset(points)

        assert out.sizes["obs"] == 3
        np.testing.assert_array_equal(out["x"].values, [-30.0, -20.0, 10.0])
        np.testing.assert_array_equal(out["temperature"].values[:2], [20.0, 19.0])
        assert np.isnan(out["temperature"].values[2])
        assert out["salinity"].values[2] == 36.0
        assert out["z"].values[2] == -5.0
        assert out["time"].values[2] == np.datetime64("2020-01-02", "ns")
        assert out["temperature"].attrs["units"] == "degC"
        assert list(out["feature_id"].values) == [p.id for p in points]

    def test_empty_export(self):
        out = point_features_to_dataset([])
        assert out.sizes["obs"] == 0

    def test_dataset_info(self, variables, features):
        info = get_dataset_info(open_point_dataset("obs", variables, features))
        assert info["id"] == "obs"
        assert set(info["variables"]) == {"temperature", "salinity"}
        assert info["bounding_box"]["crs"] == "EPSG:4326"
        assert info["vertical_extent"] == {"low": -5.0, "high": 500.0}

    def test_dataset_info_without_variables(self):
        info = get_dataset_info(open_point_dataset("empty", [], []))
        assert info["bounding_box"] is None
        assert info["time_extent"] is None

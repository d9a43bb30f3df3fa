"""Shared fixtures for coverage_reducer tests."""

import numpy as np
import pytest

from coverage_reducer import (
    BoundingBox, HorizontalDomain, HorizontalPosition, Parameter, PointSeriesFeature,
    ProfileFeature, TemporalDomain, VariableMetadata, VerticalDomain, VerticalPosition,
)


def make_profile(id="p1", z_values=(0.0, 10.0, 20.0, 30.0), x=-30.0, y=45.0, time="2020-06-01T12:00:00", **values):
    """Build a profile with a temperature parameter unless other values are given."""
    if not values:
        values = {"temperature": np.linspace(20.0, 10.0, len(z_values))}
    return ProfileFeature(
        id=id,
        name=f"Profile {id}",
        description=f"CTD cast {id}",
        horizontal_position=HorizontalPosition(x, y),
        parameter_map={k: Parameter(k, title=k.title(), units="degC") for k in values},
        values=values,
        z_values=np.asarray(z_values, dtype=float),
        time=time,
        feature_properties={"platform": {"name": "ship", "cruise": 7}},
    )


def make_series(id="s1", times=None, z=-5.0, x=10.0, y=50.0, **values):
    """Build a daily point series with a salinity parameter unless other values are given."""
    if times is None:
        times = np.arange("2020-01-01", "2020-01-05", dtype="datetime64[D]")
    times = np.asarray(times)
    if not values:
        values = {"salinity": np.arange(len(times), dtype=float) + 35.0}
    return PointSeriesFeature(
        id=id,
        name=f"Mooring {id}",
        description=f"Mooring record {id}",
        horizontal_position=HorizontalPosition(x, y),
        parameter_map={k: Parameter(k, units="psu") for k in values},
        values=values,
        times=times,
        vertical_position=VerticalPosition(z),
        feature_properties={"station": id},
    )


def make_variable(id, bbox, z_range=None, t_range=None):
    """Build variable metadata from raw ranges."""
    return VariableMetadata(
        id=id,
        horizontal_domain=HorizontalDomain(BoundingBox(*bbox)),
        vertical_domain=VerticalDomain.from_values(z_range) if z_range is not None else None,
        temporal_domain=TemporalDomain.from_values(t_range) if t_range is not None else None,
        parameter=Parameter(id, title=id.title(), units="1"),
    )


@pytest.fixture
def profile():
    return make_profile()


@pytest.fixture
def series():
    return make_series()

"""
Example: Reducing Profiles and Time Series to Map Points

This example builds a small in-memory dataset of CTD profiles and a mooring
time series, then extracts plottable points at a requested depth and time.
"""

import numpy as np
import xarray as xr

import coverage_reducer as cr

# ============================================================================
# Example 1: Build a Dataset
# ============================================================================

print("="*70)
print("Example 1: Build a Point Dataset")
print("="*70)

temperature = cr.Parameter("temperature", title="Sea water temperature", units="degC",
                           standard_name="sea_water_temperature")

profiles = [
    cr.ProfileFeature(
        id=f"cast-{i}",
        name=f"Cast {i}",
        description=f"CTD cast {i}",
        horizontal_position=cr.HorizontalPosition(-30.0 + i, 45.0),
        parameter_map={"temperature": temperature},
        values={"temperature": np.linspace(18.0 - i, 4.0, 6)},
        z_values=np.linspace(0.0, 500.0, 6),
        time="2020-06-01T12:00:00",
    )
    for i in range(3)
]

variables = [
    cr.VariableMetadata(
        id="temperature",
        horizontal_domain=cr.HorizontalDomain(cr.BoundingBox(-30.0, 45.0, -28.0, 45.0)),
        vertical_domain=cr.VerticalDomain.from_values([0.0, 500.0]),
        temporal_domain=cr.TemporalDomain.from_values(["2020-06-01T12:00:00"]),
        parameter=temperature,
    )
]

dataset = cr.open_point_dataset("ctd-survey", variables, profiles)
print(cr.get_dataset_info(dataset))

# ============================================================================
# Example 2: Extract Points at a Depth
# ============================================================================

print("\n" + "="*70)
print("Example 2: Points Nearest to 120 m")
print("="*70)

query = cr.PlottingQuery(target_z=120.0, z_extent=(50.0, 150.0))
for point in dataset.extract_map_features(["temperature"], query):
    print(f"  {point.id}: {point.get_value('temperature'):.2f} degC")

# ============================================================================
# Example 3: Profiles from a Gridded Field
# ============================================================================

print("\n" + "="*70)
print("Example 3: Profile Extraction from a Grid")
print("="*70)

grid = xr.Dataset(
    {"temperature": (("z", "y", "x"), np.random.default_rng(0).normal(10, 2, (4, 3, 3)))},
    coords={"z": [0.0, 10.0, 50.0, 100.0], "y": [44.0, 45.0, 46.0], "x": [-31.0, -30.0, -29.0]},
)
model = cr.GridSeriesFeature("model", grid, name="Model")
profile = model.extract_profile_feature(cr.HorizontalPosition(-30.2, 45.1))
point = cr.reduce_profile(profile, cr.PlottingQuery())
print(f"  Surface value at {point.position.horizontal}: {point.get_value('temperature'):.2f}")

# ============================================================================
# Example 4: Export for Plotting
# ============================================================================

print("\n" + "="*70)
print("Example 4: Export to xarray")
print("="*70)

points = dataset.extract_map_features(["temperature"], cr.PlottingQuery(target_z=0.0))
print(cr.point_features_to_dataset(points))

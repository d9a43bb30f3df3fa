"""
Coverage Reducer Point Export

This module converts reduced point features into an xarray Dataset along a
single observation dimension, ready for plotting or writing to NetCDF.
"""

import logging
from pathlib import Path
from typing import Sequence, Union
import numpy as np
import xarray as xr

from ..core.config import (
    X_DIM, Y_DIM, Z_DIM, TIME_DIM, OBS_DIM, FEATURE_ID_COORD, DATETIME_PRECISION,
)
from ..core.exceptions import DataProcessingError
from ..features.feature_types import PointFeature

logger = logging.getLogger('coverage_reducer.io.export')


def point_features_to_dataset(features: Sequence[PointFeature]) -> xr.Dataset:
    """
    Collect point features into one dataset.

    Coordinates along ``obs``: x, y, z (NaN where a point has no vertical
    position), time (NaT where it has no time) and feature_id. Every
    parameter becomes a float data variable, NaN where a point lacks it.
    Parameter metadata is copied into the variable attributes.

    Args:
        features: Points to collect

    Returns:
        xr.Dataset: Dataset with one entry per point
    """
    n = len(features)
    x = np.full(n, np.nan)
    y = np.full(n, np.nan)
    z = np.full(n, np.nan)
    time = np.full(n, np.datetime64('NaT'), dtype=f'datetime64[{DATETIME_PRECISION}]')
    ids = []
    param_attrs = {}

    for i, feature in enumerate(features):
        pos = feature.position
        x[i], y[i] = pos.horizontal.x, pos.horizontal.y
        if pos.vertical is not None:
            z[i] = pos.vertical.z
        if pos.time is not None:
            time[i] = pos.time
        ids.append(feature.id)
        for param_id, param in feature.parameter_map.items():
            param_attrs.setdefault(param_id, param)

    data_vars = {}
    param_ids = sorted({p for feature in features for p in feature.parameter_ids})
    for param_id in param_ids:
        column = np.full(n, np.nan)
        for i, feature in enumerate(features):
            if param_id in feature.values:
                column[i] = feature.get_value(param_id)

        attrs = {}
        param = param_attrs.get(param_id)
        if param is not None:
            attrs = {'long_name': param.title or param_id, 'units': param.units}
            if param.standard_name:
                attrs['standard_name'] = param.standard_name
        data_vars[param_id] = xr.DataArray(column, dims=(OBS_DIM,), attrs=attrs)

    ds = xr.Dataset(
        data_vars,
        coords={
            X_DIM: (OBS_DIM, x),
            Y_DIM: (OBS_DIM, y),
            Z_DIM: (OBS_DIM, z),
            TIME_DIM: (OBS_DIM, time),
            FEATURE_ID_COORD: (OBS_DIM, np.array(ids, dtype=object)),
        },
    )
    logger.debug("Exported %d points with %d parameters", n, len(param_ids))
    return ds


def write_point_features(features: Sequence[PointFeature], path: Union[str, Path]) -> Path:
    """
    Write point features to a NetCDF file.

    Requires the optional netCDF4 dependency.

    Returns:
        Path: The written file
    """
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    ds = point_features_to_dataset(features)
    try:
        ds.to_netcdf(out_path, engine='netcdf4')
    except (ImportError, ValueError) as e:
        raise DataProcessingError("NetCDF export", str(e))
    logger.info(f"Wrote {len(features)} points to {out_path}")
    return out_path

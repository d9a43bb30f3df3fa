"""
Gridded Series Feature

This module wraps a 4-D gridded field held in an xarray Dataset with dimensions
(time, z, y, x) and extracts the lower-dimensional discrete features from it:
vertical profiles, point time series and horizontal grids.
"""

import logging
from typing import Dict, Iterable, Optional, Sequence, Union
import numpy as np
import xarray as xr

from ..core.config import X_DIM, Y_DIM, Z_DIM, TIME_DIM, DEFAULT_CRS, FEATURE_ID_SEPARATOR
from ..core.core_types import (
    Extent, HorizontalPosition, Parameter, TimeValue, VerticalCrs, VerticalPosition,
)
from ..core.exceptions import (
    CoordinateError, DataProcessingError, ParameterError, check_variables_availability,
)
from ..coordinates.time_handler import closest_time_index, normalize_time_value
from ..coordinates.vertical_handler import closest_elevation_index
from .feature_types import GridFeature, PointSeriesFeature, ProfileFeature

logger = logging.getLogger('coverage_reducer.features.grid_series')


class GridSeriesFeature:
    """
    Multidimensional gridded data.

    Every data variable of the wrapped dataset is one parameter. Variables may
    omit the z or time dimension. Parameter metadata is read from the
    ``long_name``, ``units`` and ``standard_name`` attributes.

    Args:
        id: Feature identifier
        dataset: Dataset with x/y dimension coordinates and optional z/time
        name: Human-readable name
        description: Human-readable description
        vertical_crs: Vertical reference system of the z coordinate
        crs: Horizontal reference system of the x/y coordinates
    """

    def __init__(
        self,
        id: str,
        dataset: xr.Dataset,
        name: str = "",
        description: str = "",
        vertical_crs: Optional[VerticalCrs] = None,
        crs: str = DEFAULT_CRS,
    ):
        for dim in (X_DIM, Y_DIM):
            if dim not in dataset.coords:
                raise CoordinateError(dim, "Gridded dataset needs a dimension coordinate")
        self.id = id
        self.dataset = dataset
        self.name = name or id
        self.description = description or self.name
        self.vertical_crs = vertical_crs or VerticalCrs()
        self.crs = crs

    @property
    def parameter_ids(self):
        return list(self.dataset.data_vars)

    @property
    def parameter_map(self) -> Dict[str, Parameter]:
        params = {}
        for var_id, var in self.dataset.data_vars.items():
            params[var_id] = Parameter(
                id=var_id,
                title=str(var.attrs.get('long_name', var_id)),
                description=str(var.attrs.get('description', '')),
                units=str(var.attrs.get('units', '')),
                standard_name=var.attrs.get('standard_name'),
            )
        return params

    def _select_members(self, members: Optional[Iterable[str]]) -> xr.Dataset:
        if members is None:
            return self.dataset
        members = list(members)
        check_variables_availability(members, self.parameter_ids)
        return self.dataset[members]

    def _parameter_map_for(self, ds: xr.Dataset) -> Dict[str, Parameter]:
        params = self.parameter_map
        return {var_id: params[var_id] for var_id in ds.data_vars}

    def _nearest_horizontal(self, ds: xr.Dataset, position: HorizontalPosition) -> xr.Dataset:
        if position.crs != self.crs:
            raise CoordinateError(
                "position", f"Position in {position.crs} does not match grid CRS {self.crs}"
            )
        return ds.sel({X_DIM: position.x, Y_DIM: position.y}, method='nearest')

    def _nearest_time(self, ds: xr.Dataset, time: Optional[TimeValue]) -> xr.Dataset:
        if TIME_DIM not in ds.dims:
            return ds
        if time is None:
            return ds.isel({TIME_DIM: closest_time_index(ds[TIME_DIM].values)})
        return ds.sel({TIME_DIM: normalize_time_value(time)}, method='nearest')

    def _nearest_level(self, ds: xr.Dataset, z: Optional[Union[float, VerticalPosition]]) -> xr.Dataset:
        if Z_DIM not in ds.dims:
            return ds
        if z is None:
            index = closest_elevation_index(ds[Z_DIM].values, vertical_crs=self.vertical_crs)
            return ds.isel({Z_DIM: index})
        if isinstance(z, VerticalPosition):
            z = z.z
        return ds.sel({Z_DIM: float(z)}, method='nearest')

    def _onto_target_axes(
        self,
        ds: xr.Dataset,
        x_values: Optional[Sequence[float]],
        y_values: Optional[Sequence[float]],
    ) -> xr.Dataset:
        targets = {}
        for dim, values in ((X_DIM, x_values), (Y_DIM, y_values)):
            if values is None:
                continue
            axis = np.asarray(values, dtype=float)
            if axis.ndim != 1 or axis.size == 0:
                raise ParameterError(f"{dim}_values", str(values), "Target axis must be a non-empty 1-D sequence")
            targets[dim] = axis
        if not targets:
            return ds
        return ds.sel(targets, method='nearest').assign_coords(targets)

    def extract_profile_feature(
        self,
        position: HorizontalPosition,
        time: Optional[TimeValue] = None,
        members: Optional[Iterable[str]] = None,
    ) -> ProfileFeature:
        """
        Extract the vertical profile nearest to a position and time.

        Args:
            position: Horizontal position of the desired profile
            time: Time of the desired profile (default: closest to now)
            members: Variables to extract (default: all)

        Returns:
            ProfileFeature: The extracted profile
        """
        ds = self._select_members(members)
        if Z_DIM not in ds.dims:
            raise DataProcessingError("profile extraction", f"Dataset has no '{Z_DIM}' dimension")

        ds = self._nearest_time(self._nearest_horizontal(ds, position), time)
        actual = HorizontalPosition(float(ds[X_DIM]), float(ds[Y_DIM]), self.crs)
        feature_time = normalize_time_value(ds[TIME_DIM].values[()]) if TIME_DIM in ds.coords else None

        z_values = ds[Z_DIM].values
        values = {
            var_id: np.broadcast_to(var.values, z_values.shape).copy()
            if Z_DIM not in var.dims else var.transpose(Z_DIM).values
            for var_id, var in ds.data_vars.items()
        }
        logger.debug("Extracted profile at (%s, %s) from %s", actual.x, actual.y, self.id)

        return ProfileFeature(
            id=f"{self.id}{FEATURE_ID_SEPARATOR}profile{FEATURE_ID_SEPARATOR}{actual.x},{actual.y}",
            name=f"Profile from {self.name}",
            description=f"Vertical profile extracted at ({actual.x}, {actual.y}) from {self.description}",
            horizontal_position=actual,
            parameter_map=self._parameter_map_for(ds),
            values=values,
            z_values=z_values,
            vertical_crs=self.vertical_crs,
            time=feature_time,
        )

    def extract_point_series_feature(
        self,
        position: HorizontalPosition,
        z: Optional[Union[float, VerticalPosition]] = None,
        t_extent: Optional[Extent] = None,
        members: Optional[Iterable[str]] = None,
    ) -> PointSeriesFeature:
        """
        Extract the time series nearest to a position and level.

        Args:
            position: Horizontal position of the desired series
            z: Vertical coordinate of the desired series (default: closest to surface)
            t_extent: Time range to keep (default: all times)
            members: Variables to extract (default: all)

        Returns:
            PointSeriesFeature: The extracted time series
        """
        ds = self._select_members(members)
        if TIME_DIM not in ds.dims:
            raise DataProcessingError("point series extraction", f"Dataset has no '{TIME_DIM}' dimension")

        ds = self._nearest_level(self._nearest_horizontal(ds, position), z)
        if t_extent is not None:
            ds = ds.sel({TIME_DIM: slice(t_extent.low, t_extent.high)})

        actual = HorizontalPosition(float(ds[X_DIM]), float(ds[Y_DIM]), self.crs)
        vertical = (
            VerticalPosition(float(ds[Z_DIM]), self.vertical_crs) if Z_DIM in ds.coords else None
        )
        times = ds[TIME_DIM].values
        values = {
            var_id: np.broadcast_to(var.values, times.shape).copy()
            if TIME_DIM not in var.dims else var.transpose(TIME_DIM).values
            for var_id, var in ds.data_vars.items()
        }

        return PointSeriesFeature(
            id=f"{self.id}{FEATURE_ID_SEPARATOR}series{FEATURE_ID_SEPARATOR}{actual.x},{actual.y}",
            name=f"Time series from {self.name}",
            description=f"Time series extracted at ({actual.x}, {actual.y}) from {self.description}",
            horizontal_position=actual,
            parameter_map=self._parameter_map_for(ds),
            values=values,
            times=times,
            vertical_position=vertical,
        )

    def extract_grid_feature(
        self,
        z: Optional[Union[float, VerticalPosition]] = None,
        time: Optional[TimeValue] = None,
        members: Optional[Iterable[str]] = None,
        x_values: Optional[Sequence[float]] = None,
        y_values: Optional[Sequence[float]] = None,
    ) -> GridFeature:
        """
        Extract a horizontal slice at the level and time nearest to those requested.

        When target axes are given, each target cell takes the value of the
        nearest native cell and the result is laid out on the target axes.

        Args:
            z: Vertical coordinate (default: closest to surface)
            time: Time (default: closest to now)
            members: Variables to extract (default: all)
            x_values: Target x axis (default: native x axis)
            y_values: Target y axis (default: native y axis)

        Returns:
            GridFeature: The extracted horizontal field

        Raises:
            ParameterError: If a target axis is empty or not one-dimensional
        """
        ds = self._nearest_time(self._nearest_level(self._select_members(members), z), time)
        ds = self._onto_target_axes(ds, x_values, y_values)

        vertical = (
            VerticalPosition(float(ds[Z_DIM]), self.vertical_crs) if Z_DIM in ds.coords else None
        )
        feature_time = normalize_time_value(ds[TIME_DIM].values[()]) if TIME_DIM in ds.coords else None
        values = {
            var_id: var.transpose(Y_DIM, X_DIM).values
            for var_id, var in ds.data_vars.items()
        }

        return GridFeature(
            id=f"{self.id}{FEATURE_ID_SEPARATOR}grid",
            name=f"Horizontal field from {self.name}",
            description=f"Horizontal slice extracted from {self.description}",
            parameter_map=self._parameter_map_for(ds),
            values=values,
            x_values=ds[X_DIM].values,
            y_values=ds[Y_DIM].values,
            vertical_position=vertical,
            time=feature_time,
            crs=self.crs,
        )

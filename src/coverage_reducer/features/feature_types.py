"""
Discrete Feature Types

This module defines the closed set of discrete feature variants handled by
the package. Every variant carries an identity, a name and description, a
horizontal position, a parameter map, per-parameter value arrays and a
mapping of free-form feature properties.

- ProfileFeature: values along a vertical axis at a fixed time
- PointSeriesFeature: values along a time axis at a fixed vertical position
- PointFeature: single values at one 4-D position
- GridFeature: 2D horizontal field at a fixed vertical position and time
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Tuple
import numpy as np

from ..core.config import DEFAULT_CRS
from ..core.core_types import (
    BoundingBox, Extent, GeoPosition, GridCoordinates, HorizontalPosition,
    Parameter, VerticalCrs, VerticalPosition,
)
from ..core.exceptions import CoordinateError, VariableNotFoundError
from ..coordinates.grid_ordering import sort_grid_coordinates
from ..coordinates.time_handler import normalize_time_array, normalize_time_value
from ..coordinates.vertical_handler import as_vertical_axis

# ============================================================================
# Base Feature
# ============================================================================

@dataclass(kw_only=True)
class DiscreteFeature:
    """
    Common fields of every discrete feature.

    Attributes:
        id: Feature identifier
        name: Human-readable name
        description: Human-readable description
        horizontal_position: Location of the feature
        parameter_map: Parameter descriptions keyed by parameter id
        values: Value arrays keyed by parameter id
        feature_properties: Free-form string-keyed properties
    """
    id: str
    name: str = ""
    description: str = ""
    horizontal_position: Optional[HorizontalPosition] = None
    parameter_map: Dict[str, Parameter] = field(default_factory=dict)
    values: Dict[str, np.ndarray] = field(default_factory=dict)
    feature_properties: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        self.values = {
            param_id: np.asarray(arr).reshape(-1) if np.ndim(arr) <= 1 else np.asarray(arr)
            for param_id, arr in self.values.items()
        }

    @property
    def parameter_ids(self) -> List[str]:
        """Ids of all parameters carried by this feature."""
        return list(self.values)

    def get_values(self, param_id: str) -> np.ndarray:
        """Get the value array for one parameter."""
        try:
            return self.values[param_id]
        except KeyError:
            raise VariableNotFoundError([param_id], self.parameter_ids) from None

    def _check_lengths(self, axis_name: str, expected: int) -> None:
        for param_id, arr in self.values.items():
            if arr.shape != (expected,):
                raise ValueError(
                    f"Values of '{param_id}' have shape {arr.shape}, "
                    f"expected ({expected},) to match the {axis_name} axis of feature '{self.id}'"
                )

    def _require_position(self) -> None:
        if self.horizontal_position is None:
            raise ValueError(f"Feature '{self.id}' needs a horizontal position")

# ============================================================================
# Feature Variants
# ============================================================================

@dataclass(kw_only=True)
class ProfileFeature(DiscreteFeature):
    """Vertical profile: values along the z axis at a single time."""
    z_values: np.ndarray
    vertical_crs: VerticalCrs = field(default_factory=VerticalCrs)
    time: Optional[np.datetime64] = None

    def __post_init__(self):
        super().__post_init__()
        self._require_position()
        self.z_values = as_vertical_axis(self.z_values)
        if self.time is not None:
            self.time = normalize_time_value(self.time)
        self._check_lengths("vertical", self.z_values.size)

    @property
    def vertical_extent(self) -> Optional[Extent]:
        """Envelope of the profile's levels."""
        return Extent.from_values(self.z_values)


@dataclass(kw_only=True)
class PointSeriesFeature(DiscreteFeature):
    """Time series: values along the time axis at a fixed vertical position."""
    times: np.ndarray
    vertical_position: Optional[VerticalPosition] = None

    def __post_init__(self):
        super().__post_init__()
        self._require_position()
        self.times = normalize_time_array(self.times)
        if np.isnat(self.times).any():
            raise CoordinateError("time", f"Time axis of feature '{self.id}' contains NaT values")
        self._check_lengths("time", self.times.size)

    @property
    def time_extent(self) -> Optional[Extent]:
        """Envelope of the series' times."""
        return Extent.from_values(self.times)


@dataclass(kw_only=True)
class PointFeature(DiscreteFeature):
    """Single measurement of every parameter at one 4-D position."""
    position: GeoPosition

    def __post_init__(self):
        super().__post_init__()
        if self.horizontal_position is None:
            self.horizontal_position = self.position.horizontal
        self._check_lengths("point", 1)

    def get_value(self, param_id: str) -> Any:
        """Scalar value of one parameter."""
        return self.get_values(param_id)[0]


@dataclass(kw_only=True)
class GridFeature(DiscreteFeature):
    """
    Horizontal field on a rectilinear grid.

    Value arrays are shaped (ny, nx), indexed [y, x].
    """
    x_values: np.ndarray
    y_values: np.ndarray
    vertical_position: Optional[VerticalPosition] = None
    time: Optional[np.datetime64] = None
    crs: str = DEFAULT_CRS

    def __post_init__(self):
        self.x_values = np.asarray(self.x_values, dtype=np.float64).reshape(-1)
        self.y_values = np.asarray(self.y_values, dtype=np.float64).reshape(-1)
        self.values = {param_id: np.asarray(arr) for param_id, arr in self.values.items()}
        if self.time is not None:
            self.time = normalize_time_value(self.time)

        shape = (self.y_values.size, self.x_values.size)
        for param_id, arr in self.values.items():
            if arr.shape != shape:
                raise ValueError(
                    f"Values of '{param_id}' have shape {arr.shape}, expected {shape}"
                )

    @property
    def shape(self) -> Tuple[int, int]:
        return self.y_values.size, self.x_values.size

    @property
    def bounding_box(self) -> Optional[BoundingBox]:
        if self.x_values.size == 0 or self.y_values.size == 0:
            return None
        return BoundingBox(
            float(self.x_values.min()), float(self.y_values.min()),
            float(self.x_values.max()), float(self.y_values.max()),
            self.crs,
        )

    def grid_coordinates(self) -> List[GridCoordinates]:
        """All cell indices in canonical order (y varying fastest)."""
        ny, nx = self.shape
        return sort_grid_coordinates((x, y) for y in range(ny) for x in range(nx))

    def iter_cells(self) -> Iterator[Tuple[GridCoordinates, HorizontalPosition, Dict[str, Any]]]:
        """Yield (indices, position, values) for every cell in canonical order."""
        for coords in self.grid_coordinates():
            position = HorizontalPosition(
                float(self.x_values[coords.x]), float(self.y_values[coords.y]), self.crs
            )
            cell_values = {
                param_id: arr[coords.y, coords.x] for param_id, arr in self.values.items()
            }
            yield coords, position, cell_values

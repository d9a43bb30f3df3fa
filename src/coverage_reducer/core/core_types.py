"""
Coverage Reducer Type Definitions and Data Classes

This module defines the value types shared across the codebase: extents,
bounding boxes, positions, domains, variable metadata and the plotting query.
All of them are immutable except ``PlottingQuery``, which normalizes its
inputs once at construction.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Tuple, Union, Any, Sequence
from datetime import datetime
import math
import numpy as np

from .config import DEFAULT_CRS, DEFAULT_VERTICAL_UNITS
from .exceptions import ParameterError

# ============================================================================
# Type Aliases
# ============================================================================

TimeValue = Union[str, datetime, np.datetime64]
CoordinateRange = Tuple[float, float]
TimeRange = Tuple[TimeValue, TimeValue]
ExtentValue = Union[float, np.datetime64]

# ============================================================================
# Extents
# ============================================================================

@dataclass(frozen=True)
class Extent:
    """
    Closed interval ``[low, high]`` over an ordered quantity.

    Works for plain floats and for ``numpy.datetime64`` values. An undefined
    extent is represented by ``None`` at the use site, never by an inverted
    or zero-width interval.

    Attributes:
        low: Lower bound (inclusive)
        high: Upper bound (inclusive)
    """
    low: Any
    high: Any

    def __post_init__(self):
        """Validate extent ordering."""
        if not self.low <= self.high:
            raise ValueError(f"Extent low must be <= high, got [{self.low}, {self.high}]")

    @classmethod
    def from_values(cls, values: Sequence[ExtentValue]) -> Optional[Extent]:
        """Build the extent spanning ``values``, or None if there are none."""
        arr = np.asarray(values)
        if arr.size == 0:
            return None
        return cls(arr.min(), arr.max())

    def contains(self, value: ExtentValue) -> bool:
        """Check if a value lies inside the closed interval."""
        return bool(self.low <= value <= self.high)

    def overlaps(self, other: Extent) -> bool:
        """Check if two extents share at least one value."""
        return bool(self.low <= other.high and other.low <= self.high)

    def union(self, other: Optional[Extent]) -> Extent:
        """Smallest extent covering both extents."""
        if other is None:
            return self
        return Extent(min(self.low, other.low), max(self.high, other.high))

# ============================================================================
# Horizontal Geometry
# ============================================================================

@dataclass(frozen=True)
class BoundingBox:
    """
    Axis-aligned rectangle in horizontal coordinate space.

    Attributes:
        min_x: Western (minimum x) bound
        min_y: Southern (minimum y) bound
        max_x: Eastern (maximum x) bound
        max_y: Northern (maximum y) bound
        crs: Coordinate reference system identifier
    """
    min_x: float
    min_y: float
    max_x: float
    max_y: float
    crs: str = DEFAULT_CRS

    def __post_init__(self):
        """Validate bounding box ordering."""
        if not self.min_x <= self.max_x:
            raise ValueError(f"min_x must be <= max_x, got {self.min_x} > {self.max_x}")
        if not self.min_y <= self.max_y:
            raise ValueError(f"min_y must be <= max_y, got {self.min_y} > {self.max_y}")

    @property
    def x_extent(self) -> Extent:
        return Extent(self.min_x, self.max_x)

    @property
    def y_extent(self) -> Extent:
        return Extent(self.min_y, self.max_y)

    def contains(self, x: float, y: float) -> bool:
        """Check if a point lies inside (or on the edge of) the box."""
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y

    def intersects(self, other: BoundingBox) -> bool:
        """Check if two boxes share any area or edge."""
        return self.x_extent.overlaps(other.x_extent) and self.y_extent.overlaps(other.y_extent)

    def union(self, other: BoundingBox) -> BoundingBox:
        """Smallest box covering both boxes. Both must share a CRS."""
        if other.crs != self.crs:
            raise ValueError(f"Cannot union bounding boxes in {self.crs} and {other.crs}")
        return BoundingBox(
            min(self.min_x, other.min_x),
            min(self.min_y, other.min_y),
            max(self.max_x, other.max_x),
            max(self.max_y, other.max_y),
            self.crs,
        )

# ============================================================================
# Positions
# ============================================================================

@dataclass(frozen=True)
class VerticalCrs:
    """
    Vertical coordinate reference system.

    Attributes:
        units: Units of the vertical axis (e.g. "m", "dbar")
        positive_up: True for heights, False for depths
        pressure: True if the axis is a pressure axis (surface = max value)
    """
    units: str = DEFAULT_VERTICAL_UNITS
    positive_up: bool = True
    pressure: bool = False

@dataclass(frozen=True)
class HorizontalPosition:
    """Location in horizontal coordinate space."""
    x: float
    y: float
    crs: str = DEFAULT_CRS

@dataclass(frozen=True)
class VerticalPosition:
    """Single vertical coordinate with its reference system."""
    z: float
    crs: VerticalCrs = field(default_factory=VerticalCrs)

@dataclass(frozen=True)
class GeoPosition:
    """Four-dimensional position (horizontal + optional vertical + optional time)."""
    horizontal: HorizontalPosition
    vertical: Optional[VerticalPosition] = None
    time: Optional[np.datetime64] = None

# ============================================================================
# Domains and Variable Metadata
# ============================================================================

@dataclass(frozen=True)
class HorizontalDomain:
    """Horizontal domain of a variable."""
    bounding_box: BoundingBox

@dataclass(frozen=True)
class VerticalDomain:
    """Vertical domain of a variable."""
    extent: Extent
    vertical_crs: VerticalCrs = field(default_factory=VerticalCrs)

    @classmethod
    def from_values(cls, values: Sequence[float], vertical_crs: Optional[VerticalCrs] = None) -> VerticalDomain:
        extent = Extent.from_values(np.asarray(values, dtype=np.float64))
        if extent is None:
            raise ValueError("Vertical domain needs at least one level")
        return cls(extent, vertical_crs or VerticalCrs())

@dataclass(frozen=True)
class TemporalDomain:
    """Temporal domain of a variable."""
    extent: Extent

    @classmethod
    def from_values(cls, values: Sequence[TimeValue]) -> TemporalDomain:
        from ..coordinates.time_handler import normalize_time_array

        extent = Extent.from_values(normalize_time_array(values))
        if extent is None:
            raise ValueError("Temporal domain needs at least one time")
        return cls(extent)

@dataclass(frozen=True)
class Parameter:
    """
    Description of an observable quantity.

    Attributes:
        id: Parameter identifier (matches the keys of feature value maps)
        title: Short human-readable title
        description: Longer description
        units: Physical units
        standard_name: CF convention standard name (if applicable)
    """
    id: str
    title: str = ""
    description: str = ""
    units: str = ""
    standard_name: Optional[str] = None

@dataclass(frozen=True)
class VariableMetadata:
    """
    Metadata for one variable of a dataset.

    The horizontal domain is always present; vertical and temporal domains
    are optional (e.g. a surface-only or time-invariant variable).
    """
    id: str
    horizontal_domain: HorizontalDomain
    vertical_domain: Optional[VerticalDomain] = None
    temporal_domain: Optional[TemporalDomain] = None
    parameter: Optional[Parameter] = None

# ============================================================================
# Grid Indices
# ============================================================================

@dataclass(frozen=True, order=True)
class GridCoordinates:
    """
    Integer (x, y) index pair on a 2D grid.

    Instances order by x first and y second, so sorting a collection puts
    y varying fastest.
    """
    x: int
    y: int

# ============================================================================
# Plotting Query
# ============================================================================

def _coerce_z_extent(z_extent: Union[Extent, CoordinateRange, None]) -> Optional[Extent]:
    if z_extent is None or isinstance(z_extent, Extent):
        return z_extent
    if len(z_extent) != 2:
        raise ParameterError("z_extent", str(z_extent), "Must contain exactly 2 values")
    try:
        return Extent(float(z_extent[0]), float(z_extent[1]))
    except ValueError as e:
        raise ParameterError("z_extent", str(z_extent), str(e))

def _coerce_t_extent(t_extent: Union[Extent, TimeRange, None]) -> Optional[Extent]:
    from ..coordinates.time_handler import normalize_time_value

    if t_extent is None:
        return None
    if isinstance(t_extent, Extent):
        low, high = t_extent.low, t_extent.high
    else:
        if len(t_extent) != 2:
            raise ParameterError("t_extent", str(t_extent), "Must contain exactly 2 values")
        low, high = t_extent
    try:
        return Extent(normalize_time_value(low), normalize_time_value(high))
    except ValueError as e:
        raise ParameterError("t_extent", str(t_extent), str(e))

@dataclass
class PlottingQuery:
    """
    Caller-supplied parameters driving a reduction.

    A target selects the sample index along the reducible axis; an extent
    validates the value found at that index. Both may be given together.
    Horizontal constraints are handed to feature readers untouched.

    Attributes:
        bbox: Horizontal bounding box constraint
        target_position: Horizontal position of interest
        target_z: Target vertical coordinate
        z_extent: Allowed vertical range, as an Extent or (low, high)
        target_t: Target time
        t_extent: Allowed time range, as an Extent or (start, end)
    """
    bbox: Optional[BoundingBox] = None
    target_position: Optional[HorizontalPosition] = None
    target_z: Optional[float] = None
    z_extent: Optional[Union[Extent, CoordinateRange]] = None
    target_t: Optional[TimeValue] = None
    t_extent: Optional[Union[Extent, TimeRange]] = None

    def __post_init__(self):
        """Validate and normalize query parameters."""
        from ..coordinates.time_handler import normalize_time_value

        if self.target_z is not None:
            if not math.isfinite(self.target_z):
                raise ParameterError("target_z", str(self.target_z), "Must be a finite number")
            self.target_z = float(self.target_z)

        self.z_extent = _coerce_z_extent(self.z_extent)
        self.t_extent = _coerce_t_extent(self.t_extent)

        if self.target_t is not None:
            self.target_t = normalize_time_value(self.target_t)
            if np.isnat(self.target_t):
                raise ParameterError("target_t", str(self.target_t), "Must be a valid time, not NaT")

    @property
    def has_vertical_constraint(self) -> bool:
        """Check if any vertical selection is defined."""
        return self.target_z is not None or self.z_extent is not None

    @property
    def has_temporal_constraint(self) -> bool:
        """Check if any temporal selection is defined."""
        return self.target_t is not None or self.t_extent is not None

"""
Coverage Reducer Vertical Coordinate Processing

This module handles nearest-level selection along the vertical axis of a
profile, including the "closest to the surface" default.
"""

from typing import Optional, Sequence
import numpy as np

from ..core.config import SURFACE_ELEVATION, NOT_FOUND
from ..core.core_types import VerticalCrs
from ..core.exceptions import CoordinateError

# ============================================================================
# Axis Validation
# ============================================================================

def as_vertical_axis(z_values: Sequence[float]) -> np.ndarray:
    """
    Convert vertical coordinate values to a validated float array.

    Args:
        z_values: Vertical coordinate values

    Returns:
        np.ndarray: One-dimensional float64 array

    Raises:
        CoordinateError: If any value is NaN or infinite
    """
    axis = np.asarray(z_values, dtype=np.float64).reshape(-1)
    if not np.isfinite(axis).all():
        raise CoordinateError("z", "Vertical axis contains non-finite values")
    return axis

# ============================================================================
# Nearest-Level Selection
# ============================================================================

def get_closest_elevation_to_surface(
    z_values: Sequence[float],
    vertical_crs: Optional[VerticalCrs] = None
) -> Optional[float]:
    """
    Find the vertical value closest to the surface.

    For pressure axes the surface is the largest value. For height and depth
    axes it is the value closest to SURFACE_ELEVATION, whichever way the axis
    is positive.

    Args:
        z_values: Vertical coordinate values
        vertical_crs: Vertical reference system of the axis

    Returns:
        Optional[float]: Closest value, or None for an empty axis
    """
    axis = as_vertical_axis(z_values)
    index = _surface_index(axis, vertical_crs)
    if index == NOT_FOUND:
        return None
    return float(axis[index])

def _surface_index(axis: np.ndarray, vertical_crs: Optional[VerticalCrs]) -> int:
    if axis.size == 0:
        return NOT_FOUND
    if vertical_crs is not None and vertical_crs.pressure:
        return int(np.argmax(axis))
    return int(np.argmin(np.abs(axis - SURFACE_ELEVATION)))

def get_index_of_closest_elevation_to(target: float, z_values: Sequence[float]) -> int:
    """
    Find the index of the vertical value closest to a target.

    When two levels are equally close, the lowest index wins.

    Args:
        target: Target vertical coordinate
        z_values: Vertical coordinate values

    Returns:
        int: Index into ``z_values``, or NOT_FOUND if it is empty
    """
    axis = as_vertical_axis(z_values)
    if axis.size == 0:
        return NOT_FOUND
    return int(np.argmin(np.abs(axis - float(target))))

def closest_elevation_index(
    z_values: Sequence[float],
    target_z: Optional[float] = None,
    vertical_crs: Optional[VerticalCrs] = None
) -> int:
    """
    Select the best-matching index along a vertical axis.

    Args:
        z_values: Vertical coordinate values
        target_z: Target vertical coordinate, or None for closest to surface
        vertical_crs: Vertical reference system of the axis

    Returns:
        int: Index into ``z_values``, or NOT_FOUND if it is empty

    Examples:
        >>> closest_elevation_index([-5, 0, 5, 10])
        1
        >>> closest_elevation_index([0, 10, 20, 30], target_z=12)
        1
    """
    if target_z is None:
        return _surface_index(as_vertical_axis(z_values), vertical_crs)
    return get_index_of_closest_elevation_to(target_z, z_values)

"""
Coverage Reducer Coordinate Handling

This package provides nearest-index selection along vertical and time axes
and the canonical ordering of 2D grid indices.
"""

# Vertical coordinate functions
from .vertical_handler import (
    as_vertical_axis,
    get_closest_elevation_to_surface,
    get_index_of_closest_elevation_to,
    closest_elevation_index,
)

# Time coordinate functions
from .time_handler import (
    normalize_time_value,
    normalize_time_array,
    current_time,
    get_index_of_closest_time_to,
    get_closest_to_current_time,
    closest_time_index,
)

# Grid ordering
from .grid_ordering import (
    compare_grid_coordinates,
    grid_sort_key,
    sort_grid_coordinates,
)

__all__ = [
    # Vertical
    "as_vertical_axis",
    "get_closest_elevation_to_surface",
    "get_index_of_closest_elevation_to",
    "closest_elevation_index",
    # Time
    "normalize_time_value",
    "normalize_time_array",
    "current_time",
    "get_index_of_closest_time_to",
    "get_closest_to_current_time",
    "closest_time_index",
    # Grid ordering
    "compare_grid_coordinates",
    "grid_sort_key",
    "sort_grid_coordinates",
]

"""
Coverage Reducer - reduce environmental observation features to points.

This package models multi-dimensional observation data (vertical profiles,
time series, gridded fields) and reduces it to single-point samples suitable
for plotting and mapping.

Key Features:
- Nearest-level and nearest-time selection with surface / current-time defaults
- Point reduction of profiles and time series with extent validation
- Dataset-wide bounding box, vertical and time extent aggregation
- Canonical (y varying fastest) ordering of grid indices
- Profile, time series and grid extraction from xarray-backed 4-D fields
- Export of reduced points to xarray Datasets

Quick Start:
    >>> import coverage_reducer as cr
    >>> profile = cr.ProfileFeature(
    ...     id="cast-1",
    ...     horizontal_position=cr.HorizontalPosition(-30.0, 45.0),
    ...     z_values=[0.0, 10.0, 20.0, 30.0],
    ...     values={"temperature": [18.2, 17.9, 15.1, 12.4]},
    ... )
    >>> point = cr.reduce_profile(profile, cr.PlottingQuery(target_z=12.0))
    >>> float(point.get_value("temperature"))
    17.9
"""

__version__ = "1.0.0"
__author__ = "Coverage Reducer Development Team"

# Import main interface
from .main import (
    PointDataset,
    open_point_dataset,
)

# Import value types
from .core.core_types import (
    Extent,
    BoundingBox,
    VerticalCrs,
    HorizontalPosition,
    VerticalPosition,
    GeoPosition,
    HorizontalDomain,
    VerticalDomain,
    TemporalDomain,
    Parameter,
    VariableMetadata,
    GridCoordinates,
    PlottingQuery,
)

# Import feature types
from .features import (
    DiscreteFeature,
    ProfileFeature,
    PointSeriesFeature,
    PointFeature,
    GridFeature,
    GridSeriesFeature,
)

# Import processing functions
from .processing import (
    DomainExtents,
    aggregate_domain_extents,
    reduce_profile,
    reduce_point_series,
    reduce_feature,
    reduce_all,
)

from .coordinates import (
    closest_elevation_index,
    closest_time_index,
    compare_grid_coordinates,
    sort_grid_coordinates,
)

from .io.feature_reader import FeatureReader, InMemoryFeatureReader
from .io.export import point_features_to_dataset, write_point_features
from .utils import get_dataset_info

# Import configuration for advanced users
from .core.config import (
    DEFAULT_CRS,
    SURFACE_ELEVATION,
    NOT_FOUND,
)

# Import exceptions for error handling
from .core.exceptions import (
    CoverageReducerError,
    CoordinateError,
    ParameterError,
    UnsupportedFeatureError,
    VariableNotFoundError,
    DataReadingError,
    DataProcessingError,
)

# Import logging configuration
from .core.logging_config import setup_logging, set_log_level, log_level

__all__ = [
    # Version info
    '__version__',

    # Main interface
    'PointDataset',
    'open_point_dataset',

    # Value types
    'Extent',
    'BoundingBox',
    'VerticalCrs',
    'HorizontalPosition',
    'VerticalPosition',
    'GeoPosition',
    'HorizontalDomain',
    'VerticalDomain',
    'TemporalDomain',
    'Parameter',
    'VariableMetadata',
    'GridCoordinates',
    'PlottingQuery',

    # Features
    'DiscreteFeature',
    'ProfileFeature',
    'PointSeriesFeature',
    'PointFeature',
    'GridFeature',
    'GridSeriesFeature',

    # Processing
    'DomainExtents',
    'aggregate_domain_extents',
    'reduce_profile',
    'reduce_point_series',
    'reduce_feature',
    'reduce_all',

    # Coordinates
    'closest_elevation_index',
    'closest_time_index',
    'compare_grid_coordinates',
    'sort_grid_coordinates',

    # IO
    'FeatureReader',
    'InMemoryFeatureReader',
    'point_features_to_dataset',
    'write_point_features',
    'get_dataset_info',

    # Configuration constants
    'DEFAULT_CRS',
    'SURFACE_ELEVATION',
    'NOT_FOUND',

    # Exception classes
    'CoverageReducerError',
    'CoordinateError',
    'ParameterError',
    'UnsupportedFeatureError',
    'VariableNotFoundError',
    'DataReadingError',
    'DataProcessingError',

    # Logging configuration
    'setup_logging',
    'set_log_level',
    'log_level',
]

import logging
_logger = logging.getLogger(__name__)
_logger.addHandler(logging.NullHandler())

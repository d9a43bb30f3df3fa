"""
Coverage Reducer Features

This package defines the discrete feature variants and the gridded series
feature they can be extracted from.
"""

from .feature_types import (
    DiscreteFeature,
    ProfileFeature,
    PointSeriesFeature,
    PointFeature,
    GridFeature,
)
from .grid_series import GridSeriesFeature

__all__ = [
    "DiscreteFeature",
    "ProfileFeature",
    "PointSeriesFeature",
    "PointFeature",
    "GridFeature",
    "GridSeriesFeature",
]

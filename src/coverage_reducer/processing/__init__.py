"""
Coverage Reducer Data Processing

This package provides dataset extent aggregation and point reduction of
profiles and time series.
"""

# Extent aggregation
from .extents import (
    DomainExtents,
    aggregate_domain_extents,
)

# Point reduction
from .reduction import (
    reduce_profile,
    reduce_point_series,
    reduce_point,
    reduce_feature,
    reduce_all,
)

__all__ = [
    "DomainExtents",
    "aggregate_domain_extents",
    "reduce_profile",
    "reduce_point_series",
    "reduce_point",
    "reduce_feature",
    "reduce_all",
]

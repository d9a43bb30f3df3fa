"""
Coverage Reducer Utilities

This package provides functions for summarizing datasets and extents.
"""

from .info import (
    describe_extent,
    describe_bounding_box,
    get_dataset_info,
)

__all__ = [
    "describe_extent",
    "describe_bounding_box",
    "get_dataset_info",
]

"""
Coverage Reducer Domain Extent Aggregation

This module folds the per-variable horizontal, vertical and temporal extents
of a dataset into one dataset-wide bounding box, vertical extent and time
extent.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from ..core.config import DEFAULT_CRS
from ..core.core_types import BoundingBox, Extent, VariableMetadata

logger = logging.getLogger('coverage_reducer.processing.extents')


@dataclass(frozen=True)
class DomainExtents:
    """
    Dataset-wide extents.

    Each component is None when no variable contributes to it.
    """
    bounding_box: Optional[BoundingBox] = None
    vertical_extent: Optional[Extent] = None
    time_extent: Optional[Extent] = None


def _union_extent(current: Optional[Extent], extent: Extent) -> Extent:
    return extent if current is None else current.union(extent)


def aggregate_domain_extents(variables: Iterable[VariableMetadata]) -> DomainExtents:
    """
    Compute the overall extents of a collection of variables.

    The horizontal bounding box is the union of every variable's box and is
    reported in the standard geographic CRS. The vertical and temporal
    extents are unions over the variables that declare such a domain.
    Ordering of the input has no effect on the result.

    Args:
        variables: Variable metadata to aggregate

    Returns:
        DomainExtents: Aggregated extents; components with no contributing
                       variable are None (an empty input gives all None)
    """
    min_x = min_y = max_x = max_y = None
    z_extent: Optional[Extent] = None
    t_extent: Optional[Extent] = None
    count = 0

    for metadata in variables:
        count += 1
        bbox = metadata.horizontal_domain.bounding_box
        if min_x is None:
            min_x, min_y, max_x, max_y = bbox.min_x, bbox.min_y, bbox.max_x, bbox.max_y
        else:
            min_x = min(min_x, bbox.min_x)
            min_y = min(min_y, bbox.min_y)
            max_x = max(max_x, bbox.max_x)
            max_y = max(max_y, bbox.max_y)

        if metadata.vertical_domain is not None:
            z_extent = _union_extent(z_extent, metadata.vertical_domain.extent)

        if metadata.temporal_domain is not None:
            t_extent = _union_extent(t_extent, metadata.temporal_domain.extent)

    if count == 0:
        logger.warning("No variables supplied; dataset extents are undefined")
        return DomainExtents()

    logger.debug("Aggregated extents of %d variables", count)
    return DomainExtents(
        bounding_box=BoundingBox(min_x, min_y, max_x, max_y, DEFAULT_CRS),
        vertical_extent=z_extent,
        time_extent=t_extent,
    )

"""
Coverage Reducer Information Utilities

This module provides functions for summarizing datasets and extents as plain
dictionaries, for capability documents and quick inspection.
"""

from typing import Dict, Optional

from ..core.core_types import BoundingBox, Extent


def describe_extent(extent: Optional[Extent]) -> Optional[Dict]:
    """Plain-dict form of an extent, or None when undefined."""
    if extent is None:
        return None
    return {'low': extent.low, 'high': extent.high}


def describe_bounding_box(bbox: Optional[BoundingBox]) -> Optional[Dict]:
    """Plain-dict form of a bounding box, or None when undefined."""
    if bbox is None:
        return None
    return {
        'min_x': bbox.min_x,
        'min_y': bbox.min_y,
        'max_x': bbox.max_x,
        'max_y': bbox.max_y,
        'crs': bbox.crs,
    }


def get_dataset_info(dataset) -> Dict:
    """
    Get summary information about a point dataset.

    Args:
        dataset: PointDataset to describe

    Returns:
        Dict: Dataset id, variables and extents

    Examples:
        >>> info = get_dataset_info(ds)
        >>> print(f"Variables: {info['variables']}")
        >>> print(f"Depth range: {info['vertical_extent']}")
    """
    variables = {}
    for var_id in dataset.variable_ids:
        metadata = dataset.get_variable_metadata(var_id)
        param = metadata.parameter
        variables[var_id] = {
            'title': param.title if param else var_id,
            'units': param.units if param else '',
            'has_vertical_domain': metadata.vertical_domain is not None,
            'has_temporal_domain': metadata.temporal_domain is not None,
        }

    return {
        'id': dataset.id,
        'variables': variables,
        'bounding_box': describe_bounding_box(dataset.bounding_box),
        'vertical_extent': describe_extent(dataset.vertical_extent),
        'time_extent': describe_extent(dataset.time_extent),
    }

"""
Coverage Reducer Point Reduction

This module reduces profiles and point series to single-point samples. For
each feature, the best-matching index along its reducible axis (depth for a
profile, time for a series) is selected, checked against the query extent,
and every parameter value at that index is copied into a new PointFeature.

A feature that yields no sample is not an error: the reducer returns None
and batch reduction omits it.
"""

import copy
import logging
from typing import Dict, Iterable, List, Optional
import numpy as np

from ..core.config import FEATURE_ID_SEPARATOR, NOT_FOUND
from ..core.core_types import GeoPosition, PlottingQuery, VerticalPosition
from ..core.exceptions import UnsupportedFeatureError
from ..coordinates.time_handler import closest_time_index
from ..coordinates.vertical_handler import closest_elevation_index
from ..features.feature_types import (
    DiscreteFeature, PointFeature, PointSeriesFeature, ProfileFeature,
)

logger = logging.getLogger('coverage_reducer.processing.reduction')

# ============================================================================
# Helpers
# ============================================================================

def _format_time(time: np.datetime64) -> str:
    seconds = time.astype('datetime64[s]')
    return str(seconds) if seconds == time else str(time)


def _values_at(feature: DiscreteFeature, index: int) -> Dict[str, np.ndarray]:
    return {
        param_id: np.array([arr[index]], dtype=arr.dtype)
        for param_id, arr in feature.values.items()
    }


def _build_point_feature(
    feature: DiscreteFeature,
    coordinate: str,
    kind: str,
    position: GeoPosition,
    values: Dict[str, np.ndarray],
) -> PointFeature:
    return PointFeature(
        id=f"{feature.id}{FEATURE_ID_SEPARATOR}{coordinate}",
        name=f"Measurement from {feature.name}",
        description=f"Value extracted at {kind} {coordinate} from {feature.description}",
        position=position,
        parameter_map=dict(feature.parameter_map),
        values=values,
        feature_properties=copy.deepcopy(feature.feature_properties),
    )

# ============================================================================
# Per-Variant Reducers
# ============================================================================

def reduce_profile(feature: ProfileFeature, query: PlottingQuery) -> Optional[PointFeature]:
    """
    Reduce a vertical profile to the sample at one depth.

    The level closest to ``query.target_z`` is chosen, or the level closest
    to the surface if no target is given. If ``query.z_extent`` is set, the
    chosen level must lie inside it: a profile whose envelope overlaps the
    extent without any level inside it yields nothing.

    Args:
        feature: Profile to reduce
        query: Plotting query

    Returns:
        Optional[PointFeature]: The extracted point, or None if no level matches
    """
    z_index = closest_elevation_index(feature.z_values, query.target_z, feature.vertical_crs)
    if z_index == NOT_FOUND:
        logger.debug("Profile %s has no levels", feature.id)
        return None

    z_value = float(feature.z_values[z_index])
    if query.z_extent is not None and not query.z_extent.contains(z_value):
        logger.debug("Profile %s: level %s outside %s", feature.id, z_value, query.z_extent)
        return None

    position = GeoPosition(
        feature.horizontal_position,
        VerticalPosition(z_value, feature.vertical_crs),
        feature.time,
    )
    return _build_point_feature(feature, str(z_value), "depth", position, _values_at(feature, z_index))


def reduce_point_series(feature: PointSeriesFeature, query: PlottingQuery) -> Optional[PointFeature]:
    """
    Reduce a time series to the sample at one time.

    The time closest to ``query.target_t`` is chosen, or the time closest to
    now if no target is given. If ``query.t_extent`` is set, the chosen time
    must lie inside it.

    Args:
        feature: Time series to reduce
        query: Plotting query

    Returns:
        Optional[PointFeature]: The extracted point, or None if no time matches
    """
    t_index = closest_time_index(feature.times, query.target_t)
    if t_index == NOT_FOUND:
        logger.debug("Point series %s has no times", feature.id)
        return None

    time = feature.times[t_index]
    if query.t_extent is not None and not query.t_extent.contains(time):
        logger.debug("Point series %s: time %s outside %s", feature.id, time, query.t_extent)
        return None

    position = GeoPosition(feature.horizontal_position, feature.vertical_position, time)
    return _build_point_feature(feature, _format_time(time), "time", position, _values_at(feature, t_index))


def reduce_point(feature: PointFeature, query: PlottingQuery) -> Optional[PointFeature]:
    """
    Pass a point through, checking it against the query extents.

    A constraint is only checked when the point has the matching coordinate.

    Returns:
        Optional[PointFeature]: An independent copy, or None if outside the extents
    """
    position = feature.position
    if (query.z_extent is not None and position.vertical is not None
            and not query.z_extent.contains(position.vertical.z)):
        return None
    if (query.t_extent is not None and position.time is not None
            and not query.t_extent.contains(position.time)):
        return None
    return copy.deepcopy(feature)

# ============================================================================
# Dispatch and Batch Reduction
# ============================================================================

def reduce_feature(feature: DiscreteFeature, query: PlottingQuery) -> Optional[PointFeature]:
    """
    Reduce any supported feature variant to a point.

    Raises:
        UnsupportedFeatureError: For variants without a point reduction
    """
    if isinstance(feature, ProfileFeature):
        return reduce_profile(feature, query)
    if isinstance(feature, PointSeriesFeature):
        return reduce_point_series(feature, query)
    if isinstance(feature, PointFeature):
        return reduce_point(feature, query)
    raise UnsupportedFeatureError(type(feature).__name__, "point reduction")


def reduce_all(features: Iterable[DiscreteFeature], query: PlottingQuery) -> List[PointFeature]:
    """
    Reduce a sequence of features to points.

    Features that yield no point are omitted; the order of the remaining
    points follows the input. Errors raised while iterating ``features``
    propagate unchanged.

    Args:
        features: Features to reduce
        query: Plotting query

    Returns:
        List[PointFeature]: Reduced points
    """
    points = []
    total = 0
    for feature in features:
        total += 1
        point = reduce_feature(feature, query)
        if point is not None:
            points.append(point)

    logger.debug("Reduced %d of %d features to points", len(points), total)
    return points

"""
Coverage Reducer Feature Readers

This module defines the reader interface used by datasets to obtain discrete
features for a set of variables and a query region, plus an in-memory reader
over an existing collection of features.
"""

import copy
import logging
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, Sequence

from ..core.core_types import Extent, PlottingQuery
from ..features.feature_types import (
    DiscreteFeature, GridFeature, PointFeature, PointSeriesFeature, ProfileFeature,
)

logger = logging.getLogger('coverage_reducer.io.feature_reader')


class FeatureReader(ABC):
    """
    Source of discrete features.

    Implementations read from files, services or memory. Read failures
    should be raised as DataReadingError; callers never catch them.
    """

    @abstractmethod
    def read_features(self, var_ids: Iterable[str], query: PlottingQuery) -> List[DiscreteFeature]:
        """
        Read the features relevant to a query.

        Args:
            var_ids: Parameters to read
            query: Plotting query (horizontal, vertical and temporal constraints)

        Returns:
            List[DiscreteFeature]: Features carrying only the requested parameters
        """


def _vertical_envelope(feature: DiscreteFeature) -> Optional[Extent]:
    if isinstance(feature, ProfileFeature):
        return feature.vertical_extent
    if isinstance(feature, PointSeriesFeature) and feature.vertical_position is not None:
        return Extent(feature.vertical_position.z, feature.vertical_position.z)
    if isinstance(feature, PointFeature) and feature.position.vertical is not None:
        return Extent(feature.position.vertical.z, feature.position.vertical.z)
    return None


def _time_envelope(feature: DiscreteFeature) -> Optional[Extent]:
    if isinstance(feature, PointSeriesFeature):
        return feature.time_extent
    if isinstance(feature, ProfileFeature) and feature.time is not None:
        return Extent(feature.time, feature.time)
    if isinstance(feature, PointFeature) and feature.position.time is not None:
        return Extent(feature.position.time, feature.position.time)
    return None


def feature_matches_query(feature: DiscreteFeature, query: PlottingQuery) -> bool:
    """
    Check if a feature's own envelope is compatible with a query.

    This is an envelope test only: a profile spanning 0-30 m matches a
    15-25 m extent even if none of its levels falls inside it.
    """
    if query.bbox is not None:
        if isinstance(feature, GridFeature):
            bbox = feature.bounding_box
            if bbox is None or not query.bbox.intersects(bbox):
                return False
        elif feature.horizontal_position is not None:
            pos = feature.horizontal_position
            if not query.bbox.contains(pos.x, pos.y):
                return False

    if query.z_extent is not None:
        z_envelope = _vertical_envelope(feature)
        if z_envelope is not None and not query.z_extent.overlaps(z_envelope):
            return False

    if query.t_extent is not None:
        t_envelope = _time_envelope(feature)
        if t_envelope is not None and not query.t_extent.overlaps(t_envelope):
            return False

    return True


class InMemoryFeatureReader(FeatureReader):
    """
    Reader over features already held in memory.

    Features whose envelope does not match the query are skipped; the
    remaining ones are returned as copies restricted to the requested
    parameters, in their original order.

    Args:
        features: Features to serve
    """

    def __init__(self, features: Sequence[DiscreteFeature]):
        self.features = list(features)

    def read_features(self, var_ids: Iterable[str], query: PlottingQuery) -> List[DiscreteFeature]:
        var_ids = set(var_ids)
        selected = []
        for feature in self.features:
            if not var_ids.intersection(feature.parameter_ids):
                continue
            if not feature_matches_query(feature, query):
                continue

            subset = copy.copy(feature)
            subset.values = {k: v for k, v in feature.values.items() if k in var_ids}
            subset.parameter_map = {k: v for k, v in feature.parameter_map.items() if k in var_ids}
            selected.append(subset)

        logger.debug("Read %d of %d features", len(selected), len(self.features))
        return selected

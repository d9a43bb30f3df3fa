"""
Coverage Reducer Main Interface

This module provides the dataset-level API: a dataset of point-like features
whose map features are always PointFeatures, with dataset-wide extents
computed once at construction.
"""

import logging
from typing import Iterable, List, Optional, Sequence, Type

from .core.core_types import BoundingBox, Extent, PlottingQuery, VariableMetadata
from .core.exceptions import VariableNotFoundError, check_variables_availability
from .features.feature_types import DiscreteFeature, PointFeature
from .io.feature_reader import FeatureReader, InMemoryFeatureReader
from .processing.extents import aggregate_domain_extents
from .processing.reduction import reduce_all

# Get logger for this module
logger = logging.getLogger('coverage_reducer.main')


# ============================================================================
# Point Dataset
# ============================================================================

class PointDataset:
    """
    Dataset whose map features are PointFeatures.

    Features are read natively (profiles, point series, ...) through a
    FeatureReader and reduced to points under a PlottingQuery.

    Extents can be supplied explicitly. When none of them is supplied they
    are aggregated from the variable metadata.

    Args:
        id: Dataset identifier
        variables: Metadata of the dataset's variables
        feature_reader: Reader supplying the native features
        bounding_box: Explicit dataset bounding box
        vertical_extent: Explicit dataset vertical extent
        time_extent: Explicit dataset time extent
    """

    def __init__(
        self,
        id: str,
        variables: Sequence[VariableMetadata],
        feature_reader: FeatureReader,
        bounding_box: Optional[BoundingBox] = None,
        vertical_extent: Optional[Extent] = None,
        time_extent: Optional[Extent] = None,
    ):
        self.id = id
        self._variables = {metadata.id: metadata for metadata in variables}
        self.feature_reader = feature_reader

        if bounding_box is None and vertical_extent is None and time_extent is None:
            extents = aggregate_domain_extents(self._variables.values())
            bounding_box = extents.bounding_box
            vertical_extent = extents.vertical_extent
            time_extent = extents.time_extent

        self._bounding_box = bounding_box
        self._vertical_extent = vertical_extent
        self._time_extent = time_extent
        logger.debug("Created dataset %s with %d variables", id, len(self._variables))

    @property
    def variable_ids(self) -> List[str]:
        return list(self._variables)

    @property
    def bounding_box(self) -> Optional[BoundingBox]:
        return self._bounding_box

    @property
    def vertical_extent(self) -> Optional[Extent]:
        return self._vertical_extent

    @property
    def time_extent(self) -> Optional[Extent]:
        return self._time_extent

    def get_variable_metadata(self, var_id: str) -> VariableMetadata:
        """Get the metadata of one variable."""
        try:
            return self._variables[var_id]
        except KeyError:
            raise VariableNotFoundError([var_id], self.variable_ids) from None

    def map_feature_type(self, var_id: str) -> Type[PointFeature]:
        """Type of map feature produced for a variable (always PointFeature)."""
        self.get_variable_metadata(var_id)
        return PointFeature

    def extract_map_features(self, var_ids: Iterable[str], query: Optional[PlottingQuery] = None) -> List[PointFeature]:
        """
        Read features and reduce them to points.

        Features with no sample matching the query are left out of the
        result. Errors from the feature reader propagate unchanged.

        Args:
            var_ids: Variables to extract
            query: Plotting query (default: no constraints)

        Returns:
            List[PointFeature]: Points ready for plotting

        Examples:
            >>> query = PlottingQuery(target_z=10.0, z_extent=(0.0, 50.0))
            >>> points = dataset.extract_map_features(["temperature"], query)
        """
        var_ids = list(var_ids)
        check_variables_availability(var_ids, self.variable_ids)
        query = query or PlottingQuery()

        features = self.feature_reader.read_features(var_ids, query)
        points = reduce_all(features, query)
        logger.info("Extracted %d map features for %s from %s", len(points), var_ids, self.id)
        return points


# ============================================================================
# Convenience Functions
# ============================================================================

def open_point_dataset(
    id: str,
    variables: Sequence[VariableMetadata],
    features: Sequence[DiscreteFeature],
) -> PointDataset:
    """
    Build a PointDataset over features held in memory.

    Examples:
        >>> ds = open_point_dataset("argo", variables, profiles)
        >>> ds.bounding_box
    """
    return PointDataset(id, variables, InMemoryFeatureReader(features))

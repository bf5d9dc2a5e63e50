"""Base classes, data structures and errors for GRASP clustering."""

from .exceptions import (
    GraspError,
    InvalidConfiguration,
    DataFormatError,
    InternalConsistencyError
)

from .data_structures import (
    Cluster,
    Solution,
    LocalSearchStatus,
    LocalSearchResult,
    RestartRecord,
    GraspResult,
    labels_from_clusters
)

from .interfaces import (
    ConstructionStrategy,
    CentroidUpdater,
    ClusteringObjective,
    LocalSearchStrategy
)

from .clustering_base import BaseClusteringAlgorithm

__all__ = [
    # Errors
    'GraspError',
    'InvalidConfiguration',
    'DataFormatError',
    'InternalConsistencyError',

    # Data structures
    'Cluster',
    'Solution',
    'LocalSearchStatus',
    'LocalSearchResult',
    'RestartRecord',
    'GraspResult',
    'labels_from_clusters',

    # Interfaces
    'ConstructionStrategy',
    'CentroidUpdater',
    'ClusteringObjective',
    'LocalSearchStrategy',

    # Base algorithm
    'BaseClusteringAlgorithm'
]

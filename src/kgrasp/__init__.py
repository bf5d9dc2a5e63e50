"""
kgrasp: partitional clustering with GRASP.

Each of R restarts builds a partition with a greedy randomized constructor
(restricted candidate list bounded by a threshold) and refines it with
first-improvement local search. The best refined partition is kept.

Example usage:
    >>> import torch
    >>> from kgrasp import GRASP
    >>>
    >>> # Generate sample data
    >>> X = torch.randn(300, 2)
    >>>
    >>> # Fit GRASP
    >>> model = GRASP(n_clusters=3, threshold=0.3, restarts=25, random_state=1)
    >>> model.fit(X)
    >>>
    >>> # Get cluster assignments
    >>> labels = model.labels_
"""

__version__ = '0.1.0'

# Import main algorithms
from .algorithms.grasp import GRASP, optimize
from .algorithms.builder import GraspBuilder, create_grasp

# Components
from .construction import GreedyRandomizedConstruction
from .local_search import FirstImprovementLocalSearch
from .objectives import SSEObjective
from .updates import CentroidCalculator

# IO
from .io import load_points, format_report, format_result, print_report

# Convenience imports
from .base import (
    Cluster,
    Solution,
    GraspResult,
    LocalSearchResult,
    LocalSearchStatus,
    RestartRecord,
    GraspError,
    InvalidConfiguration,
    DataFormatError,
    InternalConsistencyError
)

__all__ = [
    # Algorithms
    'GRASP',
    'optimize',

    # Builder
    'GraspBuilder',
    'create_grasp',

    # Components
    'GreedyRandomizedConstruction',
    'FirstImprovementLocalSearch',
    'SSEObjective',
    'CentroidCalculator',

    # IO
    'load_points',
    'format_report',
    'format_result',
    'print_report',

    # Core data structures
    'Cluster',
    'Solution',
    'GraspResult',
    'LocalSearchResult',
    'LocalSearchStatus',
    'RestartRecord',

    # Errors
    'GraspError',
    'InvalidConfiguration',
    'DataFormatError',
    'InternalConsistencyError',

    # Version
    '__version__'
]

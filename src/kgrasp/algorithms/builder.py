"""
Builder pattern for configuring GRASP clustering.

Provides a fluent interface for assembling a GRASP estimator from its
components and run parameters.
"""

from typing import Optional, Union
import torch

from .grasp import GRASP
from ..base.interfaces import (
    ConstructionStrategy, CentroidUpdater, ClusteringObjective, LocalSearchStrategy
)
from ..construction.greedy_randomized import GreedyRandomizedConstruction
from ..local_search.first_improvement import FirstImprovementLocalSearch
from ..objectives.sse import SSEObjective
from ..updates.mean import CentroidCalculator
from ..utils.validation import check_threshold, check_positive_int


class GraspBuilder:
    """Fluent builder for GRASP estimators.

    Examples
    --------
    >>> model = (GraspBuilder()
    ...     .with_threshold(0.2)
    ...     .with_restarts(50)
    ...     .with_max_iterations(5000)
    ...     .with_random_state(7)
    ...     .build(n_clusters=4))
    >>> model.fit(X)
    """

    def __init__(self):
        """Initialize builder with defaults."""
        self._threshold = 0.3
        self._restarts = 25
        self._max_iterations = 10000
        self._min_cluster_size = 3
        self._verbose = 0
        self._random_state = None
        self._dtype = torch.float64

        self._constructor: Optional[ConstructionStrategy] = None
        self._local_search: Optional[LocalSearchStrategy] = None
        self._objective: Optional[ClusteringObjective] = None
        self._centroid_updater: Optional[CentroidUpdater] = None

    def with_threshold(self, threshold: float) -> 'GraspBuilder':
        """Set the restricted candidate list width."""
        self._threshold = check_threshold(threshold)
        return self

    def with_restarts(self, restarts: int) -> 'GraspBuilder':
        """Set the number of construct-and-refine iterations."""
        self._restarts = check_positive_int(restarts, 'restarts')
        return self

    def with_max_iterations(self, max_iterations: int) -> 'GraspBuilder':
        """Set the local search cap on move evaluations."""
        self._max_iterations = check_positive_int(max_iterations, 'max_iterations')
        return self

    def with_min_cluster_size(self, min_cluster_size: int) -> 'GraspBuilder':
        """Set the size at or below which a cluster stops giving points away."""
        self._min_cluster_size = check_positive_int(min_cluster_size, 'min_cluster_size')
        return self

    def with_random_state(self, random_state: Union[int, torch.Generator]) -> 'GraspBuilder':
        self._random_state = random_state
        return self

    def with_verbose(self, verbose: int) -> 'GraspBuilder':
        self._verbose = verbose
        return self

    def with_dtype(self, dtype: torch.dtype) -> 'GraspBuilder':
        self._dtype = dtype
        return self

    def with_constructor(self, constructor: ConstructionStrategy) -> 'GraspBuilder':
        self._constructor = constructor
        return self

    def with_greedy_randomized_construction(self) -> 'GraspBuilder':
        return self.with_constructor(GreedyRandomizedConstruction())

    def with_local_search(self, local_search: LocalSearchStrategy) -> 'GraspBuilder':
        self._local_search = local_search
        return self

    def with_objective(self, objective: ClusteringObjective) -> 'GraspBuilder':
        self._objective = objective
        return self

    def with_sse_objective(self) -> 'GraspBuilder':
        return self.with_objective(SSEObjective())

    def with_centroid_updater(self, centroid_updater: CentroidUpdater) -> 'GraspBuilder':
        self._centroid_updater = centroid_updater
        return self

    def build(self, n_clusters: int) -> GRASP:
        """Build the configured GRASP estimator."""
        local_search = self._local_search
        if local_search is None:
            # Share the objective and updater so moves are priced consistently
            local_search = FirstImprovementLocalSearch(
                max_iterations=self._max_iterations,
                min_cluster_size=self._min_cluster_size,
                objective=self._objective,
                centroid_updater=self._centroid_updater,
                verbose=self._verbose
            )

        return GRASP(
            n_clusters=n_clusters,
            threshold=self._threshold,
            restarts=self._restarts,
            max_iterations=self._max_iterations,
            min_cluster_size=self._min_cluster_size,
            verbose=self._verbose,
            random_state=self._random_state,
            dtype=self._dtype,
            constructor=self._constructor,
            local_search=local_search,
            objective=self._objective,
            centroid_updater=self._centroid_updater
        )


def create_grasp(n_clusters: int, threshold: float = 0.3, restarts: int = 25,
                 random_state: Optional[int] = None, **kwargs) -> GRASP:
    """Create a GRASP estimator with the default components."""
    builder = (GraspBuilder()
               .with_threshold(threshold)
               .with_restarts(restarts))
    if random_state is not None:
        builder.with_random_state(random_state)
    for key, value in kwargs.items():
        method = getattr(builder, f'with_{key}', None)
        if method is None:
            raise ValueError(f"Unknown GRASP option: {key}")
        method(value)
    return builder.build(n_clusters)

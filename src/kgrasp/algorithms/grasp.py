"""
GRASP clustering algorithm.

Greedy Randomized Adaptive Search Procedure: every restart builds a partition
with the greedy randomized constructor, refines it with first-improvement
local search, and the best refined solution over all restarts wins.
"""

from typing import Optional, Union, List
import time
import torch
from torch import Tensor
import numpy as np

from ..base.clustering_base import BaseClusteringAlgorithm
from ..base.interfaces import (
    ConstructionStrategy, CentroidUpdater, ClusteringObjective, LocalSearchStrategy
)
from ..base.data_structures import Solution, GraspResult, RestartRecord
from ..construction.greedy_randomized import GreedyRandomizedConstruction
from ..local_search.first_improvement import FirstImprovementLocalSearch
from ..objectives.sse import SSEObjective
from ..updates.mean import CentroidCalculator
from ..utils.validation import (
    check_n_clusters, check_threshold, check_positive_int, check_random_state, check_partition
)


class GRASP(BaseClusteringAlgorithm):
    """GRASP clustering.

    Partitions data into K clusters by minimizing the within-cluster sum of
    squared distances over independent construct-and-refine restarts.

    Parameters
    ----------
    n_clusters : int
        Number of clusters
    threshold : float, default=0.3
        Width of the restricted candidate list in [0, 1]. 0 is pure greedy,
        1 lets every candidate through
    restarts : int, default=25
        Number of construct-and-refine iterations
    max_iterations : int, default=10000
        Cap on local search move evaluations per restart
    min_cluster_size : int, default=3
        Clusters at or below this size never give points away
    verbose : int, default=0
        Verbosity level
    random_state : int or torch.Generator, optional
        Seed of the single random source shared by all restarts
    constructor, local_search, objective, centroid_updater : optional
        Component overrides; defaults are the greedy randomized constructor,
        first-improvement local search, SSE objective and mean centroids

    Attributes
    ----------
    cluster_centers_ : Tensor of shape (n_clusters, n_features)
        Centroids of the best solution
    labels_ : Tensor of shape (n_samples,)
        Cluster assignments of the best solution
    clusters_ : list of Cluster
        Membership lists of the best solution
    best_cost_ : float
        Cost of the best solution after local search
    initial_cost_ : float
        Greedy (pre local search) cost of the restart that produced the best
    history_ : list of RestartRecord
        One record per restart
    elapsed_ : float
        Wall-clock seconds spent in the restarts
    constructor_, local_search_, objective_, centroid_updater_
        Components used by the last fit
    """

    def __init__(self,
                 n_clusters: int,
                 threshold: float = 0.3,
                 restarts: int = 25,
                 max_iterations: int = 10000,
                 min_cluster_size: int = 3,
                 verbose: int = 0,
                 random_state: Optional[Union[int, torch.Generator]] = None,
                 dtype: torch.dtype = torch.float64,
                 constructor: Optional[ConstructionStrategy] = None,
                 local_search: Optional[LocalSearchStrategy] = None,
                 objective: Optional[ClusteringObjective] = None,
                 centroid_updater: Optional[CentroidUpdater] = None):
        """Initialize GRASP."""
        super().__init__(
            n_clusters=n_clusters,
            verbose=verbose,
            random_state=random_state,
            dtype=dtype
        )
        self.threshold = threshold
        self.restarts = restarts
        self.max_iterations = max_iterations
        self.min_cluster_size = min_cluster_size
        self.constructor = constructor
        self.local_search = local_search
        self.objective = objective
        self.centroid_updater = centroid_updater

    def _create_components(self) -> None:
        """Create the components used by this fit from the current parameters.

        Supplied components are used as given; defaults are rebuilt on every
        fit so later ``set_params`` calls take effect.
        """
        self.objective_ = self.objective if self.objective is not None else SSEObjective()
        self.centroid_updater_ = (self.centroid_updater if self.centroid_updater is not None
                                  else CentroidCalculator())
        self.constructor_ = (self.constructor if self.constructor is not None
                             else GreedyRandomizedConstruction())
        if self.local_search is not None:
            self.local_search_ = self.local_search
        else:
            self.local_search_ = FirstImprovementLocalSearch(
                max_iterations=self.max_iterations,
                min_cluster_size=self.min_cluster_size,
                objective=self.objective_,
                centroid_updater=self.centroid_updater_,
                verbose=self.verbose
            )

    def _check_config(self, n_points: int) -> None:
        check_n_clusters(self.n_clusters, n_points)
        self.threshold = check_threshold(self.threshold)
        check_positive_int(self.restarts, 'restarts')
        check_positive_int(self.max_iterations, 'max_iterations')
        check_positive_int(self.min_cluster_size, 'min_cluster_size')

    def _fit(self, X: Tensor) -> GraspResult:
        """Run all restarts and keep the best refined solution."""
        n_points = X.shape[0]
        self._check_config(n_points)
        self._create_components()
        generator = check_random_state(self.random_state)

        if self.verbose:
            print(f"GRASP: {n_points} points, {self.n_clusters} clusters, "
                  f"threshold = {self.threshold}, {self.restarts} restarts")

        best: Optional[Solution] = None
        best_cost = float('inf')
        initial_cost = float('inf')
        history: List[RestartRecord] = []

        start_time = time.time()
        for restart in range(self.restarts):
            clusters = self.constructor_.build(X, generator, self.n_clusters, self.threshold)
            check_partition(clusters, n_points)

            centroids = self.centroid_updater_.compute_all(X, clusters)
            greedy_cost = self.objective_.total_cost(X, clusters, centroids)
            solution = Solution(clusters=clusters, centroids=centroids, cost=greedy_cost)

            outcome = self.local_search_.refine(X, solution, self.max_iterations)
            refined_cost = outcome.cost

            improved = refined_cost < best_cost
            if improved:
                best = solution
                best_cost = refined_cost
                initial_cost = greedy_cost

            history.append(RestartRecord(
                restart=restart,
                greedy_cost=greedy_cost,
                refined_cost=refined_cost,
                status=outcome.status,
                n_moves=outcome.n_moves,
                n_evaluations=outcome.n_evaluations,
                improved_best=improved
            ))

            if self.verbose >= 2 or (self.verbose >= 1 and improved):
                marker = "*" if improved else " "
                print(f"Restart {restart:3d}: greedy = {greedy_cost:.6f} -> "
                      f"refined = {refined_cost:.6f} {marker}")

        elapsed = time.time() - start_time

        if self.verbose:
            print(f"Best cost: {best_cost:.6f} (initial {initial_cost:.6f})")
            print(f"Total fitting time: {elapsed:.3f}s")

        self.best_cost_ = best_cost
        self.initial_cost_ = initial_cost
        self.history_ = history
        self.elapsed_ = elapsed

        return GraspResult(
            best_cost=best_cost,
            initial_cost=initial_cost,
            clusters=best.clusters,
            centroids=best.centroids,
            labels=best.labels(n_points),
            seed=self.random_state if isinstance(self.random_state, int) else None,
            n_clusters=self.n_clusters,
            threshold=self.threshold,
            restarts=self.restarts,
            elapsed=elapsed,
            history=history
        )

    def get_params(self, deep: bool = True) -> dict:
        params = super().get_params(deep)
        params.update({
            'threshold': self.threshold,
            'restarts': self.restarts,
            'max_iterations': self.max_iterations,
            'min_cluster_size': self.min_cluster_size,
            'constructor': self.constructor,
            'local_search': self.local_search,
            'objective': self.objective,
            'centroid_updater': self.centroid_updater
        })
        return params


def optimize(points: Union[Tensor, np.ndarray, list],
             seed: Optional[Union[int, torch.Generator]],
             n_clusters: int,
             threshold: float,
             restarts: int = 25,
             max_iterations: int = 10000,
             verbose: int = 0,
             **kwargs) -> GraspResult:
    """Run GRASP on ``points`` and return the best solution found.

    Args:
        points: (n, d) data
        seed: Seed (or generator) of the random source shared by all restarts
        n_clusters: Number of clusters K
        threshold: Restricted candidate list width in [0, 1]
        restarts: Number of construct-and-refine iterations
        max_iterations: Local search cap on move evaluations per restart
        verbose: Verbosity level
        **kwargs: Forwarded to GRASP (min_cluster_size, dtype, components)

    Returns:
        GraspResult with the best cost, its initial cost and the winning clusters
    """
    model = GRASP(
        n_clusters=n_clusters,
        threshold=threshold,
        restarts=restarts,
        max_iterations=max_iterations,
        verbose=verbose,
        random_state=seed,
        **kwargs
    )
    model.fit(points)
    return model.result_

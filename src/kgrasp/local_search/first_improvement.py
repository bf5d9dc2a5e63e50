"""
First-improvement local search over single-point relocations.

Sweeps every (source cluster, point, target cluster) triple in a fixed nested
order and commits the first move whose cost delta is negative. After a move
the same slot of the source cluster is examined again, since the next point
slides into it. Clusters at or below ``min_cluster_size`` members never give
points away.
"""

from typing import Optional
import warnings
from torch import Tensor

from ..base.interfaces import LocalSearchStrategy, ClusteringObjective, CentroidUpdater
from ..base.data_structures import Solution, LocalSearchResult, LocalSearchStatus
from ..base.exceptions import InternalConsistencyError
from ..objectives.sse import SSEObjective
from ..updates.mean import CentroidCalculator
from ..utils.validation import check_positive_int


class FirstImprovementLocalSearch(LocalSearchStrategy):
    """Hill climbing that relocates one point at a time.

    Parameters
    ----------
    max_iterations : int, default=10000
        Cap on move evaluations (accepted or not) per call to ``refine``
    min_cluster_size : int, default=3
        A cluster only gives away points while it has more members than this
    tol : float, default=1e-12
        Relative acceptance tolerance. A move is committed when its delta is
        below ``-tol * max(1, |cost|)``
    objective : ClusteringObjective, optional
        Prices moves; defaults to SSEObjective
    centroid_updater : CentroidUpdater, optional
        Recomputes centroids after each move; defaults to CentroidCalculator
    verbose : int, default=0
        Verbosity level
    """

    def __init__(self,
                 max_iterations: int = 10000,
                 min_cluster_size: int = 3,
                 tol: float = 1e-12,
                 objective: Optional[ClusteringObjective] = None,
                 centroid_updater: Optional[CentroidUpdater] = None,
                 verbose: int = 0):
        self.max_iterations = check_positive_int(max_iterations, 'max_iterations')
        self.min_cluster_size = check_positive_int(min_cluster_size, 'min_cluster_size')
        self.tol = tol
        self.objective = objective if objective is not None else SSEObjective()
        self.centroid_updater = centroid_updater if centroid_updater is not None else CentroidCalculator()
        self.verbose = verbose

    def refine(self, points: Tensor, solution: Solution,
               max_iterations: Optional[int] = None) -> LocalSearchResult:
        """Improve ``solution`` in place.

        ``solution.clusters`` is mutated, ``solution.centroids`` is replaced
        after every accepted move and ``solution.cost`` receives the final,
        incrementally tracked cost.
        """
        if max_iterations is None:
            max_iterations = self.max_iterations
        else:
            max_iterations = check_positive_int(max_iterations, 'max_iterations')

        clusters = solution.clusters
        n_clusters = len(clusters)
        cost = solution.cost
        status = LocalSearchStatus.SCANNING
        n_moves = 0
        count = 0

        while status is LocalSearchStatus.SCANNING:
            improvement = False

            for i in range(n_clusters):
                cluster = clusters[i]
                j = 0
                while j < cluster.size and status is LocalSearchStatus.SCANNING:
                    moved = False
                    for target in range(n_clusters):
                        if target == i or cluster.size <= self.min_cluster_size:
                            continue
                        if count >= max_iterations:
                            status = LocalSearchStatus.ITERATION_CAP_REACHED
                            break

                        delta = self.objective.move_delta(
                            points, clusters, solution.centroids, target, i, j)
                        count += 1

                        if delta < -self.tol * max(1.0, abs(cost)):
                            clusters[target].add(cluster.remove_at(j))
                            if cluster.size == 0:
                                raise InternalConsistencyError(
                                    f"Cluster {i} became empty during local search")
                            solution.centroids = self.centroid_updater.compute_all(points, clusters)
                            cost += delta
                            n_moves += 1
                            improvement = True
                            moved = True
                            break

                    # The point after j now occupies slot j
                    if not moved:
                        j += 1

                if status is not LocalSearchStatus.SCANNING:
                    break

            if status is LocalSearchStatus.SCANNING and not improvement:
                status = LocalSearchStatus.CONVERGED

        if status is LocalSearchStatus.ITERATION_CAP_REACHED and self.verbose:
            warnings.warn(f"Local search stopped after {max_iterations} move evaluations "
                          f"without converging")
        if self.verbose >= 2:
            print(f"  local search: {status.value}, {n_moves} moves, "
                  f"{count} evaluations, cost = {cost:.6f}")

        solution.cost = cost
        return LocalSearchResult(cost=cost, status=status, n_moves=n_moves, n_evaluations=count)

"""
Sum-of-squared-errors objective.

The quantity GRASP minimizes: total squared Euclidean distance of every point
to the centroid of its cluster. ``move_delta`` prices a single relocation
without touching the clustering, which is what the local search needs.
"""

from typing import List, Optional

from torch import Tensor

from ..base.interfaces import ClusteringObjective
from ..base.data_structures import Cluster
from ..base.exceptions import InternalConsistencyError
from ..distances.euclidean import EuclideanDistance


class SSEObjective(ClusteringObjective):
    """Within-cluster sum of squares."""

    def __init__(self, distance: Optional[EuclideanDistance] = None):
        self.distance = distance if distance is not None else EuclideanDistance(squared=True)

    def total_cost(self, points: Tensor, clusters: List[Cluster],
                   centroids: Tensor) -> float:
        """Sum over clusters of member distances to the cluster centroid."""
        if len(clusters) != centroids.shape[0]:
            raise InternalConsistencyError(
                f"{len(clusters)} clusters but {centroids.shape[0]} centroids")

        total = 0.0
        for k, cluster in enumerate(clusters):
            if cluster.size == 0:
                continue
            total += self.distance.compute(cluster.points(points), centroids[k]).sum().item()
        return total

    def move_delta(self, points: Tensor, clusters: List[Cluster], centroids: Tensor,
                   target: int, source: int, position: int) -> float:
        """Cost change of moving ``clusters[source][position]`` to ``clusters[target]``.

        With n_s, n_t the current sizes and c_s, c_t the current centroids,
        removing x from the source saves n_s/(n_s-1)·||x - c_s||² and adding it
        to the target costs n_t/(n_t+1)·||x - c_t||². Both terms are exact for
        mean centroids, so the delta equals the difference of ``total_cost``
        before and after the move.
        """
        if target == source:
            raise InternalConsistencyError("Source and target cluster must differ")

        n_source = clusters[source].size
        n_target = clusters[target].size
        if n_source < 2:
            raise InternalConsistencyError(
                f"Cannot move the last point out of cluster {source}")

        x = points[clusters[source][position]].unsqueeze(0)
        d_source = self.distance.compute(x, centroids[source]).item()
        d_target = self.distance.compute(x, centroids[target]).item()

        gain = n_source / (n_source - 1) * d_source
        loss = n_target / (n_target + 1) * d_target
        return loss - gain

"""
Mean update strategy for centroid-based clustering.
"""

from typing import List
import torch
from torch import Tensor

from ..base.interfaces import CentroidUpdater
from ..base.data_structures import Cluster
from ..base.exceptions import InternalConsistencyError


class CentroidCalculator(CentroidUpdater):
    """Centroid of a cluster is the element-wise mean of its members."""

    def compute(self, points: Tensor, cluster: Cluster) -> Tensor:
        """Mean of the cluster's points.

        Raises:
            InternalConsistencyError: If the cluster has no members
        """
        if cluster.size == 0:
            raise InternalConsistencyError("Centroid requested for an empty cluster")
        return cluster.points(points).mean(dim=0)

    def compute_all(self, points: Tensor, clusters: List[Cluster]) -> Tensor:
        """(K, d) centroids, one per cluster in the same order.

        Always returns a freshly allocated tensor.
        """
        for k, cluster in enumerate(clusters):
            if cluster.size == 0:
                raise InternalConsistencyError(f"Centroid requested for empty cluster {k}")
        return torch.stack([self.compute(points, cluster) for cluster in clusters])

"""
Euclidean distance metric for clustering.

Squared distances drive both the greedy construction (attractiveness of a
cluster for a point) and the objective (dispersion around a centroid).
"""

import torch
from torch import Tensor


class EuclideanDistance:
    """Squared Euclidean distance metric.

    Computes ||x - μ||² where μ is a cluster center.
    """

    def __init__(self, squared: bool = True):
        """
        Args:
            squared: If True, return squared distances (default).
                    If False, return actual Euclidean distances.
        """
        self.squared = squared

    def _finish(self, squared_distances: Tensor) -> Tensor:
        if self.squared:
            return squared_distances
        return torch.sqrt(squared_distances)

    def compute(self, points: Tensor, center: Tensor) -> Tensor:
        """Distances from every point to a single center.

        Args:
            points: (n, d) tensor of points
            center: (d,) tensor

        Returns:
            (n,) tensor of distances
        """
        diff = points - center.unsqueeze(0)
        return self._finish(torch.sum(diff * diff, dim=1))

    def point_to_centers(self, point: Tensor, centers: Tensor) -> Tensor:
        """Distances from one point to each of K centers.

        Args:
            point: (d,) tensor
            centers: (K, d) tensor

        Returns:
            (K,) tensor of distances
        """
        diff = centers - point.unsqueeze(0)
        return self._finish(torch.sum(diff * diff, dim=1))

    def pairwise(self, points: Tensor, centers: Tensor) -> Tensor:
        """All distances between points and centers.

        Args:
            points: (n, d) tensor
            centers: (K, d) tensor

        Returns:
            (n, K) tensor of distances
        """
        diff = points.unsqueeze(1) - centers.unsqueeze(0)
        return self._finish(torch.sum(diff * diff, dim=2))

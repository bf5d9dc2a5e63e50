"""
Greedy randomized construction for GRASP.

Builds a partition in two phases:

1. Seeding. The first seed is drawn uniformly. Every further seed is taken
   from the restricted candidate list (RCL) of points far from the seeds
   already chosen: D(p) >= Dmax - threshold * (Dmax - Dmin), where D(p) is the
   squared distance from p to its nearest seed. With threshold 0 this is
   farthest-first traversal.
2. Assignment. The remaining points are visited in a random order. Cluster k
   is attractive for point p in proportion to d_k = ||p - c_k||², with c_k the
   running mean of the cluster so far. The RCL holds every cluster with
   d_k <= dmin + threshold * (dmax - dmin).

A single RCL entry, or threshold 0, takes the first best entry without a
random draw. Otherwise one entry is drawn uniformly. All draws go through the
generator passed in, so a seeded generator reproduces the partition exactly.
"""

from typing import List, Optional
import torch
from torch import Tensor

from ..base.interfaces import ConstructionStrategy
from ..base.data_structures import Cluster
from ..distances.euclidean import EuclideanDistance
from ..utils.validation import check_n_clusters, check_threshold


class GreedyRandomizedConstruction(ConstructionStrategy):
    """Randomized greedy assignment of points to K clusters."""

    def __init__(self, distance: Optional[EuclideanDistance] = None):
        self.distance = distance if distance is not None else EuclideanDistance(squared=True)

    def build(self, points: Tensor, generator: torch.Generator,
              n_clusters: int, threshold: float) -> List[Cluster]:
        """Build K non-empty clusters covering every point exactly once.

        Args:
            points: (n, d) data points (not modified)
            generator: Random source
            n_clusters: Number of clusters K
            threshold: RCL width in [0, 1]

        Returns:
            List of K clusters

        Raises:
            InvalidConfiguration: If K is not in [1, n] or threshold not in [0, 1]
        """
        n_points = points.shape[0]
        check_n_clusters(n_clusters, n_points)
        threshold = check_threshold(threshold)

        seeds = self._choose_seeds(points, generator, n_clusters, threshold)
        clusters = [Cluster([idx]) for idx in seeds]
        centroids = points[torch.tensor(seeds, dtype=torch.long)].clone()

        seeded = torch.zeros(n_points, dtype=torch.bool)
        seeded[torch.tensor(seeds, dtype=torch.long)] = True
        order = torch.randperm(n_points, generator=generator)

        for idx in order.tolist():
            if seeded[idx]:
                continue
            costs = self.distance.point_to_centers(points[idx], centroids)
            rcl = self._restricted_candidates(costs, threshold, largest=False)
            k = self._pick(rcl, generator, threshold)

            cluster = clusters[k]
            cluster.add(idx)
            centroids[k] = centroids[k] + (points[idx] - centroids[k]) / cluster.size

        return clusters

    def _choose_seeds(self, points: Tensor, generator: torch.Generator,
                      n_clusters: int, threshold: float) -> List[int]:
        """One distinct seed point per cluster."""
        n_points = points.shape[0]
        first = int(torch.randint(n_points, (1,), generator=generator).item())
        seeds = [first]

        nearest = self.distance.compute(points, points[first])
        available = torch.ones(n_points, dtype=torch.bool)
        available[first] = False

        for _ in range(1, n_clusters):
            candidates = torch.where(available)[0]
            rcl = candidates[self._restricted_candidates(nearest[candidates], threshold,
                                                         largest=True)]
            idx = int(self._pick(rcl, generator, threshold))

            seeds.append(idx)
            available[idx] = False
            nearest = torch.minimum(nearest, self.distance.compute(points, points[idx]))

        return seeds

    @staticmethod
    def _restricted_candidates(values: Tensor, threshold: float, largest: bool) -> Tensor:
        """Positions of ``values`` within ``threshold`` of the best value.

        Best is the maximum when ``largest`` is set, the minimum otherwise.
        Positions are returned in ascending order, so the first entry is always
        the lowest-index best value when threshold is 0.
        """
        v_min = values.min()
        v_max = values.max()
        spread = v_max - v_min
        if largest:
            mask = values >= v_max - threshold * spread
        else:
            mask = values <= v_min + threshold * spread
        return torch.where(mask)[0]

    @staticmethod
    def _pick(rcl: Tensor, generator: torch.Generator, threshold: float) -> int:
        if len(rcl) == 1 or threshold == 0.0:
            return int(rcl[0])
        choice = torch.randint(len(rcl), (1,), generator=generator).item()
        return int(rcl[choice])

"""
Core interfaces for the GRASP clustering components.

This module defines the abstract base classes that the construction, update,
objective and local search components implement, so the optimizer can be
assembled from interchangeable parts.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
import torch
from torch import Tensor

from .data_structures import Cluster, Solution, LocalSearchResult


class ConstructionStrategy(ABC):
    """Builds an initial partition of the points into clusters."""

    @abstractmethod
    def build(self, points: Tensor, generator: torch.Generator,
              n_clusters: int, threshold: float) -> List[Cluster]:
        """Build one candidate partition.

        Args:
            points: (n, d) tensor of data points
            generator: Random source, advanced by every random draw
            n_clusters: Number of clusters K
            threshold: Restricted candidate list width in [0, 1]

        Returns:
            List of K non-empty clusters covering every point exactly once
        """
        pass


class CentroidUpdater(ABC):
    """Derives one representative point per cluster."""

    @abstractmethod
    def compute(self, points: Tensor, cluster: Cluster) -> Tensor:
        """Return the (d,) representative of a single cluster."""
        pass

    def compute_all(self, points: Tensor, clusters: List[Cluster]) -> Tensor:
        """Return the (K, d) representatives, in cluster order."""
        return torch.stack([self.compute(points, cluster) for cluster in clusters])


class ClusteringObjective(ABC):
    """Abstract base class for clustering objective functions."""

    @abstractmethod
    def total_cost(self, points: Tensor, clusters: List[Cluster],
                   centroids: Tensor) -> float:
        """Compute the objective value of a full clustering.

        Args:
            points: (n, d) tensor of data points
            clusters: List of K clusters
            centroids: (K, d) tensor of cluster centroids

        Returns:
            Scalar objective value
        """
        pass

    @abstractmethod
    def move_delta(self, points: Tensor, clusters: List[Cluster], centroids: Tensor,
                   target: int, source: int, position: int) -> float:
        """Change in objective if one point moved between clusters.

        Args:
            points: (n, d) tensor of data points
            clusters: List of K clusters
            centroids: (K, d) tensor of cluster centroids
            target: Index of the receiving cluster
            source: Index of the cluster currently holding the point
            position: Position of the point inside ``clusters[source]``

        Returns:
            Objective change; negative values are improvements
        """
        pass

    @property
    def minimize(self) -> bool:
        """Whether to minimize (True) or maximize (False) this objective."""
        return True


class LocalSearchStrategy(ABC):
    """Improves a solution in place."""

    @abstractmethod
    def refine(self, points: Tensor, solution: Solution,
               max_iterations: Optional[int] = None) -> LocalSearchResult:
        """Refine ``solution``, mutating its clusters and replacing its centroids.

        Args:
            points: (n, d) tensor of data points
            solution: Solution to improve; ``solution.cost`` is the starting cost
            max_iterations: Cap on move evaluations (None for the strategy default)

        Returns:
            LocalSearchResult with the final cost and terminal status
        """
        pass

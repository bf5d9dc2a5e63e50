"""
Core data structures for GRASP clustering.

Points live in a single (n, d) tensor owned by the caller. Clusters only hold
indices into that tensor, so moving a point between clusters is a cheap list
operation and point identity never changes.
"""

from typing import Optional, List, Iterator, Iterable
from enum import Enum
import copy
import torch
from torch import Tensor
from dataclasses import dataclass, field

from .exceptions import InternalConsistencyError


class Cluster:
    """Mutable, ordered membership list of point indices."""

    def __init__(self, members: Optional[Iterable[int]] = None):
        self.members: List[int] = [int(i) for i in members] if members is not None else []

    def add(self, index: int) -> None:
        """Append a point index at the end of the cluster."""
        self.members.append(int(index))

    def remove_at(self, position: int) -> int:
        """Remove and return the point index stored at ``position``."""
        return self.members.pop(position)

    @property
    def size(self) -> int:
        return len(self.members)

    def index_tensor(self, device: Optional[torch.device] = None) -> Tensor:
        """Member indices as a long tensor."""
        return torch.tensor(self.members, dtype=torch.long, device=device)

    def points(self, X: Tensor) -> Tensor:
        """Rows of ``X`` belonging to this cluster, shape (size, d)."""
        return X[self.index_tensor(X.device)]

    def copy(self) -> 'Cluster':
        return Cluster(self.members)

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self) -> Iterator[int]:
        return iter(self.members)

    def __getitem__(self, position: int) -> int:
        return self.members[position]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cluster):
            return NotImplemented
        return self.members == other.members

    def __repr__(self) -> str:
        return f"Cluster(size={self.size}, members={self.members})"


def labels_from_clusters(clusters: List[Cluster], n_points: int,
                         device: Optional[torch.device] = None) -> Tensor:
    """Convert a list of clusters into an (n,) label tensor.

    Raises:
        InternalConsistencyError: If a point is missing, duplicated or out of range.
    """
    labels = torch.full((n_points,), -1, dtype=torch.long, device=device)
    for k, cluster in enumerate(clusters):
        for idx in cluster:
            if idx < 0 or idx >= n_points:
                raise InternalConsistencyError(
                    f"Cluster {k} references point {idx} outside [0, {n_points})")
            if labels[idx] != -1:
                raise InternalConsistencyError(
                    f"Point {idx} assigned to clusters {int(labels[idx])} and {k}")
            labels[idx] = k

    missing = torch.where(labels == -1)[0]
    if len(missing) > 0:
        raise InternalConsistencyError(
            f"{len(missing)} points are not assigned to any cluster "
            f"(first: {missing[0].item()})")
    return labels


@dataclass
class Solution:
    """A clustering candidate: membership, centroids and its cost.

    ``centroids`` is an (K, d) tensor that is always replaced wholesale when
    membership changes, never written in place.
    """
    clusters: List[Cluster]
    centroids: Tensor
    cost: float

    @property
    def n_clusters(self) -> int:
        return len(self.clusters)

    def sizes(self) -> List[int]:
        return [cluster.size for cluster in self.clusters]

    def labels(self, n_points: int) -> Tensor:
        """(n,) tensor with the cluster index of every point."""
        return labels_from_clusters(self.clusters, n_points, device=self.centroids.device)

    def copy(self) -> 'Solution':
        return Solution(
            clusters=[cluster.copy() for cluster in self.clusters],
            centroids=self.centroids.clone(),
            cost=self.cost
        )


class LocalSearchStatus(Enum):
    """States of the first-improvement local search."""
    SCANNING = 'scanning'
    CONVERGED = 'converged'
    ITERATION_CAP_REACHED = 'iteration_cap_reached'


@dataclass
class LocalSearchResult:
    """Outcome of one local search run."""
    cost: float
    status: LocalSearchStatus
    n_moves: int = 0
    n_evaluations: int = 0

    @property
    def converged(self) -> bool:
        return self.status is LocalSearchStatus.CONVERGED


@dataclass
class RestartRecord:
    """Bookkeeping for one GRASP restart."""
    restart: int
    greedy_cost: float
    refined_cost: float
    status: LocalSearchStatus
    n_moves: int
    n_evaluations: int
    improved_best: bool = False


@dataclass
class GraspResult:
    """Best solution found by a GRASP run plus its provenance."""
    best_cost: float
    initial_cost: float
    clusters: List[Cluster]
    centroids: Tensor
    labels: Tensor
    seed: Optional[int]
    n_clusters: int
    threshold: float
    restarts: int
    elapsed: float
    history: List[RestartRecord] = field(default_factory=list)

    @property
    def improvement(self) -> float:
        """Cost removed by local search on the winning restart."""
        return self.initial_cost - self.best_cost

    def best_costs(self) -> List[float]:
        """Incumbent best cost after each restart."""
        trace = []
        best = float('inf')
        for record in self.history:
            if record.refined_cost < best:
                best = record.refined_cost
            trace.append(best)
        return trace

    def copy(self) -> 'GraspResult':
        return copy.deepcopy(self)

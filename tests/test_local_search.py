# tests/test_local_search.py
"""
First-improvement local search.

Covers:
- a misassigned configuration is repaired with the expected number of moves
- incremental cost bookkeeping matches a full recomputation
- the size floor, the iteration cap and the partition invariant after every move
- immediate convergence when no cluster may give points away
"""

from __future__ import annotations


import pytest
import torch

from kgrasp.base.data_structures import Cluster, Solution, LocalSearchStatus
from kgrasp.base.exceptions import InvalidConfiguration
from kgrasp.construction.greedy_randomized import GreedyRandomizedConstruction
from kgrasp.local_search.first_improvement import FirstImprovementLocalSearch
from kgrasp.objectives.sse import SSEObjective
from kgrasp.updates.mean import CentroidCalculator
from kgrasp.utils.validation import check_partition

from data_gen import make_uniform
from utils import assert_partition


def _solution(X, clusters):
    centroids = CentroidCalculator().compute_all(X, clusters)
    cost = SSEObjective().total_cost(X, clusters, centroids)
    return Solution(clusters=clusters, centroids=centroids, cost=cost)


def _swapped_squares(X):
    # One point of each square sits in the other square's cluster
    return [Cluster([0, 1, 2, 4]), Cluster([5, 6, 7, 3])]


def test_repairs_swapped_points(eight_points):
    solution = _solution(eight_points, _swapped_squares(eight_points))
    start = solution.cost

    result = FirstImprovementLocalSearch().refine(eight_points, solution)

    assert result.status is LocalSearchStatus.CONVERGED
    assert result.converged
    assert result.n_moves == 2
    assert result.cost < start
    assert result.cost == pytest.approx(4.0)
    assert solution.cost == result.cost
    groups = sorted(sorted(c.members) for c in solution.clusters)
    assert groups == [[0, 1, 2, 3], [4, 5, 6, 7]]


def test_centroids_replaced_and_consistent(eight_points):
    solution = _solution(eight_points, _swapped_squares(eight_points))
    original = solution.centroids
    original_copy = original.clone()

    FirstImprovementLocalSearch().refine(eight_points, solution)

    assert solution.centroids is not original
    assert torch.equal(original, original_copy)
    expected = CentroidCalculator().compute_all(eight_points, solution.clusters)
    assert torch.allclose(solution.centroids, expected)


def test_iteration_cap_stops_search(eight_points):
    solution = _solution(eight_points, _swapped_squares(eight_points))
    start = solution.cost

    result = FirstImprovementLocalSearch(max_iterations=1).refine(eight_points, solution)

    assert result.status is LocalSearchStatus.ITERATION_CAP_REACHED
    assert result.n_evaluations == 1
    assert result.n_moves == 0
    assert result.cost == start


def test_max_iterations_argument_overrides_default(eight_points):
    solution = _solution(eight_points, _swapped_squares(eight_points))
    result = FirstImprovementLocalSearch(max_iterations=10000).refine(
        eight_points, solution, max_iterations=3)
    assert result.status is LocalSearchStatus.ITERATION_CAP_REACHED
    assert result.n_evaluations == 3


def test_iteration_cap_warns_when_verbose(eight_points):
    solution = _solution(eight_points, _swapped_squares(eight_points))
    with pytest.warns(UserWarning, match="without converging"):
        FirstImprovementLocalSearch(max_iterations=1, verbose=1).refine(eight_points, solution)


def test_small_clusters_converge_immediately(six_points):
    clusters = [Cluster([0, 1, 2]), Cluster([3, 4, 5])]
    solution = _solution(six_points, clusters)
    start = solution.cost

    result = FirstImprovementLocalSearch().refine(six_points, solution)

    assert result.status is LocalSearchStatus.CONVERGED
    assert result.n_moves == 0
    assert result.n_evaluations == 0
    assert result.cost == start


def test_size_floor_blocks_moves_from_small_clusters(six_points):
    # Point 3 is badly placed but its cluster has only 3 members
    clusters = [Cluster([0, 1, 3]), Cluster([2, 4, 5])]
    solution = _solution(six_points, clusters)
    result = FirstImprovementLocalSearch().refine(six_points, solution)
    assert result.n_moves == 0
    assert [c.members for c in solution.clusters] == [[0, 1, 3], [2, 4, 5]]


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_random_instances_keep_invariants(seed):
    X = make_uniform(n=60, d=2, seed=seed)
    g = torch.Generator()
    g.manual_seed(seed)
    clusters = GreedyRandomizedConstruction().build(X, g, 4, 1.0)
    initial_sizes = [c.size for c in clusters]
    solution = _solution(X, clusters)
    greedy_cost = solution.cost

    result = FirstImprovementLocalSearch().refine(X, solution)

    # Monotone improvement and exact incremental bookkeeping
    assert result.cost <= greedy_cost
    recomputed = SSEObjective().total_cost(X, solution.clusters, solution.centroids)
    assert result.cost == pytest.approx(recomputed, rel=1e-9, abs=1e-9)

    # Partition and size floor
    assert_partition(solution.clusters, 60)
    for before, cluster in zip(initial_sizes, solution.clusters):
        assert cluster.size >= min(before, 3)

    assert result.n_evaluations <= 10000


class _CheckingCalculator(CentroidCalculator):
    """Verifies the partition every time centroids are recomputed after a move."""

    def __init__(self, n_points):
        self.n_points = n_points
        self.calls = 0

    def compute_all(self, points, clusters):
        self.calls += 1
        check_partition(clusters, self.n_points)
        return super().compute_all(points, clusters)


def test_partition_holds_after_every_move():
    X = make_uniform(n=40, d=2, seed=7)
    g = torch.Generator()
    g.manual_seed(7)
    clusters = GreedyRandomizedConstruction().build(X, g, 3, 1.0)
    solution = _solution(X, clusters)

    checker = _CheckingCalculator(40)
    result = FirstImprovementLocalSearch(centroid_updater=checker).refine(X, solution)

    assert checker.calls == result.n_moves


class _ConstantDeltaObjective(SSEObjective):
    """Prices every move at the same small gain."""

    def __init__(self, delta):
        super().__init__()
        self.delta = delta

    def move_delta(self, points, clusters, centroids, target, source, position):
        return self.delta


def test_tolerance_scales_with_cost(eight_points):
    objective = _ConstantDeltaObjective(-1e-6)

    large = _solution(eight_points, _swapped_squares(eight_points))
    large.cost = 1e9
    result = FirstImprovementLocalSearch(objective=objective).refine(eight_points, large)
    assert result.status is LocalSearchStatus.CONVERGED
    assert result.n_moves == 0
    assert result.n_evaluations == 8

    small = _solution(eight_points, _swapped_squares(eight_points))
    small.cost = 1.0
    result = FirstImprovementLocalSearch(objective=objective, max_iterations=50).refine(
        eight_points, small)
    assert result.n_moves > 0


def test_invalid_parameters():
    with pytest.raises(InvalidConfiguration):
        FirstImprovementLocalSearch(max_iterations=0)
    with pytest.raises(InvalidConfiguration):
        FirstImprovementLocalSearch(min_cluster_size=0)

"""
Human-readable reports of a GRASP run.
"""

from typing import List, Optional, Union
from pathlib import Path
from torch import Tensor

from ..base.data_structures import Cluster, GraspResult


def _format_vector(v: Tensor, precision: int) -> str:
    return "[" + ", ".join(f"{x:.{precision}f}" for x in v.tolist()) + "]"


def format_report(source: Union[str, Path],
                  points: Tensor,
                  clusters: List[Cluster],
                  centroids: Tensor,
                  seed: Optional[int],
                  initial_cost: float,
                  final_cost: float,
                  elapsed: float,
                  precision: int = 4,
                  show_members: bool = True) -> str:
    """Render a run's outcome as text.

    Args:
        source: Dataset identifier (usually the file path)
        points: (n, d) data points
        clusters: Winning clusters
        centroids: (K, d) winning centroids
        seed: Seed of the run, or None
        initial_cost: Greedy cost of the winning restart
        final_cost: Cost after local search
        elapsed: Wall-clock seconds
        precision: Decimals for centroids and costs
        show_members: Whether to list the point indices of each cluster

    Returns:
        Multi-line report
    """
    n_points, dimension = points.shape
    lines = [
        f"Dataset: {source}",
        f"Points: {n_points}  Features: {dimension}  Clusters: {len(clusters)}",
        f"Seed: {seed if seed is not None else 'random'}",
        "",
    ]

    for k, cluster in enumerate(clusters):
        lines.append(f"Cluster {k}: {cluster.size} points, "
                     f"centroid = {_format_vector(centroids[k], precision)}")
        if show_members:
            lines.append("  members: " + " ".join(str(idx) for idx in cluster))

    improvement = initial_cost - final_cost
    relative = 100.0 * improvement / initial_cost if initial_cost > 0 else 0.0
    lines.extend([
        "",
        f"Initial cost: {initial_cost:.{precision}f}",
        f"Final cost:   {final_cost:.{precision}f}",
        f"Improvement:  {improvement:.{precision}f} ({relative:.2f}%)",
        f"Time:         {elapsed:.3f}s",
    ])
    return "\n".join(lines)


def format_result(source: Union[str, Path], points: Tensor, result: GraspResult,
                  **kwargs) -> str:
    """Render a GraspResult with ``format_report``."""
    return format_report(source, points, result.clusters, result.centroids, result.seed,
                         result.initial_cost, result.best_cost, result.elapsed, **kwargs)


def print_report(source: Union[str, Path],
                 points: Tensor,
                 clusters: List[Cluster],
                 centroids: Tensor,
                 seed: Optional[int],
                 initial_cost: float,
                 final_cost: float,
                 elapsed: float,
                 **kwargs) -> None:
    """Print ``format_report`` to stdout."""
    print(format_report(source, points, clusters, centroids, seed,
                        initial_cost, final_cost, elapsed, **kwargs))

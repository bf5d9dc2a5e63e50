"""
Cluster visualization utilities.

Scatter plots of a GRASP solution on its first two features.
"""

from typing import Optional, List
from torch import Tensor
import matplotlib.pyplot as plt
import numpy as np

from ..base.data_structures import Cluster


def plot_solution_2d(points: Tensor,
                     clusters: List[Cluster],
                     centroids: Optional[Tensor] = None,
                     ax: Optional[plt.Axes] = None,
                     colors: Optional[List[str]] = None,
                     alpha: float = 0.7,
                     center_marker: str = 'X',
                     center_size: int = 200,
                     point_size: int = 50,
                     show_legend: bool = True,
                     title: Optional[str] = None) -> plt.Axes:
    """Plot 2D clustering results.

    Args:
        points: (n, d) data points, d >= 2; only the first two features are drawn
        clusters: Cluster membership lists
        centroids: Optional (K, d) cluster centroids
        ax: Matplotlib axes (created if None)
        colors: List of colors for clusters
        alpha: Point transparency
        center_marker: Marker for centroids
        center_size: Size of centroid markers
        point_size: Size of data points
        show_legend: Whether to show legend
        title: Plot title

    Returns:
        Matplotlib axes
    """
    if points.shape[1] < 2:
        raise ValueError(f"Need at least 2 features to plot, got {points.shape[1]}")

    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 6))

    X_np = points.detach().cpu().numpy()
    n_clusters = len(clusters)

    if colors is None:
        cmap = plt.get_cmap('tab10' if n_clusters <= 10 else 'tab20')
        colors = [cmap(i % cmap.N) for i in range(n_clusters)]

    for k, cluster in enumerate(clusters):
        idx = np.asarray(cluster.members, dtype=np.int64)
        ax.scatter(X_np[idx, 0], X_np[idx, 1],
                   c=[colors[k % len(colors)]],
                   s=point_size,
                   alpha=alpha,
                   edgecolors='black',
                   linewidth=0.5,
                   label=f'Cluster {k}')

    if centroids is not None:
        centers_np = centroids.detach().cpu().numpy()
        ax.scatter(centers_np[:, 0], centers_np[:, 1],
                   c='black',
                   marker=center_marker,
                   s=center_size,
                   edgecolors='white',
                   linewidth=2,
                   label='Centroids')

    if show_legend:
        ax.legend(loc='best')
    if title:
        ax.set_title(title)
    ax.set_xlabel('Feature 1')
    ax.set_ylabel('Feature 2')
    ax.grid(True, alpha=0.3)

    return ax

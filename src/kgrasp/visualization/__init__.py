"""Visualization utilities for clustering results."""

from .plot_clusters import plot_solution_2d

__all__ = [
    'plot_solution_2d'
]

"""Distance metrics for clustering."""

from .euclidean import EuclideanDistance

__all__ = [
    'EuclideanDistance'
]

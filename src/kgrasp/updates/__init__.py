"""Centroid update strategies."""

from .mean import CentroidCalculator

__all__ = [
    'CentroidCalculator'
]

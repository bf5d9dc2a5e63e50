"""Construction strategies for GRASP."""

from .greedy_randomized import GreedyRandomizedConstruction

__all__ = [
    'GreedyRandomizedConstruction'
]

"""Local search strategies for refining clusterings."""

from .first_improvement import FirstImprovementLocalSearch

__all__ = [
    'FirstImprovementLocalSearch'
]

"""Clustering objective functions."""

from .sse import SSEObjective

__all__ = [
    'SSEObjective'
]

"""Clustering algorithm implementations."""

from .grasp import GRASP, optimize
from .builder import GraspBuilder, create_grasp

__all__ = [
    'GRASP',
    'optimize',
    'GraspBuilder',
    'create_grasp'
]

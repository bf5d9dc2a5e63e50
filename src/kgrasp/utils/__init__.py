"""Utility functions for kgrasp."""

from .validation import (
    validate_data,
    check_n_clusters,
    check_threshold,
    check_positive_int,
    check_random_state,
    check_partition
)

__all__ = [
    'validate_data',
    'check_n_clusters',
    'check_threshold',
    'check_positive_int',
    'check_random_state',
    'check_partition'
]

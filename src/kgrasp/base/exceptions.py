"""
Error taxonomy for GRASP clustering.

Configuration and data errors derive from ``ValueError`` and algorithmic
consistency failures from ``RuntimeError``, so callers that only know the
builtin exceptions keep working.
"""


class GraspError(Exception):
    """Base class for all errors raised by kgrasp."""


class InvalidConfiguration(GraspError, ValueError):
    """Run parameters are invalid (K, threshold, restarts, iteration cap, data shape).

    Raised before any clustering work begins.
    """


class DataFormatError(GraspError, ValueError):
    """The dataset could not be read as a numeric point matrix."""


class InternalConsistencyError(GraspError, RuntimeError):
    """A solution broke an invariant that the algorithm guarantees.

    Examples are an empty cluster reaching centroid computation or a point
    assigned to two clusters. Indicates a bug, not a recoverable condition.
    """

"""
Input validation utilities.

Every check here runs before any clustering work starts, so an invalid run
fails fast with InvalidConfiguration instead of half-way through a restart.
"""

from typing import Optional, Union, List
import torch
from torch import Tensor
import numpy as np

from ..base.exceptions import InvalidConfiguration, InternalConsistencyError
from ..base.data_structures import Cluster


def validate_data(X: Union[Tensor, np.ndarray, list],
                 dtype: torch.dtype = torch.float64,
                 device: Optional[torch.device] = None,
                 ensure_finite: bool = True,
                 ensure_min_samples: int = 1,
                 ensure_min_features: int = 1) -> Tensor:
    """Validate and convert input data to a 2D tensor.

    Args:
        X: Input data (tensor, numpy array, or list)
        dtype: Target data type
        device: Target device
        ensure_finite: Whether to check for inf/nan
        ensure_min_samples: Minimum number of samples required
        ensure_min_features: Minimum number of features required

    Returns:
        Validated (n, d) tensor

    Raises:
        InvalidConfiguration: If validation fails
    """
    if isinstance(X, Tensor):
        X = X.to(dtype=dtype, device=device)
    elif isinstance(X, np.ndarray):
        X = torch.from_numpy(X).to(dtype=dtype, device=device)
    elif isinstance(X, (list, tuple)):
        try:
            X = torch.tensor(X, dtype=dtype, device=device)
        except (TypeError, ValueError) as exc:
            raise InvalidConfiguration(f"Cannot convert input to a numeric tensor: {exc}") from exc
    else:
        raise InvalidConfiguration(f"Cannot convert {type(X)} to tensor")

    if X.dim() == 1:
        X = X.unsqueeze(1)
    elif X.dim() != 2:
        raise InvalidConfiguration(f"Expected 2D array, got {X.dim()}D")

    n_samples, n_features = X.shape
    if n_samples < ensure_min_samples:
        raise InvalidConfiguration(f"Found {n_samples} samples, but need at least "
                                   f"{ensure_min_samples}")
    if n_features < ensure_min_features:
        raise InvalidConfiguration(f"Found {n_features} features, but need at least "
                                   f"{ensure_min_features}")

    if ensure_finite and not torch.isfinite(X).all():
        raise InvalidConfiguration("Input contains NaN or infinite values")

    return X


def check_n_clusters(n_clusters: int, n_samples: int) -> None:
    """Validate number of clusters.

    Raises:
        InvalidConfiguration: If K <= 0 or K > n_samples
    """
    if isinstance(n_clusters, bool) or not isinstance(n_clusters, (int, np.integer)):
        raise InvalidConfiguration(f"n_clusters must be int, got {type(n_clusters)}")

    if n_clusters <= 0:
        raise InvalidConfiguration(f"n_clusters must be positive, got {n_clusters}")

    if n_clusters > n_samples:
        raise InvalidConfiguration(f"n_clusters ({n_clusters}) cannot be larger than "
                                   f"n_samples ({n_samples})")


def check_threshold(threshold: float) -> float:
    """Validate the restricted candidate list threshold (must lie in [0, 1])."""
    try:
        value = float(threshold)
    except (TypeError, ValueError) as exc:
        raise InvalidConfiguration(f"threshold must be a number, got {threshold!r}") from exc

    if not (0.0 <= value <= 1.0):
        raise InvalidConfiguration(f"threshold must be in [0, 1], got {threshold}")
    return value


def check_positive_int(value: int, name: str) -> int:
    """Validate a strictly positive integer parameter such as ``restarts``."""
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidConfiguration(f"{name} must be int, got {type(value)}")
    if value < 1:
        raise InvalidConfiguration(f"{name} must be >= 1, got {value}")
    return int(value)


def check_random_state(random_state: Optional[Union[int, torch.Generator]]) -> torch.Generator:
    """Create the run's random source.

    Args:
        random_state: Seed, existing generator, or None for a fresh seed

    Returns:
        torch.Generator on the CPU
    """
    if random_state is None:
        generator = torch.Generator()
        generator.seed()
        return generator
    elif isinstance(random_state, torch.Generator):
        return random_state
    elif isinstance(random_state, (int, np.integer)) and not isinstance(random_state, bool):
        generator = torch.Generator()
        generator.manual_seed(int(random_state))
        return generator
    else:
        raise InvalidConfiguration(
            f"random_state must be int or Generator, got {type(random_state)}")


def check_partition(clusters: List[Cluster], n_points: int,
                    min_size: int = 1) -> None:
    """Check that ``clusters`` cover ``range(n_points)`` exactly once.

    Raises:
        InternalConsistencyError: On a duplicated, missing or stray point, or a
            cluster smaller than ``min_size``
    """
    seen = set()
    for k, cluster in enumerate(clusters):
        if cluster.size < min_size:
            raise InternalConsistencyError(
                f"Cluster {k} has {cluster.size} members, expected at least {min_size}")
        for idx in cluster:
            if idx < 0 or idx >= n_points:
                raise InternalConsistencyError(
                    f"Cluster {k} references point {idx} outside [0, {n_points})")
            if idx in seen:
                raise InternalConsistencyError(f"Point {idx} appears in more than one cluster")
            seen.add(idx)

    if len(seen) != n_points:
        raise InternalConsistencyError(
            f"Clusters cover {len(seen)} of {n_points} points")

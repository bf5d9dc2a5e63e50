"""
Base class for clustering algorithms in kgrasp.

Provides the estimator skeleton (fit / predict / fit_predict, parameter
access, fitted-state checks) shared by the GRASP optimizer and any variant
assembled through the builder.
"""

from abc import abstractmethod
from typing import Optional, Dict, Any, List, Union
import torch
from torch import Tensor
import numpy as np

from .data_structures import Cluster, GraspResult
from ..distances.euclidean import EuclideanDistance
from ..utils.validation import validate_data


class BaseClusteringAlgorithm:
    """Base class for partitional clustering estimators.

    Subclasses implement ``_fit`` and store a GraspResult in ``result_``.
    """

    def __init__(self,
                 n_clusters: int,
                 verbose: int = 0,
                 random_state: Optional[Union[int, torch.Generator]] = None,
                 dtype: torch.dtype = torch.float64):
        """
        Args:
            n_clusters: Number of clusters K
            verbose: Verbosity level (0=silent, 1=progress, 2=detailed)
            random_state: Seed or generator for reproducibility
            dtype: Floating point type used for points and centroids
        """
        self.n_clusters = n_clusters
        self.verbose = verbose
        self.random_state = random_state
        self.dtype = dtype

        # Algorithm state
        self.fitted_ = False
        self.result_: Optional[GraspResult] = None
        self.labels_: Optional[Tensor] = None

    @abstractmethod
    def _fit(self, X: Tensor) -> GraspResult:
        """Run the algorithm on validated data and return its result."""
        pass

    def fit(self, X: Union[Tensor, np.ndarray, list], y: Optional[Tensor] = None) -> 'BaseClusteringAlgorithm':
        """Fit the clustering model.

        Args:
            X: (n, d) data
            y: Ignored (for sklearn compatibility)

        Returns:
            Self
        """
        X = self._validate_data(X)
        self.result_ = self._fit(X)
        self.labels_ = self.result_.labels
        self.fitted_ = True
        return self

    def fit_predict(self, X: Union[Tensor, np.ndarray, list], y: Optional[Tensor] = None) -> Tensor:
        """Fit and return cluster assignments of the training data."""
        self.fit(X, y)
        return self.labels_

    def predict(self, X: Union[Tensor, np.ndarray, list]) -> Tensor:
        """Assign new points to the nearest fitted centroid.

        Args:
            X: (n, d) data

        Returns:
            (n,) tensor of cluster assignments
        """
        self._check_fitted()
        X = self._validate_data(X)
        if X.shape[1] != self.cluster_centers_.shape[1]:
            raise ValueError(f"Expected dimension {self.cluster_centers_.shape[1]}, "
                             f"got {X.shape[1]}")
        distances = EuclideanDistance().pairwise(X, self.cluster_centers_)
        return distances.argmin(dim=1)

    def _validate_data(self, X: Union[Tensor, np.ndarray, list]) -> Tensor:
        """Validate and prepare input data."""
        return validate_data(X, dtype=self.dtype)

    def _check_fitted(self) -> None:
        if not self.fitted_:
            raise RuntimeError("Model must be fitted first")

    @property
    def cluster_centers_(self) -> Tensor:
        """(K, d) centroids of the best solution."""
        self._check_fitted()
        return self.result_.centroids

    @property
    def clusters_(self) -> List[Cluster]:
        """Membership lists of the best solution."""
        self._check_fitted()
        return self.result_.clusters

    @property
    def inertia_(self) -> float:
        """Final objective value."""
        self._check_fitted()
        return self.result_.best_cost

    def get_params(self, deep: bool = True) -> Dict[str, Any]:
        """Get parameters (sklearn compatibility)."""
        return {
            'n_clusters': self.n_clusters,
            'verbose': self.verbose,
            'random_state': self.random_state,
            'dtype': self.dtype
        }

    def set_params(self, **params) -> 'BaseClusteringAlgorithm':
        """Set parameters (sklearn compatibility)."""
        valid = self.get_params()
        for key, value in params.items():
            if key not in valid:
                raise ValueError(f"Invalid parameter {key!r} for {self.__class__.__name__}")
            setattr(self, key, value)
        return self

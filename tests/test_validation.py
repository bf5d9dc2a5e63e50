# tests/test_validation.py
"""
Configuration checks: every failure surfaces as InvalidConfiguration.
"""

from __future__ import annotations

import numpy as np
import pytest
import torch

from kgrasp.base.data_structures import Cluster
from kgrasp.base.exceptions import InvalidConfiguration, InternalConsistencyError
from kgrasp.utils.validation import (
    validate_data, check_n_clusters, check_threshold, check_positive_int,
    check_random_state, check_partition
)


def test_validate_data_converts_inputs():
    X = validate_data([[1, 2], [3, 4]])
    assert X.dtype == torch.float64
    assert X.shape == (2, 2)

    X = validate_data(np.array([1.0, 2.0, 3.0]))
    assert X.shape == (3, 1)


@pytest.mark.parametrize("bad", [
    [[1.0, float("nan")]],
    [[1.0, float("inf")]],
    np.zeros((2, 2, 2)),
    "not data",
])
def test_validate_data_rejects(bad):
    with pytest.raises(InvalidConfiguration):
        validate_data(bad)


@pytest.mark.parametrize("k,n", [(0, 4), (-1, 4), (5, 4)])
def test_check_n_clusters_rejects(k, n):
    with pytest.raises(InvalidConfiguration):
        check_n_clusters(k, n)


def test_check_n_clusters_accepts_bounds():
    check_n_clusters(1, 4)
    check_n_clusters(4, 4)


@pytest.mark.parametrize("t", [-0.01, 1.01, "abc", None])
def test_check_threshold_rejects(t):
    with pytest.raises(InvalidConfiguration):
        check_threshold(t)


@pytest.mark.parametrize("t", [0, 0.0, 0.5, 1.0])
def test_check_threshold_accepts(t):
    assert check_threshold(t) == float(t)


@pytest.mark.parametrize("v", [0, -3, 2.5, True])
def test_check_positive_int_rejects(v):
    with pytest.raises(InvalidConfiguration):
        check_positive_int(v, "restarts")


def test_check_random_state_seeds_reproducibly():
    g1 = check_random_state(42)
    g2 = check_random_state(42)
    assert torch.equal(torch.randperm(20, generator=g1), torch.randperm(20, generator=g2))

    g = torch.Generator()
    assert check_random_state(g) is g
    assert isinstance(check_random_state(None), torch.Generator)

    with pytest.raises(InvalidConfiguration):
        check_random_state("seed")


def test_check_partition():
    check_partition([Cluster([0, 2]), Cluster([1])], 3)
    with pytest.raises(InternalConsistencyError):
        check_partition([Cluster([0, 2]), Cluster([])], 3)
    with pytest.raises(InternalConsistencyError):
        check_partition([Cluster([0, 2]), Cluster([2, 1])], 3)
    with pytest.raises(InternalConsistencyError):
        check_partition([Cluster([0]), Cluster([1])], 3)

# tests/utils.py
"""
Small, reusable helpers used across the kgrasp test suite.

Functions:
- same_partition(y_true, y_pred): True if the labelings agree up to renaming.
- assert_partition(clusters, n): every point in exactly one cluster.
- time_block(label, meta=None): context manager that prints wall-clock time with optional metadata.
- print_timing(label, seconds, **meta): convenience printer for timings (used by time_block).
"""

from __future__ import annotations

import json
import time
from contextlib import contextmanager
from typing import Any, Dict, List

import numpy as np
import torch


def _to_numpy_1d(x: Any) -> np.ndarray:
    if isinstance(x, torch.Tensor):
        x = x.detach().cpu().numpy()
    x = np.asarray(x)
    if x.ndim != 1:
        raise ValueError(f"Expected 1D vector, got shape {x.shape}")
    return x


def same_partition(y_true: Any, y_pred: Any) -> bool:
    """
    True if y_pred induces exactly the same groups as y_true (labels may be permuted).
    """
    a = _to_numpy_1d(y_true)
    b = _to_numpy_1d(y_pred)
    if a.shape != b.shape:
        return False
    forward: Dict[int, int] = {}
    backward: Dict[int, int] = {}
    for u, v in zip(a.tolist(), b.tolist()):
        if forward.setdefault(u, v) != v or backward.setdefault(v, u) != u:
            return False
    return True


def assert_partition(clusters: List[Any], n: int) -> None:
    """Every index in range(n) appears in exactly one cluster."""
    members = sorted(idx for cluster in clusters for idx in cluster)
    assert members == list(range(n)), f"not a partition of {n} points: {members}"


@contextmanager
def time_block(label: str, meta: Dict[str, Any] | None = None):
    """
    Context manager to time a block and print a single-line summary.

    Output
    ------
    [timing] fit {"n":90,"K":3} 0.123s
    """
    t0 = time.perf_counter()
    try:
        yield
    finally:
        dt = time.perf_counter() - t0
        print_timing(label, dt, **(meta or {}))


def print_timing(label: str, seconds: float, **meta: Any) -> None:
    """
    Print timing in a compact, machine-readable single line.
    """
    meta_str = ""
    if meta:
        meta_str = " " + json.dumps(meta, separators=(",", ":"))
    print(f"[timing] {label}{meta_str} {seconds:.3f}s")

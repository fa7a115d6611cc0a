"""
Numerical helpers for the ellipsoid method.

The ellipsoid is carried implicitly as a step radius ``h`` and a matrix
``B`` mapping the unit ball onto the current ellipsoid (up to ``h``). Every
helper here works on plain NumPy arrays and never mutates its inputs.
"""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np

from .core import Array


def as_point(x: Array, dtype: Optional[np.dtype] = None) -> Array:
    """
    Return a private one-dimensional floating copy of ``x``.

    Integer input is promoted to ``float64``; floating input keeps its
    precision unless ``dtype`` is given.
    """

    arr = np.asarray(x)
    if dtype is None:
        dtype = arr.dtype if np.issubdtype(arr.dtype, np.floating) else np.float64
    if not np.issubdtype(np.dtype(dtype), np.floating):
        raise ValueError(f"dtype must be a floating type, got {np.dtype(dtype)}")
    point = np.array(arr, dtype=dtype, copy=True)
    if point.ndim != 1:
        raise ValueError(f"point must be one-dimensional, got shape {point.shape}")
    return point


def check_dimension(n: int) -> int:
    """Validate the problem dimension; the update degenerates below two."""
    if n < 2:
        raise ValueError(f"the ellipsoid method requires dimension >= 2, got {n}")
    return n


def ellipsoid_constants(n: int, dtype: np.dtype = np.float64) -> Tuple[np.floating, np.floating]:
    """
    Return ``(beta, shrink)`` for dimension ``n``.

    ``beta = sqrt((n-1)/(n+1))`` contracts the ellipsoid along the cut
    direction and ``shrink = n/sqrt(n^2-1)`` is the per-iteration growth of
    the step radius.
    """

    check_dimension(n)
    dt = np.dtype(dtype).type
    beta = np.sqrt(dt(n - 1) / dt(n + 1))
    shrink = dt(n) / np.sqrt(dt(n) * dt(n) - dt(1))
    return beta, shrink


def normalize(vector: Array) -> Array:
    """
    Scale ``vector`` to unit Euclidean norm.

    Raises
    ------
    ValueError
        If the vector has zero or non-finite norm.
    """

    norm = np.linalg.norm(vector)
    if not np.isfinite(norm) or norm == 0.0:
        raise ValueError(f"cannot normalize a vector with norm {norm}")
    return vector / norm


def rank_one_contraction(transform: Array, direction: Array, beta: float) -> Array:
    """
    Return ``transform @ (I + (beta - 1) * outer(direction, direction))``.

    Evaluated as ``transform + (beta - 1) * outer(transform @ direction,
    direction)``, which is the same product in O(n^2). ``direction`` must
    have unit norm.
    """

    return transform + (beta - 1) * np.outer(transform @ direction, direction)


def reduction_schedule(n: int, ball_radius: float, k: int) -> float:
    """
    Closed-form step radius after ``k`` iterations.

    ``ball_radius / (n + 1) * (n / sqrt(n^2 - 1)) ** k``
    """

    if k < 0:
        raise ValueError("k must be non-negative")
    check_dimension(n)
    return float(ball_radius / (n + 1) * (n / np.sqrt(n * n - 1.0)) ** k)


__all__ = [
    "as_point",
    "check_dimension",
    "ellipsoid_constants",
    "normalize",
    "rank_one_contraction",
    "reduction_schedule",
]

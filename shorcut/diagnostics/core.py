"""Numerical sanity checks used by the ellipsoid method in debug mode."""

from __future__ import annotations

import math

import numpy as np


def assert_finite(value: np.ndarray, name: str = "array") -> None:
    """
    Raise if ``value`` contains NaN or infinite entries.

    Raises
    ------
    ValueError
        If any entry is non-finite.
    """
    arr = np.asarray(value)
    if not np.all(np.isfinite(arr)):
        raise ValueError(f"{name} contains non-finite values: {arr.tolist()}")


def assert_unit_norm(vector: np.ndarray, atol: float = 1e-6) -> None:
    """
    Assert that ``vector`` has Euclidean norm 1 within ``atol``.

    Raises
    ------
    ValueError
        If the norm differs from one by more than the tolerance.
    """
    norm = float(np.linalg.norm(vector))
    if not abs(norm - 1.0) <= atol:
        raise ValueError(f"Vector is not normalized within tolerance {atol}; norm is {norm}")


def assert_in_ball(
    point: np.ndarray, center: np.ndarray, radius: float, atol: float = 0.0
) -> None:
    """
    Assert that ``point`` lies in the closed ball of ``radius`` around ``center``.

    Raises
    ------
    ValueError
        If the distance exceeds ``radius + atol``.
    """
    distance = float(np.linalg.norm(np.asarray(point) - np.asarray(center)))
    if distance > radius + atol:
        raise ValueError(f"Point lies {distance} from the center, outside radius {radius}")


def ellipsoid_volume_factor(n: int) -> float:
    """
    Volume ratio between consecutive ellipsoids in dimension ``n``.

    Each iteration contracts one axis by ``sqrt((n-1)/(n+1))`` and scales
    the whole body by ``n/sqrt(n^2-1)``, so the volume is multiplied by
    ``sqrt((n-1)/(n+1)) * (n/sqrt(n^2-1))**n``, which is below one for
    every ``n >= 2``.
    """
    if n < 2:
        raise ValueError("ellipsoid_volume_factor requires n >= 2")
    beta = math.sqrt((n - 1) / (n + 1))
    shrink = n / math.sqrt(n * n - 1)
    return beta * shrink**n


__all__ = ["assert_finite", "assert_unit_norm", "assert_in_ball", "ellipsoid_volume_factor"]

"""
Ready-made convex functions with subgradient oracles.

Each builder returns a :class:`Constraint` (or :class:`Objective`) whose
callables close over private copies of the supplied data.
"""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

from .core import Array, Constraint, ConstraintLike, Objective


def linear_constraint(a: Array, b: float, name: Optional[str] = None) -> Constraint:
    """Half-space ``a^T x <= b``, i.e. ``a^T x - b <= 0``."""
    a_vec = np.array(a, dtype=float).reshape(-1)
    offset = float(b)

    def fun(x: Array) -> float:
        return float(a_vec @ x - offset)

    def subgrad(x: Array) -> Array:
        return a_vec.copy()

    return Constraint(fun=fun, subgrad=subgrad, name=name)


def ball_constraint(center: Array, radius: float, name: Optional[str] = None) -> Constraint:
    """Euclidean ball ``||x - c||^2 - r^2 <= 0``."""
    if radius <= 0:
        raise ValueError("radius must be positive")
    c_vec = np.array(center, dtype=float).reshape(-1)
    r_sq = float(radius) ** 2

    def fun(x: Array) -> float:
        diff = x - c_vec
        return float(diff @ diff - r_sq)

    def subgrad(x: Array) -> Array:
        return 2.0 * (x - c_vec)

    return Constraint(fun=fun, subgrad=subgrad, name=name)


def quadratic_constraint(
    P: Array, q: Optional[Array] = None, r: float = 0.0, name: Optional[str] = None
) -> Constraint:
    """
    Convex quadratic ``0.5 x^T P x + q^T x + r <= 0``.

    ``P`` is symmetrized; it must be positive semidefinite for the
    constraint to be convex.
    """

    p_mat = np.array(P, dtype=float)
    if p_mat.ndim != 2 or p_mat.shape[0] != p_mat.shape[1]:
        raise ValueError(f"P must be square, got shape {p_mat.shape}")
    p_mat = 0.5 * (p_mat + p_mat.T)
    n = p_mat.shape[0]
    q_vec = np.zeros(n) if q is None else np.array(q, dtype=float).reshape(-1)
    if q_vec.shape != (n,):
        raise ValueError(f"q must have length {n}, got {q_vec.shape}")
    offset = float(r)

    def fun(x: Array) -> float:
        return float(0.5 * x @ (p_mat @ x) + q_vec @ x + offset)

    def subgrad(x: Array) -> Array:
        return p_mat @ x + q_vec

    return Constraint(fun=fun, subgrad=subgrad, name=name)


def max_constraint(parts: Sequence[ConstraintLike], name: Optional[str] = None) -> Constraint:
    """
    Pointwise maximum of several convex functions.

    The result is convex but in general not differentiable; its subgradient
    is the subgradient of the first part attaining the maximum.
    """

    members = tuple(parts)
    if not members:
        raise ValueError("max_constraint needs at least one part")

    def _argmax(x: Array) -> int:
        best = 0
        best_value = members[0].function(x)
        for i in range(1, len(members)):
            value = members[i].function(x)
            if value > best_value:
                best, best_value = i, value
        return best

    def fun(x: Array) -> float:
        return float(max(member.function(x) for member in members))

    def subgrad(x: Array) -> Array:
        return np.asarray(members[_argmax(x)].subgradient(x))

    return Constraint(fun=fun, subgrad=subgrad, name=name)


def linear_objective(c: Array, name: Optional[str] = None) -> Objective:
    """Minimize ``c^T x``."""
    c_vec = np.array(c, dtype=float).reshape(-1)

    def fun(x: Array) -> float:
        return float(c_vec @ x)

    def subgrad(x: Array) -> Array:
        return c_vec.copy()

    return Objective(subgrad=subgrad, fun=fun, name=name)


def l1_objective(target: Array, name: Optional[str] = None) -> Objective:
    """Minimize ``||x - target||_1``; uses ``sign(x - target)`` as subgradient."""
    t_vec = np.array(target, dtype=float).reshape(-1)

    def fun(x: Array) -> float:
        return float(np.sum(np.abs(x - t_vec)))

    def subgrad(x: Array) -> Array:
        return np.sign(x - t_vec)

    return Objective(subgrad=subgrad, fun=fun, name=name)


__all__ = [
    "linear_constraint",
    "ball_constraint",
    "quadratic_constraint",
    "max_constraint",
    "linear_objective",
    "l1_objective",
]

"""
Core types shared by the ellipsoid method.

A convex function is described by two callables: its value and one of its
subgradients. Inequality constraints use the convention ``function(x) <= 0``
for satisfaction. The objective is described the same way; only its
subgradient drives the search, its value is used for reporting.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Protocol, runtime_checkable

import numpy as np

Array = np.ndarray
ValueFn = Callable[[Array], float]
SubgradientFn = Callable[[Array], Array]

DEFAULT_ACCURACY = 1e-6
DEFAULT_ITERATION_LIMIT = 1000


@runtime_checkable
class ConstraintLike(Protocol):
    """Anything exposing ``function`` and ``subgradient`` at a point."""

    def function(self, x: Array) -> float:
        ...

    def subgradient(self, x: Array) -> Array:
        ...


@dataclass(frozen=True)
class Constraint:
    """Convex inequality constraint ``fun(x) <= 0`` with a subgradient oracle."""

    fun: ValueFn
    subgrad: SubgradientFn
    name: Optional[str] = None

    def function(self, x: Array) -> float:
        return float(self.fun(x))

    def subgradient(self, x: Array) -> Array:
        return np.asarray(self.subgrad(x))


@dataclass(frozen=True)
class Objective:
    """
    Convex objective to minimize.

    The value ``fun`` is optional. Without it the objective reports
    ``-inf`` from :meth:`function`, so it reads as an always-satisfied
    constraint wherever it is scanned alongside real constraints.
    """

    subgrad: SubgradientFn
    fun: Optional[ValueFn] = None
    name: Optional[str] = None

    def function(self, x: Array) -> float:
        if self.fun is None:
            return float("-inf")
        return float(self.fun(x))

    def subgradient(self, x: Array) -> Array:
        return np.asarray(self.subgrad(x))


class Status(Enum):
    """Termination status of an ellipsoid run."""

    CONVERGED = "converged"
    MAX_ITER = "max_iter"
    DEGENERATE = "degenerate"
    OUTSIDE_BALL = "outside_ball"


@dataclass(frozen=True)
class EllipsoidState:
    """Snapshot handed to the per-iteration callback."""

    iteration: int
    point: Array
    inverse_transform: Array
    reduction: float
    subgradient: Array


@dataclass
class EllipsoidResult:
    """
    Outcome of :func:`shorcut.ellipsoid.ellipsoid_method`.

    Attributes:
        x: Returned point. Equals the initial point when ``fallback`` is set.
        fun: Objective value at ``x`` if the objective carries a value.
        status: Why the run ended.
        message: Human-readable description of ``status``.
        nit: Number of completed iterations.
        subgradient_norm: Norm of the last selected cutting vector.
        reduction: Step radius after the last iteration.
        max_violation: Largest constraint value at ``x``.
        fallback: True when the iterate left the ball and the initial point
            was returned instead.
        history: Iterates, starting with the initial point, when requested.
    """

    x: Array
    fun: Optional[float]
    status: Status
    message: str
    nit: int
    subgradient_norm: float
    reduction: float
    max_violation: float
    fallback: bool = False
    history: List[Array] = field(default_factory=list)


__all__ = [
    "Array",
    "ValueFn",
    "SubgradientFn",
    "DEFAULT_ACCURACY",
    "DEFAULT_ITERATION_LIMIT",
    "ConstraintLike",
    "Constraint",
    "Objective",
    "Status",
    "EllipsoidState",
    "EllipsoidResult",
]

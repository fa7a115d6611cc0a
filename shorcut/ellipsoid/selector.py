"""
Cut selection for the ellipsoid method.

At every iterate the method cuts either with a subgradient of the most
violated constraint (feasibility cut) or, when all constraints hold, with a
subgradient of the objective (objective cut).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple

import numpy as np

from .core import Array, ConstraintLike


@dataclass(frozen=True)
class Cut:
    """Cutting vector together with where it came from.

    ``index`` is the position of the constraint that produced the cut, or
    ``None`` for an objective cut. ``value`` is the largest constraint value
    observed at the point.
    """

    vector: Array
    index: Optional[int]
    value: float

    @property
    def is_feasibility_cut(self) -> bool:
        return self.index is not None


def as_constraint_list(constraints: Iterable[ConstraintLike]) -> Tuple[ConstraintLike, ...]:
    """Freeze ``constraints`` into a tuple, rejecting an empty collection."""
    frozen = tuple(constraints)
    if not frozen:
        raise ValueError("at least one constraint is required")
    return frozen


def _worst_constraint(
    constraints: Sequence[ConstraintLike], point: Array
) -> Tuple[int, float]:
    # Strict comparison keeps the first maximum in scan order.
    worst_index = 0
    worst_value = float(constraints[0].function(point))
    for index in range(1, len(constraints)):
        value = float(constraints[index].function(point))
        if value > worst_value:
            worst_index = index
            worst_value = value
    return worst_index, worst_value


def select_cut(
    objective: ConstraintLike,
    constraints: Sequence[ConstraintLike],
    point: Array,
) -> Cut:
    """
    Pick the cutting vector at ``point``.

    Every constraint is evaluated once. If the largest value is positive the
    subgradient of the first constraint attaining it is returned, otherwise
    the objective subgradient is returned.

    Raises
    ------
    ValueError
        If ``constraints`` is empty.
    """

    if len(constraints) == 0:
        raise ValueError("at least one constraint is required")
    index, value = _worst_constraint(constraints, point)
    if value <= 0.0:
        return Cut(vector=np.asarray(objective.subgradient(point)), index=None, value=value)
    return Cut(vector=np.asarray(constraints[index].subgradient(point)), index=index, value=value)


def select_subgradient(
    objective: ConstraintLike,
    constraints: Sequence[ConstraintLike],
    point: Array,
) -> Array:
    """Return only the cutting vector chosen by :func:`select_cut`."""
    return select_cut(objective, constraints, point).vector


def max_violation(constraints: Sequence[ConstraintLike], point: Array) -> float:
    """Largest constraint value at ``point`` (non-positive means feasible)."""
    if len(constraints) == 0:
        raise ValueError("at least one constraint is required")
    return _worst_constraint(constraints, point)[1]


def is_feasible(constraints: Sequence[ConstraintLike], point: Array, tol: float = 0.0) -> bool:
    """Return True if every constraint value is at most ``tol``."""
    return max_violation(constraints, point) <= tol


__all__ = [
    "Cut",
    "as_constraint_list",
    "select_cut",
    "select_subgradient",
    "max_violation",
    "is_feasible",
]

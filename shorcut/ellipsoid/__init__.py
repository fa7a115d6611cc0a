"""
Shor's ellipsoid method for non-smooth convex optimization.

The subpackage provides the optimization loop (:func:`ellipsoid_method`,
:func:`optimize`), the deep-cut selection rule that chooses between
feasibility and objective cuts, and builders for common convex constraints.

Example
-------
>>> import numpy as np
>>> from shorcut.ellipsoid import ball_constraint, linear_objective, optimize
>>> x = optimize(
...     linear_objective([1.0, 0.0]),
...     [ball_constraint([0.0, 0.0], 1.0)],
...     np.array([0.5, 0.5]),
...     ball_radius=2.0,
...     accuracy=1e-4,
...     iteration_limit=1000,
... )
>>> bool(abs(x[0] + 1.0) < 1e-3)
True
"""

from . import constraints, core, method, selector, utils
from .constraints import (
    ball_constraint,
    l1_objective,
    linear_constraint,
    linear_objective,
    max_constraint,
    quadratic_constraint,
)
from .core import (
    DEFAULT_ACCURACY,
    DEFAULT_ITERATION_LIMIT,
    Constraint,
    ConstraintLike,
    EllipsoidResult,
    EllipsoidState,
    Objective,
    Status,
)
from .method import ellipsoid_method, optimize
from .selector import Cut, is_feasible, max_violation, select_cut, select_subgradient
from .utils import ellipsoid_constants, normalize, rank_one_contraction, reduction_schedule

__all__ = [
    "constraints",
    "core",
    "method",
    "selector",
    "utils",
    # Core types
    "Constraint",
    "ConstraintLike",
    "Objective",
    "Status",
    "EllipsoidState",
    "EllipsoidResult",
    "DEFAULT_ACCURACY",
    "DEFAULT_ITERATION_LIMIT",
    # Algorithm
    "ellipsoid_method",
    "optimize",
    "Cut",
    "select_cut",
    "select_subgradient",
    "max_violation",
    "is_feasible",
    # Builders
    "linear_constraint",
    "ball_constraint",
    "quadratic_constraint",
    "max_constraint",
    "linear_objective",
    "l1_objective",
    # Helpers
    "ellipsoid_constants",
    "normalize",
    "rank_one_contraction",
    "reduction_schedule",
]

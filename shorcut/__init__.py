"""shorcut - Shor's ellipsoid method for non-smooth convex optimization."""

__version__ = "0.1.0"

from .diagnostics import debug_context, is_debug_enabled, set_debug_enabled
from .ellipsoid import (
    Constraint,
    ConstraintLike,
    Cut,
    EllipsoidResult,
    EllipsoidState,
    Objective,
    Status,
    ball_constraint,
    ellipsoid_method,
    is_feasible,
    l1_objective,
    linear_constraint,
    linear_objective,
    max_constraint,
    max_violation,
    optimize,
    quadratic_constraint,
    select_cut,
    select_subgradient,
)
from .logging import configure_logging, get_log_level, get_logger, set_log_level

__all__ = [
    "__version__",
    # Types
    "Constraint",
    "ConstraintLike",
    "Objective",
    "Status",
    "Cut",
    "EllipsoidState",
    "EllipsoidResult",
    # Algorithm
    "ellipsoid_method",
    "optimize",
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
    # Diagnostics and logging
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    "get_logger",
    "get_log_level",
    "set_log_level",
    "configure_logging",
]

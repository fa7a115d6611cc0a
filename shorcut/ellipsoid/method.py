"""
Shor's ellipsoid method for convex programs with subgradient oracles.

The search region is the ellipsoid ``{x_k + h_k B_k u : ||u|| <= 1}``. Each
iteration maps the selected subgradient ``g`` into the unit-ball coordinates
of the ellipsoid, ``d = B^T g / ||B^T g||``, moves the center against it,
contracts ``B`` along ``d`` and enlarges ``h`` by a fixed factor:

    x <- x - h B d
    B <- B (I + (beta - 1) d d^T),     beta = sqrt((n - 1) / (n + 1))
    h <- h n / sqrt(n^2 - 1)

starting from ``x_0``, ``B_0 = I`` and ``h_0 = R / (n + 1)``, where ``R`` bounds
the distance from ``x_0`` to a minimizer.

References:
    - N. Z. Shor, *Minimization Methods for Non-Differentiable Functions* (1985)
    - Boyd & Vandenberghe, EE364b lecture notes, "The Ellipsoid Method"
"""

from __future__ import annotations

from typing import Callable, Iterable, Optional

import numpy as np

from ..diagnostics import assert_finite, assert_in_ball, assert_unit_norm, is_debug_enabled
from ..logging import get_logger
from .core import (
    DEFAULT_ACCURACY,
    DEFAULT_ITERATION_LIMIT,
    Array,
    ConstraintLike,
    EllipsoidResult,
    EllipsoidState,
    Status,
)
from .selector import as_constraint_list, max_violation, select_subgradient
from .utils import (
    as_point,
    check_dimension,
    ellipsoid_constants,
    normalize,
    rank_one_contraction,
)

logger = get_logger(__name__)

_MESSAGES = {
    Status.CONVERGED: "Subgradient norm fell below the requested accuracy.",
    Status.MAX_ITER: "Iteration limit reached.",
    Status.DEGENERATE: (
        "Cutting vector vanished or became non-finite in ellipsoid coordinates; search "
        "stopped. After many iterations this usually means the ellipsoid collapsed to "
        "machine precision around the current point."
    ),
    Status.OUTSIDE_BALL: "Iterate left the initial ball; returning the initial point.",
}


def _cutting_vector(
    objective: ConstraintLike,
    constraints: tuple,
    point: Array,
) -> Array:
    vector = np.asarray(select_subgradient(objective, constraints, point), dtype=point.dtype)
    if vector.shape != point.shape:
        raise ValueError(
            f"subgradient has shape {vector.shape}, expected {point.shape}"
        )
    return vector


def _local_direction(inverse_transform: Array, subgradient: Array) -> Optional[Array]:
    # None when the cut cannot be expressed as a unit direction.
    if not np.all(np.isfinite(subgradient)):
        return None
    try:
        return normalize(inverse_transform.T @ subgradient)
    except ValueError:
        return None


def _objective_value(objective: ConstraintLike, point: Array) -> Optional[float]:
    value = float(objective.function(point))
    return value if np.isfinite(value) else None


def ellipsoid_method(
    objective: ConstraintLike,
    constraints: Iterable[ConstraintLike],
    initial_point: Array,
    ball_radius: float,
    accuracy: float = DEFAULT_ACCURACY,
    iteration_limit: int = DEFAULT_ITERATION_LIMIT,
    *,
    dtype: Optional[np.dtype] = None,
    callback: Optional[Callable[[EllipsoidState], None]] = None,
    history: bool = False,
) -> EllipsoidResult:
    """
    Minimize a convex objective over convex inequality constraints.

    Parameters
    ----------
    objective:
        Object with a ``subgradient`` method; its ``function`` is only used
        to report ``fun`` on the result.
    constraints:
        Non-empty collection of constraints, each satisfied when
        ``function(x) <= 0``. Scanned in the given order.
    initial_point:
        Start of the search and center of a ball known to contain a
        minimizer. At least two-dimensional.
    ball_radius:
        Radius of that ball.
    accuracy:
        The run stops once the selected subgradient has norm below this.
    iteration_limit:
        Maximum number of iterations. One iteration always runs, so ``0``
        behaves like ``1``.
    dtype:
        Floating dtype used for all arithmetic. Defaults to the dtype of
        ``initial_point`` (``float64`` for integer input).
    callback:
        Called with an :class:`EllipsoidState` after every iteration.
    history:
        Record every iterate on the result.

    Returns
    -------
    EllipsoidResult
        If the final iterate is farther than ``ball_radius`` from
        ``initial_point`` a copy of ``initial_point`` is returned with
        ``status=Status.OUTSIDE_BALL`` and ``fallback=True``. A run that
        stops with ``Status.DEGENERATE`` after many iterations has usually
        converged: the transform underflowed once the ellipsoid shrank to
        machine precision (around a thousand iterations in ``float64`` for
        ``n = 2``, far fewer in ``float32``).
    """

    constraint_list = as_constraint_list(constraints)
    start = as_point(initial_point, dtype)
    n = check_dimension(start.size)
    if not ball_radius > 0:
        raise ValueError("ball_radius must be positive")
    if not accuracy > 0:
        raise ValueError("accuracy must be positive")
    if iteration_limit < 0:
        raise ValueError("iteration_limit must be non-negative")

    scalar = start.dtype.type
    beta, shrink = ellipsoid_constants(n, start.dtype)
    radius = scalar(ball_radius)
    reduction = radius / scalar(n + 1)
    x = start.copy()
    inverse_transform = np.eye(n, dtype=start.dtype)
    debug = is_debug_enabled()
    hist: list[np.ndarray] = [x.copy()] if history else []

    logger.debug(
        "Starting ellipsoid method: n=%d, constraints=%d, radius=%g, accuracy=%g, limit=%d",
        n,
        len(constraint_list),
        float(ball_radius),
        float(accuracy),
        iteration_limit,
    )

    subgradient = _cutting_vector(objective, constraint_list, x)
    subgradient_norm = float(np.linalg.norm(subgradient))
    nit = 0
    status = Status.MAX_ITER
    while True:
        direction = _local_direction(inverse_transform, subgradient)
        if direction is None:
            status = Status.DEGENERATE
            logger.warning(
                "Degenerate cutting vector (|g|=%g) at iteration %d; keeping current point. "
                "Late in a run this means the ellipsoid has collapsed to machine precision.",
                subgradient_norm,
                nit,
            )
            break

        x = x - (inverse_transform * reduction) @ direction
        inverse_transform = rank_one_contraction(inverse_transform, direction, beta)
        reduction = reduction * shrink

        subgradient = _cutting_vector(objective, constraint_list, x)
        subgradient_norm = float(np.linalg.norm(subgradient))
        nit += 1

        if debug:
            assert_unit_norm(direction, atol=1e-4)
            assert_finite(x, "iterate")
            assert_finite(inverse_transform, "inverse transform")
            logger.debug(
                "iter %d: x=%s, reduction=%g, |g|=%g",
                nit,
                np.array2string(x, precision=6),
                float(reduction),
                subgradient_norm,
            )
        if history:
            hist.append(x.copy())
        if callback is not None:
            callback(
                EllipsoidState(
                    iteration=nit,
                    point=x.copy(),
                    inverse_transform=inverse_transform.copy(),
                    reduction=float(reduction),
                    subgradient=subgradient.copy(),
                )
            )

        if subgradient_norm < accuracy:
            status = Status.CONVERGED
            break
        if nit >= iteration_limit:
            break

    fallback = not float(np.linalg.norm(x - start)) <= float(radius)
    if fallback:
        logger.warning(
            "Iterate left the ball of radius %g after %d iterations; returning initial point",
            float(ball_radius),
            nit,
        )
        x = start.copy()
        status = Status.OUTSIDE_BALL
    elif debug:
        assert_in_ball(x, start, float(radius))

    logger.info("Ellipsoid method finished: status=%s, nit=%d", status.value, nit)
    return EllipsoidResult(
        x=x,
        fun=_objective_value(objective, x),
        status=status,
        message=_MESSAGES[status],
        nit=nit,
        subgradient_norm=subgradient_norm,
        reduction=float(reduction),
        max_violation=max_violation(constraint_list, x),
        fallback=fallback,
        history=hist,
    )


def optimize(
    objective: ConstraintLike,
    constraints: Iterable[ConstraintLike],
    initial_point: Array,
    ball_radius: float,
    accuracy: float = DEFAULT_ACCURACY,
    iteration_limit: int = DEFAULT_ITERATION_LIMIT,
) -> Array:
    """
    Return the approximate minimizer found by :func:`ellipsoid_method`.

    The result always lies within ``ball_radius`` of ``initial_point``; an
    output equal to ``initial_point`` signals that the search was discarded.
    """

    return ellipsoid_method(
        objective, constraints, initial_point, ball_radius, accuracy, iteration_limit
    ).x


__all__ = ["ellipsoid_method", "optimize"]

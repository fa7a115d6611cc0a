"""
Example: Non-smooth convex optimization with the ellipsoid method

Three small problems solved with shorcut: a linear objective over the unit
disk, a box-constrained LP written as a single non-smooth constraint, and an
L1 objective. Each run only needs subgradients and a radius that bounds the
distance from the starting point to a minimizer.
"""

import numpy as np

from shorcut import (
    Status,
    ball_constraint,
    ellipsoid_method,
    l1_objective,
    linear_constraint,
    linear_objective,
    max_constraint,
)


def report(result):
    print(f"Status: {result.status.value}")
    print(f"Solution: x = {np.round(result.x, 6)}")
    if result.fun is not None:
        print(f"Objective value: {result.fun:.6f}")
    print(f"Iterations: {result.nit}")
    print(f"Max constraint value: {result.max_violation:.2e}")
    if result.status is Status.OUTSIDE_BALL:
        print("Search left the initial ball; the starting point was returned.")
    print()


def example_unit_disk():
    """Minimize x subject to x^2 + y^2 <= 1."""
    print("=" * 60)
    print("Example 1: Linear objective over the unit disk")
    print("=" * 60)
    result = ellipsoid_method(
        linear_objective([1.0, 0.0]),
        [ball_constraint([0.0, 0.0], 1.0)],
        np.array([0.5, 0.5]),
        ball_radius=2.0,
        accuracy=1e-4,
        iteration_limit=1000,
    )
    report(result)


def example_box_lp():
    """Minimize x + 2y over the box [-1, 1]^2 encoded as max_i(a_i^T x - 1)."""
    print("=" * 60)
    print("Example 2: Box-constrained LP as a non-smooth constraint")
    print("=" * 60)
    box = max_constraint(
        [
            linear_constraint([1.0, 0.0], 1.0),
            linear_constraint([-1.0, 0.0], 1.0),
            linear_constraint([0.0, 1.0], 1.0),
            linear_constraint([0.0, -1.0], 1.0),
        ],
        name="box",
    )
    result = ellipsoid_method(
        linear_objective([1.0, 2.0]),
        [box],
        np.array([0.3, -0.2]),
        ball_radius=3.0,
        accuracy=1e-8,
        iteration_limit=1000,
    )
    report(result)


def example_l1():
    """Minimize ||x - (2, 2, 2)||_1 subject to x_1 + x_2 + x_3 <= 1 and ||x|| <= 1.5."""
    print("=" * 60)
    print("Example 3: L1 objective with a half-space constraint")
    print("=" * 60)
    result = ellipsoid_method(
        l1_objective([2.0, 2.0, 2.0]),
        [linear_constraint([1.0, 1.0, 1.0], 1.0), ball_constraint(np.zeros(3), 1.5)],
        np.zeros(3),
        ball_radius=2.0,
        accuracy=1e-8,
        iteration_limit=1500,
    )
    report(result)


if __name__ == "__main__":
    example_unit_disk()
    example_box_lp()
    example_l1()
    print("All ellipsoid examples completed")

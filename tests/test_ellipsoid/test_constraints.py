import numpy as np
import pytest

from shorcut.ellipsoid import (
    ConstraintLike,
    ball_constraint,
    l1_objective,
    linear_constraint,
    linear_objective,
    max_constraint,
    optimize,
    quadratic_constraint,
)


def test_linear_constraint_value_and_subgradient():
    con = linear_constraint([1.0, -2.0], 3.0, name="half-space")
    x = np.array([2.0, 1.0])
    assert con.function(x) == pytest.approx(-3.0)
    assert np.array_equal(con.subgradient(x), [1.0, -2.0])
    assert con.name == "half-space"
    assert isinstance(con, ConstraintLike)


def test_linear_constraint_copies_data():
    a = np.array([1.0, 0.0])
    con = linear_constraint(a, 0.0)
    a[0] = 5.0
    assert con.function(np.array([1.0, 0.0])) == pytest.approx(1.0)
    con.subgradient(np.zeros(2))[0] = 7.0
    assert np.array_equal(con.subgradient(np.zeros(2)), [1.0, 0.0])


def test_ball_constraint():
    con = ball_constraint([1.0, 0.0], 2.0)
    assert con.function(np.array([1.0, 0.0])) == pytest.approx(-4.0)
    assert con.function(np.array([3.0, 0.0])) == pytest.approx(0.0)
    assert np.allclose(con.subgradient(np.array([2.0, 1.0])), [2.0, 2.0])
    with pytest.raises(ValueError):
        ball_constraint([0.0, 0.0], 0.0)


def test_quadratic_constraint_symmetrizes():
    P = np.array([[2.0, 2.0], [0.0, 4.0]])
    con = quadratic_constraint(P, q=[1.0, -1.0], r=-1.0)
    x = np.array([1.0, 2.0])
    sym = np.array([[2.0, 1.0], [1.0, 4.0]])
    expected = 0.5 * x @ sym @ x + (1.0 - 2.0) - 1.0
    assert con.function(x) == pytest.approx(expected)
    assert np.allclose(con.subgradient(x), sym @ x + np.array([1.0, -1.0]))


def test_quadratic_constraint_rejects_bad_shapes():
    with pytest.raises(ValueError):
        quadratic_constraint(np.ones((2, 3)))
    with pytest.raises(ValueError):
        quadratic_constraint(np.eye(2), q=[1.0, 2.0, 3.0])


def test_max_constraint_picks_active_piece():
    box = max_constraint(
        [
            linear_constraint([1.0, 0.0], 1.0),
            linear_constraint([-1.0, 0.0], 1.0),
            linear_constraint([0.0, 1.0], 1.0),
            linear_constraint([0.0, -1.0], 1.0),
        ]
    )
    x = np.array([0.5, -3.0])
    assert box.function(x) == pytest.approx(2.0)
    assert np.array_equal(box.subgradient(x), [0.0, -1.0])
    with pytest.raises(ValueError):
        max_constraint([])


def test_max_constraint_tie_uses_first_piece():
    both = max_constraint([linear_constraint([1.0, 0.0], 0.0), linear_constraint([0.0, 1.0], 0.0)])
    assert np.array_equal(both.subgradient(np.array([1.0, 1.0])), [1.0, 0.0])


def test_objectives():
    lin = linear_objective([2.0, -1.0])
    assert lin.function(np.array([1.0, 1.0])) == pytest.approx(1.0)
    l1 = l1_objective([1.0, 1.0])
    x = np.array([0.0, 3.0])
    assert l1.function(x) == pytest.approx(3.0)
    assert np.array_equal(l1.subgradient(x), [-1.0, 1.0])


def test_box_constrained_linear_program():
    box = max_constraint(
        [
            linear_constraint([1.0, 0.0], 1.0),
            linear_constraint([-1.0, 0.0], 1.0),
            linear_constraint([0.0, 1.0], 1.0),
            linear_constraint([0.0, -1.0], 1.0),
        ]
    )
    x = optimize(linear_objective([1.0, 2.0]), [box], np.array([0.3, -0.2]), 3.0, 1e-8, 1000)
    assert np.allclose(x, [-1.0, -1.0], atol=1e-3)


def test_nonsmooth_l1_objective_over_disk():
    x = optimize(
        l1_objective([2.0, 2.0]),
        [ball_constraint([0.0, 0.0], 1.0)],
        np.zeros(2),
        2.0,
        1e-8,
        1000,
    )
    assert np.allclose(x, [np.sqrt(0.5), np.sqrt(0.5)], atol=1e-3)

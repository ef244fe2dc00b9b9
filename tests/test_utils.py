import numpy as np
import pytest

from lp_optimizer import ConstraintBuilder, ObjectiveBuilder, Problem
from lp_optimizer.lp.utils import build_matrix_form, find_violations, objective_value

from helpers import FakeGateway, make_infeasible_problem, make_optimal_problem


def test_matrix_form_of_reference_problem():
    A, senses, b, lower, upper, names = build_matrix_form(make_optimal_problem())

    assert names == ["x1", "x2", "x3", "x4"]
    assert senses == ["<=", "<=", "="]
    np.testing.assert_allclose(
        A,
        [
            [-1.0, 1.0, 1.0, 10.0],
            [1.0, -3.0, 1.0, 0.0],
            [0.0, 1.0, 0.0, -3.5],
        ],
    )
    np.testing.assert_allclose(b, [40.0, 30.0, 0.0])
    assert lower[0] == 0.0 and upper[0] == 40.0
    assert np.isneginf(lower[1]) and np.isposinf(upper[1])


def test_matrix_form_without_constraints():
    p = Problem("empty")
    p.continuous_var("x", 0, 1)

    A, senses, b, _, _, names = build_matrix_form(p)

    assert A.shape == (0, 1)
    assert senses == []
    assert names == ["x"]


def test_reference_solution_satisfies_model():
    p = make_optimal_problem()
    p.solve(FakeGateway("Optimal", {"x1": 31.0, "x2": 10.5, "x3": 30.5, "x4": 3.0}))

    assert find_violations(p) == []
    assert objective_value(p) == pytest.approx(31 + 10.5 + 3 * 30.5 + 3)


def test_violations_name_bounds_and_rows():
    p = make_infeasible_problem()
    p.solve(FakeGateway("Infeasible", {"x1": 45.0, "x2": 0.0}))

    violations = find_violations(p)

    assert violations == [
        "x1 = 45 is above its upper bound 40",
        "constraint 'c1': 45 <= 40 does not hold",
        "constraint 'c2': 45 >= 50 does not hold",
    ]


def test_tolerance_is_respected():
    p = Problem("tol")
    x = p.continuous_var("x", 0, 1)
    p.set_objective(ObjectiveBuilder().add(1, x).maximize())
    p.add_constraint(ConstraintBuilder("eq").add(1, x).eq().add_constant(0.5).done())
    p.solve(FakeGateway("Optimal", {"x": 0.5000001}))

    assert find_violations(p, tol=1e-6) == []
    assert len(find_violations(p, tol=1e-9)) == 1


def test_objective_value_without_objective():
    assert objective_value(Problem("none")) is None

"""
Integration tests for solver selection and the solve entry point.
"""

import numpy as np
import pytest

from datastructures import ConfigurationError, Method
from equilibrium import (
    SOLVER_REGISTRY,
    LinearNeumanSolver,
    NaiveHankelSolver,
    NeumanSolver,
    NystromSolver,
    SolverKind,
    TransformSolver,
    create_solver,
    select_solver,
    solve,
)


@pytest.mark.parametrize(
    "dimension, method, expected",
    [
        (1, None, SolverKind.TRANSFORM),
        (3, Method.NONLINEAR_NEUMAN, SolverKind.TRANSFORM),
        (1, Method.LINEAR_NEUMAN, SolverKind.LINEAR_NEUMAN),
        (3, "lneuman", SolverKind.LINEAR_NEUMAN),
        (1, Method.NYSTROM, SolverKind.NYSTROM),
        (3, "nystrom", SolverKind.NYSTROM),
        (1, "unknown", SolverKind.TRANSFORM),
        (2, "nystrom", SolverKind.NAIVE_HANKEL),
        (2, None, SolverKind.NAIVE_HANKEL),
        (4, Method.LINEAR_NEUMAN, SolverKind.NAIVE_HANKEL),
    ],
)
def test_select_solver(dimension, method, expected):
    assert select_solver(dimension, method) is expected


def test_registry_covers_every_kind():
    assert set(SOLVER_REGISTRY) == set(SolverKind)
    assert SOLVER_REGISTRY[SolverKind.NONLINEAR_NEUMAN] is NeumanSolver


@pytest.mark.parametrize(
    "overrides, solver_class",
    [
        ({}, TransformSolver),
        ({"method": "lneuman"}, LinearNeumanSolver),
        ({"method": "nystrom", "dimension": 3}, NystromSolver),
        ({"method": "nystrom", "dimension": 2}, NaiveHankelSolver),
    ],
)
def test_create_solver(make_problem, overrides, solver_class):
    assert type(create_solver(make_problem(**overrides))) is solver_class


def test_explicit_kind_overrides_selection(make_problem):
    solver = create_solver(make_problem(), SolverKind.NONLINEAR_NEUMAN)
    assert type(solver) is NeumanSolver
    assert type(create_solver(make_problem(), "hankel")) is NaiveHankelSolver


@pytest.mark.parametrize("solver_class", [NeumanSolver, TransformSolver, NystromSolver])
def test_line_solvers_reject_other_dimensions(make_problem, solver_class):
    with pytest.raises(ConfigurationError):
        solver_class(make_problem(dimension=2))


@pytest.mark.parametrize("dimension", [1, 2, 3])
def test_solve_returns_result_on_grid(make_problem, dimension):
    """Test length, finiteness and non-negativity of C in every dimension."""
    problem = make_problem(dimension=dimension, iterations=200)
    result = solve(problem)

    assert result.C.shape == result.r.shape == (problem.nodes,)
    if dimension == 2:
        # Hankel nodes sit at scaled Bessel zeros inside (0, R)
        assert 0.0 < result.r[0] and result.r[-1] < problem.R
        assert result.C0 > 0.0
    else:
        np.testing.assert_allclose(result.r, problem.grid)
        assert result.C0 == result.C[0]
    assert np.all(np.isfinite(result.C))
    assert np.all(result.C >= 0.0)
    assert np.isfinite(result.N) and result.N > 0.0
    assert 1 <= result.iterations <= 200
    assert len(result.time_series.residual) == result.iterations


def test_linear_methods_ignore_closure(make_problem):
    plain = solve(make_problem(method="lneuman", iterations=50))
    weighted = solve(make_problem(method="lneuman", iterations=50, alpha=0.5, beta=0.3, gamma=0.2))

    np.testing.assert_array_equal(weighted.C, plain.C)
    assert weighted.N == plain.N


def test_solve_is_idempotent(make_problem):
    """Test identical problems give bit-identical results."""
    problem = make_problem(beta=0.1, gamma=0.1, iterations=100)

    first = solve(problem)
    second = solve(problem)

    np.testing.assert_array_equal(first.C, second.C)
    assert first.N == second.N
    assert first.iterations == second.iterations

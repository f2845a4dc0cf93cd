"""
Unit tests for the problem configuration and the result carrier.
"""

import dataclasses

import numpy as np
import pytest

from datastructures import Closure, ConfigurationError, Method, Problem, Result, TimeSeries
from datastructures.config import AUTO_RADIUS_FACTOR, AUTO_RADIUS_MASS
from kernels import make_kernels

# ===================================================================
# Problem
# ===================================================================


def test_problem_defaults(normal_kernels):
    problem = Problem(kernels=normal_kernels, R=10.0)

    assert (problem.b, problem.s, problem.d) == (1.0, 1.0, 0.0)
    assert (problem.alpha, problem.beta, problem.gamma) == (1.0, 0.0, 0.0)
    assert problem.dimension == 1
    assert problem.nodes == 100
    assert problem.iterations == 500
    assert problem.accuracy == 6
    assert problem.method is None
    assert problem.path is None
    assert not problem.autocomputed_radius


def test_problem_derived_quantities(make_problem):
    problem = make_problem(accuracy=4)

    assert problem.step == pytest.approx(0.2)
    assert problem.origin == 0.0
    assert problem.tolerance == pytest.approx(1e-4)
    assert problem.mean_field_density == pytest.approx(9.0)
    np.testing.assert_allclose(problem.grid, 0.2 * np.arange(50))
    assert problem.closure == Closure(1.0, 0.0, 0.0)


def test_radius_is_autocomputed_from_kernels():
    """Test R covers the wider kernel with a safety factor."""
    kernels = make_kernels("n", 1.0, 2.0)
    problem = Problem(kernels=kernels)

    expected = AUTO_RADIUS_FACTOR * kernels.death.support_radius(1, AUTO_RADIUS_MASS)
    assert problem.autocomputed_radius
    assert problem.R == pytest.approx(expected)
    assert problem.R == pytest.approx(5.0 * 2.0 * 3.8906, rel=1e-3)


def test_radius_of_constant_kernels(constant_kernels):
    problem = Problem(kernels=constant_kernels, dimension=3)
    assert problem.R == pytest.approx(10.0)


def test_method_is_parsed(normal_kernels):
    problem = Problem(kernels=normal_kernels, R=5.0, method="nystrom")
    assert problem.method is Method.NYSTROM
    assert problem.method.is_linear
    assert not Method.NONLINEAR_NEUMAN.is_linear


@pytest.mark.parametrize(
    "overrides",
    [
        {"b": 0.0},
        {"s": 0.0},  # zero death rating
        {"d": -0.1},
        {"b": 0.5, "d": 0.5},  # population not viable
        {"alpha": 1.0, "beta": -1.0},
        {"R": -1.0},
        {"nodes": 0},
        {"nodes": 2.5},
        {"dimension": 0},
        {"iterations": 0},
        {"accuracy": -1},
        {"method": "simpson"},
        {"kernels": None},
    ],
)
def test_invalid_problem_rejected(make_problem, overrides):
    with pytest.raises(ConfigurationError):
        make_problem(**overrides)


def test_configuration_error_is_value_error():
    assert issubclass(ConfigurationError, ValueError)


def test_problem_is_immutable(make_problem):
    problem = make_problem()
    with pytest.raises(dataclasses.FrozenInstanceError):
        problem.b = 2.0


def test_describe_lists_parameters(make_problem):
    text = make_problem(method="lneuman", path="out.txt").describe()

    assert text.splitlines()[0] == "Normal kernels: sm = 1.00000, sw = 1.00000"
    assert "n_count = 50" in text
    assert "method: lneuman" in text
    assert "path = 'out.txt'" in text


def test_problem_to_dataframe(make_problem):
    df = make_problem(method="nystrom").to_dataframe()

    assert len(df) == 1
    assert df.loc[0, "kernels"] == "Normal kernels: sm = 1.00000, sw = 1.00000"
    assert df.loc[0, "method"] == "nystrom"
    assert df.loc[0, "nodes"] == 50


# ===================================================================
# Result
# ===================================================================


def test_result_is_read_only():
    C = np.array([3.0, 2.0, 1.0])
    result = Result(C=C, N=1.5, r=[0.0, 0.1, 0.2], method="nystrom")
    C[0] = 100.0

    assert result.C0 == 3.0
    assert result.nodes == 3
    with pytest.raises(ValueError):
        result.C[0] = 0.0
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.N = 2.0


def test_result_origin_value_without_origin_node():
    result = Result(C=[3.0, 2.0], N=1.0, r=[0.3, 0.9], C_origin=3.5)

    assert result.C0 == 3.5
    assert Result(C=[3.0, 2.0], N=1.0, r=[0.0, 0.5]).C0 == 3.0


def test_result_shape_mismatch():
    with pytest.raises(ValueError):
        Result(C=np.ones(3), N=1.0, r=np.zeros(4))


def test_result_to_dataframe():
    result = Result(C=[2.0, 1.0], N=1.0, r=[0.0, 0.5])
    df = result.to_dataframe()
    assert list(df.columns) == ["r", "C"]
    assert df["C"].tolist() == [2.0, 1.0]


def test_time_series_to_dataframe():
    df = TimeSeries(residual=[1e-1, 1e-2], first_moment=[0.9, 0.8]).to_dataframe()
    assert df.shape == (2, 2)
    assert df["residual"].iloc[-1] == pytest.approx(1e-2)

"""
Unit tests for the closure of the third moment and the Neuman operator.
"""

import numpy as np
import pytest

from datastructures import ASYMMETRIC_CLOSURE, Closure
from equilibrium import first_moment, neuman_update, second_moment, third_moment


def test_asymmetric_closure():
    assert ASYMMETRIC_CLOSURE.is_linear
    assert ASYMMETRIC_CLOSURE.norm == 1.0
    assert third_moment(2.0, 3.0, 5.0, 1.5, ASYMMETRIC_CLOSURE) == pytest.approx(2.0 * 3.0 / 1.5)


def test_third_moment_terms():
    closure = Closure(alpha=0.5, beta=0.3, gamma=0.2)
    c_x, c_y, c_yx, N = 2.0, 3.0, 5.0, 1.5

    expected = (0.5 * 6.0 / N + 0.3 * 10.0 / N + 0.2 * 15.0 / N - 0.3 * N**3) / 0.8
    assert third_moment(c_x, c_y, c_yx, N, closure) == pytest.approx(expected)


def test_third_moment_without_correlations():
    """Test T = N^3 for C = N^2 when beta equals gamma."""
    N = 1.7
    closure = Closure(alpha=0.6, beta=0.2, gamma=0.2)
    assert third_moment(N**2, N**2, N**2, N, closure) == pytest.approx(N**3)


def test_moments():
    Q = np.array([0.5, 0.0])
    assert first_moment(9.0, 1.5) == pytest.approx(7.5)
    np.testing.assert_allclose(second_moment(Q, 2.0), [5.0, 4.0])


def test_first_update_of_linear_operator():
    """Test the first Neuman step from Q = 0 under the linear closure."""
    b, s, d = 1.0, 0.1, 0.1
    M = (b - d) / s
    birth = np.array([0.4, 0.2, 0.05])
    death = np.array([0.3, 0.25, 0.1])

    Q = neuman_update(np.zeros(3), M, birth, death, 0.0, 0.0, 0.0, b, s, d, ASYMMETRIC_CLOSURE)

    np.testing.assert_allclose(Q, (b * birth - s * death * M) / (b + s * death))


def test_update_with_all_closure_terms():
    b, s, d = 2.0, 0.5, 0.2
    closure = Closure(alpha=1.0, beta=0.4, gamma=0.1)
    A = closure.norm
    M = (b - d) / s
    Q = np.array([0.3, -0.1])
    N = 3.0
    birth = np.array([0.4, 0.1])
    death = np.array([0.2, 0.3])
    m_Q = np.array([0.05, 0.02])
    w_Q = np.array([0.04, 0.01])
    wQ_Q = np.array([0.01, 0.005])

    numerator = (
        b * birth + b * m_Q - s * death * N + N * (b - d) * 0.3 / A - (s / A) * (0.5 * N * w_Q + 0.1 * wQ_Q)
    )
    denominator = d + s * death + (s / A) * (M + 0.4 * N + 0.4 * w_Q)

    np.testing.assert_allclose(
        neuman_update(Q, N, birth, death, m_Q, w_Q, wQ_Q, b, s, d, closure), numerator / denominator
    )

"""Second-order closure of the third moment and the Neuman operator.

The closure approximates the third moment by

    T(x, y) = 1/(alpha+beta) * ( alpha C(x)C(y)/N + beta C(x)C(y-x)/N
                                 + gamma C(y)C(y-x)/N - beta N^3 )

Substituting it into the equilibrium equations of the Dieckmann-Law model
and writing ``C = N (N + Q)``, the first moment satisfies

    N = M - <w, Q>,   M = (b - d) / s

and Q is a fixed point of the operator implemented by ``neuman_update``.
"""

import numpy as np

from datastructures import Closure


def third_moment(c_x, c_y, c_yx, N, closure: Closure):
    """Closed third moment T(x, y).

    Parameters
    ----------
    c_x, c_y, c_yx : float or np.ndarray
        Second moment at the separations x, y and y - x.
    N : float
        First moment.
    closure : Closure
        Closure weights.
    """
    alpha, beta, gamma = closure.alpha, closure.beta, closure.gamma
    return (
        alpha * c_x * c_y / N + beta * c_x * c_yx / N + gamma * c_y * c_yx / N - beta * N**3
    ) / closure.norm


def first_moment(mean_field, death_product_integral):
    """First moment from the density balance, ``N = M - <w, Q>``."""
    return mean_field - death_product_integral


def second_moment(Q, N):
    """Second moment ``C = N (N + Q)``."""
    return N * (N + Q)


def neuman_update(Q, N, birth, death, m_conv_Q, w_conv_Q, wQ_conv_Q, b, s, d, closure: Closure):
    """One application of the equilibrium operator to (Q, N).

    Parameters
    ----------
    Q : np.ndarray
        Current fluctuation ``C/N - N`` at the nodes.
    N : float
        Current first moment.
    birth, death : np.ndarray
        Kernel densities m and w at the nodes.
    m_conv_Q, w_conv_Q, wQ_conv_Q : np.ndarray or float
        Convolutions ``m*Q``, ``w*Q`` and ``(wQ)*Q`` at the nodes. Terms whose
        closure weight vanishes may be passed as 0.
    b, s, d : float
        Birth, competitive death and environmental death rates.
    closure : Closure
        Closure weights.

    Returns
    -------
    np.ndarray
        Updated Q.
    """
    alpha, beta, gamma = closure.alpha, closure.beta, closure.gamma
    A = closure.norm
    M = (b - d) / s

    numerator = (
        b * birth
        + b * m_conv_Q
        - s * death * N
        + N * (b - d) * (beta - gamma) / A
        - (s / A) * ((beta + gamma) * N * w_conv_Q + gamma * wQ_conv_Q)
    )
    denominator = d + s * death + (s / A) * (alpha * M + beta * N + beta * w_conv_Q)
    return np.asarray(numerator / denominator, dtype=np.float64)

"""Geometry of radially symmetric functions in D dimensions."""

import numpy as np
from scipy.optimize import brentq
from scipy.special import gamma, jn_zeros, jv


def sphere_area(dim):
    """Surface area of the unit sphere in R^dim (2 for dim=1)."""
    return 2.0 * np.pi ** (dim / 2.0) / gamma(dim / 2.0)


def ball_volume(radius, dim):
    """Volume of the ball of the given radius in R^dim."""
    return np.pi ** (dim / 2.0) * radius**dim / gamma(dim / 2.0 + 1.0)


def radial_kernel(z, dim):
    """Normalised radial Fourier kernel j_D(z).

    The Fourier transform of a radial function f in R^D is
    ``S_D * int f(r) j_D(k r) r^(D-1) dr`` with
    ``j_D(z) = Gamma(D/2) (2/z)^(D/2-1) J_(D/2-1)(z)``, so that
    ``j_1 = cos``, ``j_3(z) = sin(z)/z`` and ``j_D(0) = 1``.
    """
    z = np.asarray(z, dtype=np.float64)
    nu = dim / 2.0 - 1.0
    with np.errstate(divide="ignore", invalid="ignore"):
        values = gamma(dim / 2.0) * (2.0 / z) ** nu * jv(nu, z)
    return np.where(z == 0.0, 1.0, values)


def bessel_zeros(order, count):
    """First ``count`` positive zeros of the Bessel function J_order.

    Integer orders use ``scipy.special.jn_zeros``. Other orders (half-integer
    for odd dimensions) are bracketed by sign changes on a grid finer than
    the zero spacing and refined with brentq.
    """
    if float(order).is_integer() and order >= 0:
        return jn_zeros(int(order), count)

    def F(x):
        return jv(order, x)

    roots = []
    step = 0.25
    a = step
    Fa = F(a)
    while len(roots) < count:
        b = a + step
        Fb = F(b)
        if Fa * Fb < 0.0:
            roots.append(brentq(F, a, b, xtol=1e-14))
        a, Fa = b, Fb
    return np.array(roots)

"""Discrete Hankel transform for radial functions in any dimension."""

import numpy as np
from scipy.special import gamma, jv

from .geometry import radial_kernel, sphere_area
from .grid import BesselGrid
from .linear_solver import dense_inverse


class NaiveHankelTransform:
    """Dense radial Fourier (Hankel) transform pair on a BesselGrid.

    A grid function is read as a truncated Fourier-Bessel series on the ball
    of radius R,

        f(r) = sum_j F(k_j) j_D(k_j r) / c_j,    k_j = j_j / R,

    whose terms vanish at R. ``F(k_j)`` is the D-dimensional Fourier
    transform of f at ``k_j`` and ``c_j = int_ball j_D(k_j |x|)^2 dx`` the
    norm of the j-th term. ``inverse`` evaluates the series at the nodes and
    ``forward`` is its matrix inverse, so the pair undoes itself up to
    rounding. Both directions cost O(n^2).

    A convolution ``f*g`` is the series with coefficients ``F G``: the
    operator ``g -> f*g`` is similar to ``diag(F(k_j))`` and has spectral
    radius ``max |F(k_j)|``, below one for a probability density.

    Parameters
    ----------
    grid : BesselGrid
        Nodes at the scaled Bessel zeros.
    """

    def __init__(self, grid: BesselGrid):
        self.grid = grid
        dim = grid.dim
        nu = grid.order
        self.k = grid.zeros / grid.radius

        self.norms = (
            0.5 * sphere_area(dim) * gamma(dim / 2.0) ** 2 * (2.0 / self.k) ** (2.0 * nu)
            * grid.radius**2 * jv(nu + 1.0, grid.zeros) ** 2
        )

        self.inverse_matrix = radial_kernel(np.outer(grid.r, self.k), dim) / self.norms[np.newaxis, :]
        self.forward_matrix = dense_inverse(self.inverse_matrix)
        # j_D(0) = 1: the series at r = 0 is the sum of its coefficients
        self.origin_row = (1.0 / self.norms) @ self.forward_matrix

    def forward(self, values):
        return self.forward_matrix @ values

    def inverse(self, spectrum):
        return self.inverse_matrix @ spectrum

    def at_origin(self, values):
        """Value at r = 0 of the series through a grid function."""
        return float(self.origin_row @ values)

    def convolve(self, f, g):
        """Radial convolution of two grid functions."""
        return self.inverse(self.forward(f) * self.forward(g))

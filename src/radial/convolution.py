"""Radial convolutions in 1D and 3D through line projections.

For radial functions in 1D the convolution is an ordinary convolution of the
even extensions. In 3D it reduces to a 1D convolution as well:

    r (f*g)(r) = int P_f(r - x) x g(|x|) dx,   P_f(t) = 2 pi int_|t|^inf s f(s) ds

where the integral runs over the whole line and ``x g(|x|)`` is the odd
extension of ``r g(r)``. Both the direct quadrature and the FFT variant below
evaluate exactly the same discrete sums, so they agree to rounding error.
The 3D value at the origin is taken from the radial quadrature instead,
``(f*g)(0) = int f g dV``.
"""

from dataclasses import dataclass

import numpy as np
from numba import njit
from scipy.fft import irfft, next_fast_len, rfft

from .grid import RadialGrid

LINE_DIMENSIONS = (1, 3)


@dataclass
class LineKernel:
    """Convolution operand prepared for the line quadrature.

    Parameters
    ----------
    profile : np.ndarray
        Line projection sampled at ``grid.offsets`` (length 2n-1).
    nodes : np.ndarray
        Radial density at the grid nodes (length n), used for the 3D origin.
    """

    profile: np.ndarray
    nodes: np.ndarray


def _require_line_dimension(grid: RadialGrid):
    if grid.dim not in LINE_DIMENSIONS:
        raise ValueError(f"Line convolution needs dimension 1 or 3, got {grid.dim}")


def kernel_operand(profile, grid: RadialGrid):
    """Build a LineKernel from a radial profile object.

    ``profile`` must provide ``projection(t, dim)`` and ``density(r, dim)``.
    """
    _require_line_dimension(grid)
    return LineKernel(
        profile=np.ascontiguousarray(profile.projection(grid.offsets, grid.dim), dtype=np.float64),
        nodes=np.ascontiguousarray(profile.density(grid.r, grid.dim), dtype=np.float64),
    )


def grid_operand(values, grid: RadialGrid):
    """Build a LineKernel from a function known only at the grid nodes.

    The function is taken to vanish beyond the last node. In 3D the tail
    integral of the projection uses the trapezoidal rule.
    """
    _require_line_dimension(grid)
    values = np.ascontiguousarray(values, dtype=np.float64)
    n = grid.n
    profile = np.zeros(2 * n - 1)
    if grid.dim == 1:
        profile[:n] = values
    else:
        rv = grid.r * values
        tail = np.cumsum(rv[::-1])[::-1]
        profile[:n] = 2.0 * np.pi * grid.step * (tail - 0.5 * rv)
    return LineKernel(profile=profile, nodes=values)


@njit(cache=True)
def _assemble_line_matrix(profile, nodes, r, weights, h, odd):
    n = r.shape[0]
    A = np.zeros((n, n))
    for i in range(n):
        if odd:
            if i == 0:
                for j in range(n):
                    A[0, j] = weights[j] * nodes[j]
                continue
            for j in range(1, n):
                A[i, j] = h * r[j] * (profile[abs(i - j)] - profile[i + j]) / r[i]
        else:
            A[i, 0] = h * profile[i]
            for j in range(1, n):
                A[i, j] = h * (profile[abs(i - j)] + profile[i + j])
    return A


class DirectConvolution:
    """Dense quadrature matrices for radial convolutions (O(n^2) per product)."""

    def __init__(self, grid: RadialGrid):
        _require_line_dimension(grid)
        self.grid = grid

    def matrix(self, operand: LineKernel):
        """Matrix K with ``(f*g)(r_i) = (K @ g)_i``."""
        return _assemble_line_matrix(
            operand.profile,
            operand.nodes,
            self.grid.r,
            self.grid.weights,
            self.grid.step,
            self.grid.dim == 3,
        )

    def convolve(self, operand: LineKernel, g):
        return self.matrix(operand) @ g


class FFTConvolution:
    """Zero-padded real FFT evaluation of the line quadrature.

    The full line grid has 2n-1 points and the projection is sampled on
    4n-3 offsets, so a linear convolution of length 6n-5 is computed and
    the window belonging to ``r_0..r_(n-1)`` is read off.
    """

    def __init__(self, grid: RadialGrid):
        _require_line_dimension(grid)
        self.grid = grid
        n = grid.n
        self.size = next_fast_len(6 * n - 5, real=True)
        self.window = slice(3 * n - 3, 4 * n - 3)
        self.odd = grid.dim == 3

    def spectrum(self, operand: LineKernel):
        """Transform-domain image of the operand's projection."""
        line = np.concatenate([operand.profile[:0:-1], operand.profile])
        return rfft(line, self.size)

    def _line(self, g):
        if self.odd:
            u = self.grid.r * g
            return np.concatenate([-u[:0:-1], u])
        return np.concatenate([g[:0:-1], g])

    def convolve(self, operand: LineKernel, g, spectrum=None):
        """Evaluate ``operand * g`` at the grid nodes.

        Parameters
        ----------
        operand : LineKernel
            Left factor of the convolution.
        g : np.ndarray
            Right factor sampled at the nodes.
        spectrum : np.ndarray, optional
            Cached ``self.spectrum(operand)``.
        """
        if spectrum is None:
            spectrum = self.spectrum(operand)
        line = irfft(rfft(self._line(g), self.size) * spectrum, self.size)
        out = self.grid.step * line[self.window]
        if self.odd:
            out[1:] /= self.grid.r[1:]
            out[0] = self.grid.weights @ (operand.nodes * g)
        return out

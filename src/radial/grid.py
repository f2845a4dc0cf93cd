"""Radial grids with quadrature weights."""

from dataclasses import dataclass, field

import numpy as np
from scipy.special import jv

from .geometry import ball_volume, bessel_zeros, sphere_area


@dataclass
class RadialGrid:
    """Nodes ``r_i = i*h``, ``i = 0..n-1`` on ``[0, R)``.

    Parameters
    ----------
    n : int
        Number of nodes.
    step : float
        Grid spacing h.
    dim : int
        Dimension of the ambient space.

    Attributes
    ----------
    r : np.ndarray
        Node radii.
    weights : np.ndarray
        Radial quadrature weights so that ``weights @ f`` approximates the
        integral of a radial function over R^dim. The origin gets the volume
        of the ball of radius h/2, every other node ``S_D r^(D-1) h``.
    offsets : np.ndarray
        Line offsets ``l*h`` for ``l = 0..2n-2``, the distances that occur
        between two points of the symmetric line grid.
    """

    n: int
    step: float
    dim: int
    r: np.ndarray = field(init=False, repr=False)
    weights: np.ndarray = field(init=False, repr=False)
    offsets: np.ndarray = field(init=False, repr=False)

    def __post_init__(self):
        self.r = self.step * np.arange(self.n, dtype=np.float64)
        self.weights = sphere_area(self.dim) * self.r ** (self.dim - 1) * self.step
        self.weights[0] = ball_volume(0.5 * self.step, self.dim)
        self.offsets = self.step * np.arange(2 * self.n - 1, dtype=np.float64)

    @property
    def radius(self):
        return self.n * self.step

    def integrate(self, values):
        """Integral of a radial grid function over R^dim."""
        return float(self.weights @ values)


@dataclass
class BesselGrid:
    """Nodes at the scaled zeros of J_nu, ``nu = dim/2 - 1``, on ``(0, R)``.

    With ``j_1 < j_2 < ... < j_(n+1)`` the first zeros of J_nu, the nodes are
    ``r_i = j_i R / j_(n+1)``. The frequencies ``k_i = j_i / R`` of the
    matching Fourier-Bessel series are then sampled at the same zeros, which
    makes the discrete transform pair on these nodes exactly invertible.
    There is no node at the origin.

    Parameters
    ----------
    n : int
        Number of nodes.
    radius : float
        Truncation radius R.
    dim : int
        Dimension of the ambient space.

    Attributes
    ----------
    order : float
        Bessel order nu.
    zeros : np.ndarray
        The first n zeros j_i.
    bandwidth : float
        ``j_(n+1) / R``, the frequency past which the series is truncated.
    r : np.ndarray
        Node radii.
    weights : np.ndarray
        Quadrature weights ``S_D r_i^(D-2) * 2 / (K^2 J_(nu+1)(j_i)^2)`` with
        ``K`` the bandwidth. They integrate band-limited radial functions
        exactly and tend to ``S_D r^(D-1) dr`` for large i.
    """

    n: int
    radius: float
    dim: int
    order: float = field(init=False)
    zeros: np.ndarray = field(init=False, repr=False)
    bandwidth: float = field(init=False)
    r: np.ndarray = field(init=False, repr=False)
    weights: np.ndarray = field(init=False, repr=False)

    def __post_init__(self):
        self.order = self.dim / 2.0 - 1.0
        zeros = bessel_zeros(self.order, self.n + 1)
        self.zeros = zeros[: self.n]
        self.bandwidth = zeros[self.n] / self.radius
        self.r = self.zeros / self.bandwidth

        J_next = jv(self.order + 1.0, self.zeros)
        self.weights = sphere_area(self.dim) * self.r ** (self.dim - 2) * 2.0 / (self.bandwidth * J_next) ** 2

    def integrate(self, values):
        """Integral of a radial grid function over R^dim."""
        return float(self.weights @ values)

"""Radial profiles of the dispersal kernels.

Each profile is an unnormalised radial law ``shape(r)`` together with its
normalising constant in R^D and its tail moment ``int_t^inf s shape(s) ds``.
The tail moment gives the line projection of the 3D density used by the
line convolutions.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

import numpy as np
from scipy.integrate import quad
from scipy.optimize import brentq
from scipy.special import gamma as gamma_fn
from scipy.special import gammaincc

from datastructures.config import ConfigurationError
from radial.geometry import ball_volume, sphere_area


def _require_positive(**params):
    for name, value in params.items():
        if not value > 0:
            raise ConfigurationError(f"Kernel parameter {name} must be positive, got {value}")


class RadialProfile(ABC):
    """Radial dispersal law normalised to unit mass in any dimension."""

    @abstractmethod
    def shape(self, r):
        """Unnormalised law at radius r >= 0."""

    @abstractmethod
    def normalization(self, dim):
        """Integral of ``shape`` over R^dim."""

    @abstractmethod
    def tail_moment(self, t):
        """``int_t^inf s shape(s) ds`` for t >= 0."""

    def density(self, r, dim):
        """Kernel density at radius r in R^dim."""
        return self.shape(np.abs(r)) / self.normalization(dim)

    def projection(self, t, dim):
        """Line projection of the density.

        In 1D this is the density itself; in 3D it is
        ``2 pi int_|t|^inf s f(s) ds``, which is again a 1D density.
        """
        t = np.abs(t)
        if dim == 1:
            return self.density(t, 1)
        if dim == 3:
            return 2.0 * np.pi * self.tail_moment(t) / self.normalization(3)
        raise ValueError(f"Line projection is only defined for dimension 1 or 3, got {dim}")

    def mass_within(self, radius, dim):
        """Kernel mass inside the ball of the given radius."""
        area = sphere_area(dim)
        value, _ = quad(lambda r: float(area * r ** (dim - 1) * self.density(r, dim)), 0.0, radius, limit=200)
        return value

    def support_radius(self, dim, mass):
        """Radius of the ball holding the given fraction of the kernel mass."""
        upper = 1.0
        for _ in range(64):
            if self.mass_within(upper, dim) >= mass:
                break
            upper *= 2.0
        else:
            raise ConfigurationError(f"Cannot locate the support of {self!r}")
        return brentq(lambda x: self.mass_within(x, dim) - mass, 0.0, upper, xtol=1e-10)


@dataclass(frozen=True)
class GaussianProfile(RadialProfile):
    """``exp(-r^2 / (2 sigma^2))``."""

    sigma: float

    def __post_init__(self):
        _require_positive(sigma=self.sigma)

    def shape(self, r):
        return np.exp(-0.5 * (r / self.sigma) ** 2)

    def normalization(self, dim):
        return (2.0 * np.pi * self.sigma**2) ** (dim / 2.0)

    def tail_moment(self, t):
        return self.sigma**2 * self.shape(t)


@dataclass(frozen=True)
class KurticProfile(RadialProfile):
    """``exp(-r^2 / (2 s0^2)) * (1 + r^2 / s1^2)``.

    s0 sets the scale and s1 the weight of the shoulder: the smaller s1, the
    flatter (more platykurtic) the kernel.
    """

    s0: float
    s1: float

    def __post_init__(self):
        _require_positive(s0=self.s0, s1=self.s1)

    def shape(self, r):
        return np.exp(-0.5 * (r / self.s0) ** 2) * (1.0 + (r / self.s1) ** 2)

    def normalization(self, dim):
        ratio = (self.s0 / self.s1) ** 2
        return (2.0 * np.pi * self.s0**2) ** (dim / 2.0) * (1.0 + dim * ratio)

    def tail_moment(self, t):
        var = self.s0**2
        return np.exp(-0.5 * t**2 / var) * var * (1.0 + (t**2 + 2.0 * var) / self.s1**2)


@dataclass(frozen=True)
class ExponentProfile(RadialProfile):
    """``exp(-r / scale)``."""

    scale: float

    def __post_init__(self):
        _require_positive(scale=self.scale)

    def shape(self, r):
        return np.exp(-r / self.scale)

    def normalization(self, dim):
        return sphere_area(dim) * self.scale**dim * gamma_fn(dim)

    def tail_moment(self, t):
        return self.scale * (t + self.scale) * np.exp(-t / self.scale)


@dataclass(frozen=True)
class RoughgardenProfile(RadialProfile):
    """Exponential-power law ``exp(-(r / scale)^power)``."""

    scale: float
    power: float

    def __post_init__(self):
        _require_positive(scale=self.scale, power=self.power)

    def shape(self, r):
        return np.exp(-((r / self.scale) ** self.power))

    def normalization(self, dim):
        return sphere_area(dim) * self.scale**dim * gamma_fn(dim / self.power) / self.power

    def tail_moment(self, t):
        a = 2.0 / self.power
        x = (t / self.scale) ** self.power
        return self.scale**2 / self.power * gamma_fn(a) * gammaincc(a, x)


@dataclass(frozen=True)
class ExponentPolynomialProfile(RadialProfile):
    """Polynomial-weighted exponential ``r^power * exp(-r / scale)``."""

    scale: float
    power: float

    def __post_init__(self):
        _require_positive(scale=self.scale)
        if self.power < 0:
            raise ConfigurationError(f"Kernel parameter power must be non-negative, got {self.power}")

    def shape(self, r):
        return r**self.power * np.exp(-r / self.scale)

    def normalization(self, dim):
        return sphere_area(dim) * self.scale ** (dim + self.power) * gamma_fn(dim + self.power)

    def tail_moment(self, t):
        a = self.power + 2.0
        return self.scale**a * gamma_fn(a) * gammaincc(a, t / self.scale)


@dataclass(frozen=True)
class TopHatProfile(RadialProfile):
    """Uniform density inside ``radius``, zero outside."""

    radius: float

    def __post_init__(self):
        _require_positive(radius=self.radius)

    def shape(self, r):
        return np.where(r <= self.radius, 1.0, 0.0)

    def normalization(self, dim):
        return ball_volume(self.radius, dim)

    def tail_moment(self, t):
        return np.where(t < self.radius, 0.5 * (self.radius**2 - t**2), 0.0)

    def support_radius(self, dim, mass):
        return self.radius

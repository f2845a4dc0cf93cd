"""Neuman iteration with a discrete Hankel transform."""

from radial import BesselGrid, NaiveHankelTransform

from .base_solver import EquilibriumSolver
from .closure import second_moment


class NaiveHankelSolver(EquilibriumSolver):
    """Nonlinear Neuman iteration for any dimension.

    Convolutions become products of dense discrete Hankel transforms, at
    O(n^2) per transform. Used for dimensions without a fast transform.

    The nodes are the scaled Bessel zeros of a BesselGrid on ``(0, R)``
    instead of the uniform grid, so ``Result.r`` differs from
    ``problem.grid`` and C(0) is evaluated from the Fourier-Bessel series.

    Parameters
    ----------
    problem : Problem
        Model and discretisation parameters.
    """

    name = "hankel"

    def __init__(self, problem):
        super().__init__(problem)

        self.transform = NaiveHankelTransform(self.grid)
        self.birth_spectrum = self.transform.forward(self.birth)
        self.death_spectrum = self.transform.forward(self.death)

    def create_grid(self):
        return BesselGrid(self.problem.nodes, self.problem.R, self.problem.dimension)

    def convolve_birth(self, g):
        return self.transform.inverse(self.birth_spectrum * self.transform.forward(g))

    def convolve_death(self, g):
        return self.transform.inverse(self.death_spectrum * self.transform.forward(g))

    def convolve_product(self, f, g):
        return self.transform.convolve(f, g)

    def second_moment_at_origin(self):
        a = self.arrays
        return float(second_moment(self.transform.at_origin(a.Q), a.N))

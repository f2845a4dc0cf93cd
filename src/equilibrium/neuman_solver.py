"""Neuman (fixed-point) solvers with direct quadrature.

The radial convolutions are dense quadrature matrices on the line grid, so
one iteration costs O(n^2). The kernel matrices are assembled once; the
matrix of the product term ``(wQ)*Q`` changes with every iterate.
"""

from radial import LINE_DIMENSIONS, DirectConvolution, grid_operand, kernel_operand

from .base_solver import EquilibriumSolver


class NeumanSolver(EquilibriumSolver):
    """Nonlinear Neuman iteration in 1D or 3D.

    Parameters
    ----------
    problem : Problem
        Model and discretisation parameters.
    """

    name = "neuman"
    dimensions = LINE_DIMENSIONS

    def __init__(self, problem):
        super().__init__(problem)

        self.quadrature = DirectConvolution(self.grid)
        self.K_birth = self.quadrature.matrix(kernel_operand(problem.kernels.birth, self.grid))
        self.K_death = self.quadrature.matrix(kernel_operand(problem.kernels.death, self.grid))

    def convolve_birth(self, g):
        return self.K_birth @ g

    def convolve_death(self, g):
        return self.K_death @ g

    def convolve_product(self, f, g):
        return self.quadrature.convolve(grid_operand(f, self.grid), g)


class LinearNeumanSolver(NeumanSolver):
    """Neuman iteration under the asymmetric closure (alpha=1, beta=gamma=0).

    The closure weights of the problem are ignored and the equation becomes
    ``(b + s w) Q = b m + b (m*Q) - s w N``, linear in (Q, N).
    """

    name = "lneuman"
    linear = True

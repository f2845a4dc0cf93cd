"""Neuman iteration with FFT convolutions for 1D and 3D problems."""

from radial import LINE_DIMENSIONS, FFTConvolution, grid_operand, kernel_operand

from .base_solver import EquilibriumSolver


class TransformSolver(EquilibriumSolver):
    """Nonlinear Neuman iteration evaluated in the transform domain.

    Every radial convolution is a convolution of even (1D) or odd (3D)
    line extensions, computed with zero-padded real FFTs. The kernel
    spectra are computed once; each iteration costs O(n log n). The sums
    are the same as those of ``NeumanSolver``.

    Parameters
    ----------
    problem : Problem
        Model and discretisation parameters.
    """

    name = "transform"
    dimensions = LINE_DIMENSIONS

    def __init__(self, problem):
        super().__init__(problem)

        self.fft = FFTConvolution(self.grid)
        self.birth_operand = kernel_operand(problem.kernels.birth, self.grid)
        self.death_operand = kernel_operand(problem.kernels.death, self.grid)
        self.birth_spectrum = self.fft.spectrum(self.birth_operand)
        self.death_spectrum = self.fft.spectrum(self.death_operand)

    def convolve_birth(self, g):
        return self.fft.convolve(self.birth_operand, g, self.birth_spectrum)

    def convolve_death(self, g):
        return self.fft.convolve(self.death_operand, g, self.death_spectrum)

    def convolve_product(self, f, g):
        return self.fft.convolve(grid_operand(f, self.grid), g)

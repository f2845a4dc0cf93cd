"""Abstract base solver for the equilibrium moment equations."""

import logging
import time
from abc import ABC, abstractmethod

import numpy as np

from datastructures import ASYMMETRIC_CLOSURE, ConfigurationError, Result, TimeSeries
from radial import RadialGrid

from .closure import first_moment, neuman_update, second_moment
from .datastructures import NeumanSolverFields

logger = logging.getLogger(__name__)


class EquilibriumSolver(ABC):
    """Abstract base solver for the equilibrium second moment.

    Handles:
    - Grid and kernel sampling
    - The Neuman fixed-point step on (Q, N)
    - Iteration loop with residual computation
    - Result creation

    Subclasses must:
    - Set the ``name`` class attribute (and ``linear``/``dimensions`` if needed)
    - Implement the convolution hooks ``convolve_birth``, ``convolve_death``
      and ``convolve_product``
    - Extend ``__init__()`` for discretisation-specific setup
    - Override ``create_grid()`` and ``second_moment_at_origin()`` for
      grids without a node at the origin

    Parameters
    ----------
    problem : Problem
        Model and discretisation parameters.
    """

    name = None
    # Linear solvers use the asymmetric closure whatever the problem says
    linear = False
    # Supported dimensions, None for any
    dimensions = None

    def __init__(self, problem):
        if self.dimensions is not None and problem.dimension not in self.dimensions:
            supported = " or ".join(str(dim) for dim in self.dimensions)
            raise ConfigurationError(
                f"{type(self).__name__} works in dimension {supported} only, got {problem.dimension}"
            )

        self.problem = problem
        self.closure = ASYMMETRIC_CLOSURE if self.linear else problem.closure
        self.mean_field = problem.mean_field_density

        self.grid = self.create_grid()
        self.birth = problem.kernels.m(self.grid.r, problem.dimension)
        self.death = problem.kernels.w(self.grid.r, problem.dimension)

        self.arrays = NeumanSolverFields.allocate(problem.nodes, self.mean_field)

    # ---------------------------------------------------------------------
    # Discretisation hooks
    # ---------------------------------------------------------------------
    def create_grid(self):
        """Nodes and quadrature weights; the uniform radial grid by default."""
        return RadialGrid(self.problem.nodes, self.problem.step, self.problem.dimension)

    @abstractmethod
    def convolve_birth(self, g):
        """``(m*g)`` at the grid nodes."""

    @abstractmethod
    def convolve_death(self, g):
        """``(w*g)`` at the grid nodes."""

    @abstractmethod
    def convolve_product(self, f, g):
        """``(f*g)`` at the grid nodes for two grid functions."""

    # ---------------------------------------------------------------------
    # Iteration
    # ---------------------------------------------------------------------
    def initialize(self):
        """Seed the uniform state Q = 0, N = (b - d)/s, i.e. C = N^2."""
        a = self.arrays
        a.Q[:] = 0.0
        a.Q_prev[:] = 0.0
        a.N = a.N_prev = self.mean_field

    def step(self):
        """Apply the equilibrium operator once.

        Returns
        -------
        Q : np.ndarray
            Updated fluctuation.
        N : float
            Updated first moment.
        """
        a = self.arrays
        p = self.problem

        # Swap buffers: the update reads Q_prev/N_prev only
        a.Q, a.Q_prev = a.Q_prev, a.Q
        a.N_prev = a.N
        Q = a.Q_prev

        m_conv_Q = self.convolve_birth(Q)
        w_conv_Q = 0.0
        wQ_conv_Q = 0.0
        if self.closure.beta != 0.0 or self.closure.gamma != 0.0:
            w_conv_Q = self.convolve_death(Q)
        if self.closure.gamma != 0.0:
            wQ_conv_Q = self.convolve_product(self.death * Q, Q)

        a.Q[:] = neuman_update(
            Q, a.N_prev, self.birth, self.death, m_conv_Q, w_conv_Q, wQ_conv_Q,
            p.b, p.s, p.d, self.closure,
        )
        a.N = first_moment(self.mean_field, self.grid.integrate(self.death * a.Q))

        return a.Q, a.N

    def second_moment(self):
        return second_moment(self.arrays.Q, self.arrays.N)

    def second_moment_at_origin(self):
        """C(0) when the grid has no node at the origin, else None."""
        return None

    def solve(self, tolerance=None, max_iter=None):
        """Iterate the equilibrium operator until the change is small enough.

        The residual of an iteration is ``max|C_new - C_old| / max|C_old|``.
        Reaching the iteration ceiling is not an error: the last iterate is
        returned with ``converged=False``.

        Parameters
        ----------
        tolerance : float, optional
            Convergence tolerance. If None, uses ``problem.tolerance``.
        max_iter : int, optional
            Maximum iterations. If None, uses ``problem.iterations``.

        Returns
        -------
        Result
        """
        if tolerance is None:
            tolerance = self.problem.tolerance
        if max_iter is None:
            max_iter = self.problem.iterations

        self.initialize()
        C_prev = self.second_moment()

        residual_history = []
        first_moment_history = []

        time_start = time.time()
        final_iter_count = 0
        is_converged = False

        logger.info(
            "%s: dimension %d, %d nodes, R = %.5f",
            type(self).__name__, self.problem.dimension, self.problem.nodes, self.problem.R,
        )

        for i in range(max_iter):
            final_iter_count = i + 1

            self.step()
            C = self.second_moment()

            residual = float(np.max(np.abs(C - C_prev)) / (np.max(np.abs(C_prev)) + 1e-300))
            residual_history.append(residual)
            first_moment_history.append(float(self.arrays.N))
            C_prev = C

            is_converged = residual < tolerance

            if i % 100 == 0 or is_converged:
                logger.debug("Iteration %d: residual=%.6e, N=%.10f", i, residual, self.arrays.N)

            if is_converged:
                logger.info("Converged at iteration %d", i)
                break
        else:
            logger.info(
                "Iteration ceiling %d reached with residual %.3e (tolerance %.1e)",
                max_iter, residual_history[-1], tolerance,
            )

        time_end = time.time()
        logger.info("Solver finished in %.2f seconds.", time_end - time_start)

        return self._create_result(
            TimeSeries(residual=residual_history, first_moment=first_moment_history),
            final_iter_count,
            is_converged,
        )

    def _create_result(self, time_series, iterations, converged):
        return Result(
            C=self.second_moment(),
            C_origin=self.second_moment_at_origin(),
            N=self.arrays.N,
            r=self.grid.r,
            method=self.name,
            iterations=iterations,
            converged=converged,
            time_series=time_series,
        )

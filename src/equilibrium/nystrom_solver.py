"""Nystrom solver for the linear equilibrium equation."""

import logging
import time

import numpy as np

from datastructures import TimeSeries
from radial import dense_solver

from .closure import first_moment
from .neuman_solver import LinearNeumanSolver

logger = logging.getLogger(__name__)


class NystromSolver(LinearNeumanSolver):
    """Direct solve of the linear equation discretised by Nystrom quadrature.

    Eliminating ``N = M - <w, Q>`` gives the dense system

        (diag(b + s w) - b K_m - s w (omega w)^T) Q = b m - s w M

    on the same nodes, weights and kernel matrices as the linear Neuman
    iteration, so both converge to the same vector. Building the system is
    O(n^2) and the LU solve O(n^3).
    """

    name = "nystrom"

    def assemble(self):
        """Assemble the Nystrom system.

        Returns
        -------
        A : np.ndarray
            System matrix, shape (n, n).
        rhs : np.ndarray
            Right-hand side, shape (n,).
        """
        p = self.problem
        A = -p.b * self.K_birth - p.s * np.outer(self.death, self.grid.weights * self.death)
        A[np.diag_indices_from(A)] += p.b + p.s * self.death
        rhs = p.b * self.birth - p.s * self.death * self.mean_field
        return A, rhs

    def solve(self, tolerance=None, max_iter=None):
        """Solve the linear system once.

        ``tolerance`` and ``max_iter`` are accepted for interface
        compatibility and ignored.

        Returns
        -------
        Result
        """
        time_start = time.time()

        A, rhs = self.assemble()
        Q = dense_solver(A, rhs)

        a = self.arrays
        a.Q[:] = Q
        a.N = first_moment(self.mean_field, self.grid.integrate(self.death * Q))

        scale = np.max(np.abs(rhs)) + 1e-300
        residual = float(np.max(np.abs(A @ Q - rhs)) / scale)
        logger.info("Nystrom system of size %d solved, relative residual %.3e", len(Q), residual)
        logger.info("Solver finished in %.2f seconds.", time.time() - time_start)

        return self._create_result(
            TimeSeries(residual=[residual], first_moment=[float(a.N)]),
            iterations=1,
            converged=True,
        )

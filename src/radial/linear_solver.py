"""Dense direct linear algebra."""

import numpy as np
from scipy.linalg import inv, solve


def dense_solver(A: np.ndarray, b: np.ndarray):
    """Solve A x = b using an LU factorisation (scipy.linalg.solve)."""
    return solve(A, b, check_finite=True)


def dense_inverse(A: np.ndarray):
    """Inverse of a square matrix (scipy.linalg.inv)."""
    return inv(A, check_finite=True)

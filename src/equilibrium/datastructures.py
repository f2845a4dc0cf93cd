"""Internal solver arrays."""

from dataclasses import dataclass

import numpy as np


@dataclass
class NeumanSolverFields:
    """Internal iteration state - current iterate and previous iterate.

    The Neuman iterations are Jacobi-style: an update reads only the
    previous buffers and writes only the current ones, then the buffers swap.
    """
    # Current iterate
    Q: np.ndarray
    N: float

    # Previous iterate
    Q_prev: np.ndarray
    N_prev: float

    @classmethod
    def allocate(cls, n_nodes: int, N: float):
        """Allocate a zero fluctuation seeded with the first moment N."""
        return cls(
            Q=np.zeros(n_nodes),
            N=N,
            Q_prev=np.zeros(n_nodes),
            N_prev=N,
        )

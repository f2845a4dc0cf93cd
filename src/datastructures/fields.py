"""Result data structure for equilibrium solves."""
from dataclasses import dataclass, field
from typing import Optional

import numpy as np
import pandas as pd

from .time_series import TimeSeries


@dataclass(frozen=True)
class Result:
    """Equilibrium moments on the radial grid.

    Parameters
    ----------
    C : np.ndarray
        Second moment at the grid nodes, from the origin outward.
    N : float
        First moment (equilibrium density).
    r : np.ndarray
        Grid radii of the entries of C, increasing.
    method : str, optional
        Name of the solver that produced the result.
    iterations : int, optional
        Number of iterations performed (1 for direct solves).
    converged : bool, optional
        Whether the stopping tolerance was met.
    C_origin : float, optional
        Second moment at r = 0 for grids without a node at the origin.
    time_series : TimeSeries, optional
        Per-iteration history.
    """
    C: np.ndarray
    N: float
    r: np.ndarray
    method: str = ""
    iterations: int = 0
    converged: bool = False
    C_origin: Optional[float] = None
    time_series: Optional[TimeSeries] = field(default=None, repr=False)

    def __post_init__(self):
        for name in ("C", "r"):
            values = np.array(getattr(self, name), dtype=np.float64)
            values.flags.writeable = False
            object.__setattr__(self, name, values)
        object.__setattr__(self, "N", float(self.N))
        if self.C_origin is not None:
            object.__setattr__(self, "C_origin", float(self.C_origin))
        if self.C.shape != self.r.shape:
            raise ValueError(f"C has shape {self.C.shape} but the grid has shape {self.r.shape}")

    @property
    def C0(self) -> float:
        """Second moment at the origin."""
        if self.C_origin is not None:
            return self.C_origin
        return float(self.C[0])

    @property
    def nodes(self) -> int:
        return self.C.shape[0]

    def to_dataframe(self) -> pd.DataFrame:
        """Convert the second moment to a DataFrame with columns r and C."""
        return pd.DataFrame({"r": self.r, "C": self.C})

"""Problem configuration and closure parameters."""
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Optional

import numpy as np
import pandas as pd

# Mass fraction and safety factor of the autocomputed domain radius
AUTO_RADIUS_MASS = 1.0 - 1e-4
AUTO_RADIUS_FACTOR = 5.0


class ConfigurationError(ValueError):
    """Invalid or inconsistent model parameters."""


class Method(str, Enum):
    """Equation solving methods that can be requested."""

    NONLINEAR_NEUMAN = "neuman"
    LINEAR_NEUMAN = "lneuman"
    NYSTROM = "nystrom"

    @property
    def is_linear(self) -> bool:
        return self is not Method.NONLINEAR_NEUMAN


@dataclass(frozen=True)
class Closure:
    """Weights of the power-2 closure of the third moment.

    Parameters
    ----------
    alpha, beta, gamma : float
        Weights of the ``C(x)C(y)``, ``C(x)C(y-x)`` and ``C(y)C(y-x)`` terms.
        The closure is normalised by ``alpha + beta``.
    """
    alpha: float = 1.0
    beta: float = 0.0
    gamma: float = 0.0

    @property
    def norm(self) -> float:
        return self.alpha + self.beta

    @property
    def is_linear(self) -> bool:
        return self.beta == 0.0 and self.gamma == 0.0


ASYMMETRIC_CLOSURE = Closure(alpha=1.0, beta=0.0, gamma=0.0)


@dataclass(frozen=True)
class Problem:
    """Immutable set of model and discretisation parameters.

    Parameters
    ----------
    kernels : KernelSet
        Birth and death dispersal kernels.
    b : float, optional
        Birth rate. Default is 1.
    s : float, optional
        Competitive (species) death rate. Default is 1.
    d : float, optional
        Environmental death rate. Default is 0.
    alpha, beta, gamma : float, optional
        Closure weights. Default is the asymmetric closure (1, 0, 0).
    R : float, optional
        Domain radius. If None, it is computed from the kernel supports.
    dimension : int, optional
        Dimension of the habitat. Default is 1.
    nodes : int, optional
        Number of grid nodes on ``[0, R)``. Default is 100.
    iterations : int, optional
        Iteration ceiling of the iterative solvers. Default is 500.
    accuracy : int, optional
        Decimal places of the output and of the stopping tolerance
        ``10**-accuracy``. Default is 6.
    method : Method or str, optional
        Requested solving method. Default is None (nonlinear Neuman).
    path : str, optional
        File to store the computed vector in. None disables storing.

    Raises
    ------
    ConfigurationError
        If any parameter is invalid.
    """
    kernels: Any
    b: float = 1.0
    s: float = 1.0
    d: float = 0.0
    alpha: float = 1.0
    beta: float = 0.0
    gamma: float = 0.0
    R: Optional[float] = None
    dimension: int = 1
    nodes: int = 100
    iterations: int = 500
    accuracy: int = 6
    method: Optional[Method] = None
    path: Optional[str] = None
    autocomputed_radius: bool = field(default=False, init=False)

    def __post_init__(self):
        if self.kernels is None:
            raise ConfigurationError("Kernels are not set")
        if self.b <= 0:
            raise ConfigurationError(f"Birth rate must be positive, got b={self.b}")
        if self.s <= 0:
            raise ConfigurationError(f"Species death rate must be positive, got s={self.s}")
        if self.d < 0:
            raise ConfigurationError(f"Environmental death rate must be non-negative, got d={self.d}")
        if self.b <= self.d:
            raise ConfigurationError(
                f"Population is not viable: birth rate b={self.b} must exceed environmental death rate d={self.d}"
            )
        if self.alpha + self.beta == 0:
            raise ConfigurationError("Closure is undefined for alpha + beta = 0")
        if int(self.dimension) != self.dimension or self.dimension < 1:
            raise ConfigurationError(f"Dimension must be a positive integer, got {self.dimension}")
        if int(self.nodes) != self.nodes or self.nodes < 1:
            raise ConfigurationError(f"Node count must be a positive integer, got {self.nodes}")
        if int(self.iterations) != self.iterations or self.iterations < 1:
            raise ConfigurationError(f"Iteration count must be a positive integer, got {self.iterations}")
        if int(self.accuracy) != self.accuracy or self.accuracy < 0:
            raise ConfigurationError(f"Accuracy must be a non-negative integer, got {self.accuracy}")

        if self.method is not None and not isinstance(self.method, Method):
            try:
                object.__setattr__(self, "method", Method(self.method))
            except ValueError:
                choices = ", ".join(m.value for m in Method)
                raise ConfigurationError(f"Unknown method '{self.method}'. Use one of: {choices}") from None

        if self.R is None:
            object.__setattr__(self, "R", self._autocompute_radius())
            object.__setattr__(self, "autocomputed_radius", True)
        elif self.R <= 0:
            raise ConfigurationError(f"Domain radius must be positive, got R={self.R}")

    def _autocompute_radius(self) -> float:
        support = max(
            self.kernels.birth.support_radius(self.dimension, AUTO_RADIUS_MASS),
            self.kernels.death.support_radius(self.dimension, AUTO_RADIUS_MASS),
        )
        return AUTO_RADIUS_FACTOR * support

    @property
    def step(self) -> float:
        return self.R / self.nodes

    @property
    def origin(self) -> float:
        return 0.0

    @property
    def grid(self) -> np.ndarray:
        return self.origin + self.step * np.arange(self.nodes)

    @property
    def tolerance(self) -> float:
        return 10.0 ** (-self.accuracy)

    @property
    def mean_field_density(self) -> float:
        """Equilibrium density without spatial correlations, (b - d) / s."""
        return (self.b - self.d) / self.s

    @property
    def closure(self) -> Closure:
        return Closure(alpha=self.alpha, beta=self.beta, gamma=self.gamma)

    def describe(self) -> str:
        """Multi-line parameter summary for diagnostics."""
        method = self.method.value if self.method is not None else Method.NONLINEAR_NEUMAN.value
        lines = [
            self.kernels.describe(),
            f"R = {self.R:10.5f}{' (autocomputed)' if self.autocomputed_radius else ''}",
            f"n_count = {self.nodes}",
            f"i_count = {self.iterations}",
            f"b = {self.b:10.5f}",
            f"s = {self.s:10.5f}",
            f"d = {self.d:10.5f}",
            f"alpha = {self.alpha:10.5f}",
            f"beta = {self.beta:10.5f}",
            f"gamma = {self.gamma:10.5f}",
            f"accuracy = {self.accuracy}",
            f"step = {self.step:10.5f}",
            f"dimension = {self.dimension}",
            f"method: {method}",
        ]
        if self.path:
            lines.append(f"path = '{self.path}'")
        return "\n".join(lines)

    def to_dataframe(self) -> pd.DataFrame:
        """Convert parameters to a single-row DataFrame.

        Returns
        -------
        pd.DataFrame
            One column per parameter; the kernels are rendered by their
            diagnostic description.
        """
        data = asdict(self)
        data["kernels"] = self.kernels.describe()
        data["method"] = self.method.value if self.method is not None else None
        return pd.DataFrame([data])

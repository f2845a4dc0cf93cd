"""Equilibrium moment solvers for the Dieckmann-Law model.

Solver Hierarchy:
-----------------
EquilibriumSolver (abstract base - Neuman iteration on (Q, N))
├── NeumanSolver (direct quadrature, 1D/3D)
│   └── LinearNeumanSolver (asymmetric closure)
│       └── NystromSolver (one dense linear solve)
├── TransformSolver (FFT convolutions, 1D/3D)
└── NaiveHankelSolver (dense Hankel transform, any dimension)

``solve(problem)`` picks the solver with ``select_solver``.
"""

from .base_solver import EquilibriumSolver
from .closure import first_moment, neuman_update, second_moment, third_moment
from .datastructures import NeumanSolverFields
from .dispatch import SOLVER_REGISTRY, SolverKind, create_solver, select_solver, solve
from .hankel_solver import NaiveHankelSolver
from .neuman_solver import LinearNeumanSolver, NeumanSolver
from .nystrom_solver import NystromSolver
from .transform_solver import TransformSolver

__all__ = [
    # Base classes
    "EquilibriumSolver",
    # Data structures
    "NeumanSolverFields",
    # Closure operator
    "third_moment",
    "first_moment",
    "second_moment",
    "neuman_update",
    # Concrete solvers
    "NeumanSolver",
    "LinearNeumanSolver",
    "NystromSolver",
    "TransformSolver",
    "NaiveHankelSolver",
    # Dispatch
    "SolverKind",
    "SOLVER_REGISTRY",
    "select_solver",
    "create_solver",
    "solve",
]

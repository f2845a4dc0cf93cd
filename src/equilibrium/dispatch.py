"""Solver selection and the uniform solve entry point."""

import logging
from enum import Enum

from datastructures import Method
from radial import LINE_DIMENSIONS

from .hankel_solver import NaiveHankelSolver
from .neuman_solver import LinearNeumanSolver, NeumanSolver
from .nystrom_solver import NystromSolver
from .transform_solver import TransformSolver

logger = logging.getLogger(__name__)


class SolverKind(Enum):
    NONLINEAR_NEUMAN = "neuman"
    LINEAR_NEUMAN = "lneuman"
    NYSTROM = "nystrom"
    TRANSFORM = "transform"
    NAIVE_HANKEL = "hankel"


SOLVER_REGISTRY = {
    SolverKind.NONLINEAR_NEUMAN: NeumanSolver,
    SolverKind.LINEAR_NEUMAN: LinearNeumanSolver,
    SolverKind.NYSTROM: NystromSolver,
    SolverKind.TRANSFORM: TransformSolver,
    SolverKind.NAIVE_HANKEL: NaiveHankelSolver,
}


def select_solver(dimension, method=None):
    """Pick the solver for a dimension and a requested method.

    In 1D and 3D the linear methods are honoured and everything else,
    including no or an unknown method, goes to the transform solver.
    Other dimensions always use the naive Hankel solver.

    Parameters
    ----------
    dimension : int
        Habitat dimension.
    method : Method or str, optional
        Requested method.

    Returns
    -------
    SolverKind
    """
    if dimension not in LINE_DIMENSIONS:
        return SolverKind.NAIVE_HANKEL
    if method == Method.LINEAR_NEUMAN:
        return SolverKind.LINEAR_NEUMAN
    if method == Method.NYSTROM:
        return SolverKind.NYSTROM
    return SolverKind.TRANSFORM


def create_solver(problem, kind=None):
    """Instantiate a solver for the problem.

    ``kind`` overrides the automatic selection.
    """
    if kind is None:
        kind = select_solver(problem.dimension, problem.method)
    solver_class = SOLVER_REGISTRY[SolverKind(kind)]
    logger.debug("Dimension %d, method %s: using %s", problem.dimension, problem.method, solver_class.__name__)
    return solver_class(problem)


def solve(problem, kind=None):
    """Solve the equilibrium equations of a problem.

    A fresh solver is created on every call, so repeated calls with the
    same problem give identical results.

    Returns
    -------
    Result
    """
    return create_solver(problem, kind).solve()

"""Command-line interface of the equilibrium solver.

Example::

    neuman -kn 1 1 -b 1 -s 0.1 -d 0.1 -r 10 -n 50 -m nystrom
"""

import logging

import click

from datastructures import ConfigurationError, Method, Problem
from kernels import LABELS, PARAMETER_NAMES, KernelKind, make_kernels
from utils import configure_logging, store_vector

from .dispatch import solve

logger = logging.getLogger(__name__)

CLOSURE_HELP = """
The program solves the integral equation for the second spatial moment of
the Dieckmann-Law model of one species in equilibrium, using the second
order closure of the third moment

\b
              1   C(x)C(y)    C(x)C(y-x)    C(y)C(y-x)
    T(x, y) =---(A-------- + B---------- + G---------- - BN^3)
             A+B     N            N             N

\b
Kernel types (-k) and their parameters, given as numbers after the options:
"""


def _kernel_help():
    lines = [
        f"    {kind.value} - {LABELS[kind].lower()}: {', '.join(PARAMETER_NAMES[kind])}"
        for kind in KernelKind
    ]
    return "\n".join(lines)


class OptionalParam(click.ParamType):
    """Value of a wrapped type, or None when given as 'n'."""

    def __init__(self, inner):
        self.inner = inner
        self.name = f"{inner.name}|n"

    def convert(self, value, param, ctx):
        if value is None or value == "n":
            return None
        return self.inner.convert(value, param, ctx)


@click.command(
    name="neuman",
    context_settings={"help_option_names": ["-h", "--help"]},
    help=CLOSURE_HELP + "\n\b\n" + _kernel_help(),
    epilog="Linear methods ignore -A, -B and -G and use the asymmetric closure A = 1, B = G = 0.",
)
@click.option(
    "-k", "kernel", required=True,
    type=click.Choice([kind.value for kind in KernelKind]),
    help="Kernel type, see above.",
)
@click.option("-A", "alpha", type=float, default=1.0, show_default=True, help="Closure parameter alpha.")
@click.option("-B", "beta", type=float, default=0.0, show_default=True, help="Closure parameter beta.")
@click.option("-G", "gamma", type=float, default=0.0, show_default=True, help="Closure parameter gamma.")
@click.option(
    "-m", "method",
    type=click.Choice([method.value for method in Method]),
    default=Method.NONLINEAR_NEUMAN.value, show_default=True,
    help="Equation solving method.",
)
@click.option("-d", "d", type=float, default=0.0, show_default=True, help="Environmental death rate.")
@click.option("-b", "b", type=float, default=1.0, show_default=True, help="Species birth rate.")
@click.option("-s", "s", type=float, default=1.0, show_default=True, help="Species death rate.")
@click.option(
    "-r", "radius", type=OptionalParam(click.FLOAT), default="n", show_default=True,
    help="Size of the area, 'n' to autocompute it.",
)
@click.option("-D", "dimension", type=int, default=1, show_default=True, help="Dimension of space.")
@click.option("-i", "iterations", type=int, default=500, show_default=True, help="Iteration count.")
@click.option("-n", "nodes", type=int, default=100, show_default=True, help="Grid node count.")
@click.option(
    "-p", "path", type=OptionalParam(click.Path(dir_okay=False)), default="n", show_default=True,
    help="File to store C in, 'n' to skip it.",
)
@click.option("-e", "accuracy", type=int, default=6, show_default=True, help="Accuracy in decimal places.")
@click.option("--ascetic", is_flag=True, help="Print the first moment only.")
@click.option("--verbose", "-v", is_flag=True, help="Log the parameters and the solver progress.")
@click.argument("kernel_params", nargs=-1, type=float)
def main(kernel, kernel_params, alpha, beta, gamma, method, d, b, s, radius, dimension, iterations,
         nodes, path, accuracy, ascetic, verbose):
    configure_logging("INFO" if verbose else "WARNING")

    try:
        problem = Problem(
            kernels=make_kernels(kernel, *kernel_params),
            b=b, s=s, d=d,
            alpha=alpha, beta=beta, gamma=gamma,
            R=radius,
            dimension=dimension,
            nodes=nodes,
            iterations=iterations,
            accuracy=accuracy,
            method=method,
            path=path,
        )
    except ConfigurationError as e:
        raise click.UsageError(str(e)) from e

    for line in problem.describe().splitlines():
        logger.info(line)

    result = solve(problem)

    if ascetic:
        click.echo(f"{result.N:15.{accuracy}f}")
    else:
        click.echo(f"First moment: {result.N:.{accuracy}f}")
        click.echo(f"C(0) = {result.C0:.{accuracy}f}")

    store_vector(result.C, problem.path, problem.nodes, problem.step, problem.origin, problem.accuracy, r=result.r)


if __name__ == "__main__":
    main()

"""
Equilibrium Solver Comparison
=============================

This script solves the 1D linear problem with normal kernels by the linear
Neuman iteration and by the Nystrom method, and the nonlinear problem by the
direct and the FFT Neuman iterations.
"""

# %%
# Problem Setup
# -------------
# Normal kernels with unit deviation, b=1, s=0.1, d=0.1 on [0, 10) with 50 nodes.

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from datastructures import Problem
from equilibrium import LinearNeumanSolver, NeumanSolver, NystromSolver, TransformSolver
from kernels import make_kernels
from utils import configure_logging, get_project_root, plot_convergence, plot_second_moment

configure_logging("INFO")

project_root = get_project_root()
data_dir = project_root / "data" / "Methods"
fig_dir = project_root / "figures" / "Methods"
data_dir.mkdir(parents=True, exist_ok=True)
fig_dir.mkdir(parents=True, exist_ok=True)

kernels = make_kernels("n", 1.0, 1.0)
linear = Problem(kernels=kernels, b=1.0, s=0.1, d=0.1, R=10.0, nodes=50, accuracy=10, iterations=20000)
nonlinear = Problem(
    kernels=kernels, b=1.0, s=0.1, d=0.1, alpha=1.0, beta=0.2, gamma=0.1,
    R=10.0, nodes=50, accuracy=10, iterations=2000,
)

print(linear.describe())

# %%
# Linear Problem
# --------------
# The Neuman iteration and the direct solve share the quadrature, so they
# converge to the same vector.

results = {
    "lneuman": LinearNeumanSolver(linear).solve(),
    "nystrom": NystromSolver(linear).solve(),
}
difference = np.max(np.abs(results["lneuman"].C - results["nystrom"].C))
print(f"  max |C_lneuman - C_nystrom| = {difference:.3e}")

# %%
# Nonlinear Problem
# -----------------
# Direct quadrature against zero-padded FFT convolutions.

results["neuman"] = NeumanSolver(nonlinear).solve()
results["transform"] = TransformSolver(nonlinear).solve()
difference = np.max(np.abs(results["neuman"].C - results["transform"].C))
print(f"  max |C_neuman - C_transform| = {difference:.3e}")

# %%
# Summary
# -------

summary = pd.DataFrame(
    [
        {"method": name, "N": r.N, "C(0)": r.C0, "iterations": r.iterations, "converged": r.converged}
        for name, r in results.items()
    ]
)
print(summary.to_string(index=False))
summary.to_csv(data_dir / "summary.csv", index=False)

# %%
# Figures
# -------

fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(12, 4.5))
plot_second_moment(list(results.values()), labels=list(results), ax=ax1, normalized=True)
plot_convergence([results["lneuman"], results["neuman"]], labels=["lneuman", "neuman"], ax=ax2)
fig.tight_layout()
fig.savefig(fig_dir / "compare_methods.pdf", bbox_inches="tight")
print(f"\nFigure saved to: {fig_dir / 'compare_methods.pdf'}")

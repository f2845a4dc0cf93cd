"""
Closure Parameter Sweep
=======================

This script follows the equilibrium density N of the 3D model with kurtic
kernels as the closure weight beta = gamma grows from the asymmetric closure.
"""

# %%
# Sweep
# -----

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from datastructures import Problem
from equilibrium import solve
from kernels import make_kernels
from utils import get_project_root, store_vector

project_root = get_project_root()
data_dir = project_root / "data" / "Closure"
fig_dir = project_root / "figures" / "Closure"
data_dir.mkdir(parents=True, exist_ok=True)
fig_dir.mkdir(parents=True, exist_ok=True)

kernels = make_kernels("k", 1.0, 2.0)
rows = []
for weight in np.linspace(0.0, 0.4, 5):
    problem = Problem(
        kernels=kernels, b=1.0, s=0.5, d=0.2, beta=weight, gamma=weight,
        dimension=3, nodes=200, iterations=2000, accuracy=8,
    )
    result = solve(problem)
    store_vector(result.C, data_dir / f"C_beta{weight:.2f}.txt", problem.nodes, problem.step,
                 problem.origin, problem.accuracy)
    rows.append({"beta": weight, "N": result.N, "C(0)": result.C0, "converged": result.converged})
    print(f"  beta = gamma = {weight:.2f}: N = {result.N:.6f} ({result.iterations} iterations)")

df = pd.DataFrame(rows)

# %%
# Figure
# ------

fig, ax = plt.subplots(figsize=(6, 4))
ax.plot(df["beta"], df["N"], "o-")
ax.axhline(problem.mean_field_density, color="gray", linestyle="--", label="mean field")
ax.set_xlabel(r"$\beta = \gamma$")
ax.set_ylabel("N")
ax.legend()
fig.savefig(fig_dir / "closure_sweep.pdf", bbox_inches="tight")
print(f"\nFigure saved to: {fig_dir / 'closure_sweep.pdf'}")

"""Plots of equilibrium results."""

import matplotlib.pyplot as plt
import pandas as pd

plt.rcParams.update(
    {
        "axes.grid": True,
        "grid.alpha": 0.3,
        "figure.dpi": 100,
    }
)


def _as_list(results, labels):
    if not isinstance(results, (list, tuple)):
        results = [results]
    if labels is None:
        labels = [result.method or f"run {i}" for i, result in enumerate(results)]
    if len(labels) != len(results):
        raise ValueError(f"Got {len(labels)} labels for {len(results)} results")
    return results, labels


def plot_second_moment(results, labels=None, ax=None, normalized=False):
    """Plot C(r) of one or more results.

    Parameters
    ----------
    results : Result or list of Result
        Results to draw.
    labels : list of str, optional
        Legend entries. Default is the solver names.
    ax : matplotlib.axes.Axes, optional
        Target axes. A new figure is created if None.
    normalized : bool, optional
        Plot the pair correlation ``C / N^2`` instead of C.

    Returns
    -------
    matplotlib.axes.Axes
    """
    results, labels = _as_list(results, labels)
    if ax is None:
        _, ax = plt.subplots(figsize=(7, 4.5))

    frames = []
    for result, label in zip(results, labels):
        df = result.to_dataframe().assign(run=label)
        if normalized:
            df["C"] = df["C"] / result.N**2
        frames.append(df)
    df = pd.concat(frames, ignore_index=True)

    for label, group in df.groupby("run", sort=False):
        ax.plot(group["r"], group["C"], label=label)

    ax.set_xlabel("r")
    ax.set_ylabel("C(r) / N$^2$" if normalized else "C(r)")
    ax.legend()
    return ax


def plot_convergence(results, labels=None, ax=None):
    """Residual history of iterative solves on a log scale."""
    results, labels = _as_list(results, labels)
    if ax is None:
        _, ax = plt.subplots(figsize=(7, 4.5))

    for result, label in zip(results, labels):
        if result.time_series is None:
            continue
        ts = result.time_series.to_dataframe()
        ax.semilogy(ts.index + 1, ts["residual"], label=label)

    ax.set_xlabel("Iteration")
    ax.set_ylabel("Relative change of C")
    ax.legend()
    return ax

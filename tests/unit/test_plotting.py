"""
Unit tests for the plotting helpers (Agg backend).
"""

import matplotlib.pyplot as plt
import numpy as np
import pytest

from datastructures import Result, TimeSeries
from utils import plot_convergence, plot_second_moment


@pytest.fixture
def results():
    r = np.linspace(0.0, 1.0, 5)
    first = Result(C=4.0 + np.exp(-r), N=2.0, r=r, method="nystrom",
                   time_series=TimeSeries(residual=[1e-2], first_moment=[2.0]))
    second = Result(C=4.0 + np.exp(-2 * r), N=2.0, r=r, method="lneuman",
                    time_series=TimeSeries(residual=[1e-1, 1e-2, 1e-3], first_moment=[2.0, 2.0, 2.0]))
    yield [first, second]
    plt.close("all")


def test_plot_second_moment(results):
    ax = plot_second_moment(results)

    assert len(ax.lines) == 2
    assert [text.get_text() for text in ax.get_legend().get_texts()] == ["nystrom", "lneuman"]


def test_plot_second_moment_normalized(results):
    ax = plot_second_moment(results[0], labels=["single"], normalized=True)
    np.testing.assert_allclose(ax.lines[0].get_ydata(), results[0].C / 4.0)


def test_plot_second_moment_label_mismatch(results):
    with pytest.raises(ValueError):
        plot_second_moment(results, labels=["only one"])


def test_plot_convergence(results):
    ax = plot_convergence(results)

    assert len(ax.lines) == 2
    np.testing.assert_allclose(ax.lines[1].get_ydata(), [1e-1, 1e-2, 1e-3])
    assert ax.get_yscale() == "log"

"""
Pytest configuration and shared fixtures for the equilibrium solver tests.
"""

import matplotlib

matplotlib.use("Agg")

import pytest

from datastructures import Problem
from kernels import make_kernels

# =============================================================================
# Test Configuration
# =============================================================================


def pytest_collection_modifyitems(config, items):
    """Add markers based on test paths."""
    for item in items:
        test_path = str(item.fspath)

        if "/unit/" in test_path:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Kernel Fixtures
# =============================================================================


@pytest.fixture
def normal_kernels():
    """Normal birth and death kernels with unit deviation."""
    return make_kernels("n", 1.0, 1.0)


@pytest.fixture
def constant_kernels():
    return make_kernels("c", 1.0, 2.0)


# =============================================================================
# Problem Fixtures
# =============================================================================


@pytest.fixture
def make_problem(normal_kernels):
    """Factory for small problems; keyword arguments override the defaults."""

    def factory(**overrides):
        params = dict(kernels=normal_kernels, b=1.0, s=0.1, d=0.1, R=10.0, nodes=50)
        params.update(overrides)
        return Problem(**params)

    return factory


@pytest.fixture
def linear_problem(make_problem):
    """1D problem with the asymmetric closure."""
    return make_problem(accuracy=4)

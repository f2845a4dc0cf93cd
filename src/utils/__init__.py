"""Helpers for the command line and the experiment scripts."""

from pathlib import Path

from .logging_config import LOG_FORMAT, configure_logging
from .plotting import plot_convergence, plot_second_moment
from .vector_storage import store_vector


def get_project_root() -> Path:
    """Repository root (the directory holding ``src``)."""
    return Path(__file__).resolve().parents[2]


__all__ = [
    "get_project_root",
    "configure_logging",
    "LOG_FORMAT",
    "store_vector",
    "plot_second_moment",
    "plot_convergence",
]

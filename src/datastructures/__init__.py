"""Data structures for problem configuration and results.

This module defines the configuration and result data structures
shared by all equilibrium solvers.
"""

from .config import (
    ASYMMETRIC_CLOSURE,
    Closure,
    ConfigurationError,
    Method,
    Problem,
)
from .fields import Result
from .time_series import TimeSeries

__all__ = [
    # Configuration
    "Problem",
    "Method",
    "Closure",
    "ASYMMETRIC_CLOSURE",
    "ConfigurationError",
    # Results
    "Result",
    # Time series
    "TimeSeries",
]

"""Dispersal kernels of the birth and death processes."""

from .kernel_set import LABELS, PARAMETER_NAMES, KernelKind, KernelSet, make_kernels
from .profiles import (
    ExponentPolynomialProfile,
    ExponentProfile,
    GaussianProfile,
    KurticProfile,
    RadialProfile,
    RoughgardenProfile,
    TopHatProfile,
)

__all__ = [
    # Kernel pairs
    "KernelKind",
    "KernelSet",
    "make_kernels",
    "PARAMETER_NAMES",
    "LABELS",
    # Radial profiles
    "RadialProfile",
    "GaussianProfile",
    "KurticProfile",
    "ExponentProfile",
    "RoughgardenProfile",
    "ExponentPolynomialProfile",
    "TopHatProfile",
]

"""Radial discretisation: grids, line convolutions and Hankel transforms."""

from .convolution import (
    LINE_DIMENSIONS,
    DirectConvolution,
    FFTConvolution,
    LineKernel,
    grid_operand,
    kernel_operand,
)
from .geometry import ball_volume, bessel_zeros, radial_kernel, sphere_area
from .grid import BesselGrid, RadialGrid
from .hankel import NaiveHankelTransform
from .linear_solver import dense_inverse, dense_solver

__all__ = [
    # Grid and geometry
    "RadialGrid",
    "sphere_area",
    "ball_volume",
    "radial_kernel",
    "bessel_zeros",
    # Line convolutions (1D/3D)
    "LINE_DIMENSIONS",
    "LineKernel",
    "kernel_operand",
    "grid_operand",
    "DirectConvolution",
    "FFTConvolution",
    # Hankel transform (any dimension)
    "BesselGrid",
    "NaiveHankelTransform",
    # Linear algebra
    "dense_solver",
    "dense_inverse",
]

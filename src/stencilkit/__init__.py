"""Provides the stencilkit derivative operations."""

from importlib.metadata import PackageNotFoundError, version

from stencilkit.derivatives import d2fdx2, d3fdx3, d4fdx4, dfdx
from stencilkit.stencil_kit import StencilKit, available_orders
from stencilkit.stencils import STENCILS
from stencilkit.stepsize import machine_epsilon, stepsize

try:
    __version__ = version("stencilkit")
except PackageNotFoundError:
    pass

StencilKit.__module__ = "stencilkit"

__all__ = [
    "dfdx",
    "d2fdx2",
    "d3fdx3",
    "d4fdx4",
    "StencilKit",
    "available_orders",
    "STENCILS",
    "machine_epsilon",
    "stepsize",
]

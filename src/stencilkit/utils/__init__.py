"""Utility functions for the stencilkit package."""

from .numerics import relative_error
from .validate import (
    require_callable,
    require_real_point,
    require_real_sample,
)

__all__ = [
    "relative_error",
    "require_callable",
    "require_real_point",
    "require_real_sample",
]

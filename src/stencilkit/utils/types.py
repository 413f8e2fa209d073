"""Shared typing aliases for stencilkit."""

from __future__ import annotations

from typing import Callable, TypeAlias, TypeVar

import numpy as np

#: A floating-point scalar. Python ``float`` behaves as ``numpy.float64``.
RealT = TypeVar("RealT", float, np.floating)

Real: TypeAlias = float | np.floating
#: A real-valued unary function over floating-point arguments.
RealFunction: TypeAlias = Callable[[RealT], RealT]

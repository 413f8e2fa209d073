"""Step-size policy shared by the derivative operations.

The step ``h = sqrt(eps) * xi`` balances truncation error, which grows with
``h``, against round-off error, which grows as ``h`` shrinks, under the
assumption that the relevant derivatives of the function are of order one.
Scaling by ``xi`` keeps the step proportional to the magnitude of the
evaluation point.

Examples:
--------
>>> import numpy as np
>>> from stencilkit.stepsize import stepsize
>>> float(stepsize(np.float64(4.0)))  # 4 * 2**-26
5.960464477539063e-08
>>> stepsize(np.float32(0.0)) == np.finfo(np.float32).eps
True
"""

from __future__ import annotations

import numpy as np

from stencilkit.logger import stencilkit_logger
from stencilkit.utils.validate import require_real_point

__all__ = [
    "machine_epsilon",
    "stepsize",
]


def machine_epsilon(xi: float | np.floating) -> np.floating:
    """Returns the machine epsilon of the floating-point type of ``xi``.

    Args:
        xi: A floating-point scalar. Python floats are double precision.

    Returns:
        The machine epsilon, as a scalar of the same type as ``xi``.

    Raises:
        TypeError: If ``xi`` is not a floating-point scalar.
    """
    point = require_real_point(xi)
    return np.finfo(point.dtype).eps


def stepsize(xi: float | np.floating) -> np.floating:
    """Returns the finite-difference step for the evaluation point ``xi``.

    The step is ``sqrt(eps) * xi`` in the precision of ``xi``. When that
    product is exactly zero (``xi == 0`` or underflow) the step is ``eps``
    itself, so the stencil points never coincide. The sign of the step
    follows ``xi``; every stencil in :mod:`stencilkit.derivatives` gives the
    same result for ``h`` and ``-h``.

    Non-finite or huge points are not special cased and yield whatever
    IEEE-754 arithmetic produces.

    Args:
        xi: The evaluation point.

    Returns:
        The step size, as a scalar of the same type as ``xi``.

    Raises:
        TypeError: If ``xi`` is not a floating-point scalar.
    """
    point = require_real_point(xi)
    eps = np.finfo(point.dtype).eps
    h = np.sqrt(eps) * point
    if h == 0:
        stencilkit_logger.debug(
            "Step size for xi=%r vanishes; using machine epsilon %r.", point, eps
        )
        h = eps
    return h

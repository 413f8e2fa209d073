"""Validation utilities for the stencilkit derivative operations.

The derivative operations are only defined for real-valued unary functions
over floating-point arguments. Integer, boolean and complex inputs are
rejected here instead of being silently promoted.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import numpy as np

__all__ = [
    "require_callable",
    "require_real_point",
    "require_real_sample",
]


def _as_floating_scalar(value: Any) -> np.floating | None:
    """Returns ``value`` as a numpy floating scalar, or None if it is not one.

    Accepted are Python floats, numpy floating scalars and 0-d numpy arrays
    with a floating dtype. Booleans are never accepted.
    """
    if isinstance(value, (bool, np.bool_)):
        return None
    if isinstance(value, np.floating):
        return value
    if isinstance(value, float):
        return np.float64(value)
    if isinstance(value, np.ndarray) and value.ndim == 0:
        if np.issubdtype(value.dtype, np.floating):
            return value[()]
    return None


def require_callable(function: Any) -> Callable[[Any], Any]:
    """Checks that ``function`` can be invoked.

    Args:
        function: Object to check.

    Returns:
        The function unchanged.

    Raises:
        TypeError: If ``function`` is not callable.
    """
    if not callable(function):
        raise TypeError(
            f"function must be callable; got {type(function).__name__}."
        )
    return function


def require_real_point(xi: Any) -> np.floating:
    """Validates an evaluation point and returns it as a numpy floating scalar.

    Python floats map to ``numpy.float64``; numpy floating scalars keep their
    own precision.

    Args:
        xi: The evaluation point.

    Returns:
        The evaluation point as a numpy floating scalar.

    Raises:
        TypeError: If ``xi`` is not a floating-point scalar.
    """
    point = _as_floating_scalar(xi)
    if point is None:
        raise TypeError(
            "xi must be a floating-point scalar (float or numpy floating); "
            f"got {type(xi).__name__}."
        )
    return point


def require_real_sample(value: Any, dtype: np.dtype) -> np.floating:
    """Validates one function sample and casts it to ``dtype``.

    Args:
        value: Value returned by the differentiated function.
        dtype: Floating dtype of the evaluation point.

    Returns:
        The sample as a scalar of ``dtype``.

    Raises:
        TypeError: If ``value`` is not a real floating-point scalar.
    """
    sample = _as_floating_scalar(value)
    if sample is None:
        raise TypeError(
            "function must return a real floating-point scalar; "
            f"got {type(value).__name__}."
        )
    return dtype.type(sample)

"""Numerical utilities."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

__all__ = [
    "relative_error",
]


def relative_error(a: ArrayLike, b: ArrayLike) -> float:
    """Computes the relative error metric between a and b.

    This metric is defined as the absolute difference divided by the maximum
    of 1.0 and the absolute values of a and b, so values close to zero are
    compared in absolute terms.

    Args:
        a: First scalar or array-like input.
        b: Second scalar or array-like input.

    Returns:
        The largest component-wise relative error as a float.
    """
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    denom = np.maximum(1.0, np.maximum(np.abs(a), np.abs(b)))
    return float(np.max(np.abs(a - b) / denom))

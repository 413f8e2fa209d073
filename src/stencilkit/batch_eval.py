"""Evaluation of the differentiated function at stencil points."""

from __future__ import annotations

from typing import Any, Callable, Sequence

import numpy as np

from stencilkit.logger import stencilkit_logger
from stencilkit.utils.validate import require_real_sample

__all__ = ["eval_points"]


def eval_points(
    func: Callable[[Any], Any],
    xs: Sequence[np.floating],
    dtype: np.dtype,
) -> tuple[np.floating, ...]:
    """Evaluates ``func`` at a sequence of points, in order.

    Evaluation is serial and follows the order of ``xs``. Exceptions raised
    by ``func`` propagate unchanged.

    Args:
        func: Real-valued unary function.
        xs: Stencil points, already in the precision given by ``dtype``.
        dtype: Floating dtype of the evaluation point. Every returned value
            is cast to it.

    Returns:
        A tuple with one sample per point.

    Raises:
        TypeError: If ``func`` returns something other than a real
            floating-point scalar.
    """
    values = tuple(func(x) for x in xs)

    mixed = [
        np.result_type(v) for v in values
        if isinstance(v, (float, np.floating, np.ndarray))
        and np.result_type(v) != dtype
    ]
    if mixed:
        stencilkit_logger.debug(
            "Casting %d function sample(s) of dtype %s to %s.",
            len(mixed), mixed[0], dtype,
        )

    return tuple(require_real_sample(v, dtype) for v in values)

"""Provides the StencilKit class.

The class is a thin front end over the four derivative operations in
:mod:`stencilkit.derivatives`. You provide the function to differentiate and
the evaluation point ``x0`` once, then ask for a derivative by order.

Examples:
    >>> from stencilkit.stencil_kit import StencilKit
    >>> sk = StencilKit(lambda x: -2.0 * x * x * x + 1.0, x0=4.0)
    >>> float(sk.differentiate(order=1))
    -96.0

Notes:
    The orders are dispatched to four independent formulas; there is no
    generalised order-``k`` scheme behind this class. For the supported
    orders at runtime, call ``available_orders()``.
"""

from __future__ import annotations

from typing import Callable

from stencilkit.derivatives import d2fdx2, d3fdx3, d4fdx4, dfdx
from stencilkit.utils.types import RealFunction, RealT
from stencilkit.utils.validate import require_callable, require_real_point

__all__ = [
    "StencilKit",
    "available_orders",
]


_OPERATIONS: dict[int, Callable] = {
    1: dfdx,
    2: d2fdx2,
    3: d3fdx3,
    4: d4fdx4,
}


def _resolve(order: int) -> Callable:
    """Resolve a derivative order to the operation computing it.

    Args:
        order: Derivative order.

    Returns:
        The derivative operation.

    Raises:
        ValueError: If ``order`` is not supported.
    """
    if isinstance(order, bool) or order not in _OPERATIONS:
        opts = ", ".join(str(k) for k in available_orders())
        raise ValueError(
            f"Unsupported derivative order: {order!r}. Choose one of {{{opts}}}."
        )
    return _OPERATIONS[order]


class StencilKit:
    """Interface for computing derivatives of one function at one point.

    Attributes:
        function: The callable to differentiate.
        x0: The point at which the derivative is evaluated.
    """

    def __init__(self, function: RealFunction, x0: RealT):
        """Initializes the kit with a target function and evaluation point.

        Args:
            function: Real-valued unary function to differentiate.
            x0: Floating-point evaluation point.

        Raises:
            TypeError: If ``function`` is not callable or ``x0`` is not a
                floating-point scalar.
        """
        self.function = require_callable(function)
        require_real_point(x0)
        self.x0 = x0

    def differentiate(self, *, order: int = 1) -> RealT:
        """Computes the derivative of the requested order.

        Args:
            order: Derivative order, one of 1, 2, 3 or 4. Default is 1.

        Returns:
            The approximate derivative, in the precision of ``x0``.

        Raises:
            ValueError: If ``order`` is not supported.
        """
        operation = _resolve(order)
        return operation(self.function, self.x0)


def available_orders() -> list[int]:
    """List the derivative orders exposed by this API.

    Returns:
        Sorted list of derivative orders.
    """
    return sorted(_OPERATIONS)

"""Stencil definitions for the four derivative operations.

Each stencil is described by integer offsets (in units of the step ``h``),
integer weights and an integer denominator, so that the derivative of order
``k`` is approximated by::

    sum(w * f(xi + o * h) for o, w in zip(offsets, weights)) / (denominator * h**k)

The table is the reference description of the formulas written out in
:mod:`stencilkit.derivatives`. The moment helpers below analyse a stencil in
exact integer arithmetic: a stencil reproduces the ``k``-th derivative when
its moments ``sum(w * o**r)`` vanish for ``r < k`` and equal
``denominator * k!`` for ``r == k``; the first non-vanishing moment after
that gives the truncation order.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

__all__ = [
    "Stencil",
    "STENCILS",
    "ORDERS",
    "moment",
    "reproduced_order",
    "truncation_order",
]


@dataclass(frozen=True)
class Stencil:
    """A central finite-difference stencil.

    Attributes:
        derivative_order: The derivative the stencil approximates.
        offsets: Sample offsets in units of the step size.
        weights: Integer weight of each sample.
        denominator: Integer factor multiplying ``h**derivative_order``.
        accuracy: Advertised order of the truncation error, ``O(h**accuracy)``.
    """

    derivative_order: int
    offsets: tuple[int, ...]
    weights: tuple[int, ...]
    denominator: int
    accuracy: int

    @property
    def evaluation_count(self) -> int:
        """Number of function evaluations the stencil needs."""
        return len(self.offsets)

    @property
    def uses_center(self) -> bool:
        """Whether the stencil samples the evaluation point itself."""
        return 0 in self.offsets


#: Stencils keyed by derivative order.
#:
#: The fourth-derivative stencil advertises ``O(h**2)``, lower than the
#: others. That is the guarantee it is documented with; the moment analysis
#: of both the third- and fourth-derivative stencils finds more cancellation
#: than advertised (see :func:`truncation_order`).
STENCILS: dict[int, Stencil] = {
    1: Stencil(
        derivative_order=1,
        offsets=(-2, -1, 1, 2),
        weights=(1, -8, 8, -1),
        denominator=12,
        accuracy=4,
    ),
    2: Stencil(
        derivative_order=2,
        offsets=(-2, -1, 0, 1, 2),
        weights=(-1, 16, -30, 16, -1),
        denominator=12,
        accuracy=4,
    ),
    3: Stencil(
        derivative_order=3,
        offsets=(-3, -2, -1, 1, 2, 3),
        weights=(1, -8, 13, -13, 8, -1),
        denominator=8,
        accuracy=3,
    ),
    4: Stencil(
        derivative_order=4,
        offsets=(-3, -2, -1, 0, 1, 2, 3),
        weights=(-1, 12, -39, 56, -39, 12, -1),
        denominator=6,
        accuracy=2,
    ),
}

#: Supported derivative orders.
ORDERS = tuple(sorted(STENCILS))


def moment(stencil: Stencil, power: int) -> int:
    """Returns ``sum(w * o**power)`` over the stencil, in exact arithmetic."""
    return sum(w * o**power for o, w in zip(stencil.offsets, stencil.weights))


def reproduced_order(stencil: Stencil) -> int | None:
    """Returns the derivative order the stencil reproduces exactly.

    Args:
        stencil: The stencil to analyse.

    Returns:
        The order ``k`` such that the stencil approximates the ``k``-th
        derivative with the stated denominator, or None if the weights do
        not form a consistent difference formula.
    """
    for r in range(stencil.evaluation_count):
        m = moment(stencil, r)
        if m == 0:
            continue
        if m == stencil.denominator * math.factorial(r):
            return r
        return None
    return None


def truncation_order(stencil: Stencil, max_power: int = 40) -> int:
    """Computes the truncation order of a stencil from its moments.

    Args:
        stencil: The stencil to analyse.
        max_power: Highest moment inspected.

    Returns:
        The exponent ``p`` of the leading truncation error term ``O(h**p)``.

    Raises:
        ValueError: If the stencil does not reproduce its derivative order.
        RuntimeError: If no non-vanishing moment is found up to ``max_power``.
    """
    m = stencil.derivative_order
    if reproduced_order(stencil) != m:
        raise ValueError(
            f"Stencil weights {stencil.weights} do not approximate "
            f"derivative order {m}."
        )
    for r in range(m + 1, max_power + 1):
        if moment(stencil, r) != 0:
            return r - m
    raise RuntimeError("Could not detect truncation order.")

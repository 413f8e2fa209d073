"""Central finite-difference approximations of the first four derivatives.

Each operation takes a real-valued unary function ``f`` and a floating-point
evaluation point ``xi`` and returns a scalar of the same floating type as
``xi``. All offsets, weights and the step size of one call share that type;
values returned by ``f`` are cast to it before they are combined.

The step size comes from :func:`stencilkit.stepsize.stepsize`. The stencils
are the ones tabulated in :data:`stencilkit.stencils.STENCILS`:

========  =======================  ===========  =========
function  samples (units of h)     evaluations  accuracy
========  =======================  ===========  =========
dfdx      -2, -1, 1, 2             4            O(h^4)
d2fdx2    -2, -1, 0, 1, 2          5            O(h^4)
d3fdx3    -3, -2, -1, 1, 2, 3      6            O(h^3)
d4fdx4    -3, ..., 3               7            O(h^2)
========  =======================  ===========  =========

The samples are combined in pairs that are symmetric about ``xi`` (and,
when the centre is sampled, as differences against ``f(xi)``) before the
weights are applied. This is algebraically the same formula, but the result
may differ in the last bits from a left-to-right sum and is usually more
accurate, because the large common part of the samples cancels exactly
before it is scaled.

With ``h ~ sqrt(eps) * xi`` the third and fourth derivatives divide by
``h**3`` and ``h**4``, so away from the origin their error is dominated by
round-off in the samples.

Examples:
--------
>>> from stencilkit.derivatives import dfdx, d2fdx2
>>> f = lambda x: -2.0 * x * x * x + 1.0
>>> float(dfdx(f, 4.0))
-96.0
>>> float(d2fdx2(f, 4.0))
-48.0
"""

from __future__ import annotations

import numpy as np

from stencilkit.batch_eval import eval_points
from stencilkit.stepsize import stepsize
from stencilkit.utils.types import RealFunction, RealT
from stencilkit.utils.validate import require_callable, require_real_point

__all__ = [
    "dfdx",
    "d2fdx2",
    "d3fdx3",
    "d4fdx4",
]


def _prepare(f, xi) -> tuple[np.floating, np.floating, type]:
    """Validates the inputs and returns the point, the step and the scalar type."""
    require_callable(f)
    point = require_real_point(xi)
    return point, stepsize(point), point.dtype.type


def dfdx(f: RealFunction[RealT], xi: RealT) -> RealT:
    """Approximates the first derivative with a four-point central difference.

    ::

                 f(xi - 2h) - 8f(xi - h) + 8f(xi + h) - f(xi + 2h)
        df/dx = ---------------------------------------------------
                                       12h

    The truncation error is ``O(h**4)``.

    Args:
        f: Real-valued unary function.
        xi: Evaluation point.

    Returns:
        The approximate first derivative, in the precision of ``xi``.

    Raises:
        TypeError: If ``f`` is not callable, ``xi`` is not a floating-point
            scalar, or ``f`` returns a non-floating value.
    """
    x, h, T = _prepare(f, xi)
    fm2, fm1, fp1, fp2 = eval_points(
        f, (x - T(2) * h, x - h, x + h, x + T(2) * h), x.dtype
    )
    return (T(8) * (fp1 - fm1) - (fp2 - fm2)) / (T(12) * h)


def d2fdx2(f: RealFunction[RealT], xi: RealT) -> RealT:
    """Approximates the second derivative with a five-point central difference.

    ::

                   -f(xi - 2h) + 16f(xi - h) - 30f(xi) + 16f(xi + h) - f(xi + 2h)
        d2f/dx2 = ----------------------------------------------------------------
                                                  2
                                               12h

    The truncation error is ``O(h**4)``.

    Args:
        f: Real-valued unary function.
        xi: Evaluation point.

    Returns:
        The approximate second derivative, in the precision of ``xi``.

    Raises:
        TypeError: If ``f`` is not callable, ``xi`` is not a floating-point
            scalar, or ``f`` returns a non-floating value.
    """
    x, h, T = _prepare(f, xi)
    fm2, fm1, f0, fp1, fp2 = eval_points(
        f, (x - T(2) * h, x - h, x, x + h, x + T(2) * h), x.dtype
    )
    near = (fm1 - f0) + (fp1 - f0)
    far = (fm2 - f0) + (fp2 - f0)
    return (T(16) * near - far) / (T(12) * h * h)


def d3fdx3(f: RealFunction[RealT], xi: RealT) -> RealT:
    """Approximates the third derivative with a six-point central difference.

    ::

                   f(xi - 3h) - 8f(xi - 2h) + 13f(xi - h) - 13f(xi + h) + 8f(xi + 2h) - f(xi + 3h)
        d3f/dx3 = --------------------------------------------------------------------------------
                                                        3
                                                      8h

    The stencil does not sample ``xi`` itself. The advertised truncation
    error is ``O(h**3)``.

    Args:
        f: Real-valued unary function.
        xi: Evaluation point.

    Returns:
        The approximate third derivative, in the precision of ``xi``.

    Raises:
        TypeError: If ``f`` is not callable, ``xi`` is not a floating-point
            scalar, or ``f`` returns a non-floating value.
    """
    x, h, T = _prepare(f, xi)
    fm3, fm2, fm1, fp1, fp2, fp3 = eval_points(
        f,
        (x - T(3) * h, x - T(2) * h, x - h, x + h, x + T(2) * h, x + T(3) * h),
        x.dtype,
    )
    numerator = (fm3 - fp3) - T(8) * (fm2 - fp2) + T(13) * (fm1 - fp1)
    return numerator / (T(8) * h * h * h)


def d4fdx4(f: RealFunction[RealT], xi: RealT) -> RealT:
    """Approximates the fourth derivative with a seven-point central difference.

    ::

                   -f(xi - 3h) + 12f(xi - 2h) - 39f(xi - h) + 56f(xi) - 39f(xi + h) + 12f(xi + 2h) - f(xi + 3h)
        d4f/dx4 = ---------------------------------------------------------------------------------------------
                                                            4
                                                          6h

    The advertised truncation error is ``O(h**2)``, lower than for the other
    three derivatives. It is a property of this stencil choice.

    Args:
        f: Real-valued unary function.
        xi: Evaluation point.

    Returns:
        The approximate fourth derivative, in the precision of ``xi``.

    Raises:
        TypeError: If ``f`` is not callable, ``xi`` is not a floating-point
            scalar, or ``f`` returns a non-floating value.
    """
    x, h, T = _prepare(f, xi)
    fm3, fm2, fm1, f0, fp1, fp2, fp3 = eval_points(
        f,
        (
            x - T(3) * h,
            x - T(2) * h,
            x - h,
            x,
            x + h,
            x + T(2) * h,
            x + T(3) * h,
        ),
        x.dtype,
    )
    near = (fm1 - f0) + (fp1 - f0)
    mid = (fm2 - f0) + (fp2 - f0)
    far = (fm3 - f0) + (fp3 - f0)
    return (T(12) * mid - T(39) * near - far) / (T(6) * h * h * h * h)

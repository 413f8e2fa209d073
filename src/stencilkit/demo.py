"""Prints the first derivative of a sample cubic.

Run with:
    python -m stencilkit.demo
"""

from __future__ import annotations

import sys

from stencilkit.derivatives import dfdx


def cubic(x: float) -> float:
    """f(x) = -2x^3 + 1."""
    return -2.0 * x * x * x + 1.0


def main() -> int:
    """Main demo routine.

    Returns:
        Process exit status: 0 on success, 1 if computing the derivative
        raised.
    """
    try:
        xi = 4.0
        value = dfdx(cubic, xi)
        print(f"\nf(x) = -2x^3 + 1 ===> f'(4) = {float(value):g}")
        return 0
    except Exception as exc:
        print(exc, file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())

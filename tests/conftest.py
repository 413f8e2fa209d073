"""Pytest configuration file with shared test functions."""

import numpy as np
import pytest

__all__ = ["cubic", "recorder", "float_type"]


@pytest.fixture
def cubic():
    """Return f(x) = -2x^3 + 1, written with products so it is exact on dyadic points."""
    def _f(x):
        return -2.0 * x * x * x + 1.0
    return _f


@pytest.fixture
def recorder():
    """Return a factory wrapping a function so that every argument it sees is recorded.

    The wrapped function has a ``calls`` attribute listing the arguments in
    evaluation order.
    """
    def _wrap(func):
        calls = []

        def _recorded(x):
            calls.append(x)
            return func(x)

        _recorded.calls = calls
        return _recorded
    return _wrap


@pytest.fixture(params=[np.float32, np.float64], ids=["float32", "float64"])
def float_type(request):
    """Parametrize a test over single and double precision."""
    return request.param

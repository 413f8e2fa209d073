"""Tests for the StencilKit order-dispatch API."""

import numpy as np
import pytest

import stencilkit.stencil_kit as sk_mod
from stencilkit.stencil_kit import StencilKit, available_orders


def test_available_orders():
    """Tests that the four derivative orders are exposed."""
    assert available_orders() == [1, 2, 3, 4]


@pytest.mark.parametrize("order", [1, 2, 3, 4])
def test_dispatch_calls_matching_operation(order, monkeypatch):
    """Tests that differentiate forwards the function and point to the right operation."""
    seen = {}

    def fake(function, xi):
        seen["args"] = (function, xi)
        return float(order)

    monkeypatch.setitem(sk_mod._OPERATIONS, order, fake)
    f = np.sin
    kit = StencilKit(f, 0.25)
    assert kit.differentiate(order=order) == float(order)
    assert seen["args"][0] is f
    assert seen["args"][1] == 0.25


def test_default_order_is_first(cubic):
    """Tests that the default order is the first derivative."""
    assert StencilKit(cubic, 4.0).differentiate() == pytest.approx(-96.0, abs=1e-6)


def test_matches_direct_calls(cubic):
    """Tests that the kit returns what the named operations return."""
    from stencilkit import d2fdx2, d3fdx3, d4fdx4, dfdx

    kit = StencilKit(cubic, 1.5)
    for order, op in zip((1, 2, 3, 4), (dfdx, d2fdx2, d3fdx3, d4fdx4)):
        assert kit.differentiate(order=order) == op(cubic, 1.5)


@pytest.mark.parametrize("order", [0, 5, -1, True, "1"])
def test_unsupported_order_raises(order):
    """Tests that unsupported orders raise ValueError listing the choices."""
    kit = StencilKit(np.sin, 1.0)
    with pytest.raises(ValueError, match=r"Choose one of \{1, 2, 3, 4\}"):
        kit.differentiate(order=order)


def test_constructor_validates_inputs():
    """Tests that bad functions and points are rejected on construction."""
    with pytest.raises(TypeError):
        StencilKit("sin", 1.0)
    with pytest.raises(TypeError):
        StencilKit(np.sin, 1)

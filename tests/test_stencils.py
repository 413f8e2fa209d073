"""Tests for the stencil table and its moment analysis."""

import math

import pytest

from stencilkit.stencils import (
    ORDERS,
    STENCILS,
    Stencil,
    moment,
    reproduced_order,
    truncation_order,
)


def test_supported_orders():
    """Tests that orders one to four are tabulated."""
    assert ORDERS == (1, 2, 3, 4)
    assert all(STENCILS[k].derivative_order == k for k in ORDERS)


@pytest.mark.parametrize(
    "order, count, uses_center",
    [(1, 4, False), (2, 5, True), (3, 6, False), (4, 7, True)],
)
def test_evaluation_counts(order, count, uses_center):
    """Tests the number of samples and whether the centre is sampled."""
    stencil = STENCILS[order]
    assert stencil.evaluation_count == count
    assert len(stencil.weights) == count
    assert stencil.uses_center is uses_center


@pytest.mark.parametrize("order", ORDERS)
def test_offsets_are_central(order):
    """Tests that every stencil is symmetric about the evaluation point."""
    offsets = STENCILS[order].offsets
    assert sorted(offsets) == list(offsets)
    assert sorted(-o for o in offsets) == list(offsets)


@pytest.mark.parametrize("order", ORDERS)
def test_weight_parity_matches_derivative_order(order):
    """Tests that odd derivatives use antisymmetric and even ones symmetric weights."""
    stencil = STENCILS[order]
    sign = -1 if order % 2 else 1
    weights = dict(zip(stencil.offsets, stencil.weights))
    assert all(weights[-o] == sign * w for o, w in weights.items())


@pytest.mark.parametrize("order", ORDERS)
def test_stencils_reproduce_their_order(order):
    """Tests that each stencil's moments select its derivative with its denominator."""
    stencil = STENCILS[order]
    assert reproduced_order(stencil) == order
    for r in range(order):
        assert moment(stencil, r) == 0
    assert moment(stencil, order) == stencil.denominator * math.factorial(order)


@pytest.mark.parametrize("order", ORDERS)
def test_truncation_order_meets_advertised_accuracy(order):
    """Tests that the measured truncation order is at least the advertised one."""
    stencil = STENCILS[order]
    assert truncation_order(stencil) >= stencil.accuracy


@pytest.mark.parametrize("order, expected", [(1, 4), (2, 4), (3, 4), (4, 4)])
def test_truncation_order_values(order, expected):
    """Tests the truncation orders found by the moment analysis."""
    assert truncation_order(STENCILS[order]) == expected


def test_inconsistent_weights_are_detected():
    """Tests that weights not summing to zero do not form a difference formula."""
    bad = Stencil(
        derivative_order=4,
        offsets=(-3, -2, -1, 0, 1, 2, 3),
        weights=(1, 12, -39, 56, 39, 12, -1),
        denominator=6,
        accuracy=2,
    )
    assert moment(bad, 0) == 80
    assert reproduced_order(bad) is None
    with pytest.raises(ValueError, match="do not approximate"):
        truncation_order(bad)


def test_three_point_first_derivative():
    """Tests the moment analysis on the textbook 3-point stencil."""
    stencil = Stencil(
        derivative_order=1,
        offsets=(-1, 0, 1),
        weights=(-1, 0, 1),
        denominator=2,
        accuracy=2,
    )
    assert reproduced_order(stencil) == 1
    assert truncation_order(stencil) == 2


def test_stencils_are_immutable():
    """Tests that the tabulated stencils cannot be modified."""
    with pytest.raises(AttributeError):
        STENCILS[1].denominator = 1

"""Tests for mathkit.compare.comparator."""

import dataclasses
import logging
import math

import numpy as np
import pytest

from mathkit.compare import (
    DEFAULT_TOLERANCE,
    FloatComparator,
    RelationalSet,
    make_float_comparator,
    make_relational_set,
)
from mathkit.exceptions import InvalidInputError


def test_default_tolerance_is_sqrt_machine_epsilon():
    """Tests that the default tolerance is close to sqrt(eps) for doubles."""
    assert make_float_comparator().tolerance == DEFAULT_TOLERANCE
    assert DEFAULT_TOLERANCE == pytest.approx(math.sqrt(np.finfo(float).eps), rel=1e-2)


def test_default_comparator_treats_close_values_as_equal():
    """Tests that sqrt(2) compares equal to a ten-digit approximation."""
    fltcmp = make_float_comparator()
    assert fltcmp(math.sqrt(2), 1.414213562) == 0


@pytest.mark.parametrize(
    "x, y, expected",
    [
        (1.0, 1.2, -1),
        (1.2, 1.0, 1),
        (1.0, 1.05, 0),
        (1.05, 1.0, 0),
        (1.0, 1.1, 0),
    ],
)
def test_three_way_comparison_with_tolerance(x, y, expected):
    """Tests the -1/0/1 band check around the tolerance."""
    fltcmp = make_float_comparator(0.1 + 1e-12)
    assert fltcmp(x, y) == expected


def test_equality_is_not_transitive():
    """Tests the documented non-transitivity of the band check."""
    fltcmp = make_float_comparator(0.1)
    assert fltcmp(0.0, 0.08) == 0
    assert fltcmp(0.08, 0.16) == 0
    assert fltcmp(0.0, 0.16) == -1


def test_comparator_is_immutable():
    """Tests that the tolerance cannot be changed after construction."""
    fltcmp = make_float_comparator(1e-6)
    with pytest.raises(dataclasses.FrozenInstanceError):
        fltcmp.tolerance = 1.0


def test_negative_tolerance_raises():
    """Tests that a negative tolerance is invalid input."""
    with pytest.raises(InvalidInputError):
        make_float_comparator(-1e-3)
    with pytest.raises(InvalidInputError):
        make_relational_set(-1.0)
    with pytest.raises(InvalidInputError):
        FloatComparator(-0.5)


def test_zero_tolerance_logs_warning(caplog):
    """Tests that a zero tolerance is accepted but logged."""
    with caplog.at_level(logging.WARNING, logger="mathkit"):
        fltcmp = make_float_comparator(0)
    assert "zero tolerance" in caplog.text
    assert fltcmp(1.0, 1.0) == 0
    assert fltcmp(1.0, 1.0 + 1e-15) == -1


def test_relational_set_fields_and_order():
    """Tests that the relational set unpacks as eq, ne, gt, ge, lt, le."""
    rel = make_relational_set(1e-3)
    assert isinstance(rel, RelationalSet)
    eq, ne, gt, ge, lt, le = rel
    assert eq is rel.eq and le is rel.le

    assert eq(1.0, 1.0005) and not ne(1.0, 1.0005)
    assert ge(1.0, 1.0005) and le(1.0, 1.0005)
    assert not gt(1.0, 1.0005) and not lt(1.0, 1.0005)

    assert gt(2.0, 1.0) and ge(2.0, 1.0) and ne(2.0, 1.0)
    assert lt(1.0, 2.0) and le(1.0, 2.0) and not eq(1.0, 2.0)


def test_relational_from_existing_comparator():
    """Tests that FloatComparator.relational shares the comparator's tolerance."""
    rel = FloatComparator(0.5).relational()
    assert rel.eq(1.0, 1.4)
    assert rel.lt(1.0, 1.6)


@pytest.mark.parametrize("tol", [0.0, 1e-12, DEFAULT_TOLERANCE, 0.25])
def test_exactly_one_of_eq_gt_lt_holds(rng, tol):
    """Tests that eq, gt and lt partition every pair of finite values."""
    eq, ne, gt, ge, lt, le = make_relational_set(tol)
    xs = rng.normal(scale=0.5, size=200)
    ys = np.concatenate([xs[:50], xs[50:] + rng.normal(scale=tol + 1e-9, size=150)])
    for x, y in zip(xs, ys):
        assert eq(x, x)
        assert eq(x, y) + gt(x, y) + lt(x, y) == 1
        assert ne(x, y) == (not eq(x, y))
        assert ge(x, y) == (gt(x, y) or eq(x, y))
        assert le(x, y) == (lt(x, y) or eq(x, y))

"""Tests for mathkit.polynomial.calculus."""

from fractions import Fraction

import pytest
from numpy.testing import assert_allclose

from mathkit.polynomial import differentiate, dx_evaluate, evaluate_one, integrate


def test_differentiate_known_value():
    """Tests d/dx (1 + 2x + 4x^2 + 8x^3) = 2 + 8x + 24x^2."""
    assert differentiate([1, 2, 4, 8]) == [2, 8, 24]


@pytest.mark.parametrize("p", [[], [5], [5, 3]])
def test_differentiate_low_degree_is_empty(p):
    """Tests that degree 0 and 1 polynomials give an empty list."""
    assert differentiate(p) == []


def test_differentiate_does_not_modify_input():
    """Tests that the input list is left untouched."""
    p = [1, 2, 3]
    differentiate(p)
    assert p == [1, 2, 3]


def test_integrate_known_value():
    """Tests the antiderivative of 2 + 8x + 24x^2."""
    assert integrate([2, 8, 24]) == [0, 2, 4, 8]


def test_integrate_empty_is_zero():
    """Tests that the antiderivative of an empty list is [0]."""
    assert integrate([]) == [0]


def test_integrate_constant_term_is_zero():
    """Tests that the integration constant is always zero."""
    assert integrate([3])[0] == 0
    assert integrate([3]) == [0, 3]


def test_integrate_fractions_exact():
    """Tests exact antiderivative coefficients for Fractions."""
    assert integrate([Fraction(1), Fraction(1), Fraction(1)]) == [
        0,
        Fraction(1),
        Fraction(1, 2),
        Fraction(1, 3),
    ]


def test_differentiate_inverts_integrate(rng):
    """Tests that differentiate(integrate(p)) restores p for degree >= 1."""
    for _ in range(10):
        p = list(rng.normal(size=rng.integers(2, 9)))
        assert_allclose(differentiate(integrate(p)), p, rtol=1e-12)


def test_derivative_matches_dx_evaluate(rng):
    """Tests differentiate against the derivatives from dx_evaluate."""
    p = list(rng.normal(size=6))
    for x in rng.uniform(-1.0, 1.0, size=5):
        _, dy, d2y = dx_evaluate(p, x)
        assert evaluate_one(differentiate(p), x) == pytest.approx(dy)
        assert evaluate_one(differentiate(differentiate(p)), x) == pytest.approx(d2y)

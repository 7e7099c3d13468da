"""Derivative and antiderivative of coefficient lists."""

from __future__ import annotations

from mathkit.utils.types import Coefficients, Polynomial
from mathkit.utils.validate import validate_coefficients

__all__ = [
    "differentiate",
    "integrate",
]


def differentiate(coefficients: Coefficients) -> Polynomial:
    """Returns the derivative of a polynomial.

    The constant term is dropped and the coefficient of ``x**i`` becomes
    ``i * c_i`` at position ``i - 1``.

    Polynomials of degree 0 or 1 (and the empty list) give an empty list;
    a linear polynomial is not reduced to its constant slope.

    Args:
        coefficients: Coefficients ordered from lowest to highest degree.

    Returns:
        Coefficients of the derivative.
    """
    coeffs = validate_coefficients(coefficients)
    if len(coeffs) <= 2:
        return []
    return [i * coeffs[i] for i in range(1, len(coeffs))]


def integrate(coefficients: Coefficients) -> Polynomial:
    """Returns the antiderivative of a polynomial.

    The coefficient of ``x**k`` becomes the coefficient of ``x**(k + 1)``
    divided by ``k + 1``. The constant of integration is always zero; add
    your own if a different one is needed.

    Args:
        coefficients: Coefficients ordered from lowest to highest degree.

    Returns:
        Coefficients of the antiderivative, ``[0]`` for an empty input.
    """
    coeffs = validate_coefficients(coefficients)
    if not coeffs:
        return [0]
    return [0] + [c / (k + 1) for k, c in enumerate(coeffs)]

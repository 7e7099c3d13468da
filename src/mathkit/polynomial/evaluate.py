"""Polynomial evaluation with Horner's method."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from mathkit.exceptions import InvalidInputError
from mathkit.utils.types import Coefficients, Scalar
from mathkit.utils.validate import validate_coefficients

__all__ = [
    "evaluate",
    "evaluate_one",
    "evaluate_many",
    "dx_evaluate",
]


def _horner(coeffs: list, x: Scalar) -> Scalar:
    result = coeffs[-1]
    for c in reversed(coeffs[:-1]):
        result = result * x + c
    return result


def evaluate_one(coefficients: Coefficients, x: Scalar) -> Scalar:
    """Evaluates a polynomial at a single point using Horner's method.

    The leading coefficient seeds the accumulator, and each lower coefficient
    is folded in with ``acc = acc * x + c``.

    Args:
        coefficients: Coefficients ordered from lowest to highest degree,
            e.g. ``[1, 2, 4, 8]`` for ``1 + 2x + 4x**2 + 8x**3``.
        x: Evaluation point.

    Returns:
        The value of the polynomial at ``x``.

    Raises:
        InvalidInputError: If ``coefficients`` is empty.
    """
    coeffs = validate_coefficients(coefficients, allow_empty=False)
    return _horner(coeffs, x)


def evaluate_many(coefficients: Coefficients, xs: Sequence[Scalar]) -> list:
    """Evaluates a polynomial at each point of ``xs``.

    Each point gets its own Horner evaluation; the results come back in the
    order of ``xs``.

    Args:
        coefficients: Coefficients ordered from lowest to highest degree.
        xs: One-dimensional sequence of evaluation points.

    Returns:
        A list of values with the same length as ``xs``.

    Raises:
        InvalidInputError: If ``coefficients`` is empty or ``xs`` is not
            one-dimensional.
    """
    coeffs = validate_coefficients(coefficients, allow_empty=False)
    if np.ndim(xs) != 1:
        raise InvalidInputError("xs must be a one-dimensional sequence of points.")
    return [_horner(coeffs, x) for x in xs]


def evaluate(coefficients: Coefficients, xs: Scalar | Sequence[Scalar]) -> Scalar | list:
    """Evaluates a polynomial at a scalar point or at a sequence of points.

    Dispatches on the type of ``xs``: a zero-dimensional input gives a single
    value as :func:`evaluate_one`, anything else gives a list as
    :func:`evaluate_many`.
    """
    if np.ndim(xs) == 0:
        return evaluate_one(coefficients, xs)
    return evaluate_many(coefficients, xs)


def dx_evaluate(coefficients: Coefficients, x: Scalar) -> tuple[Scalar, Scalar, Scalar]:
    """Evaluates a polynomial and its first two derivatives at ``x``.

    All three values come out of a single Horner pass.

    Args:
        coefficients: Coefficients ordered from lowest to highest degree.
        x: Evaluation point.

    Returns:
        Tuple ``(p(x), p'(x), p''(x))``.

    Raises:
        InvalidInputError: If ``coefficients`` is empty.
    """
    coeffs = validate_coefficients(coefficients, allow_empty=False)

    y = coeffs[-1]
    dy = 0
    d2y = 0
    for c in reversed(coeffs[:-1]):
        d2y = d2y * x + dy
        dy = dy * x + y
        y = y * x + c

    return y, dy, 2 * d2y

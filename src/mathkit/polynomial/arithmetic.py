"""Addition, subtraction and multiplication of coefficient lists.

Coefficient lists run from low order to high, e.g. ``1 + 2x + 4x**2 + 8x**3``
is ``[1, 2, 4, 8]``. Leading (high-degree) zeros are left in place; use
:func:`trim_polynomial` when they matter.
"""

from __future__ import annotations

from mathkit.logger import mathkit_logger
from mathkit.utils.types import Coefficients, Polynomial
from mathkit.utils.validate import validate_coefficients, validate_same_length

__all__ = [
    "add_polynomials",
    "sub_polynomials",
    "multiply_polynomials",
    "negate_polynomial",
    "trim_polynomial",
]


def add_polynomials(
    a: Coefficients,
    b: Coefficients,
    *,
    strict_length: bool = False,
) -> Polynomial:
    """Adds two coefficient lists as polynomials.

    The shorter list is treated as if padded with zeros at the high-degree
    end, so the excess terms of the longer list are carried through.

    Args:
        a: First polynomial.
        b: Second polynomial.
        strict_length: If True, refuse operands of different lengths.

    Returns:
        Coefficients of ``a + b`` with length ``max(len(a), len(b))``.

    Raises:
        DimensionMismatchError: If ``strict_length`` is set and the lengths differ.
    """
    av = validate_coefficients(a, name="a")
    bv = validate_coefficients(b, name="b")
    if strict_length:
        validate_same_length(av, bv)

    n = min(len(av), len(bv))
    result = [av[i] + bv[i] for i in range(n)]
    result.extend(av[n:] if len(av) > n else bv[n:])
    return result


def sub_polynomials(
    a: Coefficients,
    b: Coefficients,
    *,
    strict_length: bool = False,
) -> Polynomial:
    """Subtracts coefficient list ``b`` from ``a``.

    Excess high-degree terms of ``a`` are carried through, excess terms of
    ``b`` are negated.

    Args:
        a: Polynomial to subtract from.
        b: Polynomial to subtract.
        strict_length: If True, refuse operands of different lengths.

    Returns:
        Coefficients of ``a - b`` with length ``max(len(a), len(b))``.

    Raises:
        DimensionMismatchError: If ``strict_length`` is set and the lengths differ.
    """
    av = validate_coefficients(a, name="a")
    bv = validate_coefficients(b, name="b")
    if strict_length:
        validate_same_length(av, bv)

    n = min(len(av), len(bv))
    result = [av[i] - bv[i] for i in range(n)]
    if len(av) > n:
        result.extend(av[n:])
    else:
        result.extend(-c for c in bv[n:])
    return result


def multiply_polynomials(a: Coefficients, b: Coefficients) -> Polynomial:
    """Multiplies two coefficient lists as polynomials.

    Args:
        a: First polynomial.
        b: Second polynomial.

    Returns:
        Coefficients of ``a * b`` with length ``len(a) + len(b) - 1``, or an
        empty list if either operand is empty.
    """
    av = validate_coefficients(a, name="a")
    bv = validate_coefficients(b, name="b")
    if not av or not bv:
        return []

    result = [0] * (len(av) + len(bv) - 1)
    for i, ca in enumerate(av):
        for j, cb in enumerate(bv):
            result[i + j] = result[i + j] + ca * cb
    return result


def negate_polynomial(p: Coefficients) -> Polynomial:
    """Returns the coefficients of ``-p``."""
    return [-c for c in validate_coefficients(p, name="p")]


def trim_polynomial(p: Coefficients) -> Polynomial:
    """Removes zero coefficients from the high-degree end of ``p``.

    An empty or all-zero input gives ``[0]``, so the result always has a
    leading term.
    """
    coeffs = validate_coefficients(p, name="p")
    end = len(coeffs)
    while end > 0 and coeffs[end - 1] == 0:
        end -= 1

    if end < len(coeffs):
        mathkit_logger.debug(
            "Trimmed %d leading zero coefficient(s).", len(coeffs) - end
        )
    return coeffs[:end] if end > 0 else [0]

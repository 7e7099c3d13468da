"""Validation utilities for MathKit."""

from __future__ import annotations

from typing import Any

import numpy as np

from mathkit.exceptions import DimensionMismatchError, InvalidInputError
from mathkit.utils.types import Coefficients, Polynomial

__all__ = [
    "validate_coefficients",
    "validate_tolerance",
    "validate_same_length",
]


def validate_coefficients(
    coefficients: Coefficients,
    *,
    name: str = "coefficients",
    allow_empty: bool = True,
) -> Polynomial:
    """Validates a coefficient sequence and returns it as a new list.

    The returned list is a shallow copy, so callers may modify it in place
    without touching the input. Element types are kept as given, which lets
    integer, ``Fraction`` and ``Decimal`` coefficients pass through untouched.

    Args:
        coefficients: One-dimensional sequence of coefficients, lowest degree first.
        name: Name used in error messages.
        allow_empty: Whether an empty sequence is acceptable.

    Returns:
        The coefficients as a list.

    Raises:
        InvalidInputError: If the input is not one-dimensional, or is empty
            while ``allow_empty`` is False.
    """
    if coefficients is None or np.ndim(coefficients) != 1:
        raise InvalidInputError(f"{name} must be a one-dimensional sequence.")
    coeffs = list(coefficients)
    if not allow_empty and len(coeffs) == 0:
        raise InvalidInputError(f"{name} must contain at least one coefficient.")
    return coeffs


def validate_tolerance(tolerance: Any) -> Any:
    """Checks that a comparison tolerance is a non-negative number.

    Args:
        tolerance: Width of the equality window.

    Returns:
        The tolerance, unchanged.

    Raises:
        InvalidInputError: If the tolerance is negative or NaN.
    """
    if not tolerance >= 0:
        raise InvalidInputError(f"tolerance must be non-negative; got {tolerance!r}.")
    return tolerance


def validate_same_length(a: Polynomial, b: Polynomial) -> None:
    """Raises if two coefficient lists differ in length."""
    if len(a) != len(b):
        raise DimensionMismatchError(
            f"operands must have the same length; got {len(a)} and {len(b)}."
        )

"""Numerical utilities.

Each helper accepts either a scalar or an array-like. Scalars are handled with
plain Python arithmetic so that ``int``, ``Fraction`` and ``Decimal`` values
keep their type; array-likes are converted with :func:`numpy.asarray` and the
result is a NumPy array of the same shape and order.
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np
from numpy.typing import ArrayLike

from mathkit.exceptions import InvalidInputError
from mathkit.utils.types import Array, IntArray, Scalar

__all__ = [
    "sign",
    "copysign_to",
    "log10",
]


def _is_scalar(x: Any) -> bool:
    return np.ndim(x) == 0


def sign(x: Scalar | ArrayLike) -> int | IntArray:
    """Returns -1, 0 or 1 according to the sign of ``x``.

    NaN has no sign and maps to 0.

    Args:
        x: A scalar or an array-like of scalars.

    Returns:
        An ``int`` for scalar input, otherwise an integer array with the
        same shape as ``x``.
    """
    if _is_scalar(x):
        if x < 0:
            return -1
        return 1 if x > 0 else 0
    arr = np.asarray(x)
    return np.where(arr < 0, -1, np.where(arr > 0, 1, 0))


def copysign_to(
    magnitude: Scalar | ArrayLike,
    sign_source: Scalar | ArrayLike | None = None,
) -> Any:
    """Applies the sign of ``sign_source`` to the magnitude of ``magnitude``.

    Zero counts as positive, so ``copysign_to(-12, 0) == 12``. With a single
    argument the function returns -1 if ``magnitude`` is negative and 1
    otherwise.

    Array-like arguments are broadcast against each other.

    Args:
        magnitude: Value(s) whose absolute value is used.
        sign_source: Value(s) whose sign is applied. Optional.

    Returns:
        A scalar when all arguments are scalars, otherwise a NumPy array.
    """
    if sign_source is None:
        if _is_scalar(magnitude):
            return -1 if magnitude < 0 else 1
        return np.where(np.asarray(magnitude) < 0, -1, 1)

    if _is_scalar(magnitude) and _is_scalar(sign_source):
        return -abs(magnitude) if sign_source < 0 else abs(magnitude)

    m = np.abs(np.asarray(magnitude))
    return np.where(np.asarray(sign_source) < 0, -m, m)


def log10(x: Scalar | ArrayLike) -> float | Array:
    """Computes the base-ten logarithm of ``x``.

    Args:
        x: A positive scalar or an array-like of positive values.

    Returns:
        A ``float`` for scalar input, otherwise a float array of the same shape.

    Raises:
        InvalidInputError: If any value is not strictly positive.
    """
    if _is_scalar(x):
        if not x > 0:
            raise InvalidInputError(f"log10 requires a positive argument; got {x!r}.")
        return math.log10(x)

    arr = np.asarray(x, dtype=float)
    if not np.all(arr > 0):
        raise InvalidInputError("log10 requires all values to be positive.")
    return np.log10(arr)

"""Exceptions raised by MathKit."""

__all__ = [
    "MathKitError",
    "InvalidInputError",
    "DimensionMismatchError",
]


class MathKitError(Exception):
    """Base class for all MathKit errors."""


class InvalidInputError(MathKitError, ValueError):
    """Raises when an input cannot be used by the requested operation.

    Examples are an empty coefficient sequence where a leading term is
    required, a divisor with a zero leading coefficient, or a negative
    tolerance.
    """


class DimensionMismatchError(MathKitError, ValueError):
    """Raises when a strict-length operation receives operands of different lengths."""

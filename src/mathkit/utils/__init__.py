"""Utility functions for MathKit package."""

from .numerics import copysign_to, log10, sign

__all__ = [
    "sign",
    "copysign_to",
    "log10",
]

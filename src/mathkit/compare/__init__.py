"""Comparison functions with a configurable tolerance."""

from .comparator import (
    DEFAULT_TOLERANCE,
    FloatComparator,
    RelationalSet,
    make_float_comparator,
    make_relational_set,
)

__all__ = [
    "DEFAULT_TOLERANCE",
    "FloatComparator",
    "RelationalSet",
    "make_float_comparator",
    "make_relational_set",
]

"""Tolerance-bounded comparison of floating point values.

Exact comparison of floating point numbers is fragile, so this module builds
comparison functions around a tolerance chosen once by the caller and reused
from then on.

Typical usage example:

>>> from mathkit.compare import make_float_comparator, make_relational_set
>>> fltcmp = make_float_comparator(1.0e-7)
>>> fltcmp(0.1 + 0.2, 0.3)
0
>>> eq, ne, gt, ge, lt, le = make_relational_set(1.5e-5)
>>> gt(1.0, 0.99999)
False
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, NamedTuple

from mathkit.logger import mathkit_logger
from mathkit.utils.types import Scalar
from mathkit.utils.validate import validate_tolerance

__all__ = [
    "DEFAULT_TOLERANCE",
    "FloatComparator",
    "RelationalSet",
    "make_float_comparator",
    "make_relational_set",
]

#: Roughly the square root of double precision machine epsilon.
DEFAULT_TOLERANCE = 1.49e-8

Predicate = Callable[[Scalar, Scalar], bool]


class RelationalSet(NamedTuple):
    """Tolerance-aware replacements for ``==``, ``!=``, ``>``, ``>=``, ``<``, ``<=``.

    The tuple unpacks in that order, so callers interested only in some of
    the operators can write ``_, ne, *_ = make_relational_set()``.
    """

    eq: Predicate
    ne: Predicate
    gt: Predicate
    ge: Predicate
    lt: Predicate
    le: Predicate


@dataclass(frozen=True)
class FloatComparator:
    """Three-way comparison with a fixed tolerance.

    Calling the comparator returns -1 if ``x + tolerance < y``, 1 if
    ``x - tolerance > y`` and 0 otherwise.

    The band is checked on each side separately rather than as
    ``abs(x - y) <= tolerance``. Equality is therefore not transitive: with a
    tolerance of 0.1, 0.0 equals 0.08 and 0.08 equals 0.16, yet 0.0 is less
    than 0.16. Pick a tolerance that is small relative to the gaps between
    the values being compared.

    Attributes:
        tolerance: Half-width of the window in which two values compare equal.
    """

    tolerance: Scalar = DEFAULT_TOLERANCE

    def __post_init__(self):
        validate_tolerance(self.tolerance)

    def __call__(self, x: Scalar, y: Scalar) -> int:
        if x + self.tolerance < y:
            return -1
        if x - self.tolerance > y:
            return 1
        return 0

    def relational(self) -> RelationalSet:
        """Returns the six relational predicates sharing this comparator."""
        return RelationalSet(
            eq=lambda x, y: self(x, y) == 0,
            ne=lambda x, y: self(x, y) != 0,
            gt=lambda x, y: self(x, y) > 0,
            ge=lambda x, y: self(x, y) >= 0,
            lt=lambda x, y: self(x, y) < 0,
            le=lambda x, y: self(x, y) <= 0,
        )


def make_float_comparator(tolerance: Scalar | None = None) -> FloatComparator:
    """Builds a three-way comparison function using ``tolerance``.

    Args:
        tolerance: Non-negative width of the equality window. Defaults to
            :data:`DEFAULT_TOLERANCE`.

    Returns:
        A :class:`FloatComparator` returning -1, 0 or 1.

    Raises:
        InvalidInputError: If ``tolerance`` is negative.
    """
    if tolerance is None:
        tolerance = DEFAULT_TOLERANCE
    elif tolerance == 0:
        mathkit_logger.warning(
            "Comparator built with zero tolerance; comparisons will be exact."
        )
    return FloatComparator(tolerance)


def make_relational_set(tolerance: Scalar | None = None) -> RelationalSet:
    """Builds ``eq, ne, gt, ge, lt, le`` predicates sharing one tolerance.

    All six predicates are composed from a single :class:`FloatComparator`,
    so for any pair of finite values exactly one of ``eq``, ``gt`` and ``lt``
    holds.

    Args:
        tolerance: Non-negative width of the equality window. Defaults to
            :data:`DEFAULT_TOLERANCE`.

    Returns:
        A :class:`RelationalSet` of boolean predicates.
    """
    return make_float_comparator(tolerance).relational()

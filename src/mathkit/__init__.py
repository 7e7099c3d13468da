"""Provides all mathkit functions."""

from importlib.metadata import PackageNotFoundError, version

from mathkit.compare import (
    DEFAULT_TOLERANCE,
    FloatComparator,
    RelationalSet,
    make_float_comparator,
    make_relational_set,
)
from mathkit.exceptions import DimensionMismatchError, InvalidInputError, MathKitError
from mathkit.polynomial import (
    DivisionPolicy,
    add_polynomials,
    differentiate,
    divide_polynomials,
    dx_evaluate,
    evaluate,
    evaluate_many,
    evaluate_one,
    integrate,
    multiply_polynomials,
    negate_polynomial,
    sub_polynomials,
    trim_polynomial,
)
from mathkit.polynomial_kit import PolynomialKit
from mathkit.utils.numerics import copysign_to, log10, sign

try:
    __version__ = version("mathkit")
except PackageNotFoundError:
    pass

PolynomialKit.__module__ = "mathkit"

__all__ = [
    "DEFAULT_TOLERANCE",
    "DimensionMismatchError",
    "DivisionPolicy",
    "FloatComparator",
    "InvalidInputError",
    "MathKitError",
    "PolynomialKit",
    "RelationalSet",
    "add_polynomials",
    "copysign_to",
    "differentiate",
    "divide_polynomials",
    "dx_evaluate",
    "evaluate",
    "evaluate_many",
    "evaluate_one",
    "integrate",
    "log10",
    "make_float_comparator",
    "make_relational_set",
    "multiply_polynomials",
    "negate_polynomial",
    "sign",
    "sub_polynomials",
    "trim_polynomial",
]

"""Polynomial operations on plain coefficient lists.

Coefficient lists go from low order to high, so ``1 + 2x + 4x**2 + 8x**3``
is ``[1, 2, 4, 8]``. Inputs are never modified and every function returns a
new list.
"""

from .arithmetic import (
    add_polynomials,
    multiply_polynomials,
    negate_polynomial,
    sub_polynomials,
    trim_polynomial,
)
from .calculus import differentiate, integrate
from .division import DivisionPolicy, divide_polynomials
from .evaluate import dx_evaluate, evaluate, evaluate_many, evaluate_one

__all__ = [
    "DivisionPolicy",
    "add_polynomials",
    "differentiate",
    "divide_polynomials",
    "dx_evaluate",
    "evaluate",
    "evaluate_many",
    "evaluate_one",
    "integrate",
    "multiply_polynomials",
    "negate_polynomial",
    "sub_polynomials",
    "trim_polynomial",
]

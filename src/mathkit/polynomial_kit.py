"""Provides the PolynomialKit class.

A light wrapper around the polynomial helpers that holds one coefficient list
and exposes evaluation, arithmetic and calculus as methods.

Typical usage examples:

>>> from mathkit.polynomial_kit import PolynomialKit
>>>
>>> p = PolynomialKit([1, 2, 4, 8])  # 1 + 2x + 4x^2 + 8x^3
>>> p.evaluate_one(2)
85
>>> p.add([1, 1]).coefficients
[2, 3, 4, 8]
>>> q, r = PolynomialKit([-1, 0, 1]).divide([-1, 1])
>>> q.coefficients, r.coefficients
([1.0, 1.0], [0.0])
"""

from __future__ import annotations

from typing import Sequence

from .polynomial import (
    DivisionPolicy,
    add_polynomials,
    differentiate,
    divide_polynomials,
    dx_evaluate,
    evaluate_many,
    evaluate_one,
    integrate,
    multiply_polynomials,
    sub_polynomials,
)
from .utils.types import Coefficients, Scalar
from .utils.validate import validate_coefficients


class PolynomialKit:
    """Provides access to the polynomial operations for one coefficient list."""

    def __init__(
        self,
        coefficients: Coefficients,
        *,
        division_policy: DivisionPolicy = DivisionPolicy.RAW,
    ):
        """Initialise with coefficients and a division policy.

        Args:
            coefficients: Coefficients ordered from lowest to highest degree.
                A copy is stored.
            division_policy: Policy used by :meth:`divide`. Results of binary
                operations inherit it.
        """
        self.coefficients = validate_coefficients(coefficients)
        self.division_policy = division_policy

    def __repr__(self) -> str:
        return f"PolynomialKit({self.coefficients!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PolynomialKit):
            return NotImplemented
        return self.coefficients == other.coefficients

    def __len__(self) -> int:
        return len(self.coefficients)

    @property
    def degree(self) -> int:
        """Degree as ``len(coefficients) - 1``; -1 for an empty list."""
        return len(self.coefficients) - 1

    def _wrap(self, coefficients: Coefficients) -> PolynomialKit:
        return PolynomialKit(coefficients, division_policy=self.division_policy)

    @staticmethod
    def _coeffs(other: PolynomialKit | Coefficients) -> Coefficients:
        return other.coefficients if isinstance(other, PolynomialKit) else other

    def evaluate_one(self, x: Scalar) -> Scalar:
        """Returns the value of the polynomial at ``x``."""
        return evaluate_one(self.coefficients, x)

    def evaluate_many(self, xs: Sequence[Scalar]) -> list:
        """Returns the values of the polynomial at each point of ``xs``."""
        return evaluate_many(self.coefficients, xs)

    def dx_evaluate(self, x: Scalar) -> tuple[Scalar, Scalar, Scalar]:
        """Returns the value and first two derivatives at ``x``."""
        return dx_evaluate(self.coefficients, x)

    def add(self, other: PolynomialKit | Coefficients) -> PolynomialKit:
        return self._wrap(add_polynomials(self.coefficients, self._coeffs(other)))

    def sub(self, other: PolynomialKit | Coefficients) -> PolynomialKit:
        return self._wrap(sub_polynomials(self.coefficients, self._coeffs(other)))

    def multiply(self, other: PolynomialKit | Coefficients) -> PolynomialKit:
        return self._wrap(multiply_polynomials(self.coefficients, self._coeffs(other)))

    def divide(
        self, divisor: PolynomialKit | Coefficients
    ) -> tuple[PolynomialKit, PolynomialKit]:
        """Returns ``(quotient, remainder)`` under this kit's division policy."""
        quotient, remainder = divide_polynomials(
            self.coefficients, self._coeffs(divisor), policy=self.division_policy
        )
        return self._wrap(quotient), self._wrap(remainder)

    def derivative(self) -> PolynomialKit:
        return self._wrap(differentiate(self.coefficients))

    def antiderivative(self) -> PolynomialKit:
        return self._wrap(integrate(self.coefficients))

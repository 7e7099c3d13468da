"""Synthetic division of coefficient lists."""

from __future__ import annotations

from enum import Enum, auto

from mathkit.exceptions import InvalidInputError
from mathkit.logger import mathkit_logger
from mathkit.polynomial.arithmetic import trim_polynomial
from mathkit.utils.types import Coefficients, Polynomial
from mathkit.utils.validate import validate_coefficients

__all__ = [
    "DivisionPolicy",
    "divide_polynomials",
]


class DivisionPolicy(Enum):
    """How :func:`divide_polynomials` treats high-degree zero coefficients.

    ``RAW`` divides the lists exactly as given. The remainder always has
    ``degree(divisor)`` coefficients, so dividing by a constant gives an
    empty remainder.

    ``STRICT`` strips high-degree zeros from both inputs first, strips them
    from the remainder afterwards, and never returns an empty remainder: a
    zero remainder is ``[0]``.
    """

    RAW = auto()
    STRICT = auto()


def _strip_high_zeros(coeffs: Polynomial) -> Polynomial:
    end = len(coeffs)
    while end > 0 and coeffs[end - 1] == 0:
        end -= 1
    return coeffs[:end]


def divide_polynomials(
    numerator: Coefficients,
    divisor: Coefficients,
    *,
    policy: DivisionPolicy = DivisionPolicy.RAW,
) -> tuple[Polynomial, Polynomial]:
    """Divides ``numerator`` by ``divisor`` using synthetic division.

    Quotient terms are produced from the highest degree down. Each step takes
    the current leading numerator term, divides it by the divisor's leading
    coefficient, and subtracts that multiple of the divisor from the
    numerator terms below it. The work is done in place on one copy of the
    numerator; what is left of its low end is the remainder.

    If the numerator has a lower degree than the divisor, the quotient is
    ``[0]`` and the remainder is the numerator.

    Args:
        numerator: Dividend coefficients, lowest degree first.
        divisor: Divisor coefficients, lowest degree first.
        policy: Treatment of high-degree zeros, see :class:`DivisionPolicy`.

    Returns:
        Tuple ``(quotient, remainder)``, both lowest degree first.

    Raises:
        InvalidInputError: If the divisor is empty (all zeros under
            ``STRICT``) or its leading coefficient is zero.
    """
    num = validate_coefficients(numerator, name="numerator")
    div = validate_coefficients(divisor, name="divisor")

    if policy is DivisionPolicy.STRICT:
        num = _strip_high_zeros(num)
        div = _strip_high_zeros(div)

    if not div:
        raise InvalidInputError("divisor must contain at least one non-zero coefficient.")

    lead = div[-1]
    if lead == 0:
        raise InvalidInputError(
            "divisor has a zero leading coefficient; trim it or use DivisionPolicy.STRICT."
        )

    d_degree = len(div) - 1
    q_degree = len(num) - 1 - d_degree

    if q_degree < 0:
        mathkit_logger.debug(
            "Numerator degree %d is below divisor degree %d; quotient is zero.",
            len(num) - 1,
            d_degree,
        )
        quotient = [0]
        remainder = num
    else:
        quotient = [0] * (q_degree + 1)
        for j in range(q_degree, -1, -1):
            q = num[j + d_degree] / lead
            quotient[j] = q
            for k in range(d_degree):
                num[j + k] -= q * div[k]
        remainder = num[:d_degree]

    if policy is DivisionPolicy.STRICT:
        remainder = trim_polynomial(remainder)

    return quotient, remainder

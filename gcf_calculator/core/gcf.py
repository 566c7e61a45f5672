"""Greatest common factor computation.

Provides: calculate_gcf, compute
"""

from __future__ import annotations

import logging

from gcf_calculator.core.types import GcfResult, InvalidOperandError

logger = logging.getLogger(__name__)


def _check_operand(name: str, value: object) -> None:
    # bool is an int subclass but never a meaningful operand
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidOperandError(name, value)


def calculate_gcf(a: int, b: int) -> int:
    """
    Return the greatest common factor of two non-negative integers.

    Uses the iterative Euclidean algorithm: (a, b) is replaced with
    (b, a % b) until b reaches zero.

    ``calculate_gcf(0, 0)`` returns 0. The GCF of two zeros is undefined
    mathematically, but 0 is what the algorithm yields and is kept as is.

    Args:
        a: First operand, must be >= 0
        b: Second operand, must be >= 0

    Returns:
        The greatest common factor of a and b

    Raises:
        InvalidOperandError: If either operand is negative or not an int

    Examples:
        >>> calculate_gcf(12, 18)
        6
        >>> calculate_gcf(0, 7)
        7
    """
    _check_operand("a", a)
    _check_operand("b", b)

    while b != 0:
        a, b = b, a % b
    return a


def compute(first: int, second: int) -> GcfResult:
    """Compute the GCF of two operands and wrap it in a GcfResult."""
    gcf = calculate_gcf(first, second)
    logger.debug("gcf(%d, %d) = %d", first, second, gcf)
    return GcfResult(first=first, second=second, gcf=gcf)

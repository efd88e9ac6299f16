"""Number bases, discriminants, polynomial evaluation, roots and triangles."""

from __future__ import annotations

import functools
import math
from collections.abc import Iterable

__all__ = [
    "InvalidBaseError",
    "NegativeValueError",
    "NoEquationError",
    "ImpossibleTriangleError",
    "to_base",
    "analyze_discriminant",
    "evaluate",
    "quadratic_roots",
    "triangle_type",
]


class InvalidBaseError(ValueError):
    """The number base lies outside 2..36."""


class NegativeValueError(ValueError):
    """A negative number was given where a non-negative one is required."""


class NoEquationError(ValueError):
    """Both the quadratic and linear coefficients are zero."""


class ImpossibleTriangleError(ValueError):
    """The side lengths cannot form a triangle."""


_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def to_base(n: int, base: int) -> str:
    """Write a non-negative integer in a base from 2 to 36, lower-case digits."""
    if not 2 <= base <= 36:
        raise InvalidBaseError("the number base must be in the range 2..36")
    if n < 0:
        raise NegativeValueError("the number must be non-negative")
    if n == 0:
        return "0"

    digits = []
    while n:
        n, rem = divmod(n, base)
        digits.append(_DIGITS[rem])
    return "".join(reversed(digits))


def analyze_discriminant(a: float, b: float, c: float) -> tuple[float, int]:
    """Return the discriminant and the number of real roots it implies."""
    d = b * b - 4 * a * c
    if d > 0:
        return d, 2
    if d < 0:
        return d, 0
    return d, 1


def evaluate(coeffs: Iterable[float], x: float) -> float:
    """Evaluate a polynomial given lowest-degree coefficient first."""
    return functools.reduce(
        lambda acc, coef: acc * x + coef, reversed(list(coeffs)), 0.0
    )


def quadratic_roots(a: float, b: float, c: float) -> list[float]:
    """Return the real roots of ``ax^2 + bx + c = 0``.

    With ``a == 0`` the linear root is returned; with ``a == b == 0``
    NoEquationError is raised.
    """
    if a == 0:
        if b == 0:
            raise NoEquationError("no equation given")
        return [-c / b]

    d = b * b - 4 * a * c
    if d < 0:
        return []
    if d == 0:
        return [-b / (2 * a)]

    sqrt_d = math.sqrt(d)
    return [(-b + sqrt_d) / (2 * a), (-b - sqrt_d) / (2 * a)]


def triangle_type(a: float, b: float, c: float) -> str:
    """Classify a triangle as "equilateral", "isosceles" or "scalene"."""
    if a <= 0 or b <= 0 or c <= 0:
        raise ImpossibleTriangleError("impossible triangle")
    if a + b <= c or a + c <= b or b + c <= a:
        raise ImpossibleTriangleError("impossible triangle")

    if a == b == c:
        return "equilateral"
    if a == b or b == c or a == c:
        return "isosceles"
    return "scalene"
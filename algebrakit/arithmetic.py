"""Basic arithmetic, factorials, divisors, powers, square roots and primes."""

from __future__ import annotations

import math

__all__ = [
    "NegativeFactorialError",
    "FactorialOverflowError",
    "NegativeSqrtError",
    "add",
    "subtract",
    "multiply",
    "divide",
    "factorial",
    "factorial_recursive",
    "gcd",
    "lcm",
    "power",
    "sqrt",
    "is_prime",
    "next_prime",
]

_FACTORIAL_LIMIT = 20


class NegativeFactorialError(ValueError):
    """Factorial is not defined for negative numbers."""


class FactorialOverflowError(OverflowError):
    """The factorial would not fit a signed 64-bit integer (n > 20)."""


class NegativeSqrtError(ValueError):
    """Square root of a negative number."""


def add(a: float, b: float) -> float:
    """Return ``a + b``."""
    return a + b


def subtract(a: float, b: float) -> float:
    """Return ``a - b``."""
    return a - b


def multiply(a: float, b: float) -> float:
    """Return ``a * b``."""
    return a * b


def divide(a: float, b: float) -> float:
    """Return ``a / b``; raises ZeroDivisionError when ``b`` is zero."""
    if b == 0:
        raise ZeroDivisionError("division by zero")
    return a / b


def _check_factorial_input(n: int) -> None:
    if n < 0:
        raise NegativeFactorialError("factorial is not defined for negative numbers")
    if n > _FACTORIAL_LIMIT:
        raise FactorialOverflowError("factorial overflows int64 for n > 20")


def factorial(n: int) -> int:
    """Return ``n!`` for 0 <= n <= 20."""
    _check_factorial_input(n)
    return math.prod(range(2, n + 1))


def factorial_recursive(n: int) -> int:
    """Return ``n!`` for 0 <= n <= 20, computed recursively."""
    _check_factorial_input(n)
    if n <= 1:
        return 1
    return n * factorial_recursive(n - 1)


def gcd(a: int, b: int) -> int:
    """Return the non-negative greatest common divisor of ``a`` and ``b``."""
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Return the non-negative least common multiple; 0 if either is 0."""
    if a == 0 or b == 0:
        return 0
    return abs(a // gcd(a, b)) * abs(b)


def power(base: float, exp: int) -> float:
    """Raise ``base`` to an integer power by repeated multiplication.

    Raises ZeroDivisionError for zero raised to a negative power.
    """
    if base == 0 and exp < 0:
        raise ZeroDivisionError("zero cannot be raised to a negative power")
    if exp == 0:
        return 1.0
    if exp < 0:
        positive = power(base, -exp)
        return 1 / positive if positive else math.copysign(math.inf, positive)

    result = 1.0
    for _ in range(exp):
        result *= base
    return result


def sqrt(x: float) -> float:
    """Return the square root of ``x``; raises NegativeSqrtError for x < 0."""
    if x < 0:
        raise NegativeSqrtError("square root of a negative number")
    return math.sqrt(x)


def is_prime(n: int) -> bool:
    """Return True when ``n`` is a prime number."""
    if n < 2:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False
    return all(n % d for d in range(3, math.isqrt(n) + 1, 2))


def next_prime(n: int) -> int:
    """Return the smallest prime strictly greater than ``n``."""
    candidate = n + 1
    if candidate <= 2:
        return 2
    while not is_prime(candidate):
        candidate += 1
    return candidate
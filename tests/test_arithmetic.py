import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algebrakit.arithmetic import (
    FactorialOverflowError,
    NegativeFactorialError,
    NegativeSqrtError,
    add,
    divide,
    factorial,
    factorial_recursive,
    gcd,
    is_prime,
    lcm,
    multiply,
    next_prime,
    power,
    sqrt,
    subtract,
)


def test_add():
    assert add(-2, 2) == 0.0


def test_subtract():
    assert subtract(0, 5) == -5.0


def test_multiply():
    assert multiply(-3, 0) == 0.0


def test_divide():
    assert divide(10, 2) == 5.0


def test_divide_by_zero():
    with pytest.raises(ZeroDivisionError):
        divide(10, 0)


@pytest.mark.parametrize("fn", [factorial, factorial_recursive])
@pytest.mark.parametrize(
    "n, expected",
    [(0, 1), (1, 1), (5, 120), (20, 2432902008176640000)],
)
def test_factorial_values(fn, n, expected):
    assert fn(n) == expected


@pytest.mark.parametrize("fn", [factorial, factorial_recursive])
def test_factorial_negative(fn):
    with pytest.raises(NegativeFactorialError):
        fn(-1)


@pytest.mark.parametrize("fn", [factorial, factorial_recursive])
def test_factorial_overflow(fn):
    with pytest.raises(FactorialOverflowError):
        fn(21)


@pytest.mark.parametrize("n, expected", [(0, 1), (1, 1), (6, 720)])
def test_factorial(n, expected):
    assert factorial(n) == expected


def test_gcd_zero_operand():
    assert gcd(0, 18) == 18


def test_gcd_same_values():
    assert gcd(21, 21) == 21


def test_gcd_symmetry():
    assert gcd(48, 18) == gcd(18, 48) == 6


def test_gcd_lcm_relation():
    assert gcd(21, 6) * lcm(21, 6) == abs(21 * 6)


def test_gcd_negative():
    assert gcd(-12, 18) == 6


def test_lcm_zero():
    assert lcm(0, 7) == 0


@given(st.integers(-10_000, 10_000), st.integers(-10_000, 10_000))
def test_gcd_lcm_properties(a, b):
    assert gcd(a, b) == gcd(b, a)
    if a and b:
        assert gcd(a, b) * lcm(a, b) == abs(a * b)


def test_power_zero_exponent():
    assert power(7, 0) == 1.0


def test_power_negative_exponent():
    assert abs(power(2, -3) - 0.125) <= 1e-12


def test_power_zero_base():
    assert power(0, 5) == 0.0


def test_power_zero_to_negative_raises():
    with pytest.raises(ZeroDivisionError):
        power(0, -1)


def test_sqrt_accuracy():
    assert abs(sqrt(2) - math.sqrt(2)) < 1e-9


def test_sqrt_negative():
    with pytest.raises(NegativeSqrtError):
        sqrt(-1)


@pytest.mark.parametrize(
    "n, expected",
    [
        (-5, False),
        (0, False),
        (1, False),
        (2, True),
        (3, True),
        (4, False),
        (5, True),
        (7, True),
        (11, True),
        (12, False),
    ],
)
def test_is_prime(n, expected):
    assert is_prime(n) is expected


def test_is_prime_square_of_prime():
    assert is_prime(49) is False


def test_next_prime():
    assert next_prime(10) == 11
    assert next_prime(13) == 17


def test_next_prime_small():
    assert next_prime(-3) == 2
    assert next_prime(2) == 3